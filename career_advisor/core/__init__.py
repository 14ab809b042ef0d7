"""Logging and error types"""
