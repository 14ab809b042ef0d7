"""Advisor relay, classifier and model invokers"""
