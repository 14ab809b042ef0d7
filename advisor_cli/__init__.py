"""Terminal chat client for the Career Advisor API"""
