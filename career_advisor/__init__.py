"""
Career Advisor Package

A stateless web relay that turns career questions into prompts for a hosted
text-generation model, and renders or returns the model's reply.
"""

from .app import create_app

__version__ = "1.0.0"

# Export the factory function, not an app instance
__all__ = ['create_app']
