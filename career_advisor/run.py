#!/usr/bin/env python3
"""
Run script for the Career Advisor
"""

from career_advisor.app import create_app
from career_advisor.config.settings import get_settings


def main():
    settings = get_settings()
    app = create_app(settings)
    print(f"🚀 AI Career Advisor running on http://{settings.host}:{settings.port}")
    print(f"📱 Chat available at http://{settings.host}:{settings.port}/chat")
    print(f"🔧 Health check at http://{settings.host}:{settings.port}/health")
    app.run(
        host=settings.host,
        port=settings.port,
        debug=settings.debug
    )


if __name__ == '__main__':
    main()
