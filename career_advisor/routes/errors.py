"""
Error handlers for the Career Advisor

HTTP error handlers that return JSON responses.
"""

from quart import jsonify
from career_advisor.core.logging import get_logger

logger = get_logger(__name__)

AVAILABLE_ROUTES = ['/', '/chat', '/health']

def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(404)
    async def not_found_error(error):
        return jsonify({
            'error': 'Page not found!',
            'message': 'Try visiting / for the main page or /chat for chat mode',
            'availableRoutes': AVAILABLE_ROUTES
        }), 404

    # A known path with the wrong method is still an unmatched route
    @app.errorhandler(405)
    async def method_not_allowed_error(error):
        return await not_found_error(error)

    @app.errorhandler(Exception)
    async def internal_server_error(error):
        logger.error("unhandled_server_error", error=str(error), error_type=type(error).__name__)
        return jsonify({
            'error': 'Something went wrong!',
            'message': 'Please try again later.'
        }), 500
