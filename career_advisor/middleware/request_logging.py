"""Log every incoming request"""

from quart import request
from career_advisor.core.logging import get_logger

logger = get_logger(__name__)


def register_request_logging(app):
    """Register a before_request hook that logs method and path"""

    @app.before_request
    async def log_request():
        logger.info("request_received", method=request.method, path=request.path)
