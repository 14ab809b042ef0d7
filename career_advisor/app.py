"""
Career Advisor Application

A Quart-based relay between career questions and a hosted text-generation model.
"""

from quart import Quart
from dotenv import load_dotenv

from career_advisor.config.settings import Settings, get_settings
from career_advisor.config.llm import initialize_invoker
from career_advisor.core.logging import configure_logging, get_logger
from career_advisor.middleware import register_request_logging
from career_advisor.routes.general import general_routes
from career_advisor.routes.advice import advice_routes
from career_advisor.routes.api import api_routes
from career_advisor.routes.errors import register_error_handlers
from career_advisor.services.advisor_service import AdvisorRelay

# Load environment variables
load_dotenv()

logger = get_logger(__name__)

def create_app(settings: Settings = None, invoker=None):
    """
    Create and configure the app

    Args:
        settings: Settings override, defaults to the environment
        invoker: Model invoker override, defaults to the configured provider
    """
    if settings is None:
        settings = get_settings()

    # Setup logging
    configure_logging(settings)
    logger.info("creating_app")

    app = Quart(__name__)

    # Simple configuration
    app.config['DEBUG'] = settings.debug
    app.config['PROVIDE_AUTOMATIC_OPTIONS'] = True
    app.settings = settings

    logger.info("initializing_model_invoker")
    if invoker is None:
        invoker = initialize_invoker(settings)
    app.advisor = AdvisorRelay(
        invoker,
        timeout=settings.llm_timeout_seconds,
        prompt_test_delay=settings.prompt_test_delay_seconds
    )

    register_request_logging(app)

    logger.info("registering_routes")
    # Register routes
    app.register_blueprint(general_routes)
    app.register_blueprint(advice_routes)
    app.register_blueprint(api_routes)

    # Register error handlers
    register_error_handlers(app)

    logger.info("app_created")
    return app
