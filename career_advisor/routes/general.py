"""
General routes for the Career Advisor

Page rendering and health checks.
"""

from datetime import datetime, timezone
from quart import Blueprint, jsonify, render_template
from career_advisor.prompts import prompt_style_names
from career_advisor.core.logging import get_logger

logger = get_logger(__name__)

FEATURES = ['chat', 'forms', 'multiple-prompts', 'validation']

# Create general routes blueprint
general_routes = Blueprint('general', __name__)


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with milliseconds and a Z suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@general_routes.route('/')
async def index():
    """Landing page with the advice and learning path forms"""
    return await render_template('index.html', prompt_styles=prompt_style_names())

@general_routes.route('/chat')
async def chat_page():
    """Chat page"""
    return await render_template('chat.html')

@general_routes.route('/health')
async def health_check():
    """Health check endpoint"""
    logger.info("health_check")
    return jsonify({
        'status': 'OK',
        'timestamp': utc_timestamp(),
        'promptStyles': prompt_style_names(),
        'features': FEATURES
    })
