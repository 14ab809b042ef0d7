"""
Advice routes

Form-based career advice rendered as a page, plus a diagnostic endpoint that
compares prompt styles.
"""

from quart import Blueprint, jsonify, render_template, current_app
from career_advisor.models.advice import AdviceRequest
from career_advisor.routes.payload import read_payload
from career_advisor.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TEST_INTERESTS = "web development and design"

advice_routes = Blueprint('advice', __name__)


@advice_routes.route('/advice', methods=['POST'])
async def advice():
    """
    Career advice from the landing page form.

    Form fields:
        interests: free text (required, at least 5 characters)
        experience: experience level, defaults to "beginner"
        location: location preference, defaults to "global"
        promptStyle: structured | expert | analytical | conversational | datadriven

    Returns:
        The result page. Validation and model failures render a canned
        message with promptStyle "error"; the status is always 200.
    """
    data = await read_payload()
    advice_request = AdviceRequest.model_validate(data)

    logger.info("advice_request_received",
                prompt_style=advice_request.prompt_style,
                interests_length=len(advice_request.interests))

    result = await current_app.advisor.advise(advice_request)
    return await render_template('result.html', advice=result.text, promptStyle=result.style_tag)


@advice_routes.route('/test-prompts', methods=['POST'])
async def test_prompts():
    """
    Run one interest string through several prompt styles.

    Request body:
        {"interests": "optional, defaults to web development and design"}

    Returns:
        JSON map of style name to generated text (or "Error: ...")
    """
    data = await read_payload()
    interests = data.get('interests') or DEFAULT_TEST_INTERESTS

    results = await current_app.advisor.compare_prompt_styles(interests)
    return jsonify(results)
