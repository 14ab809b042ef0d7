"""
JSON API routes

Chat, learning path and feedback endpoints used by the pages' scripts.
"""

from quart import Blueprint, jsonify, current_app
from career_advisor.models.chat import ChatRequest
from career_advisor.models.feedback import FeedbackRequest, FeedbackResponse
from career_advisor.models.learning_path import LearningPathRequest
from career_advisor.routes.payload import read_payload
from career_advisor.core.logging import get_logger

logger = get_logger(__name__)

api_routes = Blueprint('api', __name__, url_prefix='/api')


@api_routes.route('/chat', methods=['POST'])
async def chat_endpoint():
    """
    Chat endpoint.

    Request body:
        {
            "message": "User's message",
            "conversationHistory": [{"role": "user", "content": "..."}]  # optional
        }

    Returns:
        {"response": "...", "error": false}
    """
    data = await read_payload()
    chat_request = ChatRequest.model_validate(data)

    logger.info("chat_request_received",
                message_length=len(chat_request.message),
                history_turns=len(chat_request.conversation_history))

    reply = await current_app.advisor.chat(chat_request)
    return jsonify(reply.model_dump())


@api_routes.route('/learning-path', methods=['POST'])
async def learning_path_endpoint():
    """
    Learning path endpoint.

    Request body:
        {
            "targetCareer": "Data Scientist",
            "currentSkills": "optional",
            "timeline": "10 hours/week",
            "learningStyle": "hands-on",
            "budget": "free"
        }

    Returns:
        {"learningPath": "...", "error": false} or {"response": "...", "error": true}
    """
    data = await read_payload()
    path_request = LearningPathRequest.model_validate(data)

    logger.info("learning_path_request_received", target_career=path_request.target_career)

    result = await current_app.advisor.learning_path(path_request)
    return jsonify(result.model_dump(by_alias=True))


@api_routes.route('/feedback', methods=['POST'])
async def feedback_endpoint():
    """
    Feedback endpoint. Logged only, nothing is stored.

    Returns:
        {"success": true, "message": "Thank you for your feedback!"}
    """
    try:
        data = await read_payload()
        feedback = FeedbackRequest.model_validate(data)
        logger.info("feedback_received", rating=feedback.rating, page=feedback.page)
        response = FeedbackResponse(success=True, message='Thank you for your feedback!')
    except Exception as e:
        logger.error("feedback_failed", error=str(e))
        response = FeedbackResponse(success=False, message='Error saving feedback')

    return jsonify(response.model_dump())
