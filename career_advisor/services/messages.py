"""
Canned user-facing messages

Validation guidance and model-failure fallbacks, kept per endpoint because
each page words them differently. map_error is the single lookup used by
every endpoint.
"""

from enum import Enum

from career_advisor.core.errors import ModelErrorKind
from career_advisor.models.advice import InputVerdict


class Endpoint(str, Enum):
    ADVICE = "advice"
    CHAT = "chat"
    LEARNING_PATH = "learning_path"


ERROR_STYLE_TAG = "error"

VALIDATION_MESSAGES = {
    InputVerdict.EMPTY: (
        "🤔 Please tell me about your interests, skills, or what kind of work excites you "
        "so I can provide career guidance!"
    ),
    InputVerdict.TOO_SHORT: (
        "💭 Could you share more details about your interests or career goals? "
        "The more you tell me, the better advice I can give!"
    ),
    InputVerdict.OFF_TOPIC: (
        "👋 Hi there! I'm an AI career advisor, so I'm here to help with career guidance. \n"
        "\n"
        "If you're looking for career advice, try telling me about:\n"
        "- Your interests (e.g., \"I love technology and helping people\")  \n"
        "- Skills you have (e.g., \"I'm good at writing and creative problem solving\")\n"
        "- Fields you're curious about (e.g., \"I'm interested in healthcare and business\")\n"
        "\n"
        "What career topics would you like to explore?"
    ),
}

EMPTY_CHAT_MESSAGE = "🤔 Please share something about your career interests or ask me anything!"
EMPTY_CAREER_MESSAGE = "Please specify what career you're interested in!"

TIMEOUT_MESSAGE = "⌛ The career advisor took too long to respond. Please try again in a moment!"

ERROR_MESSAGES = {
    Endpoint.ADVICE: {
        ModelErrorKind.RATE_LIMITED: "⏰ Too many requests right now. Please wait a moment and try again!",
        ModelErrorKind.BAD_REQUEST: "There was an issue with your request. Please try rephrasing your interests.",
        ModelErrorKind.FORBIDDEN: "API access issue. Please check your API key configuration.",
        ModelErrorKind.TIMEOUT: TIMEOUT_MESSAGE,
        ModelErrorKind.UNKNOWN: "😅 Our career advisor is taking a quick break. Please try again in a moment!",
    },
    Endpoint.CHAT: {
        ModelErrorKind.RATE_LIMITED: "I'm getting too many messages right now. Please wait a moment and try again!",
        ModelErrorKind.TIMEOUT: TIMEOUT_MESSAGE,
        ModelErrorKind.UNKNOWN: "Sorry, I'm having trouble right now. Please try again!",
    },
    Endpoint.LEARNING_PATH: {
        ModelErrorKind.RATE_LIMITED: "Too many requests. Please wait a moment and try again!",
        ModelErrorKind.TIMEOUT: TIMEOUT_MESSAGE,
        ModelErrorKind.UNKNOWN: "Sorry, I couldn't generate your learning path right now. Please try again!",
    },
}


def map_error(kind: ModelErrorKind, endpoint: Endpoint) -> str:
    """Return the endpoint's message for a failure kind, or its generic fallback"""
    messages = ERROR_MESSAGES[Endpoint(endpoint)]
    return messages.get(kind, messages[ModelErrorKind.UNKNOWN])


def validation_message(verdict: InputVerdict) -> str:
    return VALIDATION_MESSAGES[verdict]
