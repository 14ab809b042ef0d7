"""Request, response and result models"""

from .advice import AdviceRequest, AdviceResult, InputVerdict, PromptStyle
from .chat import ChatRequest, ChatResponse, ChatRole, ChatTurn
from .feedback import FeedbackRequest, FeedbackResponse
from .generation import GenerationConfig
from .learning_path import LearningPathRequest, LearningPathResponse

__all__ = [
    'AdviceRequest',
    'AdviceResult',
    'ChatRequest',
    'ChatResponse',
    'ChatRole',
    'ChatTurn',
    'FeedbackRequest',
    'FeedbackResponse',
    'GenerationConfig',
    'InputVerdict',
    'LearningPathRequest',
    'LearningPathResponse',
    'PromptStyle',
]
