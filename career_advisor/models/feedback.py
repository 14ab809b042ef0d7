"""
Pydantic models for the feedback API

Feedback is logged only, so nothing is validated.
"""

from typing import Any
from pydantic import BaseModel


class FeedbackRequest(BaseModel):
    rating: Any = None
    page: Any = None


class FeedbackResponse(BaseModel):
    success: bool
    message: str
