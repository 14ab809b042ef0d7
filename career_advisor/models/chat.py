"""
Pydantic models for chat API

These models validate and structure request/response data.
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    """One earlier message of the conversation, as kept by the client"""
    role: ChatRole
    content: str


class ChatRequest(BaseModel):
    """
    Request model for chat endpoint.

    The server keeps no session, so the client sends its own history.
    """
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(
        default="",
        description="The user's message to send to the LLM"
    )

    conversation_history: List[ChatTurn] = Field(
        default_factory=list,
        alias="conversationHistory",
        description="Earlier turns, oldest first"
    )

    @field_validator("message", "conversation_history", mode="before")
    @classmethod
    def null_as_default(cls, value, info: ValidationInfo):
        # JSON null counts as an absent field
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class ChatResponse(BaseModel):
    """
    Response model for chat endpoint.

    Structures the response data consistently.
    """
    response: str = Field(
        ...,
        description="The LLM's response, or a canned fallback"
    )

    error: bool = Field(
        default=False,
        description="True when response is a fallback message"
    )
