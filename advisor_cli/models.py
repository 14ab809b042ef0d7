"""
Pydantic models mirroring API contracts
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


# Request models
class ChatTurn(BaseModel):
    """One earlier message of the conversation"""

    role: str
    content: str


class ChatRequest(BaseModel):
    """Request model for the chat endpoint"""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(min_length=1)
    conversation_history: List[ChatTurn] = Field(default_factory=list, alias="conversationHistory")


class LearningPathRequest(BaseModel):
    """Request model for the learning path endpoint"""

    model_config = ConfigDict(populate_by_name=True)

    target_career: str = Field(min_length=1, alias="targetCareer")
    current_skills: Optional[str] = Field(default=None, alias="currentSkills")
    timeline: Optional[str] = None
    learning_style: Optional[str] = Field(default=None, alias="learningStyle")
    budget: Optional[str] = None


# Response models
class ChatResponse(BaseModel):
    """Response model for the chat endpoint"""

    response: str
    error: bool = False


class LearningPathResponse(BaseModel):
    """
    Response model for the learning path endpoint

    The server sends learningPath on success and response on failure.
    """

    model_config = ConfigDict(populate_by_name=True)

    learning_path: Optional[str] = Field(default=None, alias="learningPath")
    response: Optional[str] = None
    error: bool = False

    @property
    def text(self) -> str:
        return (self.response if self.error else self.learning_path) or ""


class HealthResponse(BaseModel):
    """Response model for the health endpoint"""

    status: str
    timestamp: str
    prompt_styles: List[str] = Field(alias="promptStyles")
    features: List[str]
