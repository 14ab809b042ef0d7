"""
Pydantic models for the learning path API
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LearningPathRequest(BaseModel):
    """Request model for generating a 5-step learning roadmap"""
    model_config = ConfigDict(populate_by_name=True)

    target_career: str = Field(default="", alias="targetCareer")
    current_skills: Optional[str] = Field(default=None, alias="currentSkills")
    timeline: Optional[str] = None
    learning_style: Optional[str] = Field(default=None, alias="learningStyle")
    budget: Optional[str] = None

    @field_validator("target_career", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return "" if value is None else value


class LearningPathResponse(BaseModel):
    """Successful roadmap response"""
    model_config = ConfigDict(populate_by_name=True)

    learning_path: str = Field(..., alias="learningPath")
    error: bool = False
