"""
Pydantic models for the form-based advice flow

Field aliases match the camelCase names posted by the landing page form.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class PromptStyle(str, Enum):
    """Prompt template variants, one per tone of advice"""
    STRUCTURED = "structured"
    EXPERT = "expert"
    ANALYTICAL = "analytical"
    CONVERSATIONAL = "conversational"
    DATADRIVEN = "datadriven"

    @classmethod
    def resolve(cls, value) -> "PromptStyle":
        """Return the matching style, falling back to structured"""
        try:
            return cls(value)
        except ValueError:
            return cls.STRUCTURED


class InputVerdict(str, Enum):
    """Outcome of validating free-text interests"""
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    OFF_TOPIC = "off_topic"
    OK = "ok"


class AdviceRequest(BaseModel):
    """
    Request model for the advice form.

    prompt_style is kept as the raw submitted string so the result page can
    echo it back; template selection resolves it separately.
    """
    model_config = ConfigDict(populate_by_name=True)

    interests: str = Field(
        default="",
        description="What the user enjoys, is good at, or is curious about"
    )

    experience: str = Field(
        default="beginner",
        description="Experience level, also used as the expert prompt's career stage"
    )

    location: str = Field(
        default="global",
        description="Location preference"
    )

    prompt_style: str = Field(
        default=PromptStyle.STRUCTURED.value,
        alias="promptStyle",
        description="Name of the prompt template to use"
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value, info: ValidationInfo):
        # JSON null counts as an absent field
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class AdviceResult(BaseModel):
    """Text shown on the result page, tagged with the style that produced it"""
    text: str
    style_tag: str

    @property
    def is_error(self) -> bool:
        return self.style_tag == "error"
