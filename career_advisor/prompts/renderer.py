"""
Template selection and rendering

All functions here are pure: the same fields always give the same prompt.
"""

from typing import Optional

from career_advisor.models.advice import PromptStyle
from career_advisor.models.learning_path import LearningPathRequest
from career_advisor.prompts.advice import (
    ANALYTICAL_TEMPLATE,
    CONVERSATIONAL_TEMPLATE,
    DATADRIVEN_TEMPLATE,
    EXPERT_TEMPLATE,
    STRUCTURED_TEMPLATE,
)
from career_advisor.prompts.learning_path import LEARNING_PATH_TEMPLATE

DEFAULT_EXPERIENCE = "beginner"
DEFAULT_LOCATION = "global"
DEFAULT_CAREER_STAGE = "entry"
DEFAULT_CURRENT_SKILLS = "Starting from basics"
UNSPECIFIED = "not specified"


def _structured(interests: str, experience: Optional[str], location: Optional[str]) -> str:
    return STRUCTURED_TEMPLATE.format(
        interests=interests,
        experience=DEFAULT_EXPERIENCE if experience is None else experience,
        location=DEFAULT_LOCATION if location is None else location,
    )


def _expert(interests: str, experience: Optional[str], location: Optional[str]) -> str:
    # experience doubles as the career stage
    career_stage = DEFAULT_CAREER_STAGE if experience is None else experience
    return EXPERT_TEMPLATE.format(interests=interests, career_stage=career_stage)


def _analytical(interests: str, experience: Optional[str], location: Optional[str]) -> str:
    return ANALYTICAL_TEMPLATE.format(interests=interests)


def _conversational(interests: str, experience: Optional[str], location: Optional[str]) -> str:
    return CONVERSATIONAL_TEMPLATE.format(interests=interests)


def _datadriven(interests: str, experience: Optional[str], location: Optional[str]) -> str:
    return DATADRIVEN_TEMPLATE.format(interests=interests)


PROMPT_TEMPLATES = {
    PromptStyle.STRUCTURED: _structured,
    PromptStyle.EXPERT: _expert,
    PromptStyle.ANALYTICAL: _analytical,
    PromptStyle.CONVERSATIONAL: _conversational,
    PromptStyle.DATADRIVEN: _datadriven,
}


def prompt_style_names() -> list[str]:
    return [style.value for style in PROMPT_TEMPLATES]


def render_advice_prompt(
    style,
    interests: str,
    experience: Optional[str] = None,
    location: Optional[str] = None,
) -> str:
    """
    Render the advice prompt for a style name or PromptStyle.

    Unknown or missing styles render the structured template. Fields left as
    None take each template's own default (beginner/global for structured,
    entry for expert).
    """
    template = PROMPT_TEMPLATES[PromptStyle.resolve(style)]
    return template(interests, experience, location)


def render_learning_path_prompt(request: LearningPathRequest) -> str:
    return LEARNING_PATH_TEMPLATE.format(
        target_career=request.target_career,
        current_skills=request.current_skills or DEFAULT_CURRENT_SKILLS,
        timeline=request.timeline or UNSPECIFIED,
        learning_style=request.learning_style or UNSPECIFIED,
        budget=request.budget or UNSPECIFIED,
    )
