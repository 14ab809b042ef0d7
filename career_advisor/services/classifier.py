"""
Input validation and topic classification for career questions

Pure substring matching, no model involved. Inputs rejected here never reach
the external model.
"""

from typing import Optional

from career_advisor.models.advice import InputVerdict

MIN_INTERESTS_LENGTH = 5
MIN_CAREER_TEXT_LENGTH = 10

CAREER_KEYWORDS = [
    # Career/job words
    'career', 'job', 'work', 'profession', 'occupation', 'employment',
    # Interest indicators
    'interested in', 'love', 'enjoy', 'passionate about', 'good at', 'like to',
    # Skill/field words
    'programming', 'coding', 'design', 'marketing', 'business', 'healthcare',
    'engineering', 'teaching', 'writing', 'art', 'music', 'science', 'finance',
    'technology', 'computer', 'creative', 'analytical', 'helping people',
    # Education/experience
    'studying', 'degree in', 'experience with', 'background in', 'skills in',
]

CASUAL_PHRASES = [
    'how are you', 'hello', 'hi', 'hey', "what's up", 'how do you do',
    'good morning', 'good evening', 'whats up', 'sup', 'yo',
]


def is_career_related(text: str) -> bool:
    """
    Decide whether free text talks about careers.

    A greeting anywhere in the text wins over career keywords, so
    "hi, I love coding" is rejected. Phrases match as plain substrings.
    """
    lowered = text.lower()
    has_career_keywords = any(keyword in lowered for keyword in CAREER_KEYWORDS)
    is_casual = any(phrase in lowered for phrase in CASUAL_PHRASES)
    return has_career_keywords and not is_casual and len(text) > MIN_CAREER_TEXT_LENGTH


def validate_interests(interests: Optional[str]) -> InputVerdict:
    if not interests or not interests.strip():
        return InputVerdict.EMPTY
    if len(interests.strip()) < MIN_INTERESTS_LENGTH:
        return InputVerdict.TOO_SHORT
    if not is_career_related(interests):
        return InputVerdict.OFF_TOPIC
    return InputVerdict.OK
