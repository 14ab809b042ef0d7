"""Prompt templates and renderers"""

from .chat import HISTORY_WINDOW, build_chat_context, recent_history
from .renderer import (
    PROMPT_TEMPLATES,
    prompt_style_names,
    render_advice_prompt,
    render_learning_path_prompt,
)

__all__ = [
    'HISTORY_WINDOW',
    'PROMPT_TEMPLATES',
    'build_chat_context',
    'prompt_style_names',
    'recent_history',
    'render_advice_prompt',
    'render_learning_path_prompt',
]
