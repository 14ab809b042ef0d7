"""Chat prompt: system preamble plus a short window of history"""

from typing import Sequence

from career_advisor.models.chat import ChatTurn

CHAT_SYSTEM_PREAMBLE = (
    "You are a friendly AI career advisor. Have natural conversations about careers, "
    "provide advice, answer questions, and help users explore their interests. "
    "Be conversational, helpful, and engaging.\n\n"
)

# Number of earlier turns kept in the outbound context
HISTORY_WINDOW = 6


def recent_history(history: Sequence[ChatTurn], window: int = HISTORY_WINDOW) -> list[ChatTurn]:
    """Return the last `window` turns, oldest first"""
    if window <= 0:
        return []
    return list(history[-window:])


def build_chat_context(message: str, history: Sequence[ChatTurn] = ()) -> str:
    context = CHAT_SYSTEM_PREAMBLE

    turns = recent_history(history)
    if turns:
        context += "Previous conversation:\n"
        for turn in turns:
            context += f"{turn.role.value}: {turn.content}\n"
        context += "\n"

    context += f"User: {message}\nAssistant:"
    return context
