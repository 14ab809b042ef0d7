"""
Session state management for CLI app
"""
from typing import List
from pydantic import BaseModel, Field
from advisor_cli.models import ChatTurn

# The server only reads the last 6 turns; keep a little more for display
MAX_HISTORY = 20


class SessionState(BaseModel):
    """Tracks the conversation, since the server keeps none"""

    history: List[ChatTurn] = Field(default_factory=list)

    def record_exchange(self, message: str, reply: str):
        """Append a user message and the assistant's reply"""
        self.history.append(ChatTurn(role="user", content=message))
        self.history.append(ChatTurn(role="assistant", content=reply))
        del self.history[:-MAX_HISTORY]

    def clear(self):
        """Forget the conversation"""
        self.history.clear()

    @property
    def turn_count(self) -> int:
        return len(self.history)


# Global state instance
state = SessionState()
