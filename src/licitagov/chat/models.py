"""Data models for the chat.

Hides the internal representation of chat messages.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..parsing import ThoughtResponse, split_thought


class Sender(str, Enum):
    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A chat turn. Immutable once appended to the session."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    sender: Sender
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def is_bot(self) -> bool:
        return self.sender is Sender.BOT

    def parsed(self) -> ThoughtResponse:
        """Split bot text into reasoning and answer; user text is shown as-is."""
        if not self.is_bot:
            return ThoughtResponse(thought=None, response=self.text)
        return split_thought(self.text)
