from .models import Message, Sender
from .session import CLEARED, GREETING, ChatSession

__all__ = ["CLEARED", "GREETING", "ChatSession", "Message", "Sender"]
