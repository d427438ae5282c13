"""Chat session state."""

import itertools
import logging

from ..errors import SessionBusyError
from ..gateway import ModelGateway
from .models import Message, Sender

logger = logging.getLogger(__name__)

GREETING = (
    "Olá! Sou seu assistente de licitações. Em que posso ajudar hoje? "
    "(Ex: Como comprar 50 lápis? Quais os documentos para um Pregão?)"
)
CLEARED = "Histórico limpo. Como posso ajudar com sua nova consulta?"


class ChatSession:
    """In-memory conversation with the procurement assistant.

    Each question is sent on its own: the model sees only the system
    instruction and the latest message. One request may be in flight at a
    time.
    """

    def __init__(self, gateway: ModelGateway):
        self._gateway = gateway
        self._ids = itertools.count(1)
        self._messages: list[Message] = []
        self._is_loading = False
        self._append(GREETING, Sender.BOT)

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    def _append(self, text: str, sender: Sender) -> Message:
        message = Message(id=str(next(self._ids)), text=text, sender=sender)
        self._messages.append(message)
        return message

    async def send(self, text: str) -> Message | None:
        """Send a question and append both turns.

        Returns:
            The bot reply, or None if ``text`` was blank

        Raises:
            SessionBusyError: If a previous question is still being answered
        """
        if not text.strip():
            return None
        if self._is_loading:
            raise SessionBusyError("Aguarde a resposta anterior")

        self._append(text, Sender.USER)
        self._is_loading = True
        try:
            reply = await self._gateway.send_message(text)
        finally:
            self._is_loading = False
        return self._append(reply, Sender.BOT)

    def clear(self) -> None:
        """Drop the history, leaving a single bot notice."""
        self._messages = []
        self._append(CLEARED, Sender.BOT)
        logger.debug("Chat history cleared")
