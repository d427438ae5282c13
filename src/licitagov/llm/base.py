from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """Hosted text model behind a single async call.

    Hidden design decisions:
    - Vendor SDK, client setup and credentials
    - Conversion of ``ChatMessage`` lists to the vendor request format
    - Translation of vendor exceptions into ``LLMError`` subclasses

    Usable as an async context manager; ``close()`` runs on exit.
    """

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Run one completion.

        Args:
            messages: Request messages; a ``system`` message is sent as the
                system instruction
            model: Model name, None for the provider default
            temperature: Sampling temperature, None for the model default
            max_tokens: Output token cap
            **kwargs: Vendor-specific generation options

        Raises:
            LLMAuthenticationError: The API key was missing or rejected
            LLMError: Any other provider failure
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying client."""

    @property
    @abstractmethod
    def model(self) -> str:
        """Default model name."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        # httpx may try to close its transport after the loop is gone
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
