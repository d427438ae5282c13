"""Gateway between the application and the hosted model.

Every call resolves to text: either the completion itself or one of the
fixed failure messages in ``models``. Provider exceptions stop here so the
chat and generator sessions only ever have a string to display.
"""

import logging

from ..config import Settings
from ..llm import ChatMessage, LLMAuthenticationError, LLMProvider, single_turn
from ..prompts import get_system_prompt
from .models import (
    CHAT_FAILURES,
    DRAFT_FAILURES,
    FailureKind,
    FailureMessages,
    GatewayRequest,
    HealthStatus,
)

logger = logging.getLogger(__name__)

PING_PROMPT = "Ping"
PING_MAX_TOKENS = 5


class ModelGateway:
    """Send single prompts to the hosted model.

    Hidden design decisions:
    - Which model and temperature each feature uses
    - The system instruction attached to chat messages
    - How provider failures map onto user-facing text

    There is no retry, streaming or cancellation: one request, one answer.
    """

    def __init__(
        self,
        provider: LLMProvider | None,
        settings: Settings | None = None,
        system_instruction: str | None = None
    ):
        """Initialize the gateway.

        Args:
            provider: LLM provider, or None when no API key is configured
            settings: Model names and temperature (defaults to ``Settings()``)
            system_instruction: Chat system instruction (or loaded from prompts/system.txt)
        """
        self._provider = provider
        self._settings = settings or Settings()
        self._system_instruction = system_instruction

    @property
    def is_configured(self) -> bool:
        return self._provider is not None

    @property
    def system_instruction(self) -> str:
        if self._system_instruction is None:
            self._system_instruction = get_system_prompt()
        return self._system_instruction

    async def send_message(self, text: str) -> str:
        """Ask the chat model a question, answering with the THOUGHT/RESPONSE framing."""
        request = GatewayRequest(prompt=text, model=self._settings.chat_model)
        messages = single_turn(text, self.system_instruction)
        await self.execute(request, messages, CHAT_FAILURES, temperature=self._settings.chat_temperature)
        return request.text

    async def generate_draft_text(self, prompt: str) -> str:
        """Send a serialized document prompt to the drafting model."""
        request = GatewayRequest(prompt=prompt, model=self._settings.draft_model)
        messages = single_turn(prompt)
        await self.execute(request, messages, DRAFT_FAILURES, temperature=None)
        return request.text

    async def execute(
        self,
        request: GatewayRequest,
        messages: list[ChatMessage],
        failures: FailureMessages,
        temperature: float | None = None,
        max_tokens: int | None = None
    ) -> GatewayRequest:
        """Drive ``request`` from IDLE to a terminal state.

        Args:
            request: Fresh request record (must be IDLE)
            messages: Messages to send
            failures: Texts to use when the request fails
            temperature: Sampling temperature, None for the model default
            max_tokens: Optional output cap

        Returns:
            The same request, now SUCCEEDED or FAILED with ``text`` set
        """
        request.start()

        if self._provider is None:
            logger.warning("No API key configured; request to %s not sent", request.model)
            request.fail(FailureKind.AUTHENTICATION, failures.authentication)
            return request

        try:
            response = await self._provider.chat_completion(
                messages,
                model=request.model,
                temperature=temperature,
                max_tokens=max_tokens
            )
        except LLMAuthenticationError:
            logger.exception("Authentication failed for model %s", request.model)
            request.fail(FailureKind.AUTHENTICATION, failures.authentication)
            return request
        except Exception:
            logger.exception("Error communicating with model %s", request.model)
            request.fail(FailureKind.TRANSIENT, failures.transient)
            return request

        if not response.content:
            logger.warning("Empty completion from model %s", request.model)
            request.fail(FailureKind.EMPTY, failures.empty)
            return request

        request.succeed(response.content)
        return request

    async def check_connection(self) -> HealthStatus:
        """Validate the API key with a minimal request."""
        if self._provider is None:
            return HealthStatus(
                success=False,
                message="Chave API não configurada no ambiente (GEMINI_API_KEY)."
            )

        try:
            response = await self._provider.chat_completion(
                single_turn(PING_PROMPT),
                model=self._settings.chat_model,
                temperature=None,
                max_tokens=PING_MAX_TOKENS
            )
        except LLMAuthenticationError:
            logger.exception("API connection check rejected the key")
            return HealthStatus(success=False, message="Chave API Inválida ou sem permissão (401/403).")
        except Exception as e:
            logger.exception("API connection check failed")
            return HealthStatus(success=False, message=f"Erro na API: {str(e) or 'Erro desconhecido'}")

        if response.content:
            return HealthStatus(success=True, message="Conexão com Gemini API estabelecida com sucesso.")
        return HealthStatus(success=False, message="Resposta vazia da API.")

    async def close(self) -> None:
        if self._provider is not None:
            await self._provider.close()
