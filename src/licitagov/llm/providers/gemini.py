"""Gemini provider on top of the Google GenAI SDK.

Reference: https://github.com/googleapis/python-genai

Gemini may answer with no text at all (safety filtering, overload). That
comes back as ``LLMResponse(content="")``; the gateway decides what the
user reads in that case.
"""

import logging
from typing import Any

from google import genai
from google.genai import errors, types

from ..base import LLMProvider
from ..errors import LLMAuthenticationError, LLMError
from ..models import ChatMessage, LLMResponse

logger = logging.getLogger(__name__)

# Gemini role names for non-system messages
_ROLES = {"user": "user", "assistant": "model"}

# An invalid key is reported as 400 INVALID_ARGUMENT, not 401
_INVALID_KEY_MARKERS = ("API_KEY_INVALID", "API key not valid")


class GeminiProvider(LLMProvider):
    """Google Gemini provider.

    Hidden design decisions:
    - ``genai.Client`` construction and the async (``client.aio``) surface
    - Split of system instruction from conversation contents
    - Which SDK errors count as credential failures
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-3-flash-preview",
        **client_kwargs: Any
    ):
        """
        Args:
            api_key: Google AI Studio key
            model: Default model name
            **client_kwargs: Passed through to ``genai.Client``
        """
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        return self._model

    def _convert_messages(self, messages: list[ChatMessage]) -> tuple[str | None, list[types.Content]]:
        """Return ``(system_instruction, contents)``; the last system message wins."""
        system_instruction = None
        contents = []
        for msg in messages:
            if msg.role == "system":
                system_instruction = msg.content
                continue
            contents.append(types.Content(role=_ROLES[msg.role], parts=[types.Part(text=msg.content)]))
        return system_instruction, contents

    @staticmethod
    def _extract_content(response) -> str:
        candidates = response.candidates or []
        if candidates and candidates[0].content and candidates[0].content.parts:
            text = "".join(part.text for part in candidates[0].content.parts if getattr(part, "text", None))
            if text:
                return text
        try:
            return response.text or ""
        except (ValueError, AttributeError):
            return ""

    @staticmethod
    def _extract_usage(response) -> dict[str, int] | None:
        meta = response.usage_metadata
        if not meta:
            return None
        return {
            "prompt_tokens": meta.prompt_token_count or 0,
            "completion_tokens": meta.candidates_token_count or 0,
            "total_tokens": meta.total_token_count or 0,
        }

    @staticmethod
    def _translate_error(error: errors.APIError) -> LLMError:
        message = str(error)
        if error.code in (401, 403) or any(marker in message for marker in _INVALID_KEY_MARKERS):
            return LLMAuthenticationError(message, status_code=error.code)
        return LLMError(message, status_code=error.code)

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float | None = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Call ``models.generate_content`` once.

        Extra keyword arguments become ``GenerateContentConfig`` fields.
        """
        model_name = model or self._model
        system_instruction, contents = self._convert_messages(messages)

        config = types.GenerateContentConfig(
            temperature=temperature,
            system_instruction=system_instruction,
            max_output_tokens=max_tokens,
            **kwargs
        )

        try:
            response = await self._client.aio.models.generate_content(
                model=model_name,
                contents=contents,
                config=config
            )
        except errors.APIError as e:
            raise self._translate_error(e) from e

        usage = self._extract_usage(response)
        logger.debug("Gemini %s usage: %s", model_name, usage)
        return LLMResponse(content=self._extract_content(response), model=model_name, usage=usage)

    async def close(self) -> None:
        # genai.Client keeps no connection that needs explicit closing
        pass
