from .base import LLMProvider
from .errors import LLMAuthenticationError, LLMError
from .factory import create_llm_provider
from .models import ChatMessage, LLMResponse, single_turn
from .providers import GeminiProvider

__all__ = [
    "LLMProvider",
    "LLMError",
    "LLMAuthenticationError",
    "create_llm_provider",
    "ChatMessage",
    "LLMResponse",
    "GeminiProvider",
    "single_turn",
]
