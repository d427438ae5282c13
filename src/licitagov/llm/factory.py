from typing import Any

from .base import LLMProvider
from .providers import GeminiProvider

SUPPORTED_PROVIDERS = ("gemini",)


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Build a provider by name.

    Args:
        provider: Provider name, case-insensitive (only ``gemini`` today)
        **config: Constructor arguments; ``api_key`` is mandatory and
            ``model`` sets the default model

    Raises:
        TypeError: If ``api_key`` is not given
        ValueError: If the provider name is unknown

    Example:
        >>> create_llm_provider("gemini", api_key=key, model="gemini-3-pro-preview")
    """
    name = provider.lower()
    if name not in SUPPORTED_PROVIDERS:
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
        )
    if "api_key" not in config:
        raise TypeError(f"{name} provider requires 'api_key' in config")
    return GeminiProvider(**config)
