"""Runtime configuration.

Values come from environment variables (optionally loaded from a ``.env``
file by the CLI before ``Settings.from_env`` is called).

Environment variables:
    GEMINI_API_KEY: Google AI API key (falls back to API_KEY)
    LICITAGOV_CHAT_MODEL: Model for the chat (default: gemini-3-flash-preview)
    LICITAGOV_DRAFT_MODEL: Model for document drafts (default: gemini-3-pro-preview)
    LICITAGOV_CHAT_TEMPERATURE: Chat sampling temperature (default: 0.3)
    LICITAGOV_STORE_BACKEND: Draft store backend: memory, json or sqlite (default: json)
    LICITAGOV_STORE_PATH: Path of the draft store file (default: ~/.licitagov/storage.json)
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigurationError

DEFAULT_CHAT_MODEL = "gemini-3-flash-preview"
DEFAULT_DRAFT_MODEL = "gemini-3-pro-preview"
DEFAULT_CHAT_TEMPERATURE = 0.3
DEFAULT_STORE_PATH = Path.home() / ".licitagov" / "storage.json"

# Well-known key holding the saved draft list
DRAFTS_STORAGE_KEY = "licitagov_drafts"

_ENV_NAMES = {
    "chat_temperature": "LICITAGOV_CHAT_TEMPERATURE",
    "store_backend": "LICITAGOV_STORE_BACKEND",
}


class Settings(BaseModel):
    """Application settings."""

    api_key: str | None = Field(default=None, description="Gemini API key")
    chat_model: str = DEFAULT_CHAT_MODEL
    draft_model: str = DEFAULT_DRAFT_MODEL
    chat_temperature: float = Field(default=DEFAULT_CHAT_TEMPERATURE, ge=0.0, le=2.0)
    store_backend: Literal["memory", "json", "sqlite"] = "json"
    store_path: Path = DEFAULT_STORE_PATH

    @property
    def has_api_key(self) -> bool:
        # Some build tools export the literal string "undefined" for an unset key
        return bool(self.api_key) and self.api_key != "undefined"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        try:
            return cls(
                api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
                chat_model=os.getenv("LICITAGOV_CHAT_MODEL", DEFAULT_CHAT_MODEL),
                draft_model=os.getenv("LICITAGOV_DRAFT_MODEL", DEFAULT_DRAFT_MODEL),
                chat_temperature=os.getenv("LICITAGOV_CHAT_TEMPERATURE", str(DEFAULT_CHAT_TEMPERATURE)),
                store_backend=os.getenv("LICITAGOV_STORE_BACKEND", "json"),
                store_path=Path(os.getenv("LICITAGOV_STORE_PATH", str(DEFAULT_STORE_PATH))).expanduser(),
            )
        except ValidationError as e:
            names = ", ".join(_ENV_NAMES.get(str(err["loc"][0]), str(err["loc"][0])) for err in e.errors())
            raise ConfigurationError(f"Invalid value for {names}") from e
