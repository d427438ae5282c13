"""Provider factory functions for CLI.

Centralizes creation of the settings, model gateway and draft store.
Hides configuration details from command implementations.
"""

import logging
from enum import Enum

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import Settings
from ..drafts import DraftLibrary, KeyValueStore, create_key_value_store
from ..errors import ConfigurationError
from ..gateway import ModelGateway
from ..llm import create_llm_provider

# Default console for output
_console = Console()


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def configure_logging(level: LogLevel = LogLevel.WARNING, console: Console | None = None) -> None:
    """Route library log records through Rich."""
    logging.basicConfig(
        level=LogLevel(level).value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def get_settings() -> Settings:
    """Read settings from the environment (see ``licitagov.config``).

    An invalid variable is reported as a usage error.
    """
    try:
        return Settings.from_env()
    except ConfigurationError as e:
        raise typer.BadParameter(str(e)) from e


def get_gateway(settings: Settings, console: Console | None = None) -> ModelGateway:
    """Create the model gateway.

    A missing API key does not stop the CLI: the gateway then answers every
    request with the authentication advisory.

    Environment variables:
        GEMINI_API_KEY: Gemini API key (falls back to API_KEY)
        LICITAGOV_CHAT_MODEL / LICITAGOV_DRAFT_MODEL: Model names
    """
    con = console or _console
    if not settings.has_api_key:
        con.print("[yellow]Warning: GEMINI_API_KEY not set, model requests will fail[/yellow]")
        return ModelGateway(None, settings)

    provider = create_llm_provider("gemini", api_key=settings.api_key, model=settings.chat_model)
    return ModelGateway(provider, settings)


def get_store(settings: Settings) -> KeyValueStore:
    """Create the key-value store backing the draft history.

    Environment variables:
        LICITAGOV_STORE_BACKEND: memory, json or sqlite (default: json)
        LICITAGOV_STORE_PATH: File path for json/sqlite backends
    """
    if settings.store_backend == "memory":
        return create_key_value_store("memory")
    return create_key_value_store(settings.store_backend, path=settings.store_path)


async def open_library(store: KeyValueStore) -> DraftLibrary:
    """Connect the store and load the saved drafts."""
    await store.connect()
    library = DraftLibrary(store)
    await library.load()
    return library
