"""Prompt templates for the assistant and the document generator.

The texts live in ``.txt`` files next to this module:

- ``system``: instruction sent with every chat message
- ``drafting``: opening of a drafting prompt (``{doc_type}`` placeholder)
- ``drafting_rules``: closing rules appended to every drafting prompt

A directory named by ``LICITAGOV_PROMPTS_DIR`` (or ``./prompts``) may hold
replacements with the same file names.
"""

import os
from functools import lru_cache
from pathlib import Path

_PROMPTS_DIR = Path(__file__).parent


def _search_path(filename: str) -> list[Path]:
    override_dir = os.getenv("LICITAGOV_PROMPTS_DIR")
    candidates = [Path(override_dir) / filename] if override_dir else []
    candidates.append(Path.cwd() / "prompts" / filename)
    candidates.append(_PROMPTS_DIR / filename)
    return candidates


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt template by name.

    Raises:
        FileNotFoundError: If no candidate file exists
    """
    candidates = _search_path(f"{name}.txt")
    for path in candidates:
        if path.exists():
            return path.read_text(encoding="utf-8")

    searched = "\n".join(f"  - {path}" for path in candidates)
    raise FileNotFoundError(f"Prompt '{name}' not found. Searched:\n{searched}")


def render_prompt(name: str, **values: str) -> str:
    """Load a template, strip it and fill its ``{placeholders}``."""
    text = load_prompt(name).strip()
    return text.format(**values) if values else text


def get_system_prompt() -> str:
    return load_prompt("system")


def clear_cache() -> None:
    """Forget loaded templates so edited files are read again."""
    load_prompt.cache_clear()


__all__ = [
    "clear_cache",
    "get_system_prompt",
    "load_prompt",
    "render_prompt",
]
