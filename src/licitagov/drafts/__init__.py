"""Draft persistence for the document generator.

Provides a small key-value store abstraction (memory, JSON file, SQLite)
and the saved-draft history kept on top of it.
"""

from .base import KeyValueStore
from .factory import create_key_value_store
from .library import DraftLibrary
from .models import SavedDraft

__all__ = [
    "DraftLibrary",
    "KeyValueStore",
    "SavedDraft",
    "create_key_value_store",
]
