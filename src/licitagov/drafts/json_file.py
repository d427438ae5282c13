"""JSON file key-value backend.

Keeps every key in one JSON object on disk. The file is read on connect and
rewritten in full on every mutation.
"""

import asyncio
import json
import logging
from pathlib import Path

from .base import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Store backed by a single JSON file.

    File reads and writes run in a worker thread. A write that fails leaves
    the in-memory values unchanged.
    """

    def __init__(self, path: str | Path = "./licitagov_storage.json"):
        self._path = Path(path)
        self._data: dict[str, str] = {}

    async def connect(self) -> None:
        """Load the file, starting empty if it is missing or unreadable."""
        self._data = await asyncio.to_thread(self._read)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Could not read storage file %s: %s", self._path, e)
            return {}
        if not isinstance(raw, dict):
            logger.error("Storage file %s does not hold a JSON object; ignoring it", self._path)
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    async def disconnect(self) -> None:
        pass

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        await self._commit({**self._data, key: value})

    async def delete(self, key: str) -> None:
        if key in self._data:
            await self._commit({k: v for k, v in self._data.items() if k != key})

    async def _commit(self, data: dict[str, str]) -> None:
        await asyncio.to_thread(self._write, data)
        self._data = data

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp_path.replace(self._path)

    @property
    def backend_type(self) -> str:
        return "json"

    @property
    def path(self) -> Path:
        return self._path
