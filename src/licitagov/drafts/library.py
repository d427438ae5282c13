"""Saved-draft history persisted through a key-value store."""

import logging

from pydantic import ValidationError

from ..config import DRAFTS_STORAGE_KEY
from ..errors import DraftNotFoundError
from .base import KeyValueStore
from .models import DraftList, SavedDraft

logger = logging.getLogger(__name__)


class DraftLibrary:
    """List of saved drafts, newest first.

    The whole list lives under one key and is rewritten on every mutation.
    Concurrent writers are not coordinated: the last write wins.
    """

    def __init__(self, store: KeyValueStore, key: str = DRAFTS_STORAGE_KEY):
        self._store = store
        self._key = key
        self._drafts: list[SavedDraft] = []

    @property
    def drafts(self) -> list[SavedDraft]:
        return list(self._drafts)

    def __len__(self) -> int:
        return len(self._drafts)

    async def load(self) -> list[SavedDraft]:
        """Read the stored list, treating an unreadable payload as empty."""
        raw = await self._store.get(self._key)
        if raw is None:
            self._drafts = []
            return self.drafts

        try:
            self._drafts = DraftList.validate_json(raw)
        except ValidationError as e:
            logger.error("Discarding unreadable draft list under %r: %s", self._key, e)
            self._drafts = []
        return self.drafts

    async def save(self, doc_type: str, objeto: str, content: str) -> SavedDraft:
        """Create a draft and put it at the top of the list."""
        draft = SavedDraft.create(doc_type, objeto, content)
        await self._replace([draft, *self._drafts])
        logger.info("Saved draft %s (%s)", draft.id, draft.type)
        return draft

    def get(self, draft_id: str) -> SavedDraft:
        for draft in self._drafts:
            if draft.id == draft_id:
                return draft
        raise DraftNotFoundError(draft_id)

    async def delete(self, draft_id: str) -> SavedDraft:
        """Remove a draft and persist the remaining list."""
        draft = self.get(draft_id)
        await self._replace([d for d in self._drafts if d.id != draft_id])
        logger.info("Deleted draft %s", draft_id)
        return draft

    async def _replace(self, drafts: list[SavedDraft]) -> None:
        """Write ``drafts`` to the store, then adopt them; a failed write changes nothing."""
        await self._store.set(self._key, DraftList.dump_json(drafts).decode("utf-8"))
        self._drafts = drafts
