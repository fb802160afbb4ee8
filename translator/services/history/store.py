"""Bounded, newest-first translation history.

append and remove read the whole aggregate, transform it and write it
back; clear drops the stored key. Storage failures never reach the
caller: a failed read falls back to the last snapshot this store saw,
and a failed write still updates that snapshot.

No locking. Concurrent mutations can lose an update (last write wins),
so callers must serialize them.
"""

from __future__ import annotations

import structlog

from translator.core.exceptions import PersistenceError
from translator.models.translation import Translation, TranslationHistory
from translator.services.history.repository import HistoryRepository

logger = structlog.get_logger(__name__)

DEFAULT_CAPACITY = 50


class HistoryStore:
    """Append/evict/remove/clear over the persisted history aggregate."""

    def __init__(
        self, repository: HistoryRepository, capacity: int = DEFAULT_CAPACITY
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._repository = repository
        self._capacity = capacity
        self._snapshot: list[Translation] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    async def list(self) -> list[Translation]:
        """Current history, most recent first."""
        return list(await self._load())

    async def append(self, entry: Translation) -> list[Translation]:
        """Prepend entry, dropping the oldest entries beyond capacity."""
        current = await self._load()
        updated = [entry, *current][: self._capacity]
        await self._save(updated)
        return list(updated)

    async def remove(self, translation_id: str) -> list[Translation]:
        """Drop the entry with this id. Unknown ids leave the history as is."""
        current = await self._load()
        updated = [t for t in current if t.id != translation_id]
        if len(updated) == len(current):
            logger.debug("history_remove_miss", translation_id=translation_id)
        await self._save(updated)
        return list(updated)

    async def clear(self) -> list[Translation]:
        self._snapshot = []
        try:
            await self._repository.clear()
        except PersistenceError as e:
            logger.error("history_clear_failed", error=e.message)
        return []

    async def _load(self) -> list[Translation]:
        try:
            history = await self._repository.load()
        except PersistenceError as e:
            logger.error("history_load_failed", error=e.message)
            return self._snapshot
        self._snapshot = list(history.translations)
        return self._snapshot

    async def _save(self, translations: list[Translation]) -> None:
        self._snapshot = list(translations)
        try:
            await self._repository.save(TranslationHistory(translations=translations))
        except PersistenceError as e:
            logger.error(
                "history_save_failed",
                error=e.message,
                count=len(translations),
            )
