"""Persistence for the history aggregate.

The whole aggregate lives under one fixed key and is always read and
written in full. A missing or unreadable value loads as an empty history;
only store failures raise.
"""

from __future__ import annotations

from pydantic import ValidationError
import structlog

from translator.db.redis import RedisClient
from translator.models.translation import TranslationHistory

logger = structlog.get_logger(__name__)


class HistoryRepository:
    """Load/save the history aggregate under a single key."""

    def __init__(self, redis: RedisClient, key: str = "translator_history") -> None:
        self._redis = redis
        self._key = key

    async def load(self) -> TranslationHistory:
        """Return the stored aggregate, or an empty one on miss or bad data.

        Raises:
            PersistenceError: If the store cannot be read.
        """
        raw = await self._redis.get(self._key)
        if raw is None:
            logger.debug("history_cache_miss", key=self._key)
            return TranslationHistory()

        try:
            history = TranslationHistory.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "history_deserialize_failed",
                key=self._key,
                error=str(e),
            )
            return TranslationHistory()

        logger.debug(
            "history_loaded",
            key=self._key,
            count=len(history.translations),
        )
        return history

    async def save(self, history: TranslationHistory) -> None:
        """Overwrite the stored aggregate.

        Raises:
            PersistenceError: If the store cannot be written.
        """
        await self._redis.set_json(
            self._key,
            history.model_dump(mode="json", by_alias=True),
        )
        logger.debug(
            "history_saved",
            key=self._key,
            count=len(history.translations),
        )

    async def clear(self) -> None:
        """Drop the stored aggregate; the next load returns an empty history.

        Raises:
            PersistenceError: If the store cannot be written.
        """
        await self._redis.delete(self._key)
        logger.debug("history_cleared", key=self._key)
