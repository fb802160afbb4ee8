"""Redis async client backing the translation history.

Provides helper methods wrapping raw Redis commands so callers never need
to handle redis.exceptions directly. All connection/command errors are
caught and re-raised as PersistenceError.
"""

import json
from typing import Any

import structlog
from redis.asyncio import Redis
from redis.asyncio import from_url as redis_from_url
from redis.exceptions import RedisError

from translator.core.exceptions import PersistenceError

logger = structlog.get_logger(__name__)


def create_redis(url: str) -> Redis:
    """Build the connection pool. No connection is opened until first use.

    Responses stay raw bytes; decoding is left to the caller so a corrupt
    value surfaces as a parse error rather than inside the client.
    """
    return redis_from_url(url, decode_responses=False)


class RedisClient:
    """Thin wrapper over redis.asyncio.Redis with typed helpers.

    Every public method catches RedisError and re-raises as
    PersistenceError so the history layer gets a single error type.
    """

    def __init__(self, client: Redis) -> None:
        self._r = client

    async def get(self, key: str) -> bytes | None:
        """GET a key. Returns None if the key does not exist."""
        try:
            return await self._r.get(name=key)
        except RedisError as e:
            logger.error("redis_get_failed", key=key, error=str(e))
            raise PersistenceError(f"Redis GET failed: {e}") from e

    async def set(self, key: str, value: str) -> None:
        """SET a key without expiry."""
        try:
            await self._r.set(name=key, value=value)
        except RedisError as e:
            logger.error("redis_set_failed", key=key, error=str(e))
            raise PersistenceError(f"Redis SET failed: {e}") from e

    async def delete(self, key: str) -> int:
        """DELETE a key. Returns the number of keys removed (0 or 1)."""
        try:
            return await self._r.delete(key)
        except RedisError as e:
            logger.error("redis_delete_failed", key=key, error=str(e))
            raise PersistenceError(f"Redis DELETE failed: {e}") from e

    async def set_json(self, key: str, value: Any) -> None:
        """Serialize value to JSON string and SET."""
        await self.set(key, json.dumps(value, ensure_ascii=False))

    async def ping(self) -> bool:
        try:
            return bool(await self._r.ping())
        except RedisError as e:
            logger.warning("redis_ping_failed", error=str(e))
            return False

    async def close(self) -> None:
        """Gracefully close the Redis connection pool."""
        logger.info("redis_shutdown")
        await self._r.aclose()
