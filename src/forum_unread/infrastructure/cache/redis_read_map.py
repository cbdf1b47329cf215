from __future__ import annotations

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from forum_unread.application.exceptions import ReadMapPersistenceError


class RedisReadMapStore:
    """Keep encoded read maps as fields of one Redis hash, keyed by user id."""

    def __init__(self, redis: aioredis.Redis, key: str) -> None:
        self._redis = redis
        self._key = key

    async def load(self, user_id: int) -> str:
        try:
            value = await self._redis.hget(self._key, str(user_id))
        except RedisError as exc:
            raise ReadMapPersistenceError(f"redis load failed: {exc}") from exc
        if value is None:
            return ""
        return value.decode() if isinstance(value, bytes) else value

    async def save(self, user_id: int, value: str) -> None:
        try:
            await self._redis.hset(self._key, str(user_id), value)
        except RedisError as exc:
            raise ReadMapPersistenceError(f"redis save failed: {exc}") from exc
