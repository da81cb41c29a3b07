from __future__ import annotations

from redis.asyncio import Redis
from redis.exceptions import RedisError

from notifier.application.ports import CacheMissError
from notifier.constants import APP_NAME


class CacheError(RuntimeError):
    pass


class RedisCache:
    def __init__(self, *, redis: Redis, prefix: str = f"{APP_NAME}:") -> None:
        self._redis = redis
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> str:
        try:
            value = await self._redis.get(self._key(key))
        except RedisError as exc:
            raise CacheError(f"redis get failed for {key!r}") from exc
        if not value:
            raise CacheMissError("key not found")
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl_sec: int) -> None:
        try:
            await self._redis.set(self._key(key), value, ex=ttl_sec)
        except RedisError as exc:
            raise CacheError(f"redis set failed for {key!r}") from exc
