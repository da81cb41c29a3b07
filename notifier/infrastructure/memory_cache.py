from __future__ import annotations

import time
from typing import Callable, Dict, Tuple

from notifier.application.ports import CacheMissError


class InMemoryCache:
    """Key/value cache with per-key TTL, used when Redis is not configured."""

    def __init__(self, *, monotonic: Callable[[], float] = time.monotonic) -> None:
        self._items: Dict[str, Tuple[str, float]] = {}
        self._now = monotonic

    async def get(self, key: str) -> str:
        item = self._items.get(key)
        if item is None:
            raise CacheMissError("key not found")
        value, expires_at = item
        if self._now() >= expires_at:
            self._items.pop(key, None)
            raise CacheMissError("key expired")
        if not value:
            raise CacheMissError("key not found")
        return value

    async def set(self, key: str, value: str, ttl_sec: int) -> None:
        self._items[key] = (value, self._now() + ttl_sec)

    def clear(self) -> None:
        self._items.clear()
