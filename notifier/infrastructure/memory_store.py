from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Iterable

from notifier.utils.clock import Clock, utc_now
from notifier.domain.models import NotificationRecord, NotificationType


class StorerError(RuntimeError):
    pass


DEFAULT_TYPES: tuple[NotificationType, ...] = (
    NotificationType(id=1, name="STATUS", rate_limit_sec=120, request_limit=2),
    NotificationType(id=2, name="NEWS", rate_limit_sec=86400, request_limit=1),
    NotificationType(id=3, name="MARKETING", rate_limit_sec=10800, request_limit=3),
)


class InMemoryNotificationStore:
    """
    Process-local history + type catalog.
    Not durable; records live as long as the process.
    """

    def __init__(
        self,
        *,
        types: Iterable[NotificationType] = DEFAULT_TYPES,
        clock: Clock = utc_now,
    ) -> None:
        self._types: list[NotificationType] = list(types)
        self._records: list[NotificationRecord] = []
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def records(self) -> list[NotificationRecord]:
        return list(self._records)

    async def get_user_notifications_since(
        self,
        user_id: int,
        type_name: str,
        start: datetime,
    ) -> list[NotificationRecord]:
        wanted = type_name.casefold()
        # newest first
        return [
            r
            for r in reversed(self._records)
            if r.user_id == user_id and r.type.name.casefold() == wanted and r.sent_at > start
        ]

    async def get_types(self) -> list[NotificationType]:
        return [t for t in self._types if t.enabled]

    async def save(self, notification_type: NotificationType, user_id: int) -> NotificationRecord:
        if not notification_type.exists:
            raise StorerError(f"cannot save notification of unknown type {notification_type.name!r}")
        async with self._lock:
            record = NotificationRecord(
                id=len(self._records) + 1,
                user_id=user_id,
                type=notification_type,
                sent_at=self._clock(),
            )
            self._records.append(record)
        return record
