from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence, runtime_checkable

from notifier.domain.models import NotificationRecord, NotificationType


class CacheMissError(LookupError):
    """Raised by a Cacher when the key is absent or expired."""


@runtime_checkable
class Storer(Protocol):
    async def get_user_notifications_since(
        self,
        user_id: int,
        type_name: str,
        start: datetime,
    ) -> Sequence[NotificationRecord]: ...

    async def get_types(self) -> Sequence[NotificationType]: ...

    async def save(self, notification_type: NotificationType, user_id: int) -> NotificationRecord: ...


@runtime_checkable
class Cacher(Protocol):
    async def get(self, key: str) -> str: ...

    async def set(self, key: str, value: str, ttl_sec: int) -> None: ...


@runtime_checkable
class Sender(Protocol):
    async def send(self, user_id: int, message: str) -> None: ...
