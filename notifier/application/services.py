from __future__ import annotations

import logging

from notifier.application.ports import Cacher, Sender, Storer
from notifier.constants import NOTIFICATION_TYPES_KEY
from notifier.domain.errors import RateLimitExceededError, TypeNotFoundError
from notifier.domain.models import (
    NotificationRecord,
    NotificationType,
    SendRequest,
    decode_types,
    encode_types,
    find_type_by_name,
)
from notifier.domain.policies import is_rate_limited, rate_window_start
from notifier.domain.validators import validate_send_request
from notifier.utils.clock import Clock, utc_now


class NotificationService:
    """
    Admission engine for notification sends:
      validate -> resolve type (cache-aside) -> check rate limit -> send -> save.

    IMPORTANT:
      - Collaborator errors are raised unchanged; nothing is retried.
      - A cache read failure is a miss, a cache write failure is not.
      - The rate check and the save are not atomic. Two concurrent sends for the
        same user/type may both pass the check.
    """

    def __init__(
        self,
        *,
        sender: Sender,
        storer: Storer,
        cacher: Cacher,
        cache_ttl_sec: int,
        clock: Clock = utc_now,
    ) -> None:
        if cache_ttl_sec <= 0:
            raise ValueError("required cache ttl invalid or not found")
        self._sender = sender
        self._storer = storer
        self._cacher = cacher
        self._ttl = cache_ttl_sec
        self._clock = clock
        self._logger = logging.getLogger("notification_service")

    async def send(self, request: SendRequest) -> NotificationRecord:
        validate_send_request(request)
        notification_type = await self.resolve_type(request.type)
        await self.check_rate_limit(notification_type, request.user_id)
        await self.dispatch(request)
        return await self.record(notification_type, request.user_id)

    async def resolve_type(self, name: str) -> NotificationType:
        types = await self._cached_types()
        if types is None:
            types = list(await self._storer.get_types())
            await self._cacher.set(NOTIFICATION_TYPES_KEY, encode_types(types), self._ttl)
            self._logger.debug("type cache refilled: %d types, ttl=%ss", len(types), self._ttl)

        found = find_type_by_name(types, name)
        if found is None or not found.exists:
            raise TypeNotFoundError(name)
        return found

    async def check_rate_limit(self, notification_type: NotificationType, user_id: int) -> None:
        start = rate_window_start(self._clock(), notification_type)
        recent = await self._storer.get_user_notifications_since(user_id, notification_type.name, start)
        if is_rate_limited(recent, notification_type):
            raise RateLimitExceededError()

    async def dispatch(self, request: SendRequest) -> None:
        await self._sender.send(request.user_id, request.message)

    async def record(self, notification_type: NotificationType, user_id: int) -> NotificationRecord:
        return await self._storer.save(notification_type, user_id)

    async def _cached_types(self) -> list[NotificationType] | None:
        try:
            raw = await self._cacher.get(NOTIFICATION_TYPES_KEY)
            return decode_types(raw)
        except Exception as exc:
            # any read problem counts as a miss
            self._logger.debug("type cache miss: %r", exc)
            return None
