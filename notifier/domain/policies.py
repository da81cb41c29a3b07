from __future__ import annotations

from datetime import datetime, timedelta
from typing import Sequence

from .models import NotificationRecord, NotificationType


def rate_window_start(now: datetime, notification_type: NotificationType) -> datetime:
    return now - timedelta(seconds=notification_type.rate_limit_sec)


def is_rate_limited(recent: Sequence[NotificationRecord], notification_type: NotificationType) -> bool:
    """
    `recent` holds the user's sends of this type strictly after the window start.
    An empty history never limits, even with request_limit == 0.
    """
    if not recent:
        return False
    return len(recent) >= notification_type.request_limit
