from __future__ import annotations

from .models import (
    AdmissionStage,
    NotificationRecord,
    NotificationType,
    SendOutcome,
    SendRequest,
    find_type_by_name,
)
from .errors import DomainError, RateLimitExceededError, TypeNotFoundError, ValidationError

__all__ = [
    "AdmissionStage",
    "NotificationRecord",
    "NotificationType",
    "SendOutcome",
    "SendRequest",
    "find_type_by_name",
    "DomainError",
    "RateLimitExceededError",
    "TypeNotFoundError",
    "ValidationError",
]
