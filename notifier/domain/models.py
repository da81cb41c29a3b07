from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable

from pydantic import TypeAdapter


class AdmissionStage(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    TYPE_RESOLVED = "type_resolved"
    RATE_CHECKED = "rate_checked"
    DISPATCHED = "dispatched"
    RECORDED = "recorded"


class SendOutcome(str, Enum):
    ADMITTED = "admitted"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class NotificationType:
    """
    Named notification category with its own rolling-window policy.
    At most `request_limit` sends per user inside `rate_limit_sec`.
    """
    id: int
    name: str
    rate_limit_sec: int
    request_limit: int
    enabled: bool = True

    @property
    def exists(self) -> bool:
        return self.id != 0


@dataclass(frozen=True, slots=True)
class NotificationRecord:
    id: int
    user_id: int
    type: NotificationType
    sent_at: datetime


@dataclass(frozen=True, slots=True)
class SendRequest:
    type: str
    message: str
    user_id: int


# Codec for the cached type catalog (one JSON blob under one key)
NOTIFICATION_TYPES_ADAPTER: TypeAdapter[list[NotificationType]] = TypeAdapter(list[NotificationType])


def find_type_by_name(types: Iterable[NotificationType], name: str) -> NotificationType | None:
    wanted = name.casefold()
    for t in types:
        if t.name.casefold() == wanted:
            return t
    return None


def encode_types(types: list[NotificationType]) -> str:
    return NOTIFICATION_TYPES_ADAPTER.dump_json(types).decode("utf-8")


def decode_types(raw: str | bytes) -> list[NotificationType]:
    return NOTIFICATION_TYPES_ADAPTER.validate_json(raw)
