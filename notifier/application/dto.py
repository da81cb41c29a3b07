from __future__ import annotations

from dataclasses import dataclass

from notifier.domain.errors import RateLimitExceededError, TypeNotFoundError, ValidationError
from notifier.domain.models import AdmissionStage, NotificationRecord, NotificationType, SendOutcome


@dataclass(frozen=True, slots=True)
class SendResultDTO:
    outcome: SendOutcome
    stage: AdmissionStage
    message: str
    error: Exception | None = None
    notification_type: NotificationType | None = None
    record: NotificationRecord | None = None

    @property
    def admitted(self) -> bool:
        return self.outcome == SendOutcome.ADMITTED

    @property
    def rejected(self) -> bool:
        return self.outcome == SendOutcome.REJECTED

    @property
    def is_client_error(self) -> bool:
        return isinstance(self.error, (ValidationError, TypeNotFoundError))

    @property
    def is_rate_limited(self) -> bool:
        return isinstance(self.error, RateLimitExceededError)
