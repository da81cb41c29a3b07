from __future__ import annotations

import logging

from notifier.application.dto import SendResultDTO
from notifier.application.services import NotificationService
from notifier.constants import MSG_SENT
from notifier.domain.errors import DomainError, RateLimitExceededError
from notifier.domain.models import AdmissionStage, NotificationType, SendOutcome, SendRequest
from notifier.domain.validators import validate_send_request


class SendNotificationUseCase:
    """
    Runs one send request through the admission stages and reports where it stopped.

    RECEIVED -> VALIDATED -> TYPE_RESOLVED -> RATE_CHECKED -> DISPATCHED -> RECORDED
    """

    def __init__(self, *, service: NotificationService) -> None:
        self._service = service
        self._logger = logging.getLogger("send_notification")

    async def execute(self, request: SendRequest) -> SendResultDTO:
        stage = AdmissionStage.RECEIVED
        notification_type: NotificationType | None = None
        try:
            validate_send_request(request)
            stage = AdmissionStage.VALIDATED

            notification_type = await self._service.resolve_type(request.type)
            stage = AdmissionStage.TYPE_RESOLVED

            await self._service.check_rate_limit(notification_type, request.user_id)
            stage = AdmissionStage.RATE_CHECKED

            await self._service.dispatch(request)
            stage = AdmissionStage.DISPATCHED

            record = await self._service.record(notification_type, request.user_id)
            stage = AdmissionStage.RECORDED

        except RateLimitExceededError as exc:
            self._logger.info("rejected: user_id=%s type=%s", request.user_id, request.type)
            return SendResultDTO(
                outcome=SendOutcome.REJECTED,
                stage=stage,
                message=str(exc),
                error=exc,
                notification_type=notification_type,
            )
        except DomainError as exc:
            self._logger.info("refused at %s: %s", stage.value, exc)
            return self._failed(stage, exc, notification_type)
        except Exception as exc:
            if stage == AdmissionStage.DISPATCHED:
                # delivered but not recorded; it will not count against the limit
                self._logger.exception(
                    "notification sent but not recorded: user_id=%s type=%s", request.user_id, request.type
                )
            else:
                self._logger.exception("send failed after %s: user_id=%s", stage.value, request.user_id)
            return self._failed(stage, exc, notification_type)

        self._logger.info("admitted: user_id=%s type=%s record_id=%s", request.user_id, notification_type.name, record.id)
        return SendResultDTO(
            outcome=SendOutcome.ADMITTED,
            stage=stage,
            message=MSG_SENT,
            notification_type=notification_type,
            record=record,
        )

    @staticmethod
    def _failed(
        stage: AdmissionStage,
        exc: Exception,
        notification_type: NotificationType | None,
    ) -> SendResultDTO:
        return SendResultDTO(
            outcome=SendOutcome.FAILED,
            stage=stage,
            message=str(exc),
            error=exc,
            notification_type=notification_type,
        )
