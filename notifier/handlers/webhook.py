from aiohttp import web
from loguru import logger
from pydantic import BaseModel, StrictInt, StrictStr
from pydantic import ValidationError as PayloadError

from notifier.application.use_cases.send_notification import SendNotificationUseCase
from notifier.domain.models import SendRequest

from .errors import error_response


USE_CASE_KEY: web.AppKey[SendNotificationUseCase] = web.AppKey("send_notification_uc", SendNotificationUseCase)


class WebhookPayload(BaseModel):
    # absent fields fall back to blanks so the domain reports every violation
    type: StrictStr = ""
    user_id: StrictInt = 0
    message: StrictStr = ""

    def to_request(self) -> SendRequest:
        return SendRequest(type=self.type, message=self.message, user_id=self.user_id)


async def notification_webhook(request: web.Request) -> web.Response:
    body = await request.read()
    try:
        payload = WebhookPayload.model_validate_json(body or b"{}")
    except PayloadError as exc:
        logger.debug("bad webhook payload: {}", exc)
        return web.json_response(
            {"status": "failed", "error": f"invalid payload: {exc.error_count()} error(s)"},
            status=web.HTTPBadRequest.status_code,
        )

    use_case = request.app[USE_CASE_KEY]
    result = await use_case.execute(payload.to_request())
    if result.admitted:
        return web.json_response(
            {"status": result.outcome.value, "message": result.message, "record_id": result.record.id}
        )
    return error_response(result)


async def health(request: web.Request) -> web.Response:
    return web.Response(text="ok")
