from aiohttp import web
from loguru import logger

from notifier.application.dto import SendResultDTO
from notifier.domain.models import SendOutcome


def status_for(result: SendResultDTO) -> int:
    if result.outcome == SendOutcome.ADMITTED:
        return web.HTTPOk.status_code
    if result.outcome == SendOutcome.REJECTED:
        return web.HTTPTooManyRequests.status_code
    if result.is_client_error:
        return web.HTTPBadRequest.status_code
    return web.HTTPInternalServerError.status_code


def error_response(result: SendResultDTO) -> web.Response:
    # collaborator errors reach the caller unchanged, whatever the status
    status = status_for(result)
    if status >= 500:
        logger.error("notification failed at {}: {!r}", result.stage.value, result.error)
    return web.json_response({"status": result.outcome.value, "error": result.message}, status=status)
