from aiohttp import web

from notifier.application.use_cases.send_notification import SendNotificationUseCase

from .webhook import USE_CASE_KEY, health, notification_webhook


def setup_routes(app: web.Application, *, use_case: SendNotificationUseCase, webhook_path: str) -> None:
    app[USE_CASE_KEY] = use_case
    app.router.add_post(webhook_path, notification_webhook)
    app.router.add_get("/health", health)
