from typing import Optional

from aiohttp import web
from loguru import logger
from redis.asyncio import Redis

from notifier.di import Container
from notifier.handlers import setup_routes


CONTAINER_KEY: web.AppKey[Container] = web.AppKey("container", Container)


def create_web_app(container: Container, *, redis: Optional[Redis] = None) -> web.Application:
    app = web.Application()
    app[CONTAINER_KEY] = container

    settings = container.settings
    setup_routes(
        app,
        use_case=container.get("send_notification_uc"),
        webhook_path=settings.webhook_path,
    )

    async def on_cleanup(app: web.Application) -> None:
        await app[CONTAINER_KEY].close()
        if redis is not None:
            await redis.aclose()
            logger.info("Redis connection closed")

    app.on_cleanup.append(on_cleanup)
    logger.info("Webhook listening on {}", settings.webhook_path)
    return app
