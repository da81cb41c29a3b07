from typing import Optional

from aiohttp import web

from notifier.config.settings import AppSettings, get_settings
from notifier.di import Container, build_graph
from notifier.loader.redis import init_redis
from notifier.loader.web import create_web_app


async def create_app(settings: Optional[AppSettings] = None) -> web.Application:
    settings = settings or get_settings()
    redis = await init_redis(settings)
    container = Container.build(settings)
    build_graph(container, redis=redis)
    return create_web_app(container, redis=redis)
