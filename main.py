import asyncio

import uvloop
from aiohttp import web
from loguru import logger

from notifier.main_app import create_app
from notifier.config.settings import get_settings
from notifier.loader.logging import setup_logging


def main():
    settings = get_settings()
    setup_logging(settings)

    logger.info("Starting notifier on {}:{}", settings.webapp_host, settings.webapp_port)

    async def _run():
        app = await create_app(settings)
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, host=settings.webapp_host, port=settings.webapp_port)
        await site.start()
        logger.info("Notifier started")
        try:
            while True:
                await asyncio.sleep(3600)
        finally:
            await runner.cleanup()
            logger.info("Notifier stopped")

    uvloop.run(_run())


if __name__ == "__main__":
    main()
