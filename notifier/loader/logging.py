import logging
import sys

from loguru import logger

from notifier.config.settings import AppSettings
from notifier.constants import APP_NAME


# stdlib loggers owned by this service or its web stack
STDLIB_LOGGERS: tuple[str, ...] = ("aiohttp", "asyncio", "notification_service", "send_notification")

LOG_FORMAT: str = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[app]}</magenta> | "
    "<cyan>{extra[component]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """
    Forwards stdlib records into loguru, keeping the stdlib logger name
    (e.g. "notification_service") as the `component` field.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(component=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _default_component(record: dict) -> None:
    # loguru callers without an explicit binding are named after their module
    record["extra"].setdefault("component", record["name"])


def setup_logging(settings: AppSettings) -> None:
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(settings.log_level)

    for name in STDLIB_LOGGERS:
        logging.getLogger(name).setLevel(settings.log_level)

    logger.remove()
    logger.configure(extra={"app": APP_NAME}, patcher=_default_component)
    logger.add(
        sys.stdout,
        level=settings.log_level,
        format=LOG_FORMAT,
        backtrace=True,
        diagnose=False,
    )

    logger.info("Logging configured for {} at {}", APP_NAME, settings.log_level)
