from __future__ import annotations

from loguru import logger


class ConsoleSender:
    """Delivery channel stand-in: writes the message to the log instead of a gateway."""

    async def send(self, user_id: int, message: str) -> None:
        logger.info("sending message to user_id {}, msg:{}", user_id, message)
