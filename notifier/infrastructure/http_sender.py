from __future__ import annotations

import asyncio

import aiohttp
from loguru import logger


class SenderError(RuntimeError):
    pass


class HttpGatewaySender:
    """
    Posts each notification as JSON to an external delivery gateway
    (email/SMS/push). One attempt per message; retries belong to the gateway.
    """

    def __init__(self, *, url: str, timeout_sec: float = 10.0, session: aiohttp.ClientSession | None = None) -> None:
        self._url = url
        self._timeout = aiohttp.ClientTimeout(total=timeout_sec)
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def send(self, user_id: int, message: str) -> None:
        session = await self._get_session()
        payload = {"user_id": user_id, "message": message}
        try:
            async with session.post(self._url, json=payload, timeout=self._timeout) as resp:
                if resp.status >= 300:
                    body = await resp.text()
                    raise SenderError(f"gateway responded {resp.status}: {body[:200]}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise SenderError(f"gateway unreachable: {exc!r}") from exc
        logger.debug("gateway accepted message for user_id {}", user_id)

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
