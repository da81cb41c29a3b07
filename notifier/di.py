from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from loguru import logger
from redis.asyncio import Redis

from .application.ports import Cacher, Sender, Storer
from .application.services import NotificationService
from .application.use_cases.send_notification import SendNotificationUseCase
from .config.settings import AppSettings
from .infrastructure.console_sender import ConsoleSender
from .infrastructure.http_sender import HttpGatewaySender
from .infrastructure.memory_cache import InMemoryCache
from .infrastructure.memory_store import InMemoryNotificationStore
from .infrastructure.redis_cache import RedisCache


class DIError(RuntimeError):
    pass


@runtime_checkable
class AsyncClosable(Protocol):
    async def close(self) -> None: ...


@dataclass(slots=True)
class Container:
    settings: AppSettings
    _components: dict[str, Any]

    @classmethod
    def build(cls, settings: AppSettings) -> "Container":
        return cls(settings=settings, _components={})

    def register(self, name: str, component: Any) -> None:
        if not name or not name.strip():
            raise DIError("Component name must be non-empty")
        if name in self._components:
            raise DIError(f"Component already registered: {name}")
        self._components[name] = component

    def get(self, name: str) -> Any:
        try:
            return self._components[name]
        except KeyError as exc:
            raise DIError(f"Unknown component: {name}") from exc

    def all_components(self) -> list[tuple[str, Any]]:
        return list(self._components.items())

    async def close(self) -> None:
        for name, component in reversed(self.all_components()):
            if isinstance(component, AsyncClosable):
                try:
                    await component.close()
                except Exception:
                    logger.exception("component.close failed: {}", name)


def build_graph(container: Container, *, redis: Optional[Redis] = None) -> SendNotificationUseCase:
    """
    Build the whole dependency graph.
    Any init error must crash at startup.
    """

    s = container.settings

    storer: Storer = InMemoryNotificationStore()
    cacher: Cacher = RedisCache(redis=redis) if redis is not None else InMemoryCache()

    sender: Sender
    if s.gateway_url is not None:
        sender = HttpGatewaySender(url=str(s.gateway_url), timeout_sec=s.gateway_timeout_sec)
    else:
        sender = ConsoleSender()

    service = NotificationService(
        sender=sender,
        storer=storer,
        cacher=cacher,
        cache_ttl_sec=s.cache_ttl_sec,
    )
    send_notification = SendNotificationUseCase(service=service)

    container.register("storer", storer)
    container.register("cacher", cacher)
    container.register("sender", sender)
    container.register("notification_service", service)
    container.register("send_notification_uc", send_notification)

    logger.info(
        "graph built: cache={} sender={}",
        type(cacher).__name__,
        type(sender).__name__,
    )
    return send_notification
