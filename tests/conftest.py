"""Shared fixtures for notifier tests."""

import pytest

from notifier.application.services import NotificationService
from notifier.application.use_cases.send_notification import SendNotificationUseCase

from .fakes import FakeCacher, FakeClock, FakeSender, FakeStorer

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storer() -> FakeStorer:
    return FakeStorer()


@pytest.fixture
def cacher() -> FakeCacher:
    return FakeCacher()


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()


@pytest.fixture
def service(sender, storer, cacher, clock) -> NotificationService:
    return NotificationService(sender=sender, storer=storer, cacher=cacher, cache_ttl_sec=3600, clock=clock)


@pytest.fixture
def use_case(service) -> SendNotificationUseCase:
    return SendNotificationUseCase(service=service)
