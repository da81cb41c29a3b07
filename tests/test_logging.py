"""Tests for the loguru setup and the stdlib bridge."""

import logging
import sys

import pytest
from loguru import logger

from notifier.config.settings import AppSettings
from notifier.loader.logging import InterceptHandler, setup_logging


@pytest.fixture
def captured():
    previous_handlers = logging.root.handlers[:]
    previous_level = logging.root.level
    setup_logging(AppSettings(log_level="DEBUG"))
    lines: list[str] = []
    logger.add(lines.append, format="{extra[app]}|{extra[component]}|{message}", level="DEBUG")
    yield lines
    logger.remove()
    logger.configure(extra={}, patcher=lambda record: None)
    logger.add(sys.stderr)
    logging.root.handlers = previous_handlers
    logging.root.setLevel(previous_level)


def test_root_logger_is_intercepted(captured):
    assert any(isinstance(h, InterceptHandler) for h in logging.root.handlers)


def test_stdlib_records_keep_their_logger_name(captured):
    logging.getLogger("notification_service").info("type cache refilled")

    assert "notifier|notification_service|type cache refilled" in [line.strip() for line in captured]


def test_loguru_records_default_to_module_name(captured):
    logger.info("direct call")

    assert f"notifier|{__name__}|direct call" in [line.strip() for line in captured]


def test_explicit_component_binding_wins(captured):
    logger.bind(component="webhook").warning("bad payload")

    assert "notifier|webhook|bad payload" in [line.strip() for line in captured]
