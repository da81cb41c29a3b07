"""Tests for request validation, type lookup and the rate-limit policy."""

from datetime import timedelta

import pytest

from notifier.domain.errors import TypeNotFoundError, ValidationError
from notifier.domain.models import (
    NotificationRecord,
    NotificationType,
    SendRequest,
    decode_types,
    encode_types,
    find_type_by_name,
)
from notifier.domain.policies import is_rate_limited, rate_window_start
from notifier.domain.validators import validate_send_request

from .fakes import START


STATUS = NotificationType(id=1, name="STATUS", rate_limit_sec=120, request_limit=2)
NEWS = NotificationType(id=2, name="NEWS", rate_limit_sec=86400, request_limit=1)


def _record(record_id: int, notification_type: NotificationType = STATUS) -> NotificationRecord:
    return NotificationRecord(id=record_id, user_id=1, type=notification_type, sent_at=START)


def test_valid_request_passes():
    validate_send_request(SendRequest(type="status", message="hi", user_id=1))


@pytest.mark.parametrize(
    "request_, expected",
    [
        (SendRequest(type="type_test", message="message_test", user_id=0), "user id is required"),
        (SendRequest(type="type_test", message="", user_id=1), "message is required"),
        (SendRequest(type="    ", message="message_test", user_id=1), "type is required"),
        (SendRequest(type="type_test", message="message_test", user_id=-5), "user id is required"),
    ],
)
def test_single_violation(request_, expected):
    with pytest.raises(ValidationError) as exc_info:
        validate_send_request(request_)

    assert str(exc_info.value) == expected
    assert exc_info.value.violations == (expected,)


def test_empty_request_lists_every_violation():
    with pytest.raises(ValidationError) as exc_info:
        validate_send_request(SendRequest(type="", message="", user_id=0))

    assert str(exc_info.value) == "message is required\ntype is required\nuser id is required"


def test_whitespace_message_is_blank():
    with pytest.raises(ValidationError, match="message is required"):
        validate_send_request(SendRequest(type="NEWS", message=" \t\n", user_id=3))


def test_find_type_by_name_is_case_insensitive():
    assert find_type_by_name([NEWS, STATUS], "status") == STATUS
    assert find_type_by_name([NEWS, STATUS], "News") == NEWS


def test_find_type_by_name_returns_none_when_absent():
    assert find_type_by_name([NEWS], "STATUS") is None
    assert find_type_by_name([], "STATUS") is None


def test_zero_id_type_does_not_exist():
    assert STATUS.exists
    assert not NotificationType(id=0, name="", rate_limit_sec=0, request_limit=0).exists


def test_type_catalog_codec_keeps_every_field():
    disabled = NotificationType(id=9, name="OLD", rate_limit_sec=5, request_limit=1, enabled=False)

    decoded = decode_types(encode_types([STATUS, disabled]))

    assert decoded == [STATUS, disabled]


def test_decode_rejects_garbage():
    with pytest.raises(Exception):
        decode_types("not json")


def test_type_not_found_message_names_type():
    err = TypeNotFoundError("type_test")

    assert str(err) == "notification type 'type_test' not found or disabled"
    assert err.type_name == "type_test"


def test_window_start_keeps_sub_second_precision():
    now = START + timedelta(seconds=30, microseconds=750_000)

    assert rate_window_start(now, STATUS) == START + timedelta(seconds=-90, microseconds=750_000)


def test_empty_history_is_never_limited():
    zero_limit = NotificationType(id=5, name="ZERO", rate_limit_sec=60, request_limit=0)

    assert not is_rate_limited([], STATUS)
    assert not is_rate_limited([], zero_limit)


def test_limited_once_history_reaches_request_limit():
    assert not is_rate_limited([_record(1)], STATUS)
    assert is_rate_limited([_record(1), _record(2)], STATUS)
    assert is_rate_limited([_record(1), _record(2), _record(3)], STATUS)
