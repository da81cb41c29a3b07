from __future__ import annotations

from .errors import ValidationError
from .models import SendRequest


def validate_send_request(request: SendRequest) -> None:
    """Report every violated rule at once, one per line."""
    violations: list[str] = []
    if not request.message.strip():
        violations.append("message is required")
    if not request.type.strip():
        violations.append("type is required")
    if request.user_id <= 0:
        violations.append("user id is required")

    if violations:
        raise ValidationError(violations)
