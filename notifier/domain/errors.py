from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base domain error, safe to show to the caller."""


class ValidationError(DomainError):
    def __init__(self, violations: Sequence[str]) -> None:
        self.violations: tuple[str, ...] = tuple(violations)
        super().__init__("\n".join(self.violations))


class TypeNotFoundError(DomainError):
    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"notification type '{type_name}' not found or disabled")


class RateLimitExceededError(DomainError):
    def __init__(self, message: str = "notification rate limit reached") -> None:
        super().__init__(message)
