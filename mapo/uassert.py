"""Assertion helpers that log the failure and raise."""

from __future__ import annotations

from typing import Any

from .log import get_engine_logger


class AssertionFailure(AssertionError):
    """Raised when an engine assertion does not hold."""


def ensure(condition: Any, message: str) -> None:
    """Raise AssertionFailure with ``message`` unless ``condition`` is truthy."""
    if not condition:
        get_engine_logger().error("ASSERT FAILED: %s", message, stacklevel=2)
        raise AssertionFailure(message)


def ensure_equal(left: Any, right: Any, message: str) -> None:
    """Raise AssertionFailure unless ``left == right``."""
    if not left == right:
        get_engine_logger().error("ASSERT FAILED: %s", message, stacklevel=2)
        raise AssertionFailure(message)


def ensure_not_equal(left: Any, right: Any, message: str) -> None:
    """Raise AssertionFailure if ``left == right``."""
    if left == right:
        get_engine_logger().error("ASSERT FAILED: %s", message, stacklevel=2)
        raise AssertionFailure(message)