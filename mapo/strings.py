"""String helpers."""

from __future__ import annotations

from .uassert import ensure

MAX_FORMAT_STRING_LENGTH = 256


def format_string(fmt: str, *args: object) -> str:
    """Apply printf-style formatting; the result must be shorter than 256 characters."""
    result = fmt % args
    ensure(len(result) < MAX_FORMAT_STRING_LENGTH, "String length!")
    return result