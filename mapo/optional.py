"""A container that may or may not hold a value."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from .uassert import ensure

T = TypeVar("T")

_MISSING: Any = object()


class Optional(Generic[T]):
    """Holds at most one value; ``None`` means no value."""

    def __init__(self, value: T | None = None) -> None:
        self._value: Any = _MISSING
        self.assign(value)

    @property
    def has_value(self) -> bool:
        """Whether a value is present."""
        return self._value is not _MISSING

    @property
    def value(self) -> T:
        """The held value; raises AssertionFailure when empty."""
        ensure(self.has_value, "Value does not exist!")
        return self._value

    def value_or(self, alternative: T | None = None) -> T | None:
        """Return the held value, or ``alternative`` when empty."""
        return self._value if self.has_value else alternative

    def assign(self, value: T | Optional[T] | None) -> None:
        """Replace the content; ``None`` or an empty Optional clears it."""
        if isinstance(value, Optional):
            self._value = value._value
        elif value is None:
            self._value = _MISSING
        else:
            self._value = value

    def reset(self) -> None:
        """Drop the held value."""
        self._value = _MISSING

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Optional):
            if not self.has_value and not other.has_value:
                return True
            return self.has_value and other.has_value and self._value == other._value
        return self.has_value and self._value == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.has_value:
            return f"Optional({self._value!r})"
        return "Optional()"