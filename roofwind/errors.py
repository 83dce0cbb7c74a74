"""Exception types raised by the roofwind calculation core."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


class InvalidInputError(ValueError):
    """Non-physical or unrecognised input to a wind load calculation.

    Subclasses :class:`ValueError` so callers that already treat
    ``ValueError`` as a rejected request keep working.
    """


def coerce_enum(enum_cls: type[E], value: E | str, label: str) -> E:
    """Return *value* as a member of *enum_cls*.

    Accepts either a member or its string value (case-insensitive).

    Raises
    ------
    InvalidInputError
        If *value* does not name a member of *enum_cls*.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip()
        for member in enum_cls:
            if member.value.lower() == key.lower():
                return member
    allowed = ", ".join(m.value for m in enum_cls)
    raise InvalidInputError(f"Invalid {label}: {value!r}. Must be one of {allowed}.")


def require_positive(value: float, label: str) -> float:
    """Raise :class:`InvalidInputError` unless *value* is a positive number."""
    if value is None or not value > 0:
        raise InvalidInputError(f"{label} must be greater than zero (got {value!r})")
    return float(value)


__all__ = ["InvalidInputError", "coerce_enum", "require_positive"]
