"""Shared validation helpers for catalog identifiers."""

from __future__ import annotations

from numbers import Integral
from typing import Any

from ..errors import ChartValidationError, OutOfRangeError

__all__ = ["name_key", "require_index"]


def require_index(field: str, value: Any, lower: int, upper: int) -> int:
    """Return ``value`` as an ``int`` when it lies in ``[lower, upper]``.

    Booleans and non-integral numbers are rejected outright; out of range
    integers raise :class:`OutOfRangeError`. Values are never clamped or
    wrapped.
    """

    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ChartValidationError(field, f"expected an integer, got {value!r}")
    index = int(value)
    if not lower <= index <= upper:
        raise OutOfRangeError(field, index, lower, upper)
    return index


def name_key(name: str) -> str:
    """Normalize a catalog name to a compact key: letters only, lowercase."""

    return "".join(ch.lower() for ch in str(name) if ch.isalpha())
