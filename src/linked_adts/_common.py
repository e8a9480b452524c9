"""Helpers shared by the list and tree implementations."""

from __future__ import annotations

from typing import Any, Iterable

from .errors import OutOfRangeError


def are_equal(x: Any, y: Any) -> bool:
    """
    Null-safe equality: two None values are equal,
    None is never equal to a present value.
    """
    if x is None:
        return y is None
    if y is None:
        return False
    return x == y


def bracketed(values: Iterable[Any]) -> str:
    """Renders values as a bracketed, comma-separated string, e.g. [1, 2, 3]"""
    return "[" + ", ".join(str(v) for v in values) + "]"


def check_index(index: int) -> None:
    """Rejects non-integer and negative indices."""
    # bool is an int subclass, but True/False are never meant as positions
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"Index must be an int, found: {type(index).__name__}")
    if index < 0:
        raise OutOfRangeError(f"Index must be non-negative, found: {index}")
