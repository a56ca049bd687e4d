"""Classification of values handed to ``not_null_or_empty``."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sized
from typing import Any

from .exceptions import DoubleEnumerationError


def sized_length(value: Any) -> int:
    """Return ``len(value)`` without iterating it.

    Iterators and other iterables without ``__len__`` can only be walked
    once, so they are rejected before anything is consumed.
    """

    if isinstance(value, Iterator):
        raise DoubleEnumerationError()
    if isinstance(value, Sized):
        return len(value)
    if isinstance(value, Iterable):
        raise DoubleEnumerationError()
    raise TypeError(
        f"not_null_or_empty() requires a string or a sized collection, "
        f"not '{type(value).__name__}'"
    )


__all__ = ["sized_length"]
