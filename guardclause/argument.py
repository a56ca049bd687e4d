# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Argument precondition checks.

Every check returns the value it was given when the value is valid, so a
check can be used inline as an expression::

    from guardclause import argument

    def connect(host, port, retries=3):
        host = argument.not_null_or_whitespace("host", host)
        port = argument.positive_non_zero("port", port)
        retries = argument.positive_or_zero("retries", retries)

When a value is invalid the check raises an
:class:`~guardclause.exceptions.ArgumentError` subclass whose ``param_name``
is the name passed in. Checks keep no state and are safe to call from any
thread.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Any, Optional, Tuple, Type, TypeVar, Union, overload

from ._collections import sized_length
from .config import failure_logging_enabled
from .exceptions import (
    ArgumentEmptyError,
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ArgumentTypeMismatchError,
    ArgumentWhiteSpaceError,
)
from .extensible import Extensible

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=Union[str, bytes])
C = TypeVar("C")

ex: Extensible = Extensible()
"""Anchor for extension checks, see :mod:`guardclause.extensible`."""


def _fail(error: ArgumentError) -> ArgumentError:
    if failure_logging_enabled():
        logger.debug(
            "Argument check failed for '%s': %s (%s)",
            error.param_name,
            error.message,
            type(error).__name__,
        )
    return error


_WHITE_SPACE_CONTROLS = frozenset("\t\n\x0b\x0c\r\x85")
_WHITE_SPACE_CATEGORIES = frozenset(("Zs", "Zl", "Zp"))


def _only_white_space(value: Union[str, bytes]) -> bool:
    # Separators (Zs, Zl, Zp) plus the classic control white-space;
    # unlike str.isspace(), U+001C..U+001F are not white-space.
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("latin-1")
    return all(
        ch in _WHITE_SPACE_CONTROLS or unicodedata.category(ch) in _WHITE_SPACE_CATEGORIES
        for ch in value
    )


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def not_null(name: str, value: Optional[T]) -> T:
    """Return ``value`` if it is not ``None``.

    :raises ArgumentNullError: if ``value`` is ``None``.
    """

    if value is None:
        raise _fail(ArgumentNullError(name))
    return value


def not_null_or_empty(name: str, value: Optional[C]) -> C:
    """Return ``value`` if it is neither ``None`` nor empty.

    Accepts strings, bytes and any sized collection (list, tuple, dict, set,
    range, ...). Emptiness is read from ``len()``; the value is never
    iterated.

    :raises ArgumentNullError: if ``value`` is ``None``.
    :raises ArgumentEmptyError: if ``len(value) == 0``.
    :raises DoubleEnumerationError: if ``value`` is an iterator, generator or
        other iterable without a length. Materialize it first
        (``list(items)``).
    """

    value = not_null(name, value)
    if sized_length(value) == 0:
        raise _fail(ArgumentEmptyError(name))
    return value


def not_null_or_whitespace(name: str, value: Optional[S]) -> S:
    """Return ``value`` if it contains at least one non-white-space character.

    :raises ArgumentNullError: if ``value`` is ``None``.
    :raises ArgumentEmptyError: if ``value`` is empty.
    :raises ArgumentWhiteSpaceError: if every character is white-space.
    """

    value = not_null_or_empty(name, value)
    if _only_white_space(value):
        raise _fail(ArgumentWhiteSpaceError(name))
    return value


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


@overload
def cast(name: str, value: Any, expected_type: Type[T]) -> Optional[T]: ...


@overload
def cast(name: str, value: Any, expected_type: Tuple[type, ...]) -> Any: ...


def cast(name, value, expected_type):
    """Return ``value`` narrowed to ``expected_type``.

    ``None`` is passed through untouched; use :func:`not_null_and_cast` to
    reject it as well.

    :raises ArgumentTypeMismatchError: if ``value`` is present and not an
        instance of ``expected_type``.
    """

    if value is not None and not isinstance(value, expected_type):
        raise _fail(ArgumentTypeMismatchError(name, value, expected_type))
    return value


@overload
def not_null_and_cast(name: str, value: Any, expected_type: Type[T]) -> T: ...


@overload
def not_null_and_cast(name: str, value: Any, expected_type: Tuple[type, ...]) -> Any: ...


def not_null_and_cast(name, value, expected_type):
    """Return ``value`` narrowed to ``expected_type``, rejecting ``None``.

    :raises ArgumentNullError: if ``value`` is ``None``.
    :raises ArgumentTypeMismatchError: if ``value`` is not an instance of
        ``expected_type``.
    """

    return cast(name, not_null(name, value), expected_type)


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------


def positive_or_zero(name: str, value: int) -> int:
    """Return ``value`` if it is greater than or equal to zero."""

    if not value >= 0:
        raise _fail(ArgumentOutOfRangeError(name, value, "Value cannot be negative."))
    return value


def positive_non_zero(name: str, value: int) -> int:
    """Return ``value`` if it is greater than zero."""

    if not value > 0:
        message = "Value cannot be zero." if value == 0 else "Value cannot be negative."
        raise _fail(ArgumentOutOfRangeError(name, value, message))
    return value


def _require_same_type(value: Any, threshold: Any) -> None:
    # No coercion between numeric types: 1 vs 1.5 or Decimal vs float is a caller bug.
    if isinstance(value, type(threshold)) or isinstance(threshold, type(value)):
        return
    raise TypeError(
        f"Cannot compare value of type '{type(value).__name__}' "
        f"with threshold of type '{type(threshold).__name__}'"
    )


def greater_than(name: str, value: T, threshold: T) -> T:
    """Return ``value`` if it is strictly greater than ``threshold``."""

    _require_same_type(value, threshold)
    if not value > threshold:
        raise _fail(
            ArgumentOutOfRangeError(
                name, value, f"Value cannot be less than or equal to {threshold}."
            )
        )
    return value


def greater_than_or_equal_to(name: str, value: T, threshold: T) -> T:
    """Return ``value`` if it is greater than or equal to ``threshold``."""

    _require_same_type(value, threshold)
    if not value >= threshold:
        raise _fail(ArgumentOutOfRangeError(name, value, f"Value cannot be less than {threshold}."))
    return value


def less_than(name: str, value: T, threshold: T) -> T:
    """Return ``value`` if it is strictly less than ``threshold``."""

    _require_same_type(value, threshold)
    if not value < threshold:
        raise _fail(
            ArgumentOutOfRangeError(
                name, value, f"Value cannot be greater than or equal to {threshold}."
            )
        )
    return value


def less_than_or_equal_to(name: str, value: T, threshold: T) -> T:
    """Return ``value`` if it is less than or equal to ``threshold``."""

    _require_same_type(value, threshold)
    if not value <= threshold:
        raise _fail(
            ArgumentOutOfRangeError(name, value, f"Value cannot be greater than {threshold}.")
        )
    return value


__all__ = [
    "ex",
    "not_null",
    "not_null_or_empty",
    "not_null_or_whitespace",
    "cast",
    "not_null_and_cast",
    "positive_or_zero",
    "positive_non_zero",
    "greater_than",
    "greater_than_or_equal_to",
    "less_than",
    "less_than_or_equal_to",
]
