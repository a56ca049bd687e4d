# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy raised by the argument checks."""

from __future__ import annotations

from typing import Any, Optional, Tuple, Type, Union


NULL_MESSAGE = "Value cannot be null."
EMPTY_MESSAGE = "Value cannot be empty."
WHITESPACE_MESSAGE = "Value cannot consist only of white-space characters."
DOUBLE_ENUMERATION_MESSAGE = (
    "Using not_null_or_empty with a single-pass iterable may cause double enumeration. "
    "Please use a collection instead."
)


class GuardClauseError(Exception):
    """Base class for every error raised by guardclause."""


class ConfigurationError(GuardClauseError):
    """Raised when an extension check is registered incorrectly."""


class ArgumentError(GuardClauseError, ValueError):
    """A value passed for ``param_name`` violated a precondition.

    ``param_name`` is exactly the name handed to the check, so callers and
    tests can tell which parameter was rejected without parsing ``message``.
    """

    def __init__(self, param_name: str, message: str):
        self.param_name = param_name
        self.message = message
        super().__init__(self._format())

    def _format(self) -> str:
        return f"{self.message} (Parameter '{self.param_name}')"

    def _reduce_args(self) -> tuple:
        return (self.param_name, self.message)

    def __reduce__(self):
        # self.args only holds the formatted text; rebuild from constructor arguments.
        return (type(self), self._reduce_args())


class ArgumentNullError(ArgumentError):
    """The value was ``None``."""

    def __init__(self, param_name: str, message: str = NULL_MESSAGE):
        super().__init__(param_name, message)


class ArgumentEmptyError(ArgumentError):
    """The value was a zero-length string or collection."""

    def __init__(self, param_name: str, message: str = EMPTY_MESSAGE):
        super().__init__(param_name, message)


class ArgumentWhiteSpaceError(ArgumentError):
    """The value was a string made only of white-space characters."""

    def __init__(self, param_name: str, message: str = WHITESPACE_MESSAGE):
        super().__init__(param_name, message)


class ArgumentTypeMismatchError(ArgumentError, TypeError):
    """The value is not an instance of the requested type."""

    def __init__(
        self,
        param_name: str,
        actual_value: Any,
        expected_type: Union[type, Tuple[type, ...]],
        message: Optional[str] = None,
    ):
        self.actual_value = actual_value
        self.expected_type = expected_type
        if message is None:
            message = f'Value "{actual_value}" is not of type "{describe_type(expected_type)}".'
        super().__init__(param_name, message)

    def _reduce_args(self) -> tuple:
        return (self.param_name, self.actual_value, self.expected_type, self.message)


class ArgumentOutOfRangeError(ArgumentError):
    """The value lies outside the allowed bound."""

    def __init__(self, param_name: str, actual_value: Any, message: str):
        self.actual_value = actual_value
        super().__init__(param_name, message)

    def _format(self) -> str:
        return f"{super()._format()} Actual value was {self.actual_value!r}."

    def _reduce_args(self) -> tuple:
        return (self.param_name, self.actual_value, self.message)


class DoubleEnumerationError(GuardClauseError, TypeError):
    """``not_null_or_empty`` was handed a single-pass iterable."""

    def __init__(self, message: str = DOUBLE_ENUMERATION_MESSAGE):
        self.message = message
        super().__init__(message)


def describe_type(expected_type: Union[Type[Any], Tuple[type, ...]]) -> str:
    if isinstance(expected_type, tuple):
        return " | ".join(describe_type(t) for t in expected_type)
    module = getattr(expected_type, "__module__", "builtins")
    qualname = getattr(expected_type, "__qualname__", repr(expected_type))
    if module == "builtins":
        return qualname
    return f"{module}.{qualname}"


__all__ = [
    "GuardClauseError",
    "ConfigurationError",
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentEmptyError",
    "ArgumentWhiteSpaceError",
    "ArgumentTypeMismatchError",
    "ArgumentOutOfRangeError",
    "DoubleEnumerationError",
    "describe_type",
]
