"""guardclause - argument precondition checks.

Each check validates a single argument and returns it unchanged, or raises
an :class:`ArgumentError` subclass naming the offending parameter.
"""

from . import argument
from .argument import (
    cast,
    ex,
    greater_than,
    greater_than_or_equal_to,
    less_than,
    less_than_or_equal_to,
    not_null,
    not_null_and_cast,
    not_null_or_empty,
    not_null_or_whitespace,
    positive_non_zero,
    positive_or_zero,
)
from .exceptions import (
    ArgumentEmptyError,
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ArgumentTypeMismatchError,
    ArgumentWhiteSpaceError,
    ConfigurationError,
    DoubleEnumerationError,
    GuardClauseError,
)
from .extensible import Extensible, extension, unregister_extension

__version__ = "0.1.0"

__all__ = [
    "argument",
    "cast",
    "ex",
    "greater_than",
    "greater_than_or_equal_to",
    "less_than",
    "less_than_or_equal_to",
    "not_null",
    "not_null_and_cast",
    "not_null_or_empty",
    "not_null_or_whitespace",
    "positive_non_zero",
    "positive_or_zero",
    "ArgumentEmptyError",
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "ArgumentTypeMismatchError",
    "ArgumentWhiteSpaceError",
    "ConfigurationError",
    "DoubleEnumerationError",
    "GuardClauseError",
    "Extensible",
    "extension",
    "unregister_extension",
]
