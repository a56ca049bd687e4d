# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Extension point for argument checks defined outside this package.

Third-party code registers its own checks with :func:`extension` and calls
them through :data:`guardclause.argument.ex`, next to the built-in ones::

    from guardclause import argument
    from guardclause.extensible import extension

    @extension
    def port(name, value):
        argument.greater_than(name, value, 0)
        return argument.less_than_or_equal_to(name, value, 65535)

    argument.ex.port("port", 8080)
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., object])


class Extensible:
    """Stateless marker that anchors extension checks.

    The marker has no value of its own: comparing, hashing or printing it is
    a programming error and raises ``TypeError``.
    """

    __slots__ = ()

    def __eq__(self, other):
        raise TypeError("Extensible does not support equality comparison.")

    def __ne__(self, other):
        raise TypeError("Extensible does not support equality comparison.")

    def __hash__(self):
        raise TypeError("Extensible does not support hashing.")

    def __str__(self):
        raise TypeError("Extensible does not support string conversion.")

    def __format__(self, format_spec):
        raise TypeError("Extensible does not support string conversion.")

    def __repr__(self):
        return "<guardclause.Extensible>"


_BUILTIN_ATTRIBUTES = frozenset(dir(Extensible))


def extension(func: F) -> F:
    """Register ``func`` as ``argument.ex.<func.__name__>``.

    The function is returned unchanged so it stays directly callable.
    """

    name = getattr(func, "__name__", None)
    if not callable(func) or not name:
        raise ConfigurationError(f"Extension checks must be named callables, got {func!r}")
    if name.startswith("_"):
        raise ConfigurationError(f"Extension check name '{name}' must not start with an underscore")
    if name in _BUILTIN_ATTRIBUTES or name in vars(Extensible):
        raise ConfigurationError(f"An extension check named '{name}' is already registered")

    setattr(Extensible, name, staticmethod(func))
    logger.debug("Registered extension check '%s' from %s", name, getattr(func, "__module__", "?"))
    return func


def unregister_extension(name: str) -> None:
    """Remove an extension check previously added with :func:`extension`."""

    if name in _BUILTIN_ATTRIBUTES or name not in vars(Extensible):
        raise ConfigurationError(f"No extension check named '{name}' is registered")
    delattr(Extensible, name)
    logger.debug("Unregistered extension check '%s'", name)


__all__ = [
    "Extensible",
    "extension",
    "unregister_extension",
]
