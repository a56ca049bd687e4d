# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from decimal import Decimal

import pytest

from guardclause import argument
from guardclause.exceptions import ArgumentError, ArgumentNullError


@pytest.mark.parametrize(
    "value",
    [object(), "abc", [], {}, 0, 0.0, False, Decimal("1.5"), b""],
)
def test_not_null_returns_same_object(value):
    assert argument.not_null("x", value) is value


def test_not_null_rejects_none_with_param_name():
    with pytest.raises(ArgumentNullError) as error:
        argument.not_null("x", None)

    assert error.value.param_name == "x"
    assert error.value.message == "Value cannot be null."
    assert str(error.value) == "Value cannot be null. (Parameter 'x')"


def test_null_failure_is_an_argument_error_and_value_error():
    with pytest.raises(ArgumentError):
        argument.not_null("x", None)
    with pytest.raises(ValueError):
        argument.not_null("x", None)


def test_not_null_is_idempotent():
    value = object()
    assert argument.not_null("x", argument.not_null("x", value)) is value


def test_falsy_values_are_present():
    """Only None counts as missing; zero and empty containers do not."""
    assert argument.not_null("count", 0) == 0
    assert argument.not_null("flag", False) is False
    assert argument.not_null("items", []) == []


def test_inline_guard_clause_usage():
    def connect(host, port):
        host = argument.not_null("host", host)
        port = argument.not_null("port", port)
        return f"{host}:{port}"

    assert connect("localhost", 8080) == "localhost:8080"
    with pytest.raises(ArgumentNullError) as error:
        connect("localhost", None)
    assert error.value.param_name == "port"
