# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from collections.abc import Mapping

import pytest

from guardclause import argument
from guardclause.exceptions import ArgumentNullError, ArgumentTypeMismatchError


class Animal:
    pass


class Dog(Animal):
    pass


def test_cast_returns_same_object_when_type_matches():
    value = "abc"
    assert argument.cast("x", value, str) is value


def test_cast_accepts_subclasses_and_abcs():
    dog = Dog()
    assert argument.cast("pet", dog, Animal) is dog
    assert argument.cast("config", {"a": 1}, Mapping) == {"a": 1}


def test_cast_accepts_tuple_of_types():
    assert argument.cast("x", 1.5, (int, float)) == 1.5


def test_cast_rejects_wrong_type():
    value = object()

    with pytest.raises(ArgumentTypeMismatchError) as error:
        argument.cast("x", value, str)

    failure = error.value
    assert failure.param_name == "x"
    assert failure.actual_value is value
    assert failure.expected_type is str
    assert 'is not of type "str"' in failure.message
    assert str(value) in failure.message


def test_type_mismatch_names_qualified_type():
    with pytest.raises(ArgumentTypeMismatchError) as error:
        argument.cast("pet", "rex", Dog)

    assert error.value.message == f'Value "rex" is not of type "{__name__}.Dog".'


def test_type_mismatch_is_also_a_type_error():
    with pytest.raises(TypeError):
        argument.cast("x", 1, str)


def test_cast_lets_none_through():
    assert argument.cast("x", None, str) is None


def test_not_null_and_cast_rejects_none():
    with pytest.raises(ArgumentNullError) as error:
        argument.not_null_and_cast("x", None, object)
    assert error.value.param_name == "x"


def test_not_null_and_cast_rejects_wrong_type():
    with pytest.raises(ArgumentTypeMismatchError) as error:
        argument.not_null_and_cast("x", 42, str)
    assert error.value.param_name == "x"
    assert error.value.actual_value == 42


def test_not_null_and_cast_returns_value():
    assert argument.not_null_and_cast("x", "abc", str) == "abc"


def test_bool_is_an_int():
    assert argument.cast("flag", True, int) is True


@pytest.mark.parametrize("value,expected_type", [("abc", str), (Dog(), Animal), (None, str), (2, (int, float))])
def test_cast_is_idempotent(value, expected_type):
    once = argument.cast("x", value, expected_type)
    assert argument.cast("x", once, expected_type) is value
