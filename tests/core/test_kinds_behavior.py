"""Behavior tests for value kinds, zero values and return compatibility."""

from __future__ import annotations

from enum import IntEnum

import pytest

from littlemock.core.kinds import StubbedValue, ValueKind, default_value, kind_of, type_name, unbox
from tests.test_doubles.interfaces import Bar


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


def test_kind_of_declared_types():
    assert kind_of(None) is ValueKind.VOID
    assert kind_of(bool) is ValueKind.BOOLEAN
    assert kind_of(int) is ValueKind.INTEGER
    assert kind_of(float) is ValueKind.FLOAT
    assert kind_of(complex) is ValueKind.COMPLEX
    assert kind_of("int") is ValueKind.INTEGER
    assert kind_of(str) is ValueKind.REFERENCE
    assert kind_of(list[str]) is ValueKind.REFERENCE
    assert kind_of(int | None) is ValueKind.REFERENCE


def test_default_values_are_zeroes_and_none():
    assert default_value(ValueKind.BOOLEAN) is False
    assert default_value(ValueKind.INTEGER) == 0
    assert isinstance(default_value(ValueKind.FLOAT), float)
    assert default_value(ValueKind.COMPLEX) == 0j
    assert default_value(ValueKind.REFERENCE) is None
    assert default_value(ValueKind.VOID) is None


def test_stubbed_value_widening():
    assert StubbedValue(3).fits(float)
    assert StubbedValue(3).fits(complex)
    assert StubbedValue(2.5).fits(complex)
    assert not StubbedValue(2.5).fits(int)
    assert not StubbedValue(True).fits(int)
    assert not StubbedValue(1).fits(bool)
    assert StubbedValue(Priority.HIGH).fits(int)


def test_stubbed_value_none_and_void():
    assert StubbedValue(None).fits(None)
    assert not StubbedValue(1).fits(None)
    assert StubbedValue(None).fits(int)
    assert StubbedValue(None).fits(str)


def test_stubbed_value_references():
    assert StubbedValue("x").fits(str)
    assert StubbedValue("x").fits(str | None)
    assert StubbedValue("x").fits(object)
    assert not StubbedValue(3).fits(str)
    assert StubbedValue(["a"]).fits(list[str])
    assert not StubbedValue("x").fits(Bar)


def test_unbox_widens_numbers():
    value = unbox(3, float)

    assert value == 3.0
    assert isinstance(value, float)
    assert unbox(2, complex) == 2 + 0j


def test_unbox_keeps_values_of_the_declared_kind():
    assert unbox(Priority.LOW, int) is Priority.LOW
    assert unbox("x", str) == "x"
    assert unbox(None, str) is None


def test_unbox_void_discards_value():
    assert unbox("ignored", None) is None


def test_unbox_rejects_none_for_primitives():
    with pytest.raises(TypeError):
        unbox(None, int)


def test_unbox_rejects_incompatible_values():
    with pytest.raises(TypeError):
        unbox(True, int)
    with pytest.raises(TypeError):
        unbox("x", int)
    with pytest.raises(TypeError):
        unbox(5, str)


def test_type_name():
    assert type_name(int) == "int"
    assert type_name(None) == "None"
    assert type_name(Bar) == "Bar"
    assert type_name(list[str]) == "list[str]"
