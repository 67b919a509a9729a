"""Value kinds, zero values and return-type compatibility."""

from __future__ import annotations

import types
import typing
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ValueKind(StrEnum):
    """How a declared type is treated when producing or checking values."""

    VOID = "void"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    COMPLEX = "complex"
    REFERENCE = "reference"


PRIMITIVE_KINDS = frozenset({ValueKind.BOOLEAN, ValueKind.INTEGER, ValueKind.FLOAT, ValueKind.COMPLEX})

_KIND_BY_TYPE: dict[Any, ValueKind] = {
    None: ValueKind.VOID,
    type(None): ValueKind.VOID,
    "None": ValueKind.VOID,
    bool: ValueKind.BOOLEAN,
    "bool": ValueKind.BOOLEAN,
    int: ValueKind.INTEGER,
    "int": ValueKind.INTEGER,
    float: ValueKind.FLOAT,
    "float": ValueKind.FLOAT,
    complex: ValueKind.COMPLEX,
    "complex": ValueKind.COMPLEX,
}

_ZERO_VALUES: dict[ValueKind, Any] = {
    ValueKind.BOOLEAN: False,
    ValueKind.INTEGER: 0,
    ValueKind.FLOAT: 0.0,
    ValueKind.COMPLEX: 0j,
}

# Kinds each primitive kind accepts without an explicit conversion
_WIDENING: dict[ValueKind, frozenset[ValueKind]] = {
    ValueKind.BOOLEAN: frozenset({ValueKind.BOOLEAN}),
    ValueKind.INTEGER: frozenset({ValueKind.INTEGER}),
    ValueKind.FLOAT: frozenset({ValueKind.INTEGER, ValueKind.FLOAT}),
    ValueKind.COMPLEX: frozenset({ValueKind.INTEGER, ValueKind.FLOAT, ValueKind.COMPLEX}),
}

_CONVERTERS: dict[ValueKind, Any] = {
    ValueKind.BOOLEAN: bool,
    ValueKind.INTEGER: int,
    ValueKind.FLOAT: float,
    ValueKind.COMPLEX: complex,
}


def kind_of(declared: Any) -> ValueKind:
    """Classify a declared annotation."""
    try:
        return _KIND_BY_TYPE.get(declared, ValueKind.REFERENCE)
    except TypeError:
        # Unhashable annotation objects are always references
        return ValueKind.REFERENCE


def kind_of_value(value: Any) -> ValueKind:
    """Classify a runtime value, honouring subclasses such as ``IntEnum``."""
    if value is None:
        return ValueKind.VOID
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, complex):
        return ValueKind.COMPLEX
    return ValueKind.REFERENCE


def default_value(kind: ValueKind) -> Any:
    """Zero value returned by an unstubbed call."""
    return _ZERO_VALUES.get(kind)


def type_name(declared: Any) -> str:
    """Short display name for an annotation, e.g. ``int`` or ``list[str]``."""
    if declared is None or declared is type(None):
        return "None"
    if isinstance(declared, str):
        return declared
    if isinstance(declared, type) and not typing.get_args(declared):
        return declared.__name__
    return repr(declared).replace("typing.", "")


@dataclass(frozen=True, slots=True)
class StubbedValue:
    """A value handed to a stub, tagged with the kind of its runtime type."""

    value: Any

    @property
    def kind(self) -> ValueKind:
        return kind_of_value(self.value)

    @property
    def type_name(self) -> str:
        return type(self.value).__name__

    def fits(self, declared: Any) -> bool:
        """Whether this value may be registered for a method returning ``declared``.

        ``None`` is accepted for primitive kinds: the mismatch only surfaces
        when the stubbed method is called.
        """
        target = kind_of(declared)
        if target is ValueKind.VOID:
            return self.value is None
        if self.value is None:
            return True
        if target in PRIMITIVE_KINDS:
            return self.kind in _WIDENING[target]
        return is_instance(self.value, declared)


def is_instance(value: Any, declared: Any) -> bool:
    """Reference compatibility of ``value`` with an annotation.

    Annotations that cannot be checked at runtime accept everything.
    """
    if declared is Any or declared is object or isinstance(declared, (str, typing.TypeVar)):
        return True
    if declared is None or declared is type(None):
        return value is None

    origin = typing.get_origin(declared)
    if origin is typing.Union or origin is types.UnionType:
        return any(is_instance(value, arg) for arg in typing.get_args(declared))
    if origin is typing.Annotated:
        return is_instance(value, typing.get_args(declared)[0])
    if origin is typing.Literal:
        return value in typing.get_args(declared)
    if origin is not None:
        declared = origin

    if not isinstance(declared, type):
        return True
    kind = kind_of(declared)
    if kind in PRIMITIVE_KINDS:
        return kind_of_value(value) in _WIDENING[kind]
    if declared in type(value).__mro__:
        return True
    try:
        return isinstance(value, declared)
    except TypeError:
        # Protocols that are not runtime_checkable
        return True


def unbox(value: Any, declared: Any) -> Any:
    """Convert a stub result to the declared return type at call time.

    Raises:
        TypeError: ``value`` cannot be returned from a method declared to
            return ``declared``.
    """
    kind = kind_of(declared)
    if kind is ValueKind.VOID:
        return None
    if kind in PRIMITIVE_KINDS:
        if value is None:
            raise TypeError(f"cannot return None from a method returning {type_name(declared)}")
        actual = kind_of_value(value)
        if actual not in _WIDENING[kind]:
            raise TypeError(f"{type(value).__name__} cannot be converted to {type_name(declared)}")
        return value if actual is kind else _CONVERTERS[kind](value)
    if value is not None and not is_instance(value, declared):
        raise TypeError(f"{type(value).__name__} cannot be cast to {type_name(declared)}")
    return value
