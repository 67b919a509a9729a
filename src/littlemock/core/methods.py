"""Method identities discovered on interfaces."""

from __future__ import annotations

import abc
import inspect
import typing
from dataclasses import dataclass, field
from typing import Any

from littlemock.core.kinds import ValueKind, kind_of, type_name

# Classes whose members belong to the typing/abc machinery, not to user interfaces
_MACHINERY_MODULES = frozenset({"builtins", "abc", "typing", "typing_extensions"})


@dataclass(frozen=True, slots=True)
class MethodIdentity:
    """Declaring type, name and parameter types of an intercepted method.

    Two identities are equal when those three agree. The return type, the
    parameter names and the signature are carried for dispatch and display.
    """

    declaring_type: type
    name: str
    parameter_types: tuple[Any, ...]
    return_type: Any = field(default=object, compare=False)
    parameter_names: tuple[str, ...] = field(default=(), compare=False)
    signature: inspect.Signature | None = field(default=None, compare=False, repr=False)

    @property
    def arity(self) -> int:
        return len(self.parameter_types)

    @property
    def return_kind(self) -> ValueKind:
        return kind_of(self.return_type)

    @property
    def is_universal(self) -> bool:
        """True for the identity, hash and representation operations."""
        return self.declaring_type is object and self.name in _UNIVERSAL_NAMES

    def bind(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[Any, ...]:
        """Normalise call arguments to one positional value per parameter.

        Raises:
            TypeError: The arguments do not fit the method's signature.
        """
        if self.signature is None:
            return tuple(args)
        bound = self.signature.bind(None, *args, **kwargs)
        bound.apply_defaults()
        return tuple(bound.arguments[name] for name in self.parameter_names)

    def describe_parameters(self) -> str:
        return ", ".join(type_name(tp) for tp in self.parameter_types)

    def describe(self) -> str:
        """Render as ``(return) Declaring.name(params)``."""
        return (
            f"({type_name(self.return_type)}) "
            f"{self.declaring_type.__name__}.{self.name}({self.describe_parameters()})"
        )

    @classmethod
    def from_function(cls, declaring_type: type, func: Any) -> MethodIdentity:
        """Build the identity of ``func`` as declared on ``declaring_type``."""
        signature = inspect.signature(func)
        try:
            hints = typing.get_type_hints(func)
        except (NameError, TypeError, AttributeError):
            # Unresolvable forward references keep their string form
            hints = dict(getattr(func, "__annotations__", {}))

        parameters = list(signature.parameters.values())[1:]
        names = tuple(p.name for p in parameters)
        types = tuple(hints.get(p.name, object) for p in parameters)
        return_type = hints.get("return", object)
        return cls(
            declaring_type=declaring_type,
            name=func.__name__,
            parameter_types=types,
            return_type=return_type,
            parameter_names=names,
            signature=signature,
        )


EQUALS = MethodIdentity(object, "__eq__", (object,), bool, ("other",))
HASH = MethodIdentity(object, "__hash__", (), int)
REPR = MethodIdentity(object, "__repr__", (), str)

UNIVERSAL_METHODS = frozenset({EQUALS, HASH, REPR})
_UNIVERSAL_NAMES = frozenset(method.name for method in UNIVERSAL_METHODS)


def interface_methods(interface: type) -> list[MethodIdentity]:
    """All interceptable methods of ``interface``, sorted by name.

    Plain functions only: dunder methods, static and class methods,
    properties and members of the typing/abc machinery are left alone.
    """
    methods: list[MethodIdentity] = []
    for name in sorted(dir(interface)):
        if name.startswith("__") and name.endswith("__"):
            continue
        member = inspect.getattr_static(interface, name)
        if not inspect.isfunction(member):
            continue
        declaring = _declaring_type(interface, name)
        if declaring.__module__ in _MACHINERY_MODULES or declaring is abc.ABC:
            continue
        methods.append(MethodIdentity.from_function(declaring, member))
    return methods


def _declaring_type(interface: type, name: str) -> type:
    for klass in interface.__mro__:
        if name in vars(klass):
            return klass
    return interface
