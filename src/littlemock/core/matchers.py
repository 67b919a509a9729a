"""Argument matchers and value capture."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Literal, TypeVar

from littlemock.core.errors import UsageError
from littlemock.core.kinds import type_name

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

MatcherOrigin = Literal["equality", "wildcard", "type-check", "predicate", "capture"]


class Matcher(ABC):
    """Predicate over the value passed at one argument position."""

    origin: ClassVar[MatcherOrigin]

    @abstractmethod
    def matches(self, value: Any) -> bool:
        """Return True if ``value`` is accepted."""
        ...

    def on_match(self, value: Any) -> None:
        """Observe a value from a call this matcher took part in accepting."""

    @abstractmethod
    def describe(self) -> str: ...

    def __repr__(self) -> str:
        return self.describe()


class Equals(Matcher):
    """Accepts values equal to an expected value."""

    origin = "equality"

    def __init__(self, expected: Any) -> None:
        self.expected = expected

    def matches(self, value: Any) -> bool:
        return value is self.expected or bool(value == self.expected)

    def describe(self) -> str:
        return f"eq({self.expected!r})"


class Anything(Matcher):
    """Accepts every value, including None."""

    origin = "wildcard"

    def matches(self, value: Any) -> bool:
        return True

    def describe(self) -> str:
        return "any_object()"


class InstanceOf(Matcher):
    """Accepts instances of the given types.

    ``None`` is accepted when ``accept_none`` is set. ``bool`` values are
    refused when ``reject_bool`` is set, so numeric matchers do not accept
    booleans.
    """

    origin = "type-check"

    def __init__(
        self,
        types: type | tuple[type, ...],
        *,
        accept_none: bool = True,
        reject_bool: bool = False,
        label: str | None = None,
    ) -> None:
        self.types = types if isinstance(types, tuple) else (types,)
        self.accept_none = accept_none
        self.reject_bool = reject_bool
        self.label = label

    def matches(self, value: Any) -> bool:
        if value is None:
            return self.accept_none
        if self.reject_bool and isinstance(value, bool):
            return False
        return isinstance(value, self.types)

    def describe(self) -> str:
        if self.label:
            return self.label
        return f"is_a({', '.join(type_name(t) for t in self.types)})"


class ArgThat(Matcher):
    """Accepts values for which a predicate returns a truthy result."""

    origin = "predicate"

    def __init__(self, predicate: Callable[[Any], Any]) -> None:
        self.predicate = predicate

    def matches(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def describe(self) -> str:
        name = getattr(self.predicate, "__name__", repr(self.predicate))
        return f"arg_that({name})"


class Captor(Matcher, Generic[T]):
    """Matcher that accepts anything and keeps every value it accepted.

    Used in a stub, values are recorded when the stubbed method is called.
    Used in a verification, values are recorded from the matching calls
    while verifying. Either way the history is oldest first.
    """

    origin = "capture"

    def __init__(self) -> None:
        self._values: list[T] = []

    def capture(self) -> T:
        """Push this captor onto the current matcher stack.

        Returns:
            None, as a placeholder argument for the specified call
        """
        from littlemock.core.context import current_context

        return current_context().matchers.push(self, None)

    def matches(self, value: Any) -> bool:
        return True

    def on_match(self, value: Any) -> None:
        self._values.append(value)

    def get_value(self) -> T:
        """Most recently captured value.

        Raises:
            UsageError: Nothing has been captured yet
        """
        if not self._values:
            raise UsageError("No value has been captured by this captor")
        return self._values[-1]

    def get_all_values(self) -> list[T]:
        """Every captured value, oldest first."""
        return list(self._values)

    def describe(self) -> str:
        return "capture()"
