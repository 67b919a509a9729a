"""Functions used from test code.

Stubbing::

    do_return("first").when(foo).get(0)
    do_throw(IOError("disk")).when(foo).save(any_str())

Verification::

    verify(foo).add("jim")
    verify(foo, at_least_once()).get(any_int())
    verify_no_more_interactions(foo)

Every function works on the current :class:`MockContext`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from littlemock.core.context import current_context
from littlemock.core.matchers import Anything, ArgThat, Captor, Equals, InstanceOf, Matcher
from littlemock.core.modes import VerificationMode, times
from littlemock.core.stubs import Action, Answer, DoNothing, ReturnValue, ThrowValue

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
V = TypeVar("V")

_EXACTLY_ONCE = times(1)


def mock(interface: type[T], name: str | None = None) -> T:
    """Create a mock of ``interface``, an ABC or Protocol class."""
    return current_context().mock(interface, name)


class Stubber:
    """Holds an action until ``when(mock)`` names the call it applies to."""

    __slots__ = ("action",)

    def __init__(self, action: Action) -> None:
        self.action = action

    def when(self, mock: T) -> T:
        """Return a proxy; calling a method on it registers the stub."""
        return current_context().when(mock, self.action)


def do_return(value: Any) -> Stubber:
    return Stubber(ReturnValue(value))


def do_throw(exception: BaseException | type[BaseException]) -> Stubber:
    return Stubber(ThrowValue(exception))


def do_answer(fn: Callable[..., Any]) -> Stubber:
    """Stub with a callable receiving the call's arguments.

    Its return value, or exception, becomes the outcome of the call.
    """
    return Stubber(Answer(fn))


def do_nothing() -> Stubber:
    return Stubber(DoNothing())


def verify(mock: T, mode: VerificationMode | None = _EXACTLY_ONCE) -> T:
    """Return a proxy; calling a method on it verifies that call happened.

    Args:
        mock: Mock to verify
        mode: Expected call count, exactly once by default
    """
    return current_context().verify(mock, mode)


def verify_zero_interactions(*mocks: Any) -> None:
    current_context().verify_zero_interactions(*mocks)


def verify_no_more_interactions(*mocks: Any) -> None:
    """Fail if any call on ``mocks`` was neither verified nor answered by a stub."""
    current_context().verify_no_more_interactions(*mocks)


def reset(*mocks: Any) -> None:
    current_context().reset(*mocks)


def check_for_programming_errors() -> None:
    """Fail if matchers were created without being consumed; call from teardown."""
    current_context().check_for_programming_errors()


# --- Matchers ---


def _push(matcher: Matcher, placeholder: V) -> V:
    return current_context().matchers.push(matcher, placeholder)


def eq(value: V) -> V:
    return _push(Equals(value), value)


def any_bool() -> bool:
    return _push(InstanceOf(bool, accept_none=False, label="any_bool()"), False)


def any_int() -> int:
    return _push(InstanceOf(int, accept_none=False, reject_bool=True, label="any_int()"), 0)


def any_float() -> float:
    return _push(InstanceOf((int, float), accept_none=False, reject_bool=True, label="any_float()"), 0.0)


def any_complex() -> complex:
    matcher = InstanceOf((int, float, complex), accept_none=False, reject_bool=True, label="any_complex()")
    return _push(matcher, 0j)


def any_str() -> str:
    return _push(InstanceOf(str, label="any_str()"), None)  # type: ignore[arg-type]


def any_bytes() -> bytes:
    return _push(InstanceOf(bytes, label="any_bytes()"), None)  # type: ignore[arg-type]


def any_object() -> Any:
    return _push(Anything(), None)


def is_a(cls: type[V]) -> V:
    """Instances of ``cls`` (subclasses included) and None."""
    return _push(InstanceOf(cls), None)  # type: ignore[arg-type]


def arg_that(predicate: Callable[[Any], Any]) -> Any:
    return _push(ArgThat(predicate), None)


def captor() -> Captor[Any]:
    """Create an argument captor; use ``captor.capture()`` as an argument."""
    return Captor()
