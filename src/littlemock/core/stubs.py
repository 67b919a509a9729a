"""Stub actions and the per-stand-in stub table."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from littlemock.core import messages
from littlemock.core.errors import UsageError
from littlemock.core.kinds import StubbedValue

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from littlemock.core.callsite import CallSite
    from littlemock.core.ledger import Invocation
    from littlemock.core.matchers import Matcher
    from littlemock.core.methods import MethodIdentity

logger = logging.getLogger(__name__)


class Action(ABC):
    """What a stubbed call does."""

    # True when the produced value is only known once the action runs
    deferred: ClassVar[bool] = False

    @abstractmethod
    def perform(self, invocation: Invocation) -> Any: ...

    def stubbed_value(self) -> StubbedValue | None:
        """The value to type-check at registration, if known up front."""
        return None


class ReturnValue(Action):
    def __init__(self, value: Any) -> None:
        self.value = value

    def perform(self, invocation: Invocation) -> Any:
        return self.value

    def stubbed_value(self) -> StubbedValue | None:
        return StubbedValue(self.value)

    def __repr__(self) -> str:
        return f"ReturnValue({self.value!r})"


class DoNothing(ReturnValue):
    def __init__(self) -> None:
        super().__init__(None)

    def __repr__(self) -> str:
        return "DoNothing()"


class ThrowValue(Action):
    """Raises the same exception on every matching call."""

    def __init__(self, exception: BaseException | type[BaseException]) -> None:
        if not _is_exception(exception):
            raise UsageError(f"do_throw() needs an exception instance or class, got {type(exception).__name__}")
        self.exception = exception

    def perform(self, invocation: Invocation) -> Any:
        if isinstance(self.exception, BaseException):
            raise self.exception.with_traceback(None)
        raise self.exception

    def __repr__(self) -> str:
        return f"ThrowValue({self.exception!r})"


class Answer(Action):
    """Runs a callable with the call's arguments and uses its outcome.

    The result is only checked against the declared return type when the
    stubbed method is called.
    """

    deferred = True

    def __init__(self, fn: Callable[..., Any]) -> None:
        if not callable(fn):
            raise UsageError(f"do_answer() needs a callable, got {type(fn).__name__}")
        self.fn = fn

    def perform(self, invocation: Invocation) -> Any:
        return self.fn(*invocation.arguments)

    def __repr__(self) -> str:
        return f"Answer({getattr(self.fn, '__name__', self.fn)!r})"


def _is_exception(value: Any) -> bool:
    if isinstance(value, BaseException):
        return True
    return isinstance(value, type) and issubclass(value, BaseException)


@dataclass(frozen=True, slots=True)
class StubEntry:
    """A registered rule: calls of ``method`` accepted by ``matchers`` run ``action``."""

    method: MethodIdentity
    matchers: tuple[Matcher, ...]
    action: Action
    call_site: CallSite

    def matches(self, method: MethodIdentity, arguments: tuple[Any, ...]) -> bool:
        if method != self.method or len(arguments) != len(self.matchers):
            return False
        return all(m.matches(arg) for m, arg in zip(self.matchers, arguments, strict=True))

    def observe(self, arguments: tuple[Any, ...]) -> None:
        """Let the matchers record the arguments of a call this entry answers."""
        for matcher, arg in zip(self.matchers, arguments, strict=True):
            matcher.on_match(arg)


class StubTable:
    """Stub entries of one stand-in; the newest matching entry wins."""

    __slots__ = ("_entries", "_receiver")

    def __init__(self, receiver: str) -> None:
        self._receiver = receiver
        self._entries: list[StubEntry] = []

    def register(self, entry: StubEntry) -> None:
        """Add ``entry`` as the most recent stub.

        Raises:
            UsageError: The matcher count differs from the method's arity, or
                the stubbed value cannot be returned from the method
        """
        if len(entry.matchers) != entry.method.arity:
            raise UsageError(messages.wrong_arity(self._receiver, entry.method, len(entry.matchers)))

        stubbed = None if entry.action.deferred else entry.action.stubbed_value()
        if stubbed is not None and not stubbed.fits(entry.method.return_type):
            raise UsageError(messages.cant_return(stubbed.value, self._receiver, entry.method, entry.call_site))

        self._entries.append(entry)
        logger.debug(
            "Stubbed %s with %r", messages.signature(self._receiver, entry.method), entry.action
        )

    def resolve(self, method: MethodIdentity, arguments: tuple[Any, ...]) -> StubEntry | None:
        """Newest entry accepting this call, or None."""
        for entry in reversed(self._entries):
            if entry.matches(method, arguments):
                return entry
        return None

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[StubEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
