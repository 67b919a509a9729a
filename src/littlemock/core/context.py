"""Test-execution-scoped state.

Everything the API needs between statements lives on a :class:`MockContext`:
the pending matchers and the settings used when creating stand-ins. One
context is current at a time; the pytest plugin installs a fresh one per test.

The runtime is single-threaded by contract. Contexts are not locked, and
stand-ins must not be called from several threads at once.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, TypeVar

from littlemock.config import Settings
from littlemock.core import messages
from littlemock.core.dispatch import StandIn, stand_in_of
from littlemock.core.errors import UsageError, VerificationError
from littlemock.core.modes import VerificationMode
from littlemock.core.specification import StubbingHandler, VerifyingHandler
from littlemock.core.stack import MatcherStack
from littlemock.interception import as_interface, new_proxy_instance

if TYPE_CHECKING:
    from collections.abc import Iterator

    from littlemock.core.stubs import Action

T = TypeVar("T")

logger = logging.getLogger(__name__)

_current: ContextVar[MockContext | None] = ContextVar("littlemock_context", default=None)


class MockContext:
    """Matcher stack and settings for one test."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.matchers = MatcherStack()

    def mock(self, interface: type[T], name: str | None = None) -> T:
        """Create a stand-in for ``interface``.

        Raises:
            UsageError: ``interface`` is None or not an interface
        """
        if interface is None:
            raise UsageError("Cannot create a mock of a None type")
        resolved = as_interface(interface)
        if resolved is None:
            raise UsageError(f"Can only mock interfaces (ABCs or Protocols), not {interface!r}")
        stand_in = StandIn(resolved, name, record_call_sites=self.settings.record_call_sites)
        logger.debug("Created mock %s of %s", stand_in.name, resolved.__qualname__)
        return new_proxy_instance(resolved, stand_in)

    def when(self, mock: T, action: Action) -> T:
        """Specification proxy whose next call registers ``action`` on ``mock``."""
        stand_in = stand_in_of(mock)
        self.matchers.check_empty()
        return new_proxy_instance(stand_in.interface, StubbingHandler(stand_in, action, self.matchers))

    def verify(self, mock: T, mode: VerificationMode | None) -> T:
        """Specification proxy whose next call verifies against ``mock``'s ledger."""
        if mode is None:
            raise UsageError("Verification mode must not be None")
        stand_in = stand_in_of(mock)
        self.matchers.check_empty()
        return new_proxy_instance(stand_in.interface, VerifyingHandler(stand_in, mode, self.matchers))

    def verify_zero_interactions(self, *mocks: Any) -> None:
        stand_ins = [stand_in_of(m) for m in mocks]
        self.matchers.check_empty()
        for stand_in in stand_ins:
            invocations = list(stand_in.ledger)
            if invocations:
                raise VerificationError(messages.zero_interactions(stand_in.name, invocations))

    def verify_no_more_interactions(self, *mocks: Any) -> None:
        stand_ins = [stand_in_of(m) for m in mocks]
        self.matchers.check_empty()
        for stand_in in stand_ins:
            unverified = stand_in.ledger.unverified()
            if unverified:
                raise VerificationError(messages.unverified_interactions(stand_in.name, unverified))

    def reset(self, *mocks: Any) -> None:
        for stand_in in [stand_in_of(m) for m in mocks]:
            stand_in.reset()

    def check_for_programming_errors(self) -> None:
        """Teardown check: fail and clear if matchers were left unconsumed."""
        self.matchers.check_empty()


def current_context() -> MockContext:
    """The installed context, creating a default one on first use."""
    context = _current.get()
    if context is None:
        context = MockContext(Settings.load())
        _current.set(context)
    return context


@contextmanager
def use_context(context: MockContext | None = None) -> Iterator[MockContext]:
    """Install ``context`` (or a fresh one) for the duration of the block."""
    if context is None:
        context = MockContext(Settings.load())
    token = _current.set(context)
    try:
        yield context
    finally:
        _current.reset(token)
