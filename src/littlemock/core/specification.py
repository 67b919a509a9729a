"""Specification proxies: the call after ``when(mock)`` or ``verify(mock)``.

A specification proxy implements the mocked interface but never records a
real call. Its single call supplies the method and the argument matchers for
a stub registration or a verification.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from littlemock.core import messages
from littlemock.core.callsite import CallSite
from littlemock.core.errors import UsageError
from littlemock.core.kinds import default_value
from littlemock.core.matchers import Equals
from littlemock.core.stubs import StubEntry
from littlemock.core.verification import verify_invocations

if TYPE_CHECKING:
    from littlemock.core.dispatch import StandIn
    from littlemock.core.matchers import Matcher
    from littlemock.core.methods import MethodIdentity
    from littlemock.core.modes import VerificationMode
    from littlemock.core.stack import MatcherStack
    from littlemock.core.stubs import Action


def collect_matchers(stack: MatcherStack, method: MethodIdentity, args: tuple[Any, ...]) -> list[Matcher]:
    """Matchers for a specified call.

    With no matchers pending every literal argument becomes an equality
    matcher; otherwise there must be exactly one pending matcher per
    parameter.
    """
    if not stack:
        return [Equals(arg) for arg in args]
    return stack.drain(method.arity)


class _SpecificationHandler(ABC):
    action_name = ""
    entry_point = ""

    def __init__(self, target: StandIn, stack: MatcherStack) -> None:
        self.target = target
        self.stack = stack
        self._used = False

    def invoke(self, proxy: Any, method: MethodIdentity, args: tuple[Any, ...]) -> Any:
        if method.is_universal:
            self.stack.clear()
            raise UsageError(messages.cannot_specify(self.action_name, method))
        if self._used:
            self.stack.clear()
            raise UsageError(
                f"This {self.action_name} specification for {self.target.name} was already used; "
                f"call {self.entry_point}() again for each call"
            )
        self._used = True
        matchers = collect_matchers(self.stack, method, args)
        self.specify(method, matchers, CallSite.capture())
        return default_value(method.return_kind)

    @abstractmethod
    def specify(self, method: MethodIdentity, matchers: list[Matcher], call_site: CallSite) -> None: ...


class StubbingHandler(_SpecificationHandler):
    action_name = "stub"
    entry_point = "when"

    def __init__(self, target: StandIn, action: Action, stack: MatcherStack) -> None:
        super().__init__(target, stack)
        self.action = action

    def specify(self, method: MethodIdentity, matchers: list[Matcher], call_site: CallSite) -> None:
        self.target.stubs.register(StubEntry(method, tuple(matchers), self.action, call_site))


class VerifyingHandler(_SpecificationHandler):
    action_name = "verify"
    entry_point = "verify"

    def __init__(self, target: StandIn, mode: VerificationMode, stack: MatcherStack) -> None:
        super().__init__(target, stack)
        self.mode = mode

    def specify(self, method: MethodIdentity, matchers: list[Matcher], call_site: CallSite) -> None:
        verify_invocations(self.target, method, matchers, self.mode, call_site)
