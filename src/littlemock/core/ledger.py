"""Ordered record of the calls made to a stand-in."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from littlemock.core.callsite import CallSite
    from littlemock.core.methods import MethodIdentity


@dataclass(slots=True)
class Invocation:
    """One real call on a stand-in."""

    method: MethodIdentity
    arguments: tuple[Any, ...]
    sequence: int
    call_site: CallSite
    verified: bool = False
    stubbed: bool = False  # answered by a registered stub

    @property
    def needs_verification(self) -> bool:
        return not (self.verified or self.stubbed)


class InvocationLedger:
    """Append-only, in-order log of invocations.

    Sequence numbers keep increasing across ``clear()``.
    """

    __slots__ = ("_invocations", "_sequence")

    def __init__(self) -> None:
        self._invocations: list[Invocation] = []
        self._sequence = itertools.count(1)

    def record(self, method: MethodIdentity, arguments: tuple[Any, ...], call_site: CallSite) -> Invocation:
        invocation = Invocation(method, arguments, next(self._sequence), call_site)
        self._invocations.append(invocation)
        return invocation

    def for_method(self, method: MethodIdentity) -> list[Invocation]:
        return [inv for inv in self._invocations if inv.method == method]

    def unverified(self) -> list[Invocation]:
        """Invocations neither verified nor answered by a stub."""
        return [inv for inv in self._invocations if inv.needs_verification]

    def clear(self) -> None:
        self._invocations.clear()

    def __iter__(self) -> Iterator[Invocation]:
        return iter(list(self._invocations))

    def __len__(self) -> int:
        return len(self._invocations)

    def __bool__(self) -> bool:
        return bool(self._invocations)
