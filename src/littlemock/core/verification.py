"""Verification engine: count matching calls in a stand-in's ledger."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from littlemock.core import messages
from littlemock.core.errors import VerificationError

if TYPE_CHECKING:
    from littlemock.core.callsite import CallSite
    from littlemock.core.dispatch import StandIn
    from littlemock.core.ledger import Invocation
    from littlemock.core.matchers import Matcher
    from littlemock.core.methods import MethodIdentity
    from littlemock.core.modes import VerificationMode

logger = logging.getLogger(__name__)


def _accepts(matchers: list[Matcher], arguments: tuple[Any, ...]) -> bool:
    if len(arguments) != len(matchers):
        return False
    return all(m.matches(arg) for m, arg in zip(matchers, arguments, strict=True))


def matching_invocations(
    stand_in: StandIn, method: MethodIdentity, matchers: list[Matcher]
) -> list[Invocation]:
    """Ledger entries of ``method`` accepted by ``matchers``, in call order.

    Already verified entries are counted again. Each matcher observes the
    argument of every matching entry, which is how captors fill up.
    """
    matched = []
    for invocation in stand_in.ledger.for_method(method):
        if not _accepts(matchers, invocation.arguments):
            continue
        for matcher, arg in zip(matchers, invocation.arguments, strict=True):
            matcher.on_match(arg)
        matched.append(invocation)
    return matched


def verify_invocations(
    stand_in: StandIn,
    method: MethodIdentity,
    matchers: list[Matcher],
    mode: VerificationMode,
    call_site: CallSite,
) -> list[Invocation]:
    """Check the number of matching calls against ``mode``.

    Returns:
        The matching invocations, now marked verified

    Raises:
        VerificationError: The count is outside the mode's bounds
    """
    matched = matching_invocations(stand_in, method, matchers)
    if not mode.accepts(len(matched)):
        logger.debug(
            "Verification of %s failed: %d matching call(s)",
            messages.signature(stand_in.name, method),
            len(matched),
        )
        raise VerificationError(
            messages.verification_failure(
                stand_in.name, method, mode, len(matched), call_site, list(stand_in.ledger)
            )
        )
    for invocation in matched:
        invocation.verified = True
    return matched
