"""Text of the diagnostics raised by stubbing and verification."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from littlemock.core.kinds import type_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from littlemock.core.callsite import CallSite
    from littlemock.core.ledger import Invocation
    from littlemock.core.matchers import Matcher
    from littlemock.core.methods import MethodIdentity
    from littlemock.core.modes import VerificationMode


def signature(receiver: str, method: MethodIdentity) -> str:
    """``receiver.method(ParamType, ...)``"""
    return f"{receiver}.{method.name}({method.describe_parameters()})"


def typed_signature(receiver: str, method: MethodIdentity) -> str:
    """``(ReturnType) receiver.method(ParamType, ...)``"""
    return f"({type_name(method.return_type)}) {signature(receiver, method)}"


def _call_list(receiver: str, invocations: Iterable[Invocation]) -> str:
    lines = []
    for invocation in invocations:
        lines.append(f"  {signature(receiver, invocation.method)}\n")
        lines.append(f"  at {invocation.call_site}\n")
    return "".join(lines)


def verification_failure(
    receiver: str,
    method: MethodIdentity,
    mode: VerificationMode,
    actual: int,
    call_site: CallSite,
    invocations: list[Invocation],
) -> str:
    message = (
        f"\nExpected {mode.describe(actual)} to:\n"
        f"  {signature(receiver, method)}\n"
        f"  at {call_site}\n"
        "\n"
    )
    if not invocations:
        return message + "No method calls happened to this mock\n"
    return message + "Method calls that did happen:\n" + _call_list(receiver, invocations)


def zero_interactions(receiver: str, invocations: list[Invocation]) -> str:
    return (
        "\nExpected zero interactions with:\n"
        f"  {receiver}\n"
        "\n"
        "Method calls that did happen:\n" + _call_list(receiver, invocations)
    )


def unverified_interactions(receiver: str, invocations: list[Invocation]) -> str:
    return (
        "\nExpected no more interactions with:\n"
        f"  {receiver}\n"
        "\n"
        "Unverified method calls:\n" + _call_list(receiver, invocations)
    )


def cant_return(value: Any, receiver: str, method: MethodIdentity, call_site: CallSite) -> str:
    return (
        f"\nCan't return {type(value).__name__} from stub for:\n"
        f"  {typed_signature(receiver, method)}\n"
        f"  at {call_site}\n"
    )


def cannot_specify(action: str, method: MethodIdentity) -> str:
    """Refusal to stub or verify an identity/hash/representation call."""
    return f"cannot {action} call to {method.describe()}"


def wrong_arity(receiver: str, method: MethodIdentity, count: int) -> str:
    return (
        f"{signature(receiver, method)} takes {method.arity} argument(s) "
        f"but {count} matcher(s) were given"
    )


def leaked_matchers(matchers: list[Matcher]) -> str:
    lines = "".join(f"  {m.describe()}\n" for m in matchers)
    return (
        f"\nFound {len(matchers)} unconsumed matcher(s):\n"
        f"{lines}"
        "Matchers may only be used as arguments of a call being stubbed or verified.\n"
    )
