"""Interception dispatcher: what happens when a stand-in is called."""

from __future__ import annotations

import logging
import re
from typing import Any

from littlemock.core.callsite import UNKNOWN_SITE, CallSite
from littlemock.core.errors import UsageError
from littlemock.core.kinds import default_value, unbox
from littlemock.core.ledger import InvocationLedger
from littlemock.core.methods import EQUALS, HASH, MethodIdentity
from littlemock.core.stubs import StubTable
from littlemock.interception import get_invocation_handler

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def default_name(interface: type) -> str:
    """Display name derived from the interface, ``OnClickListener`` -> ``on_click_listener``."""
    return _CAMEL_BOUNDARY.sub("_", interface.__name__).lower()


class StandIn:
    """State behind one mock: its interface, call ledger and stub table.

    Acts as the invocation handler of the generated proxy.
    """

    def __init__(self, interface: type, name: str | None = None, *, record_call_sites: bool = True) -> None:
        self.interface = interface
        self.name = name or default_name(interface)
        self.ledger = InvocationLedger()
        self.stubs = StubTable(self.name)
        self._record_call_sites = record_call_sites

    def invoke(self, proxy: Any, method: MethodIdentity, args: tuple[Any, ...]) -> Any:
        if method.is_universal:
            return self._universal(proxy, method, args)

        entry = self.stubs.resolve(method, args)
        call_site = CallSite.capture() if self._record_call_sites else UNKNOWN_SITE
        invocation = self.ledger.record(method, args, call_site)
        if entry is None:
            return default_value(method.return_kind)

        invocation.stubbed = True
        entry.observe(args)
        return unbox(entry.action.perform(invocation), method.return_type)

    def _universal(self, proxy: Any, method: MethodIdentity, args: tuple[Any, ...]) -> Any:
        if method == EQUALS:
            return proxy is args[0]
        if method == HASH:
            return object.__hash__(proxy) or 1
        interface = f"{self.interface.__module__}.{self.interface.__qualname__}"
        return f"<{self.name}: mock of {interface} at {id(proxy):#x}>"

    def reset(self) -> None:
        """Forget all calls and stubs; the mock stays usable."""
        self.ledger.clear()
        self.stubs.clear()
        logger.debug("Reset mock %s", self.name)


def stand_in_of(mock: Any) -> StandIn:
    """The stand-in behind ``mock``.

    Raises:
        UsageError: ``mock`` was not created by littlemock
    """
    handler = get_invocation_handler(mock)
    if not isinstance(handler, StandIn):
        raise UsageError(f"Argument of type {type(mock).__name__} is not a mock created by littlemock")
    return handler
