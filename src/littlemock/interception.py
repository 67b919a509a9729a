"""Runtime interception of interface calls.

For each interface a subclass is generated once. Every interceptable method
of the subclass normalises its arguments and hands ``(method, arguments)`` to
the handler stored on the instance, as do ``__eq__``, ``__hash__`` and
``__repr__``. The rest of littlemock only talks to this module through
:func:`new_proxy_instance` and :func:`get_invocation_handler`.
"""

from __future__ import annotations

import abc
import types
import typing
from typing import Any, Protocol

from littlemock.core.methods import EQUALS, HASH, REPR, MethodIdentity, interface_methods

_HANDLER_ATTR = "_littlemock_handler"

# interface -> generated class, and the reverse
_proxy_classes: dict[type, type] = {}
_interfaces: dict[type, type] = {}


class InvocationHandler(Protocol):
    """Receives every call made on a proxy."""

    def invoke(self, proxy: Any, method: MethodIdentity, args: tuple[Any, ...]) -> Any: ...


def as_interface(candidate: Any) -> type | None:
    """The interface class behind ``candidate``, or None if it is not one.

    Interfaces are ``abc.ABCMeta`` classes and ``typing.Protocol`` classes;
    parameterised aliases such as ``Repository[int]`` are unwrapped.
    """
    origin = typing.get_origin(candidate)
    if origin is not None:
        candidate = origin
    if not isinstance(candidate, type):
        return None
    if getattr(candidate, "_is_protocol", False) or isinstance(candidate, abc.ABCMeta):
        return candidate
    return None


def is_interface(candidate: Any) -> bool:
    return as_interface(candidate) is not None


def proxy_class(interface: type) -> type:
    """The generated subclass for ``interface``, built on first use."""
    cls = _proxy_classes.get(interface)
    if cls is None:
        cls = _build_proxy_class(interface)
        _proxy_classes[interface] = cls
        _interfaces[cls] = interface
    return cls


def new_proxy_instance(interface: type, handler: InvocationHandler) -> Any:
    """Create an instance of ``interface`` whose calls go to ``handler``."""
    proxy = object.__new__(proxy_class(interface))
    setattr(proxy, _HANDLER_ATTR, handler)
    return proxy


def get_invocation_handler(proxy: Any) -> InvocationHandler | None:
    """The handler behind ``proxy``, or None if it is not a generated proxy."""
    if type(proxy) not in _interfaces:
        return None
    return getattr(proxy, _HANDLER_ATTR, None)


def interface_of(proxy: Any) -> type | None:
    return _interfaces.get(type(proxy))


def _handler(proxy: Any) -> InvocationHandler:
    return object.__getattribute__(proxy, _HANDLER_ATTR)


def _interceptor(method: MethodIdentity) -> Any:
    def intercept(self: Any, *args: Any, **kwargs: Any) -> Any:
        return _handler(self).invoke(self, method, method.bind(args, kwargs))

    intercept.__name__ = method.name
    intercept.__qualname__ = f"{method.declaring_type.__qualname__}.{method.name}"
    intercept.__signature__ = method.signature  # type: ignore[attr-defined]
    return intercept


def _eq(self: Any, other: Any) -> Any:
    return _handler(self).invoke(self, EQUALS, (other,))


def _hash(self: Any) -> Any:
    return _handler(self).invoke(self, HASH, ())


def _repr(self: Any) -> Any:
    return _handler(self).invoke(self, REPR, ())


def _build_proxy_class(interface: type) -> type:
    def body(namespace: dict[str, Any]) -> None:
        namespace["__slots__"] = (_HANDLER_ATTR,)
        namespace["__module__"] = interface.__module__
        namespace["__eq__"] = _eq
        namespace["__hash__"] = _hash
        namespace["__repr__"] = _repr
        for method in interface_methods(interface):
            namespace[method.name] = _interceptor(method)

    cls = types.new_class(f"{interface.__name__}Mock", (interface,), exec_body=body)
    # Abstract properties and other non-method members are not intercepted
    cls.__abstractmethods__ = frozenset()
    return cls
