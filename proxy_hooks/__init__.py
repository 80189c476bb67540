"""Lifecycle hook dispatch for a reverse-proxy engine.

Maps the engine's fixed event stream onto user hooks, fills in defaults for
the error and close events, and turns transport failures into HTTP responses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Protocol

logger = logging.getLogger("proxy-hooks")
_default_logger = logger


class HookConfigError(ValueError):
    """Raised when a hook configuration cannot be built."""


class ProxyEvent(Enum):
    """Events emitted by the proxy engine, valued by their wire name."""

    ERROR = "error"  # Request failed
    PROXY_REQ = "proxyReq"  # Outbound request prepared
    PROXY_REQ_WS = "proxyReqWs"  # Outbound websocket request prepared
    PROXY_RES = "proxyRes"  # Inbound response received
    OPEN = "open"  # Connection opened
    CLOSE = "close"  # Connection closed

    @property
    def hook_name(self) -> str:
        return HOOK_NAMES[self]


HOOK_NAMES: Mapping[ProxyEvent, str] = MappingProxyType(
    {
        ProxyEvent.ERROR: "on_error",
        ProxyEvent.PROXY_REQ: "on_proxy_req",
        ProxyEvent.PROXY_REQ_WS: "on_proxy_req_ws",
        ProxyEvent.PROXY_RES: "on_proxy_res",
        ProxyEvent.OPEN: "on_open",
        ProxyEvent.CLOSE: "on_close",
    }
)

# Type alias for engine callbacks (sync or async)
HookFn = Callable[..., Any]

ResolvedHandlers = Mapping[ProxyEvent, HookFn]


class Engine(Protocol):
    """The part of the proxy engine the dispatcher subscribes to."""

    def on(self, event_name: str, callback: HookFn) -> Any: ...


def _hook_aliases(hook_name: str) -> tuple[str, ...]:
    """``on_proxy_req`` -> (``on_proxy_req``, ``onProxyReq``, ``on-proxy-req``)."""
    head, *rest = hook_name.split("_")
    camel = head + "".join(part.capitalize() for part in rest)
    return hook_name, camel, hook_name.replace("_", "-")


HOOK_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        alias: name
        for name in HOOK_NAMES.values()
        for alias in _hook_aliases(name)
    }
)


@dataclass(frozen=True)
class HookConfig:
    """User hooks, one optional callback per engine event."""

    on_error: Optional[HookFn] = None
    on_proxy_req: Optional[HookFn] = None
    on_proxy_req_ws: Optional[HookFn] = None
    on_proxy_res: Optional[HookFn] = None
    on_open: Optional[HookFn] = None
    on_close: Optional[HookFn] = None

    def get(self, event: ProxyEvent) -> Optional[HookFn]:
        """Return the hook configured for ``event``, if any."""
        return getattr(self, event.hook_name)

    def configured(self) -> list[ProxyEvent]:
        """Events with a callable hook configured."""
        return [e for e in ProxyEvent if callable(self.get(e))]

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any] | None,
        strict: bool = False,
        logger: logging.Logger | None = None,
    ) -> HookConfig:
        """Build a config from a plain mapping.

        Keys may use any of the ``on_error`` / ``onError`` / ``on-error``
        spellings. Unknown keys are logged and skipped, or raise
        :class:`HookConfigError` when ``strict`` is set. Warnings go to
        ``logger`` when given.
        """
        log = logger or _default_logger
        if not data:
            return cls()

        values: dict[str, Any] = {}
        for key, value in data.items():
            name = HOOK_ALIASES.get(key)
            if name is None:
                if strict:
                    raise HookConfigError(f"Unknown hook: {key}")
                log.warning("Unknown hook name: %s", key)
                continue
            if name in values:
                raise HookConfigError(f"Hook configured twice: {name}")
            values[name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, HookFn]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
