"""Resolve user hooks into the handler set bound to the engine."""

from __future__ import annotations

import functools
import inspect
import logging
from types import MappingProxyType
from typing import Any

from . import HookConfig, HookFn, ProxyEvent, ResolvedHandlers
from . import logger as default_logger
from .binder import default_error_handler


def resolve(
    config: HookConfig | None,
    logger: logging.Logger | None = None,
) -> ResolvedHandlers:
    """Build the event -> callback mapping for ``config``.

    The result always holds ``error`` and ``close`` handlers. The
    ``proxyReq`` hook is wrapped so a failure aborts the exchange instead of
    escaping into the engine; every other hook is passed through as-is.
    """
    log = logger or default_logger
    config = config or HookConfig()
    handlers: dict[ProxyEvent, HookFn] = {}

    for event in ProxyEvent:
        fn = config.get(event)
        if callable(fn):
            handlers[event] = _wrap_for_event(event, fn, log)

    if ProxyEvent.ERROR not in handlers:
        handlers[ProxyEvent.ERROR] = default_error_handler

    if ProxyEvent.CLOSE not in handlers:
        handlers[ProxyEvent.CLOSE] = make_close_logger(log)

    return MappingProxyType(handlers)


def _wrap_for_event(event: ProxyEvent, fn: HookFn, log: logging.Logger) -> HookFn:
    if event is not ProxyEvent.PROXY_REQ:
        return fn
    return wrap_with_abort(fn, log)


def wrap_with_abort(fn: HookFn, logger: logging.Logger | None = None) -> HookFn:
    """Wrap an outbound-request hook so its failures abort the exchange.

    The first positional argument is the outbound request; on error it is
    destroyed with the exception as cause and the exception goes no further.
    """
    log = logger or default_logger

    if _is_async(fn):

        @functools.wraps(fn)
        async def async_wrapper(proxy_req: Any, *args: Any, **kwargs: Any) -> Any:
            try:
                return await fn(proxy_req, *args, **kwargs)
            except Exception as exc:
                log.debug("proxyReq hook %s failed, aborting", _name(fn), exc_info=True)
                proxy_req.destroy(exc)
                return None

        return async_wrapper

    @functools.wraps(fn)
    def wrapper(proxy_req: Any, *args: Any, **kwargs: Any) -> Any:
        try:
            return fn(proxy_req, *args, **kwargs)
        except Exception as exc:
            log.debug("proxyReq hook %s failed, aborting", _name(fn), exc_info=True)
            proxy_req.destroy(exc)
            return None

    return wrapper


def make_close_logger(logger: logging.Logger | None = None) -> HookFn:
    """Default ``close`` handler: note the disconnect, nothing else."""
    log = logger or default_logger

    def log_close(req: Any = None, socket: Any = None, head: Any = None) -> None:
        log.info("Client disconnected")

    return log_close


def _name(fn: HookFn) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def _is_async(fn: HookFn) -> bool:
    """True for coroutine functions and objects with an ``async def __call__``."""
    return inspect.iscoroutinefunction(fn) or inspect.iscoroutinefunction(
        getattr(fn, "__call__", None)
    )
