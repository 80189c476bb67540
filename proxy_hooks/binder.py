"""Subscribe resolved handlers to the engine, plus the default error handler."""

from __future__ import annotations

import logging
from typing import Any

from . import Engine, ResolvedHandlers
from . import logger as default_logger
from .errors import classify, error_code

ERROR_BODY = "Error occured while trying to proxy: {host}{path}"


def bind(
    engine: Engine,
    handlers: ResolvedHandlers,
    logger: logging.Logger | None = None,
) -> None:
    """Register each handler as a listener for its engine event."""
    log = logger or default_logger
    for event, handler in handlers.items():
        engine.on(event.value, handler)
    log.debug("Subscribed to proxy events: %s", [e.value for e in handlers])


def default_error_handler(err: BaseException, req: Any, res: Any, *args: Any) -> None:
    """Translate a proxy failure into a terminal HTTP response.

    With neither request nor response there is nothing to answer on, so the
    error is re-raised (e.g. a malformed target at setup time).
    """
    if req is None and res is None:
        raise err

    # No response to answer on either
    if res is None:
        raise err

    status = classify(error_code(err))
    write_head = getattr(res, "write_head", None)
    if write_head is not None and not getattr(res, "headers_sent", False):
        write_head(status)

    res.end(ERROR_BODY.format(host=_host(req), path=_path(req)))


def _host(req: Any) -> str:
    headers = getattr(req, "headers", None)
    if not headers:
        return ""
    host = headers.get("host") or headers.get("Host")
    return host or ""


def _path(req: Any) -> str:
    return getattr(req, "url", None) or ""
