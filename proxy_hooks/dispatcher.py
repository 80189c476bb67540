"""Entry points tying resolution and binding together."""

from __future__ import annotations

import logging

from . import Engine, HookConfig, ResolvedHandlers
from . import logger as default_logger
from .binder import bind
from .resolver import resolve


class HookDispatcher:
    """Resolve a hook config once and bind it to proxy engines.

    The handler set is fixed at construction; there is no reloading.
    """

    def __init__(
        self,
        config: HookConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger or default_logger
        self._handlers = resolve(config, self._logger)

    @property
    def handlers(self) -> ResolvedHandlers:
        return self._handlers

    def init(self, engine: Engine) -> None:
        """Subscribe the resolved handlers to ``engine``."""
        bind(engine, self._handlers, self._logger)


def init(
    engine: Engine,
    config: HookConfig | None = None,
    logger: logging.Logger | None = None,
) -> ResolvedHandlers:
    """Resolve ``config`` and bind it to ``engine`` in one step."""
    dispatcher = HookDispatcher(config, logger)
    dispatcher.init(engine)
    return dispatcher.handlers
