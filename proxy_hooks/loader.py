"""Load hook callbacks from YAML configuration."""

from __future__ import annotations

import importlib
import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml

from . import HOOK_ALIASES, HookConfig, HookFn
from . import logger as default_logger


def load_hook_config(
    config_path: Path,
    logger: logging.Logger | None = None,
) -> HookConfig:
    """Load hooks from a YAML config file.

    Hooks that are disabled, unknown or fail to import are logged and left
    out; the remaining ones make up the returned config.
    """
    log = logger or default_logger

    try:
        config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        log.error("Failed to parse hooks config: %s", config_path, exc_info=True)
        return HookConfig()

    if not isinstance(config, dict):
        log.error("Hooks config must be a mapping: %s", config_path)
        return HookConfig()

    # Add custom python paths
    python_path = config.get("python_path") or []
    if isinstance(python_path, str):
        python_path = [python_path]
    if not isinstance(python_path, list):
        log.warning("python_path is not a list: %r", python_path)
        python_path = []

    for p in python_path:
        if not isinstance(p, str):
            log.warning("Skipping non-string python_path entry: %r", p)
            continue
        expanded = os.path.expandvars(p)
        if expanded not in sys.path:
            sys.path.insert(0, expanded)

    hook_defs = config.get("hooks") or {}
    if not isinstance(hook_defs, dict):
        log.error("Hooks section must be a mapping: %s", config_path)
        return HookConfig()

    hooks: dict[str, HookFn] = {}

    for hook_key, hook_def in hook_defs.items():
        hook_name = HOOK_ALIASES.get(hook_key)
        if hook_name is None:
            log.warning("Unknown hook: %s", hook_key)
            continue

        if hook_name in hooks:
            log.warning("Hook %s configured twice, skipping %s", hook_name, hook_key)
            continue

        if not isinstance(hook_def, dict):
            log.warning("Hook definition for %s is not a mapping", hook_key)
            continue

        if not hook_def.get("enabled", True):
            continue

        try:
            fn = _load_hook_function(hook_def)
        except Exception:
            log.error("Failed to load hook %s", hook_key, exc_info=True)
            continue

        if not callable(fn):
            log.warning("Hook %s is not callable: %r", hook_key, fn)
            continue

        hooks[hook_name] = fn
        log.debug("Loaded hook %s from %s", hook_name, hook_def["module"])

    return HookConfig.from_mapping(hooks, logger=log)


def _load_hook_function(hook_def: dict[str, Any]) -> Any:
    """Import and return a hook function from a module path."""
    module = importlib.import_module(hook_def["module"])
    return getattr(module, hook_def["function"])
