"""
Configuration file locations for proxy-hooks.

Hooks are declared in ~/.config/proxy-hooks/hooks.yaml unless overridden.
"""

from __future__ import annotations

import os
from pathlib import Path

HOOKS_FILE_NAME = "hooks.yaml"


def get_config_dir() -> Path:
    """Get XDG-compliant config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / "proxy-hooks"


def get_hooks_file() -> Path:
    """Get path to the hooks configuration file.

    Priority order:
    1. $PROXY_HOOKS_CONFIG (if set)
    2. $XDG_CONFIG_HOME/proxy-hooks/hooks.yaml (if set)
    3. ~/.config/proxy-hooks/hooks.yaml (default)
    """
    explicit = os.environ.get("PROXY_HOOKS_CONFIG")
    if explicit:
        return Path(explicit)
    return get_config_dir() / HOOKS_FILE_NAME
