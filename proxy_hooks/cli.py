#!/usr/bin/env python3
"""
proxy-hooks - inspect proxy hook configuration.

Shows how a hooks file resolves onto engine events and how transport
error codes map onto HTTP statuses.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="proxy-hooks",
        description="Inspect proxy lifecycle hooks and error classification",
    )
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug output")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # check
    check_p = subparsers.add_parser("check", help="Resolve a hooks file and list handlers")
    check_p.add_argument("--config", "-c", help="Hooks file (default: ~/.config/proxy-hooks/hooks.yaml)")

    # classify
    classify_p = subparsers.add_parser("classify", help="Map error codes to HTTP statuses")
    classify_p.add_argument("codes", nargs="+", help="Error codes, e.g. ECONNRESET")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    # Dispatch
    if args.command == "check":
        return cmd_check(args)
    elif args.command == "classify":
        return cmd_classify(args)
    else:
        parser.print_help()
        return 1


def cmd_check(args: argparse.Namespace) -> int:
    """Handle check command."""
    from .config import get_hooks_file
    from .loader import load_hook_config
    from .resolver import resolve

    config_path = Path(args.config) if args.config else get_hooks_file()
    if not config_path.exists():
        print(f"Error: Hooks file not found: {config_path}", file=sys.stderr)
        return 1

    config = load_hook_config(config_path)
    configured = set(config.configured())
    handlers = resolve(config)

    print(f"Hooks file: {config_path}")
    for event, handler in handlers.items():
        origin = "hook" if event in configured else "default"
        name = getattr(handler, "__qualname__", repr(handler))
        print(f"  {event.value:<12} {event.hook_name:<16} {name} ({origin})")

    return 0


def cmd_classify(args: argparse.Namespace) -> int:
    """Handle classify command."""
    from .errors import classify

    for code in args.codes:
        print(f"{code} -> {classify(code)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
