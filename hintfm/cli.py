"""Command-line front door for hintfm.

Parses options, sets up logging, loads the key bindings and hands over to
the interactive runtime.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from .config import CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH, load_key_bindings
from .errors import HintfmError
from .log import LOG_FILE_ENV_VAR, configure_logging

LOG_LEVELS = ("debug", "info", "warning", "error")

logger = logging.getLogger(__name__)


def _has_terminal() -> bool:
    try:
        return os.isatty(sys.stdin.fileno()) and os.isatty(sys.stdout.fileno())
    except (OSError, ValueError):
        return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hintfm",
        description="Browse directories in the terminal with quick-jump hints and fuzzy search.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Defaults to the current directory.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Key-binding config file (default: ${CONFIG_ENV_VAR} or {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help=f"Write logs to this file (default: ${LOG_FILE_ENV_VAR}, otherwise no logging).",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="info", help="Log verbosity.")
    parser.add_argument("--print-config", action="store_true", help="Print the resolved key bindings as JSON and exit.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run hintfm and return the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, log_file=args.log_file)

    try:
        bindings = load_key_bindings(args.config)
    except HintfmError as exc:
        raise SystemExit(f"hintfm: {exc}") from exc

    if args.print_config:
        sys.stdout.write(json.dumps(bindings.as_config(), indent=2) + "\n")
        return 0

    start = Path(args.path) if args.path is not None else Path.cwd()
    if not start.is_dir():
        raise SystemExit(f"hintfm: not a directory: {start}")
    if not _has_terminal():
        raise SystemExit("hintfm: an interactive terminal is required")

    from .runtime import run_browser

    try:
        run_browser(start, bindings)
    except HintfmError as exc:
        logger.error("session failed: %s", exc)
        raise SystemExit(f"hintfm: {exc}") from exc
    return 0


__all__ = ["build_parser", "main"]
