"""Logging setup.

The terminal belongs to the UI, so log records go to a file when one is
configured and are discarded otherwise.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FILE_ENV_VAR = "HINTFM_LOG_FILE"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def get_logger(name: str = "hintfm") -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(*, level: str = "info", log_file: Path | None = None) -> None:
    """Attach a handler to the ``hintfm`` logger.

    ``log_file`` falls back to ``$HINTFM_LOG_FILE``; without either a
    ``NullHandler`` is installed.
    """
    level_value = getattr(logging, level.strip().upper(), logging.INFO)
    if log_file is None:
        env_file = os.environ.get(LOG_FILE_ENV_VAR, "").strip()
        if env_file:
            log_file = Path(env_file).expanduser()

    root = get_logger()
    root.setLevel(level_value)
    if root.handlers:
        return
    if log_file is None:
        root.addHandler(logging.NullHandler())
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


__all__ = ["LOG_FILE_ENV_VAR", "configure_logging", "get_logger"]
