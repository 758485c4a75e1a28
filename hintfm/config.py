"""User configuration loading.

The configuration is a JSON object with optional ``filelist``, ``finder`` and
``omnibar`` sections mapping action names to key names. A missing file means
defaults; a file that exists but cannot be read or parsed is fatal, since no
safe key map could be established from it.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

from .errors import ConfigError
from .input.bindings import KeyBindings

APP_NAME = "hintfm"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "HINTFM_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


def config_path(explicit: Path | None = None) -> Path:
    """Return the configuration path: explicit argument, then environment, then default."""
    if explicit is not None:
        return explicit
    from_env = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the configuration object, returning ``{}`` when the file is absent."""
    target = config_path(path)
    try:
        text = target.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("no config at %s, using defaults", target)
        return {}
    except OSError as exc:
        raise ConfigError(f"cannot read {target}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{target}: invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{target}: top-level value must be an object")
    logger.info("loaded config from %s", target)
    return data


def load_key_bindings(path: Path | None = None) -> KeyBindings:
    """Load the configuration and resolve it into key-binding tables."""
    return KeyBindings.from_config(load_config(path))


__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "config_path",
    "load_config",
    "load_key_bindings",
]
