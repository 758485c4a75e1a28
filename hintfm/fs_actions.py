"""Filesystem mutations used by paste, delete, and omnibar actions.

Every failure is raised as ``IOFailure`` with a user-facing message; callers
decide whether it is fatal for the operation at hand.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from .errors import IOFailure

logger = logging.getLogger(__name__)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


def validate_name(name: str) -> str:
    """Return ``name`` stripped, or raise when it cannot name a directory child."""
    stripped = name.strip()
    if not stripped:
        raise IOFailure("name is empty")
    if stripped in {".", ".."}:
        raise IOFailure(f"{stripped!r} is not a valid name")
    if os.sep in stripped or (os.altsep and os.altsep in stripped):
        raise IOFailure(f"{stripped!r} must not contain a path separator")
    return stripped


def copy_file(source: Path, directory: Path) -> Path:
    """Copy ``source`` into ``directory`` under its base name.

    An existing destination is a collision and nothing is written.
    """
    destination = directory / source.name
    if destination.exists() or destination.is_symlink():
        raise IOFailure(f"{destination.name} already exists in {directory}")
    try:
        shutil.copy2(source, destination)
    except OSError as exc:
        raise IOFailure(f"cannot copy {source}: {_describe(exc)}") from exc
    logger.info("copied %s -> %s", source, destination)
    return destination


def remove_path(target: Path, *, recursive: bool = False) -> None:
    """Remove a file, or a directory tree when ``recursive`` is set."""
    try:
        if target.is_dir() and not target.is_symlink():
            if not recursive:
                raise IOFailure(f"{target.name} is a directory")
            shutil.rmtree(target)
        else:
            target.unlink()
    except OSError as exc:
        raise IOFailure(f"cannot remove {target}: {_describe(exc)}") from exc
    logger.info("removed %s", target)


def rename_path(source: Path, new_name: str) -> Path:
    destination = source.parent / validate_name(new_name)
    if destination == source:
        return destination
    if destination.exists() or destination.is_symlink():
        raise IOFailure(f"{destination.name} already exists")
    try:
        source.rename(destination)
    except OSError as exc:
        raise IOFailure(f"cannot rename {source.name}: {_describe(exc)}") from exc
    logger.info("renamed %s -> %s", source, destination)
    return destination


def create_file(directory: Path, name: str) -> Path:
    """Create an empty file, or refresh the timestamp of an existing one."""
    target = directory / validate_name(name)
    if target.is_dir():
        raise IOFailure(f"{target.name} is a directory")
    try:
        target.touch(exist_ok=True)
    except OSError as exc:
        raise IOFailure(f"cannot create {target.name}: {_describe(exc)}") from exc
    logger.info("touched %s", target)
    return target


def create_directory(directory: Path, name: str) -> Path:
    target = directory / validate_name(name)
    try:
        target.mkdir()
    except FileExistsError as exc:
        raise IOFailure(f"{target.name} already exists") from exc
    except OSError as exc:
        raise IOFailure(f"cannot create {target.name}: {_describe(exc)}") from exc
    logger.info("created directory %s", target)
    return target


__all__ = [
    "copy_file",
    "create_directory",
    "create_file",
    "remove_path",
    "rename_path",
    "validate_name",
]
