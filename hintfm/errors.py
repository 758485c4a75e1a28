"""Exception taxonomy shared by the browser engine and its collaborators.

Library code raises these; the mode controller catches ``HintfmError`` at
the command boundary and turns it into a status-line message.
"""

from __future__ import annotations


class HintfmError(Exception):
    """Base class for every error the browser reports to the user."""


class IOFailure(HintfmError):
    """Directory read, copy, remove, rename, or create failed."""


class InvalidDirectory(HintfmError):
    """Navigation target is missing, not a directory, or not resolvable."""


class UnknownHint(HintfmError, KeyError):
    """A hint code has no row mapping."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class ExternalProcessFailure(HintfmError):
    """Search, preview, or opener program failed or produced unusable output."""


class ConfigError(HintfmError):
    """Key-binding configuration is malformed."""


class OutOfRange(HintfmError, IndexError):
    """Access to the current entry of an empty list."""


__all__ = [
    "HintfmError",
    "IOFailure",
    "InvalidDirectory",
    "UnknownHint",
    "ExternalProcessFailure",
    "ConfigError",
    "OutOfRange",
]
