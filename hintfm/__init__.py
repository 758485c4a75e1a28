"""Public package surface for hintfm.

Exports ``main`` for programmatic CLI invocation. The browser engine lives
in ``hintfm.controller`` and the view-model components in ``hintfm.model``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(*args, **kwargs):
    """Lazily import the CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["__version__", "main"]
