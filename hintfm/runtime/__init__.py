"""Interactive session runtime: terminal control, main loop and bootstrap."""

from __future__ import annotations


def run_browser(*args, **kwargs):
    """Lazily import the session bootstrap so importing the package stays cheap."""
    from .app import run_browser as _run_browser

    return _run_browser(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = ["run_browser", "run_main_loop"]
