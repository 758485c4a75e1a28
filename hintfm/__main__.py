"""Module entrypoint for ``python -m hintfm``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
