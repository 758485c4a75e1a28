"""Directory-history queries backed by ``zoxide``."""

from __future__ import annotations

import shutil
import subprocess

from ..errors import ExternalProcessFailure

ZOXIDE_TIMEOUT_SECONDS = 5.0


def query_history(query: str, limit: int) -> list[str]:
    """Return up to ``limit`` remembered directories, most relevant first.

    Whitespace-separated query words become separate zoxide keywords. zoxide
    exits with status 1 when nothing matches, which is an empty result.
    """
    if shutil.which("zoxide") is None:
        raise ExternalProcessFailure("zoxide is not installed")

    cmd = ["zoxide", "query", "--list", "--", *query.split()]
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            timeout=ZOXIDE_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise ExternalProcessFailure(f"zoxide failed: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ExternalProcessFailure(f"zoxide output is not valid text: {exc}") from exc

    if proc.returncode == 1:
        return []
    if proc.returncode != 0:
        raise ExternalProcessFailure(f"zoxide exited with {proc.returncode}: {proc.stderr.strip()}")
    return [line for line in proc.stdout.splitlines() if line][: max(1, limit)]


__all__ = ["query_history"]
