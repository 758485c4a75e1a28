"""Make the checked-out ``hintfm`` package importable without installing it.

Tests touch the working directory (the browser ``chdir``s on navigation), so
the repository root is pinned on ``sys.path`` by absolute path.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = str(Path(__file__).resolve().parents[1])

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
