"""Quick-jump hint codes for visible rows.

The table is fixed for the process lifetime: eight one-character codes for
the first rows, then two-character codes for the next 128 rows. Codes are
drawn from disjoint alphabets for the first character, so a one-character
code is never a prefix of a two-character code.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..errors import UnknownHint

SINGLE_CHAR_CODES: tuple[str, ...] = ("p", "l", "f", "u", "w", "y", "q", ";")
PAIR_FIRST_CHARS: tuple[str, ...] = ("t", "n", "s", "e", "r", "i", "a", "o")
PAIR_SECOND_CHARS: tuple[str, ...] = (
    "t", "n", "s", "e", "r", "i", "a", "o",
    "p", "l", "f", "u", "w", "y", "q", ";",
)
MAX_CODE_LENGTH = 2


def generate_codes() -> tuple[str, ...]:
    """Return all codes in row order (136 of them)."""
    pairs = tuple(first + second for first in PAIR_FIRST_CHARS for second in PAIR_SECOND_CHARS)
    return SINGLE_CHAR_CODES + pairs


class HintTable:
    """Immutable bijection between visible row index and hint code."""

    def __init__(self, codes: tuple[str, ...] | None = None) -> None:
        self._codes = generate_codes() if codes is None else tuple(codes)
        self._rows = {code: row for row, code in enumerate(self._codes)}
        if len(self._rows) != len(self._codes):
            raise ValueError("hint codes must be unique")

    def __len__(self) -> int:
        return len(self._codes)

    def lookup_code(self, row: int) -> str | None:
        """Return the code for visible row ``row``, or ``None`` past the table."""
        if 0 <= row < len(self._codes):
            return self._codes[row]
        return None

    def is_valid_code(self, partial: str, visible_row_count: int) -> bool:
        """Return whether ``partial`` is exactly the code of one of the first visible rows."""
        row = self._rows.get(partial)
        return row is not None and row < visible_row_count

    def resolve(self, code: str) -> int:
        try:
            return self._rows[code]
        except KeyError:
            raise UnknownHint(f"no row for hint {code!r}") from None


class HintStatus(enum.Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    ABORTED = "aborted"


@dataclass(frozen=True)
class HintStep:
    """Outcome of feeding one character into a ``HintSequence``."""

    status: HintStatus
    row: int | None = None


class HintSequence:
    """Character accumulator for one hint-mode session.

    Commits on the first exact match among visible rows and aborts once the
    typed code reaches the maximum code length without matching.
    """

    def __init__(self, table: HintTable, visible_row_count: int) -> None:
        self.table = table
        self.visible_row_count = visible_row_count
        self.typed = ""

    def feed(self, char: str) -> HintStep:
        self.typed += char
        if self.table.is_valid_code(self.typed, self.visible_row_count):
            return HintStep(HintStatus.RESOLVED, self.table.resolve(self.typed))
        if len(self.typed) >= MAX_CODE_LENGTH:
            return HintStep(HintStatus.ABORTED)
        return HintStep(HintStatus.PENDING)


__all__ = [
    "HintSequence",
    "HintStatus",
    "HintStep",
    "HintTable",
    "generate_codes",
]
