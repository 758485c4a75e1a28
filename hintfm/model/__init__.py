"""View-model components owned by the mode controller."""

from .clipboard import Clipboard, ClipboardEntry
from .entries import Entry, EntryKind, list_entries
from .finder import FinderState
from .hints import HintSequence, HintStatus, HintStep, HintTable
from .mode import Mode
from .omnibar import OmnibarKind, OmnibarState
from .paginated import PaginatedList
from .text_buffer import TextBuffer

__all__ = [
    "Clipboard",
    "ClipboardEntry",
    "Entry",
    "EntryKind",
    "FinderState",
    "HintSequence",
    "HintStatus",
    "HintStep",
    "HintTable",
    "Mode",
    "OmnibarKind",
    "OmnibarState",
    "PaginatedList",
    "TextBuffer",
    "list_entries",
]
