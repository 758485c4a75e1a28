"""Single-line editable text used by the finder query and the omnibar."""

from __future__ import annotations


class TextBuffer:
    def __init__(self, text: str = "") -> None:
        self.text = text

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def insert(self, char: str) -> None:
        self.text += char

    def backspace(self) -> bool:
        """Drop the last character; return whether anything was removed."""
        if not self.text:
            return False
        self.text = self.text[:-1]
        return True

    def set(self, text: str) -> None:
        self.text = text

    def clear(self) -> None:
        self.text = ""


__all__ = ["TextBuffer"]
