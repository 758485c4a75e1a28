from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from hintfm.model import Clipboard, ClipboardEntry, FinderState, OmnibarKind, OmnibarState, TextBuffer


class ClipboardTests(unittest.TestCase):
    def test_push_rejects_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            clipboard = Clipboard()

            self.assertFalse(clipboard.push(Path(tmp)))
            self.assertEqual(len(clipboard), 0)

    def test_push_keeps_order_and_absolute_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            first = root / "one.txt"
            second = root / "two.txt"
            first.write_text("1", encoding="utf-8")
            second.write_text("2", encoding="utf-8")
            clipboard = Clipboard()

            clipboard.push(first)
            clipboard.push(second, cut=True)

            self.assertEqual([entry.path for entry in clipboard], [first.absolute(), second.absolute()])
            self.assertEqual(clipboard.display_lines(), [f"cp {first.absolute()}", f"mv {second.absolute()}"])

    def test_push_same_path_updates_cut_flag(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "note.md"
            target.write_text("x", encoding="utf-8")
            clipboard = Clipboard()

            clipboard.push(target)
            clipboard.push(target, cut=True)

            self.assertEqual(len(clipboard), 1)
            self.assertTrue(clipboard.entries[0].cut)

    def test_clear_empties_queue(self) -> None:
        clipboard = Clipboard()
        clipboard.entries.append(ClipboardEntry(Path("/tmp/x"), cut=False))

        clipboard.clear()

        self.assertEqual(clipboard.display_lines(), [])


class TextBufferTests(unittest.TestCase):
    def test_insert_and_backspace(self) -> None:
        buffer = TextBuffer()
        for char in "abc":
            buffer.insert(char)

        self.assertTrue(buffer.backspace())
        self.assertEqual(buffer.text, "ab")

    def test_backspace_on_empty_reports_nothing_removed(self) -> None:
        buffer = TextBuffer()

        self.assertFalse(buffer.backspace())
        self.assertEqual(str(buffer), "")


class FinderStateTests(unittest.TestCase):
    def test_results_never_exceed_viewport(self) -> None:
        finder = FinderState()
        finder.results.set_viewport(5)

        finder.update_files([f"src/file{i}.py" for i in range(10)])

        self.assertEqual(len(finder.results), 5)

    def test_selection_clamps_when_results_shrink(self) -> None:
        finder = FinderState()
        finder.results.set_viewport(5)
        finder.update_files(list("abcde"))
        for _ in range(3):
            finder.results.scroll_entry(down=True)

        finder.update_files(["only"])

        self.assertEqual(finder.selection(), "only")

    def test_selection_is_none_without_results(self) -> None:
        finder = FinderState()
        finder.open(zoxide_mode=True)

        self.assertTrue(finder.active)
        self.assertTrue(finder.zoxide_mode)
        self.assertIsNone(finder.selection())

    def test_close_discards_query_and_results(self) -> None:
        finder = FinderState()
        finder.open(zoxide_mode=False)
        finder.query.insert("x")
        finder.update_files(["x.py"])

        finder.close()

        self.assertFalse(finder.active)
        self.assertEqual(finder.query.text, "")
        self.assertEqual(len(finder.results), 0)


class OmnibarStateTests(unittest.TestCase):
    def test_open_prefills_buffer(self) -> None:
        omnibar = OmnibarState()

        omnibar.open(OmnibarKind.RENAME, "notes.txt")

        self.assertTrue(omnibar.active)
        self.assertEqual(omnibar.buffer.text, "notes.txt")
        self.assertEqual(omnibar.kind.title, "Rename")

    def test_close_clears_buffer(self) -> None:
        omnibar = OmnibarState()
        omnibar.open(OmnibarKind.MKDIR)
        omnibar.buffer.insert("d")

        omnibar.close()

        self.assertFalse(omnibar.active)
        self.assertEqual(omnibar.buffer.text, "")


if __name__ == "__main__":
    unittest.main()
