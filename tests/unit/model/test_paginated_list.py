from __future__ import annotations

import unittest

from hintfm.errors import OutOfRange
from hintfm.model import PaginatedList


def _make_list(count: int, viewport: int) -> PaginatedList[int]:
    return PaginatedList(list(range(count)), viewport=viewport)


class PaginatedListScrollTests(unittest.TestCase):
    def test_entry_scroll_moves_cursor_inside_window(self) -> None:
        items = _make_list(10, 3)
        items.scroll_entry(down=True)
        items.scroll_entry(down=True)

        self.assertEqual((items.scroll, items.selected), (0, 2))
        self.assertEqual(items.current(), 2)

    def test_entry_scroll_past_bottom_advances_window_and_pins_cursor(self) -> None:
        items = _make_list(10, 3)
        for _ in range(3):
            items.scroll_entry(down=True)

        self.assertEqual((items.scroll, items.selected), (1, 2))
        self.assertEqual(items.current(), 3)

    def test_entry_scroll_down_at_last_entry_is_noop(self) -> None:
        items = _make_list(10, 3)
        for _ in range(20):
            items.scroll_entry(down=True)

        self.assertEqual((items.scroll, items.selected), (7, 2))
        self.assertEqual(items.current(), 9)

    def test_entry_scroll_up_at_top_row_pulls_window_back(self) -> None:
        items = _make_list(10, 3)
        for _ in range(5):
            items.scroll_entry(down=True)
        for _ in range(2):
            items.scroll_entry(down=False)
        self.assertEqual((items.scroll, items.selected), (3, 0))

        items.scroll_entry(down=False)

        self.assertEqual((items.scroll, items.selected), (2, 0))

    def test_entry_scroll_up_at_first_entry_is_noop(self) -> None:
        items = _make_list(4, 3)
        items.scroll_entry(down=False)

        self.assertEqual((items.scroll, items.selected), (0, 0))

    def test_window_scroll_keeps_cursor_row_and_clamps(self) -> None:
        items = _make_list(5, 3)
        items.selected = 1
        for _ in range(4):
            items.scroll_window(down=True)

        self.assertEqual((items.scroll, items.selected), (2, 1))

        for _ in range(4):
            items.scroll_window(down=False)
        self.assertEqual(items.scroll, 0)

    def test_window_scroll_on_short_list_does_nothing(self) -> None:
        items = _make_list(2, 5)
        items.scroll_window(down=True)

        self.assertEqual(items.scroll, 0)

    def test_scrolling_keeps_cursor_inside_list_for_every_step(self) -> None:
        items = _make_list(7, 4)
        moves = [True] * 9 + [False] * 3 + [True] * 2 + [False] * 9
        for down in moves:
            items.scroll_entry(down)
            self.assertLess(items.selected, min(items.viewport, len(items)))
            self.assertLess(items.absolute_index(), len(items))
            self.assertGreaterEqual(items.scroll, 0)

    def test_mixed_window_and_entry_scrolls_keep_cursor_inside_list(self) -> None:
        # (entry?, down?) pairs; window scrolls interleaved with cursor moves
        moves = [
            (True, True), (False, True), (False, True), (True, True), (True, True),
            (False, True), (False, True), (False, True), (True, True), (True, True),
            (True, True), (False, False), (True, False), (False, True), (True, True),
            (False, False), (False, False), (True, False), (True, False), (False, False),
            (False, True), (True, True), (True, True), (True, True), (False, False),
        ]
        for count, viewport in ((7, 4), (3, 5), (12, 1), (9, 9)):
            items = _make_list(count, viewport)
            for entry, down in moves:
                if entry:
                    items.scroll_entry(down)
                else:
                    items.scroll_window(down)
                context = (count, viewport, entry, down)
                self.assertLess(items.selected, min(items.viewport, len(items)), context)
                self.assertLess(items.absolute_index(), len(items), context)
                self.assertLessEqual(items.scroll, max(0, len(items) - items.viewport), context)
                self.assertGreaterEqual(items.scroll, 0, context)


class PaginatedListContentTests(unittest.TestCase):
    def test_current_on_empty_list_raises_out_of_range(self) -> None:
        items: PaginatedList[int] = PaginatedList()

        with self.assertRaises(OutOfRange):
            items.current()
        with self.assertRaises(IndexError):
            items.current()

    def test_replace_resets_scroll_and_selection(self) -> None:
        items = _make_list(10, 3)
        for _ in range(6):
            items.scroll_entry(down=True)

        items.replace(["a", "b"])

        self.assertEqual((items.scroll, items.selected), (0, 0))
        self.assertEqual(items.current(), "a")

    def test_visible_is_window_slice(self) -> None:
        items = _make_list(10, 3)
        for _ in range(4):
            items.scroll_window(down=True)

        self.assertEqual(items.visible(), [4, 5, 6])
        self.assertEqual(items.visible_count(), 3)

    def test_visible_count_on_short_list(self) -> None:
        items = _make_list(2, 5)

        self.assertEqual(items.visible_count(), 2)

    def test_viewport_is_at_least_one_row(self) -> None:
        items = _make_list(3, 0)
        self.assertEqual(items.viewport, 1)

        items.set_viewport(-4)
        self.assertEqual(items.viewport, 1)

    def test_set_viewport_does_not_move_cursor(self) -> None:
        items = _make_list(10, 5)
        items.scroll_entry(down=True)
        items.scroll_window(down=True)

        items.set_viewport(8)

        self.assertEqual((items.scroll, items.selected), (1, 1))

    def test_refill_truncates_to_viewport(self) -> None:
        items: PaginatedList[str] = PaginatedList(viewport=5)

        items.refill([f"file{i}" for i in range(10)])

        self.assertEqual(len(items), 5)
        self.assertEqual(items.entries[-1], "file4")

    def test_refill_clamps_cursor_to_new_length(self) -> None:
        items: PaginatedList[str] = PaginatedList(viewport=5)
        items.refill(list("abcde"))
        for _ in range(4):
            items.scroll_entry(down=True)

        items.refill(["x", "y"])
        self.assertEqual(items.selected, 1)

        items.refill([])
        self.assertEqual(items.selected, 0)

    def test_select_index_scrolls_only_as_needed(self) -> None:
        items = _make_list(10, 3)

        items.select_index(8)
        self.assertEqual((items.scroll, items.selected), (6, 2))

        items.select_index(7)
        self.assertEqual((items.scroll, items.selected), (6, 1))

        items.select_index(1)
        self.assertEqual((items.scroll, items.selected), (0, 1))

        items.select_index(99)
        self.assertEqual(items.current(), 9)

    def test_select_visible_row_rejects_rows_outside_window(self) -> None:
        items = _make_list(2, 5)
        items.select_visible_row(1)
        self.assertEqual(items.current(), 1)

        with self.assertRaises(OutOfRange):
            items.select_visible_row(2)


if __name__ == "__main__":
    unittest.main()
