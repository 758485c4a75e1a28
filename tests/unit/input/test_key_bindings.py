from __future__ import annotations

import unittest

from hintfm.errors import ConfigError
from hintfm.input import KeyBindings, KeyEvent, KeyEventKind, key_from_name
from hintfm.input import keys
from hintfm.input.commands import (
    Backspace,
    ClearClipboard,
    Delete,
    EntryScroll,
    Exit,
    ExitHint,
    FinderMode,
    HintChar,
    HintMode,
    OmnibarMode,
    Paste,
    SelectEntry,
    Submit,
    Write,
    Yank,
    refreshes_preview,
)
from hintfm.model import Mode, OmnibarKind


def _press(key: str) -> KeyEvent:
    return KeyEvent(key)


class DefaultBindingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.bindings = KeyBindings.from_config()

    def test_normal_mode_defaults(self) -> None:
        expected = {
            "j": EntryScroll(down=True),
            "k": EntryScroll(down=False),
            keys.ENTER: SelectEntry(),
            "f": HintMode(),
            "/": FinderMode(zoxide=False),
            "z": FinderMode(zoxide=True),
            "r": OmnibarMode(OmnibarKind.RENAME),
            "t": OmnibarMode(OmnibarKind.TOUCH),
            "m": OmnibarMode(OmnibarKind.MKDIR),
            "y": Yank(cut=False),
            "x": Yank(cut=True),
            "p": Paste(),
            "d": Delete(force=False),
            "D": Delete(force=True),
            "c": ClearClipboard(),
            "q": Exit(),
        }
        for key, command in expected.items():
            self.assertEqual(self.bindings.resolve(Mode.NORMAL, _press(key)), command, key)

    def test_normal_mode_ignores_unbound_keys_and_exit_hint(self) -> None:
        self.assertIsNone(self.bindings.resolve(Mode.NORMAL, _press("Z")))
        self.assertIsNone(self.bindings.resolve(Mode.NORMAL, _press(keys.LEFT)))
        self.assertIsNone(self.bindings.resolve(Mode.NORMAL, _press(keys.ESC)))

    def test_hint_mode_turns_characters_into_hint_chars(self) -> None:
        self.assertEqual(self.bindings.resolve(Mode.HINT, _press("a")), HintChar("a"))
        self.assertEqual(self.bindings.resolve(Mode.HINT, _press("j")), HintChar("j"))
        self.assertEqual(self.bindings.resolve(Mode.HINT, _press(keys.ESC)), ExitHint())
        self.assertIsNone(self.bindings.resolve(Mode.HINT, _press(keys.UP)))

    def test_finder_mode_structural_keys_then_text(self) -> None:
        self.assertEqual(self.bindings.resolve(Mode.FINDER, _press("j")), Write("j"))
        self.assertEqual(self.bindings.resolve(Mode.FINDER, _press("q")), Write("q"))
        self.assertEqual(self.bindings.resolve(Mode.FINDER, _press(keys.BACKSPACE)), Backspace())
        self.assertEqual(self.bindings.resolve(Mode.FINDER, _press(keys.ENTER)), SelectEntry())
        self.assertEqual(self.bindings.resolve(Mode.FINDER, _press(keys.DOWN)), EntryScroll(down=True))
        self.assertEqual(self.bindings.resolve(Mode.FINDER, _press(keys.UP)), EntryScroll(down=False))
        self.assertEqual(self.bindings.resolve(Mode.FINDER, _press(keys.ESC)), Exit())
        self.assertIsNone(self.bindings.resolve(Mode.FINDER, _press(keys.LEFT)))

    def test_omnibar_mode_structural_keys_then_text(self) -> None:
        self.assertEqual(self.bindings.resolve(Mode.OMNIBAR, _press(keys.ENTER)), Submit())
        self.assertEqual(self.bindings.resolve(Mode.OMNIBAR, _press(keys.BACKSPACE)), Backspace())
        self.assertEqual(self.bindings.resolve(Mode.OMNIBAR, _press(keys.ESC)), Exit())
        self.assertEqual(self.bindings.resolve(Mode.OMNIBAR, _press("é")), Write("é"))
        self.assertIsNone(self.bindings.resolve(Mode.OMNIBAR, _press(keys.TAB)))

    def test_non_press_events_resolve_to_nothing(self) -> None:
        for kind in (KeyEventKind.REPEAT, KeyEventKind.RELEASE):
            self.assertIsNone(self.bindings.resolve(Mode.NORMAL, KeyEvent("j", kind)))
            self.assertIsNone(self.bindings.resolve(Mode.FINDER, KeyEvent("a", kind)))

    def test_preview_refresh_follows_every_command_but_exit(self) -> None:
        self.assertTrue(refreshes_preview(EntryScroll(down=True)))
        self.assertTrue(refreshes_preview(Write("a")))
        self.assertFalse(refreshes_preview(Exit()))
        self.assertFalse(refreshes_preview(None))


class ConfiguredBindingTests(unittest.TestCase):
    def test_user_section_overrides_defaults(self) -> None:
        bindings = KeyBindings.from_config({"filelist": {"scroll_down": "n", "scroll_up": "e"}})

        self.assertEqual(bindings.resolve(Mode.NORMAL, _press("n")), EntryScroll(down=True))
        self.assertEqual(bindings.resolve(Mode.NORMAL, _press("e")), EntryScroll(down=False))
        self.assertIsNone(bindings.resolve(Mode.NORMAL, _press("j")))
        self.assertEqual(bindings.resolve(Mode.NORMAL, _press("q")), Exit())

    def test_named_keys_are_case_insensitive(self) -> None:
        bindings = KeyBindings.from_config({"finder": {"select_entry": "Tab", "exit": "ENTER"}})

        self.assertEqual(bindings.resolve(Mode.FINDER, _press(keys.TAB)), SelectEntry())
        self.assertEqual(bindings.resolve(Mode.FINDER, _press(keys.ENTER)), Exit())

    def test_remapped_exit_hint_is_used_in_hint_mode(self) -> None:
        bindings = KeyBindings.from_config({"filelist": {"exit_hint": "tab"}})

        self.assertEqual(bindings.resolve(Mode.HINT, _press(keys.TAB)), ExitHint())
        self.assertIsNone(bindings.resolve(Mode.HINT, _press(keys.ESC)))

    def test_hint_characters_win_over_character_exit_hint(self) -> None:
        bindings = KeyBindings.from_config({"filelist": {"exit_hint": "g"}})

        self.assertEqual(bindings.resolve(Mode.HINT, _press("g")), HintChar("g"))
        self.assertIsNone(bindings.resolve(Mode.NORMAL, _press("g")))

    def test_character_key_on_finder_command_is_rejected(self) -> None:
        with self.assertRaises(ConfigError):
            KeyBindings.from_config({"finder": {"exit": "q"}})
        with self.assertRaises(ConfigError):
            KeyBindings.from_config({"omnibar": {"submit": "s"}})

    def test_duplicate_key_in_one_mode_is_rejected(self) -> None:
        with self.assertRaises(ConfigError) as ctx:
            KeyBindings.from_config({"filelist": {"yank": "j"}})

        self.assertIn("scroll_down", str(ctx.exception))

    def test_same_key_in_different_modes_is_allowed(self) -> None:
        bindings = KeyBindings.from_config({"filelist": {"select_entry": "tab"}, "finder": {"select_entry": "tab"}})

        self.assertEqual(bindings.resolve(Mode.NORMAL, _press(keys.TAB)), SelectEntry())
        self.assertEqual(bindings.resolve(Mode.FINDER, _press(keys.TAB)), SelectEntry())

    def test_malformed_entries_are_rejected(self) -> None:
        bad_configs = [
            {"filelist": {"teleport": "g"}},
            {"filelist": {"exit": "ctrl-q"}},
            {"filelist": {"exit": 5}},
            {"filelist": {"exit": ""}},
            {"finder": ["exit"]},
        ]
        for config in bad_configs:
            with self.assertRaises(ConfigError, msg=repr(config)):
                KeyBindings.from_config(config)

    def test_as_config_round_trips(self) -> None:
        bindings = KeyBindings.from_config({"filelist": {"exit": "Q"}, "omnibar": {"exit": "tab"}})

        config = bindings.as_config()

        self.assertEqual(config["filelist"]["exit"], "Q")
        self.assertEqual(config["omnibar"]["exit"], "tab")
        self.assertEqual(config["finder"]["scroll_down"], "down")
        self.assertEqual(KeyBindings.from_config(config), bindings)

    def test_key_for_reports_display_name(self) -> None:
        bindings = KeyBindings.from_config()

        self.assertEqual(bindings.key_for("filelist", "select_entry"), "enter")
        self.assertEqual(bindings.key_for("filelist", "force_delete"), "D")


class KeyNameTests(unittest.TestCase):
    def test_single_characters_keep_case(self) -> None:
        self.assertEqual(key_from_name("D"), "D")
        self.assertEqual(key_from_name(";"), ";")

    def test_named_keys_map_to_tokens(self) -> None:
        self.assertEqual(key_from_name("PageDown"), keys.PAGE_DOWN)
        self.assertEqual(key_from_name("backtab"), keys.BACKTAB)

    def test_unknown_names_raise(self) -> None:
        with self.assertRaises(ConfigError):
            key_from_name("hyper")


if __name__ == "__main__":
    unittest.main()
