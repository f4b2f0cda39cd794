import tempfile
import unittest
from pathlib import Path

from comparetable.io.store import JsonFileStore, MemoryStore
from comparetable.model.table import Theme
from comparetable.theme import ThemeController


class ThemeControllerTests(unittest.TestCase):
    def test_system_dark_then_toggle(self) -> None:
        store = MemoryStore()
        ctl = ThemeController(store, prefers_dark=True)
        self.assertIs(ctl.resolve(), Theme.DARK)
        self.assertEqual(ctl.indicator, "☀")
        self.assertIs(ctl.toggle(), Theme.LIGHT)
        self.assertEqual(ctl.indicator, "🌙")
        self.assertEqual(store.get("theme"), "light")

    def test_default_is_light(self) -> None:
        ctl = ThemeController(MemoryStore())
        self.assertIs(ctl.resolve(), Theme.LIGHT)

    def test_persisted_value_wins(self) -> None:
        ctl = ThemeController(MemoryStore({"theme": "light"}), prefers_dark=True)
        self.assertIs(ctl.resolve(), Theme.LIGHT)

    def test_unknown_persisted_value_falls_back(self) -> None:
        ctl = ThemeController(MemoryStore({"theme": "blue"}), prefers_dark=True)
        self.assertIs(ctl.resolve(), Theme.DARK)

    def test_every_state_entry_notifies_and_persists(self) -> None:
        seen = []
        store = MemoryStore()
        ctl = ThemeController(store, on_change=seen.append)
        ctl.resolve()
        self.assertEqual(store.get("theme"), "light")
        ctl.toggle()
        ctl.toggle()
        self.assertEqual(seen, [Theme.LIGHT, Theme.DARK, Theme.LIGHT])

    def test_reading_theme_before_resolve_raises_and_stores_nothing(self) -> None:
        store = MemoryStore()
        ctl = ThemeController(store, prefers_dark=True)
        with self.assertRaises(RuntimeError):
            ctl.theme
        self.assertIsNone(store.get("theme"))


class JsonFileStoreTests(unittest.TestCase):
    def test_round_trip(self) -> None:
        with tempfile.TemporaryDirectory(prefix="comparetable-state-") as td:
            path = Path(td) / "nested" / "state.json"
            store = JsonFileStore(path)
            self.assertIsNone(store.get("theme"))
            store.set("theme", "dark")
            self.assertEqual(JsonFileStore(path).get("theme"), "dark")

    def test_unreadable_file_reads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory(prefix="comparetable-state-") as td:
            path = Path(td) / "state.json"
            path.write_text("{not json", encoding="utf-8")
            store = JsonFileStore(path)
            self.assertIsNone(store.get("theme"))
            store.set("theme", "light")
            self.assertEqual(store.get("theme"), "light")

    def test_directory_as_state_path_falls_back(self) -> None:
        with tempfile.TemporaryDirectory(prefix="comparetable-state-") as td:
            path = Path(td) / "state"
            path.mkdir()
            store = JsonFileStore(path)
            with self.assertLogs("comparetable.io.store", level="WARNING"):
                self.assertIsNone(store.get("theme"))

            ctl = ThemeController(store, prefers_dark=True)
            with self.assertLogs("comparetable.io.store", level="WARNING"):
                self.assertIs(ctl.resolve(), Theme.DARK)
            with self.assertLogs("comparetable.io.store", level="WARNING"):
                self.assertIs(ctl.toggle(), Theme.LIGHT)

            self.assertTrue(path.is_dir())
            self.assertEqual(sorted(p.name for p in Path(td).iterdir()), ["state"])


if __name__ == "__main__":
    unittest.main()
