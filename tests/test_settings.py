"""Unit tests for settings persistence."""

import json
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from inedit.settings import EditorSettings, SettingsStore, validate_setting


class TestSettingsStore(unittest.TestCase):
    """Test loading and saving editor settings."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.store = SettingsStore(Path(self.temp_dir) / "inedit")

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_missing_file_gives_defaults(self):
        """Loading with no settings file gives the defaults."""
        self.assertEqual(self.store.load(), EditorSettings())

    def test_save_and_load(self):
        """Saved settings load back unchanged."""
        settings = EditorSettings(style="fancy", lazy=False, tab_width=2, header_message="Commit")
        self.assertTrue(self.store.save(settings))
        self.assertTrue(self.store.path.exists())
        self.assertEqual(self.store.load(), settings)

    def test_save_leaves_no_temp_file(self):
        """Saving replaces the temp file with settings.json."""
        self.store.save(EditorSettings())
        names = [p.name for p in self.store.path.parent.iterdir()]
        self.assertEqual(names, ["settings.json"])

    def test_corrupted_file_gives_defaults(self):
        """Invalid JSON is logged and ignored."""
        self.store.path.parent.mkdir(parents=True)
        self.store.path.write_text("{not json", encoding="utf-8")
        with self.assertLogs("inedit.settings", level="WARNING"):
            self.assertEqual(self.store.load(), EditorSettings())

    def test_non_dict_file_gives_defaults(self):
        """A JSON value that is not an object is ignored."""
        self.store.path.parent.mkdir(parents=True)
        self.store.path.write_text("[1, 2, 3]", encoding="utf-8")
        self.assertEqual(self.store.load(), EditorSettings())

    def test_invalid_and_unknown_keys_are_ignored(self):
        """Bad values and unknown keys are skipped, valid ones kept."""
        self.store.path.parent.mkdir(parents=True)
        data = {"style": "gothic", "tab_width": 8, "lazy": "yes", "future_option": 1}
        self.store.path.write_text(json.dumps(data), encoding="utf-8")
        loaded = self.store.load()
        self.assertEqual(loaded.style, "classic")
        self.assertEqual(loaded.tab_width, 8)
        self.assertTrue(loaded.lazy)

    def test_save_failure_returns_false(self):
        """Saving returns False when the directory cannot be created."""
        with patch("pathlib.Path.mkdir", side_effect=OSError("read-only")):
            self.assertFalse(self.store.save(EditorSettings()))

    def test_default_location_uses_platform_config_dir(self):
        """The store lives in the platform config directory."""
        with patch("platformdirs.user_config_dir", return_value=self.temp_dir) as config_dir:
            store = SettingsStore()
        config_dir.assert_called_once_with("inedit")
        self.assertEqual(store.path, Path(self.temp_dir) / "settings.json")


class TestValidateSetting(unittest.TestCase):
    def test_style(self):
        """Only the known style names are accepted."""
        self.assertTrue(validate_setting("style", "plain"))
        self.assertFalse(validate_setting("style", "other"))

    def test_tab_width(self):
        """Tab width must be a small positive integer."""
        self.assertTrue(validate_setting("tab_width", 4))
        self.assertFalse(validate_setting("tab_width", 0))
        self.assertFalse(validate_setting("tab_width", True))
        self.assertFalse(validate_setting("tab_width", "4"))

    def test_messages_and_flags(self):
        """Messages must be strings and flags booleans."""
        self.assertTrue(validate_setting("header_message", "Hi"))
        self.assertFalse(validate_setting("gutter_message", None))
        self.assertTrue(validate_setting("lazy", False))
        self.assertFalse(validate_setting("unknown", 1))


if __name__ == '__main__':
    unittest.main()
