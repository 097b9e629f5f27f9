"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_listing_defaults_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertFalse(config.load_show_hidden())
                self.assertTrue(config.save_show_hidden(True))
                self.assertTrue(config.save_follow_symlinks(True))

                self.assertTrue(config.load_show_hidden())
                self.assertTrue(config.load_follow_symlinks())
                self.assertTrue(config_path.exists())

    def test_non_boolean_values_fall_back_to_false(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                config.save_config({"show_hidden": "yes", "follow_symlinks": 1})
                self.assertFalse(config.load_show_hidden())
                self.assertFalse(config.load_follow_symlinks())

    def test_theme_name_is_stripped_and_blank_names_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_theme_name())
                self.assertTrue(config.save_theme_name("  ocean "))
                self.assertFalse(config.save_theme_name("   "))
                self.assertEqual(config.load_theme_name(), "ocean")

    def test_malformed_config_loads_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
            config_path.write_text("[1, 2]\n", encoding="utf-8")
            with mock.patch("dirtree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_save_config_reports_unwritable_location(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("dirtree.config.CONFIG_PATH", blocker / "config.json"):
                self.assertFalse(config.save_config({"theme": "ocean"}))


if __name__ == "__main__":
    unittest.main()
