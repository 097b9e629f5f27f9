"""Theme lookup tests."""

from __future__ import annotations

import unittest

from dirtree.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME, available_theme_names, resolve_theme


class ThemeResolutionTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_unknown_or_blank_names_fall_back_to_default(self) -> None:
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("  "), DEFAULT_THEME)
        self.assertIs(resolve_theme("solarized"), DEFAULT_THEME)
        self.assertIs(resolve_theme(" Ocean "), OCEAN_THEME)

    def test_no_color_always_wins(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
