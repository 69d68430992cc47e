import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "host"))
sys.path.insert(0, str(ROOT / "packages" / "styling"))

from keyhue_styling.colors import Color
from keyhue_styling.themes import THEMES, get_theme, list_themes, require_theme


class ThemeCatalogTests(unittest.TestCase):
    def test_catalog_order_and_size(self):
        names = list_themes()
        self.assertEqual(len(names), 45)
        self.assertEqual(names[0], "ocean-blue")
        self.assertEqual(names[-1], "fire-red")
        self.assertEqual(len(set(names)), len(names))

    def test_theme_values(self):
        theme = get_theme("ocean-blue")
        self.assertEqual(theme.keyboard_background_color, Color.from_rgb255(1, 70, 112))
        self.assertEqual(theme.secondary_background_color.to_hex(), "#00385A")

    def test_out_of_range_channel_is_clamped(self):
        theme = require_theme("fire-red")
        self.assertEqual(theme.primary_foreground_color.blue, 1.0)
        self.assertEqual(theme.primary_foreground_color.to_hex(), "#FFFFFF")

    def test_unknown_and_empty_names(self):
        self.assertIsNone(get_theme(None))
        self.assertIsNone(get_theme(""))
        with self.assertLogs("keyhue", level="WARNING"):
            self.assertIsNone(get_theme("not-a-theme"))

    def test_require_theme_lists_available(self):
        with self.assertRaises(KeyError) as ctx:
            require_theme("not-a-theme")
        self.assertIn("ocean-blue", str(ctx.exception))

    def test_themes_compare_by_value(self):
        for name, theme in THEMES.items():
            self.assertEqual(theme.name, name)
            self.assertEqual(get_theme(name), theme)


class ColorTests(unittest.TestCase):
    def test_hex_parsing(self):
        self.assertEqual(Color.from_hex("#007AFF").to_hex(), "#007AFF")
        self.assertEqual(Color.from_hex("00000080").rgba8(), (0, 0, 0, 128))
        with self.assertRaises(ValueError):
            Color.from_hex("#12345")

    def test_with_opacity_multiplies_alpha(self):
        color = Color(0.2, 0.4, 0.6, 0.5).with_opacity(0.5)
        self.assertAlmostEqual(color.alpha, 0.25)
        self.assertEqual((color.red, color.green, color.blue), (0.2, 0.4, 0.6))


if __name__ == "__main__":
    unittest.main()
