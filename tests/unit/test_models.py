import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "host"))

from keyhue_core.models import (
    ActionKind,
    ColorScheme,
    DeviceType,
    InterfaceOrientation,
    KeyboardAction,
    KeyboardCase,
    KeyboardLocale,
    KeyboardType,
    KeyboardTypeKind,
    Locale,
    ReturnKeyType,
    SystemKey,
    is_lowercased_with_uppercase_variant,
    parse_action,
)
from keyhue_host import HostKeyboardType, HostReturnKeyType


class EnumFallbackTests(unittest.TestCase):
    def test_color_scheme_from_interface_style(self):
        self.assertEqual(ColorScheme.from_interface_style(None), ColorScheme.LIGHT)
        self.assertEqual(ColorScheme.from_interface_style("unspecified"), ColorScheme.LIGHT)
        self.assertEqual(ColorScheme.from_interface_style("dark"), ColorScheme.DARK)
        self.assertEqual(ColorScheme.from_interface_style("sepia"), ColorScheme.UNRECOGNIZED)

    def test_unknown_device_and_orientation(self):
        self.assertEqual(DeviceType("car"), DeviceType.OTHER)
        self.assertEqual(InterfaceOrientation("sideways"), InterfaceOrientation.UNKNOWN)
        self.assertFalse(InterfaceOrientation.UNKNOWN.is_landscape)
        self.assertTrue(InterfaceOrientation.LANDSCAPE_RIGHT.is_landscape)


class ActionTests(unittest.TestCase):
    def test_action_categories(self):
        self.assertTrue(KeyboardAction.backspace().is_system_action)
        self.assertTrue(KeyboardAction.primary(ReturnKeyType.NEW_LINE).is_system_action)
        self.assertTrue(KeyboardAction.primary(ReturnKeyType.DONE).is_primary_action)
        self.assertFalse(KeyboardAction.primary(ReturnKeyType.RETURN).is_primary_action)
        self.assertTrue(KeyboardAction.shift(KeyboardCase.CAPS_LOCKED).is_uppercased_shift_action)
        self.assertFalse(KeyboardAction.shift().is_uppercased_shift_action)
        self.assertTrue(KeyboardAction.emoji("x").is_input_action)
        self.assertFalse(KeyboardAction.space().is_system_action)

    def test_keyboard_type_actions(self):
        action = KeyboardAction.switch_to(KeyboardType.alphabetic())
        self.assertTrue(action.is_alphabetic_keyboard_type_action)
        self.assertFalse(action.is_keyboard_type_action(KeyboardTypeKind.NUMERIC))

    def test_parse_action(self):
        self.assertEqual(parse_action("character:a"), KeyboardAction.character("a"))
        self.assertEqual(parse_action("shift:caps_locked"), KeyboardAction.shift(KeyboardCase.CAPS_LOCKED))
        self.assertEqual(parse_action("primary:go"), KeyboardAction.primary(ReturnKeyType.GO))
        self.assertEqual(parse_action("keyboard_type:numeric").keyboard_type.kind, KeyboardTypeKind.NUMERIC)
        self.assertEqual(parse_action("system:dictation"), KeyboardAction.system(SystemKey.DICTATION))
        self.assertEqual(parse_action("none").kind, ActionKind.NONE)
        with self.assertRaises(ValueError):
            parse_action("teleport")

    def test_uppercase_variant(self):
        self.assertTrue(is_lowercased_with_uppercase_variant("a"))
        self.assertFalse(is_lowercased_with_uppercase_variant("A"))
        self.assertFalse(is_lowercased_with_uppercase_variant("1"))


class LocaleTests(unittest.TestCase):
    def test_language_matching(self):
        self.assertTrue(Locale("en_GB").matches(KeyboardLocale.ENGLISH))
        self.assertTrue(Locale("ka").matches(KeyboardLocale.GEORGIAN))
        self.assertFalse(Locale("pt-PT").matches(KeyboardLocale.SPANISH))
        self.assertEqual(str(KeyboardLocale.PORTUGUESE.locale), "pt_PT")


class HostHintTests(unittest.TestCase):
    def test_autocomplete_hints(self):
        self.assertFalse(HostKeyboardType.URL.prefers_autocomplete)
        self.assertTrue(HostKeyboardType.DEFAULT.prefers_autocomplete)
        self.assertFalse(HostReturnKeyType.SEARCH.prefers_autocomplete)
        self.assertTrue(HostReturnKeyType.DONE.prefers_autocomplete)
        self.assertFalse(KeyboardType(KeyboardTypeKind.EMAIL).prefers_autocomplete)


if __name__ == "__main__":
    unittest.main()
