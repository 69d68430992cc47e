import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "host"))

from keyhue_core.context import ContextState, KeyboardContext
from keyhue_core.models import ColorScheme, KeyboardLocale, KeyboardType, Locale
from keyhue_host import TextDocumentProxy, TraitCollection


class KeyboardContextTests(unittest.TestCase):
    def setUp(self):
        self.context = KeyboardContext()
        self.changes = []
        self.context.subscribe(self.changes.append)

    def test_update_with_equal_value_is_silent(self):
        self.assertIsNone(self.context.update(locale=Locale("en")))
        self.assertEqual(self.changes, [])
        self.assertEqual(self.context.generation, 0)

    def test_update_publishes_one_batch(self):
        change = self.context.update(has_full_access=True, needs_input_mode_switch_key=True, locale=Locale("en"))
        self.assertEqual(len(self.changes), 1)
        self.assertIs(change, self.changes[0])
        self.assertEqual(change.changed, frozenset({"has_full_access", "needs_input_mode_switch_key"}))
        self.assertFalse(change.previous.has_full_access)
        self.assertTrue(change.current.has_full_access)
        self.assertEqual(change.generation, 1)

    def test_snapshots_are_not_mutated(self):
        before = self.context.state
        self.context.update(has_full_access=True)
        self.assertFalse(before.has_full_access)
        self.assertTrue(self.context.has_full_access)

    def test_unknown_field_raises(self):
        with self.assertRaises(AttributeError):
            self.context.update(no_such_field=1)

    def test_proxies_compare_by_identity(self):
        first = TextDocumentProxy(name="field")
        twin = TextDocumentProxy(name="field")
        self.context.update(original_text_document_proxy=first)
        self.assertIsNone(self.context.update(original_text_document_proxy=first))
        self.assertIsNotNone(self.context.update(original_text_document_proxy=twin))
        self.assertEqual(len(self.changes), 2)

    def test_unsubscribe_stops_notifications(self):
        seen = []
        unsubscribe = self.context.subscribe(seen.append)
        unsubscribe()
        self.context.update(has_full_access=True)
        self.assertEqual(seen, [])

    def test_failing_subscriber_does_not_block_others(self):
        context = KeyboardContext()
        seen = []

        def boom(_change):
            raise RuntimeError("subscriber bug")

        context.subscribe(boom)
        context.subscribe(seen.append)
        with self.assertLogs("keyhue", level="ERROR"):
            context.update(has_full_access=True)
        self.assertEqual(len(seen), 1)

    def test_color_scheme_follows_traits(self):
        self.assertEqual(self.context.color_scheme, ColorScheme.LIGHT)
        self.context.update(trait_collection=TraitCollection(user_interface_style="dark"))
        self.assertTrue(self.context.has_dark_color_scheme)
        self.context.update(trait_collection=TraitCollection(user_interface_style="vivid"))
        self.assertEqual(self.context.color_scheme, ColorScheme.UNRECOGNIZED)
        self.assertFalse(self.context.has_dark_color_scheme)

    def test_selected_theme_follows_scheme(self):
        light, dark = object(), object()
        self.context.select_light_theme(light)
        self.context.select_dark_theme(dark)
        self.assertIs(self.context.selected_theme, light)
        self.context.update(trait_collection=TraitCollection(user_interface_style="dark"))
        self.assertIs(self.context.selected_theme, dark)
        self.context.update(trait_collection=TraitCollection(user_interface_style="vivid"))
        self.assertIsNone(self.context.selected_theme)

    def test_keyboard_locale_helpers(self):
        self.context.set_locales([KeyboardLocale.ENGLISH, KeyboardLocale.GEORGIAN])
        self.context.set_locale(KeyboardLocale.GEORGIAN)
        self.assertEqual(self.context.keyboard_locale, KeyboardLocale.GEORGIAN)
        self.assertTrue(self.context.has_multiple_locales)
        self.assertTrue(self.context.state.has_keyboard_locale(KeyboardLocale.GEORGIAN))

    def test_keyboard_type_is_written_once(self):
        self.context.set_keyboard_type(KeyboardType.numeric())
        self.context.set_keyboard_type(KeyboardType.numeric())
        self.assertEqual(len(self.changes), 1)
        self.assertTrue(self.context.state.has_keyboard_type(KeyboardType.numeric()))


class SelectNextLocaleTests(unittest.TestCase):
    def _context(self, locale, locales):
        return KeyboardContext(ContextState(locale=Locale(locale), locales=tuple(Locale(x) for x in locales)))

    def test_advances_to_next(self):
        context = self._context("en", ["en", "fr", "de"])
        context.select_next_locale()
        self.assertEqual(context.locale, Locale("fr"))
        context.select_next_locale()
        self.assertEqual(context.locale, Locale("de"))

    def test_wraps_to_first(self):
        context = self._context("de", ["en", "fr", "de"])
        context.select_next_locale()
        self.assertEqual(context.locale, Locale("en"))

    def test_absent_locale_falls_back_to_first(self):
        context = self._context("sv", ["en", "fr", "de"])
        context.select_next_locale()
        self.assertEqual(context.locale, Locale("en"))

    def test_single_locale_is_silent(self):
        context = self._context("en", ["en"])
        seen = []
        context.subscribe(seen.append)
        context.select_next_locale()
        self.assertEqual(context.locale, Locale("en"))
        self.assertEqual(seen, [])

    def test_empty_locales_keeps_current(self):
        context = self._context("en", [])
        with self.assertLogs("keyhue", level="WARNING"):
            context.select_next_locale()
        self.assertEqual(context.locale, Locale("en"))

    def test_set_locales_rejects_empty(self):
        context = KeyboardContext()
        with self.assertRaises(ValueError):
            context.set_locales([])

    def test_update_rejects_empty_locales(self):
        context = KeyboardContext()
        with self.assertRaises(ValueError):
            context.update(locales=())
        self.assertEqual(context.locales, (Locale("en"),))
        self.assertEqual(context.generation, 0)


if __name__ == "__main__":
    unittest.main()
