import sys
import threading
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "host"))

from keyhue_core.context import KeyboardContext
from keyhue_core.models import DeviceType, InterfaceOrientation, KeyboardType, KeyboardTypeKind
from keyhue_core.sync import ContextSynchronizer, UpdateTurn
from keyhue_host import (
    HostKeyboardType,
    HostReturnKeyType,
    HostSnapshot,
    Size,
    StaticHostProvider,
    TextDocumentProxy,
    TraitCollection,
)


class UpdateTurnTests(unittest.TestCase):
    def test_jobs_run_in_post_order(self):
        turn = UpdateTurn()
        seen = []
        turn.post(lambda: seen.append(1))
        turn.post(lambda: seen.append(2))
        self.assertEqual(turn.pending, 2)
        self.assertEqual(turn.drain(), 2)
        self.assertEqual(seen, [1, 2])
        self.assertEqual(turn.pending, 0)

    def test_posting_from_another_thread(self):
        turn = UpdateTurn()
        seen = []
        worker = threading.Thread(target=lambda: turn.post(lambda: seen.append(threading.get_ident())))
        worker.start()
        worker.join()
        turn.drain()
        self.assertEqual(seen, [threading.get_ident()])

    def test_drain_from_second_thread_is_rejected(self):
        turn = UpdateTurn()
        turn.drain()
        errors = []

        def other():
            try:
                turn.drain()
            except RuntimeError as exc:
                errors.append(exc)

        worker = threading.Thread(target=other)
        worker.start()
        worker.join()
        self.assertEqual(len(errors), 1)

    def test_failing_job_does_not_stop_the_turn(self):
        turn = UpdateTurn()
        seen = []

        def boom():
            raise RuntimeError("job bug")

        turn.post(boom)
        turn.post(lambda: seen.append("after"))
        with self.assertLogs("keyhue", level="ERROR"):
            turn.drain()
        self.assertEqual(seen, ["after"])


class ContextSynchronizerTests(unittest.TestCase):
    def setUp(self):
        self.context = KeyboardContext()
        self.turn = UpdateTurn()
        self.sync = ContextSynchronizer(self.context, self.turn)
        self.changes = []
        self.context.subscribe(self.changes.append)
        self.proxy = TextDocumentProxy(name="field")
        self.host = StaticHostProvider(
            HostSnapshot(
                original_text_document_proxy=self.proxy,
                device_type="phone",
                orientation="portrait",
                screen_size=Size(390, 844),
                view_width=390,
                has_full_access=True,
                trait_collection=TraitCollection(user_interface_style="dark"),
            )
        )

    def _sync(self):
        self.sync.sync(self.host)
        self.turn.drain()

    def test_sync_is_deferred_until_drain(self):
        self.sync.sync(self.host)
        self.assertEqual(self.changes, [])
        self.turn.drain()
        self.assertEqual(len(self.changes), 1)

    def test_second_sync_is_silent(self):
        self._sync()
        self._sync()
        self.assertEqual(len(self.changes), 1)
        self.assertEqual(self.sync.recent_events()[-1]["event"], "context_sync_skipped")

    def test_sync_applies_host_facts(self):
        self._sync()
        state = self.context.state
        self.assertIs(state.original_text_document_proxy, self.proxy)
        self.assertTrue(state.has_full_access)
        self.assertTrue(state.has_dark_color_scheme)
        self.assertEqual(state.screen_size, Size(390, 844))
        self.assertEqual(state.device_type, DeviceType.PHONE)

    def test_sync_reads_snapshot_when_job_runs(self):
        self.sync.sync(self.host)
        self.host.update(has_dictation_key=True)
        self.turn.drain()
        self.assertTrue(self.context.state.has_dictation_key)

    def test_missing_facts_use_defaults(self):
        self.host = StaticHostProvider(HostSnapshot())
        self._sync()
        state = self.context.state
        self.assertEqual(state.interface_orientation, InterfaceOrientation.PORTRAIT)
        self.assertEqual(state.screen_size, Size())
        self.assertEqual(state.device_type, DeviceType.PHONE)

    def test_prefers_autocomplete_uses_current_proxy(self):
        self._sync()
        self.assertTrue(self.context.state.prefers_autocomplete)
        url_field = TextDocumentProxy(name="url", keyboard_type=HostKeyboardType.URL)
        self.host.update(original_text_document_proxy=url_field)
        self._sync()
        self.assertFalse(self.context.state.prefers_autocomplete)

    def test_search_return_key_disables_autocomplete(self):
        search = TextDocumentProxy(name="search", return_key_type=HostReturnKeyType.SEARCH)
        self.host.update(text_input_proxy=search)
        self._sync()
        self.assertIs(self.context.state.text_document_proxy, search)
        self.assertFalse(self.context.state.prefers_autocomplete)

    def test_email_keyboard_disables_autocomplete(self):
        self.context.set_keyboard_type(KeyboardType(KeyboardTypeKind.EMAIL))
        self._sync()
        self.assertFalse(self.context.state.prefers_autocomplete)

    def test_proxy_sync_tracks_identity(self):
        self._sync()
        before = len(self.changes)
        self.sync.sync_text_document_proxy(self.host)
        self.assertEqual(self.turn.pending, 0)
        replacement = TextDocumentProxy(name="field")
        self.host.update(original_text_document_proxy=replacement)
        self.sync.sync_text_document_proxy(self.host)
        self.turn.drain()
        self.assertIs(self.context.state.original_text_document_proxy, replacement)
        self.assertEqual(len(self.changes), before + 1)

    def test_text_input_proxy_sync(self):
        field = TextDocumentProxy(name="inline")
        self.host.update(text_input_proxy=field)
        self.sync.sync_text_input_proxy(self.host)
        self.turn.drain()
        self.assertIs(self.context.state.text_input_proxy, field)

    def test_layout_sync_detects_floating(self):
        self._sync()
        self.host.update(view_width=120)
        self.sync.sync_after_layout(self.host)
        self.turn.drain()
        self.assertTrue(self.context.state.is_keyboard_floating)
        self.host.update(view_width=390)
        self.sync.sync_after_layout(self.host)
        self.turn.drain()
        self.assertFalse(self.context.state.is_keyboard_floating)

    def test_layout_sync_without_view_width_keeps_floating_flag(self):
        host = StaticHostProvider(HostSnapshot(device_type="phone", screen_size=Size(390, 844)))
        self.sync.sync(host)
        self.sync.sync_after_layout(host)
        self.turn.drain()
        self.assertFalse(self.context.state.is_keyboard_floating)
        self.assertEqual(self.context.state.screen_size, Size(390, 844))

    def test_layout_sync_reapplies_on_rotation(self):
        self._sync()
        self.host.update(orientation="landscape_left", screen_size=Size(844, 390), view_width=844)
        self.sync.sync_after_layout(self.host)
        self.turn.drain()
        state = self.context.state
        self.assertEqual(state.interface_orientation, InterfaceOrientation.LANDSCAPE_LEFT)
        self.assertEqual(state.screen_size, Size(844, 390))
        self.assertEqual(self.turn.pending, 0)

    def test_layout_sync_without_rotation_only_touches_floating(self):
        self._sync()
        self.host.update(has_dictation_key=True)
        self.sync.sync_after_layout(self.host)
        self.turn.drain()
        self.assertFalse(self.context.state.has_dictation_key)

    def test_event_history_is_bounded(self):
        sync = ContextSynchronizer(self.context, self.turn, event_history=3)
        for _ in range(5):
            sync.sync(self.host)
        self.turn.drain()
        self.assertEqual(len(sync.recent_events()), 3)


if __name__ == "__main__":
    unittest.main()
