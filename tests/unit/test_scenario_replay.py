import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "host"))

from keyhue_core.replay import ScenarioRunner
from keyhue_host import HostKeyboardType, ScenarioHostProvider, Size

SCENARIO = ROOT / "tests" / "scenarios" / "rotate_and_focus.jsonl"


class ScenarioHostProviderTests(unittest.TestCase):
    def test_steps_are_cumulative(self):
        host = ScenarioHostProvider()
        steps = list(host.steps(SCENARIO))
        self.assertEqual(len(steps), 6)
        self.assertEqual(steps[1].screen_size, Size(390, 844))
        self.assertEqual(steps[3].orientation, "landscape_left")
        self.assertEqual(steps[3].trait_collection.user_interface_style, "dark")

    def test_named_proxies_keep_identity(self):
        host = ScenarioHostProvider()
        steps = list(host.steps(SCENARIO))
        self.assertIs(steps[0].original_text_document_proxy, steps[4].original_text_document_proxy)
        self.assertEqual(steps[4].text_document_proxy.keyboard_type, HostKeyboardType.URL)

    def test_unknown_fact_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.jsonl"
            path.write_text(json.dumps({"battery": 3}) + "\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                list(ScenarioHostProvider().steps(path))


class ScenarioRunnerTests(unittest.TestCase):
    def test_replay_report_counts_changes(self):
        report = ScenarioRunner().run(SCENARIO)

        self.assertEqual(report.errors, [])
        self.assertEqual(report.total_steps, 6)
        self.assertEqual(report.changed_steps, 5)
        self.assertEqual(report.unchanged_steps, 1)
        self.assertEqual(report.notifications, 5)
        self.assertEqual(report.field_counts["interface_orientation"], 1)
        self.assertEqual(report.field_counts["prefers_autocomplete"], 1)
        self.assertEqual(report.final_state["color_scheme"], "dark")
        self.assertEqual(report.final_state["interface_orientation"], "landscape_left")
        self.assertTrue(report.final_state["is_keyboard_floating"])
        self.assertFalse(report.final_state["prefers_autocomplete"])

    def test_bad_step_is_reported(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bad.jsonl"
            path.write_text(
                json.dumps({"orientation": "portrait"}) + "\n" + json.dumps({"battery": 3}) + "\n",
                encoding="utf-8",
            )
            report = ScenarioRunner().run(path)
        self.assertEqual(report.total_steps, 1)
        self.assertEqual(len(report.errors), 1)
        self.assertIn("step 2", report.errors[0])


if __name__ == "__main__":
    unittest.main()
