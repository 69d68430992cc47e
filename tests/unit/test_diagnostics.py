import json
import sys
import tempfile
import unittest
import zipfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "host"))

from keyhue_core.config import load_config
from keyhue_core.context import KeyboardContext
from keyhue_core.diagnostics import DiagnosticsExporter, build_doctor_payload, redact


class DiagnosticsTests(unittest.TestCase):
    def test_redact_masks_secret_keys(self):
        data = {"api_token": "abc", "nested": {"password": "x", "locale": "en"}, "items": [{"secret": 1}]}
        out = redact(data)
        self.assertEqual(out["api_token"], "***REDACTED***")
        self.assertEqual(out["nested"]["password"], "***REDACTED***")
        self.assertEqual(out["nested"]["locale"], "en")
        self.assertEqual(out["items"][0]["secret"], "***REDACTED***")

    def test_doctor_payload_summarizes_context(self):
        cfg = load_config(Path("/tmp/nonexistent-keyhue-config.json"))
        context = KeyboardContext()
        doctor = build_doctor_payload(cfg, context=context.state, theme_count=45)
        self.assertEqual(doctor["theme_count"], 45)
        self.assertEqual(doctor["context"]["color_scheme"], "light")
        self.assertEqual(doctor["context"]["locales"], ["en"])
        self.assertGreater(doctor["process_rss_mb"], 0)

    def test_bundle_exports_zip(self):
        cfg = load_config(Path("/tmp/nonexistent-keyhue-config.json"))
        doctor = build_doctor_payload(cfg)
        exporter = DiagnosticsExporter()
        events = [{"event": "context_sync", "changed": ["screen_size"]}]

        with tempfile.TemporaryDirectory() as tmp:
            bundle = exporter.bundle(cfg=cfg, doctor_payload=doctor, recent_sync_events=events, output_dir=Path(tmp))
            self.assertTrue(bundle.exists())

            with zipfile.ZipFile(bundle, "r") as zf:
                names = set(zf.namelist())
                self.assertIn("manifest.json", names)
                self.assertIn("doctor.json", names)
                self.assertIn("config.redacted.json", names)
                self.assertEqual(json.loads(zf.read("sync_events.json")), events)


if __name__ == "__main__":
    unittest.main()
