import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "host"))

from keyhue_core.config import AppConfig, load_config, save_config
from keyhue_core.models import Locale


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.locales.locales, ["en"])
            self.assertEqual(cfg.sync.drain_ms, 50)
            self.assertEqual(cfg.keyboard_locales(), (Locale("en"),))

    def test_corrupt_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.locales.locales, ["en"])

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.locales.locales = ["en", "fr", "de"]
            cfg.sync.drain_ms = 120
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.locales.locales, ["en", "fr", "de"])
            self.assertEqual(reloaded.sync.drain_ms, 120)

    def test_values_are_clamped(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": 2,
                "locales": {"locales": ["", "  "]},
                "sync": {"drain_ms": 1, "event_history": 5},
                "preview": {"width": 10, "height": 10, "key_height": 500},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.locales.locales, ["en"])
            self.assertEqual(cfg.sync.drain_ms, 16)
            self.assertEqual(cfg.sync.event_history, 100)
            self.assertEqual(cfg.preview.width, 320)
            self.assertEqual(cfg.preview.height, 160)
            self.assertEqual(cfg.preview.key_height, 40)

    def test_migrate_v1_single_locale(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            old = {"locale": "sv", "sync": {"drain_ms": 200}}
            path.write_text(json.dumps(old), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.config_version, 2)
            self.assertEqual(cfg.locales.locales, ["sv"])
            self.assertEqual(cfg.sync.drain_ms, 200)


if __name__ == "__main__":
    unittest.main()
