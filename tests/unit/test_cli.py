import io
import json
import sys
import unittest
from contextlib import redirect_stdout
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "desktop"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "host"))
sys.path.insert(0, str(ROOT / "packages" / "styling"))

from keyhue_app.cli import build_parser, cmd_style, cmd_themes_show


def _run(func, argv):
    args = build_parser().parse_args(argv)
    buf = io.StringIO()
    with redirect_stdout(buf):
        rc = func(args)
    return rc, json.loads(buf.getvalue())


class CliTests(unittest.TestCase):
    def test_run_command(self):
        parser = build_parser()
        args = parser.parse_args(["run"])
        self.assertEqual(args.command, "run")

    def test_themes_show_command(self):
        parser = build_parser()
        args = parser.parse_args(["themes", "show", "ocean-blue"])
        self.assertEqual(args.command, "themes")
        self.assertEqual(args.themes_cmd, "show")
        self.assertEqual(args.name, "ocean-blue")

    def test_style_command_defaults(self):
        parser = build_parser()
        args = parser.parse_args(["style", "--action", "character:a"])
        self.assertEqual(args.action, "character:a")
        self.assertFalse(args.pressed)
        self.assertEqual(args.scheme, "light")
        self.assertEqual(args.device, "phone")
        self.assertIsNone(args.theme)

    def test_replay_command(self):
        parser = build_parser()
        args = parser.parse_args(["replay", "--scenario", "sample.jsonl"])
        self.assertEqual(args.command, "replay")
        self.assertEqual(args.scenario, "sample.jsonl")
        self.assertFalse(args.no_layout)

    def test_style_resolves_themed_system_key(self):
        rc, payload = _run(cmd_style, ["style", "--action", "backspace", "--theme", "ocean-blue", "--pressed"])
        self.assertEqual(rc, 0)
        self.assertEqual(payload["theme"], "ocean-blue")
        self.assertEqual(payload["style"]["background_color"], "#00385A")
        self.assertEqual(payload["image"], "delete.left")

    def test_style_unknown_theme_is_user_error(self):
        rc, payload = _run(cmd_style, ["style", "--action", "character:a", "--theme", "no-such-theme"])
        self.assertEqual(rc, 2)
        self.assertFalse(payload["success"])
        self.assertIn("no-such-theme", payload["error"])

    def test_style_bad_action_is_user_error(self):
        rc, payload = _run(cmd_style, ["style", "--action", "warp:9"])
        self.assertEqual(rc, 2)
        self.assertIn("warp:9", payload["error"])

    def test_themes_show_unknown(self):
        rc, payload = _run(cmd_themes_show, ["themes", "show", "nope"])
        self.assertEqual(rc, 2)
        self.assertFalse(payload["success"])


if __name__ == "__main__":
    unittest.main()
