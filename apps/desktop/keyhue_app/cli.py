"""CLI entrypoints for the Keyhue preview app, style inspection, replay and diagnostics."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from keyhue_core import (
    AppConfig,
    DeviceType,
    DiagnosticsExporter,
    InterfaceOrientation,
    KeyboardContext,
    ScenarioRunner,
    build_doctor_payload,
    load_config,
    parse_action,
)
from keyhue_core.logging_setup import configure_logging
from keyhue_host import TraitCollection
from keyhue_styling import (
    ButtonStyle,
    Color,
    KeyboardPreviewRenderer,
    StyleResolver,
    Theme,
    list_themes,
    require_theme,
)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _error(message: str) -> int:
    _print_json({"success": False, "error": message})
    return 2


def _color(color: Color | None) -> str | None:
    return color.to_hex() if color is not None else None


def _theme_payload(theme: Theme) -> dict[str, Any]:
    return {
        "name": theme.name,
        "keyboard_background_color": _color(theme.keyboard_background_color),
        "primary_background_color": _color(theme.primary_background_color),
        "secondary_background_color": _color(theme.secondary_background_color),
        "primary_foreground_color": _color(theme.primary_foreground_color),
        "callout_background_color": _color(theme.callout_background_color),
        "callout_foreground_color": _color(theme.callout_foreground_color),
    }


def _style_payload(style: ButtonStyle) -> dict[str, Any]:
    return {
        "background_color": _color(style.background_color),
        "foreground_color": _color(style.foreground_color),
        "font": {"size": style.font.size, "weight": style.font.weight.value if style.font.weight else None},
        "corner_radius": style.corner_radius,
        "border": {"color": _color(style.border.color), "size": style.border.size},
        "shadow": {"color": _color(style.shadow.color), "size": style.shadow.size},
    }


def _seed_locales(context: KeyboardContext, cfg: AppConfig) -> None:
    locales = cfg.keyboard_locales()
    context.set_locales(locales)
    context.set_locale(locales[0])


def _build_context(args: argparse.Namespace) -> KeyboardContext:
    """Context for a one-shot inspection; raises KeyError for an unknown theme."""
    context = KeyboardContext()
    context.update(
        trait_collection=TraitCollection(user_interface_style=args.scheme),
        device_type=DeviceType(args.device),
        interface_orientation=(
            InterfaceOrientation.LANDSCAPE_LEFT if getattr(args, "landscape", False) else InterfaceOrientation.PORTRAIT
        ),
    )
    if args.theme:
        theme = require_theme(args.theme)
        context.select_light_theme(theme)
        context.select_dark_theme(theme)
    cfg = load_config()
    _seed_locales(context, cfg)
    return context


def cmd_run(_args: argparse.Namespace) -> int:
    from .app import run_gui

    return run_gui()


def cmd_themes_list(_args: argparse.Namespace) -> int:
    _print_json(list_themes())
    return 0


def cmd_themes_show(args: argparse.Namespace) -> int:
    try:
        theme = require_theme(args.name)
    except KeyError as exc:
        return _error(str(exc.args[0]))
    _print_json(_theme_payload(theme))
    return 0


def cmd_style(args: argparse.Namespace) -> int:
    try:
        action = parse_action(args.action)
        context = _build_context(args)
    except KeyError as exc:
        return _error(str(exc.args[0]))
    except ValueError as exc:
        return _error(f"invalid action {args.action!r}: {exc}")

    resolver = StyleResolver()
    state = context.state
    payload = {
        "action": asdict(action),
        "pressed": args.pressed,
        "color_scheme": state.color_scheme.value,
        "theme": state.selected_theme.name if state.selected_theme else None,
        "style": _style_payload(resolver.button_style(state, action, args.pressed)),
        "text": resolver.button_text(state, action),
        "image": resolver.button_image(state, action),
        "background": _color(resolver.background_style(state).color),
    }
    _print_json(payload)
    return 0


def cmd_preview(args: argparse.Namespace) -> int:
    try:
        context = _build_context(args)
    except KeyError as exc:
        return _error(str(exc.args[0]))

    cfg = load_config()
    renderer = KeyboardPreviewRenderer(
        width=cfg.preview.width,
        height=cfg.preview.height,
        key_height=cfg.preview.key_height,
    )
    out = renderer.save_png(context.state, Path(args.out).expanduser())
    _print_json({"success": True, "out": str(out), "width": cfg.preview.width, "height": cfg.preview.height})
    return 0


def cmd_replay(args: argparse.Namespace) -> int:
    runner = ScenarioRunner(layout=not args.no_layout)
    report = runner.run(Path(args.scenario))
    payload = asdict(report)
    payload["success"] = len(report.errors) == 0
    _print_json(payload)
    return 0 if not report.errors else 2


def cmd_doctor(args: argparse.Namespace) -> int:
    cfg = load_config()
    context = KeyboardContext()
    _seed_locales(context, cfg)
    payload = build_doctor_payload(cfg, context=context.state, theme_count=len(list_themes()))

    if args.export:
        exporter = DiagnosticsExporter()
        out_dir = Path(args.out_dir).expanduser().resolve() if args.out_dir else None
        bundle = exporter.bundle(cfg=cfg, doctor_payload=payload, recent_sync_events=[], output_dir=out_dir)
        payload["diagnostics_bundle"] = str(bundle)

    _print_json(payload)
    return 0


def _add_context_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--scheme", default="light", help="Interface style: light, dark or unspecified")
    parser.add_argument("--theme", default=None, help="Theme name applied to both color schemes")
    parser.add_argument("--device", default="phone", choices=[d.value for d in DeviceType])
    parser.add_argument("--landscape", action="store_true", help="Resolve for landscape orientation")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keyhue", description="Keyhue keyboard styling tools")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Run desktop preview app")
    run_cmd.set_defaults(func=cmd_run)

    themes_cmd = sub.add_parser("themes", help="Inspect the built-in theme catalog")
    themes_sub = themes_cmd.add_subparsers(dest="themes_cmd", required=True)
    list_cmd = themes_sub.add_parser("list", help="List theme names")
    list_cmd.set_defaults(func=cmd_themes_list)
    show_cmd = themes_sub.add_parser("show", help="Show theme colors")
    show_cmd.add_argument("name")
    show_cmd.set_defaults(func=cmd_themes_show)

    style_cmd = sub.add_parser("style", help="Resolve the style of a single key")
    style_cmd.add_argument("--action", required=True, help="Action spec, e.g. character:a, shift:uppercased, primary:go")
    style_cmd.add_argument("--pressed", action="store_true")
    _add_context_args(style_cmd)
    style_cmd.set_defaults(func=cmd_style)

    preview_cmd = sub.add_parser("preview", help="Render a keyboard preview PNG")
    preview_cmd.add_argument("--out", required=True, help="Output PNG path")
    _add_context_args(preview_cmd)
    preview_cmd.set_defaults(func=cmd_preview)

    replay_cmd = sub.add_parser("replay", help="Replay a recorded host scenario through the synchronizer")
    replay_cmd.add_argument("--scenario", required=True, help="Path to JSONL scenario")
    replay_cmd.add_argument("--no-layout", action="store_true", help="Skip the post-layout sync per step")
    replay_cmd.set_defaults(func=cmd_replay)

    doctor_cmd = sub.add_parser("doctor", help="Print diagnostics")
    doctor_cmd.add_argument("--export", action="store_true", help="Export offline diagnostics bundle")
    doctor_cmd.add_argument("--out-dir", default=None, help="Optional output directory for diagnostics bundle")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(keep_files=load_config().diagnostics.keep_log_files, console=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
