"""Diagnostics export helpers for local support bundles."""

from __future__ import annotations

import json
import platform
import re
import tempfile
import zipfile
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

import psutil

from .config import AppConfig, config_path
from .context import ContextState
from .logging_setup import get_logger, log_dir


_logger = get_logger().getChild("diagnostics")

_SECRET_RE = re.compile(r"(token|secret|password|apikey|api_key|auth)", re.IGNORECASE)


def _jsonable(value: Any) -> Any:
    if is_dataclass(value):
        return asdict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Path):
        return str(value)
    return str(value)


def redact(value: Any) -> Any:
    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for k, v in value.items():
            if _SECRET_RE.search(k):
                out[k] = "***REDACTED***"
            else:
                out[k] = redact(v)
        return out
    if isinstance(value, list):
        return [redact(v) for v in value]
    return value


def summarize_context(state: ContextState) -> dict[str, Any]:
    light = state.selected_light_theme
    dark = state.selected_dark_theme
    return {
        "color_scheme": state.color_scheme.value,
        "device_type": state.device_type.value,
        "interface_orientation": state.interface_orientation.value,
        "keyboard_type": state.keyboard_type.kind.value,
        "locale": state.locale.identifier,
        "locales": [loc.identifier for loc in state.locales],
        "selected_light_theme": light.name if light else None,
        "selected_dark_theme": dark.name if dark else None,
        "is_keyboard_floating": state.is_keyboard_floating,
        "prefers_autocomplete": state.prefers_autocomplete,
        "has_full_access": state.has_full_access,
    }


def _process_memory_mb() -> float:
    return float(psutil.Process().memory_info().rss) / (1024 * 1024)


def build_doctor_payload(cfg: AppConfig, context: ContextState | None = None, theme_count: int = 0) -> dict[str, Any]:
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "config": redact(asdict(cfg)),
        "theme_count": theme_count,
        "process_rss_mb": round(_process_memory_mb(), 2),
        "context": summarize_context(context) if context is not None else None,
    }


def _select_logs(logs: list[Path], budget_bytes: int) -> tuple[list[Path], list[str]]:
    """Newest logs first until the size budget is spent."""
    kept: list[Path] = []
    skipped: list[str] = []
    used = 0
    for item in sorted(logs, key=lambda p: p.stat().st_mtime, reverse=True):
        size = item.stat().st_size
        if used + size > budget_bytes:
            skipped.append(item.name)
            continue
        kept.append(item)
        used += size
    return kept, skipped


class DiagnosticsExporter:
    """Writes an offline support zip: manifest, doctor payload, config, sync events and logs."""

    def __init__(self, app_name: str = "Keyhue") -> None:
        self.app_name = app_name

    def bundle(
        self,
        cfg: AppConfig,
        doctor_payload: dict[str, Any],
        recent_sync_events: list[dict[str, Any]] | None = None,
        output_dir: Path | None = None,
    ) -> Path:
        output_base = output_dir or Path(tempfile.gettempdir())
        output_base.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        zip_path = output_base / f"keyhue-diagnostics-{stamp}.zip"

        logs, skipped = _select_logs(
            list(log_dir().glob("*.log*")),
            budget_bytes=max(1, cfg.diagnostics.max_bundle_mb) * 1024 * 1024,
        )
        events = recent_sync_events or []
        documents = {
            "manifest.json": {
                "app": self.app_name,
                "created_utc": datetime.now(timezone.utc).isoformat(),
                "host": platform.platform(),
                "python": platform.python_version(),
                "config_path": str(config_path()),
                "log_dir": str(log_dir()),
                "sync_event_count": len(events),
                "skipped_logs": skipped,
            },
            "doctor.json": redact(doctor_payload),
            "config.redacted.json": redact(asdict(cfg)),
            "sync_events.json": redact(events),
        }

        with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for name, document in documents.items():
                zf.writestr(name, json.dumps(document, indent=2, sort_keys=True, default=_jsonable))
            for item in logs:
                zf.write(item, arcname=f"logs/{item.name}")

        _logger.info(
            "diagnostics bundle written to %s",
            zip_path,
            extra={"event": "diagnostics_exported"},
        )
        return zip_path
