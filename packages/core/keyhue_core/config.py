"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .logging_setup import config_root
from .models import Locale


CONFIG_VERSION = 2


@dataclass
class LocaleConfig:
    locales: list[str] = field(default_factory=lambda: ["en"])


@dataclass
class SyncConfig:
    drain_ms: int = 50
    event_history: int = 1000


@dataclass
class PreviewConfig:
    width: int = 640
    height: int = 260
    key_height: int = 54


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7
    max_bundle_mb: int = 20


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    locales: LocaleConfig = field(default_factory=LocaleConfig)
    sync: SyncConfig = field(default_factory=SyncConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)

    def keyboard_locales(self) -> tuple[Locale, ...]:
        return tuple(Locale(identifier) for identifier in self.locales.locales)


DEFAULT_CONFIG = AppConfig()


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_locales(cfg: AppConfig) -> None:
    cleaned = [str(v).strip() for v in cfg.locales.locales if str(v).strip()]
    cfg.locales.locales = cleaned or ["en"]


def _normalize_sync(cfg: AppConfig) -> None:
    cfg.sync.drain_ms = max(16, min(1000, int(cfg.sync.drain_ms)))
    cfg.sync.event_history = max(100, min(10000, int(cfg.sync.event_history)))


def _normalize_preview(cfg: AppConfig) -> None:
    cfg.preview.width = max(320, int(cfg.preview.width))
    cfg.preview.height = max(160, int(cfg.preview.height))
    cfg.preview.key_height = max(24, min(cfg.preview.height // 4, int(cfg.preview.key_height)))


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v2 replaces the single "locale" string with an ordered locale list.
        single = data.pop("locale", None)
        locales = dict(data.get("locales", {}) or {})
        if single and not locales.get("locales"):
            locales["locales"] = [single]
        data["locales"] = locales
        data.setdefault("preview", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        locales=_merge(LocaleConfig, data.get("locales", {})),
        sync=_merge(SyncConfig, data.get("sync", {})),
        preview=_merge(PreviewConfig, data.get("preview", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_locales(cfg)
    _normalize_sync(cfg)
    _normalize_preview(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
