"""Host fact providers: a mutable static host and a JSONL scenario replay host."""

from __future__ import annotations

import json
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Iterator

from .models import (
    PREVIEW_PROXY,
    AutocapitalizationType,
    HostKeyboardType,
    HostReturnKeyType,
    HostSnapshot,
    KeyboardAppearance,
    Size,
    TextDocumentProxy,
    TextInputMode,
    TraitCollection,
)


class HostProvider:
    """Source of host facts. The synchronizer pulls a snapshot when it runs."""

    def snapshot(self) -> HostSnapshot:
        return HostSnapshot()


class StaticHostProvider(HostProvider):
    def __init__(self, snapshot: HostSnapshot | None = None) -> None:
        self._snapshot = snapshot or HostSnapshot()

    def snapshot(self) -> HostSnapshot:
        return self._snapshot

    def update(self, **changes: Any) -> HostSnapshot:
        self._snapshot = replace(self._snapshot, **changes)
        return self._snapshot


_SNAPSHOT_FIELDS = {f.name for f in fields(HostSnapshot)}


class ScenarioHostProvider(HostProvider):
    """Replays host facts from a JSONL file.

    Each line is a partial snapshot applied on top of the previous one. Proxies
    are declared by name; lines that reuse a name get the same proxy handle so
    identity tracking behaves like a long-lived text field.
    """

    def __init__(self) -> None:
        self._current = HostSnapshot()
        self._proxies: dict[str, TextDocumentProxy] = {}

    def snapshot(self) -> HostSnapshot:
        return self._current

    def _proxy(self, raw: dict[str, Any] | None) -> TextDocumentProxy | None:
        if raw is None:
            return None
        name = str(raw.get("name", "proxy"))
        proxy = self._proxies.get(name)
        if proxy is None:
            proxy = TextDocumentProxy(name=name)
            self._proxies[name] = proxy
        if "autocapitalization_type" in raw:
            value = raw["autocapitalization_type"]
            proxy.autocapitalization_type = AutocapitalizationType(value) if value else None
        if "keyboard_type" in raw:
            value = raw["keyboard_type"]
            proxy.keyboard_type = HostKeyboardType(value) if value else None
        if "return_key_type" in raw:
            value = raw["return_key_type"]
            proxy.return_key_type = HostReturnKeyType(value) if value else None
        if "keyboard_appearance" in raw:
            value = raw["keyboard_appearance"]
            proxy.keyboard_appearance = KeyboardAppearance(value) if value else None
        return proxy

    def _parse_line(self, line: str) -> dict[str, Any] | None:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            return None
        obj = json.loads(stripped)
        changes: dict[str, Any] = {}
        for key, value in obj.items():
            if key == "proxy":
                changes["original_text_document_proxy"] = self._proxy(value) or PREVIEW_PROXY
            elif key == "input_proxy":
                changes["text_input_proxy"] = self._proxy(value)
            elif key == "screen_size":
                changes["screen_size"] = None if value is None else Size(float(value[0]), float(value[1]))
            elif key == "trait_collection":
                changes["trait_collection"] = TraitCollection(**value)
            elif key == "text_input_mode":
                changes["text_input_mode"] = None if value is None else TextInputMode(**value)
            elif key in _SNAPSHOT_FIELDS:
                changes[key] = value
            else:
                raise ValueError(f"unknown host fact: {key}")
        return changes

    def steps(self, scenario_path: Path) -> Iterator[HostSnapshot]:
        for line in scenario_path.read_text(encoding="utf-8").splitlines():
            changes = self._parse_line(line)
            if changes is None:
                continue
            self._current = replace(self._current, **changes)
            yield self._current
