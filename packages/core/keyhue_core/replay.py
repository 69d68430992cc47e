"""Replay recorded host scenarios through the context synchronizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from keyhue_host import ScenarioHostProvider

from .context import ContextChange, KeyboardContext
from .sync import ContextSynchronizer, UpdateTurn


@dataclass
class ReplayReport:
    total_steps: int = 0
    changed_steps: int = 0
    unchanged_steps: int = 0
    notifications: int = 0
    field_counts: dict[str, int] = field(default_factory=dict)
    final_state: dict[str, object] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)


class ScenarioRunner:
    def __init__(self, context: KeyboardContext | None = None, layout: bool = True) -> None:
        self.context = context or KeyboardContext()
        self.turn = UpdateTurn()
        self.synchronizer = ContextSynchronizer(self.context, self.turn)
        self.layout = layout

    def run(self, scenario_path: Path) -> ReplayReport:
        report = ReplayReport()
        host = ScenarioHostProvider()
        changes: list[ContextChange] = []
        unsubscribe = self.context.subscribe(changes.append)

        try:
            for _snapshot in host.steps(scenario_path):
                before = len(changes)
                self.synchronizer.sync(host)
                if self.layout:
                    self.synchronizer.sync_after_layout(host)
                self.turn.drain()

                report.total_steps += 1
                step_changes = changes[before:]
                if step_changes:
                    report.changed_steps += 1
                else:
                    report.unchanged_steps += 1
                for change in step_changes:
                    for name in change.changed:
                        report.field_counts[name] = report.field_counts.get(name, 0) + 1
        except ValueError as exc:
            report.errors.append(f"step {report.total_steps + 1}: {exc}")
        finally:
            unsubscribe()

        report.notifications = len(changes)
        state = self.context.state
        report.final_state = {
            "color_scheme": state.color_scheme.value,
            "device_type": state.device_type.value,
            "interface_orientation": state.interface_orientation.value,
            "is_keyboard_floating": state.is_keyboard_floating,
            "prefers_autocomplete": state.prefers_autocomplete,
            "screen_size": [state.screen_size.width, state.screen_size.height],
        }
        return report
