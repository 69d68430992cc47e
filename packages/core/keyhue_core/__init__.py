"""Core keyboard runtime: domain models, context store, host sync, settings and diagnostics."""

from .config import AppConfig, load_config, save_config
from .context import ContextChange, ContextState, KeyboardContext
from .diagnostics import DiagnosticsExporter, build_doctor_payload
from .models import (
    ActionKind,
    ColorScheme,
    DeviceType,
    InterfaceOrientation,
    KeyboardAction,
    KeyboardCase,
    KeyboardLocale,
    KeyboardType,
    KeyboardTypeKind,
    Locale,
    ReturnKeyType,
    SystemKey,
    parse_action,
)
from .replay import ReplayReport, ScenarioRunner
from .sync import ContextSynchronizer, UpdateTurn

__all__ = [
    "ActionKind",
    "AppConfig",
    "ColorScheme",
    "ContextChange",
    "ContextState",
    "ContextSynchronizer",
    "DeviceType",
    "DiagnosticsExporter",
    "InterfaceOrientation",
    "KeyboardAction",
    "KeyboardCase",
    "KeyboardContext",
    "KeyboardLocale",
    "KeyboardType",
    "KeyboardTypeKind",
    "Locale",
    "ReplayReport",
    "ReturnKeyType",
    "ScenarioRunner",
    "SystemKey",
    "UpdateTurn",
    "build_doctor_payload",
    "load_config",
    "parse_action",
    "save_config",
]
