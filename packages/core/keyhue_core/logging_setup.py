"""Structured local logging and crash hook setup."""

from __future__ import annotations

import faulthandler
import json
import logging
import logging.handlers
import os
import platform
import sys
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOGGER_NAME = "keyhue"
_LEVEL_ENV = "KEYHUE_LOG_LEVEL"

# Record attributes copied into the JSON line when a call passes them via ``extra``.
_STRUCTURED_FIELDS = ("event", "crash_id", "changed", "generation", "exit_code")


def config_root() -> Path:
    """Per-user directory holding config.json and logs/."""
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Keyhue"
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Keyhue"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "keyhue"


def log_dir() -> Path:
    path = config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    """One JSON object per line; child logger names keep the subsystem visible."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        for name in _STRUCTURED_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _resolve_level(level: int | None) -> int:
    if level is not None:
        return level
    name = os.environ.get(_LEVEL_ENV, "").strip().upper()
    value = logging.getLevelName(name) if name else logging.INFO
    return value if isinstance(value, int) else logging.INFO


def configure_logging(keep_files: int = 7, console: bool = True, level: int | None = None) -> logging.Logger:
    """Attach the rotating JSON file handler once; later calls are no-ops.

    ``level`` defaults to ``$KEYHUE_LOG_LEVEL`` or INFO.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_level(level))
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(log_dir() / "keyhue.log"),
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
        logger.addHandler(stream_handler)

    logger.info("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def _install_fault_handler(logger: logging.Logger) -> None:
    fault_path = log_dir() / "fault.log"
    fh = fault_path.open("a", encoding="utf-8")
    faulthandler.enable(file=fh, all_threads=True)
    logger.info("fault handler enabled", extra={"event": "fault_handler_enabled"})


def install_crash_hooks() -> None:
    logger = get_logger()

    def _report(kind: str, exc_info) -> None:
        crash_id = str(uuid.uuid4())
        logger.critical(
            "%s crash_id=%s",
            kind,
            crash_id,
            exc_info=exc_info,
            extra={"event": kind.replace(" ", "_"), "crash_id": crash_id},
        )

    def _log_uncaught(exc_type, exc_value, exc_tb) -> None:
        _report("uncaught exception", (exc_type, exc_value, exc_tb))

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        _report("thread exception", (args.exc_type, args.exc_value, args.exc_traceback))

    sys.excepthook = _log_uncaught
    threading.excepthook = _thread_hook
    _install_fault_handler(logger)
