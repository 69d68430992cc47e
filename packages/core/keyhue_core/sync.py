"""Host synchronization: marshal host facts onto the context's update turn."""

from __future__ import annotations

import queue
import threading
from datetime import datetime, timezone
from typing import Any, Callable

from keyhue_host import HostProvider, HostSnapshot, Size

from .context import ContextChange, KeyboardContext
from .logging_setup import get_logger
from .models import DeviceType, InterfaceOrientation


_logger = get_logger().getChild("sync")


class UpdateTurn:
    """Single-writer job queue.

    ``post`` is safe from any thread. ``drain`` must only be called by the
    owner of the context (the UI thread); jobs run there in post order.
    """

    def __init__(self) -> None:
        self._jobs: queue.SimpleQueue[Callable[[], Any]] = queue.SimpleQueue()
        self._owner: int | None = None

    def post(self, job: Callable[[], Any]) -> None:
        self._jobs.put(job)

    @property
    def pending(self) -> int:
        return self._jobs.qsize()

    def drain(self) -> int:
        owner = threading.get_ident()
        if self._owner is None:
            self._owner = owner
        elif self._owner != owner:
            raise RuntimeError("update turn drained from a second thread")

        count = 0
        while True:
            try:
                job = self._jobs.get_nowait()
            except queue.Empty:
                return count
            count += 1
            try:
                job()
            except Exception:
                _logger.exception("update job failed", extra={"event": "update_job_error"})


def _orientation(snapshot: HostSnapshot) -> InterfaceOrientation:
    if not snapshot.orientation:
        return InterfaceOrientation.PORTRAIT
    return InterfaceOrientation(snapshot.orientation)


def _screen_size(snapshot: HostSnapshot) -> Size:
    return snapshot.screen_size or Size()


class ContextSynchronizer:
    """Applies host facts to a ``KeyboardContext`` one field delta at a time."""

    def __init__(self, context: KeyboardContext, turn: UpdateTurn, event_history: int = 1000) -> None:
        self.context = context
        self.turn = turn
        self.event_history = event_history
        self._events: list[dict[str, Any]] = []

    def recent_events(self, limit: int = 200) -> list[dict[str, Any]]:
        return self._events[-limit:]

    def _log_event(self, event: str, **fields: Any) -> None:
        row = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "event": event,
            "generation": self.context.generation,
        }
        row.update(fields)
        self._events.append(row)
        if len(self._events) > self.event_history:
            self._events = self._events[-self.event_history :]

    # Entry points, callable from any thread

    def sync(self, host: HostProvider) -> None:
        self.turn.post(lambda: self.apply(host.snapshot()))

    def sync_text_document_proxy(self, host: HostProvider) -> None:
        proxy = host.snapshot().original_text_document_proxy
        if self.context.state.original_text_document_proxy is proxy:
            return
        self.turn.post(lambda: self.context.update(original_text_document_proxy=proxy))

    def sync_text_input_proxy(self, host: HostProvider) -> None:
        proxy = host.snapshot().text_input_proxy
        if self.context.state.text_input_proxy is proxy:
            return
        self.turn.post(lambda: self.context.update(text_input_proxy=proxy))

    def sync_after_layout(self, host: HostProvider) -> None:
        self.turn.post(lambda: self.apply_after_layout(host.snapshot()))

    # Turn-side application

    def apply(self, snapshot: HostSnapshot) -> ContextChange | None:
        """Apply a host snapshot in one batch. Must run on the update turn."""
        state = self.context.state
        proxy = snapshot.text_document_proxy
        keyboard_hint = proxy.keyboard_type.prefers_autocomplete if proxy.keyboard_type is not None else True
        return_hint = proxy.return_key_type.prefers_autocomplete if proxy.return_key_type is not None else True
        prefers_autocomplete = state.keyboard_type.prefers_autocomplete and keyboard_hint and return_hint

        values: dict[str, Any] = {
            "original_text_document_proxy": snapshot.original_text_document_proxy,
            "text_input_proxy": snapshot.text_input_proxy,
            "has_dictation_key": snapshot.has_dictation_key,
            "has_full_access": snapshot.has_full_access,
            "interface_orientation": _orientation(snapshot),
            "needs_input_mode_switch_key": snapshot.needs_input_mode_switch_key,
            "prefers_autocomplete": prefers_autocomplete,
            "primary_language": snapshot.primary_language,
            "screen_size": _screen_size(snapshot),
            "text_input_mode": snapshot.text_input_mode,
            "trait_collection": snapshot.trait_collection,
        }
        if snapshot.device_type is not None:
            values["device_type"] = DeviceType(snapshot.device_type)

        change = self.context.update(**values)
        if change is None:
            self._log_event("context_sync_skipped")
            return None
        changed = sorted(change.changed)
        self._log_event("context_sync", changed=changed)
        _logger.info(
            "context synced: %s",
            ", ".join(changed),
            extra={"event": "context_sync", "changed": changed, "generation": change.generation},
        )
        return change

    def apply_after_layout(self, snapshot: HostSnapshot) -> None:
        state = self.context.state
        # No reported view width keeps the stored floating flag.
        if snapshot.view_width is not None:
            is_floating = snapshot.view_width < state.screen_size.width / 2
            if state.is_keyboard_floating != is_floating:
                self.context.update(is_keyboard_floating=is_floating)
                self._log_event("floating_changed", is_keyboard_floating=is_floating)
        if _orientation(snapshot) == self.context.state.interface_orientation:
            return
        self.apply(snapshot)
