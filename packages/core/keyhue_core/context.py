"""Keyboard context store: immutable snapshots plus an explicit change channel.

The store is owned by a single update turn (see ``sync.UpdateTurn``). Readers
get ``ContextState`` snapshots, which never change after creation, so a style
computation that holds a snapshot can never observe a half-applied sync.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any, Callable, Iterable

from keyhue_host.models import (
    PREVIEW_PROXY,
    AutocapitalizationType,
    KeyboardAppearance,
    Size,
    TextDocumentProxy,
    TextInputMode,
    TraitCollection,
)

from .logging_setup import get_logger
from .models import (
    ColorScheme,
    DeviceType,
    InterfaceOrientation,
    KeyboardAction,
    KeyboardLocale,
    KeyboardType,
    Locale,
    SpaceLongPressBehavior,
)

if TYPE_CHECKING:
    from keyhue_styling.models import Theme


_logger = get_logger().getChild("context")

# Handles that are tracked by identity rather than by value.
IDENTITY_FIELDS = frozenset({"original_text_document_proxy", "text_input_proxy"})


@dataclass(frozen=True)
class ContextState:
    device_type: DeviceType = DeviceType.PHONE
    interface_orientation: InterfaceOrientation = InterfaceOrientation.PORTRAIT
    keyboard_type: KeyboardType = field(default_factory=KeyboardType.alphabetic)
    locale: Locale = Locale("en")
    locales: tuple[Locale, ...] = (Locale("en"),)
    locale_presentation_locale: Locale | None = None
    selected_light_theme: "Theme | None" = None
    selected_dark_theme: "Theme | None" = None
    is_space_drag_gesture_active: bool = False
    is_keyboard_floating: bool = False
    is_auto_capitalization_enabled: bool = True
    autocapitalization_type_override: AutocapitalizationType | None = None
    keyboard_dictation_replacement: KeyboardAction | None = None
    has_dictation_key: bool = False
    has_full_access: bool = False
    needs_input_mode_switch_key: bool = False
    prefers_autocomplete: bool = True
    primary_language: str | None = None
    screen_size: Size = Size()
    space_long_press_behavior: SpaceLongPressBehavior = SpaceLongPressBehavior.MOVE_INPUT_CURSOR
    original_text_document_proxy: TextDocumentProxy = PREVIEW_PROXY
    text_input_proxy: TextDocumentProxy | None = None
    text_input_mode: TextInputMode | None = None
    trait_collection: TraitCollection = field(default_factory=TraitCollection)

    @property
    def color_scheme(self) -> ColorScheme:
        return ColorScheme.from_interface_style(self.trait_collection.user_interface_style)

    @property
    def has_dark_color_scheme(self) -> bool:
        return self.color_scheme == ColorScheme.DARK

    @property
    def text_document_proxy(self) -> TextDocumentProxy:
        return self.text_input_proxy or self.original_text_document_proxy

    @property
    def keyboard_appearance(self) -> KeyboardAppearance:
        return self.text_document_proxy.keyboard_appearance or KeyboardAppearance.DEFAULT

    @property
    def autocapitalization_type(self) -> AutocapitalizationType | None:
        return self.autocapitalization_type_override or self.text_document_proxy.autocapitalization_type

    @property
    def keyboard_locale(self) -> KeyboardLocale | None:
        for candidate in KeyboardLocale:
            if candidate.locale_identifier == self.locale.identifier:
                return candidate
        return None

    @property
    def has_multiple_locales(self) -> bool:
        return len(self.locales) > 1

    def has_keyboard_locale(self, locale: KeyboardLocale) -> bool:
        return self.locale.identifier == locale.locale_identifier

    def has_keyboard_type(self, keyboard_type: KeyboardType) -> bool:
        return self.keyboard_type == keyboard_type

    @property
    def selected_theme(self) -> "Theme | None":
        """The user theme for the active color scheme, if any."""
        scheme = self.color_scheme
        if scheme == ColorScheme.LIGHT:
            return self.selected_light_theme
        if scheme == ColorScheme.DARK:
            return self.selected_dark_theme
        return None


CONTEXT_FIELDS = frozenset(f.name for f in fields(ContextState))


@dataclass(frozen=True)
class ContextChange:
    changed: frozenset[str]
    previous: ContextState
    current: ContextState
    generation: int


Subscriber = Callable[[ContextChange], None]


def _same(name: str, old: Any, new: Any) -> bool:
    if name in IDENTITY_FIELDS:
        return old is new
    return old == new


class KeyboardContext:
    """Observable runtime state. All writes go through ``update``."""

    def __init__(self, state: ContextState | None = None) -> None:
        self._state = state or ContextState()
        self._subscribers: list[Subscriber] = []
        self._generation = 0

    @property
    def state(self) -> ContextState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def __getattr__(self, name: str) -> Any:
        # Read-only convenience: ``context.locale`` reads the current snapshot.
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._state, name)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def update(self, **values: Any) -> ContextChange | None:
        """Write the given fields, skipping any that already hold the value."""
        changes: dict[str, Any] = {}
        for name, value in values.items():
            if name not in CONTEXT_FIELDS:
                raise AttributeError(f"unknown context field: {name}")
            if name == "locales":
                value = tuple(value)
                if not value:
                    raise ValueError("locales must not be empty")
            if not _same(name, getattr(self._state, name), value):
                changes[name] = value

        if not changes:
            return None

        previous = self._state
        self._state = replace(previous, **changes)
        self._generation += 1
        change = ContextChange(
            changed=frozenset(changes),
            previous=previous,
            current=self._state,
            generation=self._generation,
        )
        _logger.debug(
            "context changed: %s",
            ", ".join(sorted(changes)),
            extra={"event": "context_changed"},
        )
        self._publish(change)
        return change

    def _publish(self, change: ContextChange) -> None:
        for callback in list(self._subscribers):
            try:
                callback(change)
            except Exception:
                _logger.exception("context subscriber failed", extra={"event": "subscriber_error"})

    # Locale handling

    def set_locale(self, locale: Locale | KeyboardLocale) -> None:
        if isinstance(locale, KeyboardLocale):
            locale = locale.locale
        self.update(locale=locale)

    def set_locales(self, locales: Iterable[Locale | KeyboardLocale]) -> None:
        values = tuple(loc.locale if isinstance(loc, KeyboardLocale) else loc for loc in locales)
        self.update(locales=values)

    def select_next_locale(self) -> None:
        """Select the locale after ``locale`` in ``locales``, wrapping to the first.

        A locale that is missing from ``locales`` also falls back to the first
        one. With no locales at all, the current locale is kept.
        """
        locales = self._state.locales
        if not locales:
            _logger.warning("no locales to select from", extra={"event": "locale_fallback"})
            return
        fallback = locales[0]
        try:
            index = locales.index(self._state.locale)
        except ValueError:
            self.update(locale=fallback)
            return
        next_index = index + 1
        self.update(locale=locales[next_index] if next_index < len(locales) else fallback)

    # Keyboard and appearance

    def set_keyboard_type(self, keyboard_type: KeyboardType) -> None:
        self.update(keyboard_type=keyboard_type)

    def select_light_theme(self, theme: "Theme | None") -> None:
        self.update(selected_light_theme=theme)

    def select_dark_theme(self, theme: "Theme | None") -> None:
        self.update(selected_dark_theme=theme)

    def set_space_drag_gesture_active(self, active: bool) -> None:
        self.update(is_space_drag_gesture_active=bool(active))

    def set_autocapitalization_override(self, value: AutocapitalizationType | None) -> None:
        self.update(autocapitalization_type_override=value)
