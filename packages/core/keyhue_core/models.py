"""Typed keyboard domain models: color schemes, keyboard types, locales and actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorScheme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def _missing_(cls, value: object) -> "ColorScheme":
        return cls.UNRECOGNIZED

    @classmethod
    def from_interface_style(cls, style: str | None) -> "ColorScheme":
        if style is None or style in ("light", "unspecified"):
            return cls.LIGHT
        return cls(style)


class DeviceType(str, Enum):
    PHONE = "phone"
    PAD = "pad"
    MAC = "mac"
    TV = "tv"
    WATCH = "watch"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> "DeviceType":
        return cls.OTHER


class InterfaceOrientation(str, Enum):
    PORTRAIT = "portrait"
    PORTRAIT_UPSIDE_DOWN = "portrait_upside_down"
    LANDSCAPE_LEFT = "landscape_left"
    LANDSCAPE_RIGHT = "landscape_right"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "InterfaceOrientation":
        return cls.UNKNOWN

    @property
    def is_landscape(self) -> bool:
        return self in (InterfaceOrientation.LANDSCAPE_LEFT, InterfaceOrientation.LANDSCAPE_RIGHT)

    @property
    def is_portrait(self) -> bool:
        return self in (InterfaceOrientation.PORTRAIT, InterfaceOrientation.PORTRAIT_UPSIDE_DOWN)


class SpaceLongPressBehavior(str, Enum):
    MOVE_INPUT_CURSOR = "move_input_cursor"
    OPEN_LOCALE_CONTEXT_MENU = "open_locale_context_menu"


class KeyboardCase(str, Enum):
    AUTO = "auto"
    LOWERCASED = "lowercased"
    UPPERCASED = "uppercased"
    CAPS_LOCKED = "caps_locked"

    @property
    def is_uppercased(self) -> bool:
        return self in (KeyboardCase.UPPERCASED, KeyboardCase.CAPS_LOCKED)


class KeyboardTypeKind(str, Enum):
    ALPHABETIC = "alphabetic"
    NUMERIC = "numeric"
    SYMBOLIC = "symbolic"
    EMAIL = "email"
    URL = "url"
    NUMBER_PAD = "number_pad"
    DECIMAL_PAD = "decimal_pad"
    PHONE_PAD = "phone_pad"
    EMOJIS = "emojis"
    IMAGES = "images"
    CUSTOM = "custom"


_NO_AUTOCOMPLETE_KINDS = frozenset(
    {
        KeyboardTypeKind.EMAIL,
        KeyboardTypeKind.URL,
        KeyboardTypeKind.NUMBER_PAD,
        KeyboardTypeKind.DECIMAL_PAD,
        KeyboardTypeKind.PHONE_PAD,
        KeyboardTypeKind.EMOJIS,
        KeyboardTypeKind.IMAGES,
    }
)


@dataclass(frozen=True)
class KeyboardType:
    kind: KeyboardTypeKind
    case: KeyboardCase | None = None
    name: str | None = None

    @classmethod
    def alphabetic(cls, case: KeyboardCase = KeyboardCase.LOWERCASED) -> "KeyboardType":
        return cls(KeyboardTypeKind.ALPHABETIC, case=case)

    @classmethod
    def numeric(cls) -> "KeyboardType":
        return cls(KeyboardTypeKind.NUMERIC)

    @classmethod
    def symbolic(cls) -> "KeyboardType":
        return cls(KeyboardTypeKind.SYMBOLIC)

    @classmethod
    def emojis(cls) -> "KeyboardType":
        return cls(KeyboardTypeKind.EMOJIS)

    @classmethod
    def custom(cls, name: str) -> "KeyboardType":
        return cls(KeyboardTypeKind.CUSTOM, name=name)

    @property
    def is_alphabetic(self) -> bool:
        return self.kind == KeyboardTypeKind.ALPHABETIC

    @property
    def is_alphabetic_uppercased(self) -> bool:
        return self.is_alphabetic and self.case is not None and self.case.is_uppercased

    @property
    def prefers_autocomplete(self) -> bool:
        return self.kind not in _NO_AUTOCOMPLETE_KINDS


class ReturnKeyType(str, Enum):
    RETURN = "return"
    DONE = "done"
    GO = "go"
    OK = "ok"
    SEARCH = "search"
    NEW_LINE = "new_line"
    CUSTOM = "custom"

    @property
    def is_system_action(self) -> bool:
        return self in (ReturnKeyType.RETURN, ReturnKeyType.NEW_LINE)


@dataclass(frozen=True)
class Locale:
    identifier: str

    @property
    def language_code(self) -> str:
        return self.identifier.replace("-", "_").split("_", 1)[0].lower()

    def matches(self, other: "Locale | KeyboardLocale") -> bool:
        if isinstance(other, KeyboardLocale):
            other = other.locale
        return self.language_code == other.language_code

    def __str__(self) -> str:
        return self.identifier


class KeyboardLocale(str, Enum):
    ENGLISH = "en"
    ENGLISH_GB = "en_GB"
    ENGLISH_US = "en_US"
    DANISH = "da"
    DUTCH = "nl"
    FINNISH = "fi"
    FRENCH = "fr"
    GEORGIAN = "ka"
    GERMAN = "de"
    ITALIAN = "it"
    NORWEGIAN = "nb"
    POLISH = "pl"
    PORTUGUESE = "pt_PT"
    SPANISH = "es"
    SWEDISH = "sv"
    UKRAINIAN = "uk"

    @property
    def locale(self) -> Locale:
        return Locale(self.value)

    @property
    def locale_identifier(self) -> str:
        return self.value


class ActionKind(str, Enum):
    CHARACTER = "character"
    CHARACTER_MARGIN = "character_margin"
    BACKSPACE = "backspace"
    SPACE = "space"
    SHIFT = "shift"
    PRIMARY = "primary"
    EMOJI = "emoji"
    KEYBOARD_TYPE = "keyboard_type"
    SYSTEM = "system"
    NONE = "none"
    CUSTOM = "custom"


class SystemKey(str, Enum):
    NEXT_KEYBOARD = "next_keyboard"
    NEXT_LOCALE = "next_locale"
    DICTATION = "dictation"
    DISMISS_KEYBOARD = "dismiss_keyboard"
    SETTINGS = "settings"
    TAB = "tab"
    ESCAPE = "escape"
    MOVE_CURSOR_BACKWARD = "move_cursor_backward"
    MOVE_CURSOR_FORWARD = "move_cursor_forward"


@dataclass(frozen=True)
class KeyboardAction:
    """Semantic role of a key, created by the layout layer and read by styling."""

    kind: ActionKind
    text: str | None = None
    case: KeyboardCase | None = None
    return_key: ReturnKeyType | None = None
    keyboard_type: KeyboardType | None = None
    system_key: SystemKey | None = None

    @classmethod
    def character(cls, char: str) -> "KeyboardAction":
        return cls(ActionKind.CHARACTER, text=char)

    @classmethod
    def character_margin(cls, char: str) -> "KeyboardAction":
        return cls(ActionKind.CHARACTER_MARGIN, text=char)

    @classmethod
    def backspace(cls) -> "KeyboardAction":
        return cls(ActionKind.BACKSPACE)

    @classmethod
    def space(cls) -> "KeyboardAction":
        return cls(ActionKind.SPACE)

    @classmethod
    def shift(cls, current_case: KeyboardCase = KeyboardCase.LOWERCASED) -> "KeyboardAction":
        return cls(ActionKind.SHIFT, case=current_case)

    @classmethod
    def primary(cls, return_key: ReturnKeyType = ReturnKeyType.RETURN) -> "KeyboardAction":
        return cls(ActionKind.PRIMARY, return_key=return_key)

    @classmethod
    def emoji(cls, emoji: str) -> "KeyboardAction":
        return cls(ActionKind.EMOJI, text=emoji)

    @classmethod
    def switch_to(cls, keyboard_type: KeyboardType) -> "KeyboardAction":
        return cls(ActionKind.KEYBOARD_TYPE, keyboard_type=keyboard_type)

    @classmethod
    def system(cls, key: SystemKey) -> "KeyboardAction":
        return cls(ActionKind.SYSTEM, system_key=key)

    @classmethod
    def none(cls) -> "KeyboardAction":
        return cls(ActionKind.NONE)

    @classmethod
    def custom(cls, name: str) -> "KeyboardAction":
        return cls(ActionKind.CUSTOM, text=name)

    @property
    def is_input_action(self) -> bool:
        return self.kind in (ActionKind.CHARACTER, ActionKind.CHARACTER_MARGIN, ActionKind.EMOJI)

    @property
    def is_system_action(self) -> bool:
        if self.kind in (ActionKind.BACKSPACE, ActionKind.SHIFT, ActionKind.KEYBOARD_TYPE, ActionKind.SYSTEM):
            return True
        if self.kind == ActionKind.PRIMARY:
            return self.return_key is not None and self.return_key.is_system_action
        return False

    @property
    def is_primary_action(self) -> bool:
        return self.kind == ActionKind.PRIMARY and not self.is_system_action

    @property
    def is_uppercased_shift_action(self) -> bool:
        return self.kind == ActionKind.SHIFT and self.case is not None and self.case.is_uppercased

    @property
    def is_alphabetic_keyboard_type_action(self) -> bool:
        return self.is_keyboard_type_action(KeyboardTypeKind.ALPHABETIC)

    def is_keyboard_type_action(self, kind: KeyboardTypeKind) -> bool:
        return (
            self.kind == ActionKind.KEYBOARD_TYPE
            and self.keyboard_type is not None
            and self.keyboard_type.kind == kind
        )


def is_lowercased_with_uppercase_variant(text: str) -> bool:
    return text == text.lower() and text != text.upper()


def parse_action(spec: str) -> KeyboardAction:
    """Parse a compact ``kind[:payload]`` action spec, e.g. ``character:a``."""
    kind_raw, _, payload = spec.partition(":")
    kind = ActionKind(kind_raw.strip().lower())
    if kind == ActionKind.CHARACTER:
        return KeyboardAction.character(payload)
    if kind == ActionKind.CHARACTER_MARGIN:
        return KeyboardAction.character_margin(payload)
    if kind == ActionKind.EMOJI:
        return KeyboardAction.emoji(payload)
    if kind == ActionKind.SHIFT:
        return KeyboardAction.shift(KeyboardCase(payload) if payload else KeyboardCase.LOWERCASED)
    if kind == ActionKind.PRIMARY:
        return KeyboardAction.primary(ReturnKeyType(payload) if payload else ReturnKeyType.RETURN)
    if kind == ActionKind.KEYBOARD_TYPE:
        return KeyboardAction.switch_to(KeyboardType(KeyboardTypeKind(payload or "alphabetic")))
    if kind == ActionKind.SYSTEM:
        return KeyboardAction.system(SystemKey(payload))
    if kind == ActionKind.CUSTOM:
        return KeyboardAction.custom(payload)
    return KeyboardAction(kind)
