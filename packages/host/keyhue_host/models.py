"""Typed host collaborator models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class HostKeyboardType(str, Enum):
    DEFAULT = "default"
    ASCII_CAPABLE = "ascii_capable"
    NUMBERS_AND_PUNCTUATION = "numbers_and_punctuation"
    URL = "url"
    EMAIL_ADDRESS = "email_address"
    NUMBER_PAD = "number_pad"
    PHONE_PAD = "phone_pad"
    DECIMAL_PAD = "decimal_pad"
    TWITTER = "twitter"
    WEB_SEARCH = "web_search"
    ASCII_CAPABLE_NUMBER_PAD = "ascii_capable_number_pad"

    @property
    def prefers_autocomplete(self) -> bool:
        return self not in _NO_AUTOCOMPLETE_KEYBOARDS


_NO_AUTOCOMPLETE_KEYBOARDS = frozenset(
    {
        HostKeyboardType.URL,
        HostKeyboardType.EMAIL_ADDRESS,
        HostKeyboardType.NUMBER_PAD,
        HostKeyboardType.PHONE_PAD,
        HostKeyboardType.DECIMAL_PAD,
        HostKeyboardType.ASCII_CAPABLE_NUMBER_PAD,
    }
)


class HostReturnKeyType(str, Enum):
    DEFAULT = "default"
    GO = "go"
    GOOGLE = "google"
    JOIN = "join"
    NEXT = "next"
    ROUTE = "route"
    SEARCH = "search"
    SEND = "send"
    YAHOO = "yahoo"
    DONE = "done"
    EMERGENCY_CALL = "emergency_call"
    CONTINUE = "continue"

    @property
    def prefers_autocomplete(self) -> bool:
        return self not in (HostReturnKeyType.SEARCH, HostReturnKeyType.GOOGLE, HostReturnKeyType.YAHOO)


class AutocapitalizationType(str, Enum):
    NONE = "none"
    WORDS = "words"
    SENTENCES = "sentences"
    ALL_CHARACTERS = "all_characters"


class KeyboardAppearance(str, Enum):
    DEFAULT = "default"
    LIGHT = "light"
    DARK = "dark"


class TextDocumentProxy:
    """Handle to the text field the keyboard is typing into.

    Proxies are tracked by identity: two proxies with the same traits are
    still different handles, so this class keeps default object equality.
    """

    def __init__(
        self,
        autocapitalization_type: AutocapitalizationType | None = None,
        keyboard_type: HostKeyboardType | None = None,
        return_key_type: HostReturnKeyType | None = None,
        keyboard_appearance: KeyboardAppearance | None = None,
        name: str = "proxy",
    ) -> None:
        self.autocapitalization_type = autocapitalization_type
        self.keyboard_type = keyboard_type
        self.return_key_type = return_key_type
        self.keyboard_appearance = keyboard_appearance
        self.name = name

    def __repr__(self) -> str:
        return f"TextDocumentProxy(name={self.name!r}, keyboard_type={self.keyboard_type}, return_key_type={self.return_key_type})"


PREVIEW_PROXY = TextDocumentProxy(name="preview")


@dataclass(frozen=True)
class TraitCollection:
    user_interface_style: str = "unspecified"
    horizontal_size_class: str = "compact"
    vertical_size_class: str = "regular"
    display_scale: float = 2.0


@dataclass(frozen=True)
class TextInputMode:
    primary_language: str | None = None


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0

    def is_close_to(self, other: "Size", tolerance: float) -> bool:
        return abs(self.width - other.width) <= tolerance and abs(self.height - other.height) <= tolerance


@dataclass(frozen=True)
class HostSnapshot:
    """Facts reported by the input controller at one point in time."""

    original_text_document_proxy: TextDocumentProxy = PREVIEW_PROXY
    text_input_proxy: TextDocumentProxy | None = None
    device_type: str | None = None
    has_dictation_key: bool = False
    has_full_access: bool = False
    orientation: str | None = None
    needs_input_mode_switch_key: bool = False
    primary_language: str | None = None
    screen_size: Size | None = None
    text_input_mode: TextInputMode | None = None
    trait_collection: TraitCollection = field(default_factory=TraitCollection)
    view_width: float | None = None

    @property
    def text_document_proxy(self) -> TextDocumentProxy:
        return self.text_input_proxy or self.original_text_document_proxy
