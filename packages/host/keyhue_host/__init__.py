"""Host collaborator facts consumed by the keyboard context synchronizer."""

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
from .provider import HostProvider, ScenarioHostProvider, StaticHostProvider

__all__ = [
    "PREVIEW_PROXY",
    "AutocapitalizationType",
    "HostKeyboardType",
    "HostProvider",
    "HostReturnKeyType",
    "HostSnapshot",
    "KeyboardAppearance",
    "ScenarioHostProvider",
    "Size",
    "StaticHostProvider",
    "TextDocumentProxy",
    "TextInputMode",
    "TraitCollection",
]
