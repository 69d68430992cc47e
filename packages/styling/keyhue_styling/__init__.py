"""Keyboard styling: theme catalog, style rules, resolver and preview rendering."""

from .colors import Color
from .models import (
    ActionCalloutStyle,
    AutocompleteToolbarStyle,
    ButtonBorder,
    ButtonShadow,
    ButtonStyle,
    CalloutStyle,
    EdgeInsets,
    FontWeight,
    InputCalloutStyle,
    KeyboardBackground,
    KeyboardFont,
    LayoutConfiguration,
    Theme,
)
from .preview import KeyboardPreviewRenderer, keyboard_rows
from .resolver import StyleResolver
from .rules import DelegatingStyleRules, StandardStyleRules, StyleRules, compose_rules
from .themes import THEMES, get_theme, list_themes, require_theme

__all__ = [
    "THEMES",
    "ActionCalloutStyle",
    "AutocompleteToolbarStyle",
    "ButtonBorder",
    "ButtonShadow",
    "ButtonStyle",
    "CalloutStyle",
    "Color",
    "DelegatingStyleRules",
    "EdgeInsets",
    "FontWeight",
    "InputCalloutStyle",
    "KeyboardBackground",
    "KeyboardFont",
    "KeyboardPreviewRenderer",
    "LayoutConfiguration",
    "StandardStyleRules",
    "StyleResolver",
    "StyleRules",
    "Theme",
    "compose_rules",
    "get_theme",
    "keyboard_rows",
    "list_themes",
    "require_theme",
]
