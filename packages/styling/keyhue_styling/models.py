"""Typed style models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .colors import BLACK, BLUE, CLEAR, STANDARD_BUTTON_BORDER, STANDARD_BUTTON_SHADOW, WHITE, Color


@dataclass(frozen=True)
class Theme:
    name: str
    keyboard_background_color: Color
    primary_background_color: Color
    secondary_background_color: Color
    primary_foreground_color: Color
    callout_background_color: Color
    callout_foreground_color: Color


class FontWeight(str, Enum):
    ULTRA_LIGHT = "ultra_light"
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"


@dataclass(frozen=True)
class KeyboardFont:
    size: float
    weight: FontWeight | None = None


@dataclass(frozen=True)
class ButtonBorder:
    color: Color = STANDARD_BUTTON_BORDER
    size: float = 0.5

    @classmethod
    def standard(cls) -> "ButtonBorder":
        return cls()

    @classmethod
    def no_border(cls) -> "ButtonBorder":
        return cls(color=CLEAR, size=0.0)


@dataclass(frozen=True)
class ButtonShadow:
    color: Color = STANDARD_BUTTON_SHADOW
    size: float = 1.0

    @classmethod
    def standard(cls) -> "ButtonShadow":
        return cls()

    @classmethod
    def no_shadow(cls) -> "ButtonShadow":
        return cls(color=CLEAR, size=0.0)


@dataclass(frozen=True)
class ButtonStyle:
    background_color: Color
    foreground_color: Color
    font: KeyboardFont
    corner_radius: float | None
    border: ButtonBorder
    shadow: ButtonShadow


@dataclass(frozen=True)
class KeyboardBackground:
    """Keyboard-wide background. ``color=None`` means the platform default."""

    color: Color | None = None

    @classmethod
    def standard(cls) -> "KeyboardBackground":
        return cls()

    @classmethod
    def from_color(cls, color: Color) -> "KeyboardBackground":
        return cls(color=color)

    @property
    def is_standard(self) -> bool:
        return self.color is None


@dataclass(frozen=True)
class CalloutStyle:
    background_color: Color = WHITE
    border_color: Color = Color(0.0, 0.0, 0.0, 0.5)
    button_corner_radius: float = 4.0
    corner_radius: float = 10.0
    curve_width: float = 8.0
    curve_height: float = 15.0
    shadow_color: Color = Color(0.0, 0.0, 0.0, 0.1)
    shadow_radius: float = 5.0
    text_color: Color = BLACK


@dataclass(frozen=True)
class ActionCalloutStyle:
    callout: CalloutStyle = field(default_factory=CalloutStyle)
    font: KeyboardFont = KeyboardFont(size=20)
    max_button_width: float = 50.0
    selected_background_color: Color = BLUE
    selected_foreground_color: Color = WHITE
    vertical_offset: float = 20.0
    vertical_text_padding: float = 6.0


@dataclass(frozen=True)
class InputCalloutStyle:
    callout: CalloutStyle = field(default_factory=CalloutStyle)
    callout_width: float = 0.0
    callout_height: float = 15.0
    font: KeyboardFont = KeyboardFont(size=34, weight=FontWeight.LIGHT)


@dataclass(frozen=True)
class AutocompleteToolbarStyle:
    height: float = 50.0
    item_font: KeyboardFont = KeyboardFont(size=16)
    item_text_color: Color = BLACK
    separator_color: Color = Color(0.0, 0.0, 0.0, 0.3)
    separator_width: float = 1.0
    autocorrect_background_color: Color = Color(1.0, 1.0, 1.0, 0.5)


@dataclass(frozen=True)
class EdgeInsets:
    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0


@dataclass(frozen=True)
class LayoutConfiguration:
    button_corner_radius: float
    button_insets: EdgeInsets
    row_height: float
