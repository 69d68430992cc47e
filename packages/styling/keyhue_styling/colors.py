"""Color values and the standard platform palette."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from keyhue_host.models import KeyboardAppearance

if TYPE_CHECKING:
    from keyhue_core.context import ContextState


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> "Color":
        return cls(_clamp(red / 255), _clamp(green / 255), _clamp(blue / 255), _clamp(alpha))

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        raw = value.lstrip("#")
        if len(raw) not in (6, 8):
            raise ValueError(f"expected #RRGGBB or #RRGGBBAA, got {value!r}")
        r, g, b = (int(raw[i : i + 2], 16) for i in (0, 2, 4))
        a = int(raw[6:8], 16) / 255 if len(raw) == 8 else 1.0
        return cls.from_rgb255(r, g, b, a)

    def with_opacity(self, factor: float) -> "Color":
        return Color(self.red, self.green, self.blue, _clamp(self.alpha * factor))

    def rgba8(self) -> tuple[int, int, int, int]:
        return tuple(int(round(c * 255)) for c in (self.red, self.green, self.blue, self.alpha))  # type: ignore[return-value]

    def to_hex(self) -> str:
        r, g, b, a = self.rgba8()
        if a == 255:
            return f"#{r:02X}{g:02X}{b:02X}"
        return f"#{r:02X}{g:02X}{b:02X}{a:02X}"

    @property
    def is_transparent(self) -> bool:
        return self.alpha < 0.01


CLEAR = Color(0.0, 0.0, 0.0, 0.0)
# Visually invisible but still hit-testable.
CLEAR_INTERACTABLE = Color(0.0, 0.0, 0.0, 0.001)
WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
BLUE = Color.from_rgb255(0, 122, 255)


@dataclass(frozen=True)
class PaletteEntry:
    light: Color
    dark: Color


STANDARD_BUTTON_BACKGROUND = PaletteEntry(light=WHITE, dark=Color.from_rgb255(107, 107, 107))
STANDARD_DARK_BUTTON_BACKGROUND = PaletteEntry(
    light=Color.from_rgb255(171, 177, 186),
    dark=Color.from_rgb255(71, 71, 71),
)
STANDARD_BUTTON_FOREGROUND = PaletteEntry(light=BLACK, dark=WHITE)
STANDARD_KEYBOARD_BACKGROUND = PaletteEntry(
    light=Color.from_rgb255(209, 211, 217),
    dark=Color.from_rgb255(43, 43, 43),
)
STANDARD_BUTTON_SHADOW = Color(0.0, 0.0, 0.0, 0.3)
STANDARD_BUTTON_BORDER = Color(0.0, 0.0, 0.0, 0.1)


def uses_dark_palette(context: "ContextState") -> bool:
    return context.has_dark_color_scheme or context.keyboard_appearance == KeyboardAppearance.DARK


def _pick(entry: PaletteEntry, context: "ContextState") -> Color:
    return entry.dark if uses_dark_palette(context) else entry.light


def standard_button_background(context: "ContextState") -> Color:
    return _pick(STANDARD_BUTTON_BACKGROUND, context)


def standard_dark_button_background(context: "ContextState") -> Color:
    return _pick(STANDARD_DARK_BUTTON_BACKGROUND, context)


def standard_button_foreground(context: "ContextState") -> Color:
    return _pick(STANDARD_BUTTON_FOREGROUND, context)


def standard_keyboard_background(context: "ContextState") -> Color:
    return _pick(STANDARD_KEYBOARD_BACKGROUND, context)
