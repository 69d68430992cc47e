"""Keyboard preview composer: draws resolved key styles into a PNG image."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Iterable

from PIL import Image, ImageDraw, ImageFont

from keyhue_core.context import ContextState
from keyhue_core.models import (
    KeyboardAction,
    KeyboardCase,
    KeyboardType,
    KeyboardTypeKind,
    ReturnKeyType,
    SystemKey,
)

from .colors import Color, standard_keyboard_background
from .resolver import StyleResolver


_ALPHABETIC_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")
_NUMERIC_ROWS = ("1234567890", "-/:;()$&@\"", ".,?!'")
_SYMBOLIC_ROWS = ("[]{}#%^*+=", "_\\|~<>€£¥•", ".,?!'")

# Plain glyphs for symbol images; the preview has no symbol font.
_IMAGE_GLYPHS = {
    "delete.left": "<x",
    "shift": "^",
    "shift.fill": "^",
    "capslock.fill": "^^",
    "globe": "@",
    "mic": "mic",
    "arrow.turn.down.left": "<-",
    "face.smiling": ":)",
    "photo": "img",
    "keyboard.chevron.compact.down": "v",
    "gearshape": "*",
    "arrow.right.to.line": "->|",
    "arrow.left": "<",
    "arrow.right": ">",
}


@dataclass(frozen=True)
class PreviewKey:
    action: KeyboardAction
    width_units: float = 1.0


def keyboard_rows(context: ContextState) -> list[list[PreviewKey]]:
    """Standard four-row key set for the context's keyboard type."""
    keyboard_type = context.keyboard_type
    kind = keyboard_type.kind
    if kind == KeyboardTypeKind.NUMERIC:
        letters = _NUMERIC_ROWS
        switch = KeyboardAction.switch_to(KeyboardType.alphabetic())
        modifier = KeyboardAction.switch_to(KeyboardType.symbolic())
    elif kind == KeyboardTypeKind.SYMBOLIC:
        letters = _SYMBOLIC_ROWS
        switch = KeyboardAction.switch_to(KeyboardType.alphabetic())
        modifier = KeyboardAction.switch_to(KeyboardType.numeric())
    else:
        letters = _ALPHABETIC_ROWS
        switch = KeyboardAction.switch_to(KeyboardType.numeric())
        modifier = KeyboardAction.shift(keyboard_type.case or KeyboardCase.LOWERCASED)

    upper = keyboard_type.is_alphabetic_uppercased

    def chars(row: str) -> list[PreviewKey]:
        return [PreviewKey(KeyboardAction.character(c.upper() if upper else c)) for c in row]

    rows = [chars(letters[0]), chars(letters[1])]
    if len(letters[1]) < len(letters[0]):
        margin = PreviewKey(KeyboardAction.character_margin(letters[1][0]), 0.5)
        rows[1] = [margin, *rows[1], PreviewKey(KeyboardAction.character_margin(letters[1][-1]), 0.5)]
    rows.append([PreviewKey(modifier, 1.5), *chars(letters[2]), PreviewKey(KeyboardAction.backspace(), 1.5)])

    bottom = [PreviewKey(switch, 1.25)]
    if context.needs_input_mode_switch_key:
        bottom.append(PreviewKey(KeyboardAction.system(SystemKey.NEXT_KEYBOARD), 1.25))
    if context.has_dictation_key:
        bottom.append(PreviewKey(KeyboardAction.system(SystemKey.DICTATION), 1.25))
    bottom.append(PreviewKey(KeyboardAction.space(), 5.0))
    bottom.append(PreviewKey(KeyboardAction.primary(ReturnKeyType.RETURN), 2.0))
    rows.append(bottom)
    return rows


class KeyboardPreviewRenderer:
    """Draws a keyboard for a context snapshot.

    Every call re-resolves every key, so the output always reflects the
    snapshot passed in.
    """

    def __init__(
        self,
        width: int = 640,
        height: int = 260,
        key_height: int = 54,
        resolver: StyleResolver | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.key_height = key_height
        self.resolver = resolver or StyleResolver()

    def render_image(self, context: ContextState, pressed: Iterable[KeyboardAction] = ()) -> Image.Image:
        pressed_actions = set(pressed)
        background = self.resolver.background_style(context)
        base = background.color if background.color is not None else standard_keyboard_background(context)
        image = Image.new("RGBA", (self.width, self.height), _rgba(base))

        rows = keyboard_rows(context)
        row_height = min(self.key_height, self.height // max(len(rows), 1))
        top = max(0, (self.height - row_height * len(rows)) // 2)
        for index, row in enumerate(rows):
            self._draw_row(image, context, row, top + index * row_height, row_height, pressed_actions)
        return image

    def save_png(self, context: ContextState, path: Path, pressed: Iterable[KeyboardAction] = ()) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.render_image(context, pressed).save(path, format="PNG")
        return path

    def png_bytes(self, context: ContextState, pressed: Iterable[KeyboardAction] = ()) -> bytes:
        buf = BytesIO()
        self.render_image(context, pressed).save(buf, format="PNG")
        return buf.getvalue()

    def preview_data_url(self, context: ContextState, pressed: Iterable[KeyboardAction] = ()) -> str:
        b64 = base64.b64encode(self.png_bytes(context, pressed)).decode("ascii")
        return f"data:image/png;base64,{b64}"

    def _font(self, size: float):
        try:
            return ImageFont.truetype("Arial.ttf", int(size))
        except OSError:
            return ImageFont.load_default()

    def _draw_row(
        self,
        image: Image.Image,
        context: ContextState,
        row: list[PreviewKey],
        y: int,
        row_height: int,
        pressed: set[KeyboardAction],
    ) -> None:
        insets = self.resolver.layout_configuration(context).button_insets
        units = sum(key.width_units for key in row)
        unit_width = self.width / max(units, 1.0)
        x = 0.0
        for key in row:
            key_width = unit_width * key.width_units
            box = (
                int(x + insets.leading),
                int(y + insets.top),
                int(x + key_width - insets.trailing),
                int(y + row_height - insets.bottom),
            )
            self._draw_key(image, context, key.action, box, key.action in pressed)
            x += key_width

    def _draw_key(
        self,
        image: Image.Image,
        context: ContextState,
        action: KeyboardAction,
        box: tuple[int, int, int, int],
        is_pressed: bool,
    ) -> None:
        style = self.resolver.button_style(context, action, is_pressed)
        if box[2] <= box[0] or box[3] <= box[1]:
            return

        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        radius = int(style.corner_radius or 0)
        if style.shadow.size > 0:
            offset = int(round(style.shadow.size))
            shadow_box = (box[0], box[1] + offset, box[2], box[3] + offset)
            draw.rounded_rectangle(shadow_box, radius=radius, fill=_rgba(style.shadow.color))
        outline = _rgba(style.border.color) if style.border.size > 0 else None
        draw.rounded_rectangle(
            box,
            radius=radius,
            fill=_rgba(style.background_color),
            outline=outline,
            width=max(1, int(round(style.border.size))) if outline else 0,
        )

        label = self.resolver.button_text(context, action)
        image_name = self.resolver.button_image(context, action)
        if image_name is not None:
            label = _IMAGE_GLYPHS.get(image_name, image_name)
        if label and not style.foreground_color.is_transparent:
            font = self._font(style.font.size)
            left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
            cx = (box[0] + box[2] - (right - left)) / 2
            cy = (box[1] + box[3] - (bottom - top)) / 2 - top
            draw.text((cx, cy), label, font=font, fill=_rgba(style.foreground_color))

        image.alpha_composite(layer)


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return color.rgba8()
