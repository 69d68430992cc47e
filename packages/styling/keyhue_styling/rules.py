"""Style rules: per-facet resolution strategies and the color precedence tables.

Button colors are resolved from data rather than nested conditionals. An
action is first placed in an ``ActionCategory`` by walking the precedence
order for the requested state; the ``(category, pressed)`` pair then selects a
``ColorRule`` naming the theme slot to read when the active color scheme has a
selected theme, and the platform default to use when it does not.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from keyhue_core.context import ContextState
from keyhue_core.models import (
    ActionKind,
    DeviceType,
    KeyboardAction,
    KeyboardLocale,
    KeyboardTypeKind,
    is_lowercased_with_uppercase_variant,
)

from . import colors
from .colors import Color
from .content import content_bottom_margin, standard_button_image, standard_button_text
from .layout import standard_layout_configuration
from .models import ButtonBorder, ButtonShadow, FontWeight, KeyboardFont, LayoutConfiguration


class ActionCategory(str, Enum):
    UPPERCASED_SHIFT = "uppercased_shift"
    SYSTEM = "system"
    PRIMARY = "primary"
    OTHER = "other"


_MATCHERS: dict[ActionCategory, Callable[[KeyboardAction], bool]] = {
    ActionCategory.UPPERCASED_SHIFT: lambda a: a.is_uppercased_shift_action,
    ActionCategory.SYSTEM: lambda a: a.is_system_action,
    ActionCategory.PRIMARY: lambda a: a.is_primary_action,
    ActionCategory.OTHER: lambda a: True,
}

BACKGROUND_ORDER: dict[bool, tuple[ActionCategory, ...]] = {
    False: (ActionCategory.UPPERCASED_SHIFT, ActionCategory.SYSTEM, ActionCategory.PRIMARY, ActionCategory.OTHER),
    True: (ActionCategory.SYSTEM, ActionCategory.PRIMARY, ActionCategory.UPPERCASED_SHIFT, ActionCategory.OTHER),
}

FOREGROUND_ORDER: dict[bool, tuple[ActionCategory, ...]] = {
    False: (ActionCategory.SYSTEM, ActionCategory.PRIMARY, ActionCategory.OTHER),
    True: (ActionCategory.SYSTEM, ActionCategory.PRIMARY, ActionCategory.OTHER),
}


def categorize(action: KeyboardAction, order: tuple[ActionCategory, ...]) -> ActionCategory:
    for category in order:
        if _MATCHERS[category](action):
            return category
    return ActionCategory.OTHER


DefaultColor = Callable[[ContextState, KeyboardAction], Color]


@dataclass(frozen=True)
class ColorRule:
    theme_slot: str
    default: DefaultColor


def _fixed(color: Color) -> DefaultColor:
    return lambda context, action: color


def _palette(pick: Callable[[ContextState], Color]) -> DefaultColor:
    return lambda context, action: pick(context)


def _dark_or(dark: Callable[[ContextState], Color], light: Color) -> DefaultColor:
    return lambda context, action: dark(context) if context.has_dark_color_scheme else light


def _pressed_background(context: ContextState, action: KeyboardAction) -> Color:
    return table_color(BACKGROUND_TABLE, BACKGROUND_ORDER, None, context, action, True)


BACKGROUND_TABLE: dict[tuple[ActionCategory, bool], ColorRule] = {
    (ActionCategory.UPPERCASED_SHIFT, False): ColorRule("secondary_background_color", _pressed_background),
    (ActionCategory.SYSTEM, False): ColorRule(
        "secondary_background_color", _palette(colors.standard_dark_button_background)
    ),
    (ActionCategory.PRIMARY, False): ColorRule("secondary_background_color", _fixed(colors.BLUE)),
    (ActionCategory.OTHER, False): ColorRule("primary_background_color", _palette(colors.standard_button_background)),
    (ActionCategory.SYSTEM, True): ColorRule(
        "secondary_background_color", _dark_or(colors.standard_button_background, colors.WHITE)
    ),
    (ActionCategory.PRIMARY, True): ColorRule(
        "secondary_background_color", _dark_or(colors.standard_dark_button_background, colors.WHITE)
    ),
    (ActionCategory.UPPERCASED_SHIFT, True): ColorRule(
        "secondary_background_color", _palette(colors.standard_dark_button_background)
    ),
    (ActionCategory.OTHER, True): ColorRule("primary_background_color", _palette(colors.standard_dark_button_background)),
}

FOREGROUND_TABLE: dict[tuple[ActionCategory, bool], ColorRule] = {
    (ActionCategory.SYSTEM, False): ColorRule("primary_foreground_color", _palette(colors.standard_button_foreground)),
    (ActionCategory.PRIMARY, False): ColorRule("primary_foreground_color", _fixed(colors.WHITE)),
    (ActionCategory.OTHER, False): ColorRule("primary_foreground_color", _palette(colors.standard_button_foreground)),
    (ActionCategory.SYSTEM, True): ColorRule("primary_foreground_color", _palette(colors.standard_button_foreground)),
    (ActionCategory.PRIMARY, True): ColorRule(
        "primary_foreground_color",
        lambda context, action: colors.WHITE
        if context.has_dark_color_scheme
        else colors.standard_button_foreground(context),
    ),
    (ActionCategory.OTHER, True): ColorRule("primary_foreground_color", _palette(colors.standard_button_foreground)),
}

# Colors that apply regardless of theme and pressed state.
BACKGROUND_FOR_ALL_STATES: dict[ActionKind, Color] = {
    ActionKind.NONE: colors.CLEAR,
    ActionKind.CHARACTER_MARGIN: colors.CLEAR_INTERACTABLE,
    ActionKind.EMOJI: colors.CLEAR_INTERACTABLE,
}

FOREGROUND_FOR_ALL_STATES: dict[ActionKind, Color] = {
    ActionKind.NONE: colors.CLEAR,
    ActionKind.CHARACTER_MARGIN: colors.CLEAR_INTERACTABLE,
}


def table_color(
    table: dict[tuple[ActionCategory, bool], ColorRule],
    order: dict[bool, tuple[ActionCategory, ...]],
    theme_source: Callable[[ContextState], object] | None,
    context: ContextState,
    action: KeyboardAction,
    is_pressed: bool,
) -> Color:
    category = categorize(action, order[is_pressed])
    rule = table[(category, is_pressed)]
    theme = theme_source(context) if theme_source is not None else None
    if theme is not None:
        return getattr(theme, rule.theme_slot)
    return rule.default(context, action)


def _selected_theme(context: ContextState) -> object:
    return context.selected_theme


class StyleRules:
    """Resolution strategy for button styles, one method per facet.

    Facets derived from other facets look their inputs up through ``root``,
    the outermost layer of a ``compose_rules`` stack, so an override on any
    layer also reaches the facets computed from it.
    """

    _root: StyleRules | None = None

    @property
    def root(self) -> StyleRules:
        return self._root if self._root is not None else self

    def bind_root(self, root: StyleRules) -> None:
        self._root = root

    def background_color(self, context: ContextState, action: KeyboardAction, is_pressed: bool) -> Color:
        raise NotImplementedError

    def background_opacity(self, context: ContextState, action: KeyboardAction, is_pressed: bool) -> float:
        raise NotImplementedError

    def foreground_color(self, context: ContextState, action: KeyboardAction, is_pressed: bool) -> Color:
        raise NotImplementedError

    def font(self, context: ContextState, action: KeyboardAction) -> KeyboardFont:
        raise NotImplementedError

    def font_size(self, context: ContextState, action: KeyboardAction) -> float:
        raise NotImplementedError

    def pad_font_size(self, context: ContextState, action: KeyboardAction) -> float | None:
        raise NotImplementedError

    def keyboard_type_font_size(self, kind: KeyboardTypeKind) -> float:
        raise NotImplementedError

    def font_weight(self, context: ContextState, action: KeyboardAction) -> FontWeight | None:
        raise NotImplementedError

    def is_georgian_alphabetic(self, context: ContextState) -> bool:
        raise NotImplementedError

    def border(self, context: ContextState, action: KeyboardAction) -> ButtonBorder:
        raise NotImplementedError

    def shadow(self, context: ContextState, action: KeyboardAction) -> ButtonShadow:
        raise NotImplementedError

    def corner_radius(self, context: ContextState, action: KeyboardAction) -> float | None:
        raise NotImplementedError

    def layout_configuration(self, context: ContextState) -> LayoutConfiguration:
        raise NotImplementedError

    def button_text(self, context: ContextState, action: KeyboardAction) -> str | None:
        raise NotImplementedError

    def button_image(self, context: ContextState, action: KeyboardAction) -> str | None:
        raise NotImplementedError

    def content_bottom_margin(self, context: ContextState, action: KeyboardAction) -> float:
        raise NotImplementedError

    def image_scale_factor(self, context: ContextState, action: KeyboardAction) -> float:
        raise NotImplementedError


class StandardStyleRules(StyleRules):
    """Native-looking defaults with user theme support."""

    def background_color(self, context: ContextState, action: KeyboardAction, is_pressed: bool) -> Color:
        color = BACKGROUND_FOR_ALL_STATES.get(action.kind)
        if color is None:
            color = table_color(BACKGROUND_TABLE, BACKGROUND_ORDER, _selected_theme, context, action, is_pressed)
        return color.with_opacity(self.root.background_opacity(context, action, is_pressed))

    def background_opacity(self, context: ContextState, action: KeyboardAction, is_pressed: bool) -> float:
        if context.is_space_drag_gesture_active:
            return 0.5
        if context.has_dark_color_scheme or is_pressed:
            return 1.0
        return 0.95

    def foreground_color(self, context: ContextState, action: KeyboardAction, is_pressed: bool) -> Color:
        color = FOREGROUND_FOR_ALL_STATES.get(action.kind)
        if color is not None:
            return color
        return table_color(FOREGROUND_TABLE, FOREGROUND_ORDER, _selected_theme, context, action, is_pressed)

    def font(self, context: ContextState, action: KeyboardAction) -> KeyboardFont:
        root = self.root
        return KeyboardFont(size=root.font_size(context, action), weight=root.font_weight(context, action))

    def font_size(self, context: ContextState, action: KeyboardAction) -> float:
        root = self.root
        override = root.pad_font_size(context, action)
        if override is not None:
            return override
        if root.button_image(context, action) is not None:
            return 20
        if action.kind == ActionKind.KEYBOARD_TYPE and action.keyboard_type is not None:
            return root.keyboard_type_font_size(action.keyboard_type.kind)
        if action.kind == ActionKind.SPACE:
            return 16
        text = root.button_text(context, action) or ""
        if action.is_input_action and is_lowercased_with_uppercase_variant(text):
            return 26
        if action.is_system_action or action.is_primary_action:
            return 16
        return 23

    def pad_font_size(self, context: ContextState, action: KeyboardAction) -> float | None:
        if context.device_type != DeviceType.PAD:
            return None
        if not context.interface_orientation.is_landscape:
            return None
        if action.is_alphabetic_keyboard_type_action:
            return 22
        if action.is_keyboard_type_action(KeyboardTypeKind.NUMERIC):
            return 22
        if action.is_keyboard_type_action(KeyboardTypeKind.SYMBOLIC):
            return 20
        return None

    def keyboard_type_font_size(self, kind: KeyboardTypeKind) -> float:
        if kind == KeyboardTypeKind.ALPHABETIC:
            return 15
        if kind == KeyboardTypeKind.NUMERIC:
            return 16
        return 14

    def font_weight(self, context: ContextState, action: KeyboardAction) -> FontWeight | None:
        root = self.root
        if root.is_georgian_alphabetic(context):
            return FontWeight.REGULAR
        if action.kind == ActionKind.BACKSPACE:
            return FontWeight.REGULAR
        if action.kind == ActionKind.CHARACTER:
            return FontWeight.LIGHT if is_lowercased_with_uppercase_variant(action.text or "") else None
        return FontWeight.LIGHT if root.button_image(context, action) is not None else None

    def is_georgian_alphabetic(self, context: ContextState) -> bool:
        return context.keyboard_type.is_alphabetic and context.locale.matches(KeyboardLocale.GEORGIAN)

    def border(self, context: ContextState, action: KeyboardAction) -> ButtonBorder:
        if action.kind in (ActionKind.EMOJI, ActionKind.NONE):
            return ButtonBorder.no_border()
        return ButtonBorder.standard()

    def shadow(self, context: ContextState, action: KeyboardAction) -> ButtonShadow:
        if context.is_space_drag_gesture_active:
            return ButtonShadow.no_shadow()
        if action.kind in (ActionKind.CHARACTER_MARGIN, ActionKind.EMOJI, ActionKind.NONE):
            return ButtonShadow.no_shadow()
        return ButtonShadow.standard()

    def corner_radius(self, context: ContextState, action: KeyboardAction) -> float | None:
        return self.root.layout_configuration(context).button_corner_radius

    def layout_configuration(self, context: ContextState) -> LayoutConfiguration:
        return standard_layout_configuration(context)

    def button_text(self, context: ContextState, action: KeyboardAction) -> str | None:
        return standard_button_text(action, context)

    def button_image(self, context: ContextState, action: KeyboardAction) -> str | None:
        return standard_button_image(action, context)

    def content_bottom_margin(self, context: ContextState, action: KeyboardAction) -> float:
        return content_bottom_margin(action)

    def image_scale_factor(self, context: ContextState, action: KeyboardAction) -> float:
        return 1.2 if context.device_type == DeviceType.PAD else 1.0


class DelegatingStyleRules(StyleRules):
    """Forwards every facet to ``base``. Subclass and override single facets."""

    def __init__(self, base: StyleRules) -> None:
        self.base = base
        base.bind_root(self)

    def bind_root(self, root: StyleRules) -> None:
        super().bind_root(root)
        self.base.bind_root(root)

    def background_color(self, context: ContextState, action: KeyboardAction, is_pressed: bool) -> Color:
        return self.base.background_color(context, action, is_pressed)

    def background_opacity(self, context: ContextState, action: KeyboardAction, is_pressed: bool) -> float:
        return self.base.background_opacity(context, action, is_pressed)

    def foreground_color(self, context: ContextState, action: KeyboardAction, is_pressed: bool) -> Color:
        return self.base.foreground_color(context, action, is_pressed)

    def font(self, context: ContextState, action: KeyboardAction) -> KeyboardFont:
        return self.base.font(context, action)

    def font_size(self, context: ContextState, action: KeyboardAction) -> float:
        return self.base.font_size(context, action)

    def pad_font_size(self, context: ContextState, action: KeyboardAction) -> float | None:
        return self.base.pad_font_size(context, action)

    def keyboard_type_font_size(self, kind: KeyboardTypeKind) -> float:
        return self.base.keyboard_type_font_size(kind)

    def font_weight(self, context: ContextState, action: KeyboardAction) -> FontWeight | None:
        return self.base.font_weight(context, action)

    def is_georgian_alphabetic(self, context: ContextState) -> bool:
        return self.base.is_georgian_alphabetic(context)

    def border(self, context: ContextState, action: KeyboardAction) -> ButtonBorder:
        return self.base.border(context, action)

    def shadow(self, context: ContextState, action: KeyboardAction) -> ButtonShadow:
        return self.base.shadow(context, action)

    def corner_radius(self, context: ContextState, action: KeyboardAction) -> float | None:
        return self.base.corner_radius(context, action)

    def layout_configuration(self, context: ContextState) -> LayoutConfiguration:
        return self.base.layout_configuration(context)

    def button_text(self, context: ContextState, action: KeyboardAction) -> str | None:
        return self.base.button_text(context, action)

    def button_image(self, context: ContextState, action: KeyboardAction) -> str | None:
        return self.base.button_image(context, action)

    def content_bottom_margin(self, context: ContextState, action: KeyboardAction) -> float:
        return self.base.content_bottom_margin(context, action)

    def image_scale_factor(self, context: ContextState, action: KeyboardAction) -> float:
        return self.base.image_scale_factor(context, action)


RulesLayer = Callable[[StyleRules], StyleRules]


def compose_rules(base: StyleRules, *layers: RulesLayer) -> StyleRules:
    """Stack override layers on ``base``; later layers see earlier ones as their base."""
    rules = base
    for layer in layers:
        rules = layer(rules)
    return rules
