"""Style resolver: pure (context, action, pressed) -> style computation."""

from __future__ import annotations

from dataclasses import replace

from keyhue_core.context import ContextState
from keyhue_core.logging_setup import get_logger
from keyhue_core.models import ColorScheme, KeyboardAction

from .colors import Color
from .layout import standard_keyboard_edge_insets
from .models import (
    ActionCalloutStyle,
    AutocompleteToolbarStyle,
    ButtonStyle,
    CalloutStyle,
    EdgeInsets,
    InputCalloutStyle,
    KeyboardBackground,
    LayoutConfiguration,
)
from .rules import StandardStyleRules, StyleRules


_logger = get_logger().getChild("styling")

# Neutral action used to read the button corner radius for callouts.
_PROBE_ACTION = KeyboardAction.character("")


class StyleResolver:
    """Computes button and container styles from a context snapshot.

    Nothing is cached: callers re-resolve after every context change. All
    facets are delegated to ``rules`` so that overrides can be layered with
    ``compose_rules``.
    """

    def __init__(self, rules: StyleRules | None = None) -> None:
        self.rules = rules or StandardStyleRules()

    def button_style(self, context: ContextState, action: KeyboardAction, is_pressed: bool = False) -> ButtonStyle:
        self._note_scheme(context)
        rules = self.rules
        return ButtonStyle(
            background_color=rules.background_color(context, action, is_pressed),
            foreground_color=rules.foreground_color(context, action, is_pressed),
            font=rules.font(context, action),
            corner_radius=rules.corner_radius(context, action),
            border=rules.border(context, action),
            shadow=rules.shadow(context, action),
        )

    def background_style(self, context: ContextState) -> KeyboardBackground:
        theme = context.selected_theme
        if theme is None:
            return KeyboardBackground.standard()
        return KeyboardBackground.from_color(theme.keyboard_background_color)

    def foreground_color(self, context: ContextState) -> Color | None:
        """Keyboard-wide foreground override. The standard style has none."""
        return None

    def callout_style(self, context: ContextState) -> CalloutStyle:
        radius = self.button_style(context, _PROBE_ACTION, False).corner_radius or 5.0
        theme = context.selected_theme
        if theme is None:
            return CalloutStyle(button_corner_radius=radius)
        return CalloutStyle(
            background_color=theme.callout_background_color,
            button_corner_radius=radius,
            text_color=theme.callout_foreground_color,
        )

    def action_callout_style(self, context: ContextState) -> ActionCalloutStyle:
        callout = self.callout_style(context)
        theme = context.selected_theme
        if theme is None:
            return ActionCalloutStyle(callout=callout)
        return ActionCalloutStyle(
            callout=callout,
            selected_background_color=theme.secondary_background_color,
            selected_foreground_color=theme.primary_foreground_color,
        )

    def input_callout_style(self, context: ContextState) -> InputCalloutStyle:
        return InputCalloutStyle(callout=self.callout_style(context))

    def autocomplete_toolbar_style(self, context: ContextState) -> AutocompleteToolbarStyle:
        style = AutocompleteToolbarStyle()
        theme = context.selected_theme
        if theme is not None:
            style = replace(style, item_text_color=theme.primary_foreground_color)
        elif context.has_dark_color_scheme:
            style = replace(
                style,
                item_text_color=Color(1.0, 1.0, 1.0),
                separator_color=Color(1.0, 1.0, 1.0, 0.3),
                autocorrect_background_color=Color(1.0, 1.0, 1.0, 0.2),
            )
        return style

    def keyboard_edge_insets(self, context: ContextState) -> EdgeInsets:
        return standard_keyboard_edge_insets(context)

    def layout_configuration(self, context: ContextState) -> LayoutConfiguration:
        return self.rules.layout_configuration(context)

    def button_text(self, context: ContextState, action: KeyboardAction) -> str | None:
        return self.rules.button_text(context, action)

    def button_image(self, context: ContextState, action: KeyboardAction) -> str | None:
        return self.rules.button_image(context, action)

    def _note_scheme(self, context: ContextState) -> None:
        if context.color_scheme == ColorScheme.UNRECOGNIZED:
            _logger.debug(
                "unrecognized color scheme %r, using default palette",
                context.trait_collection.user_interface_style,
                extra={"event": "color_scheme_unrecognized"},
            )
