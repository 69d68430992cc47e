"""Device-specific layout configuration and keyboard edge insets."""

from __future__ import annotations

from keyhue_core.context import ContextState
from keyhue_core.models import DeviceType
from keyhue_host.models import Size

from .models import EdgeInsets, LayoutConfiguration


PRO_MAX_SCREEN_PORTRAIT = Size(428.0, 926.0)

PHONE_PORTRAIT = LayoutConfiguration(
    button_corner_radius=5.0,
    button_insets=EdgeInsets(top=6.0, leading=3.0, bottom=6.0, trailing=3.0),
    row_height=54.0,
)
PHONE_LANDSCAPE = LayoutConfiguration(
    button_corner_radius=5.0,
    button_insets=EdgeInsets(top=4.0, leading=3.0, bottom=4.0, trailing=3.0),
    row_height=40.0,
)
PAD_PORTRAIT = LayoutConfiguration(
    button_corner_radius=6.0,
    button_insets=EdgeInsets(top=4.0, leading=6.0, bottom=4.0, trailing=6.0),
    row_height=64.0,
)
PAD_LANDSCAPE = LayoutConfiguration(
    button_corner_radius=7.0,
    button_insets=EdgeInsets(top=6.0, leading=7.0, bottom=6.0, trailing=7.0),
    row_height=86.0,
)


def standard_layout_configuration(context: ContextState) -> LayoutConfiguration:
    landscape = context.interface_orientation.is_landscape
    if context.device_type == DeviceType.PAD:
        return PAD_LANDSCAPE if landscape else PAD_PORTRAIT
    return PHONE_LANDSCAPE if landscape else PHONE_PORTRAIT


def standard_keyboard_edge_insets(context: ContextState) -> EdgeInsets:
    if context.device_type == DeviceType.PAD:
        return EdgeInsets(bottom=4.0)
    if context.device_type == DeviceType.PHONE:
        if context.screen_size.is_close_to(PRO_MAX_SCREEN_PORTRAIT, tolerance=10.0):
            return EdgeInsets()
        return EdgeInsets(bottom=-2.0)
    return EdgeInsets()
