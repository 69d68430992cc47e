"""Built-in keyboard themes."""

from __future__ import annotations

from keyhue_core.logging_setup import get_logger

from .colors import Color
from .models import Theme


_logger = get_logger().getChild("themes")


def _rgb(red: int, green: int, blue: int) -> Color:
    return Color.from_rgb255(red, green, blue)


_CATALOG: tuple[Theme, ...] = (
    Theme(
        name="ocean-blue",
        keyboard_background_color=_rgb(1, 70, 112),
        primary_background_color=_rgb(3, 86, 136),
        secondary_background_color=_rgb(0, 56, 90),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(3, 86, 136),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="bright-purple",
        keyboard_background_color=_rgb(255, 213, 109),
        primary_background_color=_rgb(162, 138, 200),
        secondary_background_color=_rgb(250, 95, 38),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(162, 138, 200),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="autumn",
        keyboard_background_color=_rgb(115, 13, 86),
        primary_background_color=_rgb(225, 95, 27),
        secondary_background_color=_rgb(225, 199, 4),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(225, 95, 27),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="leaf",
        keyboard_background_color=_rgb(202, 224, 158),
        primary_background_color=_rgb(254, 225, 228),
        secondary_background_color=_rgb(165, 191, 141),
        primary_foreground_color=_rgb(125, 127, 115),
        callout_background_color=_rgb(254, 225, 228),
        callout_foreground_color=_rgb(125, 127, 115),
    ),
    Theme(
        name="lemon",
        keyboard_background_color=_rgb(211, 234, 255),
        primary_background_color=_rgb(255, 255, 190),
        secondary_background_color=_rgb(249, 230, 0),
        primary_foreground_color=_rgb(170, 162, 154),
        callout_background_color=_rgb(255, 255, 190),
        callout_foreground_color=_rgb(170, 162, 154),
    ),
    Theme(
        name="pink",
        keyboard_background_color=_rgb(254, 230, 246),
        primary_background_color=_rgb(255, 213, 237),
        secondary_background_color=_rgb(244, 194, 223),
        primary_foreground_color=_rgb(155, 155, 155),
        callout_background_color=_rgb(255, 213, 237),
        callout_foreground_color=_rgb(155, 155, 155),
    ),
    Theme(
        name="light-blue",
        keyboard_background_color=_rgb(232, 242, 254),
        primary_background_color=_rgb(201, 221, 224),
        secondary_background_color=_rgb(189, 213, 249),
        primary_foreground_color=_rgb(166, 166, 168),
        callout_background_color=_rgb(201, 221, 224),
        callout_foreground_color=_rgb(166, 166, 168),
    ),
    Theme(
        name="pastle-blue-and-green",
        keyboard_background_color=_rgb(237, 183, 196),
        primary_background_color=_rgb(177, 222, 184),
        secondary_background_color=_rgb(166, 213, 229),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(177, 222, 184),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="dagobah-green",
        keyboard_background_color=_rgb(13, 154, 144),
        primary_background_color=_rgb(0, 184, 171),
        secondary_background_color=_rgb(11, 141, 132),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(0, 184, 171),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="classic-turquoise",
        keyboard_background_color=_rgb(65, 197, 215),
        primary_background_color=_rgb(27, 176, 195),
        secondary_background_color=_rgb(20, 146, 163),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(27, 176, 195),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="bright-blue",
        keyboard_background_color=_rgb(0, 143, 176),
        primary_background_color=_rgb(0, 181, 224),
        secondary_background_color=_rgb(0, 111, 137),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(0, 181, 224),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="classic-blue",
        keyboard_background_color=_rgb(47, 144, 203),
        primary_background_color=_rgb(59, 133, 231),
        secondary_background_color=_rgb(28, 87, 163),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(59, 133, 231),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="gold",
        keyboard_background_color=_rgb(213, 155, 58),
        primary_background_color=_rgb(247, 189, 83),
        secondary_background_color=_rgb(194, 141, 49),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(247, 189, 83),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="magical-purple",
        keyboard_background_color=_rgb(218, 183, 222),
        primary_background_color=_rgb(236, 219, 238),
        secondary_background_color=_rgb(154, 141, 197),
        primary_foreground_color=_rgb(255, 246, 255),
        callout_background_color=_rgb(236, 219, 238),
        callout_foreground_color=_rgb(255, 246, 255),
    ),
    Theme(
        name="fairy-purple",
        keyboard_background_color=_rgb(218, 183, 222),
        primary_background_color=_rgb(236, 219, 238),
        secondary_background_color=_rgb(154, 141, 197),
        primary_foreground_color=_rgb(255, 246, 255),
        callout_background_color=_rgb(236, 219, 238),
        callout_foreground_color=_rgb(255, 246, 255),
    ),
    Theme(
        name="dark-purple",
        keyboard_background_color=_rgb(62, 23, 114),
        primary_background_color=_rgb(82, 28, 158),
        secondary_background_color=_rgb(54, 16, 95),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(82, 28, 158),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="very-dark-purple",
        keyboard_background_color=_rgb(14, 0, 85),
        primary_background_color=_rgb(40, 28, 116),
        secondary_background_color=_rgb(6, 0, 59),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(40, 28, 116),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="watermelon-red",
        keyboard_background_color=_rgb(233, 92, 92),
        primary_background_color=_rgb(255, 120, 118),
        secondary_background_color=_rgb(202, 68, 65),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(255, 120, 118),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="blush-pink",
        keyboard_background_color=_rgb(255, 206, 206),
        primary_background_color=_rgb(244, 178, 177),
        secondary_background_color=_rgb(201, 127, 134),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(244, 178, 177),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="peach",
        keyboard_background_color=_rgb(167, 171, 147),
        primary_background_color=_rgb(255, 180, 154),
        secondary_background_color=_rgb(255, 141, 102),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(255, 180, 154),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="cherry-pink",
        keyboard_background_color=_rgb(255, 82, 120),
        primary_background_color=_rgb(222, 66, 98),
        secondary_background_color=_rgb(195, 51, 82),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(222, 66, 98),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="bright-pink",
        keyboard_background_color=_rgb(151, 35, 160),
        primary_background_color=_rgb(216, 63, 224),
        secondary_background_color=_rgb(145, 32, 150),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(216, 63, 224),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="autumn-camel",
        keyboard_background_color=_rgb(150, 153, 161),
        primary_background_color=_rgb(233, 194, 143),
        secondary_background_color=_rgb(183, 135, 108),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(233, 194, 143),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="graphite",
        keyboard_background_color=_rgb(192, 190, 179),
        primary_background_color=_rgb(70, 68, 64),
        secondary_background_color=_rgb(130, 126, 118),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(70, 68, 64),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="pacific-blue",
        keyboard_background_color=_rgb(155, 182, 193),
        primary_background_color=_rgb(52, 79, 93),
        secondary_background_color=_rgb(104, 132, 145),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(52, 79, 93),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="midnight-green",
        keyboard_background_color=_rgb(123, 132, 119),
        primary_background_color=_rgb(62, 72, 64),
        secondary_background_color=_rgb(147, 156, 144),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(62, 72, 64),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="violet",
        keyboard_background_color=_rgb(197, 189, 210),
        primary_background_color=_rgb(224, 221, 240),
        secondary_background_color=_rgb(178, 183, 220),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(224, 221, 240),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="retro",
        keyboard_background_color=_rgb(146, 115, 82),
        primary_background_color=_rgb(202, 159, 128),
        secondary_background_color=_rgb(208, 180, 157),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(202, 159, 128),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="dark-dark",
        keyboard_background_color=_rgb(3, 3, 3),
        primary_background_color=_rgb(37, 37, 37),
        secondary_background_color=_rgb(19, 19, 19),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(37, 37, 37),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="dark-and-red",
        keyboard_background_color=_rgb(11, 11, 11),
        primary_background_color=_rgb(40, 40, 40),
        secondary_background_color=_rgb(171, 0, 0),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(40, 40, 40),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="dark-and-green",
        keyboard_background_color=_rgb(11, 11, 11),
        primary_background_color=_rgb(40, 40, 40),
        secondary_background_color=_rgb(0, 128, 15),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(40, 40, 40),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="dark-and-blue",
        keyboard_background_color=_rgb(11, 11, 11),
        primary_background_color=_rgb(40, 40, 40),
        secondary_background_color=_rgb(0, 101, 162),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(40, 40, 40),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="very-dark-gray",
        keyboard_background_color=_rgb(26, 27, 33),
        primary_background_color=_rgb(39, 40, 46),
        secondary_background_color=_rgb(15, 16, 25),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(39, 40, 46),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="very-dark-blue",
        keyboard_background_color=_rgb(14, 2, 47),
        primary_background_color=_rgb(62, 61, 82),
        secondary_background_color=_rgb(40, 34, 56),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(62, 61, 82),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="almost-black",
        keyboard_background_color=_rgb(39, 40, 46),
        primary_background_color=_rgb(26, 27, 33),
        secondary_background_color=_rgb(15, 16, 25),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(26, 27, 33),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="dark-purple-shadow",
        keyboard_background_color=_rgb(0, 7, 19),
        primary_background_color=_rgb(24, 33, 48),
        secondary_background_color=_rgb(20, 37, 59),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(24, 33, 48),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="black-black",
        keyboard_background_color=_rgb(16, 17, 26),
        primary_background_color=_rgb(16, 17, 26),
        secondary_background_color=_rgb(15, 16, 26),
        primary_foreground_color=_rgb(255, 255, 255),
        callout_background_color=_rgb(16, 17, 26),
        callout_foreground_color=_rgb(255, 255, 255),
    ),
    Theme(
        name="soft-blue",
        keyboard_background_color=_rgb(255, 255, 255),
        primary_background_color=_rgb(255, 255, 255),
        secondary_background_color=_rgb(236, 244, 255),
        primary_foreground_color=_rgb(60, 90, 139),
        callout_background_color=_rgb(255, 255, 255),
        callout_foreground_color=_rgb(60, 90, 139),
    ),
    Theme(
        name="soft-gray",
        keyboard_background_color=_rgb(255, 255, 255),
        primary_background_color=_rgb(255, 255, 255),
        secondary_background_color=_rgb(244, 248, 255),
        primary_foreground_color=_rgb(247, 247, 247),
        callout_background_color=_rgb(255, 255, 255),
        callout_foreground_color=_rgb(247, 247, 247),
    ),
    Theme(
        name="soft-purple",
        keyboard_background_color=_rgb(248, 253, 255),
        primary_background_color=_rgb(255, 255, 255),
        secondary_background_color=_rgb(234, 239, 255),
        primary_foreground_color=_rgb(121, 135, 255),
        callout_background_color=_rgb(255, 255, 255),
        callout_foreground_color=_rgb(121, 135, 255),
    ),
    Theme(
        name="soft-bright-blue",
        keyboard_background_color=_rgb(255, 255, 255),
        primary_background_color=_rgb(255, 255, 255),
        secondary_background_color=_rgb(236, 244, 255),
        primary_foreground_color=_rgb(11, 171, 238),
        callout_background_color=_rgb(255, 255, 255),
        callout_foreground_color=_rgb(11, 171, 238),
    ),
    Theme(
        name="soft-dark-blue",
        keyboard_background_color=_rgb(255, 255, 255),
        primary_background_color=_rgb(255, 255, 255),
        secondary_background_color=_rgb(251, 255, 255),
        primary_foreground_color=_rgb(60, 90, 136),
        callout_background_color=_rgb(255, 255, 255),
        callout_foreground_color=_rgb(60, 90, 136),
    ),
    Theme(
        name="soft-white",
        keyboard_background_color=_rgb(255, 255, 255),
        primary_background_color=_rgb(255, 255, 255),
        secondary_background_color=_rgb(255, 255, 255),
        primary_foreground_color=_rgb(26, 27, 31),
        callout_background_color=_rgb(255, 255, 255),
        callout_foreground_color=_rgb(26, 27, 31),
    ),
    Theme(
        name="soft-soft",
        keyboard_background_color=_rgb(255, 255, 255),
        primary_background_color=_rgb(255, 255, 255),
        secondary_background_color=_rgb(255, 255, 255),
        primary_foreground_color=_rgb(26, 27, 31),
        callout_background_color=_rgb(255, 255, 255),
        callout_foreground_color=_rgb(26, 27, 31),
    ),
    Theme(
        name="fire-red",
        keyboard_background_color=_rgb(196, 56, 26),
        primary_background_color=_rgb(255, 80, 42),
        secondary_background_color=_rgb(154, 50, 28),
        primary_foreground_color=_rgb(255, 255, 281),
        callout_background_color=_rgb(255, 80, 42),
        callout_foreground_color=_rgb(255, 255, 281),
    ),
)

THEMES: dict[str, Theme] = {theme.name: theme for theme in _CATALOG}


def list_themes() -> list[str]:
    return [theme.name for theme in _CATALOG]


def get_theme(name: str | None) -> Theme | None:
    if not name:
        return None
    theme = THEMES.get(name)
    if theme is None:
        _logger.warning("unknown theme %s", name, extra={"event": "theme_unknown"})
    return theme


def require_theme(name: str) -> Theme:
    theme = THEMES.get(name)
    if theme is None:
        raise KeyError(f"unknown theme {name!r}; available: {', '.join(list_themes())}")
    return theme
