"""Terminal color palette.

Semantic color names map to fixed xterm 256-color indexes, always rendered
bold. The table is read-only module data.
"""

from collections.abc import Mapping
from enum import StrEnum
from functools import cache
from types import MappingProxyType

from rich.color import Color as RichColor, ColorSystem, ColorType
from rich.style import Style

# Sentinel used to split the escape sequences rich emits around a span
_SENTINEL = "\x00"


class Color(StrEnum):
    """Semantic color names used by the prompt."""

    BLACK = "black"
    BLUE = "blue"
    CYAN = "cyan"
    GREEN = "green"
    ORANGE = "orange"
    PURPLE = "purple"
    RED = "red"
    VIOLET = "violet"
    WHITE = "white"
    YELLOW = "yellow"


# https://upload.wikimedia.org/wikipedia/commons/1/15/Xterm_256color_chart.svg
PALETTE: Mapping[Color, int] = MappingProxyType(
    {
        Color.BLACK: 0,
        Color.BLUE: 33,
        Color.CYAN: 37,
        Color.GREEN: 64,
        Color.ORANGE: 166,
        Color.PURPLE: 125,
        Color.RED: 124,
        Color.VIOLET: 61,
        Color.WHITE: 15,
        Color.YELLOW: 136,
    }
)

COLOR_SYSTEM = ColorSystem.EIGHT_BIT


@cache
def style_for(color: Color) -> Style:
    """Return the bold rich Style for a semantic color.

    Indexes below 16 are kept as 256-color references rather than the
    standard 30-37 and 90-97 codes that ``Color.from_ansi`` would give them.
    """
    number = PALETTE[color]
    return Style(
        color=RichColor(f"color({number})", ColorType.EIGHT_BIT, number=number),
        bold=True,
    )


def paint(text: str, color: Color) -> str:
    """Render text wrapped in the color's SGR start and reset sequences."""
    return style_for(color).render(text, color_system=COLOR_SYSTEM)


@cache
def control_sequences(color: Color) -> tuple[str, str]:
    """Return the (start, reset) escape sequences for a color.

    Example:
        >>> control_sequences(Color.CYAN)
        ('\\x1b[1;38;5;37m', '\\x1b[0m')
    """
    start, _, reset = paint(_SENTINEL, color).partition(_SENTINEL)
    return start, reset
