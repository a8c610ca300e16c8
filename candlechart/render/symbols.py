"""Characters used to draw candles."""

from enum import Enum


class Glyph(str, Enum):
    """Every character a candle can be drawn with."""

    VOID = " "
    BODY = "┃"
    WICK = "│"
    HALF_BODY_BOTTOM = "╻"
    HALF_BODY_TOP = "╹"
    HALF_WICK_BOTTOM = "╷"
    HALF_WICK_TOP = "╵"
    # wick in the upper half, body in the lower half
    WICK_OVER_BODY = "╽"
    # body in the upper half, wick in the lower half
    BODY_OVER_WICK = "╿"

    # Blocks for candles wider than one column
    FULL_BLOCK = "█"
    UPPER_HALF_BLOCK = "▀"
    LOWER_HALF_BLOCK = "▄"
    LEFT_HALF_BLOCK = "▌"
    RIGHT_HALF_BLOCK = "▐"
    LEFT_EIGHTH_BLOCK = "▏"
    RIGHT_EIGHTH_BLOCK = "▕"


# Drawn with the wick colour, everything else gets the body colour.
WICK_GLYPHS = frozenset(
    {
        Glyph.WICK,
        Glyph.HALF_WICK_TOP,
        Glyph.HALF_WICK_BOTTOM,
        Glyph.LEFT_EIGHTH_BLOCK,
        Glyph.RIGHT_EIGHTH_BLOCK,
    }
)

Y_AXIS_TICK = "├"
Y_AXIS_LINE = "│"
X_AXIS_TICK = "┴"
X_AXIS_LINE = "─"
AXIS_CORNER = "└──"
LIVE_MARKER = "*"
