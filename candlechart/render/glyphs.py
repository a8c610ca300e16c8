"""Glyph selection for a single chart row.

Prices are given as positions in row units measured from the chart bottom,
as returned by ``YAxis.calc_y``. Row ``r`` (counted from the bottom) is the
cell ``[r, r + 1]``. A row fully covered by the body is drawn as body; rows
holding an end of the body get a mixed or half glyph, or a plain wick when
the wick runs on well past that end.
"""

import math
from enum import Enum

from candlechart.render.symbols import Glyph

# A body covering less of a row than this is drawn as wick.
MIN_BODY_COVERAGE = 0.25

# A wick running at least this far past the row holding a body end hides the
# body in that row.
WICK_PRECEDENCE = 0.5


class Half(str, Enum):
    """What occupies one half of a character cell."""

    VOID = "void"
    WICK = "wick"
    BODY = "body"


_SINGLE_COLUMN = {
    (Half.VOID, Half.VOID): Glyph.VOID,
    (Half.VOID, Half.WICK): Glyph.HALF_WICK_BOTTOM,
    (Half.VOID, Half.BODY): Glyph.HALF_BODY_BOTTOM,
    (Half.WICK, Half.VOID): Glyph.HALF_WICK_TOP,
    (Half.WICK, Half.WICK): Glyph.WICK,
    (Half.WICK, Half.BODY): Glyph.WICK_OVER_BODY,
    (Half.BODY, Half.VOID): Glyph.HALF_BODY_TOP,
    (Half.BODY, Half.WICK): Glyph.BODY_OVER_WICK,
    (Half.BODY, Half.BODY): Glyph.BODY,
}

_HALVES = {glyph: halves for halves, glyph in _SINGLE_COLUMN.items()}


def glyph_for_halves(upper: Half, lower: Half) -> Glyph:
    """Single-column glyph for a pair of half states."""
    return _SINGLE_COLUMN[(upper, lower)]


def halves_of(glyph: Glyph) -> tuple[Half, Half]:
    """(upper, lower) half states drawn by a single-column glyph."""
    return _HALVES[glyph]


def wick_glyph(low: float, high: float, row: int) -> Glyph:
    """Glyph for a row where only the wick is visible.

    Args:
        low: Bottom of the wick, in rows from the chart bottom.
        high: Top of the wick, in rows from the chart bottom.
        row: Row index counted from the bottom.
    """
    bottom = max(low, row)
    top = min(high, row + 1)
    if top <= bottom:
        return Glyph.VOID
    if top - bottom > 0.5:
        return Glyph.WICK
    if low <= row:
        return Glyph.HALF_WICK_BOTTOM
    if high >= row + 1:
        return Glyph.HALF_WICK_TOP
    return Glyph.HALF_WICK_TOP if (low + high) / 2 >= row + 0.5 else Glyph.HALF_WICK_BOTTOM


def _flat_body_glyph(high: float, level: float, low: float, row: int, height: int) -> Glyph:
    # Open equals close: the body sits in the lower half of the row holding it.
    body_row = min(max(math.floor(level), 0), height - 1)
    if row != body_row:
        return wick_glyph(low, high, row)
    if high > level and high > body_row + 0.5:
        return Glyph.WICK_OVER_BODY
    return Glyph.HALF_BODY_BOTTOM


def select_glyph(
    high: float,
    body_top: float,
    body_bottom: float,
    low: float,
    row: int,
    height: int,
) -> Glyph:
    """Pick the single-column glyph for ``row`` (counted from the bottom).

    Args:
        high: Top of the wick, in rows from the chart bottom.
        body_top: Top of the body.
        body_bottom: Bottom of the body.
        low: Bottom of the wick.
        row: Row index counted from the bottom.
        height: Number of chart rows.

    Returns:
        The glyph drawn in that row.
    """
    if body_top == body_bottom:
        return _flat_body_glyph(high, body_top, low, row, height)

    cover = min(body_top, row + 1) - max(body_bottom, row)
    if cover >= 1:
        return Glyph.BODY
    if cover < MIN_BODY_COVERAGE:
        return wick_glyph(low, high, row)

    top_inside = body_top < row + 1
    bottom_inside = body_bottom > row
    above = high - (row + 1)
    below = row - low

    if top_inside and not bottom_inside:
        if above >= WICK_PRECEDENCE:
            return Glyph.WICK
        if above >= 0 or cover <= 0.5:
            return Glyph.WICK_OVER_BODY if high > body_top else Glyph.HALF_BODY_BOTTOM
        return Glyph.BODY

    if bottom_inside and not top_inside:
        if below >= WICK_PRECEDENCE:
            return Glyph.WICK
        if below >= 0 or cover <= 0.5:
            return Glyph.BODY_OVER_WICK if low < body_bottom else Glyph.HALF_BODY_TOP
        return Glyph.BODY

    # the whole body lies inside this row
    if above >= WICK_PRECEDENCE or below >= WICK_PRECEDENCE:
        return Glyph.WICK
    if cover > 0.5:
        return Glyph.BODY
    if (body_top + body_bottom) / 2 >= row + 0.5:
        return Glyph.BODY_OVER_WICK if low < body_bottom else Glyph.HALF_BODY_TOP
    return Glyph.WICK_OVER_BODY if high > body_top else Glyph.HALF_BODY_BOTTOM


def stretch_glyphs(upper: Half, lower: Half, width: int) -> list[Glyph]:
    """Build one row of a candle that is ``width`` columns wide.

    Full body rows get half blocks on both edges so a fat body reads as one
    shape. Wicks stay one column thin in the centre: a plain line for odd
    widths, a pair of eighth blocks straddling the centre for even widths.
    """
    if width <= 1:
        return [glyph_for_halves(upper, lower)]

    centre = (width - 1) // 2
    row = [Glyph.VOID] * width

    if Half.BODY in (upper, lower):
        if upper == lower:
            row = [Glyph.FULL_BLOCK] * width
            row[0] = Glyph.RIGHT_HALF_BLOCK
            row[-1] = Glyph.LEFT_HALF_BLOCK
            return row

        fill = Glyph.UPPER_HALF_BLOCK if upper == Half.BODY else Glyph.LOWER_HALF_BLOCK
        row = [fill] * width
        if Half.WICK in (upper, lower):
            row[centre] = glyph_for_halves(upper, lower)
        return row

    if upper == lower == Half.WICK:
        if width % 2 == 0:
            row[width // 2 - 1] = Glyph.RIGHT_EIGHTH_BLOCK
            row[width // 2] = Glyph.LEFT_EIGHTH_BLOCK
        else:
            row[centre] = Glyph.WICK
    elif Half.WICK in (upper, lower):
        row[centre] = glyph_for_halves(upper, lower)

    return row
