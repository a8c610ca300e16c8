"""Tests for per-row glyph selection."""

import itertools

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from candlechart.render.glyphs import (
    Half,
    glyph_for_halves,
    halves_of,
    select_glyph,
    stretch_glyphs,
    wick_glyph,
)
from candlechart.render.symbols import WICK_GLYPHS, Glyph

HEIGHT = 5


@st.composite
def positions(draw):
    """Generate (high, body_top, body_bottom, low) inside a chart of HEIGHT rows."""
    values = sorted(
        draw(st.lists(st.floats(min_value=0.0, max_value=float(HEIGHT)), min_size=4, max_size=4)),
        reverse=True,
    )
    return tuple(values)


class TestGlyphTable:
    """The nine (upper, lower) combinations."""

    def test_every_combination_has_its_own_glyph(self):
        """No two half combinations share a glyph."""
        glyphs = [glyph_for_halves(u, l) for u, l in itertools.product(Half, Half)]
        assert len(set(glyphs)) == 9

    @pytest.mark.parametrize(
        "upper,lower,expected",
        [
            (Half.VOID, Half.VOID, Glyph.VOID),
            (Half.WICK, Half.WICK, Glyph.WICK),
            (Half.BODY, Half.BODY, Glyph.BODY),
            (Half.VOID, Half.BODY, Glyph.HALF_BODY_BOTTOM),
            (Half.BODY, Half.VOID, Glyph.HALF_BODY_TOP),
            (Half.VOID, Half.WICK, Glyph.HALF_WICK_BOTTOM),
            (Half.WICK, Half.VOID, Glyph.HALF_WICK_TOP),
            (Half.WICK, Half.BODY, Glyph.WICK_OVER_BODY),
            (Half.BODY, Half.WICK, Glyph.BODY_OVER_WICK),
        ],
    )
    def test_mapping(self, upper: Half, lower: Half, expected: Glyph):
        assert glyph_for_halves(upper, lower) == expected

    def test_halves_of_reads_the_table_backwards(self):
        for upper, lower in itertools.product(Half, Half):
            assert halves_of(glyph_for_halves(upper, lower)) == (upper, lower)


class TestWickGlyph:
    """Rows crossed by the wick alone."""

    @pytest.mark.parametrize(
        "low,high,row,expected",
        [
            (0.0, 5.0, 2, Glyph.WICK),
            (0.0, 3.57, 3, Glyph.WICK),
            (2.0, 4.04, 4, Glyph.HALF_WICK_BOTTOM),
            (0.87, 5.0, 0, Glyph.HALF_WICK_TOP),
            (1.25, 3.75, 1, Glyph.WICK),
            (2.5, 2.5, 2, Glyph.VOID),
            (0.0, 1.0, 1, Glyph.VOID),
        ],
    )
    def test_coverage(self, low: float, high: float, row: int, expected: Glyph):
        """Wicks covering more than half a row draw as a full line."""
        assert wick_glyph(low, high, row) == expected


class TestSelectGlyph:
    """Rows holding the body or its ends."""

    @pytest.mark.parametrize(
        "high,body_top,body_bottom,low,row,expected",
        [
            # body ends mid-row with the wick running on past it
            (5.0, 3.5, 1.5, 0.0, 3, Glyph.WICK),
            (5.0, 3.5, 1.5, 0.0, 1, Glyph.WICK),
            (5.0, 3.5, 1.5, 0.0, 2, Glyph.BODY),
            # body ends mid-row with no wick below
            (5.0, 4.64, 2.5, 2.5, 2, Glyph.HALF_BODY_TOP),
            # wick just reaching past the row top
            (4.04, 3.75, 2.02, 2.02, 3, Glyph.WICK_OVER_BODY),
            (5.0, 4.64, 2.5, 2.5, 4, Glyph.WICK_OVER_BODY),
            # wick ending inside the row
            (3.94, 3.75, 2.21, 1.92, 3, Glyph.BODY),
            (4.88, 4.64, 2.74, 2.38, 2, Glyph.BODY_OVER_WICK),
            # wick just reaching past the row bottom
            (3.94, 3.75, 2.21, 1.92, 2, Glyph.BODY_OVER_WICK),
            (3.94, 3.75, 2.21, 1.92, 1, Glyph.HALF_WICK_TOP),
            # body covering less than a quarter of the row
            (5.0, 0.2, 0.0, 0.0, 0, Glyph.WICK),
            (3.75, 2.21, 1.92, 1.25, 2, Glyph.WICK),
            # no wick at the body ends
            (2.9, 2.9, 1.6, 1.6, 2, Glyph.BODY),
            (2.9, 2.9, 1.6, 1.6, 1, Glyph.HALF_BODY_TOP),
        ],
    )
    def test_hand_checked_rows(self, high, body_top, body_bottom, low, row, expected):
        assert select_glyph(high, body_top, body_bottom, low, row, HEIGHT) == expected

    @pytest.mark.parametrize(
        "high,level,low,row,expected",
        [
            (0.25, 0.25, 0.25, 0, Glyph.HALF_BODY_BOTTOM),
            (2.5, 2.5, 2.5, 2, Glyph.HALF_BODY_BOTTOM),
            (2.9, 2.25, 1.6, 2, Glyph.WICK_OVER_BODY),
            (2.9, 2.25, 1.6, 1, Glyph.HALF_WICK_TOP),
            (5.0, 5.0, 5.0, 4, Glyph.HALF_BODY_BOTTOM),
        ],
    )
    def test_flat_body(self, high, level, low, row, expected):
        """A body with open equal to close sits in the lower half of its row."""
        assert select_glyph(high, level, level, low, row, HEIGHT) == expected

    @given(data=st.data(), row=st.integers(min_value=0, max_value=HEIGHT - 1))
    @settings(max_examples=300, deadline=None)
    def test_rows_inside_the_body_are_body(self, data, row: int):
        """*For any* candle, a row lying entirely inside the body is drawn as body."""
        body_bottom = data.draw(st.floats(min_value=0.0, max_value=float(row)))
        body_top = data.draw(st.floats(min_value=float(row + 1), max_value=float(HEIGHT)))
        high = data.draw(st.floats(min_value=body_top, max_value=float(HEIGHT)))
        low = data.draw(st.floats(min_value=0.0, max_value=body_bottom))

        assert select_glyph(high, body_top, body_bottom, low, row, HEIGHT) == Glyph.BODY

    @given(values=positions(), row=st.integers(min_value=0, max_value=HEIGHT - 1), above=st.booleans())
    @settings(max_examples=300, deadline=None)
    def test_rows_outside_the_wick_are_void(self, values, row: int, above: bool):
        """*For any* candle, a row the wick does not reach stays empty."""
        # squeeze the candle into the part of the chart away from the row
        lo, hi = (row + 1.0, float(HEIGHT)) if above else (0.0, float(row))
        high, body_top, body_bottom, low = (lo + v / HEIGHT * (hi - lo) for v in values)
        assume(body_top > body_bottom)

        assert select_glyph(high, body_top, body_bottom, low, row, HEIGHT) == Glyph.VOID


class TestStretchGlyphs:
    """Rows of candles wider than one column."""

    def test_full_body_has_rounded_edges(self):
        assert stretch_glyphs(Half.BODY, Half.BODY, 4) == [
            Glyph.RIGHT_HALF_BLOCK,
            Glyph.FULL_BLOCK,
            Glyph.FULL_BLOCK,
            Glyph.LEFT_HALF_BLOCK,
        ]

    def test_half_body_without_wick(self):
        assert stretch_glyphs(Half.BODY, Half.VOID, 3) == [Glyph.UPPER_HALF_BLOCK] * 3
        assert stretch_glyphs(Half.VOID, Half.BODY, 2) == [Glyph.LOWER_HALF_BLOCK] * 2

    def test_half_body_with_wick_keeps_wick_in_centre(self):
        assert stretch_glyphs(Half.WICK, Half.BODY, 5) == [
            Glyph.LOWER_HALF_BLOCK,
            Glyph.LOWER_HALF_BLOCK,
            Glyph.WICK_OVER_BODY,
            Glyph.LOWER_HALF_BLOCK,
            Glyph.LOWER_HALF_BLOCK,
        ]

    def test_odd_width_wick(self):
        assert stretch_glyphs(Half.WICK, Half.WICK, 3) == [Glyph.VOID, Glyph.WICK, Glyph.VOID]

    def test_even_width_wick(self):
        assert stretch_glyphs(Half.WICK, Half.WICK, 2) == [
            Glyph.RIGHT_EIGHTH_BLOCK,
            Glyph.LEFT_EIGHTH_BLOCK,
        ]

    def test_half_wick(self):
        assert stretch_glyphs(Half.VOID, Half.WICK, 3) == [
            Glyph.VOID,
            Glyph.HALF_WICK_BOTTOM,
            Glyph.VOID,
        ]

    @given(
        upper=st.sampled_from(list(Half)),
        lower=st.sampled_from(list(Half)),
        width=st.integers(min_value=1, max_value=20),
    )
    @settings(max_examples=200, deadline=None)
    def test_width_and_thin_wick(self, upper: Half, lower: Half, width: int):
        """*For any* row, the output has ``width`` glyphs and wick glyphs occupy at most two columns."""
        row = stretch_glyphs(upper, lower, width)

        assert len(row) == width
        assert sum(1 for glyph in row if glyph in WICK_GLYPHS) <= 2
        if width == 1:
            assert row == [glyph_for_halves(upper, lower)]
