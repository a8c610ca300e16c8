"""Candle (OHLC) data model."""

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, model_validator

from candlechart.render.glyphs import Half, halves_of, select_glyph, stretch_glyphs
from candlechart.render.symbols import Glyph

if TYPE_CHECKING:
    from candlechart.render.y_axis import YAxis


class CandleType(str, Enum):
    """Direction of a candle."""

    BULLISH = "bullish"
    BEARISH = "bearish"


class Candle(BaseModel):
    """Represents a single OHLC candle."""

    timestamp: int = Field(..., description="Open time, milliseconds since the epoch")
    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="High price")
    low: float = Field(..., description="Low price")
    close: float = Field(..., description="Closing price")

    model_config = {"frozen": True, "allow_inf_nan": False}

    @model_validator(mode="after")
    def _check_ordering(self) -> "Candle":
        if not (self.low <= min(self.open, self.close) <= max(self.open, self.close) <= self.high):
            raise ValueError(
                f"low <= open, close <= high violated "
                f"(open={self.open}, high={self.high}, low={self.low}, close={self.close})"
            )
        return self

    def classify(self) -> CandleType:
        """Classify the candle as bullish (close at or above open) or bearish."""
        return CandleType.BULLISH if self.close >= self.open else CandleType.BEARISH

    def _positions(self, y_axis: "YAxis") -> tuple[float, float, float, float]:
        """High, body top, body bottom and low in rows from the chart bottom."""
        return (
            y_axis.calc_y(self.high),
            y_axis.calc_y(max(self.open, self.close)),
            y_axis.calc_y(min(self.open, self.close)),
            y_axis.calc_y(self.low),
        )

    def _body_rows(self, glyphs: list[Glyph], y_axis: "YAxis") -> tuple[int, int]:
        """Rows (from the top) holding the first and last visible part of the body."""
        rows = [i for i, glyph in enumerate(glyphs) if Half.BODY in halves_of(glyph)]
        if not rows:
            row, _ = y_axis.locate(max(self.open, self.close))
            return row, row
        return rows[0], rows[-1]

    def render(self, y_axis: "YAxis") -> tuple[tuple[int, int], list[Glyph]]:
        """Render the candle as a single column.

        Args:
            y_axis: Axis used to map prices onto rows.

        Returns:
            Tuple of ((first_body_row, last_body_row), glyphs) with one glyph
            per chart row, top row first.
        """
        positions = self._positions(y_axis)
        glyphs = [
            select_glyph(*positions, row, y_axis.height)
            for row in reversed(range(y_axis.height))
        ]
        return self._body_rows(glyphs, y_axis), glyphs

    def render_stretched(
        self, y_axis: "YAxis", width: int
    ) -> tuple[tuple[int, int], list[list[Glyph]]]:
        """Render the candle across ``width`` columns.

        Every row repeats the halves of the single-column glyph across the
        width, so a width of one gives the same glyphs as ``render``.

        Returns:
            Tuple of ((first_body_row, last_body_row), rows) where each row
            holds ``width`` glyphs, top row first.
        """
        body_rows, glyphs = self.render(y_axis)
        rows = [stretch_glyphs(*halves_of(glyph), max(width, 1)) for glyph in glyphs]
        return body_rows, rows
