"""Chart configuration."""

from datetime import tzinfo
from enum import Enum
from typing import Any, Optional

import pytz
from pydantic import BaseModel, Field, field_validator
from rich.color import Color, ColorParseError
from rich.errors import StyleSyntaxError
from rich.style import Style

from candlechart.models.candle import CandleType
from candlechart.models.interval import Interval
from candlechart.render.numeric import Numeric


class FitMode(str, Enum):
    """How candles are laid out horizontally."""

    # One candle per column; data outside the window is not shown
    FIXED = "fixed"
    # Stretch or squash the candles to fill the available columns
    FIT = "fit"


class ChartConfig(BaseModel):
    """Immutable rendering options for a candlestick chart."""

    interval: Interval = Field(default=Interval.ONE_MINUTE, description="Candle interval")
    numeric: Numeric = Field(default_factory=Numeric, description="Y axis label format")
    style: str = Field(default="", description="Base rich style for the chart area")
    bullish_color: str = Field(default="rgb(52,208,88)", description="Bullish body colour")
    bearish_color: str = Field(default="rgb(234,74,90)", description="Bearish body colour")
    bullish_wick_color: Optional[str] = Field(
        default=None, description="Bullish wick colour (defaults to the body colour)"
    )
    bearish_wick_color: Optional[str] = Field(
        default=None, description="Bearish wick colour (defaults to the body colour)"
    )
    display_offset_minutes: int = Field(
        default=0, gt=-24 * 60, lt=24 * 60, description="UTC offset used for time labels"
    )
    show_y_axis: bool = Field(default=True, description="Draw the price axis")
    show_x_axis: bool = Field(default=True, description="Draw the time axis")
    fit_mode: FitMode = Field(default=FitMode.FIXED, description="Horizontal layout")

    model_config = {"frozen": True}

    @field_validator("bullish_color", "bearish_color", "bullish_wick_color", "bearish_wick_color")
    @classmethod
    def _check_color(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            Color.parse(value)
        except ColorParseError as e:
            raise ValueError(f"invalid colour {value!r}: {e}") from e
        return value

    @field_validator("style")
    @classmethod
    def _check_style(cls, value: str) -> str:
        try:
            Style.parse(value)
        except StyleSyntaxError as e:
            raise ValueError(f"invalid style {value!r}: {e}") from e
        return value

    def with_options(self, **changes: Any) -> "ChartConfig":
        """Return a validated copy with ``changes`` applied."""
        return ChartConfig.model_validate({**self.model_dump(), **changes})

    @property
    def base_style(self) -> Style:
        """Style applied to the whole chart area."""
        return Style.parse(self.style)

    @property
    def display_timezone(self) -> tzinfo:
        """Fixed-offset time zone for axis labels."""
        return pytz.FixedOffset(self.display_offset_minutes)

    def body_style(self, candle_type: CandleType) -> Style:
        """Foreground style for candle bodies of ``candle_type``."""
        if candle_type == CandleType.BULLISH:
            return Style(color=self.bullish_color)
        return Style(color=self.bearish_color)

    def wick_style(self, candle_type: CandleType) -> Style:
        """Foreground style for candle wicks of ``candle_type``."""
        if candle_type == CandleType.BULLISH:
            return Style(color=self.bullish_wick_color or self.bullish_color)
        return Style(color=self.bearish_wick_color or self.bearish_color)
