"""candlechart - candlestick charts for the terminal.

Renders OHLC candles into a character grid with price and time axes,
live/pinned windows and fixed or fit-to-width layouts.
"""

from candlechart.grid import Buffer, Cell, Rect
from candlechart.models import Candle, CandleType, ChartInfo, ChartState, Interval
from candlechart.render.chart import CandleStickChart
from candlechart.render.config import ChartConfig, FitMode
from candlechart.render.numeric import Numeric
from candlechart.render.x_axis import XAxis
from candlechart.render.y_axis import YAxis

__version__ = "0.1.0"

__all__ = [
    "Buffer",
    "Candle",
    "CandleStickChart",
    "CandleType",
    "Cell",
    "ChartConfig",
    "ChartInfo",
    "ChartState",
    "FitMode",
    "Interval",
    "Numeric",
    "Rect",
    "XAxis",
    "YAxis",
]
