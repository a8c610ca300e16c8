"""Data models for candlechart."""

from candlechart.models.candle import Candle, CandleType
from candlechart.models.interval import VALID_INTERVALS, Interval
from candlechart.models.state import ChartInfo, ChartState

__all__ = [
    "Candle",
    "CandleType",
    "ChartInfo",
    "ChartState",
    "Interval",
    "VALID_INTERVALS",
]
