"""Windowing and horizontal layout of candles.

Fixed layout puts one candle per column at the column of its timestamp.
Fit layout fills the available columns: few candles are stretched, many
candles are merged into wider time buckets.
"""

import itertools
import logging
import math
from dataclasses import dataclass
from typing import Sequence

from candlechart.models.candle import Candle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """Where a candle is drawn, in chart columns."""

    column: int
    width: int
    candle: Candle


def placeholder(timestamp: int) -> Candle:
    """Zero-valued candle used to pad the series."""
    return Candle(timestamp=timestamp, open=0.0, high=0.0, low=0.0, close=0.0)


def pad_series(candles: Sequence[Candle], interval_ms: int, count: int) -> list[Candle]:
    """Surround the series with ``count`` placeholders on each side.

    Placeholders are spaced one interval apart starting one interval
    before the first and after the last candle.
    """
    if not candles:
        return []

    first = candles[0].timestamp
    last = candles[-1].timestamp
    before = [placeholder(first - i * interval_ms) for i in range(count, 0, -1)]
    after = [placeholder(last + i * interval_ms) for i in range(1, count + 1)]
    return before + list(candles) + after


def select_window(candles: Sequence[Candle], start: int, end: int) -> list[Candle]:
    """Candles with ``start <= timestamp <= end``."""
    return [c for c in candles if start <= c.timestamp <= end]


def merge_candles(group: Sequence[Candle]) -> Candle:
    """Aggregate consecutive candles into one.

    Open and timestamp come from the first member, close from the last,
    high and low are the extremes of the group.
    """
    return Candle(
        timestamp=group[0].timestamp,
        open=group[0].open,
        high=max(c.high for c in group),
        low=min(c.low for c in group),
        close=group[-1].close,
    )


def squash(candles: Sequence[Candle], group_size: int) -> list[Candle]:
    """Merge every ``group_size`` consecutive candles; the last group may be shorter."""
    group_size = max(group_size, 1)
    return [
        merge_candles(candles[i : i + group_size])
        for i in range(0, len(candles), group_size)
    ]


def stretch(count: int, columns: int) -> tuple[int, int, list[bool]]:
    """Share ``columns`` between ``count`` candles.

    Every candle gets the same width; the columns left over become single
    column gaps spread over the spaces between candles.

    Args:
        count: Number of candles, at most ``columns``.
        columns: Available chart columns.

    Returns:
        Tuple of (candle_width, extra_columns, gaps) where ``gaps[i]`` tells
        whether a blank column follows candle ``i``.
    """
    if count <= 0:
        return 1, 0, []

    width = max(1, columns // count)
    extra = max(0, columns - width * count)
    gaps = [False] * (count - 1)
    if extra and gaps:
        # extra < count, so the scaled midpoints are distinct gap indices
        for i in range(min(extra, len(gaps))):
            gaps[int((i + 0.5) * len(gaps) / extra)] = True
    return width, extra, gaps


def fixed_layout(candles: Sequence[Candle], start: int, interval_ms: int) -> list[Placement]:
    """One column per interval, counted from the window start.

    Candles whose timestamps fall into the same interval share a column and
    are merged into one candle there.
    """
    def column_of(candle: Candle) -> int:
        return (candle.timestamp - start) // interval_ms

    placements = []
    for column, group in itertools.groupby(candles, key=column_of):
        members = list(group)
        if len(members) > 1:
            logger.debug("Merging %d candles into column %d", len(members), column)
        placements.append(Placement(column, 1, merge_candles(members)))
    return placements


def fit_layout(candles: Sequence[Candle], columns: int) -> tuple[list[Placement], list[int]]:
    """Fill ``columns`` with ``candles`` by stretching or squashing.

    Returns:
        Tuple of (placements, gap_columns).
    """
    if not candles or columns <= 0:
        return [], []

    if len(candles) > columns:
        merged = squash(candles, math.ceil(len(candles) / columns))
        return [Placement(i, 1, c) for i, c in enumerate(merged)], []

    width, _, gaps = stretch(len(candles), columns)
    placements = []
    gap_columns = []
    x = 0
    for i, candle in enumerate(candles):
        placements.append(Placement(x, width, candle))
        x += width
        if i < len(gaps) and gaps[i]:
            gap_columns.append(x)
            x += 1
    return placements, gap_columns
