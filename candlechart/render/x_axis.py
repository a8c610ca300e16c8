"""Horizontal time axis."""

from datetime import datetime, timedelta, tzinfo
from typing import Optional

import pytz

from candlechart.models.interval import Interval
from candlechart.render.symbols import LIVE_MARKER, X_AXIS_LINE, X_AXIS_TICK

EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)

# Free columns between the end of one label and the start of the next
TICK_GAP = 4

# Most detailed first; the first format that fits the axis is used.
_SECOND_FORMATS = ["%Y/%m/%d %H:%M:%S", "%H:%M:%S"]
_MINUTE_FORMATS = ["%Y/%m/%d %H:%M", "%H:%M"]
_DAY_FORMATS = ["%Y/%m/%d", "%m/%d"]


def to_datetime(timestamp: int, display_offset: tzinfo = pytz.utc) -> datetime:
    """Convert epoch milliseconds to an aware datetime in ``display_offset``."""
    return (EPOCH + timedelta(milliseconds=timestamp)).astimezone(display_offset)


def label_formats(interval: Interval) -> list[str]:
    """Candidate strftime formats for ``interval``, most detailed first."""
    if interval.seconds < 60:
        return _SECOND_FORMATS
    if interval.seconds < 24 * 60 * 60:
        return _MINUTE_FORMATS
    return _DAY_FORMATS


class XAxis:
    """Time ruler drawn under the candles.

    Produces two rows: a border with a tick under every labelled column,
    and the labels themselves, each ending at its tick column.
    """

    def __init__(
        self,
        width: int,
        timestamp_min: int,
        timestamp_max: int,
        interval: Interval,
        is_live: bool,
    ):
        """Initialize the axis.

        Args:
            width: Number of chart columns.
            timestamp_min: Timestamp of the leftmost column.
            timestamp_max: Timestamp of the rightmost column.
            interval: Candle interval, selects the label format.
            is_live: Whether the view tracks the newest candle.
        """
        self.width = width
        self.timestamp_min = min(timestamp_min, timestamp_max)
        self.timestamp_max = max(timestamp_min, timestamp_max)
        self.interval = interval
        self.is_live = is_live

    def timestamp_at(self, column: int) -> int:
        """Timestamp shown under ``column``."""
        if self.width <= 1:
            return self.timestamp_max
        span = self.timestamp_max - self.timestamp_min
        return self.timestamp_min + span * column // (self.width - 1)

    def label_format(self) -> Optional[str]:
        """The most detailed format whose label fits, or None."""
        for fmt in label_formats(self.interval):
            if len(EPOCH.strftime(fmt)) + len(LIVE_MARKER) <= self.width:
                return fmt
        return None

    def tick_columns(self, label_length: int) -> list[int]:
        """Columns carrying a label, right to left."""
        spacing = label_length + TICK_GAP
        return [
            column
            for column in range(self.width - 1, -1, -spacing)
            if column + 1 >= label_length
        ]

    def render(self, display_offset: tzinfo = pytz.utc) -> list[str]:
        """Render the border and label rows.

        Args:
            display_offset: Time zone the labels are shown in.

        Returns:
            List of two strings, each ``width`` characters long.
        """
        border = [X_AXIS_LINE] * self.width
        labels = [" "] * self.width

        fmt = self.label_format()
        if fmt is None:
            return ["".join(border), "".join(labels)]

        label_length = len(EPOCH.strftime(fmt)) + len(LIVE_MARKER)
        for column in self.tick_columns(label_length):
            marker = LIVE_MARKER if self.is_live and column == self.width - 1 else " "
            text = marker + to_datetime(self.timestamp_at(column), display_offset).strftime(fmt)
            border[column] = X_AXIS_TICK
            labels[column - len(text) + 1 : column + 1] = list(text)

        return ["".join(border), "".join(labels)]
