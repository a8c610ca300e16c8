"""Caller-owned chart state: cursor and the last rendered window."""

from typing import Optional

from pydantic import BaseModel, Field

from candlechart.models.interval import Interval


class ChartInfo(BaseModel):
    """Window boundaries published by the last render."""

    earliest_timestamp: int = Field(
        ..., description="First real candle; the leftmost position the cursor can take"
    )
    latest_timestamp: int = Field(
        ..., description="Last padding slot; the rightmost position the cursor can take"
    )
    interval: Interval = Field(..., description="Candle interval used for the render")
    last_data_timestamp: int = Field(..., description="Newest real candle")
    scrolled_past_start: bool = Field(
        ..., description="Whether the window reaches before the first real candle"
    )

    model_config = {"frozen": True}


class ChartState:
    """Cursor position kept by the caller between renders.

    A cursor of None means the chart follows the newest candle (live view).
    Pinning a timestamp anchors the right edge of the window there instead.
    """

    def __init__(self, cursor_timestamp: Optional[int] = None):
        """Initialize the state.

        Args:
            cursor_timestamp: Timestamp to anchor the right edge at, or None
                to track the newest candle.
        """
        self.cursor_timestamp = cursor_timestamp
        self.info: Optional[ChartInfo] = None

    @property
    def is_live(self) -> bool:
        """True when the view tracks the newest candle."""
        return self.cursor_timestamp is None

    def reset(self) -> None:
        """Go back to the live view."""
        self.cursor_timestamp = None

    def pin(self, timestamp: int) -> None:
        """Anchor the right edge of the window at ``timestamp``."""
        if self.info is not None:
            timestamp = min(timestamp, self.info.latest_timestamp)
        self.cursor_timestamp = timestamp

    def pan_left(self, steps: int = 1) -> bool:
        """Move the window ``steps`` intervals back in time.

        Stops once the first real candle reaches the right edge. Needs the
        info of a previous render.

        Returns:
            True if the cursor moved.
        """
        if self.info is None or steps <= 0:
            return False

        current = self.cursor_timestamp
        if current is None:
            current = self.info.last_data_timestamp

        target = max(current - steps * self.info.interval.millis, self.info.earliest_timestamp)
        if target >= current:
            return False
        self.cursor_timestamp = target
        return True

    def pan_right(self, steps: int = 1) -> bool:
        """Move the window ``steps`` intervals forward in time.

        Reaching the newest real candle switches back to the live view.

        Returns:
            True if the cursor moved.
        """
        if self.cursor_timestamp is None or self.info is None or steps <= 0:
            return False

        target = self.cursor_timestamp + steps * self.info.interval.millis
        if target >= self.info.last_data_timestamp:
            self.reset()
        else:
            self.cursor_timestamp = target
        return True
