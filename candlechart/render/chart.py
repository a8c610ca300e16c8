"""Candlestick chart rendering engine.

Layout of the render area::

    |-----|-----------------------|
    |  y  |                       |
    |     |                       |
    |  a  |                       |
    |  x  |      chart data       |
    |  i  |                       |
    |  s  |                       |
    |-----|-----------------------|
          |      x axis area      |
          |-----------------------|
"""

import logging
from typing import Optional, Sequence

from candlechart.grid.buffer import Buffer, Rect
from candlechart.models.candle import Candle
from candlechart.models.state import ChartInfo, ChartState
from candlechart.render.config import ChartConfig, FitMode
from candlechart.render.layout import (
    Placement,
    fit_layout,
    fixed_layout,
    pad_series,
    select_window,
)
from candlechart.render.symbols import AXIS_CORNER, WICK_GLYPHS, Glyph
from candlechart.render.x_axis import XAxis
from candlechart.render.y_axis import YAxis

logger = logging.getLogger(__name__)

# Border row, label row and one blank margin row
X_AXIS_HEIGHT = 3


class CandleStickChart:
    """Draws a candle series into a character grid.

    The chart keeps no state between renders: everything is recomputed from
    the candles, the area, the caller's ChartState and the configuration.
    """

    def __init__(self, candles: Sequence[Candle], config: Optional[ChartConfig] = None):
        """Initialize the chart.

        Args:
            candles: Candle series, ascending by timestamp.
            config: Rendering options, defaults when omitted.
        """
        self.candles = list(candles)
        self.config = config or ChartConfig()

    def render(self, area: Rect, buf: Buffer, state: ChartState) -> None:
        """Render the chart into ``area`` of ``buf`` and publish the window to ``state``.

        Nothing is written when there are no candles or the area cannot hold
        the axes.
        """
        cfg = self.config
        if not self.candles:
            logger.debug("No candles, skipping render")
            return

        global_min = min(c.low for c in self.candles)
        global_max = max(c.high for c in self.candles)

        y_axis_width = (
            YAxis.estimated_width(cfg.numeric, global_min, global_max) if cfg.show_y_axis else 0
        )
        x_axis_height = X_AXIS_HEIGHT if cfg.show_x_axis else 0
        if area.width <= y_axis_width or area.height <= x_axis_height:
            logger.debug(
                "Area %dx%d too small for axes (%d columns, %d rows), skipping render",
                area.width,
                area.height,
                y_axis_width,
                x_axis_height,
            )
            return

        chart_width = area.width - y_axis_width
        chart_height = area.height - x_axis_height
        step = cfg.interval.millis

        first_timestamp = self.candles[0].timestamp
        last_timestamp = self.candles[-1].timestamp
        padded = pad_series(self.candles, step, chart_width - 1)

        end = state.cursor_timestamp if state.cursor_timestamp is not None else last_timestamp
        end = min(max(end, padded[0].timestamp), padded[-1].timestamp)
        start = end - step * (chart_width - 1)
        window = select_window(padded, start, end)

        state.info = ChartInfo(
            earliest_timestamp=first_timestamp,
            latest_timestamp=padded[-1].timestamp,
            interval=cfg.interval,
            last_data_timestamp=last_timestamp,
            scrolled_past_start=start < first_timestamp,
        )

        if cfg.fit_mode == FitMode.FIT:
            visible = [c for c in self.candles if c.timestamp <= end]
        else:
            # placeholders only hold their columns
            visible = [c for c in window if first_timestamp <= c.timestamp <= last_timestamp]

        if visible:
            y_min = min(c.low for c in visible)
            y_max = max(c.high for c in visible)
        else:
            y_min, y_max = global_min, global_max
        y_axis = YAxis(cfg.numeric, chart_height, y_min, y_max)

        buf.set_style(area, cfg.base_style)

        if cfg.show_y_axis:
            for row, line in enumerate(y_axis.render(y_axis_width)):
                buf.set_string(area.x, area.y + row, line)

        if cfg.show_x_axis:
            if cfg.fit_mode == FitMode.FIT and visible:
                timestamp_min, timestamp_max = visible[0].timestamp, visible[-1].timestamp
            else:
                timestamp_min, timestamp_max = start, end
            x_axis = XAxis(chart_width, timestamp_min, timestamp_max, cfg.interval, state.is_live)

            axis_top = area.y + chart_height
            if cfg.show_y_axis:
                buf.set_string(area.x + y_axis_width - 2, axis_top, AXIS_CORNER)
            for row, line in enumerate(x_axis.render(cfg.display_timezone)):
                buf.set_string(area.x + y_axis_width, axis_top + row, line)

        if cfg.fit_mode == FitMode.FIT:
            placements, gap_columns = fit_layout(visible, chart_width)
            logger.debug(
                "Fit layout: %d candles into %d columns, %d placed",
                len(visible),
                chart_width,
                len(placements),
            )
        else:
            placements, gap_columns = fixed_layout(visible, start, step), []

        chart_area = Rect(
            x=area.x + y_axis_width, y=area.y, width=chart_width, height=chart_height
        )
        for column in gap_columns:
            for row in range(chart_height):
                buf.set_string(chart_area.x + column, chart_area.y + row, Glyph.VOID.value)

        for placement in placements:
            self._draw_candle(buf, chart_area, y_axis, placement)

    def _draw_candle(self, buf: Buffer, chart_area: Rect, y_axis: YAxis, placement: Placement) -> None:
        """Write one placed candle, coloured by direction."""
        candle = placement.candle
        candle_type = candle.classify()
        body_style = self.config.body_style(candle_type)
        wick_style = self.config.wick_style(candle_type)

        if placement.width == 1:
            _, glyphs = candle.render(y_axis)
            rows = [[glyph] for glyph in glyphs]
        else:
            _, rows = candle.render_stretched(y_axis, placement.width)

        for row, glyph_row in enumerate(rows):
            for dx, glyph in enumerate(glyph_row):
                x = chart_area.x + placement.column + dx
                if x >= chart_area.right:
                    continue
                cell = buf.cell(x, chart_area.y + row)
                if cell is None:
                    continue
                cell.symbol = glyph.value
                cell.style = cell.style + (wick_style if glyph in WICK_GLYPHS else body_style)
