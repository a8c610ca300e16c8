"""Vertical price axis."""

from typing import Optional

from candlechart.render.numeric import Numeric
from candlechart.render.symbols import Y_AXIS_LINE, Y_AXIS_TICK

# Labels are spread evenly from the top row to the bottom row, about
# TICK_SPACING rows apart.
TICK_SPACING = 4

# " ├ " / " │ " after the label
TICK_DECORATION_WIDTH = 3


class YAxis:
    """Maps prices onto chart rows and produces the label gutter.

    Row 0 is the top of the chart. Row ``r`` spans the prices between
    ``value_at(r + 1)`` and ``value_at(r)``, so the top row starts at
    ``max_value`` and the bottom row ends at ``min_value``.
    """

    def __init__(self, numeric: Numeric, height: int, min_value: float, max_value: float):
        """Initialize the axis.

        Args:
            numeric: Label formatting policy.
            height: Number of chart rows.
            min_value: Price at the bottom edge of the chart.
            max_value: Price at the top edge of the chart.
        """
        self.numeric = numeric
        self.height = max(height, 1)
        self.min_value = min(min_value, max_value)
        self.max_value = max(min_value, max_value)

    @staticmethod
    def estimated_width(numeric: Numeric, min_value: float, max_value: float) -> int:
        """Columns reserved for the axis gutter, labels plus tick decoration."""
        return numeric.estimated_width(min_value, max_value) + TICK_DECORATION_WIDTH

    @property
    def is_flat(self) -> bool:
        """True when every price maps to the same row."""
        return self.max_value == self.min_value

    @property
    def flat_row(self) -> int:
        """Row used for every price on a flat axis."""
        return (self.height - 1) // 2

    def calc_y(self, price: float) -> float:
        """Position of ``price`` in rows from the bottom edge, in ``[0, height]``."""
        if self.is_flat:
            return self.height - self.flat_row - 0.5

        y = (price - self.min_value) / (self.max_value - self.min_value) * self.height
        return min(max(y, 0.0), float(self.height))

    def locate(self, price: float) -> tuple[int, float]:
        """Row (from the top) holding ``price`` and the offset inside it.

        Returns:
            Tuple of (row, fraction) where fraction is measured upwards from
            the bottom edge of the row, in ``[0, 1]``.
        """
        y = self.calc_y(price)
        from_bottom = min(int(y), self.height - 1)
        return self.height - 1 - from_bottom, y - from_bottom

    def value_at(self, row: int) -> float:
        """Price at the top edge of ``row``."""
        if self.is_flat:
            return self.min_value
        step = (self.max_value - self.min_value) / self.height
        return self.min_value + (self.height - row) * step

    def tick_rows(self) -> list[int]:
        """Labelled rows, top to bottom.

        The top and bottom rows are always labelled; the rows between them
        are split into equal steps of roughly ``TICK_SPACING`` rows.
        """
        if self.is_flat:
            return [self.flat_row]
        last = self.height - 1
        count = max(round(last / TICK_SPACING), 1)
        return sorted({round(k * last / count) for k in range(count + 1)})

    def is_tick(self, row: int) -> bool:
        """Whether ``row`` carries a label."""
        return row in self.tick_rows()

    def ticks(self) -> list[tuple[int, str]]:
        """Labelled rows as (row, label) pairs, top to bottom."""
        return [(row, self.numeric.format(self.value_at(row))) for row in self.tick_rows()]

    def render(self, width: Optional[int] = None) -> list[str]:
        """Render the gutter, one string per chart row.

        Args:
            width: Total gutter width. Defaults to the width needed for this
                axis' own range.

        Returns:
            List of ``height`` strings, each ``width`` characters long.
        """
        if width is None:
            width = self.estimated_width(self.numeric, self.min_value, self.max_value)
        label_width = max(width - TICK_DECORATION_WIDTH, 0)

        labels = dict(self.ticks())
        lines = []
        for row in range(self.height):
            if row in labels:
                lines.append(f"{labels[row]:>{label_width}} {Y_AXIS_TICK} ")
            else:
                lines.append(f"{'':>{label_width}} {Y_AXIS_LINE} ")
        return lines
