"""Price label formatting."""

from pydantic import BaseModel, Field


class Numeric(BaseModel):
    """Display policy applied to every price label on the y axis."""

    precision: int = Field(default=3, ge=0, le=12, description="Decimal places")
    min_width: int = Field(default=10, ge=1, le=40, description="Minimum label width")

    model_config = {"frozen": True}

    def format(self, value: float) -> str:
        """Format ``value`` with the configured number of decimals."""
        return f"{value:.{self.precision}f}"

    def estimated_width(self, min_value: float, max_value: float) -> int:
        """Widest label needed for any value in ``[min_value, max_value]``.

        The extremes always produce the longest strings (most integer
        digits, and the sign when negative), so formatting both ends is
        enough.
        """
        return max(
            self.min_width,
            len(self.format(min_value)),
            len(self.format(max_value)),
        )
