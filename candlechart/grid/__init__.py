"""Character grid used as the render target."""

from candlechart.grid.buffer import Buffer, Cell, Rect

__all__ = [
    "Buffer",
    "Cell",
    "Rect",
]
