"""In-memory character grid the chart renders into."""

from typing import Optional

from pydantic import BaseModel, Field
from rich.style import Style
from rich.text import Text


class Rect(BaseModel):
    """Rectangular region of the grid, in character cells."""

    x: int = Field(default=0, ge=0)
    y: int = Field(default=0, ge=0)
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    model_config = {"frozen": True}

    @property
    def right(self) -> int:
        """First column past the region."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """First row past the region."""
        return self.y + self.height

    def contains(self, x: int, y: int) -> bool:
        """Whether the cell (x, y) lies inside the region."""
        return self.x <= x < self.right and self.y <= y < self.bottom


class Cell:
    """One character position: a symbol and its style."""

    __slots__ = ("symbol", "style")

    def __init__(self, symbol: str = " ", style: Optional[Style] = None):
        self.symbol = symbol
        self.style = style or Style.null()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.symbol == other.symbol and self.style == other.style

    def __repr__(self) -> str:
        return f"Cell({self.symbol!r}, {self.style!r})"


class Buffer:
    """Grid of cells covering ``area``.

    Coordinates are absolute; writes outside ``area`` are dropped.
    """

    def __init__(self, area: Rect, symbol: str = " "):
        """Initialize the buffer.

        Args:
            area: Region covered by the buffer.
            symbol: Character every cell starts with.
        """
        self.area = area
        self._cells = [Cell(symbol) for _ in range(area.width * area.height)]

    @classmethod
    def empty(cls, area: Rect) -> "Buffer":
        """Buffer filled with spaces."""
        return cls(area)

    @classmethod
    def filled(cls, area: Rect, symbol: str) -> "Buffer":
        """Buffer with every cell set to ``symbol``."""
        return cls(area, symbol)

    def cell(self, x: int, y: int) -> Optional[Cell]:
        """The cell at (x, y), or None outside the buffer."""
        if not self.area.contains(x, y):
            return None
        return self._cells[(y - self.area.y) * self.area.width + (x - self.area.x)]

    def set_string(self, x: int, y: int, text: str, style: Optional[Style] = None) -> None:
        """Write ``text`` from (x, y) rightwards, one character per cell.

        The style, when given, is layered on top of each cell's style.
        """
        for offset, char in enumerate(text):
            cell = self.cell(x + offset, y)
            if cell is None:
                continue
            cell.symbol = char
            if style is not None:
                cell.style = cell.style + style

    def set_style(self, area: Rect, style: Style) -> None:
        """Layer ``style`` on every cell of ``area``."""
        for y in range(area.y, area.bottom):
            for x in range(area.x, area.right):
                cell = self.cell(x, y)
                if cell is not None:
                    cell.style = cell.style + style

    def lines(self) -> list[str]:
        """Symbols of every row, without styles."""
        width = self.area.width
        return [
            "".join(cell.symbol for cell in self._cells[row * width : (row + 1) * width])
            for row in range(self.area.height)
        ]

    def to_text(self) -> Text:
        """Styled rich Text, one line per row."""
        text = Text()
        width = self.area.width
        for row in range(self.area.height):
            if row:
                text.append("\n")
            for cell in self._cells[row * width : (row + 1) * width]:
                text.append(cell.symbol, style=cell.style)
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.area == other.area and self._cells == other._cells
