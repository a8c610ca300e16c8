"""Rendering core: glyphs, axes, layout and the chart engine.

The engine itself lives in ``candlechart.render.chart``; it is re-exported
from the top-level package.
"""

from candlechart.render.numeric import Numeric
from candlechart.render.symbols import WICK_GLYPHS, Glyph
from candlechart.render.y_axis import YAxis

__all__ = [
    "Glyph",
    "Numeric",
    "WICK_GLYPHS",
    "YAxis",
]
