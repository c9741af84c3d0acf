from .grid import Grid, EmptyFigureError, split_figure
from .rectangle import Rectangle, render_box, parse_rendering, border_matches

__all__ = [
    "Grid",
    "EmptyFigureError",
    "split_figure",
    "Rectangle",
    "render_box",
    "parse_rendering",
    "border_matches",
]
