"""
Boundary scans used to verify a corner candidate.

A candidate '+' at (row, col) is described by its interior origin
(n, m) = (row + 1, col + 1). Each scan walks one side of the hypothetical
rectangle, is bounded by the grid extent, and returns None as soon as the
side cannot belong to a closed rectangle.
"""

from typing import Optional

from ..core.grid import Grid


def trace_top_edge(grid: Grid, n: int, m: int) -> Optional[int]:
    """
    Walk the top border rightward along row n - 1.

    The border stays valid while the row below is blank; the first column where
    row n is inked is the right border.

    Returns:
        Column of the right border, or None
    """
    if not grid.has_row(n) or grid.is_blank(n, m - 1):
        return None

    for i in range(m, grid.n_cols):
        if grid.is_blank(n - 1, i):
            return None
        if not grid.is_blank(n, i):
            return i
    return None


def trace_right_edge(grid: Grid, n: int, w: int) -> Optional[int]:
    """
    Walk the right border downward along column w.

    Returns:
        Row of the bottom border (first row where column w - 1 is inked), or None
    """
    for j in range(n, grid.n_rows):
        if grid.is_blank(j, w):
            return None
        if not grid.is_blank(j, w - 1):
            return j
    return None


def trace_bottom_edge(grid: Grid, h: int, w: int) -> Optional[int]:
    """
    Walk the bottom border leftward along row h.

    Returns:
        First interior column (one right of where row h - 1 is inked), or None
    """
    if not grid.has_row(h - 1):
        return None

    for i in range(w - 1, -1, -1):
        if grid.is_blank(h, i):
            return None
        if not grid.is_blank(h - 1, i):
            return i + 1
    return None


def trace_left_edge(grid: Grid, h: int, m: int) -> Optional[int]:
    """
    Walk the left border upward along column m - 1.

    Returns:
        First interior row (one below where column m is inked), or None
    """
    for j in range(h - 1, -1, -1):
        if grid.is_blank(j, m - 1):
            return None
        if not grid.is_blank(j, m):
            return j + 1
    return None
