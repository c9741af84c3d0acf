"""
Decomposition of an ASCII drawing into the rectangles it is made of.

Every '+' is treated as a hypothetical top-left corner and verified by walking
all four sides. Candidates are independent of each other, so they can be
checked in any order (or concurrently) with the same result.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional, Sequence, Union

from ..core.grid import Grid
from ..core.rectangle import Rectangle
from .tracing import (
    trace_top_edge,
    trace_right_edge,
    trace_bottom_edge,
    trace_left_edge,
)

logger = logging.getLogger(__name__)

Figure = Union[str, Sequence[str], Grid]


def _as_grid(figure: Figure) -> Grid:
    if isinstance(figure, Grid):
        return figure
    return Grid.from_figure(figure)


def verify_corner(grid: Grid, row: int, col: int) -> Optional[Rectangle]:
    """
    Check whether the '+' at (row, col) is the top-left corner of a closed rectangle.

    Zero-width and zero-height boxes are rejected.

    Returns:
        The rectangle, or None when the candidate does not close
    """
    n, m = row + 1, col + 1

    w = trace_top_edge(grid, n, m)
    if w is None or w == m:
        return None

    h = trace_right_edge(grid, n, w)
    if h is None or h == n:
        return None

    if trace_bottom_edge(grid, h, w) != m:
        return None

    if trace_left_edge(grid, h, m) != n:
        return None

    return Rectangle(top=row, left=col, width=w - m, height=h - n)


def _verify_row(grid: Grid, row: int) -> List[Rectangle]:
    found = []
    for col in grid.corners_in_row(row):
        rect = verify_corner(grid, row, col)
        if rect is None:
            logger.debug(f"Corner candidate at ({row}, {col}) does not close")
        else:
            found.append(rect)
    return found


def find_rectangles(figure: Figure, num_workers: int = 1) -> List[Rectangle]:
    """
    Find every rectangle of a drawing.

    Args:
        figure: Text blob, sequence of lines, or a prebuilt Grid
        num_workers: Threads used to verify rows of candidates concurrently

    Returns:
        Rectangles ordered by their top-left corner (row-major)

    Raises:
        EmptyFigureError: if the drawing has no rows
    """
    if num_workers < 1:
        raise ValueError(f"num_workers must be >= 1, got {num_workers}")

    grid = _as_grid(figure)
    rows = range(grid.n_rows)

    if num_workers == 1:
        per_row = [_verify_row(grid, row) for row in rows]
    else:
        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            per_row = list(executor.map(lambda row: _verify_row(grid, row), rows))

    rectangles = [rect for found in per_row for rect in found]
    logger.debug(f"Found {len(rectangles)} rectangles in {grid}")
    return rectangles


def _iter_renderings(grid: Grid, num_workers: int) -> Iterator[str]:
    for rect in find_rectangles(grid, num_workers=num_workers):
        yield rect.render()


def extract_rectangles(figure: Figure, num_workers: int = 1) -> Iterator[str]:
    """
    Lazily yield the canonical rendering of every rectangle in a drawing.

    The drawing is parsed eagerly so an empty figure fails at call time;
    verification starts on the first iteration. Order is not part of the contract.
    """
    grid = _as_grid(figure)
    return _iter_renderings(grid, num_workers)
