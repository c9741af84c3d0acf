"""
Character grid built from an ASCII drawing.
"""

import logging
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

BLANK = " "
CORNER = "+"


class EmptyFigureError(ValueError):
    """Raised when a drawing contains no rows at all."""


def split_figure(figure: Union[str, Sequence[str]]) -> List[str]:
    """
    Split a drawing into rows.

    Accepts a text blob or an already split sequence of lines. A single trailing
    empty row (left over from a final line terminator) is dropped.
    """
    if isinstance(figure, str):
        lines = figure.split("\n")
    else:
        lines = list(figure)

    lines = [line.rstrip("\r\n") for line in lines]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class Grid:
    """
    Immutable rows x columns view over a drawing.

    Rows shorter than the widest one are padded with blanks, and any column outside
    the grid (negative or past the widest row) reads as blank. Rows outside the grid
    are not addressable.
    """

    def __init__(self, lines: Sequence[str]):
        if not lines:
            raise EmptyFigureError("Cannot build a grid from a drawing with no rows")

        n_rows = len(lines)
        n_cols = max(len(line) for line in lines)

        cells = np.full((n_rows, n_cols), BLANK, dtype="<U1")
        for row, line in enumerate(lines):
            if line:
                cells[row, :len(line)] = list(line)
        cells.setflags(write=False)

        self.cells = cells
        self.n_rows = n_rows
        self.n_cols = n_cols

    @classmethod
    def from_figure(cls, figure: Union[str, Sequence[str]]) -> "Grid":
        """Build a grid from a text blob or a sequence of lines."""
        return cls(split_figure(figure))

    def has_row(self, row: int) -> bool:
        return 0 <= row < self.n_rows

    def cell(self, row: int, col: int) -> str:
        """Character at (row, col); blank for any column outside the row."""
        if not self.has_row(row):
            raise IndexError(f"Row {row} is outside a grid of {self.n_rows} rows")
        if col < 0 or col >= self.n_cols:
            return BLANK
        return str(self.cells[row, col])

    def is_blank(self, row: int, col: int) -> bool:
        return self.cell(row, col) == BLANK

    def corners(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, col) of every corner candidate in row-major order."""
        for row, col in np.argwhere(self.cells == CORNER):
            yield int(row), int(col)

    def corners_in_row(self, row: int) -> List[int]:
        return [int(col) for col in np.flatnonzero(self.cells[row] == CORNER)]

    def lines(self) -> List[str]:
        return ["".join(row).rstrip() for row in self.cells]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.n_rows, self.n_cols

    def __repr__(self):
        return f"Grid(rows={self.n_rows}, cols={self.n_cols})"
