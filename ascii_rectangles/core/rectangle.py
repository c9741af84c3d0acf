"""
Rectangle descriptors and their canonical ASCII rendering.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Tuple

from .grid import Grid, CORNER

HORIZONTAL = ("-", CORNER)
VERTICAL = ("|", CORNER)


def render_box(width: int, height: int) -> str:
    """
    Build the canonical rendering of a box with the given interior size.

    Every line, including the bottom border, ends with a line feed.
    """
    border = "+" + "-" * width + "+\n"
    body = "|" + " " * width + "|\n"
    return border + body * height + border


def parse_rendering(text: str) -> Tuple[int, int]:
    """
    Recover (width, height) from a canonical rendering.

    Raises:
        ValueError: if the text is not exactly what render_box would produce
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if len(lines) < 2:
        raise ValueError(f"A rendering needs at least two border lines, got {len(lines)}")

    width = len(lines[0]) - 2
    height = len(lines) - 2
    if width < 0 or render_box(width, height) != text:
        raise ValueError(f"Not a canonical rectangle rendering: {text!r}")
    return width, height


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle found in a drawing.

    top/left locate the top-left corner; width/height count interior cells only.
    """
    top: int
    left: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        """Row of the bottom border."""
        return self.top + self.height + 1

    @property
    def right(self) -> int:
        """Column of the right border."""
        return self.left + self.width + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def render(self) -> str:
        return render_box(self.width, self.height)

    def to_dict(self) -> Dict:
        return asdict(self)


def border_matches(grid: Grid, rect: Rectangle) -> bool:
    """
    Check that the border implied by a rectangle is actually drawn in the grid.

    Corners must be '+'. Edges may also carry '+' where a neighbouring rectangle
    meets them. The interior is not inspected.
    """
    if not (grid.has_row(rect.top) and grid.has_row(rect.bottom)):
        return False

    for row, col in ((rect.top, rect.left), (rect.top, rect.right),
                     (rect.bottom, rect.left), (rect.bottom, rect.right)):
        if grid.cell(row, col) != CORNER:
            return False

    for col in range(rect.left + 1, rect.right):
        if grid.cell(rect.top, col) not in HORIZONTAL or grid.cell(rect.bottom, col) not in HORIZONTAL:
            return False

    for row in range(rect.top + 1, rect.bottom):
        if grid.cell(row, rect.left) not in VERTICAL or grid.cell(row, rect.right) not in VERTICAL:
            return False

    return True
