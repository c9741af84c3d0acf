"""
Tests for the boundary scans.
"""

import pytest

from ascii_rectangles.core.grid import Grid
from ascii_rectangles.extraction.tracing import (
    trace_top_edge,
    trace_right_edge,
    trace_bottom_edge,
    trace_left_edge,
)

ROOF = (
    "   +-----+     \n"
    "   |     |     \n"
    "+--+-----+----+\n"
    "|             |\n"
    "|             |\n"
    "+-------------+\n"
)


@pytest.fixture
def box():
    return Grid.from_figure("+--+\n|  |\n+--+\n")


@pytest.fixture
def roof():
    return Grid.from_figure(ROOF)


class TestTopEdge:

    def test_finds_right_border(self, box):
        assert trace_top_edge(box, 1, 1) == 3

    def test_top_right_corner_fails(self, box):
        assert trace_top_edge(box, 1, 4) is None

    def test_bottom_row_corner_fails(self, box):
        # No row below the candidate
        assert trace_top_edge(box, 3, 1) is None

    def test_blank_below_corner_fails(self, roof):
        # Junction on the roof line with open interior underneath
        assert trace_top_edge(roof, 3, 4) is None

    def test_stops_at_first_inked_column_below(self, roof):
        assert trace_top_edge(roof, 1, 4) == 9
        assert trace_top_edge(roof, 3, 1) == 14


class TestRightEdge:

    def test_finds_bottom_border(self, box):
        assert trace_right_edge(box, 1, 3) == 2

    def test_runs_off_grid(self):
        grid = Grid.from_figure("+--+\n|  |\n|  |\n")
        assert trace_right_edge(grid, 1, 3) is None

    def test_gap_in_right_border(self):
        grid = Grid.from_figure("+--+\n|  |\n|   \n+--+\n")
        assert trace_right_edge(grid, 1, 3) is None


class TestBottomEdge:

    def test_finds_left_border(self, box):
        assert trace_bottom_edge(box, 2, 3) == 1

    def test_reports_where_bottom_actually_starts(self, roof):
        assert trace_bottom_edge(roof, 5, 14) == 1

    def test_gap_in_bottom_border(self):
        grid = Grid.from_figure("+--+\n|  |\n+- +\n")
        assert trace_bottom_edge(grid, 2, 3) is None


class TestLeftEdge:

    def test_finds_top_border(self, box):
        assert trace_left_edge(box, 2, 1) == 1

    def test_gap_in_left_border(self):
        grid = Grid.from_figure("+--+\n   |\n+--+\n")
        assert trace_left_edge(grid, 2, 1) is None

    def test_runs_off_grid(self):
        grid = Grid.from_figure("|  |\n+--+\n")
        assert trace_left_edge(grid, 1, 1) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
