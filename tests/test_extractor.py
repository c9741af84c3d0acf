"""
Tests for rectangle extraction.
"""

from collections import Counter
import types

import pytest

from ascii_rectangles import extract_rectangles, find_rectangles, Grid, EmptyFigureError, Rectangle
from ascii_rectangles.core.rectangle import border_matches
from ascii_rectangles.extraction.extractor import verify_corner

STACKED = (
    "+------------+\n"
    "|            |\n"
    "|            |\n"
    "|            |\n"
    "+------+-----+\n"
    "|      |     |\n"
    "|      |     |\n"
    "+------+-----+\n"
)

ROOF = (
    "   +-----+     \n"
    "   |     |     \n"
    "+--+-----+----+\n"
    "|             |\n"
    "|             |\n"
    "+-------------+\n"
)

WINDOW = (
    "+--+--+\n"
    "|  |  |\n"
    "+--+--+\n"
    "|  |  |\n"
    "+--+--+\n"
)

FIGURES = [STACKED, ROOF, WINDOW]


class TestScenarios:
    """Hand-built drawings with known decompositions."""

    def test_single_rectangle(self):
        figure = "+--+\n|  |\n+--+\n"
        assert list(extract_rectangles(figure)) == [figure]

    def test_shared_vertical_edge(self):
        rects = find_rectangles("+--+---+\n|  |   |\n+--+---+\n")
        assert rects == [Rectangle(0, 0, 2, 1), Rectangle(0, 3, 3, 1)]
        assert rects[0].width + rects[1].width + 1 == 6

    def test_stacked_example(self):
        expected = [
            "+------------+\n|            |\n|            |\n|            |\n+------------+\n",
            "+------+\n|      |\n|      |\n+------+\n",
            "+-----+\n|     |\n|     |\n+-----+\n",
        ]
        assert Counter(extract_rectangles(STACKED)) == Counter(expected)

    def test_roof_example(self):
        expected = [
            "+-----+\n|     |\n+-----+\n",
            "+-------------+\n|             |\n|             |\n+-------------+\n",
        ]
        assert Counter(extract_rectangles(ROOF)) == Counter(expected)

    def test_no_rectangle_spans_bounding_box(self):
        grid = Grid.from_figure(STACKED)
        for rect in find_rectangles(grid):
            assert not (rect.bottom == grid.n_rows - 1 and rect.top == 0)

    def test_cross_junctions(self):
        rects = find_rectangles(WINDOW)
        assert sorted((r.top, r.left) for r in rects) == [(0, 0), (0, 3), (2, 0), (2, 3)]
        assert all(r.width == 2 and r.height == 1 for r in rects)

    def test_stray_corner(self):
        assert list(extract_rectangles("   \n +  \n\n")) == []

    def test_lone_corner_on_single_row(self):
        assert find_rectangles("+\n") == []

    def test_ragged_rows(self):
        figure = "   +--+\n   |  |\n+--+--+--+\n|        |\n+--------+\n"
        assert find_rectangles(figure) == [Rectangle(0, 3, 2, 1), Rectangle(2, 0, 8, 1)]

    def test_trailing_terminator_is_optional(self):
        assert find_rectangles(STACKED) == find_rectangles(STACKED.rstrip("\n"))

    def test_accepts_lines(self):
        assert find_rectangles(STACKED.split("\n")) == find_rectangles(STACKED)


class TestDegenerate:
    """Zero-width and zero-height boxes are rejected."""

    def test_zero_width(self):
        assert find_rectangles("++\n||\n++\n") == []

    def test_zero_height(self):
        assert find_rectangles("+--+\n+--+\n") == []

    def test_zero_size(self):
        assert find_rectangles("++\n++\n") == []

    def test_degenerate_next_to_real_box(self):
        assert find_rectangles("+--++\n|  ||\n+--++\n") == [Rectangle(0, 0, 2, 1)]


class TestProperties:

    @pytest.mark.parametrize("figure", FIGURES)
    def test_idempotent(self, figure):
        assert find_rectangles(figure) == find_rectangles(figure)
        assert Counter(extract_rectangles(figure)) == Counter(extract_rectangles(figure))

    @pytest.mark.parametrize("figure", FIGURES)
    def test_closure(self, figure):
        grid = Grid.from_figure(figure)
        for rect in find_rectangles(grid):
            assert border_matches(grid, rect)

    @pytest.mark.parametrize("figure", FIGURES)
    def test_no_duplicates(self, figure):
        rects = find_rectangles(figure)
        assert len(set(rects)) == len(rects)

    @pytest.mark.parametrize("figure", FIGURES)
    def test_only_top_left_corners_match(self, figure):
        grid = Grid.from_figure(figure)
        for row, col in grid.corners():
            top_left = (
                grid.has_row(row + 1)
                and not grid.is_blank(row, col + 1)
                and not grid.is_blank(row + 1, col)
                and grid.is_blank(row + 1, col + 1)
            )
            if not top_left:
                assert verify_corner(grid, row, col) is None

    @pytest.mark.parametrize("figure", FIGURES)
    def test_threaded_matches_sequential(self, figure):
        assert find_rectangles(figure, num_workers=4) == find_rectangles(figure)

    def test_extraction_is_lazy(self):
        result = extract_rectangles(STACKED)
        assert isinstance(result, types.GeneratorType)
        assert next(result) == "+------------+\n" + "|            |\n" * 3 + "+------------+\n"


class TestErrors:

    def test_empty_figure(self):
        with pytest.raises(EmptyFigureError):
            extract_rectangles("")

    def test_empty_figure_is_value_error(self):
        with pytest.raises(ValueError):
            find_rectangles([])

    def test_invalid_num_workers(self):
        with pytest.raises(ValueError):
            find_rectangles(STACKED, num_workers=0)

    def test_broken_border_terminates(self):
        figure = "+-----\n|     \n|      \n+---  \n"
        assert find_rectangles(figure) == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
