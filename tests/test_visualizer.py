import matplotlib

matplotlib.use("Agg")

from ascii_rectangles.core.grid import Grid
from ascii_rectangles.extraction.extractor import find_rectangles
from ascii_rectangles.evaluation.visualizer import plot_decomposition


def test_plot_decomposition_saves_figure(tmp_path):
    grid = Grid.from_figure("+--+---+\n|  |   |\n+--+---+\n")
    rectangles = find_rectangles(grid)
    save_path = tmp_path / "decomposition.png"

    fig = plot_decomposition(grid, rectangles, save_path=str(save_path), show=False)

    assert save_path.exists()
    assert len(fig.axes[0].patches) == 2


def test_plot_without_rectangles(tmp_path):
    grid = Grid.from_figure(" +\n")
    save_path = tmp_path / "empty.png"
    plot_decomposition(grid, [], save_path=str(save_path), show=False)
    assert save_path.exists()
