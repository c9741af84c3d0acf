"""
Visualization of a drawing's decomposition into rectangles.
"""

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from typing import List, Optional

from ..core.grid import Grid, BLANK
from ..core.rectangle import Rectangle


def plot_decomposition(
    grid: Grid,
    rectangles: List[Rectangle],
    save_path: Optional[str] = None,
    show: bool = True,
    title: Optional[str] = None
):
    """
    Plot the ink of a drawing with every found rectangle overlaid.

    Args:
        grid: Drawing the rectangles were found in
        rectangles: Rectangles to overlay
        save_path: Path to save figure (optional)
        show: Whether to show the figure
        title: Figure title (defaults to the rectangle count)

    Returns:
        The matplotlib figure
    """
    ink = (grid.cells != BLANK).astype(np.float32)

    fig, ax = plt.subplots(figsize=(max(4, grid.n_cols * 0.35), max(3, grid.n_rows * 0.5)))
    ax.imshow(ink, cmap='Greys', interpolation='nearest', aspect='auto', vmin=0, vmax=1)

    colors = plt.cm.tab10(np.linspace(0, 1, max(len(rectangles), 1)))
    for rect, color in zip(rectangles, colors):
        # Interior cells only, shrunk slightly so shared borders stay visible
        box = patches.Rectangle(
            (rect.left + 0.5 + 0.1, rect.top + 0.5 + 0.1),
            rect.width - 0.2,
            rect.height - 0.2,
            linewidth=2,
            edgecolor=color,
            facecolor=color,
            alpha=0.35
        )
        ax.add_patch(box)
        ax.text(
            rect.left + 1,
            rect.top + 1,
            f"{rect.width}x{rect.height}",
            color='black',
            fontsize=8,
            va='top'
        )

    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(title or f"Decomposition ({len(rectangles)} rectangles)")

    if save_path:
        plt.savefig(save_path, bbox_inches='tight', dpi=150)
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
