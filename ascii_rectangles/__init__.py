"""
ascii-rectangles: decomposition of ASCII box drawings into their rectangles
"""

__version__ = "0.1.0"

from .core.grid import Grid, EmptyFigureError
from .core.rectangle import Rectangle
from .extraction.extractor import extract_rectangles, find_rectangles

# Plotting and evaluation pull in matplotlib/tqdm; import them directly:
#   from ascii_rectangles.evaluation.evaluator import DecompositionEvaluator
#   from ascii_rectangles.evaluation.visualizer import plot_decomposition

__all__ = [
    "__version__",
    "Grid",
    "EmptyFigureError",
    "Rectangle",
    "extract_rectangles",
    "find_rectangles",
]
