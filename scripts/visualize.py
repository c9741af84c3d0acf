#!/usr/bin/env python3
"""
Plot the decomposition of an ASCII drawing.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ascii_rectangles.utils.logging import setup_logging
from ascii_rectangles.core.grid import Grid
from ascii_rectangles.data.figures import load_figure
from ascii_rectangles.extraction.extractor import find_rectangles
from ascii_rectangles.evaluation.visualizer import plot_decomposition


def parse_args():
    parser = argparse.ArgumentParser(description="Visualize rectangle decomposition")
    parser.add_argument("figure", type=str, help="Path to the drawing")
    parser.add_argument("--save", type=str, required=True, help="Path of the image to write")
    parser.add_argument("--show", action="store_true", help="Also open an interactive window")
    return parser.parse_args()


def main():
    args = parse_args()
    logger = setup_logging(log_to_file=False)

    grid = Grid.from_figure(load_figure(args.figure))
    rectangles = find_rectangles(grid)
    logger.info(f"Found {len(rectangles)} rectangles in {args.figure}")

    Path(args.save).parent.mkdir(parents=True, exist_ok=True)
    plot_decomposition(grid, rectangles, save_path=args.save, show=args.show, title=Path(args.figure).name)


if __name__ == "__main__":
    main()
