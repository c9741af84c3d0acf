#!/usr/bin/env python3
"""
Extract the rectangles of an ASCII drawing.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ascii_rectangles.utils.config import Config
from ascii_rectangles.utils.config_validation import validate_config
from ascii_rectangles.utils.logging import setup_logging
from ascii_rectangles.core.grid import Grid
from ascii_rectangles.data.figures import load_figure, format_renderings
from ascii_rectangles.extraction.extractor import find_rectangles


def parse_args():
    parser = argparse.ArgumentParser(description="Decompose an ASCII drawing into rectangles")
    parser.add_argument(
        "figure",
        type=str,
        help="Path to the drawing ('-' reads stdin)"
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        help="Override output format"
    )
    parser.add_argument(
        "--num_workers",
        type=int,
        help="Override number of verification threads"
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Write results to this file instead of stdout"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    config = Config(args.config)

    if args.format:
        config.set('output.format', args.format)
    if args.num_workers is not None:
        config.set('extraction.num_workers', args.num_workers)

    validate_config(config)

    logger = setup_logging(
        log_dir=config.get('output.logs_dir'),
        log_level=config.get('logging.level', 'INFO'),
        log_to_file=config.get('logging.to_file', False)
    )

    if args.figure == "-":
        figure = sys.stdin.read()
    else:
        figure = load_figure(args.figure, encoding=config.get('input.encoding', 'utf-8'))

    grid = Grid.from_figure(figure)
    logger.info(f"Loaded drawing: {grid.n_rows} rows x {grid.n_cols} columns")

    rectangles = find_rectangles(grid, num_workers=config.get('extraction.num_workers', 1))
    logger.info(f"Found {len(rectangles)} rectangles")

    if config.get('output.format') == "json":
        payload = [dict(rect.to_dict(), rendering=rect.render()) for rect in rectangles]
        text = json.dumps(payload, indent=2) + "\n"
    else:
        text = format_renderings([rect.render() for rect in rectangles])

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        logger.info(f"Results saved to {output_path}")
    else:
        sys.stdout.write(text)


if __name__ == "__main__":
    main()
