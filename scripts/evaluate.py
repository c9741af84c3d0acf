#!/usr/bin/env python3
"""
Evaluate the rectangle extractor on a directory of golden fixtures.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ascii_rectangles.utils.config import Config
from ascii_rectangles.utils.config_validation import validate_config
from ascii_rectangles.utils.logging import setup_logging
from ascii_rectangles.data.figures import FigureFixtureSet
from ascii_rectangles.evaluation.evaluator import DecompositionEvaluator


def parse_args():
    parser = argparse.ArgumentParser(description="Evaluate rectangle extraction")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/base_config.yml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--fixtures",
        type=str,
        required=True,
        help="Directory of <name>.txt / <name>.expected.txt pairs"
    )
    parser.add_argument(
        "--num_workers",
        type=int,
        help="Override number of verification threads"
    )
    parser.add_argument(
        "--output_dir",
        type=str,
        help="Directory to save evaluation results"
    )
    return parser.parse_args()


def main():
    args = parse_args()

    config = Config(args.config)

    if args.num_workers is not None:
        config.set('extraction.num_workers', args.num_workers)
    if args.output_dir:
        config.set('output.results_dir', args.output_dir)

    validate_config(config)

    logger = setup_logging(
        log_dir=config.get('output.logs_dir'),
        log_level=config.get('logging.level', 'INFO'),
        log_to_file=config.get('logging.to_file', False)
    )

    logger.info(f"Fixtures: {args.fixtures}")
    fixtures = FigureFixtureSet(args.fixtures, encoding=config.get('input.encoding', 'utf-8'))

    evaluator = DecompositionEvaluator(num_workers=config.get('extraction.num_workers', 1))
    results = evaluator.evaluate(fixtures)

    results_dir = Path(config.get('output.results_dir', 'results'))
    results_file = results_dir / f"evaluation_{Path(args.fixtures).name}.json"
    evaluator.save_results(results, results_file)

    logger.info("\nEvaluation complete!")
    logger.info(f"Results saved to {results_file}")
    logger.info(f"Final F1: {results['f1_score']:.4f}")

    if results['exact_matches'] != results['num_figures']:
        sys.exit(1)


if __name__ == "__main__":
    main()
