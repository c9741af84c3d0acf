"""
Evaluation of the rectangle extractor against golden fixtures.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List

from tqdm import tqdm

from ..core.grid import Grid
from ..core.rectangle import border_matches
from ..extraction.extractor import find_rectangles
from ..utils.metrics import (
    MetricTracker,
    compute_precision_recall_f1,
    format_metrics,
    match_counts,
)

logger = logging.getLogger(__name__)


class DecompositionEvaluator:
    """
    Runs the extractor over a fixture set and scores it.

    Features:
    - Per-figure and overall precision, recall and F1 over rendering multisets
    - Closure check of every found rectangle against the source drawing
    - Save evaluation results
    """

    def __init__(self, num_workers: int = 1):
        """
        Args:
            num_workers: Threads used by the extractor for each figure
        """
        self.num_workers = num_workers

    def evaluate_sample(self, name: str, figure: str, expected: List[str]) -> Dict:
        """Score one drawing against its expected renderings."""
        grid = Grid.from_figure(figure)
        rectangles = find_rectangles(grid, num_workers=self.num_workers)
        predicted = [rect.render() for rect in rectangles]

        precision, recall, f1 = compute_precision_recall_f1(predicted, expected)
        true_positives, false_positives, false_negatives = match_counts(predicted, expected)
        open_borders = sum(1 for rect in rectangles if not border_matches(grid, rect))

        return {
            'name': name,
            'num_found': len(predicted),
            'num_expected': len(expected),
            'true_positives': true_positives,
            'false_positives': false_positives,
            'false_negatives': false_negatives,
            'precision': precision,
            'recall': recall,
            'f1_score': f1,
            'closure_violations': open_borders,
            'rectangles': [rect.to_dict() for rect in rectangles],
        }

    def evaluate(self, fixtures: Iterable[Dict]) -> Dict:
        """
        Evaluate the extractor on a set of fixtures.

        Args:
            fixtures: Iterable of {'name', 'figure', 'expected'} samples,
                e.g. a FigureFixtureSet

        Returns:
            Dictionary containing evaluation results
        """
        logger.info("Starting evaluation...")

        tracker = MetricTracker()
        per_figure = []
        totals = {'true_positives': 0, 'false_positives': 0, 'false_negatives': 0}
        closure_violations = 0

        progress_bar = tqdm(fixtures, desc="Evaluating")
        for sample in progress_bar:
            result = self.evaluate_sample(sample['name'], sample['figure'], sample['expected'])
            per_figure.append(result)

            for key in totals:
                totals[key] += result[key]
            closure_violations += result['closure_violations']
            for key in ('precision', 'recall', 'f1_score'):
                tracker.update(key, result[key])

            progress_bar.set_postfix({'f1': f"{tracker.avg('f1_score'):.4f}"})

        tp, fp, fn = totals['true_positives'], totals['false_positives'], totals['false_negatives']
        precision = tp / (tp + fp) if tp + fp > 0 else 1.0
        recall = tp / (tp + fn) if tp + fn > 0 else 1.0
        f1 = 2 * precision * recall / (precision + recall) if precision + recall > 0 else 0.0

        results = {
            'num_figures': len(per_figure),
            'precision': precision,
            'recall': recall,
            'f1_score': f1,
            'macro_averages': tracker.get_all_averages(),
            'closure_violations': closure_violations,
            'exact_matches': sum(1 for r in per_figure if r['false_positives'] == 0 and r['false_negatives'] == 0),
            'per_figure': per_figure,
            **totals,
        }

        logger.info("\nPer-figure Results:")
        logger.info("-" * 72)
        logger.info(f"{'Figure':<24} {'Found':>8} {'Expected':>10} {'Precision':>10} {'Recall':>10}")
        logger.info("-" * 72)
        for r in per_figure:
            logger.info(
                f"{r['name']:<24} "
                f"{r['num_found']:>8d} "
                f"{r['num_expected']:>10d} "
                f"{r['precision']:>10.4f} "
                f"{r['recall']:>10.4f}"
            )
        logger.info("-" * 72)

        logger.info("\nOverall Results:")
        logger.info("  " + format_metrics({
            'precision': precision,
            'recall': recall,
            'f1': f1,
            'exact_matches': f"{results['exact_matches']}/{len(per_figure)}",
        }))
        if closure_violations:
            logger.warning(f"  Closure violations: {closure_violations}")

        return results

    def save_results(self, results: Dict, output_path: str):
        """
        Save evaluation results to a JSON file.

        Args:
            results: Results dictionary from evaluate()
            output_path: Path to save results
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w') as f:
            json.dump(results, f, indent=2)

        logger.info(f"Saved results to {output_path}")
