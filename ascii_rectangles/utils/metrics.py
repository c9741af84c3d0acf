"""
Metrics for comparing extracted rectangles against golden fixtures.
"""

from collections import Counter, defaultdict
from typing import Hashable, Iterable, Tuple


class MetricTracker:
    """
    Tracks and aggregates metrics across figures.

    Usage:
        tracker = MetricTracker()
        for sample in fixtures:
            precision, recall, f1 = compute_precision_recall_f1(found, expected)
            tracker.update('precision', precision)
            tracker.update('recall', recall)

        avg_recall = tracker.avg('recall')
    """

    def __init__(self):
        self.metrics = defaultdict(lambda: {'sum': 0.0, 'count': 0})

    def update(self, name: str, value: float, count: int = 1):
        """
        Update a metric with a new value.

        Args:
            name: Name of the metric
            value: Value to add
            count: Number of samples this value represents
        """
        self.metrics[name]['sum'] += value * count
        self.metrics[name]['count'] += count

    def avg(self, name: str) -> float:
        """Get the average value of a metric."""
        if self.metrics[name]['count'] == 0:
            return 0.0
        return self.metrics[name]['sum'] / self.metrics[name]['count']

    def get_all_averages(self) -> dict:
        """Get all metric averages as a dictionary."""
        return {name: self.avg(name) for name in self.metrics.keys()}

    def __repr__(self):
        return f"MetricTracker({self.get_all_averages()})"


def match_counts(
    predicted: Iterable[Hashable],
    expected: Iterable[Hashable]
) -> Tuple[int, int, int]:
    """
    Count matches between two multisets.

    Returns:
        Tuple of (true_positives, false_positives, false_negatives)
    """
    predicted_counts = Counter(predicted)
    expected_counts = Counter(expected)

    true_positives = sum((predicted_counts & expected_counts).values())
    false_positives = sum(predicted_counts.values()) - true_positives
    false_negatives = sum(expected_counts.values()) - true_positives
    return true_positives, false_positives, false_negatives


def compute_precision_recall_f1(
    predicted: Iterable[Hashable],
    expected: Iterable[Hashable]
) -> Tuple[float, float, float]:
    """
    Compute precision, recall, and F1 score of a predicted multiset.

    Two empty multisets count as a perfect match.

    Returns:
        Tuple of (precision, recall, f1_score)
    """
    true_positives, false_positives, false_negatives = match_counts(predicted, expected)

    if true_positives + false_positives + false_negatives == 0:
        return 1.0, 1.0, 1.0

    precision = 0.0
    if true_positives + false_positives > 0:
        precision = true_positives / (true_positives + false_positives)

    recall = 0.0
    if true_positives + false_negatives > 0:
        recall = true_positives / (true_positives + false_negatives)

    f1_score = 0.0
    if precision + recall > 0:
        f1_score = 2 * (precision * recall) / (precision + recall)

    return precision, recall, f1_score


def format_metrics(metrics: dict, precision: int = 4) -> str:
    """
    Format metrics dictionary as a readable string.

    Args:
        metrics: Dictionary of metric names and values
        precision: Number of decimal places

    Returns:
        Formatted string
    """
    formatted = []
    for name, value in metrics.items():
        if isinstance(value, float):
            formatted.append(f"{name}: {value:.{precision}f}")
        else:
            formatted.append(f"{name}: {value}")

    return " | ".join(formatted)
