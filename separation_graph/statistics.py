"""
Distribution statistics over degrees of separation.

Percentages use ``1 + connections`` as denominator so an empty graph yields 0%
instead of a division by zero; every percentage is therefore a slight
underestimate of the exact proportion.
"""
import warnings
from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np


def separation_distribution(histogram, degree, connections):
    """
    Percentage of connections that have the given degree of separation.

    Parameters:
    -----------
    histogram : DegreeHistogram
        Pairs grouped by degree
    degree : int
        Bucket to measure; 0 is the invalid bucket
    connections : int
        Denominator, usually the number of valid connections

    Returns:
    --------
    float
        100 * |histogram[degree]| / (1 + connections)
    """
    return 100.0 * histogram.count(degree) / (1.0 + connections)


def _valid_distances(distances):
    distances = np.asarray(distances, dtype=np.int64)
    return distances[distances > 0]


def average(distances, num_connections):
    """Mean separation: sum of the valid (positive) distances over num_connections"""
    if num_connections == 0:
        warnings.warn("No valid connections; mean separation is undefined", RuntimeWarning)
        return float('nan')
    return float(_valid_distances(distances).sum()) / num_connections


def calculate_stdv(distances, num_connections):
    """Population standard deviation of the valid distances"""
    if num_connections == 0:
        warnings.warn("No valid connections; standard deviation is undefined", RuntimeWarning)
        return float('nan')
    valid = _valid_distances(distances).astype(np.float64)
    mean = valid.sum() / num_connections
    variance = np.sum((valid - mean) ** 2) / num_connections
    return float(np.sqrt(variance))


def max_distance(distances):
    """Largest valid distance, 0 when no pair is connected"""
    valid = _valid_distances(distances)
    return int(valid.max()) if len(valid) else 0


def cumulative_distribution(histogram, connections, max_degree=None):
    """
    Running sum of per-degree percentages.

    Returns an array c with c[0] = 0 and c[k] the percentage of connections
    within k degrees of separation. Degree 0 never contributes.
    """
    if max_degree is None:
        max_degree = histogram.max_degree
    percentages = np.zeros(max_degree + 1, dtype=np.float64)
    for degree in range(1, max_degree + 1):
        percentages[degree] = separation_distribution(histogram, degree, connections)
    return np.cumsum(percentages)


@dataclass
class SeparationStatistics:
    n_nodes: int
    valid_connections: int
    invalid_connections: int
    discarded_self_pairs: int
    mean: float
    std: float
    max_distance: int
    percentages: np.ndarray              # per degree, index 0 unused (always 0.0)
    cumulative: np.ndarray               # running sum of percentages[1..k]
    thresholds: Tuple[int, ...] = (6, 20)
    reachable: Dict[int, float] = field(default_factory=dict)

    def reachable_within(self, degree):
        """Cumulative percentage at degree, clamped to the observed range"""
        if degree <= 0 or len(self.cumulative) == 0:
            return 0.0
        return float(self.cumulative[min(degree, len(self.cumulative) - 1)])

    @property
    def total_pairs(self):
        return self.n_nodes * (self.n_nodes + 1) // 2


def summarize(result, thresholds=(6, 20)):
    """
    Derive SeparationStatistics from a DistanceResult.

    Parameters:
    -----------
    result : DistanceResult
        Output of calculate_all_distances
    thresholds : tuple of int, default=(6, 20)
        Degrees at which cumulative reachability is recorded
    """
    valid = result.valid_connections
    top = max_distance(result.distances)

    percentages = np.zeros(top + 1, dtype=np.float64)
    for degree in range(1, top + 1):
        percentages[degree] = separation_distribution(result.histogram, degree, valid)

    stats = SeparationStatistics(
        n_nodes=result.n_nodes,
        valid_connections=valid,
        invalid_connections=result.invalid_connections,
        discarded_self_pairs=result.discarded_self_pairs,
        mean=average(result.distances, valid),
        std=calculate_stdv(result.distances, valid),
        max_distance=top,
        percentages=percentages,
        cumulative=cumulative_distribution(result.histogram, valid, top),
        thresholds=tuple(int(k) for k in thresholds),
    )
    stats.reachable = {k: stats.reachable_within(k) for k in stats.thresholds}
    return stats
