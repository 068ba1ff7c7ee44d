"""
SeparationAnalyzer - All-pairs degree-of-separation analysis for SeparationGraph objects.
"""
from dataclasses import dataclass

import numpy as np

from .adjacency import as_adjacency
from .config import AGGREGATION_METHODS, SELF_PAIR_POLICIES, SeparationConfig
from .core_utilities import (
    UNREACHABLE,
    TimingStats,
    upper_triangle_levels,
    upper_triangle_pair_distances,
)
from .histogram import DegreeHistogram
from .statistics import summarize


@dataclass
class DistanceResult:
    distances: np.ndarray                # retained distances in enumeration order, -1 = unreachable
    histogram: DegreeHistogram
    valid_connections: int
    invalid_connections: int
    discarded_self_pairs: int
    n_nodes: int
    self_pairs: str = "discard"

    @property
    def total_pairs(self):
        return self.n_nodes * (self.n_nodes + 1) // 2


def calculate_all_distances(graph, self_pairs="discard", method="pairwise"):
    """
    Shortest-path distance for every unordered pair (start, end), start <= end.

    Pairs are enumerated row by row, so self-pairs are included exactly once
    and there are n(n+1)/2 pairs in total.

    Parameters:
    -----------
    graph : SeparationGraph, AdjacencyList or list of neighbor lists
        The graph to analyze
    self_pairs : {'discard', 'invalid'}, default='discard'
        'discard' leaves (v, v) out of every count, bucket and the distance
        sequence. 'invalid' puts it in bucket 0 and the invalid count, and
        keeps its 0 in the distance sequence.
    method : {'pairwise', 'single_source'}, default='pairwise'
        'pairwise' runs one BFS per pair; 'single_source' runs one BFS per
        start node in parallel and reads off every end.

    Returns:
    --------
    DistanceResult
        Retained distances, the DegreeHistogram, the valid and invalid
        connection counts, and the number of discarded self-pairs
    """
    if self_pairs not in SELF_PAIR_POLICIES:
        raise ValueError(f"Unknown self_pairs policy: {self_pairs}. "
                         f"Choose from {SELF_PAIR_POLICIES}")
    if method not in AGGREGATION_METHODS:
        raise ValueError(f"Unknown method: {method}. Choose from {AGGREGATION_METHODS}")

    adjacency = as_adjacency(graph)
    n = adjacency.n_nodes

    if method == "pairwise":
        flat = upper_triangle_pair_distances(adjacency.indptr, adjacency.indices)
    else:
        flat = upper_triangle_levels(adjacency.indptr, adjacency.indices)

    starts, ends = np.triu_indices(n)
    is_self = starts == ends
    unreachable = flat == UNREACHABLE

    if self_pairs == "discard":
        keep = ~is_self
        invalid = int(np.count_nonzero(unreachable))
        discarded = n
    else:
        keep = np.ones(len(flat), dtype=bool)
        invalid = int(np.count_nonzero(unreachable)) + n
        discarded = 0

    distances = flat[keep]
    histogram = DegreeHistogram(starts[keep], ends[keep], np.maximum(distances, 0))

    return DistanceResult(
        distances=distances,
        histogram=histogram,
        valid_connections=int(np.count_nonzero(flat > 0)),
        invalid_connections=invalid,
        discarded_self_pairs=discarded,
        n_nodes=n,
        self_pairs=self_pairs,
    )


class SeparationAnalyzer:
    """
    Class for computing degree-of-separation distributions of SeparationGraph objects.
    """

    def __init__(self, config=None, verbose=None):
        """
        Initialize the analyzer.

        Parameters:
        -----------
        config : SeparationConfig, optional
            Run settings. Defaults to SeparationConfig().
        verbose : bool, optional
            Overrides config.verbose when given
        """
        self.config = config if config is not None else SeparationConfig()
        self.verbose = self.config.verbose if verbose is None else verbose
        self.timing = TimingStats()
        self._timing_parent = None

    def _timing_key(self, operation):
        # inside analyze() steps are recorded as "analyze.<step>"
        if self._timing_parent is None:
            return operation
        return f"{self._timing_parent}.{operation}"

    def calculate_all_distances(self, graph):
        """Run the all-pairs aggregation with the configured policy and method"""
        key = self._timing_key("calculate_all_distances")
        self.timing.start(key)
        adjacency = as_adjacency(graph)
        n = adjacency.n_nodes

        if self.verbose:
            print(f"[Step 1] Computing distances for {n * (n + 1) // 2} pairs "
                  f"over {n} nodes ({self.config.method})")

        result = calculate_all_distances(adjacency,
                                         self_pairs=self.config.self_pairs,
                                         method=self.config.method)
        elapsed = self.timing.end(key)

        if self.verbose:
            print(f"         {result.valid_connections} valid, "
                  f"{result.invalid_connections} invalid, "
                  f"{result.discarded_self_pairs} self-pairs discarded "
                  f"in {elapsed:.2f}s")
            if result.valid_connections == 0:
                print("         WARNING: Graph has no connected pairs")
        return result

    def summarize(self, result, thresholds=None):
        """Derive SeparationStatistics from a DistanceResult"""
        if thresholds is None:
            thresholds = self.config.thresholds
        key = self._timing_key("summarize")
        self.timing.start(key)
        stats = summarize(result, thresholds=thresholds)
        self.timing.end(key)

        if self.verbose:
            print(f"[Step 2] Max distance {stats.max_distance}, "
                  f"mean separation {stats.mean:.4g} ± {stats.std:.4g}")
        return stats

    def analyze(self, graph):
        """
        Compute distances and statistics in one call.

        Returns:
        --------
        result : DistanceResult
        stats : SeparationStatistics
        """
        self.timing.start("analyze")
        self._timing_parent = "analyze"
        try:
            result = self.calculate_all_distances(graph)
            stats = self.summarize(result)
        finally:
            self._timing_parent = None
            self.timing.end("analyze")
        return result, stats
