"""
Separation Graph Package - Tools for measuring degrees of separation across every node pair of an undirected graph.
"""

# Import main classes for easy access
from .separation_graph import SeparationGraph, find_distance, bfs_levels
from .separation_analyzer import SeparationAnalyzer, DistanceResult, calculate_all_distances
from .config import SeparationConfig

# Import pipeline building blocks that might be directly useful
from .adjacency import AdjacencyList, build_adjacency
from .compaction import (
    IndexSpaceMismatchError,
    merge_and_sort_columns,
    reassign_indexes,
    combine_vectors,
    compact_columns
)
from .core_utilities import TimingStats, UNREACHABLE
from .histogram import DegreeHistogram
from .statistics import (
    SeparationStatistics,
    separation_distribution,
    average,
    calculate_stdv,
    max_distance,
    cumulative_distribution,
    summarize
)
from .io import read_edge_csv

# Define what gets imported with `from separation_graph import *`
__all__ = [
    # Main classes
    'SeparationGraph',
    'SeparationAnalyzer',
    'SeparationConfig',
    'DistanceResult',
    'AdjacencyList',
    'DegreeHistogram',
    'SeparationStatistics',

    # Utility classes
    'TimingStats',
    'IndexSpaceMismatchError',
    'UNREACHABLE',

    # Core functions
    'merge_and_sort_columns',
    'reassign_indexes',
    'combine_vectors',
    'compact_columns',
    'build_adjacency',
    'find_distance',
    'bfs_levels',
    'calculate_all_distances',
    'separation_distribution',
    'average',
    'calculate_stdv',
    'max_distance',
    'cumulative_distribution',
    'summarize',
    'read_edge_csv',
]

# Package metadata
__version__ = '1.0.0'
__author__ = 'Connor Frankston'
