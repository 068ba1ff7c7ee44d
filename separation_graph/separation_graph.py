"""
SeparationGraph - Core data structure for degree-of-separation analysis.
"""
import numpy as np
from scipy.sparse.csgraph import connected_components

from .adjacency import as_adjacency, build_adjacency
from .compaction import compact_columns, reassign_indexes
from .core_utilities import UNREACHABLE, bfs_levels as _bfs_levels, bfs_pair_distance


def _check_node(adjacency, node_idx):
    if node_idx < 0 or node_idx >= adjacency.n_nodes:
        raise IndexError(f"Node index {node_idx} out of range [0, {adjacency.n_nodes-1}]")


def find_distance(graph, start, end):
    """
    Shortest hop count between two nodes, or None if no path exists.

    Parameters:
    -----------
    graph : SeparationGraph, AdjacencyList or list of neighbor lists
    start, end : int
        Compact node indices

    Returns:
    --------
    int or None
    """
    adjacency = as_adjacency(graph)
    _check_node(adjacency, start)
    _check_node(adjacency, end)
    distance = bfs_pair_distance(adjacency.indptr, adjacency.indices, int(start), int(end))
    return None if distance == UNREACHABLE else int(distance)


def bfs_levels(graph, source):
    """Hop count from source to every node, UNREACHABLE (-1) where there is no path."""
    adjacency = as_adjacency(graph)
    _check_node(adjacency, source)
    return _bfs_levels(adjacency.indptr, adjacency.indices, int(source))


class SeparationGraph:
    """
    Core data structure representing an undirected, unweighted graph over
    compact node indices, together with the index space that maps compact
    indices back to the original identifiers.
    """

    def __init__(self, adjacency, index_space=None):
        """
        Initialize a SeparationGraph.

        Parameters:
        -----------
        adjacency : AdjacencyList or list of neighbor lists
            Undirected adjacency over compact indices
        index_space : array-like, optional
            Sorted original identifiers; index_space[i] is the id of node i.
            If None, compact indices are their own identifiers.
        """
        self.adjacency = as_adjacency(adjacency)
        self.n_nodes = self.adjacency.n_nodes

        if index_space is None:
            index_space = np.arange(self.n_nodes, dtype=np.int64)
        self.index_space = np.asarray(index_space, dtype=np.int64)
        if len(self.index_space) != self.n_nodes:
            raise ValueError(f"Index space has {len(self.index_space)} ids "
                             f"but adjacency has {self.n_nodes} nodes")

        self.component_labels = None
        self.n_components = 0
        self.component_sizes = None

    @classmethod
    def from_columns(cls, nodes, edges, on_missing="raise", verbose=False):
        """
        Compact two raw identifier columns and build the graph.

        Parameters:
        -----------
        nodes, edges : array-like of int
            Raw edge columns; element i of each forms one undirected edge
        on_missing : {'raise', 'passthrough'}, default='raise'
            Reassignment policy for ids absent from the index space
        verbose : bool, default=False
            Whether to print progress messages
        """
        index_space, compact_nodes, compact_edges = compact_columns(nodes, edges, on_missing=on_missing)
        if verbose:
            print(f"         Compacted {len(compact_nodes)} edges onto {len(index_space)} node ids "
                  f"(raw id range {index_space.min() if len(index_space) else 0}"
                  f"..{index_space.max() if len(index_space) else 0})")
        adjacency = build_adjacency(len(index_space), compact_nodes, compact_edges)
        return cls(adjacency, index_space=index_space)

    @property
    def n_edges(self):
        return self.adjacency.n_edges

    def get_adjacency_list(self):
        """Get the underlying AdjacencyList"""
        return self.adjacency

    def get_neighbors(self, node_idx):
        """Get the neighbor list of a node (compact indices, with multiplicity)"""
        return self.adjacency[node_idx]

    def get_degree(self, node_idx):
        """Get the degree of a node"""
        _check_node(self.adjacency, node_idx)
        return int(self.adjacency.indptr[node_idx + 1] - self.adjacency.indptr[node_idx])

    def get_all_degrees(self):
        """Get the degrees of all nodes"""
        return self.adjacency.degrees()

    def find_distance(self, start, end):
        """Shortest hop count between two compact indices, or None"""
        return find_distance(self.adjacency, start, end)

    def find_distance_between_ids(self, start_id, end_id):
        """Shortest hop count between two original identifiers, or None"""
        start, end = reassign_indexes(self.index_space, [start_id, end_id])
        return self.find_distance(int(start), int(end))

    def original_id(self, node_idx):
        """Recover the original identifier of a compact index"""
        _check_node(self.adjacency, node_idx)
        return int(self.index_space[node_idx])

    def compact_index(self, node_id):
        """Look up the compact index of an original identifier"""
        return int(reassign_indexes(self.index_space, [node_id])[0])

    def compute_components(self):
        """Compute connected components of the graph"""
        if self.n_nodes == 0:
            self.n_components, self.component_labels = 0, np.empty(0, dtype=np.int32)
        else:
            self.n_components, self.component_labels = connected_components(
                self.adjacency.to_csr(), directed=False)
        self.component_sizes = np.bincount(self.component_labels, minlength=self.n_components)
        return self.component_labels

    def __str__(self):
        return (f"SeparationGraph with {self.n_nodes} nodes, "
                f"{self.n_edges} edges")

    def __repr__(self):
        return self.__str__()
