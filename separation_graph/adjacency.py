"""
AdjacencyList - undirected neighbor lists over compact node indices.
"""
import numpy as np
from scipy.sparse import csr_matrix


class AdjacencyList:
    """
    Immutable undirected adjacency structure stored in CSR layout.

    Neighbors of node v are ``indices[indptr[v]:indptr[v+1]]`` in the order the
    edges were supplied. Self-loops and parallel edges keep their multiplicity.
    """

    def __init__(self, indptr, indices, n_edges=None):
        self.indptr = np.ascontiguousarray(indptr, dtype=np.int64)
        self.indices = np.ascontiguousarray(indices, dtype=np.int64)
        self.indptr.setflags(write=False)
        self.indices.setflags(write=False)
        self.n_nodes = len(self.indptr) - 1
        self.n_edges = len(self.indices) // 2 if n_edges is None else int(n_edges)

    @classmethod
    def from_lists(cls, lists):
        """
        Build from a sequence of neighbor lists, e.g. ``[[], [2], [1, 3], [2]]``.

        The lists are taken as-is; no symmetry is enforced.
        """
        lengths = np.array([len(neighbors) for neighbors in lists], dtype=np.int64)
        indptr = np.zeros(len(lists) + 1, dtype=np.int64)
        np.cumsum(lengths, out=indptr[1:])
        if lengths.sum() > 0:
            indices = np.concatenate([np.asarray(neighbors, dtype=np.int64) for neighbors in lists])
        else:
            indices = np.empty(0, dtype=np.int64)
        _check_bounds(indices, len(lists))
        return cls(indptr, indices)

    def __len__(self):
        return self.n_nodes

    def __getitem__(self, node_idx):
        if node_idx < 0 or node_idx >= self.n_nodes:
            raise IndexError(f"Node index {node_idx} out of range [0, {self.n_nodes-1}]")
        return [int(w) for w in self.indices[self.indptr[node_idx]:self.indptr[node_idx + 1]]]

    def __iter__(self):
        for v in range(self.n_nodes):
            yield self[v]

    def __eq__(self, other):
        if isinstance(other, AdjacencyList):
            return (np.array_equal(self.indptr, other.indptr)
                    and np.array_equal(self.indices, other.indices))
        if isinstance(other, (list, tuple)):
            return self.to_lists() == [list(neighbors) for neighbors in other]
        return NotImplemented

    def to_lists(self):
        """Get the neighbor lists as plain Python lists"""
        return list(self)

    def degrees(self):
        """Length of every neighbor list (a self-loop counts twice)"""
        return np.diff(self.indptr)

    def to_csr(self):
        """
        Get the adjacency as a scipy.sparse.csr_matrix.

        Parallel edges are summed into a single weighted entry.
        """
        rows = np.repeat(np.arange(self.n_nodes, dtype=np.int64), self.degrees())
        data = np.ones(len(self.indices), dtype=np.float64)
        graph = csr_matrix((data, (rows, self.indices)), shape=(self.n_nodes, self.n_nodes))
        graph.sum_duplicates()
        return graph

    def __str__(self):
        return f"AdjacencyList with {self.n_nodes} nodes, {self.n_edges} edges"

    def __repr__(self):
        return self.__str__()


def _check_bounds(indices, n_nodes):
    if len(indices) == 0:
        return
    lo, hi = indices.min(), indices.max()
    if lo < 0 or hi >= n_nodes:
        bad = lo if lo < 0 else hi
        raise IndexError(f"Compact index {bad} out of range [0, {n_nodes-1}]")


def build_adjacency(n_nodes, nodes, edges):
    """
    Turn a compacted edge list into an undirected adjacency list.

    For each edge (v, w), w is appended to the list of v and v to the list of w,
    in edge order. A self-loop (v, v) therefore lists v twice.

    Parameters:
    -----------
    n_nodes : int
        Number of nodes, i.e. the size of the index space
    nodes, edges : array-like of int
        Equal-length columns of compact indices

    Returns:
    --------
    AdjacencyList
    """
    nodes = np.asarray(nodes, dtype=np.int64).ravel()
    edges = np.asarray(edges, dtype=np.int64).ravel()
    if len(nodes) != len(edges):
        raise ValueError(f"Column lengths differ: {len(nodes)} nodes vs {len(edges)} edges")
    _check_bounds(nodes, n_nodes)
    _check_bounds(edges, n_nodes)

    # interleave both directions: (v0->w0, w0->v0, v1->w1, ...) keeps append order
    src = np.empty(2 * len(nodes), dtype=np.int64)
    dst = np.empty(2 * len(nodes), dtype=np.int64)
    src[0::2], src[1::2] = nodes, edges
    dst[0::2], dst[1::2] = edges, nodes

    order = np.argsort(src, kind="stable")
    indptr = np.zeros(n_nodes + 1, dtype=np.int64)
    np.cumsum(np.bincount(src, minlength=n_nodes), out=indptr[1:])
    return AdjacencyList(indptr, dst[order], n_edges=len(nodes))


def as_adjacency(graph):
    """Accept a SeparationGraph, an AdjacencyList or plain neighbor lists."""
    if hasattr(graph, 'get_adjacency_list'):
        return graph.get_adjacency_list()
    if isinstance(graph, AdjacencyList):
        return graph
    return AdjacencyList.from_lists(graph)
