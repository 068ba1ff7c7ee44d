"""
Index compaction - maps sparse raw node identifiers onto a dense zero-based range.

The index space is the sorted, duplicate-free union of both raw columns. A raw
identifier's compact index is its position in that array, so the original
identifier of any compact index ``i`` is simply ``index_space[i]``.
"""
import numpy as np


class IndexSpaceMismatchError(ValueError):
    """Raised when values being reassigned are absent from the index space."""

    def __init__(self, missing):
        self.missing = np.asarray(missing)
        preview = ", ".join(str(v) for v in self.missing[:5])
        if len(self.missing) > 5:
            preview += f", ... ({len(self.missing)} total)"
        super().__init__(f"Values not found in index space: {preview}")


def _as_id_column(values, name):
    arr = np.asarray(values, dtype=np.int64).ravel()
    if arr.size and arr.min() < 0:
        raise ValueError(f"{name} must contain non-negative identifiers, got {arr.min()}")
    return arr


def merge_and_sort_columns(nodes, edges):
    """
    Combine both raw columns into one sorted array of unique identifiers.

    Parameters:
    -----------
    nodes, edges : array-like of int
        Equal-length raw edge columns

    Returns:
    --------
    numpy.ndarray
        Ascending int64 array with every identifier appearing exactly once
    """
    nodes = _as_id_column(nodes, "nodes")
    edges = _as_id_column(edges, "edges")
    if len(nodes) != len(edges):
        raise ValueError(f"Column lengths differ: {len(nodes)} nodes vs {len(edges)} edges")
    return np.unique(np.concatenate([nodes, edges]))


def reassign_indexes(index_space, values, on_missing="raise"):
    """
    Replace every value with its rank in index_space.

    Parameters:
    -----------
    index_space : numpy.ndarray
        Sorted unique identifiers, as returned by merge_and_sort_columns
    values : array-like of int
        Identifiers to reassign
    on_missing : {'raise', 'passthrough'}, default='raise'
        'raise' signals values absent from index_space with
        IndexSpaceMismatchError; 'passthrough' leaves them unchanged.

    Returns:
    --------
    numpy.ndarray
        int64 array, same length and order as values
    """
    if on_missing not in ("raise", "passthrough"):
        raise ValueError(f"Unknown on_missing policy: {on_missing}. "
                         f"Expected 'raise' or 'passthrough'")

    index_space = np.asarray(index_space, dtype=np.int64)
    values = np.asarray(values, dtype=np.int64).ravel()
    if values.size == 0:
        return values.copy()
    if index_space.size == 0:
        positions = np.zeros(len(values), dtype=np.int64)
        found = np.zeros(len(values), dtype=bool)
    else:
        positions = np.searchsorted(index_space, values)
        clipped = np.minimum(positions, len(index_space) - 1)
        found = (positions < len(index_space)) & (index_space[clipped] == values)

    if not found.all():
        if on_missing == "raise":
            raise IndexSpaceMismatchError(np.unique(values[~found]))
        return np.where(found, positions, values)
    return positions.astype(np.int64)


def combine_vectors(v1, v2):
    """Zip two equal-length columns into a list of (v1[i], v2[i]) edge tuples."""
    if len(v1) != len(v2):
        raise ValueError(f"Column lengths differ: {len(v1)} vs {len(v2)}")
    return [(int(a), int(b)) for a, b in zip(v1, v2)]


def compact_columns(nodes, edges, on_missing="raise"):
    """
    Build the index space and reassign both columns in one step.

    Returns:
    --------
    index_space : numpy.ndarray
    compact_nodes, compact_edges : numpy.ndarray
    """
    index_space = merge_and_sort_columns(nodes, edges)
    compact_nodes = reassign_indexes(index_space, nodes, on_missing=on_missing)
    compact_edges = reassign_indexes(index_space, edges, on_missing=on_missing)
    return index_space, compact_nodes, compact_edges
