"""
Edge list loading.
"""
import numpy as np
import pandas as pd


def read_edge_csv(path, delimiter=",", verbose=False):
    """
    Read a two-column edge list from a text file.

    Rows whose first two fields are not both plain non-negative decimal integers
    (headers, comments, blank or truncated lines, "3.0", "1e3") are skipped
    without error. Identifiers are parsed exactly, without a float stage.
    Fields after the second are ignored.

    Parameters:
    -----------
    path : str or path-like
        File to read
    delimiter : str or None, default=','
        Field separator; None splits on runs of whitespace
    verbose : bool, default=False
        Whether to print how many rows were kept

    Returns:
    --------
    nodes, edges : numpy.ndarray
        Equal-length int64 columns
    """
    with open(path, 'r') as f:
        lines = pd.Series(f.read().splitlines(), dtype=object)
    if lines.empty:
        return np.empty(0, dtype=np.int64), np.empty(0, dtype=np.int64)

    # object dtype keeps the .str accessor usable when a column is entirely missing
    fields = lines.str.split(delimiter, n=2, expand=True).reindex(columns=[0, 1]).astype(object)
    first = fields[0].str.strip()
    second = fields[1].str.strip()

    # plain decimal digits only; ids stay exact integers, never floats
    keep = (first.str.fullmatch(r"[0-9]+").fillna(False).astype(bool)
            & second.str.fullmatch(r"[0-9]+").fillna(False).astype(bool))
    first = first[keep].map(int)
    second = second[keep].map(int)

    id_max = np.iinfo(np.int64).max
    in_range = (first <= id_max) & (second <= id_max)
    nodes = first[in_range].to_numpy(dtype=np.int64)
    edges = second[in_range].to_numpy(dtype=np.int64)

    if verbose:
        print(f"Loaded {len(nodes)} edges from {path} ({len(lines) - len(nodes)} rows skipped)")
    return nodes, edges
