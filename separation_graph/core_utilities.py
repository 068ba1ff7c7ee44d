"""
Core utilities for the Separation Graph framework.
Contains the timing helper and the numba breadth-first-search kernels shared across modules.
"""
import time
from collections import defaultdict

import numpy as np
from numba import njit, prange

# Sentinel stored in distance arrays for pairs with no connecting path
UNREACHABLE = -1


class TimingStats:
    """Utility class to track timing statistics for different operations"""
    def __init__(self):
        self.stats = defaultdict(list)
        self.current_timers = {}

    def start(self, operation):
        """Start timing an operation"""
        self.current_timers[operation] = time.perf_counter()

    def end(self, operation):
        """End timing an operation and record the elapsed time"""
        if operation in self.current_timers:
            elapsed = time.perf_counter() - self.current_timers.pop(operation)
            self.stats[operation].append(elapsed)
            return elapsed
        return None

    def get_stats(self, as_dict=False):
        """Get statistics for all operations"""
        result = {}
        for op, times in self.stats.items():
            result[op] = {
                'count': len(times),
                'total': sum(times),
                'mean': sum(times) / len(times) if times else 0,
                'max': max(times) if times else 0
            }

        if as_dict:
            return result

        lines = ["Timing Statistics:"]
        # Longest operations first
        for op, stats in sorted(result.items(), key=lambda x: x[1]['total'], reverse=True):
            lines.append(f"  • {op}: {stats['total']:.3f}s total, "
                         f"{stats['count']} calls, "
                         f"{stats['mean']:.3f}s avg/call")
        return "\n".join(lines)

    def get_operation_total(self, operation):
        """Get total time for a specific operation"""
        return sum(self.stats.get(operation, []))

    def report_nested_timing(self, parent_op, indent=2):
        """Report child operations ("parent.child") as a share of the parent's time"""
        parent_total = self.get_operation_total(parent_op)
        if parent_total <= 0:
            return f"No timing data for {parent_op}"

        lines = [f"Breakdown of {parent_op} ({parent_total:.3f}s total):"]
        prefix = f"{parent_op}."
        children = sorted(((op[len(prefix):], sum(times)) for op, times in self.stats.items()
                           if op.startswith(prefix)),
                          key=lambda x: x[1], reverse=True)

        indent_str = " " * indent
        for name, total in children:
            lines.append(f"{indent_str}• {name}: {total:.3f}s ({100 * total / parent_total:.1f}%)")

        other_time = parent_total - sum(t for _, t in children)
        if other_time > 0:
            lines.append(f"{indent_str}• other operations: {other_time:.3f}s "
                         f"({100 * other_time / parent_total:.1f}%)")
        return "\n".join(lines)


@njit
def bfs_pair_distance(indptr, indices, start, end):
    """
    Breadth-first search from start until end is popped from the frontier.

    Parameters:
    -----------
    indptr, indices : numpy.ndarray (int64)
        CSR-style neighbor lists; neighbors of v are indices[indptr[v]:indptr[v+1]]
    start, end : int
        Compact node indices

    Returns:
    --------
    int
        Hop count, or UNREACHABLE (-1) when the frontier empties first
    """
    n = indptr.shape[0] - 1
    visited = np.zeros(n, dtype=np.bool_)
    # every node enters the queue at most once
    queue_nodes = np.empty(n, dtype=np.int64)
    queue_dist = np.empty(n, dtype=np.int64)
    head = 0
    tail = 0

    visited[start] = True
    queue_nodes[tail] = start
    queue_dist[tail] = 0
    tail += 1

    while head < tail:
        node = queue_nodes[head]
        distance = queue_dist[head]
        head += 1
        if node == end:
            return distance
        for k in range(indptr[node], indptr[node + 1]):
            neighbor = indices[k]
            if not visited[neighbor]:
                visited[neighbor] = True
                queue_nodes[tail] = neighbor
                queue_dist[tail] = distance + 1
                tail += 1
    return -1


@njit
def bfs_levels(indptr, indices, source):
    """Hop count from source to every node (-1 where unreachable)."""
    n = indptr.shape[0] - 1
    levels = np.full(n, -1, dtype=np.int64)
    queue = np.empty(n, dtype=np.int64)
    head = 0
    tail = 0

    levels[source] = 0
    queue[tail] = source
    tail += 1

    while head < tail:
        node = queue[head]
        head += 1
        next_level = levels[node] + 1
        for k in range(indptr[node], indptr[node + 1]):
            neighbor = indices[k]
            if levels[neighbor] < 0:
                levels[neighbor] = next_level
                queue[tail] = neighbor
                tail += 1
    return levels


@njit
def _row_offset(row, n):
    # start of row `row` in the flattened upper triangle (diagonal included)
    return row * n - (row * (row - 1)) // 2


@njit
def upper_triangle_pair_distances(indptr, indices):
    """
    Per-pair BFS over every (start, end) with start <= end, row-major order.

    Returns a flat int64 array of length n(n+1)/2.
    """
    n = indptr.shape[0] - 1
    out = np.empty(n * (n + 1) // 2, dtype=np.int64)
    pos = 0
    for start in range(n):
        for end in range(start, n):
            out[pos] = bfs_pair_distance(indptr, indices, start, end)
            pos += 1
    return out


@njit(parallel=True)
def upper_triangle_levels(indptr, indices):
    """
    One single-source BFS per start node, run in parallel.

    Produces the same flat layout as upper_triangle_pair_distances.
    """
    n = indptr.shape[0] - 1
    out = np.empty(n * (n + 1) // 2, dtype=np.int64)
    for start in prange(n):
        levels = bfs_levels(indptr, indices, start)
        offset = _row_offset(start, n)
        for end in range(start, n):
            out[offset + end - start] = levels[end]
    return out
