"""
Human-readable output for degree-of-separation results.
"""
import numpy as np
import pandas as pd

RULE = "----------------"


def format_report(stats, per_degree=True):
    """
    Format SeparationStatistics the way the command line prints them.

    Parameters:
    -----------
    stats : SeparationStatistics
    per_degree : bool, default=True
        Include one line per degree of separation from 1 to the max distance

    Returns:
    --------
    str
    """
    lines = []
    if per_degree:
        for degree in range(1, stats.max_distance + 1):
            lines.append(f"The connections with {degree} degrees of separation are "
                         f"{stats.percentages[degree]:.4f}% of the valid connections.")

    if stats.discarded_self_pairs:
        invalid_label = "Invalid - (no connection)"
    else:
        invalid_label = "Invalid - (no connection or self connection)"

    lines.append(RULE)
    lines.append(f"{invalid_label}: {stats.invalid_connections}")
    lines.append(f"Valid connections: {stats.valid_connections}")
    lines.append(f"Mean separation: {stats.mean:.6g}")
    lines.append(f"Max distance: {stats.max_distance}")
    lines.append(f"Standard deviation of separation: {stats.std:.6g}")
    for k in stats.thresholds:
        lines.append(f"The percentage of connected nodes that can be reached within {k} "
                     f"degrees of separation is {stats.reachable_within(k):.4f}%")
    lines.append(RULE)
    return "\n".join(lines)


def histogram_frame(result):
    """
    One row per degree of separation, invalid bucket first.

    Columns: degree, pairs, percent, cumulative_percent. Percentages are
    relative to the valid connections; the invalid row has no cumulative value.
    """
    counts = result.histogram.counts()
    degrees = np.arange(len(counts))
    percent = 100.0 * counts / (1.0 + result.valid_connections)
    cumulative = np.cumsum(np.where(degrees > 0, percent, 0.0))

    frame = pd.DataFrame({
        'degree': degrees,
        'pairs': counts,
        'percent': percent,
        'cumulative_percent': cumulative,
    })
    frame.loc[frame['degree'] == 0, 'cumulative_percent'] = np.nan
    return frame


def plot_separation_distribution(stats, ax=None, title=None):
    """
    Bar chart of per-degree percentages with the cumulative curve overlaid.

    Returns:
    --------
    matplotlib.axes.Axes
    """
    import matplotlib.pyplot as plt

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))

    degrees = np.arange(1, stats.max_distance + 1)
    ax.bar(degrees, stats.percentages[1:], color='steelblue', alpha=0.7, label='per degree')
    ax.plot(degrees, stats.cumulative[1:], 'k-o', markersize=3, label='cumulative')

    for k in stats.thresholds:
        if 0 < k <= stats.max_distance:
            ax.axvline(k, color='gray', linestyle='--', linewidth=0.8)

    ax.set_xlabel('Degrees of separation')
    ax.set_ylabel('% of valid connections')
    ax.set_ylim(0, 100)
    ax.set_title(title or f'Separation distribution ({stats.n_nodes} nodes)')
    ax.legend()
    return ax
