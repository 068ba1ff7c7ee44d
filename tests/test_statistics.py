import math

import numpy as np
import pytest

from separation_graph import (
    DegreeHistogram,
    average,
    calculate_all_distances,
    calculate_stdv,
    cumulative_distribution,
    max_distance,
    separation_distribution,
    summarize,
)


@pytest.fixture
def bucket_histogram():
    return DegreeHistogram.from_buckets({
        0: [(0, 5), (1, 5)],
        1: [(0, 1), (1, 2), (2, 3)],
        2: [(0, 2)],
    })


def test_separation_distribution_formula(bucket_histogram) -> None:
    assert separation_distribution(bucket_histogram, 1, 4) == pytest.approx(60.0)
    assert separation_distribution(bucket_histogram, 2, 4) == pytest.approx(20.0)
    assert separation_distribution(bucket_histogram, 0, 4) == pytest.approx(40.0)
    assert separation_distribution(bucket_histogram, 7, 4) == 0.0


def test_distribution_guards_zero_connections(bucket_histogram) -> None:
    assert separation_distribution(bucket_histogram, 1, 0) == pytest.approx(300.0)


def test_histogram_accessors(bucket_histogram) -> None:
    assert bucket_histogram.counts().tolist() == [2, 3, 1]
    assert bucket_histogram.max_degree == 2
    assert bucket_histogram.keys() == [0, 1, 2]
    assert 2 in bucket_histogram and 3 not in bucket_histogram
    assert bucket_histogram[1] == [(0, 1), (1, 2), (2, 3)]
    assert bucket_histogram[5] == []
    assert str(bucket_histogram) == "DegreeHistogram({0: 2, 1: 3, 2: 1})"


def test_mean_and_population_stdv() -> None:
    distances = [1, 1, 2]
    assert average(distances, 3) == pytest.approx(4 / 3)
    assert calculate_stdv(distances, 3) == pytest.approx(math.sqrt(2 / 9))
    assert calculate_stdv(distances, 3) == pytest.approx(0.4714, abs=1e-4)


def test_unreachable_and_self_entries_do_not_shift_statistics() -> None:
    distances = np.array([-1, 0, 1, -1, 1, 2, 0])
    assert average(distances, 3) == pytest.approx(4 / 3)
    assert calculate_stdv(distances, 3) == pytest.approx(math.sqrt(2 / 9))
    assert max_distance(distances) == 2


def test_zero_connections_warns() -> None:
    with pytest.warns(RuntimeWarning):
        assert math.isnan(average([-1, -1], 0))
    with pytest.warns(RuntimeWarning):
        assert math.isnan(calculate_stdv([], 0))
    assert max_distance([-1, 0]) == 0


def test_cumulative_distribution(bucket_histogram) -> None:
    cumulative = cumulative_distribution(bucket_histogram, 4)
    assert cumulative.tolist() == pytest.approx([0.0, 60.0, 80.0])
    padded = cumulative_distribution(bucket_histogram, 4, max_degree=4)
    assert padded.tolist() == pytest.approx([0.0, 60.0, 80.0, 80.0, 80.0])


def test_summarize_path_graph(path_adjacency) -> None:
    stats = summarize(calculate_all_distances(path_adjacency))

    assert stats.valid_connections == 3
    assert stats.invalid_connections == 3
    assert stats.discarded_self_pairs == 4
    assert stats.total_pairs == 10
    assert stats.mean == pytest.approx(4 / 3)
    assert stats.std == pytest.approx(0.4714, abs=1e-4)
    assert stats.max_distance == 2
    assert stats.percentages.tolist() == pytest.approx([0.0, 50.0, 25.0])
    assert stats.cumulative.tolist() == pytest.approx([0.0, 50.0, 75.0])
    assert stats.reachable == {6: pytest.approx(75.0), 20: pytest.approx(75.0)}


def test_reachable_within_clamps(path_adjacency) -> None:
    stats = summarize(calculate_all_distances(path_adjacency), thresholds=(1,))
    assert stats.reachable_within(0) == 0.0
    assert stats.reachable_within(1) == pytest.approx(50.0)
    assert stats.reachable_within(100) == pytest.approx(75.0)
    assert list(stats.reachable) == [1]


def test_summarize_disconnected_graph() -> None:
    result = calculate_all_distances([[], [], []])
    with pytest.warns(RuntimeWarning):
        stats = summarize(result)

    assert stats.valid_connections == 0
    assert stats.invalid_connections == 3
    assert math.isnan(stats.mean) and math.isnan(stats.std)
    assert stats.max_distance == 0
    assert stats.reachable_within(6) == 0.0
