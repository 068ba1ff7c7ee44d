"""
DegreeHistogram - node pairs grouped by their degree of separation.
"""
import numpy as np


class DegreeHistogram:
    """
    Mapping from degree of separation to the ordered list of (start, end) pairs.

    Degree 0 is the invalid bucket: pairs with no connecting path, plus
    self-pairs when they are classified as invalid. Pairs are held in three
    parallel arrays in enumeration order, so a bucket is a boolean mask away.
    """

    def __init__(self, starts, ends, degrees):
        self.starts = np.asarray(starts, dtype=np.int64)
        self.ends = np.asarray(ends, dtype=np.int64)
        self.degrees = np.asarray(degrees, dtype=np.int64)
        if not (len(self.starts) == len(self.ends) == len(self.degrees)):
            raise ValueError("starts, ends and degrees must have the same length")
        if len(self.degrees) and self.degrees.min() < 0:
            raise ValueError("Degrees must be non-negative")
        self._counts = np.bincount(self.degrees) if len(self.degrees) else np.zeros(1, dtype=np.int64)

    @classmethod
    def from_buckets(cls, buckets):
        """Build from a dict such as ``{0: [(0, 1)], 1: [(1, 2), (2, 3)]}``."""
        starts, ends, degrees = [], [], []
        for degree in sorted(buckets):
            for start, end in buckets[degree]:
                starts.append(start)
                ends.append(end)
                degrees.append(degree)
        return cls(starts, ends, degrees)

    @property
    def max_degree(self):
        """Largest degree with at least one pair (0 when empty)"""
        return len(self._counts) - 1

    def count(self, degree):
        """Number of pairs in a bucket; absent degrees have 0 pairs"""
        if degree < 0 or degree >= len(self._counts):
            return 0
        return int(self._counts[degree])

    def counts(self):
        """Bucket sizes indexed by degree, 0..max_degree"""
        return self._counts.copy()

    def __getitem__(self, degree):
        mask = self.degrees == degree
        return [(int(s), int(e)) for s, e in zip(self.starts[mask], self.ends[mask])]

    def __contains__(self, degree):
        return self.count(degree) > 0

    def __len__(self):
        return len(self.degrees)

    def keys(self):
        return [int(d) for d in np.flatnonzero(self._counts)]

    def items(self):
        return [(d, self[d]) for d in self.keys()]

    def to_dict(self):
        return dict(self.items())

    def __str__(self):
        sizes = ", ".join(f"{d}: {self.count(d)}" for d in self.keys())
        return f"DegreeHistogram({{{sizes}}})"

    def __repr__(self):
        return self.__str__()
