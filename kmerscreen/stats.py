"""
Summary statistics of one k-mer index and overlap between two.
"""

from collections import namedtuple


class KmerStats(namedtuple("KmerStats", ["unique", "redundant"])):
    """Number of distinct k-mers and total number of k-mer occurrences."""

    __slots__ = ()

    @classmethod
    def from_index(cls, index):
        return cls(len(index), sum(index.values()))

    def __str__(self):
        return "unique k-mers: {}, redundant k-mers: {}".format(self.unique, self.redundant)


Intersection = namedtuple("Intersection", ["unique", "redundant"])


def intersect_keys(left, right):
    """Number of k-mers present in both indexes."""
    return len(left.keys() & right.keys())


def intersect_counters(left, right):
    """Size of the multiset intersection of two indexes.

    Every shared k-mer contributes the smaller of its two counts.
    """
    if len(right) < len(left):
        left, right = right, left

    return sum(min(count, right[kmer]) for kmer, count in left.items() if kmer in right)


def intersect(left, right):
    return Intersection(intersect_keys(left, right), intersect_counters(left, right))
