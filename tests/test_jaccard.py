"""
Tests for exact Jaccard similarity.
"""

import math

import numpy as np
import pytest

from setsim.core.jaccard import (
    JaccardSetSimilarity,
    JaccardTokenSimilarity,
    jaccard_index,
)


class TestJaccardIndex:
    """Test the ratio helper."""

    def test_ratio(self):
        assert jaccard_index(3, 4) == 0.75

    def test_zero_intersection(self):
        assert jaccard_index(0, 5) == 0.0

    def test_empty_union_is_nan(self):
        """0/0 is reported, not raised."""
        assert math.isnan(jaccard_index(0, 0))


class TestJaccardSetSimilarity:
    """Test the numeric-set variant."""

    def setup_method(self):
        self.j = JaccardSetSimilarity()

    def test_partial_overlap(self):
        # intersection={2,3} -> 2, union={1,2,3,4} -> 4
        assert self.j.calculate({1, 2, 3}, {2, 3, 4}) == 0.5

    @pytest.mark.parametrize("values", [{1}, {1, 2, 3}, set(range(100))])
    def test_identical(self, values):
        assert self.j.calculate(values, set(values)) == 1.0

    def test_disjoint(self):
        assert self.j.calculate({1, 2}, {3, 4}) == 0.0

    def test_symmetric(self):
        a, b = {1, 2, 3, 8}, {2, 3, 4}
        assert self.j.calculate(a, b) == self.j.calculate(b, a)

    def test_duplicates_ignored(self):
        assert self.j.calculate([1, 1, 2], [2, 2, 1]) == 1.0

    def test_counts(self):
        assert self.j.counts([1, 2, 3], [3, 4]) == (1, 4)

    def test_both_empty(self):
        assert math.isnan(self.j.calculate([], []))

    def test_one_empty(self):
        assert self.j.calculate([], [1, 2]) == 0.0


class TestJaccardTokenSimilarity:
    """Test the token-sequence variant."""

    def setup_method(self):
        self.j = JaccardTokenSimilarity()

    def test_partial_overlap(self):
        assert self.j.calculate(["ab", "bc", "cd"], ["bc", "cd", "de"]) == 0.5

    def test_identical(self):
        assert self.j.calculate(["ab", "bc"], ["ab", "bc"]) == 1.0

    def test_disjoint(self):
        assert self.j.calculate(["ab"], ["cd"]) == 0.0

    def test_frequencies_follow_shared_vocabulary(self):
        freq1, freq2 = self.j.frequencies(["ab", "ab", "bc"], ["bc", "cd"])

        # vocabulary order: ab, bc, cd
        assert freq1.tolist() == [2, 1, 0]
        assert freq2.tolist() == [0, 1, 1]
        assert freq1.dtype == np.int64

    def test_multiplicity_is_ignored(self):
        """
        Occurrence counts are tracked but only presence counts toward the index.
        Repeats do not add weight; this is plain set Jaccard over distinct tokens.
        """
        assert self.j.calculate(["ab", "ab", "ab", "bc"], ["ab", "bc"]) == 1.0
        assert self.j.counts(["ab", "ab", "cd"], ["ab"]) == (1, 2)

    def test_both_empty(self):
        assert math.isnan(self.j.calculate([], []))

    def test_symmetric(self):
        a, b = ["ab", "bc", "xy"], ["bc", "zz"]
        assert self.j.calculate(a, b) == self.j.calculate(b, a)
