# setsim/core/jaccard.py
"""
Exact Jaccard similarity.

J(A, B) = |A ∩ B| / |A ∪ B| over distinct elements. Two empty inputs give 0/0,
which is reported as NaN instead of raising; callers decide what it means.
"""
from __future__ import annotations

import math
from typing import Dict, Hashable, Iterable, Sequence, Tuple

import numpy as np


def jaccard_index(intersection_count: int, union_count: int) -> float:
    """Return intersection / union as a float; 0/0 is NaN."""
    if union_count == 0:
        return math.nan
    return float(intersection_count) / float(union_count)


class JaccardSetSimilarity:
    """Jaccard index over two numeric collections."""

    def counts(self, c1: Iterable[Hashable], c2: Iterable[Hashable]) -> Tuple[int, int]:
        set1 = set(c1)
        set2 = set(c2)
        return len(set1 & set2), len(set1 | set2)

    def calculate(self, c1: Iterable[Hashable], c2: Iterable[Hashable]) -> float:
        intersection, union = self.counts(c1, c2)
        return jaccard_index(intersection, union)


class JaccardTokenSimilarity:
    """
    Jaccard index over two token sequences (e.g. shingles).

    Occurrences are tallied into dense frequency vectors over a shared
    vocabulary, but only presence counts toward the index: a token repeated
    five times weighs the same as one seen once.
    """

    def frequencies(self, tokens1: Sequence[str],
                    tokens2: Sequence[str]) -> Tuple[np.ndarray, np.ndarray]:
        positions: Dict[str, int] = {}
        for token in tokens1:
            positions.setdefault(token, len(positions))
        for token in tokens2:
            positions.setdefault(token, len(positions))

        freq1 = np.zeros(len(positions), dtype=np.int64)
        freq2 = np.zeros(len(positions), dtype=np.int64)
        for token in tokens1:
            freq1[positions[token]] += 1
        for token in tokens2:
            freq2[positions[token]] += 1
        return freq1, freq2

    def counts(self, tokens1: Sequence[str], tokens2: Sequence[str]) -> Tuple[int, int]:
        freq1, freq2 = self.frequencies(tokens1, tokens2)
        present1 = freq1 > 0
        present2 = freq2 > 0
        intersection = int(np.count_nonzero(present1 & present2))
        union = int(np.count_nonzero(present1 | present2))
        return intersection, union

    def calculate(self, tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
        intersection, union = self.counts(tokens1, tokens2)
        return jaccard_index(intersection, union)
