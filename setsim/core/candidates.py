# setsim/core/candidates.py
"""Signature and band comparisons."""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def signature_index(signature1: Sequence[int], signature2: Sequence[int]) -> float:
    """
    Fraction of positions where two signatures agree exactly.

    Two empty signatures give 0/0, reported as NaN like ``jaccard_index``.
    """
    sig1 = np.asarray(signature1)
    sig2 = np.asarray(signature2)
    if sig1.shape != sig2.shape:
        raise ValueError(
            f"signature length mismatch: {sig1.shape[0]} != {sig2.shape[0]}"
        )
    if sig1.shape[0] == 0:
        return math.nan
    return float(np.count_nonzero(sig1 == sig2)) / float(sig1.shape[0])


def is_candidate_pair(bands1: Sequence[int], bands2: Sequence[int]) -> bool:
    """
    True if any band index holds equal fingerprints in both vectors.

    Necessary but not sufficient for high similarity: a True result only means
    the pair is worth an exact comparison.
    """
    if len(bands1) != len(bands2):
        raise ValueError(f"band count mismatch: {len(bands1)} != {len(bands2)}")
    return any(a == b for a, b in zip(bands1, bands2))
