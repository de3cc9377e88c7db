# setsim/core/bands.py
"""
Band partitioning of MinHash signatures for LSH candidate filtering.
"""
from __future__ import annotations

from typing import Sequence, Tuple

from ..engine.errors import require
from .hashing import LARGE_PRIME


class BandPartitioner:
    """
    Folds a signature into ``band_count`` band fingerprints.

    Position ``i`` belongs to band ``min(i // bucket_size, band_count - 1)`` with
    ``bucket_size = len(signature) // band_count``, so the last band absorbs the
    remainder. Each fingerprint is the sum of ``signature[i] * LARGE_PRIME`` over
    its positions, kept as an unbounded Python int.

    ``rows`` is recorded but does not reduce the fingerprints.
    """

    def __init__(self, band_count: int, rows: int = 0):
        require(band_count > 0, f"band count must be > 0, got {band_count}",
                "band_count", band_count)
        self.band_count = band_count
        self.rows = rows

    def bands_of(self, signature: Sequence[int]) -> Tuple[int, ...]:
        sig_len = len(signature)
        require(sig_len >= self.band_count,
                f"signature length {sig_len} is shorter than band count {self.band_count}",
                "signature_length", sig_len)
        bucket_size = sig_len // self.band_count
        bands = [0] * self.band_count
        for i, value in enumerate(signature):
            band = min(i // bucket_size, self.band_count - 1)
            bands[band] += int(value) * LARGE_PRIME
        return tuple(bands)

    def __call__(self, signature: Sequence[int]) -> Tuple[int, ...]:
        return self.bands_of(signature)
