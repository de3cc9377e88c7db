"""
LSH pipelines: band-matching pre-filter in front of an exact Jaccard.

Per call: signatures for both inputs are computed concurrently and joined,
then bands for both signatures are computed concurrently and joined. If no
band matches, the result is 0.0 and the exact comparison is skipped.
"""

import logging
import math
from typing import Collection, Optional, Tuple

from ..core.bands import BandPartitioner
from ..core.candidates import is_candidate_pair
from ..core.hashing import SignatureGenerator, check_hash_method, hash_tokens
from ..core.jaccard import JaccardSetSimilarity, JaccardTokenSimilarity
from ..engine.coordinator import ExecutionCoordinator
from ..engine.errors import require
from ..shingles import KShingler, Tokenizer
from .base import Similarity, distinct_count

logger = logging.getLogger(__name__)

DEFAULT_BANDS = 20
DEFAULT_ROWS = 5
DEFAULT_THRESHOLD = 0.5


def rows_per_band(bands: int, threshold: float) -> int:
    """
    Rows per band derived from the band count and threshold.

    R = ceil(log(1/b) / log(s)) + 1. This is not the textbook
    s = (1/b)^(1/r) relation; it is kept as-is for compatibility.
    """
    require(bands > 0, f"band count must be > 0, got {bands}", "bands", bands)
    require(0.0 < threshold < 1.0,
            f"threshold must be strictly between 0 and 1, got {threshold}",
            "threshold", threshold)
    return int(math.ceil(math.log(1.0 / bands) / math.log(threshold))) + 1


def lsh_parameters(bands: int, threshold: float) -> Tuple[int, int]:
    """Return (rows_per_band, signature_size) for the given bands and threshold."""
    rows = rows_per_band(bands, threshold)
    return rows, rows * bands


class LSHSetSimilarity(Similarity[Collection[int]]):
    """
    LSH-filtered Jaccard index for numeric collections.

    Args:
        coordinator: Receives the concurrent signature and band tasks
        domain_size: Number of distinct elements across both inputs
        bands: Number of bands
        rows: Declared row count; it does not enter the derivation
        threshold: Value in (0, 1) balancing false positives and negatives
        seed: Optional seed for reproducible coefficients
    """

    name = "lsh"

    def __init__(self, coordinator: ExecutionCoordinator, domain_size: int,
                 bands: int = DEFAULT_BANDS, rows: int = DEFAULT_ROWS,
                 threshold: float = DEFAULT_THRESHOLD,
                 seed: Optional[int] = None):
        self.coordinator = coordinator
        self.rows_per_band, self.signature_size = lsh_parameters(bands, threshold)
        logger.debug(
            f"LSH parameters: bands={bands}, R={self.rows_per_band}, "
            f"signature_size={self.signature_size}"
        )
        self.signatures = SignatureGenerator.create(domain_size, self.signature_size, seed=seed)
        self.bands = BandPartitioner(bands, rows)
        self.jaccard = JaccardSetSimilarity()

    def is_candidate_pair(self, first, second) -> bool:
        sig1, sig2 = self.coordinator.map_pair("signatures", self.signatures, first, second)
        bands1, bands2 = self.coordinator.map_pair("bands", self.bands, sig1, sig2)
        candidate = is_candidate_pair(bands1, bands2)
        logger.debug(f"Candidate pair: {candidate}")
        return candidate

    def calculate(self, first, second) -> float:
        if not self.is_candidate_pair(first, second):
            return 0.0
        return self.jaccard.calculate(first, second)


class LSHStringSimilarity(Similarity[str]):
    """
    LSH-filtered Jaccard index over the shingles of two texts.

    Banding runs on hashed shingles; a candidate pair is then scored with the
    exact token Jaccard on the shingles themselves.
    """

    name = "lsh"

    def __init__(self, coordinator: ExecutionCoordinator,
                 bands: int = DEFAULT_BANDS, rows: int = DEFAULT_ROWS,
                 threshold: float = DEFAULT_THRESHOLD,
                 hash_method: str = "blake2b",
                 tokenizer: Optional[Tokenizer] = None,
                 shingle_length: int = 2,
                 domain_size: Optional[int] = None,
                 seed: Optional[int] = None):
        lsh_parameters(bands, threshold)
        check_hash_method(hash_method)
        self.coordinator = coordinator
        self.band_count = bands
        self.rows = rows
        self.threshold = threshold
        self.hash_method = hash_method
        self.tokenizer = tokenizer or KShingler(shingle_length)
        self.domain_size = domain_size
        self.seed = seed
        self.jaccard = JaccardTokenSimilarity()

    def calculate(self, first: str, second: str) -> float:
        shingles1, shingles2 = self.coordinator.map_pair("shingles", self.tokenizer, first, second)
        elements1 = hash_tokens(shingles1, self.hash_method)
        elements2 = hash_tokens(shingles2, self.hash_method)
        n = self.domain_size if self.domain_size is not None else distinct_count(elements1, elements2)
        inner = LSHSetSimilarity(self.coordinator, n, self.band_count, self.rows,
                                 self.threshold, seed=self.seed)
        if not inner.is_candidate_pair(elements1, elements2):
            return 0.0
        return self.jaccard.calculate(shingles1, shingles2)
