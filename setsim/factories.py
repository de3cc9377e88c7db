"""
Fluent builders for similarity calculations, e.g.

    MinHashFactory().with_signature_size(200).of({1, 2, 3}, {2, 3, 4})

Each ``of`` call draws fresh hash coefficients. Calls on one factory are
serialized.
"""

import threading
from concurrent.futures import Executor
from typing import Optional

from .config import SimilarityConfig
from .shingles import DEFAULT_SHINGLE_LENGTH
from .similarity import Input, jaccard, lsh, minhash


class JaccardFactory:
    """Builder for exact Jaccard comparisons."""

    def __init__(self):
        self.k = DEFAULT_SHINGLE_LENGTH
        self._lock = threading.Lock()

    def with_shingle_length(self, shingle_length: int) -> "JaccardFactory":
        """Length of n-gram shingles used for comparison (strings only)."""
        self.k = shingle_length
        return self

    @classmethod
    def from_config(cls, config: SimilarityConfig) -> "JaccardFactory":
        return cls().with_shingle_length(config.shingle_length)

    def of(self, first: Input, second: Input) -> float:
        with self._lock:
            return jaccard(first, second, shingle_length=self.k)


class MinHashFactory:
    """Builder for MinHash comparisons."""

    def __init__(self):
        self.k = DEFAULT_SHINGLE_LENGTH
        self.n: Optional[int] = None
        self.sig_size = 100
        self.hash_method = "blake2b"
        self.executor: Optional[Executor] = None
        self.max_workers: Optional[int] = None
        self._lock = threading.Lock()

    def with_shingle_length(self, shingle_length: int) -> "MinHashFactory":
        """Length of n-gram shingles used for comparison (strings only)."""
        self.k = shingle_length
        return self

    def with_number_of_elements(self, element_count: int) -> "MinHashFactory":
        """
        Number of distinct elements in both inputs. For {4, 5, 6, 7, 8} and
        {7, 8, 9, 10} this is 7. Derived per call if not given.
        """
        self.n = element_count
        return self

    def with_signature_size(self, signature_size: int) -> "MinHashFactory":
        """Length of the signatures compared to estimate similarity."""
        self.sig_size = signature_size
        return self

    def with_hash_method(self, hash_method: str) -> "MinHashFactory":
        """Hash used to map shingles to integers (strings only)."""
        self.hash_method = hash_method
        return self

    def with_executor(self, executor: Executor) -> "MinHashFactory":
        """Pool for shingle and signature tasks. It is not shut down here."""
        self.executor = executor
        return self

    @classmethod
    def from_config(cls, config: SimilarityConfig) -> "MinHashFactory":
        factory = (cls()
                   .with_shingle_length(config.shingle_length)
                   .with_signature_size(config.signature_size)
                   .with_hash_method(config.hash_method))
        factory.n = config.domain_size
        factory.max_workers = config.max_workers
        return factory

    def of(self, first: Input, second: Input) -> float:
        with self._lock:
            return minhash(
                first, second, self.sig_size, self.n, self.executor,
                shingle_length=self.k, hash_method=self.hash_method,
                max_workers=self.max_workers,
            )


class LSHFactory:
    """Builder for LSH-filtered comparisons."""

    def __init__(self):
        self.k = DEFAULT_SHINGLE_LENGTH
        self.n: Optional[int] = None
        self.b = 20
        self.r = 5
        self.s = 0.5
        self.hash_method = "blake2b"
        self.executor: Optional[Executor] = None
        self.max_workers: Optional[int] = None
        self._lock = threading.Lock()

    def with_shingle_length(self, shingle_length: int) -> "LSHFactory":
        """Length of n-gram shingles used for signatures (strings only)."""
        self.k = shingle_length
        return self

    def with_number_of_elements(self, element_count: int) -> "LSHFactory":
        """Number of distinct elements in both inputs. Derived per call if not given."""
        self.n = element_count
        return self

    def with_number_of_bands(self, band_count: int) -> "LSHFactory":
        self.b = band_count
        return self

    def with_number_of_rows(self, row_count: int) -> "LSHFactory":
        self.r = row_count
        return self

    def with_threshold(self, threshold: float) -> "LSHFactory":
        """Threshold in (0, 1) balancing false positives and false negatives."""
        self.s = threshold
        return self

    def with_hash_method(self, hash_method: str) -> "LSHFactory":
        self.hash_method = hash_method
        return self

    def with_executor(self, executor: Executor) -> "LSHFactory":
        """Pool for shingle, signature and band tasks. It is not shut down here."""
        self.executor = executor
        return self

    @classmethod
    def from_config(cls, config: SimilarityConfig) -> "LSHFactory":
        factory = (cls()
                   .with_shingle_length(config.shingle_length)
                   .with_number_of_bands(config.bands)
                   .with_number_of_rows(config.rows)
                   .with_threshold(config.threshold)
                   .with_hash_method(config.hash_method))
        factory.n = config.domain_size
        factory.max_workers = config.max_workers
        return factory

    def of(self, first: Input, second: Input) -> float:
        with self._lock:
            return lsh(
                first, second, self.b, self.r, self.s, self.n, self.executor,
                shingle_length=self.k, hash_method=self.hash_method,
                max_workers=self.max_workers,
            )


def factory_for(method: str, config: Optional[SimilarityConfig] = None):
    """Return a configured factory for 'jaccard', 'minhash' or 'lsh'."""
    config = config or SimilarityConfig()
    factories = {
        "jaccard": JaccardFactory,
        "minhash": MinHashFactory,
        "lsh": LSHFactory,
    }
    if method not in factories:
        raise ValueError(f"Unknown method: {method}")
    return factories[method].from_config(config)
