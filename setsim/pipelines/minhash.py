"""
MinHash pipelines: compare two signatures drawn from one hash family.
"""

import logging
from typing import Collection, Optional

from ..core.candidates import signature_index
from ..core.hashing import SignatureGenerator, check_hash_method, hash_tokens
from ..engine.coordinator import ExecutionCoordinator
from ..engine.errors import require
from ..shingles import KShingler, Tokenizer
from .base import Similarity, distinct_count

logger = logging.getLogger(__name__)

DEFAULT_SIGNATURE_SIZE = 100


class MinHashSetSimilarity(Similarity[Collection[int]]):
    """
    MinHash estimate of the Jaccard index for numeric collections.

    Args:
        coordinator: Receives the two concurrent signature tasks
        domain_size: Number of distinct elements across both inputs
        signature_size: Length of the generated signatures
        seed: Optional seed for reproducible coefficients
    """

    name = "minhash"

    def __init__(self, coordinator: ExecutionCoordinator, domain_size: int,
                 signature_size: int = DEFAULT_SIGNATURE_SIZE,
                 seed: Optional[int] = None):
        self.coordinator = coordinator
        self.signatures = SignatureGenerator.create(domain_size, signature_size, seed=seed)

    def calculate(self, first, second) -> float:
        sig1, sig2 = self.coordinator.map_pair("signatures", self.signatures, first, second)
        return signature_index(sig1, sig2)


class MinHashStringSimilarity(Similarity[str]):
    """
    MinHash estimate over the shingles of two texts.

    Shingles are produced concurrently, hashed to integers with
    ``hash_method`` and then compared like numeric sets. When ``domain_size``
    is omitted it is the number of distinct hashed shingles.
    """

    name = "minhash"

    def __init__(self, coordinator: ExecutionCoordinator,
                 signature_size: int = DEFAULT_SIGNATURE_SIZE,
                 hash_method: str = "blake2b",
                 tokenizer: Optional[Tokenizer] = None,
                 shingle_length: int = 2,
                 domain_size: Optional[int] = None,
                 seed: Optional[int] = None):
        require(signature_size > 0, f"signature size must be > 0, got {signature_size}",
                "signature_size", signature_size)
        self.coordinator = coordinator
        self.signature_size = signature_size
        self.hash_method = hash_method
        self.tokenizer = tokenizer or KShingler(shingle_length)
        self.domain_size = domain_size
        self.seed = seed
        check_hash_method(hash_method)

    def calculate(self, first: str, second: str) -> float:
        shingles1, shingles2 = self.coordinator.map_pair("shingles", self.tokenizer, first, second)
        elements1 = hash_tokens(shingles1, self.hash_method)
        elements2 = hash_tokens(shingles2, self.hash_method)
        n = self.domain_size if self.domain_size is not None else distinct_count(elements1, elements2)
        logger.debug(f"MinHash over text: domain_size={n}, signature_size={self.signature_size}")
        inner = MinHashSetSimilarity(self.coordinator, n, self.signature_size, seed=self.seed)
        return inner.calculate(elements1, elements2)
