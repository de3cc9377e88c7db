"""Core similarity algorithms: hashing, banding, exact Jaccard."""

from .hashing import (
    LARGE_PRIME,
    MAX_SIGNATURE_VALUE,
    SignatureGenerator,
    UniversalHashFamily,
    hash_token,
    hash_tokens,
)
from .bands import BandPartitioner
from .candidates import is_candidate_pair, signature_index
from .jaccard import JaccardSetSimilarity, JaccardTokenSimilarity, jaccard_index

__all__ = [
    "LARGE_PRIME",
    "MAX_SIGNATURE_VALUE",
    "SignatureGenerator",
    "UniversalHashFamily",
    "hash_token",
    "hash_tokens",
    "BandPartitioner",
    "is_candidate_pair",
    "signature_index",
    "JaccardSetSimilarity",
    "JaccardTokenSimilarity",
    "jaccard_index",
]
