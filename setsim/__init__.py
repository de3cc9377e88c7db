"""setsim - Jaccard, MinHash and LSH similarity for sets and strings."""

__version__ = "0.1.0"

from .similarity import jaccard, minhash, lsh, jaccard_index, signature_index, is_candidate_pair
from .factories import JaccardFactory, MinHashFactory, LSHFactory
from .engine.errors import SimilarityError, PreconditionError, TaskExecutionError

__all__ = [
    "jaccard",
    "minhash",
    "lsh",
    "jaccard_index",
    "signature_index",
    "is_candidate_pair",
    "JaccardFactory",
    "MinHashFactory",
    "LSHFactory",
    "SimilarityError",
    "PreconditionError",
    "TaskExecutionError",
    "__version__",
]
