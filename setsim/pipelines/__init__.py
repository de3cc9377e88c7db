"""Similarity pipelines for numeric collections and text."""

from .base import Similarity, distinct_count
from .jaccard import JaccardNumericSimilarity, JaccardStringSimilarity
from .minhash import MinHashSetSimilarity, MinHashStringSimilarity
from .lsh import LSHSetSimilarity, LSHStringSimilarity, lsh_parameters, rows_per_band

__all__ = [
    "Similarity",
    "distinct_count",
    "JaccardNumericSimilarity",
    "JaccardStringSimilarity",
    "MinHashSetSimilarity",
    "MinHashStringSimilarity",
    "LSHSetSimilarity",
    "LSHStringSimilarity",
    "lsh_parameters",
    "rows_per_band",
]
