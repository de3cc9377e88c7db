"""
Exact Jaccard pipelines.
"""

import logging
from typing import Collection, Hashable, Optional

from ..core.jaccard import JaccardSetSimilarity, JaccardTokenSimilarity
from ..shingles import KShingler, Tokenizer
from .base import Similarity

logger = logging.getLogger(__name__)


class JaccardNumericSimilarity(Similarity[Collection[Hashable]]):
    """Exact Jaccard over numeric collections. Synchronous, no pool."""

    name = "jaccard"

    def __init__(self):
        self._engine = JaccardSetSimilarity()

    def calculate(self, first, second) -> float:
        return self._engine.calculate(first, second)


class JaccardStringSimilarity(Similarity[str]):
    """Exact Jaccard over the shingles of two texts."""

    name = "jaccard"

    def __init__(self, tokenizer: Optional[Tokenizer] = None, shingle_length: int = 2):
        self.tokenizer = tokenizer or KShingler(shingle_length)
        self._engine = JaccardTokenSimilarity()

    def calculate(self, first: str, second: str) -> float:
        shingles1 = self.tokenizer(first)
        shingles2 = self.tokenizer(second)
        logger.debug(f"Comparing {len(shingles1)} and {len(shingles2)} shingles")
        return self._engine.calculate(shingles1, shingles2)
