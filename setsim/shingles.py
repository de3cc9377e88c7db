# setsim/shingles.py
"""
Character k-shingles for text similarity.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from .engine.errors import require

Tokenizer = Callable[[str], Sequence[str]]

DEFAULT_SHINGLE_LENGTH = 2


class KShingler:
    """
    Splits text into contiguous character n-grams of length ``k``.

    Shingles are returned in order of first occurrence, without duplicates.
    A non-empty text shorter than ``k`` becomes a single shingle; an empty
    text has none.
    """

    def __init__(self, k: int = DEFAULT_SHINGLE_LENGTH):
        require(k >= 1, f"shingle length must be >= 1, got {k}", "shingle_length", k)
        self.k = k

    def shingles(self, text: str) -> List[str]:
        if not text:
            return []
        if len(text) < self.k:
            return [text]
        seen: Dict[str, None] = {}
        for i in range(len(text) - self.k + 1):
            seen.setdefault(text[i:i + self.k], None)
        return list(seen)

    def __call__(self, text: str) -> List[str]:
        return self.shingles(text)
