"""
Base classes for similarity pipelines.
"""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Iterable, TypeVar

T = TypeVar('T')


class Similarity(ABC, Generic[T]):
    """A pairwise similarity measure."""

    name: str = "similarity"

    @abstractmethod
    def calculate(self, first: T, second: T) -> float:
        """Return the similarity index of two inputs."""


def distinct_count(first: Iterable[Hashable], second: Iterable[Hashable]) -> int:
    """Number of distinct elements across both inputs (the derived domain size)."""
    union = set(first)
    union.update(second)
    return len(union)
