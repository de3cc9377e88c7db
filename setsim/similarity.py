# setsim/similarity.py
"""
Public similarity operations.

``jaccard`` is exact and synchronous. ``minhash`` and ``lsh`` build a fresh,
randomly drawn hash family per call and compute per-input work concurrently
on a worker pool. Pass ``executor`` to reuse a pool you own; it is left
running. Without one, a pool is created for the call and shut down before
returning.

All three accept either two numeric collections or two strings. Strings are
split into character shingles first.

Two empty inputs give a Jaccard index of 0/0, returned as NaN.
"""
from __future__ import annotations

from concurrent.futures import Executor
from typing import Any, Collection, Optional, Union

from .core.candidates import is_candidate_pair, signature_index
from .core.jaccard import jaccard_index
from .engine.coordinator import ExecutionCoordinator
from .engine.errors import PreconditionError
from .pipelines.base import Similarity, distinct_count
from .pipelines.jaccard import JaccardNumericSimilarity, JaccardStringSimilarity
from .pipelines.lsh import (
    DEFAULT_BANDS,
    DEFAULT_ROWS,
    DEFAULT_THRESHOLD,
    LSHSetSimilarity,
    LSHStringSimilarity,
)
from .pipelines.minhash import (
    DEFAULT_SIGNATURE_SIZE,
    MinHashSetSimilarity,
    MinHashStringSimilarity,
)
from .shingles import DEFAULT_SHINGLE_LENGTH, Tokenizer

Input = Union[str, Collection[Any]]

__all__ = [
    "jaccard",
    "minhash",
    "lsh",
    "jaccard_index",
    "signature_index",
    "is_candidate_pair",
]


def _is_text(first: Input, second: Input) -> bool:
    first_text = isinstance(first, str)
    second_text = isinstance(second, str)
    if first_text != second_text:
        raise PreconditionError(
            "cannot compare a string with a numeric collection",
            parameter="inputs",
            value=(type(first).__name__, type(second).__name__),
        )
    return first_text


def _run(coordinator: ExecutionCoordinator, pipeline: Similarity, first: Input, second: Input) -> float:
    with coordinator:
        return pipeline.calculate(first, second)


def jaccard(first: Input, second: Input, *,
            shingle_length: int = DEFAULT_SHINGLE_LENGTH,
            tokenizer: Optional[Tokenizer] = None) -> float:
    """Exact Jaccard index of two collections or two strings."""
    if _is_text(first, second):
        return JaccardStringSimilarity(tokenizer, shingle_length).calculate(first, second)
    return JaccardNumericSimilarity().calculate(first, second)


def minhash(first: Input, second: Input,
            signature_size: int = DEFAULT_SIGNATURE_SIZE,
            domain_size: Optional[int] = None,
            executor: Optional[Executor] = None, *,
            shingle_length: int = DEFAULT_SHINGLE_LENGTH,
            hash_method: str = "blake2b",
            tokenizer: Optional[Tokenizer] = None,
            max_workers: Optional[int] = None,
            seed: Optional[int] = None) -> float:
    """
    MinHash estimate of the Jaccard index.

    ``domain_size`` defaults to the number of distinct elements across both
    inputs. Raises PreconditionError for invalid parameters and
    TaskExecutionError if a worker task fails.
    """
    coordinator = ExecutionCoordinator(executor, max_workers)
    if _is_text(first, second):
        pipeline: Similarity = MinHashStringSimilarity(
            coordinator, signature_size, hash_method, tokenizer, shingle_length,
            domain_size, seed=seed,
        )
    else:
        n = domain_size if domain_size is not None else distinct_count(first, second)
        pipeline = MinHashSetSimilarity(coordinator, n, signature_size, seed=seed)
    return _run(coordinator, pipeline, first, second)


def lsh(first: Input, second: Input,
        bands: int = DEFAULT_BANDS,
        rows: int = DEFAULT_ROWS,
        threshold: float = DEFAULT_THRESHOLD,
        domain_size: Optional[int] = None,
        executor: Optional[Executor] = None, *,
        shingle_length: int = DEFAULT_SHINGLE_LENGTH,
        hash_method: str = "blake2b",
        tokenizer: Optional[Tokenizer] = None,
        max_workers: Optional[int] = None,
        seed: Optional[int] = None) -> float:
    """
    Jaccard index behind an LSH pre-filter.

    Returns 0.0 without an exact comparison when no band matches; otherwise
    returns the exact Jaccard index.
    """
    coordinator = ExecutionCoordinator(executor, max_workers)
    if _is_text(first, second):
        pipeline: Similarity = LSHStringSimilarity(
            coordinator, bands, rows, threshold, hash_method, tokenizer,
            shingle_length, domain_size, seed=seed,
        )
    else:
        n = domain_size if domain_size is not None else distinct_count(first, second)
        pipeline = LSHSetSimilarity(coordinator, n, bands, rows, threshold, seed=seed)
    return _run(coordinator, pipeline, first, second)
