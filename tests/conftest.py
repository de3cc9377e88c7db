"""Shared fixtures for setsim tests."""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest


@pytest.fixture
def pool():
    """A caller-owned worker pool, shut down after the test."""
    executor = ThreadPoolExecutor(max_workers=4)
    yield executor
    executor.shutdown(wait=True)


@pytest.fixture
def spread_sets():
    """
    Two sets of widely spread integers with Jaccard index 0.5.

    1000 distinct values; the first 750 and the last 750 overlap in 500.
    """
    values = random.Random(7).sample(range(10**9), 1000)
    return set(values[:750]), set(values[250:])
