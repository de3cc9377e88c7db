# setsim/core/hashing.py
"""
Universal hash family and MinHash signature generation.

Each hash function ``h_i(x) = (a_i * x + b_i) mod LARGE_PRIME`` stands in for a
random permutation of the element universe. The probability that two sets share
the same minimum under one such function equals their Jaccard similarity, so the
fraction of agreeing positions across ``sig_size`` functions estimates it.
"""
from __future__ import annotations

import hashlib
import random
import secrets
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from ..engine.errors import PreconditionError, require

# Shared by the signature and band stages; must not change between
# signatures that are compared with each other.
LARGE_PRIME = 433494437

# Sentinel for positions no element has touched (empty input).
MAX_SIGNATURE_VALUE = int(np.iinfo(np.int64).max)

# Upper bound for the domain size so that a * (x mod P) + b fits in int64.
MAX_DOMAIN_SIZE = 2**31 - 1

HASH_METHODS = ("blake2b", "md5", "sha1", "sha256")


@dataclass(frozen=True, eq=False)
class UniversalHashFamily:
    """
    Immutable set of ``sig_size`` linear hash functions over a domain of size ``n``.

    Coefficients are drawn once at construction. Instances are shared read-only
    by concurrent signature tasks, so nothing here is ever mutated after build.
    """
    domain_size: int
    multipliers: np.ndarray
    offsets: np.ndarray

    @classmethod
    def build(cls, domain_size: int, signature_length: int,
              seed: Optional[int] = None) -> "UniversalHashFamily":
        """
        Draw ``signature_length`` coefficient pairs for a domain of ``domain_size``.

        Multipliers are uniform in [1, n-1], offsets uniform in [0, n-1]. The
        source is ``secrets.SystemRandom`` unless a seed is given, in which case
        a seeded ``random.Random`` is used for reproducibility.
        """
        require(domain_size >= 2,
                f"domain size must be >= 2, got {domain_size}",
                "domain_size", domain_size)
        require(domain_size <= MAX_DOMAIN_SIZE,
                f"domain size must be <= {MAX_DOMAIN_SIZE}, got {domain_size}",
                "domain_size", domain_size)
        require(signature_length > 0,
                f"signature length must be > 0, got {signature_length}",
                "signature_length", signature_length)

        rnd = secrets.SystemRandom() if seed is None else random.Random(seed)
        multipliers = np.array(
            [1 + rnd.randrange(domain_size - 1) for _ in range(signature_length)],
            dtype=np.int64,
        )
        offsets = np.array(
            [rnd.randrange(domain_size) for _ in range(signature_length)],
            dtype=np.int64,
        )
        multipliers.setflags(write=False)
        offsets.setflags(write=False)
        return cls(domain_size=domain_size, multipliers=multipliers, offsets=offsets)

    @property
    def signature_length(self) -> int:
        return int(self.multipliers.shape[0])

    def hash_element(self, x: int) -> np.ndarray:
        """Apply every hash function to one element."""
        reduced = int(x) % LARGE_PRIME
        return (self.multipliers * reduced + self.offsets) % LARGE_PRIME


class SignatureGenerator:
    """
    Folds a collection into a fixed-length min-aggregated signature.

    Calling the generator with the same input twice yields identical
    signatures; the only randomness is in the family's coefficients.
    """

    def __init__(self, family: UniversalHashFamily):
        self.family = family

    @classmethod
    def create(cls, domain_size: int, signature_length: int,
               seed: Optional[int] = None) -> "SignatureGenerator":
        return cls(UniversalHashFamily.build(domain_size, signature_length, seed=seed))

    @property
    def signature_length(self) -> int:
        return self.family.signature_length

    def signature_of(self, elements: Iterable[int]) -> np.ndarray:
        """
        Compute the MinHash signature of ``elements``.

        An empty input yields a signature made entirely of MAX_SIGNATURE_VALUE.
        """
        signature = np.full(self.signature_length, MAX_SIGNATURE_VALUE, dtype=np.int64)
        for x in elements:
            np.minimum(signature, self.family.hash_element(x), out=signature)
        signature.setflags(write=False)
        return signature

    def __call__(self, elements: Iterable[int]) -> np.ndarray:
        return self.signature_of(elements)


def check_hash_method(method: str) -> None:
    if method not in HASH_METHODS:
        raise PreconditionError(
            f"unknown hash method {method!r}; expected one of {', '.join(HASH_METHODS)}",
            parameter="hash_method", value=method,
        )


def hash_token(token: str, method: str = "blake2b") -> int:
    """
    Map a text token to a non-negative 31-bit integer.

    Used to turn shingles into numeric elements before signature generation.
    """
    check_hash_method(method)
    data = token.encode("utf-8")
    if method == "blake2b":
        digest = hashlib.blake2b(data, digest_size=8).digest()
    else:
        digest = hashlib.new(method, data).digest()
    return int.from_bytes(digest[:4], "little") & 0x7FFFFFFF


def hash_tokens(tokens: Sequence[str], method: str = "blake2b") -> List[int]:
    """Hash every token with :func:`hash_token`, preserving order."""
    return [hash_token(t, method) for t in tokens]
