"""
Tests for the universal hash family and signature generation.
"""

import numpy as np
import pytest

from setsim.core.hashing import (
    LARGE_PRIME,
    MAX_SIGNATURE_VALUE,
    SignatureGenerator,
    UniversalHashFamily,
    hash_token,
    hash_tokens,
)
from setsim.engine.errors import PreconditionError


def make_family(multipliers, offsets, domain_size=10):
    return UniversalHashFamily(
        domain_size=domain_size,
        multipliers=np.array(multipliers, dtype=np.int64),
        offsets=np.array(offsets, dtype=np.int64),
    )


class TestUniversalHashFamily:
    """Test coefficient generation."""

    def test_domain_size_below_two_rejected(self):
        """A domain of fewer than two elements has no valid multiplier."""
        with pytest.raises(PreconditionError) as exc_info:
            UniversalHashFamily.build(1, 10)
        assert exc_info.value.parameter == "domain_size"

    def test_precondition_is_value_error(self):
        """Invalid parameters can also be caught as ValueError."""
        with pytest.raises(ValueError):
            UniversalHashFamily.build(0, 10)

    def test_non_positive_signature_length_rejected(self):
        with pytest.raises(PreconditionError):
            UniversalHashFamily.build(10, 0)

    def test_oversized_domain_rejected(self):
        with pytest.raises(PreconditionError):
            UniversalHashFamily.build(2**31, 10)

    def test_coefficient_bounds(self):
        """Multipliers lie in [1, n-1] and offsets in [0, n-1]."""
        family = UniversalHashFamily.build(10, 500)

        assert family.signature_length == 500
        assert family.multipliers.min() >= 1
        assert family.multipliers.max() <= 9
        assert family.offsets.min() >= 0
        assert family.offsets.max() <= 9

    def test_smallest_domain(self):
        """With n=2 every multiplier must be 1."""
        family = UniversalHashFamily.build(2, 50)

        assert np.all(family.multipliers == 1)
        assert set(family.offsets.tolist()) <= {0, 1}

    def test_coefficients_are_read_only(self):
        family = UniversalHashFamily.build(10, 5)

        with pytest.raises(ValueError):
            family.multipliers[0] = 3

    def test_seeded_families_match(self):
        """A seed reproduces the same coefficients."""
        f1 = UniversalHashFamily.build(1000, 20, seed=42)
        f2 = UniversalHashFamily.build(1000, 20, seed=42)

        assert np.array_equal(f1.multipliers, f2.multipliers)
        assert np.array_equal(f1.offsets, f2.offsets)

    def test_hash_element_formula(self):
        family = make_family([3, 5], [1, 0])

        assert family.hash_element(2).tolist() == [7, 10]

    @pytest.mark.parametrize("x", [10**12, -1, LARGE_PRIME + 5, 2**62])
    def test_hash_element_wide_arithmetic(self, x):
        """Large and negative elements match exact integer arithmetic."""
        family = make_family([7, 2**30], [3, 11], domain_size=2**31 - 1)

        expected = [(7 * x + 3) % LARGE_PRIME, (2**30 * x + 11) % LARGE_PRIME]
        assert family.hash_element(x).tolist() == expected


class TestSignatureGenerator:
    """Test min-aggregated signatures."""

    def test_signature_is_elementwise_minimum(self):
        generator = SignatureGenerator(make_family([3, 5], [1, 0]))

        # h0: 7, 22 ; h1: 10, 35
        assert generator.signature_of([2, 7]).tolist() == [7, 10]

    def test_empty_input_yields_sentinels(self):
        """An empty collection is a defined edge case, not an error."""
        generator = SignatureGenerator.create(10, 8)

        signature = generator.signature_of([])
        assert len(signature) == 8
        assert all(v == MAX_SIGNATURE_VALUE for v in signature.tolist())

    def test_deterministic_for_same_family(self):
        """Same input, same family, same signature."""
        generator = SignatureGenerator.create(100, 64)
        elements = [5, 17, 42, 99]

        assert np.array_equal(generator(elements), generator(elements))

    def test_order_and_duplicates_do_not_matter(self):
        generator = SignatureGenerator.create(50, 32)

        assert np.array_equal(
            generator.signature_of([3, 1, 2]),
            generator.signature_of([1, 2, 3, 3, 1]),
        )

    def test_signature_is_immutable(self):
        generator = SignatureGenerator.create(10, 4)
        signature = generator.signature_of([1, 2])

        with pytest.raises(ValueError):
            signature[0] = 0

    def test_values_bounded_by_prime(self):
        generator = SignatureGenerator.create(1000, 100)
        signature = generator.signature_of(range(1, 500))

        assert signature.max() < LARGE_PRIME
        assert signature.min() >= 0


class TestTokenHashing:
    """Test mapping of text tokens to integers."""

    @pytest.mark.parametrize("method", ["blake2b", "md5", "sha1", "sha256"])
    def test_stable_non_negative_31_bit(self, method):
        value = hash_token("ab", method)

        assert value == hash_token("ab", method)
        assert 0 <= value <= 0x7FFFFFFF

    def test_different_tokens_differ(self):
        assert hash_token("ab") != hash_token("ba")

    def test_unknown_method_rejected(self):
        with pytest.raises(PreconditionError) as exc_info:
            hash_token("ab", "crc32")
        assert exc_info.value.parameter == "hash_method"

    def test_hash_tokens_preserves_order(self):
        tokens = ["ab", "bc", "cd"]

        assert hash_tokens(tokens) == [hash_token(t) for t in tokens]
