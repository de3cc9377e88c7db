"""
Tests for k-shingle tokenization.
"""

import pytest

from setsim.engine.errors import PreconditionError
from setsim.shingles import KShingler


class TestKShingler:

    def test_bigrams(self):
        assert KShingler(2).shingles("abcd") == ["ab", "bc", "cd"]

    def test_deduplicated_in_first_occurrence_order(self):
        assert KShingler(2).shingles("abab") == ["ab", "ba"]

    def test_trigrams(self):
        assert KShingler(3)("hello") == ["hel", "ell", "llo"]

    def test_short_text_is_one_shingle(self):
        assert KShingler(5).shingles("abc") == ["abc"]

    def test_empty_text(self):
        assert KShingler(2).shingles("") == []

    def test_whitespace_is_kept(self):
        assert KShingler(2).shingles("a b") == ["a ", " b"]

    def test_invalid_length(self):
        with pytest.raises(PreconditionError):
            KShingler(0)
