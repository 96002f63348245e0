# SPDX-License-Identifier: MIT
"""Unit tests for the field-level ordering rules."""

import pytest

from pep440_version import (
    Prerelease,
    PrereleaseKind,
    compare_dev,
    compare_local,
    compare_local_segment,
    compare_post,
    compare_prerelease,
    compare_sequences,
)
from pep440_version.ordering import compare_numbers, is_numeric_segment


class TestCompareSequences:
    """Tests for the generic sequence comparison."""

    def test_equal(self):
        assert compare_sequences((1, 2), (1, 2), compare_numbers) == 0
        assert compare_sequences((), (), compare_numbers) == 0

    def test_first_difference_decides(self):
        assert compare_sequences((1, 3, 0), (1, 2, 9, 9), compare_numbers) == 1
        assert compare_sequences((1, 2, 9, 9), (1, 3, 0), compare_numbers) == -1

    def test_prefix_is_lesser(self):
        """Test that a strict prefix sorts before the longer sequence."""
        assert compare_sequences((1, 2), (1, 2, 0), compare_numbers) == -1
        assert compare_sequences((1, 2, 0), (1, 2), compare_numbers) == 1
        assert compare_sequences((), (0,), compare_numbers) == -1

    def test_custom_comparator(self):
        """Test that the item comparator is used for each pair."""
        calls = []

        def compare_item(a, b):
            calls.append((a, b))
            return 0

        assert compare_sequences("ab", "xyz", compare_item) == -1
        assert calls == [("a", "x"), ("b", "y")]


class TestCompareDev:
    """Tests for the development-release inversion."""

    def test_both_absent(self):
        """Test that two absent dev numbers are equal."""
        assert compare_dev(None, None) == 0

    def test_present_before_absent(self):
        """Test that a dev release sorts before a non-dev release."""
        assert compare_dev(0, None) == -1
        assert compare_dev(None, 0) == 1
        assert compare_dev(500, None) == -1
        assert compare_dev(None, 500) == 1

    def test_both_present(self):
        """Test that two dev numbers compare numerically."""
        assert compare_dev(1, 2) == -1
        assert compare_dev(2, 1) == 1
        assert compare_dev(0, 0) == 0

    @pytest.mark.parametrize("left", [None, 0, 1, 7])
    @pytest.mark.parametrize("right", [None, 0, 1, 7])
    def test_antisymmetric(self, left, right):
        assert compare_dev(left, right) == -compare_dev(right, left)


class TestComparePost:
    """Tests for post-release comparison."""

    def test_absent_is_zero(self):
        assert compare_post(None, None) == 0
        assert compare_post(None, 0) == 0
        assert compare_post(None, 1) == -1
        assert compare_post(3, None) == 1

    def test_numeric(self):
        assert compare_post(2, 10) == -1


class TestComparePrerelease:
    """Tests for pre-release comparison."""

    def test_absent_after_present(self):
        """Test that a final release sorts after any pre-release."""
        rc = Prerelease(PrereleaseKind.RELEASE_CANDIDATE, 99)
        assert compare_prerelease(None, rc) == 1
        assert compare_prerelease(rc, None) == -1
        assert compare_prerelease(None, None) == 0

    def test_kind_before_number(self):
        """Test that kind rank outranks the number."""
        assert compare_prerelease(Prerelease("a", 99), Prerelease("b", 0)) == -1
        assert compare_prerelease(Prerelease("b", 99), Prerelease("rc", 0)) == -1

    def test_number(self):
        assert compare_prerelease(Prerelease("rc", 2), Prerelease("c", 1)) == 1
        assert compare_prerelease(Prerelease("alpha", 1), Prerelease("a", 1)) == 0


class TestCompareLocal:
    """Tests for local version label comparison."""

    def test_numeric_segments(self):
        assert compare_local_segment("10", "9") == 1
        assert compare_local_segment("007", "7") == 0

    def test_is_numeric_segment(self):
        """Test the numeric-segment rule shared by comparison and hashing."""
        assert is_numeric_segment("007") is True
        assert is_numeric_segment("0a") is False
        assert is_numeric_segment("١") is False
        assert is_numeric_segment("") is False

    def test_numeric_beats_text(self):
        """Test that a numeric segment is greater than any text segment."""
        assert compare_local_segment("0", "zzz") == 1
        assert compare_local_segment("zzz", "0") == -1
        assert compare_local_segment("1a", "1") == -1

    def test_text_segments(self):
        assert compare_local_segment("abc", "abd") == -1
        assert compare_local_segment("abc", "abc") == 0
        assert compare_local_segment("b", "abc") == 1

    def test_sequences(self):
        """Test whole local labels, including the prefix rule."""
        assert compare_local((), ("a",)) == -1
        assert compare_local(("flam", "five"), ("flam", "five", "six")) == -1
        assert compare_local(("flam", "5"), ("flam", "6")) == -1
        assert compare_local(("flam", "0"), ("flam", "five")) == 1
