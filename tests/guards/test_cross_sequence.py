"""Tests for two-sequence size checks."""

import numpy as np
import pandas as pd
import pytest

pytestmark = pytest.mark.unit

from seqguard import SizeViolation, has_size_equal_to, has_size_less_than_or_equal_to


class TestSizeEqualToSequence:
    """Test has_size_equal_to(source, destination, name)."""

    def test_equal_lengths_pass(self):
        """Two arrays of length 5 pass."""
        a = np.zeros(5)
        b = np.ones(5)
        has_size_equal_to(a, b, "a")

    def test_different_lengths_fail(self):
        """Lengths 5 and 6 fail, reporting source 5 against destination 6."""
        a = np.zeros(5)
        b = np.zeros(6)
        with pytest.raises(SizeViolation) as exc_info:
            has_size_equal_to(a, b, "a")

        err = exc_info.value
        assert err.actual_size == 5
        assert err.destination_size == 6
        assert str(err).startswith('The source "a"')
        assert "must be sized == 6" in str(err)
        assert "had a size of 5" in str(err)
        assert "destination" in str(err)

    @pytest.mark.parametrize("n,m", [(0, 0), (2, 3), (3, 2), (4, 4)])
    def test_outcome_is_symmetric(self, n, m):
        """Swapping source and destination does not change pass/fail."""
        a, b = list(range(n)), list(range(m))

        def passes(source, destination):
            try:
                has_size_equal_to(source, destination, "source")
            except SizeViolation:
                return False
            return True

        assert passes(a, b) == passes(b, a) == (n == m)

    def test_mixed_representations(self):
        """Arrays, frames, lists and generators compare by element count."""
        has_size_equal_to(pd.Series([1, 2, 3]), [7, 8, 9], "series")
        has_size_equal_to((x for x in range(3)), np.arange(3), "gen")

    def test_same_iterator_on_both_sides(self):
        """Passing one iterator twice is equal without draining it."""
        it = iter([1, 2, 3])
        has_size_equal_to(it, it, "it")
        assert list(it) == [1, 2, 3]


class TestSizeLessThanOrEqualToSequence:
    """Test has_size_less_than_or_equal_to(source, destination, name)."""

    def test_smaller_source_passes(self):
        """A source that fits in the destination passes."""
        has_size_less_than_or_equal_to([1, 2], [0, 0, 0], "buffer")

    def test_equal_source_passes(self):
        """Equal sizes pass."""
        has_size_less_than_or_equal_to(np.zeros(3), np.zeros(3), "buffer")

    def test_larger_source_fails(self):
        """A source larger than the destination fails."""
        with pytest.raises(SizeViolation, match="must be sized <= 2") as exc_info:
            has_size_less_than_or_equal_to([1, 2, 3], [0, 0], "buffer")
        assert exc_info.value.actual_size == 3
        assert exc_info.value.destination_size == 2
        assert exc_info.value.condition == "<= 2"

    def test_destination_type_is_named(self):
        """The destination type appears in the message."""
        with pytest.raises(SizeViolation, match=r"destination: ndarray\[int64\]"):
            has_size_less_than_or_equal_to([1, 2], np.zeros(1, dtype=np.int64), "src")

    def test_empty_sources(self):
        """An empty source always fits."""
        has_size_less_than_or_equal_to([], [], "src")
        has_size_less_than_or_equal_to(iter(()), iter(()), "src")
