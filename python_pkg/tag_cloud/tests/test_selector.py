"""Tests for tag_cloud.selector module."""

from __future__ import annotations

import pytest

from python_pkg.tag_cloud.errors import InvalidSelectionSizeError
from python_pkg.tag_cloud.frequency import FrequencyTable
from python_pkg.tag_cloud.selector import rank, select


def make_table(counts: dict[str, int]) -> FrequencyTable:
    """Build a table with the given counts."""
    table = FrequencyTable()
    for word, count in counts.items():
        for _ in range(count):
            table.increment(word)
    return table


class TestRank:
    """Tests for rank function."""

    def test_count_descending(self) -> None:
        """Test ordering by count."""
        table = make_table({"a": 1, "b": 5, "c": 3})
        assert rank(table) == [("b", 5), ("c", 3), ("a", 1)]

    def test_ties_alphabetical(self) -> None:
        """Test that equal counts are ordered by word."""
        table = make_table({"pear": 2, "apple": 2, "fig": 2, "kiwi": 4})
        assert rank(table) == [("kiwi", 4), ("apple", 2), ("fig", 2), ("pear", 2)]


class TestSelect:
    """Tests for select function."""

    def test_top_n(self) -> None:
        """Test selecting the most frequent words."""
        table = make_table({"a": 10, "b": 5, "c": 3, "d": 1})
        assert select(table, 2) == [("a", 10), ("b", 5)]

    def test_equal_counts_are_not_collapsed(self) -> None:
        """Test that words sharing a count are all selectable."""
        table = make_table({"the": 3, "fox": 3, "dog": 3})
        assert select(table, 3) == [("dog", 3), ("fox", 3), ("the", 3)]

    def test_tie_break_at_cutoff(self) -> None:
        """Test that the cutoff among equal counts is alphabetical."""
        table = make_table({"zeta": 2, "alpha": 2, "mid": 2, "top": 9})
        assert select(table, 2) == [("top", 9), ("alpha", 2)]

    def test_zero(self) -> None:
        """Test that n = 0 selects nothing."""
        table = make_table({"a": 1})
        assert select(table, 0) == []

    def test_zero_on_empty_table(self) -> None:
        """Test that n = 0 is valid for an empty table."""
        assert select(FrequencyTable(), 0) == []

    def test_whole_vocabulary(self) -> None:
        """Test selecting every word."""
        table = make_table({"a": 1, "b": 2, "c": 3})
        assert select(table, 3) == [("c", 3), ("b", 2), ("a", 1)]

    def test_deterministic_regardless_of_insertion_order(self) -> None:
        """Test that insertion order has no effect on the result."""
        first = make_table({"x": 2, "y": 2, "z": 1, "w": 2})
        second = make_table({"w": 2, "z": 1, "y": 2, "x": 2})
        assert select(first, 3) == select(second, 3) == select(first, 3)

    def test_selection_holds_largest_counts(self) -> None:
        """Test that no unselected word outranks a selected one."""
        table = make_table({"a": 4, "b": 1, "c": 7, "d": 4, "e": 2, "f": 7})
        selection = select(table, 3)
        chosen = {word for word, _ in selection}
        rest = [count for word, count in table.snapshot() if word not in chosen]
        assert min(count for _, count in selection) >= max(rest)

    def test_counts_match_table(self) -> None:
        """Test that selected counts equal table entries."""
        table = make_table({"a": 4, "b": 1, "c": 7})
        for word, count in select(table, 3):
            assert table[word] == count

    @pytest.mark.parametrize("n", [-1, 4, 100])
    def test_out_of_range(self, n: int) -> None:
        """Test that invalid sizes are rejected."""
        table = make_table({"a": 1, "b": 1, "c": 1})
        with pytest.raises(InvalidSelectionSizeError) as exc_info:
            select(table, n)
        assert exc_info.value.requested == n
        assert exc_info.value.available == 3

    @pytest.mark.parametrize("n", ["2", 1.0, True, None])
    def test_non_integer(self, n: object) -> None:
        """Test that non-integer sizes are rejected."""
        table = make_table({"a": 1, "b": 1})
        with pytest.raises(InvalidSelectionSizeError):
            select(table, n)  # type: ignore[arg-type]

    def test_does_not_mutate_table(self) -> None:
        """Test that selection leaves the table unchanged."""
        table = make_table({"a": 2, "b": 1})
        before = table.snapshot()
        select(table, 1)
        assert table.snapshot() == before
