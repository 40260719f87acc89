"""Font weight tiers for tag cloud words."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Sequence


class WeightTier(IntEnum):
    """Visual weight of a word, ordered SMALL < MEDIUM < LARGE."""

    SMALL = 14
    MEDIUM = 26
    LARGE = 48

    @property
    def css_class(self) -> str:
        """Stylesheet class selecting this tier's font size."""
        return f"f{self.value}"


def mean_count(selection: Sequence[tuple[str, int]]) -> int:
    """Return the integer mean count of a selection, 0 when it is empty."""
    if not selection:
        return 0
    return sum(count for _, count in selection) // len(selection)


class Thresholds(NamedTuple):
    """Counts a word must exceed to reach the MEDIUM and LARGE tiers."""

    medium: int
    large: int

    @classmethod
    def from_mean(cls, avg: int) -> Thresholds:
        """Compute the thresholds for a selection's mean count."""
        return cls(medium=avg // 2, large=avg * 3 // 2)

    def classify(self, count: int) -> WeightTier:
        """Return the tier of a word with the given count."""
        if count > self.large:
            return WeightTier.LARGE
        if count > self.medium:
            return WeightTier.MEDIUM
        return WeightTier.SMALL


def classify(count: int, avg: int) -> WeightTier:
    """Classify ``count`` against a selection mean of ``avg``.

    Args:
        count: The word's occurrence count.
        avg: Integer mean count of the selection the word belongs to.

    Returns:
        LARGE above avg * 3 / 2, MEDIUM above avg / 2, SMALL otherwise.
    """
    return Thresholds.from_mean(avg).classify(count)
