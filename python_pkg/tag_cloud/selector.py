"""Top-N word selection for the tag cloud."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from python_pkg.tag_cloud.errors import InvalidSelectionSizeError

if TYPE_CHECKING:
    from python_pkg.tag_cloud.frequency import FrequencyTable

_logger = logging.getLogger(__name__)


def _rank_key(entry: tuple[str, int]) -> tuple[int, str]:
    word, count = entry
    return (-count, word)


def rank(table: FrequencyTable) -> list[tuple[str, int]]:
    """Order all entries by count descending, then word ascending.

    Args:
        table: Word counts to rank.

    Returns:
        Every (word, count) pair of the table under a total order.
    """
    return sorted(table.snapshot(), key=_rank_key)


def select(table: FrequencyTable, n: int) -> list[tuple[str, int]]:
    """Select the ``n`` most frequent words.

    Words with equal counts are taken in alphabetical order, so the
    result does not depend on insertion order.

    Args:
        table: Word counts to select from.
        n: Number of words, 0 <= n <= len(table).

    Returns:
        Exactly n (word, count) pairs, most frequent first.

    Raises:
        InvalidSelectionSizeError: If n is not an integer in range.
    """
    available = len(table)
    if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n <= available:
        raise InvalidSelectionSizeError(n, available)

    selection = rank(table)[:n]
    _logger.debug(f"Selected {len(selection)} of {available} words")
    return selection
