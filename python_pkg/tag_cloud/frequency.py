"""Word frequency table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from python_pkg.tag_cloud.tokenizer import iter_words

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from python_pkg.tag_cloud.separators import SeparatorSet

_logger = logging.getLogger(__name__)


class FrequencyTable:
    """Mapping of normalized word to occurrence count.

    Words are expected to be normalized by the caller; the table stores
    them as given. Entries only ever grow.
    """

    def __init__(self) -> None:
        """Initialize an empty table."""
        self._counts: dict[str, int] = {}

    def increment(self, word: str) -> None:
        """Add one occurrence of ``word``, inserting it with count 1 if new.

        Args:
            word: Non-empty normalized word.

        Raises:
            ValueError: If word is empty.
        """
        if not word:
            msg = "Cannot count an empty word"
            raise ValueError(msg)
        self._counts[word] = self._counts.get(word, 0) + 1

    def snapshot(self) -> list[tuple[str, int]]:
        """Return the (word, count) entries without modifying the table."""
        return list(self._counts.items())

    def total(self) -> int:
        """Return the number of word occurrences counted."""
        return sum(self._counts.values())

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self._counts == other._counts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FrequencyTable({self._counts!r})"


def count_words(lines: Iterable[str], separators: SeparatorSet) -> FrequencyTable:
    """Count the case-folded words of a document.

    Args:
        lines: Document lines.
        separators: Characters treated as word boundaries.

    Returns:
        FrequencyTable holding every distinct word and its count.
    """
    table = FrequencyTable()
    for word in iter_words(lines, separators):
        table.increment(word)
    _logger.info(f"Counted {table.total()} words, {len(table)} distinct")
    return table
