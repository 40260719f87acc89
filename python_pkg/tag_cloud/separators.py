"""Separator character sets used to split lines into words."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class SeparatorSet:
    """Immutable set of characters that delimit words.

    Built once per run from any iterable of characters (usually a string)
    and never changed afterwards.
    """

    __slots__ = ("_chars",)

    def __init__(self, chars: Iterable[str]) -> None:
        """Initialize the separator set.

        Args:
            chars: Separator characters. Duplicates are ignored.

        Raises:
            ValueError: If an element is not a single character.
        """
        collected = frozenset(chars)
        for char in collected:
            if len(char) != 1:
                msg = f"Separator must be a single character, got {char!r}"
                raise ValueError(msg)
        object.__setattr__(self, "_chars", collected)

    def __setattr__(self, name: str, value: object) -> None:
        msg = "SeparatorSet is immutable"
        raise AttributeError(msg)

    def __contains__(self, char: object) -> bool:
        return char in self._chars

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._chars))

    def __len__(self) -> int:
        return len(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeparatorSet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"SeparatorSet({''.join(self)!r})"

    def is_separator(self, char: str) -> bool:
        """Check whether ``char`` is a word boundary."""
        return char in self._chars
