"""Split lines into maximal word and separator runs.

Every character of a line belongs to exactly one token, so joining the
tokens of a line gives the line back.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from python_pkg.tag_cloud.errors import MalformedTokenizerInputError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from python_pkg.tag_cloud.separators import SeparatorSet


class TokenKind(Enum):
    """Classification of a token."""

    WORD = "word"
    SEPARATOR = "separator"


class Token(NamedTuple):
    """A maximal run of characters of one kind."""

    text: str
    kind: TokenKind


def next_token(text: str, position: int, separators: SeparatorSet) -> Token:
    """Return the word or separator run starting at ``position``.

    The run extends while characters keep the same separator membership as
    ``text[position]``.

    Args:
        text: The line being scanned.
        position: Start index, 0 <= position < len(text).
        separators: Characters treated as word boundaries.

    Returns:
        The longest homogeneous run starting at position.

    Raises:
        MalformedTokenizerInputError: If position is outside the text.
    """
    if not 0 <= position < len(text):
        msg = f"Position {position} out of range for text of length {len(text)}"
        raise MalformedTokenizerInputError(msg)

    is_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == is_separator:
        end += 1

    kind = TokenKind.SEPARATOR if is_separator else TokenKind.WORD
    return Token(text[position:end], kind)


def tokenize(line: str, separators: SeparatorSet) -> Iterator[Token]:
    """Lazily yield the tokens of ``line`` from left to right."""
    position = 0
    while position < len(line):
        token = next_token(line, position, separators)
        position += len(token.text)
        yield token


def iter_words(lines: Iterable[str], separators: SeparatorSet) -> Iterator[str]:
    """Yield every word of ``lines`` in lowercase, skipping separators.

    Args:
        lines: Document lines, with or without trailing line terminators.
        separators: Characters treated as word boundaries.

    Yields:
        Case-folded word tokens in document order.
    """
    for line in lines:
        for token in tokenize(line.rstrip("\r\n"), separators):
            if token.kind is TokenKind.WORD:
                yield token.text.lower()
