"""Exceptions raised by the tag cloud pipeline and its I/O boundary."""

from __future__ import annotations


class TagCloudError(Exception):
    """Base class for all tag cloud errors."""


class MalformedTokenizerInputError(TagCloudError, ValueError):
    """Tokenizer called with a position outside the text."""


class InvalidSelectionSizeError(TagCloudError, ValueError):
    """Requested number of words is negative or larger than the vocabulary."""

    def __init__(self, requested: object, available: int) -> None:
        self.requested = requested
        self.available = available
        msg = (
            f"Cannot select {requested!r} words: "
            f"expected an integer between 0 and {available}"
        )
        super().__init__(msg)


class DocumentUnreadableError(TagCloudError, OSError):
    """Input document could not be opened or decoded."""


class OutputUnwritableError(TagCloudError, OSError):
    """Report could not be written to the requested location."""
