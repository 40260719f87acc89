"""Reading input documents and writing rendered reports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from python_pkg.tag_cloud.errors import DocumentUnreadableError, OutputUnwritableError

if TYPE_CHECKING:
    from collections.abc import Iterable

_logger = logging.getLogger(__name__)


def read_lines(filepath: str | Path) -> list[str]:
    """Read a UTF-8 text document as a list of lines.

    Args:
        filepath: Path to the document.

    Returns:
        The document's lines without line terminators.

    Raises:
        DocumentUnreadableError: If the file can't be opened or decoded.
    """
    path = Path(filepath)
    try:
        with path.open(encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except UnicodeDecodeError as e:
        msg = f"Could not decode {path} as UTF-8 - {e}"
        raise DocumentUnreadableError(msg) from e
    except OSError as e:
        msg = f"Could not read {path} - {e}"
        raise DocumentUnreadableError(msg) from e

    _logger.info(f"Read {len(lines)} lines from {path}")
    return lines


def write_lines(filepath: str | Path, lines: Iterable[str]) -> Path:
    """Write report lines to a file, one per line.

    Args:
        filepath: Destination path.
        lines: Lines without terminators.

    Returns:
        The path written to.

    Raises:
        OutputUnwritableError: If the file can't be created or written.
    """
    path = Path(filepath)
    count = 0
    try:
        with path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
                count += 1
    except OSError as e:
        msg = f"Could not write {path} - {e}"
        raise OutputUnwritableError(msg) from e

    _logger.info(f"Wrote {count} lines to {path}")
    return path


def html_output_path(filepath: str | Path) -> Path:
    """Append ``.html`` to a path that has no suffix."""
    path = Path(filepath)
    if path.suffix or not path.name:
        return path
    return path.with_name(path.name + ".html")
