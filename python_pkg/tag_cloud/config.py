"""Configuration for tag cloud generation.

Values are resolved in this order:
1. Explicit arguments (usually from the command line)
2. Environment variables (TAG_CLOUD_SEPARATORS, TAG_CLOUD_STYLESHEET)
3. Module defaults
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from python_pkg.tag_cloud.separators import SeparatorSet

# Whitespace and punctuation the tag cloud treats as word boundaries
DEFAULT_SEPARATORS = " \t\n\r,-.!?[]';:/()"

# Stylesheet defining the f14 / f26 / f48 font classes
DEFAULT_STYLESHEET = "tagcloud.css"

SEPARATORS_ENV_VAR = "TAG_CLOUD_SEPARATORS"
STYLESHEET_ENV_VAR = "TAG_CLOUD_STYLESHEET"


@dataclass(frozen=True)
class TagCloudConfig:
    """Settings fixed for the lifetime of a run."""

    separators: SeparatorSet
    stylesheet: str = DEFAULT_STYLESHEET


def load_config(
    separators: str | None = None,
    stylesheet: str | None = None,
) -> TagCloudConfig:
    """Build the run configuration.

    Args:
        separators: Separator characters; overrides the environment.
        stylesheet: Stylesheet href for the tag cloud; overrides the environment.

    Returns:
        Resolved TagCloudConfig.
    """
    if separators is None:
        separators = os.environ.get(SEPARATORS_ENV_VAR, DEFAULT_SEPARATORS)
    if stylesheet is None:
        stylesheet = os.environ.get(STYLESHEET_ENV_VAR, DEFAULT_STYLESHEET)
    return TagCloudConfig(separators=SeparatorSet(separators), stylesheet=stylesheet)
