"""HTML rendering of word count tables and tag clouds.

Both renderers return the report as a list of lines without line
terminators. They only format data that was already counted and selected.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from python_pkg.tag_cloud.config import DEFAULT_STYLESHEET
from python_pkg.tag_cloud.weights import Thresholds, mean_count

if TYPE_CHECKING:
    from collections.abc import Sequence

    from python_pkg.tag_cloud.frequency import FrequencyTable


def render_table(table: FrequencyTable, source_name: str) -> list[str]:
    """Render every word and its count as an alphabetical HTML table.

    Args:
        table: Word counts of the whole document.
        source_name: Name of the input document, shown in the header.

    Returns:
        HTML lines of the report.
    """
    name = escape(source_name)
    lines = [
        "<html>",
        "<head>",
        f"<title>{name}</title>",
        "</head>",
        "<body>",
        f"<h2>Words Counted in {name}</h2>",
        "<hr/>",
        '<table border="1">',
        "<tr>",
        "<th>Words</th>",
        "<th>Counts</th>",
        "</tr>",
    ]
    for word, count in sorted(table.snapshot()):
        lines.append("<tr>")
        lines.append(f"<td>{escape(word)}</td>")
        lines.append(f"<td>{count}</td>")
        lines.append("</tr>")
    lines.extend(["</table>", "</body>", "</html>"])
    return lines


def render_tag_cloud(
    selection: Sequence[tuple[str, int]],
    source_name: str,
    *,
    stylesheet: str = DEFAULT_STYLESHEET,
) -> list[str]:
    """Render selected words as an alphabetical HTML tag cloud.

    Each word carries its count as a hover title and its weight tier as
    the font class.

    Args:
        selection: The (word, count) pairs chosen for the cloud, in any order.
        source_name: Name of the input document, shown in the header.
        stylesheet: Href of the stylesheet defining the font classes.

    Returns:
        HTML lines of the report.
    """
    heading = f"Top {len(selection)} words in {escape(source_name)}"
    thresholds = Thresholds.from_mean(mean_count(selection))

    lines = [
        "<html>",
        "<head>",
        f"<title>{heading}</title>",
        f'<link href="{escape(stylesheet)}" rel="stylesheet" type="text/css">',
        "</head>",
        "<body>",
        f"<h2>{heading}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]
    for word, count in sorted(selection):
        tier = thresholds.classify(count)
        lines.append(
            f'<span style="cursor:default" class="{tier.css_class}" '
            f'title="count: {count}">{escape(word)}</span>'
        )
    lines.extend(["</p>", "</div>", "</body>", "</html>"])
    return lines
