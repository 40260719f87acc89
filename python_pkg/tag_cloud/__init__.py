"""Tag cloud generator package.

This package provides tools for:
1. Splitting text into words and separators (tokenizer module)
2. Counting case-folded words (frequency module)
3. Choosing the most frequent words and weighting them (selector, weights modules)
4. Rendering an HTML tag cloud or word count table (renderer module)

Example usage:
    from python_pkg.tag_cloud.config import load_config
    from python_pkg.tag_cloud.frequency import count_words
    from python_pkg.tag_cloud.renderer import render_tag_cloud
    from python_pkg.tag_cloud.selector import select

    config = load_config()
    table = count_words(["The the THE fox. Fox FOX!"], config.separators)
    print(table["the"])  # 3

    lines = render_tag_cloud(select(table, 2), "fox.txt")
    print("\\n".join(lines))
"""

from __future__ import annotations
