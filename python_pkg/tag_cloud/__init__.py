"""Tag cloud generator package.

This package turns a text file into an HTML tag cloud:
1. Splitting text into words and counting them (tokenizer module)
2. Picking the N most frequent words (selector module)
3. Writing the HTML page with size-scaled words (renderer module)

Example usage:
    from python_pkg.tag_cloud.renderer import render_html
    from python_pkg.tag_cloud.selector import select_top
    from python_pkg.tag_cloud.tokenizer import count_words

    counts = count_words(["the cat sat on the mat"])
    entries = select_top(counts, 2)
    page = render_html(entries, 2, "cat.txt")
"""

from __future__ import annotations
