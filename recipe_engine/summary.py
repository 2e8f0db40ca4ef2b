"""
Plain-text rendering of recipe summaries.

Spoonacular summaries are HTML fragments from a third party. They are never
rendered as HTML; the front end shows the text produced here instead.
"""

from typing import Any

from bs4 import BeautifulSoup


def summary_to_text(summary: Any) -> str:
    """
    Convert an HTML summary fragment into plain text.

    Tags are dropped (their text content is kept), entities are decoded and
    runs of whitespace are collapsed to single spaces.

    Args:
        summary: HTML fragment, or None

    Returns:
        Plain text, or "" when the summary is missing or not a string

    Examples:
        >>> summary_to_text("<b>Pasta</b> for <a href='#'>two</a> &amp; more")
        'Pasta for two & more'
    """
    if not isinstance(summary, str) or not summary.strip():
        return ""
    soup = BeautifulSoup(summary, "html.parser")
    for element in soup(["script", "style"]):
        element.decompose()
    return " ".join(soup.get_text(" ").split())
