"""Rendered issue markup helpers built on BeautifulSoup."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

PARSER_BACKEND = "html.parser"


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", PARSER_BACKEND)


def previous_element_sibling(element: Tag) -> Tag | None:
    """Nearest preceding sibling that is an element; whitespace text is skipped."""
    for sibling in element.previous_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def flatten_text(document: BeautifulSoup) -> str:
    """Join the text content of every element, in document order, one per line.

    Nested elements repeat their text inside their ancestors' entries; line
    oriented scanners only care that each leaf paragraph lands on its own line.
    """
    return "\n".join(el.get_text() for el in document.find_all(True))


__all__ = ["parse_html", "flatten_text", "previous_element_sibling", "PARSER_BACKEND"]
