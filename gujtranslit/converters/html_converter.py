"""
HTML transliteration.

Rewrites visible text nodes (and user-facing attributes such as
placeholder and title) to Gujarati while leaving markup, scripts and
styles untouched.
"""

import os

from ..transliteration import transliterate_segment

SKIP_TAGS = {"script", "style", "code", "pre", "noscript", "template"}
TEXT_ATTRIBUTES = ("placeholder", "title", "alt")


class HTMLConverter:
    """Transliterates .html/.htm files."""

    SUPPORTED_EXTENSIONS = {".html", ".htm"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in HTMLConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(file_path: str) -> str:
        """Return the transliterated HTML of a file."""
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"HTML file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            return transliterate_html(f.read())


def transliterate_html(html: str) -> str:
    """Transliterate the visible text of an HTML document or fragment."""
    try:
        from bs4 import BeautifulSoup, NavigableString
    except ImportError:
        raise RuntimeError("beautifulsoup4 is not installed. Run: pip install beautifulsoup4")

    soup = BeautifulSoup(html, "html.parser")

    # Comments, doctypes and CDATA are NavigableString subclasses
    text_nodes = [
        node for node in soup.find_all(string=True)
        if type(node) is NavigableString
        and not any(parent.name in SKIP_TAGS for parent in node.parents)
    ]
    for node in text_nodes:
        converted = transliterate_segment(str(node))
        if converted != str(node):
            node.replace_with(converted)

    for tag in soup.find_all(True):
        if tag.name in SKIP_TAGS:
            continue
        for attr in TEXT_ATTRIBUTES:
            value = tag.get(attr)
            if isinstance(value, str):
                tag[attr] = transliterate_segment(value)

    return str(soup)
