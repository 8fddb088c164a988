"""Markdown → HTML → node tree conversion for CMS rich-text fields."""

from typing import List

import markdown
from bs4 import BeautifulSoup

from app.models.richtext import RichNode
from app.services.renderer import render_enhanced, render_simple

# Strapi rich text is CommonMark-ish; sane_lists keeps ol/ul from merging
_MARKDOWN_EXTENSIONS = ["sane_lists"]


def markdown_to_html(text: str) -> str:
    """Convert CMS markdown to HTML.

    Raw HTML in the source is passed through untouched: the renderer, not
    the converter, decides what becomes structure.
    """
    if not text or not text.strip():
        return ""
    return markdown.markdown(text, extensions=_MARKDOWN_EXTENSIONS, output_format="html")


def rich_text(text: str, enhanced: bool = False) -> List[RichNode]:
    """Convert a CMS markdown field straight to presentational nodes."""
    fragment = markdown_to_html(text)
    return render_enhanced(fragment) if enhanced else render_simple(fragment)


def html_to_text(fragment: str) -> str:
    """Return the visible text of *fragment* with whitespace collapsed."""
    if not fragment:
        return ""
    return BeautifulSoup(fragment, "lxml").get_text(separator=" ", strip=True)


def word_count(text: str) -> int:
    return len(text.split())
