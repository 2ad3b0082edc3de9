"""Whitespace and entity normalisation applied to every piece of text."""

from __future__ import annotations

import html
import re

from bs4 import Tag

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str | None) -> str:
    """Strip *text* and collapse every whitespace run to a single space.

    Runs of spaces, tabs, newlines and non-breaking spaces all count.
    Blank or ``None`` input yields ``""``.
    """
    if not text or text.isspace():
        return ""
    return _WHITESPACE_RE.sub(" ", text.strip())


def normalize_text(text: str | None) -> str:
    """Return raw *text* with entities decoded and whitespace collapsed."""
    if not text or text.isspace():
        return ""
    return collapse_whitespace(html.unescape(text))


def node_text(tag: Tag) -> str:
    """Inner text of *tag*, whitespace collapsed.

    BeautifulSoup has already decoded entities, so they are not decoded
    again: ``&amp;lt;`` in the source stays ``&lt;``.
    """
    return collapse_whitespace(tag.get_text())
