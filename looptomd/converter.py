"""looptomd.converter - convert Loop HTML exports to Markdown.

Basic usage::

    from looptomd.converter import convert_file

    result = convert_file("raw.html", "notes.md")
    print(result.page_count, result.line_count)

In-memory conversion (no file I/O)::

    from looptomd.converter import convert_html

    markdown = convert_html(html).markdown
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from bs4 import BeautifulSoup

from looptomd.errors import InputNotFoundError, InputReadError
from looptomd.extractors.roots import find_content_roots
from looptomd.extractors.walker import extract_markdown
from looptomd.settings import DEFAULT_SETTINGS, ExtractorSettings

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of one conversion run."""

    markdown: str
    page_count: int
    used_fallback: bool = False
    output_path: Path | None = None

    @property
    def line_count(self) -> int:
        """Number of non-empty Markdown lines."""
        return sum(1 for line in self.markdown.split("\n") if line)


def resolve_path(path: str | Path) -> Path:
    """Absolute form of *path*; relative paths resolve against the cwd."""
    p = Path(path)
    return p if p.is_absolute() else Path.cwd() / p


def parse_html(html: str, settings: ExtractorSettings | None = None) -> BeautifulSoup:
    settings = settings or DEFAULT_SETTINGS
    return BeautifulSoup(html, settings.tree_builder)


def convert_soup(
    soup: BeautifulSoup,
    settings: ExtractorSettings | None = None,
) -> ConversionResult:
    """Convert an already-parsed document.

    Raises:
        ContentNotFoundError: if the document has no recognisable content area.
    """
    settings = settings or DEFAULT_SETTINGS
    found = find_content_roots(soup, settings)
    markdown = extract_markdown(found.roots, settings)
    return ConversionResult(
        markdown=markdown,
        page_count=len(found.roots),
        used_fallback=found.used_fallback,
    )


def convert_html(html: str, settings: ExtractorSettings | None = None) -> ConversionResult:
    """Parse *html* and convert it to Markdown."""
    return convert_soup(parse_html(html, settings), settings)


def convert_file(
    input_path: str | Path,
    output_path: str | Path,
    settings: ExtractorSettings | None = None,
) -> ConversionResult:
    """Convert the HTML file at *input_path*, writing Markdown to *output_path*.

    The output file is written as UTF-8 and overwritten if it exists.

    Raises:
        InputNotFoundError: if *input_path* is not an existing file.
        InputReadError: if *input_path* exists but cannot be read.
        ContentNotFoundError: if the document has no recognisable content area.
    """
    src = resolve_path(input_path)
    dst = resolve_path(output_path)

    if not src.is_file():
        raise InputNotFoundError(str(src))

    logger.info("Loading HTML file: %s", src)
    try:
        html = src.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputReadError(str(src), exc) from exc

    result = convert_html(html, settings)

    dst.write_text(result.markdown, encoding="utf-8")
    result.output_path = dst
    logger.info("Wrote %d lines to %s", result.line_count, dst)
    return result
