"""Locate the content containers of a Loop export."""

from __future__ import annotations

import logging
from typing import NamedTuple

from bs4 import BeautifulSoup, Tag

from looptomd.errors import ContentNotFoundError
from looptomd.settings import DEFAULT_SETTINGS, ExtractorSettings

logger = logging.getLogger(__name__)


class ContentRoots(NamedTuple):
    roots: list[Tag]
    used_fallback: bool


def find_content_roots(
    soup: BeautifulSoup | Tag,
    settings: ExtractorSettings | None = None,
) -> ContentRoots:
    """Return the page frames of *soup* in document order.

    Falls back to the first ``<main>`` element when the export has no page
    frames.

    Raises:
        ContentNotFoundError: if neither is present.
    """
    settings = settings or DEFAULT_SETTINGS

    frames = [
        el for el in soup.find_all(class_=settings.page_frame_class)
        if isinstance(el, Tag)
    ]
    if frames:
        logger.info("Found %d page frame(s)", len(frames))
        return ContentRoots(frames, used_fallback=False)

    main = soup.find(settings.fallback_root_tag)
    if isinstance(main, Tag):
        logger.warning(
            "No %r elements found; falling back to <%s>",
            settings.page_frame_class, settings.fallback_root_tag,
        )
        return ContentRoots([main], used_fallback=True)

    raise ContentNotFoundError("Content area not found in the HTML file.")
