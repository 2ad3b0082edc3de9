"""List handling: item text, marker prefixes, checkbox state, indentation.

Loop renders list indentation in two ways: structurally (nested ``<ul>`` /
``<ol>``) and visually, via ``margin-left`` on a ``scriptor-listItem``
wrapper.  Only the wrapper's margin changes the indent level; the two paths
are not reconciled.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TYPE_CHECKING

from bs4 import Tag

from looptomd.extractors.classify import find_class_family, get_attr, has_class
from looptomd.extractors.text import node_text

if TYPE_CHECKING:
    from looptomd.settings import ExtractorSettings

logger = logging.getLogger(__name__)

_MARGIN_LEFT_RE = re.compile(r"margin-left:\s*(\d+)px")


class ListMarkerKind(Enum):
    CHECKBOX_CHECKED = "checkbox_checked"
    CHECKBOX_UNCHECKED = "checkbox_unchecked"
    BULLET = "bullet"
    ORDERED = "ordered"
    BULLET_DEFAULT = "bullet_default"


_MARKERS: dict[ListMarkerKind, str] = {
    ListMarkerKind.CHECKBOX_CHECKED: "- [x] ",
    ListMarkerKind.CHECKBOX_UNCHECKED: "- [ ] ",
    ListMarkerKind.BULLET: "- ",
    # Always "1."; Markdown renderers number the items themselves.
    ListMarkerKind.ORDERED: "1. ",
    ListMarkerKind.BULLET_DEFAULT: "- ",
}


# ---------------------------------------------------------------------------
# Indentation
# ---------------------------------------------------------------------------

def indent_level_for_margin(margin_px: int, settings: ExtractorSettings) -> int:
    """Map a ``margin-left`` pixel value to a list indent level.

    With the default 27px base/step: 27 -> 0, 54 -> 1, 81 -> 2.  Anything
    below the base margin is level 0.
    """
    return max(0, (margin_px - settings.base_margin_px) // settings.indent_step_px)


def get_indentation_level(tag: Tag, settings: ExtractorSettings) -> int:
    """Indent level from *tag*'s inline ``margin-left``; 0 when absent."""
    style = get_attr(tag, "style")
    m = _MARGIN_LEFT_RE.search(style)
    if not m:
        if style:
            logger.debug("No margin-left in list item style %r; using level 0", style)
        return 0
    return indent_level_for_margin(int(m.group(1)), settings)


# ---------------------------------------------------------------------------
# Item text
# ---------------------------------------------------------------------------

def format_link(text: str, href: str) -> str:
    return f"[{text}]({href})"


def get_list_item_text(item: Tag, settings: ExtractorSettings) -> str:
    """Flatten a ``<li>`` into one line of text.

    Text runs come first, in document order, then every link in the item as
    ``[text](href)``.  Items without either fall back to their full text.
    """
    parts: list[str] = []

    for run in item.find_all(lambda el: has_class(el, settings.text_run_class)):
        text = node_text(run)
        if text:
            parts.append(text)

    for link in item.find_all("a", href=True):
        href = get_attr(link, "href")
        text = node_text(link)
        if text and href.strip():
            parts.append(format_link(text, href))

    if parts:
        return " ".join(parts)
    return node_text(item)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

def is_checkbox_checked(marker: Tag, settings: ExtractorSettings) -> bool:
    """Checked state of a checkbox marker element.

    ``aria-checked="true"`` wins, then the checked class on the marker, then
    the checked class on the nested text marker.
    """
    if get_attr(marker, "aria-checked", "false") == "true":
        return True
    if has_class(marker, settings.checkbox_checked_class):
        return True

    text_marker = find_class_family(marker, settings.text_checkbox_marker_class)
    return text_marker is not None and has_class(text_marker, settings.text_checkbox_checked_class)


def resolve_marker_kind(item: Tag, settings: ExtractorSettings) -> ListMarkerKind:
    checkbox = find_class_family(item, settings.checkbox_marker_class)
    if checkbox is not None:
        if is_checkbox_checked(checkbox, settings):
            return ListMarkerKind.CHECKBOX_CHECKED
        return ListMarkerKind.CHECKBOX_UNCHECKED

    if find_class_family(item, settings.bullet_marker_class) is not None:
        return ListMarkerKind.BULLET

    parent = item.parent
    parent_name = (parent.name or "").lower() if isinstance(parent, Tag) else ""
    if parent_name == "ol":
        return ListMarkerKind.ORDERED
    if parent_name == "ul":
        return ListMarkerKind.BULLET
    return ListMarkerKind.BULLET_DEFAULT


def get_list_marker_prefix(item: Tag, indent_level: int, settings: ExtractorSettings) -> str:
    """Indentation plus Markdown marker for a list item line."""
    indent = " " * (indent_level * settings.indent_width)
    return indent + _MARKERS[resolve_marker_kind(item, settings)]
