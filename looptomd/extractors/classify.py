"""Node classification for Loop exports.

Class attributes are compared as token sets, never by substring, so that a
marker such as ``scriptor-listItem`` does not also match the
``scriptor-listItem-marker-bullet`` glyph inside it.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from looptomd.extractors.text import node_text

if TYPE_CHECKING:
    from looptomd.settings import ExtractorSettings


class NodeKind(Enum):
    """What the extractor does with a node (first matching rule wins)."""

    SKIP = "skip"
    TITLE = "title"
    LINK = "link"
    HEADING = "heading"
    LIST_ITEM = "list_item"
    LIST = "list"
    LIST_ITEM_WRAPPER = "list_item_wrapper"
    LEAF = "leaf"
    CONTAINER = "container"


# ---------------------------------------------------------------------------
# Class-token helpers
# ---------------------------------------------------------------------------

def class_tokens(tag: Tag | None) -> frozenset[str]:
    """Return the class tokens of *tag* (empty for ``None`` or no class)."""
    if tag is None:
        return frozenset()
    raw = tag.get("class")
    if not raw:
        return frozenset()
    if isinstance(raw, str):
        return frozenset(raw.split())
    return frozenset(raw)


def has_class(tag: Tag | None, marker: str) -> bool:
    return marker in class_tokens(tag)


def has_class_family(tag: Tag | None, marker: str) -> bool:
    """True if a token equals *marker* or is a ``<marker>-...`` variant."""
    prefix = marker + "-"
    return any(tok == marker or tok.startswith(prefix) for tok in class_tokens(tag))


def find_class_family(tag: Tag, marker: str) -> Tag | None:
    """First descendant of *tag* (document order) in the *marker* family."""
    found = tag.find(lambda el: has_class_family(el, marker))
    return found if isinstance(found, Tag) else None


def element_children(tag: Tag) -> list[Tag]:
    return [child for child in tag.children if isinstance(child, Tag)]


def _is_text_child(child: object) -> bool:
    # Comments, CDATA, doctypes are NavigableStrings too but not text.
    return isinstance(child, NavigableString) and not isinstance(child, PreformattedString)


def get_attr(tag: Tag, name: str, default: str = "") -> str:
    """String value of attribute *name*; multi-valued attributes are joined."""
    value = tag.get(name)
    if value is None:
        return default
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def should_skip(tag: Tag, settings: ExtractorSettings) -> bool:
    """UI chrome: Fluent UI components, generated CSS classes, icon graphics."""
    if (tag.name or "").lower() in settings.skip_tags:
        return True
    for tok in class_tokens(tag):
        if tok.startswith(settings.skip_class_prefixes):
            return True
        if settings.generated_class_marker and settings.generated_class_marker in tok:
            return True
    return False


def is_document_title(tag: Tag, settings: ExtractorSettings) -> bool:
    """A paragraph text run that is not part of a list item."""
    tokens = class_tokens(tag)
    if settings.text_run_class not in tokens or settings.inline_class not in tokens:
        return False

    parent = tag.parent
    if not has_class(parent, settings.paragraph_class):
        return False

    grandparent = parent.parent if parent is not None else None
    if grandparent is None or has_class(grandparent, settings.list_item_class):
        return False

    return len(node_text(tag)) >= settings.min_title_length


def is_link(tag: Tag) -> bool:
    return tag.name == "a" and bool(get_attr(tag, "href").strip())


def is_heading(tag: Tag) -> bool:
    return get_attr(tag, "role") == "heading"


def is_leaf(tag: Tag) -> bool:
    """No children at all, or only raw text children."""
    return all(_is_text_child(child) for child in tag.children)


def classify(tag: Tag, settings: ExtractorSettings, *, title_pending: bool = False) -> NodeKind:
    """Return the :class:`NodeKind` for *tag*.

    Title detection only applies while *title_pending* is set.
    """
    name = (tag.name or "").lower()

    if should_skip(tag, settings):
        return NodeKind.SKIP
    if title_pending and is_document_title(tag, settings):
        return NodeKind.TITLE
    if is_link(tag):
        return NodeKind.LINK
    if is_heading(tag):
        return NodeKind.HEADING
    if name == "li":
        return NodeKind.LIST_ITEM
    if name in ("ul", "ol"):
        return NodeKind.LIST
    if has_class(tag, settings.list_item_class):
        return NodeKind.LIST_ITEM_WRAPPER
    if is_leaf(tag):
        return NodeKind.LEAF
    return NodeKind.CONTAINER
