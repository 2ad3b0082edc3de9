"""Recursive Markdown extractor for Loop page content.

The extractor walks a content root depth-first.  Each element is classified
once (:func:`~looptomd.extractors.classify.classify`) and handed to the
handler for its :class:`~looptomd.extractors.classify.NodeKind`.  Most
handlers consume the whole subtree; only lists, list-item wrappers and
generic containers recurse.

Usage::

    from bs4 import BeautifulSoup
    from looptomd.extractors.walker import Extractor

    soup = BeautifulSoup(html, "lxml")
    extractor = Extractor()
    extractor.extract(soup.main, is_first_root=True)
    print(extractor.markdown())
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from dataclasses import dataclass

from bs4 import Tag

from looptomd.extractors.classify import (
    NodeKind,
    class_tokens,
    classify,
    element_children,
    get_attr,
)
from looptomd.extractors.lists import (
    format_link,
    get_indentation_level,
    get_list_item_text,
    get_list_marker_prefix,
)
from looptomd.extractors.text import node_text
from looptomd.settings import DEFAULT_SETTINGS, ExtractorSettings

logger = logging.getLogger(__name__)

# aria-level -> Markdown prefix.  "#" is reserved for the document title.
_HEADING_PREFIXES: dict[str, str] = {
    "1": "## ",
    "2": "### ",
    "3": "#### ",
}


@dataclass(frozen=True)
class TraversalContext:
    """State passed down the recursion.

    ``title_pending`` is only ever True while walking the first root and
    goes False as soon as the document emits its first line.
    """

    indent_level: int = 0
    title_pending: bool = False

    def with_indent(self, level: int) -> TraversalContext:
        return dataclasses.replace(self, indent_level=level)

    def title_done(self) -> TraversalContext:
        if not self.title_pending:
            return self
        return dataclasses.replace(self, title_pending=False)


Handler = Callable[[Tag, TraversalContext], TraversalContext]


class Extractor:
    """Accumulates Markdown lines for one conversion run."""

    def __init__(self, settings: ExtractorSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self._lines: list[str] = []
        self._handlers: dict[NodeKind, Handler] = {
            NodeKind.SKIP: self._skip,
            NodeKind.TITLE: self._title,
            NodeKind.LINK: self._link,
            NodeKind.HEADING: self._heading,
            NodeKind.LIST_ITEM: self._list_item,
            NodeKind.LIST: self._list,
            NodeKind.LIST_ITEM_WRAPPER: self._list_item_wrapper,
            NodeKind.LEAF: self._leaf,
            NodeKind.CONTAINER: self._container,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def extract(self, root: Tag, *, is_first_root: bool = False) -> None:
        """Walk *root* and append its Markdown lines to the buffer."""
        self.walk(root, TraversalContext(title_pending=is_first_root))

    def walk(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        """Process *node* and return the context its next sibling should use."""
        kind = classify(node, self.settings, title_pending=ctx.title_pending)
        return self._handlers[kind](node, ctx)

    def markdown(self) -> str:
        return "".join(line + "\n" for line in self._lines)

    # ------------------------------------------------------------------
    # Buffer helpers
    # ------------------------------------------------------------------

    def _emit(self, ctx: TraversalContext, *lines: str) -> TraversalContext:
        self._lines.extend(lines)
        return ctx.title_done()

    def _walk_children(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        for child in element_children(node):
            ctx = self.walk(child, ctx)
        return ctx

    # ------------------------------------------------------------------
    # Handlers, one per NodeKind
    # ------------------------------------------------------------------

    def _skip(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        logger.debug("Skipping <%s> %s", node.name, sorted(class_tokens(node)))
        return ctx

    def _title(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        return self._emit(ctx, f"# {node_text(node)}", "")

    def _link(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        text = node_text(node)
        if not text:
            return ctx
        return self._emit(ctx, format_link(text, get_attr(node, "href")))

    def _heading(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        text = node_text(node)
        if not text:
            return ctx
        prefix = _HEADING_PREFIXES.get(get_attr(node, "aria-level", "1"), "")
        return self._emit(ctx, f"{prefix}{text}", "")

    def _list_item(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        text = get_list_item_text(node, self.settings)
        if not text:
            return ctx
        prefix = get_list_marker_prefix(node, ctx.indent_level, self.settings)
        return self._emit(ctx, f"{prefix}{text}")

    def _list(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        return self._walk_children(node, ctx)

    def _list_item_wrapper(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        level = get_indentation_level(node, self.settings)
        inner = self._walk_children(node, ctx.with_indent(level))
        return inner.with_indent(ctx.indent_level)

    def _leaf(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        text = node_text(node)
        if not text:
            return ctx
        return self._emit(ctx, text)

    def _container(self, node: Tag, ctx: TraversalContext) -> TraversalContext:
        return self._walk_children(node, ctx)


def extract_markdown(
    roots: list[Tag],
    settings: ExtractorSettings | None = None,
) -> str:
    """Convert content *roots* to Markdown, concatenated in order.

    Only the first root is eligible to contribute the ``#`` title.
    """
    extractor = Extractor(settings)
    for index, root in enumerate(roots):
        extractor.extract(root, is_first_root=(index == 0))
    return extractor.markdown()
