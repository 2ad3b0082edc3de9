"""Extraction sub-package: classification and tree walking for Loop exports."""

from .classify import NodeKind, classify
from .lists import ListMarkerKind, get_indentation_level, get_list_item_text, get_list_marker_prefix
from .roots import find_content_roots
from .text import normalize_text
from .walker import Extractor, TraversalContext, extract_markdown

__all__ = [
    "Extractor",
    "ListMarkerKind",
    "NodeKind",
    "TraversalContext",
    "classify",
    "extract_markdown",
    "find_content_roots",
    "get_indentation_level",
    "get_list_item_text",
    "get_list_marker_prefix",
    "normalize_text",
]
