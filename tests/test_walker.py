"""Tests for looptomd.extractors.walker."""

from __future__ import annotations

import pytest

from looptomd.extractors.walker import Extractor, TraversalContext, extract_markdown

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _walk(soup, html: str, *, indent: int = 0, title: bool = False) -> list[str]:
    doc = soup(f'<div id="root">{html}</div>')
    extractor = Extractor()
    extractor.walk(doc.find(id="root"), TraversalContext(indent_level=indent, title_pending=title))
    return extractor.lines


def _frame(body: str) -> str:
    return f'<div class="scriptor-pageFrame">{body}</div>'


def _para(text: str) -> str:
    return (
        '<div class="scriptor-paragraph">'
        f'<span class="scriptor-textRun scriptor-inline">{text}</span></div>'
    )


# ---------------------------------------------------------------------------
# Traversal context
# ---------------------------------------------------------------------------

class TestTraversalContext:
    def test_defaults(self):
        ctx = TraversalContext()
        assert ctx.indent_level == 0
        assert ctx.title_pending is False

    def test_updates_return_new_values(self):
        ctx = TraversalContext(title_pending=True)
        assert ctx.with_indent(3).indent_level == 3
        assert ctx.indent_level == 0
        assert ctx.title_done().title_pending is False
        assert ctx.title_pending is True

    def test_is_immutable(self):
        ctx = TraversalContext()
        with pytest.raises(AttributeError):
            ctx.indent_level = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Headings & links
# ---------------------------------------------------------------------------

class TestHeadings:
    @pytest.mark.parametrize(("level", "prefix"), [("1", "## "), ("2", "### "), ("3", "#### ")])
    def test_aria_levels(self, soup, level, prefix):
        lines = _walk(soup, f'<div role="heading" aria-level="{level}">Goals</div>')
        assert lines == [f"{prefix}Goals", ""]

    def test_level_two_goals(self, soup):
        lines = _walk(soup, '<div role="heading" aria-level="2"><span>Goals</span></div>')
        assert lines == ["### Goals", ""]

    def test_other_level_is_plain_text(self, soup):
        assert _walk(soup, '<div role="heading" aria-level="5">Notes</div>') == ["Notes", ""]

    def test_missing_level_defaults_to_one(self, soup):
        assert _walk(soup, '<div role="heading">Intro</div>') == ["## Intro", ""]

    def test_blank_heading_emits_nothing(self, soup):
        assert _walk(soup, '<div role="heading" aria-level="1">  </div>') == []

    def test_heading_does_not_recurse(self, soup):
        html = '<div role="heading" aria-level="1">A <a href="https://x.com">link</a></div>'
        assert _walk(soup, html) == ["## A link", ""]


class TestLinks:
    def test_link_line(self, soup):
        lines = _walk(soup, '<p>See <a href="https://x.com/a?b=1&amp;c=2">the  docs</a></p>')
        assert lines == ["[the docs](https://x.com/a?b=1&c=2)"]

    def test_link_without_text_emits_nothing(self, soup):
        assert _walk(soup, '<div><a href="https://x.com"><img src="a.png"></a></div>') == []

    def test_empty_href_falls_through_to_text(self, soup):
        assert _walk(soup, '<div><a href="">Click me</a></div>') == ["Click me"]


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

class TestLists:
    def test_checkbox_at_level_one(self, soup):
        html = (
            '<ul><li><span class="scriptor-listItem-marker-checkbox" aria-checked="true"></span>'
            '<span class="scriptor-textRun">Buy milk</span></li></ul>'
        )
        assert _walk(soup, html, indent=1) == ["  - [x] Buy milk"]

    def test_bullet_with_text_run_and_link(self, soup):
        html = (
            '<ul><li><span class="scriptor-listItem-marker-bullet"></span>'
            '<span class="scriptor-textRun">See</span> <a href="https://x.com">here</a></li></ul>'
        )
        assert _walk(soup, html) == ["- See [here](https://x.com)"]

    def test_wrapper_sets_level_from_margin(self, soup):
        html = (
            '<div class="scriptor-listItem" style="margin-left: 81px;">'
            "<ol><li>Third level</li></ol></div>"
        )
        assert _walk(soup, html) == ["    1. Third level"]

    def test_wrapper_level_does_not_leak_to_siblings(self, soup):
        html = (
            '<div class="scriptor-listItem" style="margin-left: 54px;"><ul><li>a</li></ul></div>'
            "<ul><li>b</li></ul>"
        )
        assert _walk(soup, html) == ["  - a", "- b"]

    def test_structural_nesting_keeps_level(self, soup):
        html = "<ul><li>a</li><ul><li>b</li></ul></ul>"
        assert _walk(soup, html) == ["- a", "- b"]

    def test_list_item_does_not_recurse(self, soup):
        html = "<ul><li>outer <ul><li>inner</li></ul></li></ul>"
        assert _walk(soup, html) == ["- outer inner"]

    def test_empty_item_skipped(self, soup):
        assert _walk(soup, "<ul><li></li><li>x</li></ul>") == ["- x"]


# ---------------------------------------------------------------------------
# Skip, leaf, container
# ---------------------------------------------------------------------------

class TestSkipAndText:
    def test_fluent_button_skipped_with_descendants(self, soup):
        html = (
            '<div class="fui-Button"><div role="heading" aria-level="1">Hidden</div>'
            "<ul><li>Also hidden</li></ul></div><p>Shown</p>"
        )
        assert _walk(soup, html) == ["Shown"]

    def test_generated_class_and_svg_skipped(self, soup):
        html = '<div class="___abc">gen</div><svg><text>icon</text></svg><span>kept</span>'
        assert _walk(soup, html) == ["kept"]

    def test_leaf_text_normalised(self, soup):
        assert _walk(soup, "<p>  Fish &amp;\n chips </p>") == ["Fish & chips"]

    def test_entities_decoded_once(self, soup):
        assert _walk(soup, "<p>Tom &amp;amp; Jerry</p>") == ["Tom &amp; Jerry"]

    def test_mixed_content_only_walks_elements(self, soup):
        assert _walk(soup, "<div>loose text<span>inner</span></div>") == ["inner"]


# ---------------------------------------------------------------------------
# Title
# ---------------------------------------------------------------------------

class TestTitle:
    def test_first_paragraph_run_is_title(self, soup):
        lines = _walk(soup, _para("Weekly Sync") + _para("Agenda below"), title=True)
        assert lines == ["# Weekly Sync", "", "Agenda below"]

    def test_title_keeps_literal_entity_text(self, soup):
        lines = _walk(soup, _para("My &amp;lt;Doc&amp;gt;"), title=True)
        assert lines == ["# My &lt;Doc&gt;", ""]

    def test_no_title_when_not_pending(self, soup):
        assert _walk(soup, _para("Weekly Sync")) == ["Weekly Sync"]

    def test_title_must_come_first(self, soup):
        html = '<div role="heading" aria-level="1">Intro</div>' + _para("Not a title")
        assert _walk(soup, html, title=True) == ["## Intro", "", "Not a title"]

    def test_short_text_is_not_title_and_clears_flag(self, soup):
        lines = _walk(soup, _para("Hi") + _para("Later text"), title=True)
        assert lines == ["Hi", "Later text"]

    def test_skipped_nodes_keep_title_pending(self, soup):
        html = '<div class="fui-Header">chrome</div>' + _para("Real Title")
        assert _walk(soup, html, title=True) == ["# Real Title", ""]


# ---------------------------------------------------------------------------
# extract_markdown
# ---------------------------------------------------------------------------

class TestExtractMarkdown:
    def test_only_first_root_has_title(self, soup):
        doc = soup(_frame(_para("Page One")) + _frame(_para("Page Two")))
        roots = doc.find_all(class_="scriptor-pageFrame")
        assert extract_markdown(roots) == "# Page One\n\nPage Two\n"

    def test_empty_roots(self):
        assert extract_markdown([]) == ""

    def test_idempotent(self, soup, loop_page_html):
        doc = soup(loop_page_html)
        roots = doc.find_all(class_="scriptor-pageFrame")
        assert extract_markdown(roots) == extract_markdown(roots)

    def test_does_not_mutate_tree(self, soup, loop_page_html):
        doc = soup(loop_page_html)
        before = str(doc)
        extract_markdown(doc.find_all(class_="scriptor-pageFrame"))
        assert str(doc) == before
