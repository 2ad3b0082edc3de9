"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from looptomd.settings import ExtractorSettings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def loop_page_html() -> str:
    return _read_fixture("loop_page.html")


@pytest.fixture
def multi_page_html() -> str:
    return _read_fixture("multi_page.html")


@pytest.fixture
def main_only_html() -> str:
    return _read_fixture("main_only.html")


@pytest.fixture
def no_content_html() -> str:
    return _read_fixture("no_content.html")


@pytest.fixture
def settings() -> ExtractorSettings:
    return ExtractorSettings()


@pytest.fixture
def soup():
    """Factory: parse an HTML fragment with the default tree builder."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "lxml")

    return _parse
