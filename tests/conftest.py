# ABOUTME: Shared pytest fixtures for html-metadata tests.
# ABOUTME: Provides parsed-document factories and HTML files on disk.

from collections.abc import Callable
from pathlib import Path

import pytest

from html_metadata import ParsedDocument
from tests.fixtures.html_pages import EMPTY_PAGE, FULL_ARTICLE_PAGE


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def parse() -> Callable[[str], ParsedDocument]:
    """Factory turning an HTML string into a ParsedDocument."""
    return ParsedDocument.from_html


@pytest.fixture
def article_html(tmp_path: Path) -> Path:
    """An HTML file carrying several metadata formats at once."""
    filepath = tmp_path / "article.html"
    filepath.write_text(FULL_ARTICLE_PAGE, encoding="utf-8")
    return filepath


@pytest.fixture
def empty_html(tmp_path: Path) -> Path:
    """An HTML file with no recognizable metadata."""
    filepath = tmp_path / "empty.html"
    filepath.write_text(EMPTY_PAGE, encoding="utf-8")
    return filepath
