# ABOUTME: Read-only DOM provider used by every extractor.
# ABOUTME: Wraps a BeautifulSoup tree behind select/attribute/text helpers.

from bs4 import BeautifulSoup
from bs4.element import Tag

from html_metadata.errors import InputTypeError

DEFAULT_PARSER = "html.parser"


class ParsedDocument:
    """A parsed HTML document that extractors query but never modify.

    The whole document is held in memory, so queries never block on I/O
    and one instance can be shared across concurrently running extractors.
    """

    def __init__(self, soup: BeautifulSoup) -> None:
        if not isinstance(soup, BeautifulSoup):
            raise InputTypeError(
                f"ParsedDocument expects a BeautifulSoup tree, got {type(soup).__name__}"
            )
        self._soup = soup

    @classmethod
    def from_html(cls, html: str | bytes, parser: str = DEFAULT_PARSER) -> "ParsedDocument":
        """Parse raw HTML text or bytes into a document.

        Args:
            html: The markup to parse. Bytes are decoded by BeautifulSoup's
                encoding detection.
            parser: Name of the tree builder passed to BeautifulSoup.

        Raises:
            InputTypeError: If html is neither str nor bytes.
        """
        if not isinstance(html, (str, bytes)):
            raise InputTypeError(f"HTML must be str or bytes, got {type(html).__name__}")
        return cls(BeautifulSoup(html, parser))

    @property
    def root(self) -> BeautifulSoup:
        """The underlying tree, for extractors that walk it directly."""
        return self._soup

    def select(self, selector: str) -> list[Tag]:
        """All elements matching a CSS selector, in document order."""
        return list(self._soup.select(selector))

    def select_one(self, selector: str) -> Tag | None:
        return self._soup.select_one(selector)

    def has_match(self, selector: str) -> bool:
        """Whether at least one element matches the selector."""
        return self._soup.select_one(selector) is not None


def attribute(element: Tag, name: str) -> str | None:
    """Read an attribute as a string, or None if missing.

    Multi-valued attributes (class, rel) come back from BeautifulSoup as
    lists; they are joined with single spaces.
    """
    value = element.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def text(element: Tag) -> str:
    """Text content of an element with surrounding whitespace stripped."""
    return element.get_text().strip()
