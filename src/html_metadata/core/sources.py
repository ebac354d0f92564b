# ABOUTME: Convenience entry points that parse HTML from a string, a file, or a URL.
# ABOUTME: Each one builds a ParsedDocument and hands it to the aggregator.

from pathlib import Path
from typing import Any

from html_metadata.core.aggregator import aggregate_all
from html_metadata.document import DEFAULT_PARSER, ParsedDocument
from html_metadata.http import HtmlHttpClient, HttpClient


def is_url(source: str) -> bool:
    """True if source names an http(s) resource rather than a local file."""
    return source.startswith(("http://", "https://"))


def read_document(
    path: Path | str, encoding: str | None = None, parser: str = DEFAULT_PARSER
) -> ParsedDocument:
    """Parse an HTML file.

    Args:
        path: File to read.
        encoding: Text encoding of the file. When None the raw bytes are
            handed to the parser, which detects the encoding itself.
        parser: BeautifulSoup tree builder name.

    Raises:
        OSError: If the file cannot be read.
    """
    path = Path(path)
    html: str | bytes = (
        path.read_text(encoding=encoding) if encoding is not None else path.read_bytes()
    )
    return ParsedDocument.from_html(html, parser=parser)


def fetch_document(
    url: str, client: HttpClient | None = None, parser: str = DEFAULT_PARSER
) -> ParsedDocument:
    """Fetch and parse a page, closing the client only if it was created here.

    Raises:
        HtmlFetchError: If the page cannot be fetched.
    """
    if client is None:
        owned = HtmlHttpClient()
        try:
            html = owned.get_text(url)
        finally:
            owned.close()
    else:
        html = client.get_text(url)
    return ParsedDocument.from_html(html, parser=parser)


def load_document(
    source: str, client: HttpClient | None = None, parser: str = DEFAULT_PARSER
) -> ParsedDocument:
    """Parse source, fetching it when it is a URL and reading it from disk otherwise."""
    if is_url(source):
        return fetch_document(source, client=client, parser=parser)
    return read_document(source, parser=parser)


def load_from_string(html: str | bytes, parser: str = DEFAULT_PARSER) -> dict[str, Any]:
    """Extract all available metadata from an HTML string."""
    return aggregate_all(ParsedDocument.from_html(html, parser=parser))


def load_from_file(
    path: Path | str, encoding: str | None = None, parser: str = DEFAULT_PARSER
) -> dict[str, Any]:
    """Extract all available metadata from an HTML file.

    Raises:
        OSError: If the file cannot be read.
        NoMetadataFoundError: If the page holds no recognized metadata.
    """
    return aggregate_all(read_document(path, encoding=encoding, parser=parser))


def fetch_metadata(
    url: str, client: HttpClient | None = None, parser: str = DEFAULT_PARSER
) -> dict[str, Any]:
    """Fetch a page and extract all available metadata from it.

    Raises:
        HtmlFetchError: If the page cannot be fetched.
        NoMetadataFoundError: If the page holds no recognized metadata.
    """
    return aggregate_all(fetch_document(url, client=client, parser=parser))
