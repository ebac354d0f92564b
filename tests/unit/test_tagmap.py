# ABOUTME: Unit tests for the table-driven TagMappedExtractor engine.
# ABOUTME: Covers cardinality, precedence, attribute sources, prefix rules, and failures.

import pytest

from html_metadata.core.tagmap import TEXT, Keep, PrefixRule, TagMappedExtractor, TagRule
from html_metadata.document import ParsedDocument
from html_metadata.errors import InputTypeError, NotFoundError

PAGE = """
<html>
<head>
  <title>Page title</title>
  <meta name="x.title" content="First" />
  <meta name="x.title" content="Second" />
  <meta name="x.author" content="Ann" />
  <meta name="x.author" content="" />
  <meta name="x.author" content="Bob" />
  <link rel="icon" href="/a.png" sizes="16x16" />
  <link rel="icon" href="/b.png" />
</head>
</html>
"""


def _extractor(*rules: TagRule | PrefixRule, marker: str = 'meta[name^="x."]') -> TagMappedExtractor:
    return TagMappedExtractor(name="test", marker=marker, rules=rules)


@pytest.fixture
def doc() -> ParsedDocument:
    return ParsedDocument.from_html(PAGE)


class TestTagRule:
    """Tests for TagRule handling."""

    def test_single_keeps_first(self, doc: ParsedDocument) -> None:
        """By default the first occurrence of a single field wins."""
        result = _extractor(TagRule('meta[name="x.title"]', "title")).extract(doc)
        assert result == {"title": "First"}

    def test_single_keep_last(self, doc: ParsedDocument) -> None:
        """Keep.LAST lets the last occurrence win."""
        rule = TagRule('meta[name="x.title"]', "title", keep=Keep.LAST)
        assert _extractor(rule).extract(doc) == {"title": "Second"}

    def test_multiple_preserves_order_and_skips_empty(self, doc: ParsedDocument) -> None:
        """Multiple fields collect non-empty values in document order."""
        rule = TagRule('meta[name="x.author"]', "authors", multiple=True)
        assert _extractor(rule).extract(doc) == {"authors": ["Ann", "Bob"]}

    def test_text_source(self, doc: ParsedDocument) -> None:
        """TEXT reads the element's text content."""
        rule = TagRule("title", "title", attribute=TEXT)
        assert _extractor(rule).extract(doc) == {"title": "Page title"}

    def test_tuple_source_builds_dicts(self, doc: ParsedDocument) -> None:
        """A tuple of attributes yields one dict per element with present attributes."""
        rule = TagRule('link[rel="icon"]', "icons", attribute=("href", "sizes"), multiple=True)
        assert _extractor(rule).extract(doc) == {
            "icons": [{"href": "/a.png", "sizes": "16x16"}, {"href": "/b.png"}]
        }

    def test_unmatched_field_is_omitted(self, doc: ParsedDocument) -> None:
        """Fields with no matches are absent rather than None."""
        result = _extractor(
            TagRule('meta[name="x.title"]', "title"),
            TagRule('meta[name="x.missing"]', "missing"),
        ).extract(doc)
        assert "missing" not in result


class TestPrefixRule:
    """Tests for PrefixRule handling."""

    def test_strips_prefix(self, doc: ParsedDocument) -> None:
        """Field names are the meta name minus the prefix."""
        result = _extractor(PrefixRule("x.", multiple=frozenset({"author"}))).extract(doc)
        assert result == {"title": "First", "author": ["Ann", "Bob"]}

    def test_selector(self) -> None:
        """The generated selector matches on the name prefix."""
        assert PrefixRule("citation_").selector == 'meta[name^="citation_"]'

    def test_ignore_case_and_exclude(self) -> None:
        """ignore_case matches the prefix in any case; excluded fields are skipped."""
        doc = ParsedDocument.from_html(
            '<meta name="X.Title" content="Skipped">'
            '<meta name="X.Date.Created" content="2001">'
        )
        rule = PrefixRule("x.", ignore_case=True, exclude=frozenset({"title"}))
        assert rule.selector == 'meta[name^="x." i]'
        result = _extractor(rule, marker='meta[name^="x." i]').extract(doc)
        assert result == {"Date.Created": "2001"}


class TestTagMappedExtractorErrors:
    """Tests for extractor failures."""

    def test_no_marker_raises_not_found(self) -> None:
        """A document without marker tags raises NotFoundError."""
        doc = ParsedDocument.from_html("<p>nothing</p>")
        with pytest.raises(NotFoundError, match="test"):
            _extractor(TagRule('meta[name="x.title"]', "title")).extract(doc)

    def test_marker_without_values_raises_not_found(self) -> None:
        """Markers whose values are all empty still count as not found."""
        doc = ParsedDocument.from_html('<meta name="x.title" content="">')
        with pytest.raises(NotFoundError):
            _extractor(TagRule('meta[name="x.title"]', "title")).extract(doc)

    def test_non_document_raises_input_type_error(self) -> None:
        """Passing something other than a ParsedDocument is an input error."""
        with pytest.raises(InputTypeError):
            _extractor(TagRule('meta[name="x.title"]', "title")).extract(None)  # type: ignore[arg-type]

    def test_callable(self, doc: ParsedDocument) -> None:
        """Extractors can be called directly like plain functions."""
        extractor = _extractor(TagRule('meta[name="x.title"]', "title"))
        assert extractor(doc) == extractor.extract(doc)
