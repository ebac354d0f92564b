# ABOUTME: Dublin Core extractor for <meta name="DC.*"> and <meta name="DCTERMS.*"> tags.
# ABOUTME: Element names match case-insensitively; the first occurrence of a single field wins.

from typing import Any

from html_metadata.core.tagmap import PrefixRule, TagMappedExtractor, TagRule
from html_metadata.document import ParsedDocument

# (element name, repeatable)
_ELEMENTS: tuple[tuple[str, bool], ...] = (
    ("title", False),
    ("alternative", False),
    ("creator", True),
    ("contributor", True),
    ("subject", True),
    ("description", False),
    ("abstract", False),
    ("publisher", False),
    ("date", False),
    ("created", False),
    ("issued", False),
    ("modified", False),
    ("available", False),
    ("dateAccepted", False),
    ("dateSubmitted", False),
    ("type", False),
    ("format", False),
    ("extent", False),
    ("identifier", True),
    ("bibliographicCitation", False),
    ("source", False),
    ("language", True),
    ("relation", True),
    ("isPartOf", False),
    ("coverage", False),
    ("spatial", False),
    ("temporal", False),
    ("rights", False),
    ("license", False),
    ("accessRights", False),
    ("audience", False),
)


def _selector(element: str) -> str:
    return f'meta[name="dc.{element}" i], meta[name="dcterms.{element}" i]'


_KNOWN = frozenset(element.lower() for element, _ in _ELEMENTS)

# Names outside the table (refinements such as DC.Creator.PersonalName) keep
# the rest of their name as written.
_OTHER = tuple(
    PrefixRule(prefix, ignore_case=True, exclude=_KNOWN) for prefix in ("dc.", "dcterms.")
)

DUBLIN_CORE = TagMappedExtractor(
    name="dublin_core",
    marker='meta[name^="dc." i], meta[name^="dcterms." i]',
    rules=tuple(
        TagRule(_selector(element), element, multiple=repeatable)
        for element, repeatable in _ELEMENTS
    )
    + _OTHER,
)


def extract_dublin_core(doc: ParsedDocument) -> dict[str, Any]:
    """Dublin Core metadata of a document as a dict keyed by element name."""
    return DUBLIN_CORE.extract(doc)
