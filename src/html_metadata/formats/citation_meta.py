# ABOUTME: Extractors for the prefix-named scholarly meta tag families.
# ABOUTME: Highwire Press (citation_*), BEPress (bepress_citation_*), EPrints (eprints.*), PRISM (prism.*).

from typing import Any

from html_metadata.core.tagmap import PrefixRule, TagMappedExtractor
from html_metadata.document import ParsedDocument

HIGHWIRE_PRESS = TagMappedExtractor(
    name="highwire_press",
    marker='meta[name^="citation_"]',
    rules=(
        PrefixRule(
            "citation_",
            multiple=frozenset(
                {
                    "author",
                    "author_institution",
                    "author_email",
                    "author_orcid",
                    "editor",
                    "keywords",
                    "reference",
                }
            ),
        ),
    ),
)

BEPRESS = TagMappedExtractor(
    name="bepress",
    marker='meta[name^="bepress_citation_"]',
    rules=(
        PrefixRule(
            "bepress_citation_",
            multiple=frozenset({"author", "author_institution", "keywords"}),
        ),
    ),
)

EPRINTS = TagMappedExtractor(
    name="eprints",
    marker='meta[name^="eprints."]',
    rules=(
        PrefixRule(
            "eprints.",
            multiple=frozenset(
                {
                    "creators_name",
                    "creators_id",
                    "editors_name",
                    "editors_id",
                    "contributors_name",
                    "contributors_id",
                    "subjects",
                    "divisions",
                    "keywords",
                }
            ),
        ),
    ),
)

PRISM = TagMappedExtractor(
    name="prism",
    marker='meta[name^="prism."]',
    rules=(PrefixRule("prism.", multiple=frozenset({"keyword", "subject"})),),
)


def extract_highwire_press(doc: ParsedDocument) -> dict[str, Any]:
    """Highwire Press (Google Scholar) citation_* tags, prefix stripped."""
    return HIGHWIRE_PRESS.extract(doc)


def extract_bepress(doc: ParsedDocument) -> dict[str, Any]:
    return BEPRESS.extract(doc)


def extract_eprints(doc: ParsedDocument) -> dict[str, Any]:
    return EPRINTS.extract(doc)


def extract_prism(doc: ParsedDocument) -> dict[str, Any]:
    return PRISM.extract(doc)
