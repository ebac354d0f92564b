# ABOUTME: Fixed registry mapping format names to their extractor functions.
# ABOUTME: Provides extract_format, the single-format entry point.

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from html_metadata.document import ParsedDocument
from html_metadata.errors import UnknownFormatError
from html_metadata.formats.citation_meta import (
    extract_bepress,
    extract_eprints,
    extract_highwire_press,
    extract_prism,
)
from html_metadata.formats.coins import extract_coins
from html_metadata.formats.dublin_core import extract_dublin_core
from html_metadata.formats.general import extract_general
from html_metadata.formats.json_ld import extract_json_ld
from html_metadata.formats.microdata import extract_schema_org
from html_metadata.formats.opengraph import extract_opengraph
from html_metadata.formats.twitter import extract_twitter

Extractor = Callable[[ParsedDocument], Any]

METADATA_FORMATS: Mapping[str, Extractor] = MappingProxyType(
    {
        "bepress": extract_bepress,
        "coins": extract_coins,
        "dublin_core": extract_dublin_core,
        "eprints": extract_eprints,
        "general": extract_general,
        "highwire_press": extract_highwire_press,
        "json_ld": extract_json_ld,
        "opengraph": extract_opengraph,
        "prism": extract_prism,
        "schema_org": extract_schema_org,
        "twitter": extract_twitter,
    }
)

FORMAT_NAMES: tuple[str, ...] = tuple(METADATA_FORMATS)


def get_extractor(name: str) -> Extractor:
    """Look up the extractor registered under a format name."""
    try:
        return METADATA_FORMATS[name]
    except KeyError:
        raise UnknownFormatError(
            f"Unknown metadata format {name!r}; expected one of: {', '.join(FORMAT_NAMES)}"
        ) from None


def extract_format(doc: ParsedDocument, name: str) -> Any:
    """Run one registered extractor, propagating its errors unchanged.

    Raises:
        UnknownFormatError: If name is not a registered format.
        InputTypeError: If doc is not a ParsedDocument.
        NotFoundError: If the document has no metadata of that format.
    """
    return get_extractor(name)(doc)
