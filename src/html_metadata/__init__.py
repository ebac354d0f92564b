# ABOUTME: Public API for html-metadata: extract citation and social metadata from HTML.
# ABOUTME: Exports the aggregator, per-format extractors, the COinS decoder, and error types.

from html_metadata.contextobject import (
    DEFAULT_VALID_KEYS,
    ContextObjectDecoder,
    decode_context_object,
)
from html_metadata.core.aggregator import aggregate_all
from html_metadata.core.registry import FORMAT_NAMES, METADATA_FORMATS, extract_format
from html_metadata.core.sources import fetch_metadata, load_from_file, load_from_string
from html_metadata.document import ParsedDocument
from html_metadata.errors import (
    ContextObjectTypeError,
    InputTypeError,
    InvalidContextObjectError,
    MetadataError,
    NoMetadataFoundError,
    NotFoundError,
    UnknownFormatError,
)
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
from html_metadata.http import HtmlFetchError, HtmlHttpClient

__all__ = [
    "DEFAULT_VALID_KEYS",
    "FORMAT_NAMES",
    "METADATA_FORMATS",
    "ContextObjectDecoder",
    "ContextObjectTypeError",
    "HtmlFetchError",
    "HtmlHttpClient",
    "InputTypeError",
    "InvalidContextObjectError",
    "MetadataError",
    "NoMetadataFoundError",
    "NotFoundError",
    "ParsedDocument",
    "UnknownFormatError",
    "aggregate_all",
    "decode_context_object",
    "extract_bepress",
    "extract_coins",
    "extract_dublin_core",
    "extract_eprints",
    "extract_format",
    "extract_general",
    "extract_highwire_press",
    "extract_json_ld",
    "extract_opengraph",
    "extract_prism",
    "extract_schema_org",
    "extract_twitter",
    "fetch_metadata",
    "load_from_file",
    "load_from_string",
]
