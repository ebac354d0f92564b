# ABOUTME: JSON-LD extractor for <script type="application/ld+json"> blocks.
# ABOUTME: Malformed blocks are skipped; the result lists every parsed object in document order.

import json
import logging
from typing import Any

from html_metadata.document import ParsedDocument
from html_metadata.errors import InputTypeError, NotFoundError

logger = logging.getLogger(__name__)

_SELECTOR = 'script[type="application/ld+json" i]'


def _parse_block(raw: str) -> list[dict[str, Any]]:
    """Parse one script body; a top-level array contributes each of its objects."""
    raw = raw.strip()
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        logger.debug("Skipping malformed JSON-LD block: %s", exc)
        return []
    if isinstance(data, list):
        return [item for item in data if isinstance(item, dict)]
    if isinstance(data, dict):
        return [data]
    return []


def extract_json_ld(doc: ParsedDocument) -> list[dict[str, Any]]:
    """All JSON-LD objects embedded in a document.

    Raises:
        InputTypeError: If doc is not a ParsedDocument.
        NotFoundError: If there are no JSON-LD blocks or none parse.
    """
    if not isinstance(doc, ParsedDocument):
        raise InputTypeError(f"Expected a ParsedDocument, got {type(doc).__name__}")

    objects: list[dict[str, Any]] = []
    for script in doc.select(_SELECTOR):
        objects.extend(_parse_block(str(script.string or "")))

    if not objects:
        raise NotFoundError("No JSON-LD found in document")
    return objects
