# ABOUTME: COinS extractor: finds <span class="Z3988"> markers and decodes their titles.
# ABOUTME: Undecodable markers are skipped as long as at least one marker decodes.

import logging
from typing import Any

from html_metadata.contextobject import ContextObjectDecoder, decode_context_object
from html_metadata.document import ParsedDocument, attribute
from html_metadata.errors import InputTypeError, InvalidContextObjectError, NotFoundError

logger = logging.getLogger(__name__)

COINS_SELECTOR = "span.Z3988[title]"


def extract_coins(
    doc: ParsedDocument, decoder: ContextObjectDecoder | None = None
) -> list[dict[str, Any]]:
    """Decode every COinS marker in a document.

    Args:
        doc: The parsed document.
        decoder: Decoder to use instead of the default key whitelist.

    Returns:
        One ContextObject record per decodable marker, in document order.

    Raises:
        InputTypeError: If doc is not a ParsedDocument.
        NotFoundError: If there are no markers, or none of them decode.
    """
    if not isinstance(doc, ParsedDocument):
        raise InputTypeError(f"Expected a ParsedDocument, got {type(doc).__name__}")

    decode = decoder.decode if decoder is not None else decode_context_object
    markers = doc.select(COINS_SELECTOR)
    if not markers:
        raise NotFoundError("No COinS found in document")

    records: list[dict[str, Any]] = []
    for span in markers:
        try:
            records.append(decode(attribute(span, "title") or ""))
        except InvalidContextObjectError as exc:
            logger.debug("Skipping COinS marker: %s", exc)

    if not records:
        raise NotFoundError(f"None of the {len(markers)} COinS markers could be decoded")
    return records
