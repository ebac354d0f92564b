# ABOUTME: Runs every registered extractor against one document and merges the successes.
# ABOUTME: Individual extractor failures are dropped; only total failure is an error.

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from html_metadata.core.registry import FORMAT_NAMES, get_extractor
from html_metadata.document import ParsedDocument
from html_metadata.errors import InputTypeError, MetadataError, NoMetadataFoundError

logger = logging.getLogger(__name__)


def _run(name: str, doc: ParsedDocument) -> tuple[str, Any | None]:
    """Run one extractor, turning its MetadataError into a missing result."""
    try:
        return name, get_extractor(name)(doc)
    except MetadataError as exc:
        logger.debug("No %s metadata: %s", name, exc)
        return name, None


def aggregate_all(
    doc: ParsedDocument,
    formats: Iterable[str] | None = None,
    max_workers: int = 1,
) -> dict[str, Any]:
    """Extract every available metadata format from a document.

    Args:
        doc: The parsed document, shared read-only by all extractors.
        formats: Registry names to run. Defaults to every registered format.
        max_workers: Run extractors on a thread pool of this size when
            greater than 1. The result does not depend on it.

    Returns:
        Format name -> extracted metadata, for each format that was found.

    Raises:
        InputTypeError: If doc is not a ParsedDocument.
        UnknownFormatError: If formats names an unregistered format.
        NoMetadataFoundError: If no extractor found anything.
    """
    if not isinstance(doc, ParsedDocument):
        raise InputTypeError(f"Expected a ParsedDocument, got {type(doc).__name__}")

    names = tuple(formats) if formats is not None else FORMAT_NAMES
    # Unknown names fail before any extractor runs.
    for name in names:
        get_extractor(name)

    if max_workers > 1 and len(names) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            outcomes = list(pool.map(lambda name: _run(name, doc), names))
    else:
        outcomes = [_run(name, doc) for name in names]

    results = {name: value for name, value in outcomes if value is not None}
    if not results:
        raise NoMetadataFoundError("No metadata found in document")
    logger.debug("Extracted %d of %d formats: %s", len(results), len(names), ", ".join(results))
    return results
