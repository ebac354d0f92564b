# ABOUTME: Open Graph protocol extractor for <meta property="og:*"> and its vertical namespaces.
# ABOUTME: Structured properties (og:image:width) attach to the preceding og:image object.

from typing import Any

from html_metadata.document import ParsedDocument, attribute
from html_metadata.errors import InputTypeError, NotFoundError

_NAMESPACES = ("og", "article", "book", "profile", "video", "music")

# Properties that open a new sub-object; their own value is stored under "url".
_STRUCTURED = frozenset({"image", "video", "audio"})

# Non-structured properties that may legitimately repeat.
_ARRAYS: dict[str, frozenset[str]] = {
    "og": frozenset({"locale:alternate"}),
    "article": frozenset({"author", "tag"}),
    "book": frozenset({"author", "tag"}),
    "video": frozenset({"actor", "actor:role", "director", "writer", "tag"}),
    "music": frozenset(
        {"song", "song:disc", "song:track", "album", "album:disc", "album:track", "musician", "creator"}
    ),
}

_SELECTOR = ", ".join(f'meta[property^="{ns}:"]' for ns in _NAMESPACES)


def _store(target: dict[str, Any], key: str, value: str, repeatable: bool) -> None:
    if repeatable:
        target.setdefault(key, []).append(value)
    else:
        # Per the protocol, the first tag wins on conflicts.
        target.setdefault(key, value)


def _add_structured(
    result: dict[str, Any],
    open_objects: dict[str, dict[str, str]],
    kind: str,
    sub: str | None,
    value: str,
) -> None:
    """Start or extend the current og:image/og:video/og:audio object."""
    objects = result.setdefault(kind, [])
    current = open_objects.get(kind)
    if sub is None or sub == "url":
        # og:image and og:image:url are synonyms; a repeat starts a new object.
        if current is None or "url" in current:
            current = {}
            objects.append(current)
            open_objects[kind] = current
        current["url"] = value
        return
    if current is None:
        current = {}
        objects.append(current)
        open_objects[kind] = current
    current.setdefault(sub, value)


def extract_opengraph(doc: ParsedDocument) -> dict[str, Any]:
    """Open Graph metadata of a document.

    ``og:`` properties drop their prefix (``og:title`` -> ``title``).
    Properties of the vertical namespaces keep their full name
    (``article:published_time``).
    ``image``, ``video`` and ``audio`` are dicts, or lists of dicts when the
    primary property repeats.

    Raises:
        InputTypeError: If doc is not a ParsedDocument.
        NotFoundError: If the document has no Open Graph properties.
    """
    if not isinstance(doc, ParsedDocument):
        raise InputTypeError(f"Expected a ParsedDocument, got {type(doc).__name__}")

    result: dict[str, Any] = {}
    open_objects: dict[str, dict[str, str]] = {}

    for element in doc.select(_SELECTOR):
        prop = attribute(element, "property") or ""
        value = (attribute(element, "content") or "").strip()
        if not value:
            continue
        namespace, _, name = prop.partition(":")
        if not name:
            continue

        if namespace == "og":
            primary, _, sub = name.partition(":")
            if primary in _STRUCTURED:
                _add_structured(result, open_objects, primary, sub or None, value)
                continue
            _store(result, name, value, name in _ARRAYS["og"])
            continue

        _store(result, prop, value, name in _ARRAYS.get(namespace, frozenset()))

    for kind in _STRUCTURED:
        objects = result.get(kind)
        if objects is not None and len(objects) == 1:
            result[kind] = objects[0]

    if not result:
        raise NotFoundError("No opengraph metadata found in document")
    return result
