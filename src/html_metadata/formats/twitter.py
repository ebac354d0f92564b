# ABOUTME: Twitter Card extractor for <meta name="twitter:*"> tags.
# ABOUTME: Colon-separated names nest into dicts, e.g. twitter:app:name:iphone.

from typing import Any

from html_metadata.document import ParsedDocument, attribute
from html_metadata.errors import InputTypeError, NotFoundError

_SELECTOR = 'meta[name^="twitter:"], meta[property^="twitter:"]'

# Properties that can be either a plain value or an object with children;
# the plain value moves under this key once children show up.
_DEFAULT_SUBKEY = {"image": "url", "player": "url", "stream": "url"}


def _set_path(result: dict[str, Any], path: list[str], value: str) -> None:
    node = result
    for part in path[:-1]:
        child = node.get(part)
        if child is None:
            child = node[part] = {}
        elif not isinstance(child, dict):
            # e.g. twitter:image followed by twitter:image:alt
            child = node[part] = {_DEFAULT_SUBKEY.get(part, "value"): child}
        node = child

    leaf = path[-1]
    existing = node.get(leaf)
    if existing is None:
        node[leaf] = value
    elif isinstance(existing, dict):
        existing.setdefault(_DEFAULT_SUBKEY.get(leaf, "value"), value)
    # Otherwise the first value wins.


def extract_twitter(doc: ParsedDocument) -> dict[str, Any]:
    """Twitter Card metadata, with the ``twitter:`` prefix dropped.

    Sites use either ``name`` or ``property`` for the tag name and either
    ``content`` or ``value`` for its value; both are accepted.

    Raises:
        InputTypeError: If doc is not a ParsedDocument.
        NotFoundError: If the document has no Twitter Card tags.
    """
    if not isinstance(doc, ParsedDocument):
        raise InputTypeError(f"Expected a ParsedDocument, got {type(doc).__name__}")

    result: dict[str, Any] = {}
    for element in doc.select(_SELECTOR):
        name = attribute(element, "name") or ""
        if not name.startswith("twitter:"):
            name = attribute(element, "property") or ""
        value = (attribute(element, "content") or attribute(element, "value") or "").strip()
        path = [part for part in name.split(":")[1:] if part]
        if not path or not value:
            continue
        _set_path(result, path, value)

    if not result:
        raise NotFoundError("No twitter metadata found in document")
    return result
