# ABOUTME: schema.org microdata extractor following the WHATWG microdata algorithm.
# ABOUTME: Produces {"items": [{"type": [...], "properties": {...}}]} with nested items inline.

from typing import Any

from bs4.element import Tag

from html_metadata.document import ParsedDocument, attribute, text
from html_metadata.errors import InputTypeError, NotFoundError

_SRC_ELEMENTS = frozenset({"audio", "embed", "iframe", "img", "source", "track", "video"})
_HREF_ELEMENTS = frozenset({"a", "area", "link"})
_VALUE_ELEMENTS = frozenset({"data", "meter"})


class _MicrodataReader:
    """Reads items out of one document; holds the tree-order index for sorting."""

    def __init__(self, doc: ParsedDocument) -> None:
        self._root = doc.root
        self._order = {id(el): i for i, el in enumerate(self._root.find_all(True))}

    def top_level_items(self) -> list[dict[str, Any]]:
        items = []
        for element in self._root.find_all(True):
            if element.has_attr("itemscope") and not element.has_attr("itemprop"):
                items.append(self._item(element, frozenset()))
        return items

    def _properties_of(self, scope: Tag) -> list[Tag]:
        """Elements holding properties of the item rooted at scope, in tree order."""
        pending: list[Tag] = [child for child in scope.children if isinstance(child, Tag)]
        for ref in (attribute(scope, "itemref") or "").split():
            referenced = self._root.find(id=ref)
            if referenced is not None:
                pending.append(referenced)

        found: list[Tag] = []
        seen: set[int] = {id(scope)}
        while pending:
            element = pending.pop()
            if id(element) in seen:
                continue
            seen.add(id(element))
            if element.has_attr("itemprop"):
                found.append(element)
            if not element.has_attr("itemscope"):
                pending.extend(child for child in element.children if isinstance(child, Tag))

        return sorted(found, key=lambda el: self._order.get(id(el), 0))

    def _value(self, element: Tag, ancestors: frozenset[int]) -> Any:
        if element.has_attr("itemscope"):
            if id(element) in ancestors:
                return "ERROR"
            return self._item(element, ancestors)
        name = element.name
        if name == "meta":
            return attribute(element, "content") or ""
        if name in _SRC_ELEMENTS:
            return attribute(element, "src") or ""
        if name in _HREF_ELEMENTS:
            return attribute(element, "href") or ""
        if name == "object":
            return attribute(element, "data") or ""
        if name in _VALUE_ELEMENTS:
            return attribute(element, "value") or ""
        if name == "time" and element.has_attr("datetime"):
            return attribute(element, "datetime") or ""
        return text(element)

    def _item(self, scope: Tag, ancestors: frozenset[int]) -> dict[str, Any]:
        ancestors = ancestors | {id(scope)}
        item: dict[str, Any] = {}
        itemtype = (attribute(scope, "itemtype") or "").split()
        if itemtype:
            item["type"] = itemtype
        itemid = attribute(scope, "itemid")
        if itemid:
            item["id"] = itemid.strip()

        properties: dict[str, list[Any]] = {}
        for element in self._properties_of(scope):
            value = self._value(element, ancestors)
            for prop in (attribute(element, "itemprop") or "").split():
                properties.setdefault(prop, []).append(value)
        item["properties"] = properties
        return item


def extract_schema_org(doc: ParsedDocument) -> dict[str, Any]:
    """Microdata items of a document, in the WHATWG JSON shape.

    Every property maps to a list of values; nested itemscope elements
    become nested item dicts.

    Raises:
        InputTypeError: If doc is not a ParsedDocument.
        NotFoundError: If the document has no top-level microdata items.
    """
    if not isinstance(doc, ParsedDocument):
        raise InputTypeError(f"Expected a ParsedDocument, got {type(doc).__name__}")

    items = _MicrodataReader(doc).top_level_items()
    if not items:
        raise NotFoundError("No schema.org microdata found in document")
    return {"items": items}
