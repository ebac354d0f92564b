# ABOUTME: Table-driven extraction engine shared by the meta-tag metadata formats.
# ABOUTME: Each format supplies static TagRule/PrefixRule tables; this module runs them.

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from bs4.element import Tag

from html_metadata.document import ParsedDocument, attribute, text
from html_metadata.errors import InputTypeError, NotFoundError

# Sentinel attribute meaning "use the element's text content".
TEXT = "#text"


class Keep(Enum):
    """Which occurrence wins when a single-valued tag appears more than once."""

    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class TagRule:
    """Maps every element matching a CSS selector onto one output field.

    ``attribute`` is an attribute name, TEXT, or a tuple of attribute names;
    with a tuple, each match becomes a dict of the attributes it carries.
    """

    selector: str
    field: str
    attribute: str | tuple[str, ...] = "content"
    multiple: bool = False
    keep: Keep = Keep.FIRST


@dataclass(frozen=True)
class PrefixRule:
    """Maps every <meta> whose name starts with a prefix onto a field named after the rest.

    ``citation_title`` with prefix ``citation_`` becomes field ``title``.
    Fields listed in ``multiple`` collect every value in document order.
    With ``ignore_case`` the prefix matches in any case; fields whose
    lowercased name is in ``exclude`` are skipped.
    """

    prefix: str
    multiple: frozenset[str] = field(default_factory=frozenset)
    keep: Keep = Keep.FIRST
    name_attribute: str = "name"
    value_attribute: str = "content"
    ignore_case: bool = False
    exclude: frozenset[str] = field(default_factory=frozenset)

    @property
    def selector(self) -> str:
        flag = " i" if self.ignore_case else ""
        return f'meta[{self.name_attribute}^="{self.prefix}"{flag}]'


def _read(element: Tag, source: str | tuple[str, ...]) -> Any:
    """Value of one element according to a rule's attribute setting, or None."""
    if isinstance(source, tuple):
        values = {}
        for name in source:
            value = attribute(element, name)
            if value:
                values[name] = value.strip()
        return values or None
    value = text(element) if source == TEXT else attribute(element, source)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _store(result: dict[str, Any], name: str, value: Any, multiple: bool, keep: Keep) -> None:
    if multiple:
        result.setdefault(name, []).append(value)
    elif name not in result or keep is Keep.LAST:
        result[name] = value


def _apply_tag_rule(doc: ParsedDocument, rule: TagRule, result: dict[str, Any]) -> None:
    for element in doc.select(rule.selector):
        value = _read(element, rule.attribute)
        if value is not None:
            _store(result, rule.field, value, rule.multiple, rule.keep)


def _apply_prefix_rule(doc: ParsedDocument, rule: PrefixRule, result: dict[str, Any]) -> None:
    for element in doc.select(rule.selector):
        name = attribute(element, rule.name_attribute) or ""
        # The selector matched the prefix, so the slice is exact in any case.
        field_name = name[len(rule.prefix):]
        value = _read(element, rule.value_attribute)
        if not field_name or value is None or field_name.lower() in rule.exclude:
            continue
        _store(result, field_name, value, field_name in rule.multiple, rule.keep)


@dataclass(frozen=True)
class TagMappedExtractor:
    """Runs a format's static rule table against a document.

    Attributes:
        name: Registry key of the format, used in error messages.
        marker: Selector that must match at least once for the format to
            count as present in the document.
        rules: TagRule and PrefixRule entries applied in order.
    """

    name: str
    marker: str
    rules: tuple[TagRule | PrefixRule, ...]

    def __call__(self, doc: ParsedDocument) -> dict[str, Any]:
        return self.extract(doc)

    def extract(self, doc: ParsedDocument) -> dict[str, Any]:
        """Build the format's result dict.

        Raises:
            InputTypeError: If doc is not a ParsedDocument.
            NotFoundError: If the marker never matches or no rule yields a value.
        """
        if not isinstance(doc, ParsedDocument):
            raise InputTypeError(f"Expected a ParsedDocument, got {type(doc).__name__}")
        if not doc.has_match(self.marker):
            raise NotFoundError(f"No {self.name} metadata found in document")

        result: dict[str, Any] = {}
        for rule in self.rules:
            if isinstance(rule, PrefixRule):
                _apply_prefix_rule(doc, rule, result)
            else:
                _apply_tag_rule(doc, rule, result)

        if not result:
            raise NotFoundError(f"No {self.name} metadata found in document")
        return result
