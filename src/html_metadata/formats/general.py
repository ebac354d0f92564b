# ABOUTME: Extractor for general page metadata: <html lang/dir>, <title>, and common head tags.
# ABOUTME: Icons are collected as lists of attribute dicts; everything else keeps the first match.

from typing import Any

from html_metadata.core.tagmap import TEXT, TagMappedExtractor, TagRule
from html_metadata.document import ParsedDocument

_ICON_ATTRIBUTES = ("href", "sizes", "type")

GENERAL = TagMappedExtractor(
    name="general",
    marker="html[lang], html[dir], title, meta[name], link[rel]",
    rules=(
        TagRule("html[lang]", "lang", attribute="lang"),
        TagRule("html[dir]", "dir", attribute="dir"),
        TagRule("title", "title", attribute=TEXT),
        TagRule('meta[name="description" i]', "description"),
        TagRule('meta[name="author" i]', "author"),
        TagRule('meta[name="robots" i]', "robots"),
        TagRule('link[rel~="author"]', "authorlink", attribute="href"),
        TagRule('link[rel~="canonical"]', "canonical", attribute="href"),
        TagRule('link[rel~="publisher"]', "publisher", attribute="href"),
        TagRule('link[rel~="shortlink"]', "shortlink", attribute="href"),
        TagRule('link[rel~="icon"]', "icons", attribute=_ICON_ATTRIBUTES, multiple=True),
        TagRule(
            'link[rel~="apple-touch-icon"]',
            "apple_touch_icons",
            attribute=_ICON_ATTRIBUTES,
            multiple=True,
        ),
    ),
)


def extract_general(doc: ParsedDocument) -> dict[str, Any]:
    """General metadata such as the document language and text direction."""
    return GENERAL.extract(doc)
