# ABOUTME: Decoder for OpenURL ContextObject (Z39.88-2004 KEV) strings found in COinS spans.
# ABOUTME: Turns "ctx_ver=...&rft.au=..." into a nested dict, rejecting unknown key prefixes.

from typing import Any
from urllib.parse import unquote_plus

from html_metadata.errors import ContextObjectTypeError, InvalidContextObjectError

# Every key of a Z39.88-2004 KEV ContextObject starts with one of these.
DEFAULT_VALID_KEYS: frozenset[str] = frozenset(
    {
        "ctx_ver",
        "ctx_enc",
        "ctx_id",
        "ctx_tim",
        "url_ver",
        "url_tim",
        "url_ctx_fmt",
        "rft",
        "rft_id",
        "rft_val_fmt",
        "rft_dat",
        "rft_ref",
        "rft_ref_fmt",
        "rfr",
        "rfr_id",
        "rfr_val_fmt",
        "rfe",
        "rfe_id",
        "rfe_val_fmt",
        "req",
        "req_id",
        "req_val_fmt",
        "svc",
        "svc_id",
        "svc_val_fmt",
        "res",
        "res_id",
        "res_val_fmt",
    }
)


def _split_pairs(raw: str) -> list[tuple[str, str]]:
    """Split a KEV string into decoded (key, value) pairs.

    Values may contain "=", so only the first one separates key from value.
    A segment without "=" is a key with an empty value.
    """
    pairs: list[tuple[str, str]] = []
    for segment in raw.replace("&amp;", "&").split("&"):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        pairs.append((unquote_plus(key), unquote_plus(value)))
    return pairs


def _fold(container: dict[str, Any], field: str, value: str, key: str) -> None:
    """Store value under field, turning repeats into an ordered list."""
    if field not in container:
        container[field] = value
        return
    existing = container[field]
    if isinstance(existing, dict):
        raise InvalidContextObjectError(f"Key {key!r} collides with nested keys under it")
    if isinstance(existing, list):
        existing.append(value)
    else:
        container[field] = [existing, value]


class ContextObjectDecoder:
    """Decodes ContextObject strings against a fixed whitelist of key prefixes.

    A single key outside the whitelist invalidates the whole record rather
    than being skipped.
    """

    def __init__(self, valid_keys: frozenset[str] | set[str] = DEFAULT_VALID_KEYS) -> None:
        self._valid_keys = frozenset(valid_keys)

    @property
    def valid_keys(self) -> frozenset[str]:
        return self._valid_keys

    def decode(self, raw: str) -> dict[str, Any]:
        """Decode one ContextObject string.

        Args:
            raw: The title attribute of a COinS span, still percent-encoded.

        Returns:
            A dict keyed by namespace prefix. Undotted keys hold their value
            directly; dotted keys nest under the prefix, e.g. ``rft.au``
            becomes ``record["rft"]["au"]``. Repeated keys become lists in
            input order.

        Raises:
            ContextObjectTypeError: If raw is not a string.
            InvalidContextObjectError: If a key prefix is not whitelisted,
                a key clashes with a nested one, or no pairs are present.
        """
        if not isinstance(raw, str):
            raise ContextObjectTypeError(
                f"ContextObject must be a string, got {type(raw).__name__}"
            )

        record: dict[str, Any] = {}
        for key, value in _split_pairs(raw):
            prefix, *path = key.split(".")
            if prefix not in self._valid_keys:
                raise InvalidContextObjectError(f"Unrecognized ContextObject key: {key!r}")

            if not path:
                _fold(record, prefix, value, key)
                continue

            container = record
            for part in [prefix, *path[:-1]]:
                child = container.setdefault(part, {})
                if not isinstance(child, dict):
                    raise InvalidContextObjectError(
                        f"Key {key!r} nests under {part!r}, which already holds a value"
                    )
                container = child
            _fold(container, path[-1], value, key)

        if not record:
            raise InvalidContextObjectError("ContextObject contains no keys")
        return record


_default_decoder = ContextObjectDecoder()


def decode_context_object(raw: str) -> dict[str, Any]:
    """Decode a ContextObject string with the default key whitelist."""
    return _default_decoder.decode(raw)
