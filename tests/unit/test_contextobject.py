# ABOUTME: Unit tests for the OpenURL ContextObject (COinS title) decoder.
# ABOUTME: Covers key nesting, multi-value folding, percent-decoding, and strict rejection.

import pytest

from html_metadata.contextobject import (
    DEFAULT_VALID_KEYS,
    ContextObjectDecoder,
    decode_context_object,
)
from html_metadata.errors import (
    ContextObjectTypeError,
    InputTypeError,
    InvalidContextObjectError,
)
from tests.fixtures.html_pages import COINS_TITLE


class TestDecodeContextObject:
    """Tests for decode_context_object with the default whitelist."""

    def test_top_level_and_nested_keys(self) -> None:
        """Undotted keys stay top-level; dotted keys nest under their prefix."""
        record = decode_context_object("ctx_ver=Z39.88-2004&rft.genre=article")
        assert record == {"ctx_ver": "Z39.88-2004", "rft": {"genre": "article"}}

    def test_repeated_key_folds_into_ordered_list(self) -> None:
        """Repeated rft.au values become a list in input order."""
        record = decode_context_object("rft.au=A&rft.au=B")
        assert record == {"rft": {"au": ["A", "B"]}}

    def test_third_repeat_appends(self) -> None:
        """A third occurrence appends to the existing list."""
        record = decode_context_object("rft.au=A&rft.au=B&rft.au=C")
        assert record["rft"]["au"] == ["A", "B", "C"]

    def test_repeated_top_level_key_folds(self) -> None:
        """Repeated undotted keys such as rft_id also fold into a list."""
        record = decode_context_object("rft_id=info%3Adoi%2F10.1%2Fx&rft_id=http%3A%2F%2Fa.org")
        assert record["rft_id"] == ["info:doi/10.1/x", "http://a.org"]

    def test_percent_and_plus_decoding(self) -> None:
        """Keys and values are percent-decoded and '+' becomes a space."""
        record = decode_context_object(COINS_TITLE)
        assert record["rft"]["atitle"] == "Viral phylodynamics"
        assert record["rft"]["au"] == ["Volz, Erik M.", "Koelle, Katia"]
        assert record["rft_val_fmt"] == "info:ofi/fmt:kev:mtx:journal"
        assert record["rft_id"] == "info:doi/10.1371/journal.pcbi.1002947"

    def test_value_may_contain_equals(self) -> None:
        """Only the first '=' separates key from value."""
        record = decode_context_object("rft_id=http://a.org/?q=1&rft.genre=book")
        assert record["rft_id"] == "http://a.org/?q=1"

    def test_escaped_ampersands_are_separators(self) -> None:
        """'&amp;' left in a raw string still separates pairs."""
        record = decode_context_object("ctx_ver=Z39.88-2004&amp;rft.genre=book")
        assert record == {"ctx_ver": "Z39.88-2004", "rft": {"genre": "book"}}

    def test_trailing_and_doubled_separators_ignored(self) -> None:
        """Empty segments from '&&' or a trailing '&' are discarded."""
        record = decode_context_object("ctx_ver=Z39.88-2004&&rft.genre=book&")
        assert record == {"ctx_ver": "Z39.88-2004", "rft": {"genre": "book"}}

    def test_key_without_value(self) -> None:
        """A segment without '=' is a key with an empty value."""
        record = decode_context_object("rft.genre")
        assert record == {"rft": {"genre": ""}}

    def test_deeper_paths_nest(self) -> None:
        """Keys with several dots nest one level per component."""
        record = decode_context_object("rft.a.b=1&rft.a.c=2")
        assert record == {"rft": {"a": {"b": "1", "c": "2"}}}

    def test_decoding_is_deterministic(self) -> None:
        """Decoding the same string twice gives equal results."""
        assert decode_context_object(COINS_TITLE) == decode_context_object(COINS_TITLE)

    def test_results_are_independent(self) -> None:
        """Mutating one decoded record does not affect the next decode."""
        first = decode_context_object("rft.au=A&rft.au=B")
        first["rft"]["au"].append("C")
        assert decode_context_object("rft.au=A&rft.au=B")["rft"]["au"] == ["A", "B"]


class TestDecodeContextObjectErrors:
    """Tests for inputs the decoder rejects."""

    def test_bad_prefix_rejects_whole_record(self) -> None:
        """Keys outside the whitelist invalidate the record."""
        with pytest.raises(InvalidContextObjectError):
            decode_context_object("badkey.a=1&badkey.b=2")

    def test_bad_keys_without_values(self) -> None:
        """Bare bad keys are rejected too."""
        with pytest.raises(InvalidContextObjectError):
            decode_context_object("badkey.a&badkey.b")

    def test_one_bad_key_among_good_ones(self) -> None:
        """A single bad key is not skipped; it fails the decode."""
        with pytest.raises(InvalidContextObjectError, match="bogus"):
            decode_context_object("ctx_ver=Z39.88-2004&rft.genre=book&bogus=1")

    def test_empty_string(self) -> None:
        """An empty string has no keys and is invalid."""
        with pytest.raises(InvalidContextObjectError):
            decode_context_object("")

    def test_only_separators(self) -> None:
        """A string of separators has no keys and is invalid."""
        with pytest.raises(InvalidContextObjectError):
            decode_context_object("&&&")

    def test_empty_key(self) -> None:
        """A segment with an empty key is rejected."""
        with pytest.raises(InvalidContextObjectError):
            decode_context_object("=value")

    @pytest.mark.parametrize("raw", [{}, None, 42, b"rft.genre=book", ["rft.genre=book"]])
    def test_non_string_input(self, raw: object) -> None:
        """Non-string input is an input type error."""
        with pytest.raises(InputTypeError):
            decode_context_object(raw)  # type: ignore[arg-type]

    def test_type_error_is_also_a_context_object_error(self) -> None:
        """The non-string error can be caught as either error kind."""
        with pytest.raises(ContextObjectTypeError) as excinfo:
            decode_context_object({})  # type: ignore[arg-type]
        assert isinstance(excinfo.value, InvalidContextObjectError)
        assert isinstance(excinfo.value, TypeError)

    def test_value_then_nested_key_conflict(self) -> None:
        """A prefix holding a plain value cannot also hold nested keys."""
        with pytest.raises(InvalidContextObjectError):
            decode_context_object("rft=x&rft.genre=book")

    def test_nested_then_value_conflict(self) -> None:
        """A field holding nested keys cannot also take a plain value."""
        with pytest.raises(InvalidContextObjectError):
            decode_context_object("rft.a.b=1&rft.a=2")


class TestContextObjectDecoder:
    """Tests for decoders built with a custom whitelist."""

    def test_default_whitelist(self) -> None:
        """The default decoder recognizes the core Z39.88 prefixes."""
        decoder = ContextObjectDecoder()
        assert decoder.valid_keys == DEFAULT_VALID_KEYS
        for key in ("ctx_ver", "rft", "rfr", "rft_id", "rfr_id", "req", "svc", "url_ver", "url_ctx_fmt"):
            assert key in decoder.valid_keys

    def test_custom_whitelist_accepts_extra_prefix(self) -> None:
        """A custom whitelist admits prefixes the default rejects."""
        decoder = ContextObjectDecoder(valid_keys={"rft", "zotero"})
        assert decoder.decode("zotero.key=ABC") == {"zotero": {"key": "ABC"}}

    def test_custom_whitelist_rejects_default_prefix(self) -> None:
        """Prefixes left out of a custom whitelist are rejected."""
        decoder = ContextObjectDecoder(valid_keys={"rft"})
        with pytest.raises(InvalidContextObjectError):
            decoder.decode("ctx_ver=Z39.88-2004&rft.genre=book")
