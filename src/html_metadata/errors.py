# ABOUTME: Error taxonomy shared by every extractor, the decoder, and the aggregator.
# ABOUTME: All errors derive from MetadataError so callers can catch one base class.


class MetadataError(Exception):
    """Base class for all html-metadata errors."""


class InputTypeError(MetadataError, TypeError):
    """Raised when an input is not of the expected kind (e.g. a non-string title)."""


class NotFoundError(MetadataError):
    """Raised when a document holds no markers for a particular format."""


class InvalidContextObjectError(MetadataError, ValueError):
    """Raised when a COinS string breaks the key whitelist or decodes to nothing."""


class ContextObjectTypeError(InputTypeError, InvalidContextObjectError):
    """Raised when something other than a string is handed to the COinS decoder."""


class NoMetadataFoundError(MetadataError):
    """Raised by the aggregator when every registered extractor failed."""


class UnknownFormatError(MetadataError, KeyError):
    """Raised when a format name is not in the extractor registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
