"""Errors raised while detecting, encoding and decoding record streams."""

from __future__ import annotations


class SchDocAsciiError(Exception):
    """Base error for this package."""


class EncodingError(SchDocAsciiError):
    """Raised when an attribute line cannot be turned into a record."""


class PayloadTooLargeError(EncodingError):
    """Raised when a record payload does not fit the 16-bit length field.

    :ivar length: Byte length of the rejected payload, NUL included.
    :ivar limit: The largest length the field can hold.
    :ivar line_index: Zero-based index of the offending source line, or
        ``None`` when the payload did not come from a document.
    """

    def __init__(self, length: int, limit: int, line_index: int | None = None) -> None:
        self.length = length
        self.limit = limit
        self.line_index = line_index
        where = "" if line_index is None else f" on line {line_index + 1}"
        super().__init__(
            f"record payload of {length} bytes{where} exceeds the "
            f"{limit}-byte limit of a single record"
        )


class DocumentDecodeError(SchDocAsciiError, ValueError):
    """Raised when the full document is not valid UTF-8."""

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        super().__init__(f"document is not valid UTF-8 at byte {position}: {reason}")


class StreamFormatError(SchDocAsciiError, ValueError):
    """Raised when a record stream is truncated or malformed."""

    def __init__(self, offset: int, reason: str) -> None:
        self.offset = offset
        super().__init__(f"malformed record stream at offset {offset}: {reason}")


class NotProtelAsciiError(SchDocAsciiError, ValueError):
    """Raised by :func:`schdoc_ascii.convert` when detection misses."""
