"""Protel ASCII schematic to FileHeader record stream converter."""

from __future__ import annotations

from schdoc_ascii.detector import SchDocDetector, is_protel_ascii_header, is_target_format
from schdoc_ascii.encoder import encode, iter_records
from schdoc_ascii.enums import RecordType
from schdoc_ascii.errors import (
    DocumentDecodeError,
    EncodingError,
    NotProtelAsciiError,
    PayloadTooLargeError,
    SchDocAsciiError,
    StreamFormatError,
)
from schdoc_ascii.pipeline import Record
from schdoc_ascii.pipeline.records import decode_stream

__version__ = "1.0.0"
__all__ = [
    "DocumentDecodeError",
    "EncodingError",
    "NotProtelAsciiError",
    "PayloadTooLargeError",
    "Record",
    "RecordType",
    "SchDocAsciiError",
    "SchDocDetector",
    "StreamFormatError",
    "convert",
    "decode_stream",
    "encode",
    "is_protel_ascii_header",
    "is_target_format",
    "iter_records",
]


def convert(buffer: bytes | bytearray) -> bytes:
    """Detect and encode in one call.

    :raises NotProtelAsciiError: If *buffer* is not a Protel ASCII schematic.
    """
    data = buffer if isinstance(buffer, bytes) else bytes(buffer)
    if not is_target_format(data):
        msg = "input is not a Protel ASCII schematic"
        raise NotProtelAsciiError(msg)
    return encode(data)
