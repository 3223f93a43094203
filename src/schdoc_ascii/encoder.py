"""Turn an ASCII schematic into a FileHeader record stream."""

from __future__ import annotations

import codecs
import logging
from collections.abc import Iterator

from schdoc_ascii._utils import MAX_PAYLOAD_LENGTH
from schdoc_ascii.errors import DocumentDecodeError, PayloadTooLargeError
from schdoc_ascii.pipeline import Record
from schdoc_ascii.pipeline.lines import iter_attribute_lines
from schdoc_ascii.pipeline.records import pack_records

logger = logging.getLogger(__name__)


def decode_document(buffer: bytes | bytearray) -> str:
    """Strictly decode the whole document as UTF-8.

    A leading UTF-8 byte order mark is dropped so that the first line is
    read as written.

    :raises DocumentDecodeError: If any byte sequence is invalid.  The caller
        is expected to have run detection first, so this is not recovered.
    """
    data = bytes(buffer)
    skip = len(codecs.BOM_UTF8) if data.startswith(codecs.BOM_UTF8) else 0
    try:
        return data[skip:].decode("utf-8")
    except UnicodeDecodeError as e:
        raise DocumentDecodeError(skip + e.start, e.reason) from e


def iter_records(text: str) -> Iterator[Record]:
    """Yield one :class:`Record` per attribute line of *text*, in order.

    :raises PayloadTooLargeError: If a line's payload exceeds 65535 bytes;
        the error carries the zero-based index of the source line.
    """
    for index, line in iter_attribute_lines(text):
        try:
            record = Record.from_line(line)
        except PayloadTooLargeError as e:
            raise PayloadTooLargeError(e.length, MAX_PAYLOAD_LENGTH, index) from None
        yield record


def encode(buffer: bytes | bytearray) -> bytes:
    """Encode a Protel ASCII schematic into a FileHeader record stream.

    Every line that starts with ``|`` (after an optional ``L<n>:`` prefix)
    becomes one record; all other lines are dropped.  The whole operation
    either succeeds or raises, so no partial stream is ever returned.

    :param buffer: The complete file contents.
    :returns: The concatenated records.
    :raises DocumentDecodeError: If *buffer* is not valid UTF-8.
    :raises PayloadTooLargeError: If any single record would be too large.
    """
    text = decode_document(buffer)
    records = list(iter_records(text))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "encoded %d attribute records from %d bytes of input",
            len(records),
            len(buffer),
        )
    return pack_records(records)
