"""Stage 2: Record serialization and stream parsing."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator

from schdoc_ascii._utils import RECORD_HEADER_SIZE
from schdoc_ascii.errors import StreamFormatError
from schdoc_ascii.pipeline import Record


def pack_records(records: Iterable[Record]) -> bytes:
    """Concatenate serialized records with no header, trailer or separator."""
    return b"".join(record.to_bytes() for record in records)


def iter_stream(stream: bytes) -> Iterator[Record]:
    """Parse a record stream back into :class:`Record` values.

    :param stream: Bytes previously produced by :func:`pack_records`.
    :raises StreamFormatError: If a header or payload is truncated, or the
        padding byte is not zero.
    """
    offset = 0
    length = len(stream)
    while offset < length:
        if offset + RECORD_HEADER_SIZE > length:
            raise StreamFormatError(offset, "truncated record header")
        payload_length, padding, record_type = struct.unpack_from(
            "<HBB", stream, offset
        )
        if padding != 0:
            raise StreamFormatError(offset + 2, f"non-zero padding byte {padding:#04x}")
        start = offset + RECORD_HEADER_SIZE
        end = start + payload_length
        if end > length:
            raise StreamFormatError(
                offset,
                f"payload needs {payload_length} bytes, {length - start} remain",
            )
        yield Record(stream[start:end], record_type)
        offset = end


def decode_stream(stream: bytes | bytearray) -> list[Record]:
    """Return every record in *stream*, in order."""
    data = stream if isinstance(stream, bytes) else bytes(stream)
    return list(iter_stream(data))
