"""Encoding pipeline stages and the shared record type."""

from __future__ import annotations

import dataclasses
import struct

from schdoc_ascii._utils import MAX_PAYLOAD_LENGTH
from schdoc_ascii.enums import RecordType
from schdoc_ascii.errors import PayloadTooLargeError

# payload_length (u16 LE), padding, record_type
_HEADER = struct.Struct("<HBB")


@dataclasses.dataclass(frozen=True, slots=True)
class Record:
    """A single FileHeader record.

    Frozen dataclass holding the raw payload bytes (NUL terminator included)
    and the record type.  Construction fails if the payload cannot be
    described by the 16-bit length field or the type does not fit a byte.
    """

    payload: bytes
    record_type: int = RecordType.ATTRIBUTE

    def __post_init__(self) -> None:
        if len(self.payload) > MAX_PAYLOAD_LENGTH:
            raise PayloadTooLargeError(len(self.payload), MAX_PAYLOAD_LENGTH)
        if not 0 <= self.record_type <= 0xFF:
            msg = f"record_type must fit in one byte, got {self.record_type}"
            raise ValueError(msg)

    @classmethod
    def from_line(cls, line: str) -> Record:
        """Build an attribute record from one (already stripped) line of text."""
        return cls((line + "\0").encode("utf-8"))

    @property
    def payload_length(self) -> int:
        return len(self.payload)

    @property
    def text(self) -> str:
        """The payload decoded as UTF-8 with its trailing NUL removed."""
        return self.payload.removesuffix(b"\0").decode("utf-8")

    def to_bytes(self) -> bytes:
        """Serialize this record to its on-disk layout.

        :returns: ``payload_length`` (little-endian u16), a zero padding byte,
            the ``record_type`` byte, then the payload.
        """
        return _HEADER.pack(self.payload_length, 0, self.record_type) + self.payload
