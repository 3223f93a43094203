"""Internal shared constants and validators for schdoc_ascii."""

from __future__ import annotations

#: Signature line written by Protel/Altium at the top of ASCII schematics.
MARKER: str = "Protel for Windows - Schematic Capture Ascii File"

#: Number of leading bytes the detector decodes and searches for the marker.
DEFAULT_HEAD_BYTES: int = 256

#: Largest payload a record can describe in its 16-bit length field.
MAX_PAYLOAD_LENGTH: int = 0xFFFF

#: payload_length (2) + padding (1) + record_type (1).
RECORD_HEADER_SIZE: int = 4


def _validate_head_bytes(head_bytes: int) -> None:
    """Raise ValueError if *head_bytes* is not a positive integer."""
    if (
        isinstance(head_bytes, bool)
        or not isinstance(head_bytes, int)
        or head_bytes < 1
    ):
        msg = "head_bytes must be a positive integer"
        raise ValueError(msg)
