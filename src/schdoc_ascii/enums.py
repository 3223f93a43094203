"""Enumerations for schdoc_ascii."""

import enum


class RecordType(enum.IntEnum):
    """Value of the ``record_type`` byte in a FileHeader record."""

    ATTRIBUTE = 0
