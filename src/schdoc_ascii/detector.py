"""Protel ASCII schematic detection."""

from __future__ import annotations

import codecs
import logging

from schdoc_ascii._utils import DEFAULT_HEAD_BYTES, MARKER, _validate_head_bytes

logger = logging.getLogger(__name__)


def is_protel_ascii_header(text: str | None) -> bool:
    """Return True if *text* contains the ASCII schematic signature."""
    if text is None:
        return False
    return MARKER in text


def is_target_format(
    buffer: bytes | bytearray, head_bytes: int = DEFAULT_HEAD_BYTES
) -> bool:
    """Decide whether *buffer* holds a Protel ASCII schematic.

    Only the first *head_bytes* bytes are decoded.  An invalid UTF-8
    sequence in that prefix is a miss, not an error; a multi-byte character
    cut by the boundary is held back rather than treated as invalid.

    :param buffer: The raw file contents, or at least its first bytes.
    :param head_bytes: How many leading bytes to inspect.
    :returns: ``True`` if the decoded prefix contains the signature.
    """
    _validate_head_bytes(head_bytes)
    try:
        decoder = codecs.getincrementaldecoder("utf-8")()
        head = decoder.decode(bytes(buffer[:head_bytes]), final=False)
    except UnicodeDecodeError:
        logger.debug("prefix is not valid UTF-8; not a Protel ASCII file")
        return False
    return is_protel_ascii_header(head)


class SchDocDetector:
    """Incremental Protel ASCII detector.

    Implements a feed/close pattern for callers that read files in chunks.
    Only the first *head_bytes* bytes are kept; once they have arrived
    :attr:`done` is set and further data is ignored.
    """

    def __init__(self, head_bytes: int = DEFAULT_HEAD_BYTES) -> None:
        _validate_head_bytes(head_bytes)
        self._head_bytes = head_bytes
        self._buffer = bytearray()
        self._closed = False
        self._result: bool | None = None

    def feed(self, byte_str: bytes | bytearray) -> None:
        """Feed a chunk of bytes to the detector.

        :raises ValueError: If called after :meth:`close` without a
            :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        remaining = self._head_bytes - len(self._buffer)
        if remaining > 0:
            self._buffer.extend(byte_str[:remaining])

    def close(self) -> bool:
        """Finalize detection and return the verdict."""
        if not self._closed:
            self._closed = True
            self._result = is_target_format(bytes(self._buffer), self._head_bytes)
        return bool(self._result)

    def reset(self) -> None:
        """Reset the detector to its initial state for reuse."""
        self._buffer = bytearray()
        self._closed = False
        self._result = None

    @property
    def done(self) -> bool:
        """Whether enough bytes have arrived to decide."""
        return self._closed or len(self._buffer) >= self._head_bytes

    @property
    def result(self) -> bool | None:
        """The verdict, or ``None`` before :meth:`close`."""
        return self._result
