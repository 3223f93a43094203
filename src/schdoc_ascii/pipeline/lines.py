"""Stage 1: Line splitting and attribute-line selection."""

from __future__ import annotations

import re
from collections.abc import Iterator

# Only "\n" and "\r\n" terminate a line; a lone "\r" stays in the text.
_LINE_BREAK_RE = re.compile(r"\r?\n")

# Inline line-number prefix such as "L123: " emitted by some exporters.
# Digits are ASCII only; the trailing whitespace may be any Unicode space.
_LINE_PREFIX_RE = re.compile(r"L[0-9]+:\s*")

ATTRIBUTE_DELIMITER = "|"


def split_lines(text: str) -> list[str]:
    """Split decoded document text into lines without their terminators.

    A trailing terminator yields a final empty line, which callers skip.
    """
    return _LINE_BREAK_RE.split(text)


def strip_line_prefix(line: str) -> str:
    """Remove one leading ``L<digits>:`` prefix and the whitespace after it."""
    match = _LINE_PREFIX_RE.match(line)
    if match is None:
        return line
    return line[match.end() :]


def is_attribute_line(line: str) -> bool:
    """Return True if *line* (already stripped) is an attribute line."""
    return line.startswith(ATTRIBUTE_DELIMITER)


def iter_attribute_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_index, line)`` for every attribute line in *text*.

    :param text: The full decoded document.
    :returns: An iterator over zero-based source line indices paired with
        the line text after prefix stripping, in document order.
    """
    for index, raw in enumerate(split_lines(text)):
        if not raw:
            continue
        line = strip_line_prefix(raw)
        if is_attribute_line(line):
            yield index, line
