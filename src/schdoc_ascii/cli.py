"""Command-line interface for schdoc_ascii."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import schdoc_ascii
from schdoc_ascii.detector import is_target_format
from schdoc_ascii.encoder import encode
from schdoc_ascii.errors import SchDocAsciiError
from schdoc_ascii.pipeline.records import decode_stream

_PROG = "schdoc-ascii"


def _read_input(path: str | None) -> tuple[str, bytes]:
    if path is None or path == "-":
        return "stdin", sys.stdin.buffer.read()
    return path, Path(path).read_bytes()


def _dump(stream: bytes) -> None:
    for index, record in enumerate(decode_stream(stream)):
        print(f"{index}\t{record.payload_length}\t{record.text}")


def main(argv: list[str] | None = None) -> int:
    """Run the ``schdoc-ascii`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    :returns: The process exit status.
    """
    parser = argparse.ArgumentParser(
        prog=_PROG,
        description="Convert a Protel ASCII schematic into a FileHeader record stream.",
    )
    parser.add_argument("file", nargs="?", default=None, help="Input file (default: stdin)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-o", "--output", help="Write the record stream to this file")
    parser.add_argument(
        "--check", action="store_true", help="Only report whether the input is detected"
    )
    parser.add_argument(
        "--force", action="store_true", help="Encode even if detection fails"
    )
    mode.add_argument(
        "--dump", action="store_true", help="Print one line per record instead of binary"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"{_PROG} {schdoc_ascii.__version__}"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    try:
        name, data = _read_input(args.file)
    except OSError as e:
        print(f"{_PROG}: {args.file}: {e}", file=sys.stderr)
        return 1

    detected = is_target_format(data)
    if args.check:
        print(f"{name}: {'protel-ascii' if detected else 'not protel-ascii'}")
        return 0 if detected else 1
    if not detected and not args.force:
        print(f"{_PROG}: {name}: not a Protel ASCII schematic", file=sys.stderr)
        return 1

    try:
        stream = encode(data)
    except SchDocAsciiError as e:
        print(f"{_PROG}: {name}: {e}", file=sys.stderr)
        return 2

    if args.dump:
        _dump(stream)
    elif args.output:
        try:
            Path(args.output).write_bytes(stream)
        except OSError as e:
            print(f"{_PROG}: {args.output}: {e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.buffer.write(stream)
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
