from __future__ import annotations

import dataclasses

import pytest

from schdoc_ascii.enums import RecordType
from schdoc_ascii.errors import PayloadTooLargeError, StreamFormatError
from schdoc_ascii.pipeline import Record
from schdoc_ascii.pipeline.records import decode_stream, iter_stream, pack_records


def test_record_from_line():
    r = Record.from_line("|RECORD=1")
    assert r.payload == b"|RECORD=1\x00"
    assert r.payload_length == 10
    assert r.record_type == RecordType.ATTRIBUTE
    assert r.text == "|RECORD=1"


def test_record_to_bytes():
    assert Record.from_line("|A").to_bytes() == b"\x03\x00\x00\x00|A\x00"


def test_record_length_is_little_endian():
    r = Record.from_line("|" + "x" * 299)
    assert r.to_bytes()[:2] == (301).to_bytes(2, "little")


def test_record_type_byte():
    assert Record(b"x\x00", record_type=5).to_bytes()[3] == 5


def test_record_is_frozen():
    r = Record.from_line("|A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.payload = b""


@pytest.mark.parametrize("record_type", [-1, 0x100, 300])
def test_record_type_out_of_range(record_type):
    with pytest.raises(ValueError, match="record_type must fit in one byte"):
        Record(b"x\x00", record_type=record_type)


def test_record_type_upper_bound():
    assert Record(b"x\x00", record_type=0xFF).to_bytes()[3] == 0xFF


def test_record_too_large():
    with pytest.raises(PayloadTooLargeError) as excinfo:
        Record(b"x" * 0x10000)
    assert excinfo.value.line_index is None
    assert "65536" in str(excinfo.value)


def test_pack_records_concatenates():
    records = [Record.from_line("|A"), Record.from_line("|BB")]
    assert pack_records(records) == b"\x03\x00\x00\x00|A\x00\x04\x00\x00\x00|BB\x00"


def test_pack_no_records():
    assert pack_records([]) == b""


def test_decode_stream():
    records = [Record.from_line("|A"), Record.from_line("|Ω")]
    assert decode_stream(pack_records(records)) == records


def test_decode_bytearray():
    stream = bytearray(Record.from_line("|A").to_bytes())
    assert decode_stream(stream) == [Record.from_line("|A")]


def test_decode_empty_stream():
    assert decode_stream(b"") == []


def test_decode_zero_length_payload():
    assert decode_stream(b"\x00\x00\x00\x00") == [Record(b"")]


def test_decode_truncated_header():
    stream = Record.from_line("|A").to_bytes() + b"\x03\x00"
    with pytest.raises(StreamFormatError, match="truncated record header") as excinfo:
        decode_stream(stream)
    assert excinfo.value.offset == 7


def test_decode_truncated_payload():
    with pytest.raises(StreamFormatError, match="payload needs 3 bytes, 1 remain"):
        decode_stream(b"\x03\x00\x00\x00|")


def test_decode_nonzero_padding():
    with pytest.raises(StreamFormatError, match="padding") as excinfo:
        decode_stream(b"\x01\x00\x01\x00\x00")
    assert excinfo.value.offset == 2


def test_iter_stream_yields_before_error():
    stream = Record.from_line("|A").to_bytes() + b"\xff"
    it = iter_stream(stream)
    assert next(it).text == "|A"
    with pytest.raises(StreamFormatError):
        next(it)
