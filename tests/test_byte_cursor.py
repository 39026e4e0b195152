import io
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from _pdflex.tokenizer.byte_cursor import HIGH_WATER_CHUNKS, ByteCursor


def test_default_high_water_mark():
    cursor = ByteCursor(io.BytesIO(), chunk_size=8)
    assert cursor.high_water_mark == 8 * HIGH_WATER_CHUNKS


def test_chunk_size_must_be_positive():
    with pytest.raises(ValueError, match="chunk_size"):
        ByteCursor(io.BytesIO(), chunk_size=0)


def test_get_byte():
    cursor = ByteCursor(io.BytesIO(b"ab"), chunk_size=1)
    assert cursor.get_byte() == ord("a")
    assert cursor.position == 1
    assert cursor.get_byte() == ord("b")
    assert cursor.get_byte() is None
    assert cursor.position == 2


def test_peek_byte_does_not_advance():
    cursor = ByteCursor(io.BytesIO(b"a"))
    assert cursor.peek_byte() == ord("a")
    assert cursor.peek_byte() == ord("a")
    assert cursor.position == 0


def test_set_position_is_lazy():
    stream = io.BytesIO(b"0123456789")
    cursor = ByteCursor(stream)
    stream.seek(2)
    cursor.position = 7
    assert stream.tell() == 2
    assert cursor.position == 7
    assert cursor.get_byte() == ord("7")


def test_negative_position():
    cursor = ByteCursor(io.BytesIO(b"abc"))
    with pytest.raises(ValueError, match="non-negative"):
        cursor.position = -1


def test_position_beyond_end():
    cursor = ByteCursor(io.BytesIO(b"abc"))
    cursor.position = 10
    assert cursor.get_byte() is None
    assert cursor.position == 10


def test_reads_after_stream_moved_elsewhere():
    stream = io.BytesIO(b"abcdef")
    cursor = ByteCursor(stream, chunk_size=2)
    assert cursor.get_byte() == ord("a")
    stream.seek(5)
    assert cursor.read(4) == b"bcde"


def test_read_stops_at_end():
    cursor = ByteCursor(io.BytesIO(b"abc"), chunk_size=2)
    assert cursor.read(10) == b"abc"
    assert cursor.read(1) == b""


def test_scan_until_across_chunks():
    cursor = ByteCursor(io.BytesIO(b"aaaaaaaaaab"), chunk_size=3)
    assert cursor.scan_until(re.compile(b"b")) == b"aaaaaaaaaab"
    assert cursor.position == 11


def test_scan_until_lookahead_does_not_consume():
    cursor = ByteCursor(io.BytesIO(b"abc def"), chunk_size=2)
    assert cursor.scan_until(re.compile(b"(?= )")) == b"abc"
    assert cursor.get_byte() == ord(" ")


def test_scan_until_not_found_keeps_position():
    cursor = ByteCursor(io.BytesIO(b"abcdef"), chunk_size=2)
    cursor.get_byte()
    assert cursor.scan_until(re.compile(b"x")) is None
    assert cursor.position == 1
    assert cursor.rest() == b"bcdef"


def test_skip_run_across_chunks():
    cursor = ByteCursor(io.BytesIO(b"      x"), chunk_size=2)
    assert cursor.skip(re.compile(b" *")) == 6
    assert cursor.get_byte() == ord("x")


def test_skip_without_match():
    cursor = ByteCursor(io.BytesIO(b"x"))
    assert cursor.skip(re.compile(b" +")) is None
    assert cursor.position == 0


def test_match_exact_size():
    cursor = ByteCursor(io.BytesIO(b"12ab"), chunk_size=1)
    assert cursor.match(re.compile(b"([0-9]+)"), 2) == (b"12",)
    assert cursor.position == 2
    assert cursor.match(re.compile(b"([0-9]+)"), 2) is None
    assert cursor.position == 2


def test_rewind_inside_buffer_keeps_buffer():
    cursor = ByteCursor(io.BytesIO(b"abcdef"))
    cursor.read(4)
    buffer = cursor.buffer
    cursor.rewind(1)
    assert cursor.buffer is buffer
    assert cursor.get_byte() == ord("b")


@given(st.integers(min_value=1, max_value=8), st.integers(min_value=0, max_value=40))
def test_buffer_stays_bounded(chunk_size, high_water_mark):
    data = bytes(range(256)) * 4
    cursor = ByteCursor(
        io.BytesIO(data), chunk_size=chunk_size, high_water_mark=high_water_mark
    )
    for expected in data:
        assert cursor.get_byte() == expected
        assert len(cursor.buffer) <= max(high_water_mark, chunk_size) + chunk_size
    assert cursor.position == len(data)
    assert cursor.logical_start > 0


def test_rewind_before_dropped_bytes():
    data = b"x" * 100
    cursor = ByteCursor(io.BytesIO(data), chunk_size=2, high_water_mark=8)
    for _ in range(50):
        cursor.get_byte()
    assert cursor.logical_start > 10
    cursor.rewind(10)
    assert cursor.position == 10
    assert cursor.read(90) == data[10:]
