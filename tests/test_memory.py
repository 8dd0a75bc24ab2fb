import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


@given(st.binary(max_size=40), st.integers(min_value=0, max_value=255), st.data())
def test_memset_fills_prefix_only(data, value, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    result = memset(buf, value, n)
    assert result is buf
    assert all(byte == value for byte in buf[:n])
    assert buf[n:] == data[n:]


def test_memset_truncates_value_to_a_byte():
    buf = bytearray(b"hello")
    memset(buf, 0x141, 2)
    assert buf[:2] == b"\x41\x41"
    assert buf[2:] == b"llo"


def test_memset_rejects_count_beyond_buffer():
    with pytest.raises(ValueError):
        memset(bytearray(3), 1, 4)
    with pytest.raises(ValueError):
        memset(bytearray(3), 1, -1)


@given(st.binary(max_size=40), st.data())
def test_bzero_zeroes_prefix(data, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    buf = bytearray(data)
    assert bzero(buf, n) is None
    assert buf[:n] == bytes(n)
    assert buf[n:] == data[n:]


@given(st.binary(max_size=40), st.binary(max_size=40), st.data())
def test_memcpy_copies_prefix(dest_data, src, draw):
    n = draw.draw(st.integers(min_value=0, max_value=min(len(dest_data), len(src))))
    dest = bytearray(dest_data)
    result = memcpy(dest, src, n)
    assert result is dest
    assert dest[:n] == src[:n]
    assert dest[n:] == dest_data[n:]


def test_memcpy_with_no_buffers_returns_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_with_one_missing_buffer_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(2), None, 1)


def test_memcpy_rejects_count_beyond_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 3)


@given(st.binary(min_size=1, max_size=40), st.data())
def test_memmove_copies_source_region_even_when_overlapping(data, draw):
    size = len(data)
    n = draw.draw(st.integers(min_value=0, max_value=size))
    src = draw.draw(st.integers(min_value=0, max_value=size - n))
    dest = draw.draw(st.integers(min_value=0, max_value=size - n))
    buf = bytearray(data)
    result = memmove(buf, dest, src, n)
    assert result is buf
    assert buf[dest:dest + n] == data[src:src + n]
    assert buf[:dest] == data[:dest]
    assert buf[dest + n:] == data[dest + n:]


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_rejects_out_of_range_regions():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)


@given(st.binary(max_size=40), st.integers(min_value=0, max_value=255))
def test_memchr_finds_first_occurrence(data, value):
    index = memchr(data, value, len(data))
    if value in data:
        assert index is not None
        assert data[index] == value
        assert value not in data[:index]
    else:
        assert index is None


def test_memchr_respects_count_and_truncates():
    assert memchr(b"abc", ord("c"), 2) is None
    assert memchr(b"abc", ord("c") + 256, 3) == 2


@given(st.binary(max_size=20))
def test_memcmp_equal_is_zero(data):
    assert memcmp(data, bytes(data), len(data)) == 0


@given(st.binary(min_size=1, max_size=20), st.binary(min_size=1, max_size=20))
def test_memcmp_sign_matches_ordering(a, b):
    n = min(len(a), len(b))
    result = memcmp(a, b, n)
    if a[:n] == b[:n]:
        assert result == 0
    elif a[:n] < b[:n]:
        assert result < 0
    else:
        assert result > 0


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(b"\x01\xff", b"\x01\x00", 2) == 0xFF
    assert memcmp(b"\x01\xff", b"\x01\x00", 1) == 0


@given(st.integers(min_value=0, max_value=30), st.integers(min_value=0, max_value=30))
def test_calloc_is_zero_filled(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert not any(buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)