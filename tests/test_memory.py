import pytest

from ftkit.memory import bzero, calloc, memccpy, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_keeps_low_byte():
    buf = bytearray(4)
    memset(buf, 0x1AB, 4)
    assert buf == bytearray([0xAB] * 4)


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_memset_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf == bytearray(b"\0\0cd")


def test_calloc_is_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)
    assert isinstance(buf, bytearray)


def test_calloc_zero_count_is_empty():
    assert calloc(0, 8) == bytearray()


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_and_returns_destination():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst == bytearray(b"abc...")


def test_memcpy_zero_bytes_leaves_destination():
    dst = bytearray(b"keep")
    memcpy(dst, b"xxxx", 0)
    assert dst == bytearray(b"keep")


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_overlapping_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    dst = view[2:]
    result = memmove(dst, view, 4)
    assert result is dst
    assert bytes(result) == b"abcd"
    assert buf == bytearray(b"ababcd")


def test_memmove_overlapping_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert result is view
    assert bytes(result) == b"cdefef"
    assert buf == bytearray(b"cdefef")


def test_memccpy_stops_after_byte():
    dst = bytearray(b"--------")
    index = memccpy(dst, b"hello world", ord(" "), 11)
    assert index == len(b"hello ")
    assert dst == bytearray(b"hello --")


def test_memccpy_without_byte_copies_n():
    dst = bytearray(b"----")
    assert memccpy(dst, b"abcd", ord("z"), 3) is None
    assert dst == bytearray(b"abc-")


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_limited_to_n():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_low_byte():
    data = bytes([0, 0xFF, 1])
    assert memchr(data, -1, 3) == 1


def test_memcmp_equal_prefix():
    assert memcmp(b"abcx", b"abcy", 3) == 0


def test_memcmp_difference_sign():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_memcmp_zero_length():
    assert memcmp(b"x", b"y", 0) == 0