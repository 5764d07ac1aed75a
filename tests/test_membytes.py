import pytest

from cubcaster.membytes import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memchr_finds_first_occurrence():
    assert memchr(b"hello", "l", 5) == 2
    assert memchr(b"hello", ord("o"), 5) == 4


def test_memchr_respects_count():
    assert memchr(b"hello", "o", 4) is None


def test_memchr_truncates_value_to_byte():
    assert memchr(b"\x01\x02", 0x102, 2) == 1


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"ab", "a", 3)


def test_memcmp_equal_and_sign():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(b"xxxxx")
    result = memcpy(dest, b"abcde", 3)
    assert result is dest
    assert dest == bytearray(b"abcxx")


def test_memcpy_stops_at_zero_byte():
    dest = bytearray(b"xxxxx")
    memcpy(dest, b"ab\0cd", 5)
    assert dest == bytearray(b"abxxx")


def test_memmove_backward_overlap():
    buf = bytearray(b"12345")
    memmove(buf, 1, 0, 3)
    assert buf == bytearray(b"11235")


def test_memmove_forward_overlap():
    buf = bytearray(b"12345")
    memmove(buf, 0, 1, 3)
    assert buf == bytearray(b"23445")


def test_memmove_same_offset_is_noop():
    buf = bytearray(b"12345")
    memmove(buf, 2, 2, 3)
    assert buf == bytearray(b"12345")


def test_memmove_out_of_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(b"123"), 1, 0, 3)


def test_memset_and_bzero():
    buf = bytearray(b"Hello World!")
    memset(buf, "a", 5)
    assert buf == bytearray(b"aaaaa World!")
    bzero(buf, 5)
    assert buf == bytearray(b"\0\0\0\0\0 World!")


def test_calloc_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert all(b == 0 for b in buf)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)