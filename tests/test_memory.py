import pytest

from fdfview.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memchr_finds_first_match():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 3) is None


def test_memchr_uses_low_byte():
    data = b"\x00\x41"
    assert memchr(data, 0x141, 2) == memchr(data, 0x41, 2)
    assert data[memchr(data, 0x141, 2)] == 0x41


def test_memchr_missing():
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_length_too_long():
    with pytest.raises(ValueError):
        memchr(b"ab", 0, 5)


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_order():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_only_first_n():
    assert memcmp(b"abx", b"aby", 2) == 0


def test_memcmp_unsigned():
    assert memcmp(b"\x80", b"\x01", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"\x10\x20\x30", b"\x10\x25\x30"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcpy_copies_prefix():
    dst = bytearray(b"xxxxx")
    result = memcpy(dst, b"abcde", 3)
    assert result is dst
    assert dst == bytearray(b"abcxx")


def test_memcpy_too_long():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_memmove_same_offset_unchanged():
    buffer = bytearray(b"abc")
    assert memmove(buffer, 1, 1, 2) == bytearray(b"abc")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills():
    buffer = bytearray(b"abcd")
    result = memset(buffer, ord("z"), 2)
    assert result is buffer
    assert buffer == bytearray(b"zzcd")


def test_memset_truncates_value():
    buffer = bytearray(3)
    memset(buffer, 0x1FF, 3)
    assert buffer == bytearray(b"\xff\xff\xff")


def test_bzero_clears_prefix():
    buffer = bytearray(b"abcd")
    bzero(buffer, 3)
    assert buffer == bytearray(b"\x00\x00\x00d")


def test_calloc_zeroed():
    block = calloc(4, 3)
    assert len(block) == 12
    assert all(byte == 0 for byte in block)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)