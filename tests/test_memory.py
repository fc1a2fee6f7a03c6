import pytest

from pipex.memory import (
    calloc,
    compare_bytes,
    copy,
    find_byte,
    fill,
    move,
    zero,
)


def test_fill_prefix_only():
    buf = bytearray(5)
    result = fill(buf, 0x41, 3)
    assert result is buf
    assert result[:3] == bytes([0x41]) * 3
    assert result[3:] == bytes(2)


def test_fill_masks_value():
    assert fill(bytearray(3), 0x141, 3) == fill(bytearray(3), 0x41, 3)


def test_fill_too_long():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, 3)


def test_zero_clears():
    buf = bytearray(b"\xff" * 4)
    zero(buf, 4)
    assert buf == bytearray(4)


def test_zero_partial():
    buf = bytearray(b"\xff" * 4)
    zero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"\xff\xff"


def test_calloc_size_and_content():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_find_byte_found():
    assert find_byte(b"hello", ord("l"), 5) == 2


def test_find_byte_missing():
    assert find_byte(b"hello", ord("z"), 5) is None


def test_find_byte_respects_limit():
    assert find_byte(b"hello", ord("o"), 4) is None


def test_compare_bytes_equal():
    assert compare_bytes(b"abc", b"abc", 3) == 0


def test_compare_bytes_sign():
    assert compare_bytes(b"abc", b"abd", 3) < 0
    assert compare_bytes(b"abd", b"abc", 3) > 0


def test_compare_bytes_limit():
    assert compare_bytes(b"abc", b"abd", 2) == 0


def test_compare_bytes_antisymmetric():
    a, b = b"\x01\x80", b"\x01\x10"
    assert compare_bytes(a, b, 2) == -compare_bytes(b, a, 2)


def test_copy_prefix():
    dest = bytearray(6)
    src = b"abcd"
    result = copy(dest, src, 4)
    assert result is dest
    assert dest[:4] == src
    assert dest[4:] == bytes(2)


def test_copy_too_long():
    with pytest.raises(ValueError):
        copy(bytearray(2), b"abc", 3)


def test_move_forward_overlap():
    buf = bytearray(b"abcdef")
    assert move(buf, 2, 0, 4) == bytearray(b"ababcd")


def test_move_backward_overlap():
    buf = bytearray(b"abcdef")
    assert move(buf, 0, 2, 4) == bytearray(b"cdefef")


def test_move_same_offset_unchanged():
    buf = bytearray(b"abcdef")
    assert move(buf, 1, 1, 3) == bytearray(b"abcdef")


def test_move_out_of_range():
    with pytest.raises(ValueError):
        move(bytearray(b"abc"), 1, 0, 3)