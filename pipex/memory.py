"""Operations on byte buffers."""

from __future__ import annotations

from collections.abc import Sequence


def _check_span(n: int, *buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def fill(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buf to value (taken modulo 256)."""
    _check_span(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def zero(buf: bytearray, n: int) -> bytearray:
    """Set the first n bytes of buf to zero."""
    return fill(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def find_byte(buf: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to value in the first n bytes, or None."""
    _check_span(n, buf)
    index = bytes(buf[:n]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def compare_bytes(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if equal."""
    _check_span(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def copy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src into dest."""
    _check_span(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def move(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes within buf from src_offset to dest_offset; overlap is safe."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span(n)
    if max(dest_offset, src_offset) + n > len(buf):
        raise ValueError("move extends past the end of the buffer")
    buf[dest_offset : dest_offset + n] = bytes(buf[src_offset : src_offset + n])
    return buf