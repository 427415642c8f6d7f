"""Bit-level helpers for fixed-width integers and raw reinterpretation."""

from __future__ import annotations

import struct

_WIDTHS = (8, 16, 32, 64)
_BYTE_ORDER_CHARS = "@=<>!"


def _check_width(bits: int) -> None:
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")


def _check_unsigned(value: int, bits: int) -> None:
    _check_width(bits)
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")


def _as_unsigned(value: int, bits: int) -> int:
    """Reinterpret a signed or unsigned value of the given width as unsigned."""
    _check_width(bits)
    if not -(1 << (bits - 1)) <= value < (1 << bits):
        raise ValueError(f"{value} does not fit in a {bits}-bit integer")
    return value & ((1 << bits) - 1)


def popcount(value: int, bits: int = 32) -> int:
    """Number of set bits in an unsigned integer."""
    _check_unsigned(value, bits)
    return bin(value).count("1")


def count_trailing_zeroes(value: int, bits: int = 32) -> int:
    """Number of trailing zero bits; zero is rejected."""
    _check_unsigned(value, bits)
    if value == 0:
        raise ValueError("count_trailing_zeroes is undefined for zero")
    return (value & -value).bit_length() - 1


def count_trailing_zeroes_safe(value: int, bits: int = 32) -> int:
    """Number of trailing zero bits; zero yields the bit width."""
    _check_unsigned(value, bits)
    if value == 0:
        return bits
    return count_trailing_zeroes(value, bits)


def count_leading_zeroes(value: int, bits: int = 32) -> int:
    """Number of leading zero bits within the width; zero is rejected."""
    _check_unsigned(value, bits)
    if value == 0:
        raise ValueError("count_leading_zeroes is undefined for zero")
    return bits - value.bit_length()


def count_leading_zeroes_safe(value: int, bits: int = 32) -> int:
    """Number of leading zero bits; zero yields the bit width."""
    _check_unsigned(value, bits)
    if value == 0:
        return bits
    return count_leading_zeroes(value, bits)


def bit_scan_forward(value: int, bits: int = 32) -> int:
    """One plus the index of the lowest set bit, or 0 when no bit is set."""
    unsigned = _as_unsigned(value, bits)
    if unsigned == 0:
        return 0
    return 1 + count_trailing_zeroes(unsigned, bits)


def exp2(exponent: int) -> int:
    """Two raised to a non-negative integer exponent."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return 1 << exponent


def log2(x: int, bits: int = 32) -> int:
    """Integer base-2 logarithm (index of the highest set bit); 0 for 0."""
    unsigned = _as_unsigned(x, bits)
    if unsigned == 0:
        return 0
    return (bits - 1) - count_leading_zeroes(unsigned, bits)


def ipow(base: int, exponent: int) -> int:
    """Integer power; a negative exponent yields 0."""
    if exponent < 0:
        return 0
    result = 1
    while exponent > 0:
        if exponent & 1:
            result *= base
        base *= base
        exponent //= 2
    return result


def _normalise_format(fmt: str) -> str:
    if fmt and fmt[0] in _BYTE_ORDER_CHARS:
        return fmt
    return "=" + fmt


def bit_cast(value, from_format: str, to_format: str):
    """Reinterpret the bytes of ``value`` packed as ``from_format`` as ``to_format``.

    Formats are single-value ``struct`` codes; without a byte-order character
    native order with standard sizes is used. Both sizes must be equal.
    """
    source = _normalise_format(from_format)
    target = _normalise_format(to_format)
    if struct.calcsize(source) != struct.calcsize(target):
        raise ValueError(
            f"size mismatch: {from_format!r} is {struct.calcsize(source)} bytes, "
            f"{to_format!r} is {struct.calcsize(target)} bytes"
        )
    try:
        raw = struct.pack(source, value)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc
    (result,) = struct.unpack(target, raw)
    return result