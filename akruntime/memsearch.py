"""Byte-sequence search and memory helpers."""

from __future__ import annotations

from typing import Iterable

_U64 = (1 << 64) - 1
_BITAP_LIMIT = 32


def _bitap_bitwise(haystack: bytes, needle: bytes) -> int | None:
    needle_length = len(needle)
    if needle_length >= _BITAP_LIMIT:
        raise ValueError("bitap needle must be shorter than 32 bytes")
    lookup = 0xFFFFFFFE
    needle_mask = [0xFFFFFFFF] * 256
    for i, byte in enumerate(needle):
        needle_mask[byte] &= ~(1 << i)
    for i, byte in enumerate(haystack):
        lookup = ((lookup | needle_mask[byte]) << 1) & _U64
        if not lookup & (1 << needle_length):
            return i - needle_length + 1
    return None


def _kmp_table(needle: bytes) -> list[int]:
    table = [0] * len(needle)
    table[0] = -1
    position = 1
    candidate = 0
    while position < len(needle):
        if needle[position] == needle[candidate]:
            table[position] = table[candidate]
        else:
            table[position] = candidate
            while True:
                candidate = table[candidate]
                if not (candidate >= 0 and needle[candidate] != needle[position]):
                    break
        position += 1
        candidate += 1
    return table


def memmem_chunks(chunks: Iterable, needle) -> int | None:
    """Offset of ``needle`` in the concatenation of ``chunks``, or None."""
    needle = bytes(needle)
    if not needle:
        raise ValueError("needle must not be empty")
    table = _kmp_table(needle)
    total_index = 0
    needle_index = 0
    for chunk in chunks:
        chunk = bytes(chunk)
        current = 0
        while current < len(chunk):
            if needle[needle_index] == chunk[current]:
                needle_index += 1
                current += 1
                total_index += 1
                if needle_index == len(needle):
                    return total_index - needle_index
                continue
            needle_index = table[needle_index]
            if needle_index < 0:
                needle_index += 1
                current += 1
                total_index += 1
    return None


def memmem(haystack, needle) -> int | None:
    """Offset of the first occurrence of ``needle`` in ``haystack``, or None."""
    haystack = bytes(haystack)
    needle = bytes(needle)
    if not needle:
        return 0
    if len(haystack) < len(needle):
        return None
    if len(haystack) == len(needle):
        return 0 if haystack == needle else None
    if len(needle) < _BITAP_LIMIT:
        return _bitap_bitwise(haystack, needle)
    return memmem_chunks([haystack], needle)


def secure_zero(buffer) -> None:
    """Overwrite every byte of a writable buffer with zero."""
    view = memoryview(buffer).cast("B")
    view[:] = bytes(view.nbytes)


def timing_safe_compare(a, b, length: int | None = None) -> bool:
    """Compare the first ``length`` bytes of ``a`` and ``b`` without early exit.

    Without ``length`` both buffers are compared whole; buffers of unequal
    size then compare unequal.
    """
    a = memoryview(a).cast("B")
    b = memoryview(b).cast("B")
    if length is None:
        if a.nbytes != b.nbytes:
            return False
        length = a.nbytes
    if length < 0 or length > a.nbytes or length > b.nbytes:
        raise ValueError(f"length {length} exceeds a buffer")
    result = 0
    for x, y in zip(a[:length], b[:length]):
        result |= x ^ y
    return result == 0