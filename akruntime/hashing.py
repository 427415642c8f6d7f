"""Integer hash functions on 32-bit unsigned arithmetic."""

from __future__ import annotations

_U32 = 0xFFFFFFFF
DOUBLE_HASH_MAGIC = 0xBA5EDB01


def int_hash(key: int) -> int:
    """Mix a 32-bit key; the mapping is a bijection on 32-bit values."""
    key &= _U32
    key = (key + (~(key << 15) & _U32)) & _U32
    key ^= key >> 10
    key = (key + (key << 3)) & _U32
    key ^= key >> 6
    key = (key + (~(key << 11) & _U32)) & _U32
    key ^= key >> 16
    return key


def double_hash(key: int) -> int:
    """Secondary probe hash (xorshift), with zero and the magic value swapped."""
    key &= _U32
    if key == DOUBLE_HASH_MAGIC:
        return 0
    if key == 0:
        key = DOUBLE_HASH_MAGIC
    key ^= (key << 13) & _U32
    key ^= key >> 17
    key ^= (key << 5) & _U32
    return key


def pair_int_hash(key1: int, key2: int) -> int:
    """Combine two 32-bit keys into one hash."""
    left = (int_hash(key1) * 209) & _U32
    right = int_hash((key2 & _U32) * 413)
    return int_hash(left ^ right)


def u64_hash(key: int) -> int:
    """Hash a 64-bit key by combining its low and high halves."""
    key &= (1 << 64) - 1
    return pair_int_hash(key & _U32, key >> 32)


def ptr_hash(ptr) -> int:
    """Hash an address; non-integers are hashed by their identity."""
    address = ptr if isinstance(ptr, int) else id(ptr)
    return u64_hash(address)