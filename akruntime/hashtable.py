"""An open-addressing hash set with double-hash probing and optional insertion order."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Callable, Iterator

from .hashing import double_hash, int_hash, u64_hash

_U32 = 0xFFFFFFFF
_LOAD_FACTOR_IN_PERCENT = 60
_MINIMUM_CAPACITY = 4


class HashSetResult(Enum):
    INSERTED_NEW_ENTRY = "inserted_new_entry"
    REPLACED_EXISTING_ENTRY = "replaced_existing_entry"
    KEPT_EXISTING_ENTRY = "kept_existing_entry"


class HashSetExistingEntryBehavior(Enum):
    KEEP = "keep"
    REPLACE = "replace"


class BucketState(IntEnum):
    """Bucket states; the upper nibble is the class (0 unused, 1 used, F end)."""

    FREE = 0x00
    USED = 0x10
    DELETED = 0x01
    REHASHED = 0x12
    END = 0xFF


def is_used_bucket(state) -> bool:
    return (int(state) & 0xF0) == 0x10


def is_free_bucket(state) -> bool:
    return (int(state) & 0xF0) == 0x00


def _default_hash(value) -> int:
    if isinstance(value, int):
        if -(1 << 31) <= value <= _U32:
            return int_hash(value & _U32)
        return u64_hash(value)
    return hash(value) & _U32


def _default_equals(a, b) -> bool:
    return a == b


class _Bucket:
    __slots__ = ("state", "value", "seq", "previous", "next")

    def __init__(self) -> None:
        self.state = BucketState.FREE
        self.value: Any = None
        self.seq = 0
        self.previous: _Bucket | None = None
        self.next: _Bucket | None = None


class HashTable:
    """A set of values stored by open addressing.

    ``hash_function`` maps a value to a 32-bit hash and ``equals`` compares a
    stored value with another. With ``ordered`` the table iterates in
    insertion order; otherwise in bucket order.
    """

    def __init__(
        self,
        capacity: int | None = None,
        hash_function: Callable[[Any], int] | None = None,
        equals: Callable[[Any, Any], bool] | None = None,
        ordered: bool = False,
    ):
        self._hash_function = hash_function or _default_hash
        self._equals = equals or _default_equals
        self._ordered = ordered
        self._buckets: list[_Bucket] = []
        self._capacity = 0
        self._size = 0
        self._deleted_count = 0
        self._head: _Bucket | None = None
        self._tail: _Bucket | None = None
        self._next_seq = 0
        if capacity is not None:
            self._rehash(capacity)

    @property
    def ordered(self) -> bool:
        return self._ordered

    def _hash(self, value) -> int:
        return self._hash_function(value) & _U32

    def __repr__(self) -> str:
        return f"HashTable({list(self)!r}, ordered={self._ordered})"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._ordered:
            bucket = self._head
            while bucket is not None:
                following = bucket.next
                yield bucket.value
                bucket = following
        else:
            for bucket in self._buckets:
                if bucket.state == BucketState.USED:
                    yield bucket.value

    def __contains__(self, value) -> bool:
        return self._find_bucket(value) is not None

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def ensure_capacity(self, capacity: int) -> None:
        """Make room for ``capacity`` values; it may not be below the current size."""
        if capacity < self._size:
            raise ValueError(f"capacity {capacity} is below the current size {self._size}")
        self._rehash(capacity * 2)

    def set(
        self,
        value,
        existing_entry_behavior: HashSetExistingEntryBehavior = HashSetExistingEntryBehavior.REPLACE,
    ) -> HashSetResult:
        """Insert ``value``, or replace or keep an equal stored value."""
        bucket = self._lookup_for_writing(value)
        if is_used_bucket(bucket.state):
            if existing_entry_behavior == HashSetExistingEntryBehavior.KEEP:
                return HashSetResult.KEPT_EXISTING_ENTRY
            bucket.value = value
            return HashSetResult.REPLACED_EXISTING_ENTRY

        bucket.value = value
        if bucket.state == BucketState.DELETED:
            self._deleted_count -= 1
        bucket.state = BucketState.USED
        bucket.seq = self._take_seq()
        if self._ordered:
            self._link_at_tail(bucket)
        self._size += 1
        return HashSetResult.INSERTED_NEW_ENTRY

    def find(self, value):
        """The stored value equal to ``value``, or None."""
        bucket = self._find_bucket(value)
        return None if bucket is None else bucket.value

    def find_with_hash(self, hash_value: int, predicate: Callable[[Any], bool]):
        """The first stored value on the probe chain of ``hash_value`` matching ``predicate``, or None."""
        bucket = self._lookup_with_hash(hash_value & _U32, predicate)
        return None if bucket is None else bucket.value

    def remove(self, value) -> bool:
        bucket = self._find_bucket(value)
        if bucket is None:
            return False
        self._delete_bucket(bucket)
        self._size -= 1
        self._deleted_count += 1
        self._rehash_in_place_if_needed()
        return True

    def remove_all_matching(self, predicate: Callable[[Any], bool]) -> bool:
        removed_count = 0
        for bucket in self._buckets:
            if is_used_bucket(bucket.state) and predicate(bucket.value):
                self._delete_bucket(bucket)
                removed_count += 1
        if removed_count:
            self._deleted_count += removed_count
            self._size -= removed_count
        self._rehash_in_place_if_needed()
        return removed_count > 0

    def clear(self) -> None:
        """Remove everything and release all buckets."""
        self._buckets = []
        self._capacity = 0
        self._size = 0
        self._deleted_count = 0
        self._head = None
        self._tail = None

    def clear_with_capacity(self) -> None:
        """Remove everything but keep the bucket array."""
        for bucket in self._buckets:
            bucket.state = BucketState.FREE
            bucket.value = None
            bucket.previous = None
            bucket.next = None
        self._size = 0
        self._deleted_count = 0
        self._head = None
        self._tail = None

    def _take_seq(self) -> int:
        seq = self._next_seq
        self._next_seq += 1
        return seq

    def _link_at_tail(self, bucket: _Bucket) -> None:
        bucket.previous = self._tail
        bucket.next = None
        if self._tail is None:
            self._head = bucket
        else:
            self._tail.next = bucket
        self._tail = bucket

    def _find_bucket(self, value) -> _Bucket | None:
        return self._lookup_with_hash(self._hash(value), lambda other: self._equals(value, other))

    def _lookup_with_hash(self, hash_value: int, predicate) -> _Bucket | None:
        if self._size == 0:
            return None
        while True:
            bucket = self._buckets[hash_value % self._capacity]
            if is_used_bucket(bucket.state) and predicate(bucket.value):
                return bucket
            if bucket.state not in (BucketState.USED, BucketState.DELETED):
                return None
            hash_value = double_hash(hash_value)

    def _should_grow(self) -> bool:
        used_bucket_count = self._size + self._deleted_count
        return (used_bucket_count + 1) * 100 >= self._capacity * _LOAD_FACTOR_IN_PERCENT

    def _lookup_for_writing(self, value) -> _Bucket:
        if self._should_grow():
            self._rehash(self._capacity * 2)
        return self._probe_for_writing(value)

    def _probe_for_writing(self, value) -> _Bucket:
        hash_value = self._hash(value)
        first_empty: _Bucket | None = None
        while True:
            bucket = self._buckets[hash_value % self._capacity]
            if is_used_bucket(bucket.state) and self._equals(bucket.value, value):
                return bucket
            if not is_used_bucket(bucket.state):
                if first_empty is None:
                    first_empty = bucket
                if bucket.state != BucketState.DELETED:
                    return first_empty
            hash_value = double_hash(hash_value)

    def _rehash(self, new_capacity: int) -> None:
        if new_capacity == self._capacity and new_capacity >= _MINIMUM_CAPACITY:
            self._rehash_in_place()
            return
        new_capacity = max(new_capacity, _MINIMUM_CAPACITY)
        old_values = list(self)

        self._buckets = [_Bucket() for _ in range(new_capacity)]
        self._capacity = new_capacity
        self._deleted_count = 0
        self._head = None
        self._tail = None

        for value in old_values:
            bucket = self._probe_for_writing(value)
            bucket.value = value
            bucket.state = BucketState.USED
            bucket.seq = self._take_seq()
            if self._ordered:
                self._link_at_tail(bucket)

    @staticmethod
    def _swap_contents(a: _Bucket, b: _Bucket) -> None:
        a.value, b.value = b.value, a.value
        a.seq, b.seq = b.seq, a.seq

    def _rehash_in_place(self) -> None:
        buckets = self._buckets
        capacity = self._capacity
        for index in range(capacity):
            bucket = buckets[index]
            if bucket.state in (BucketState.REHASHED, BucketState.END, BucketState.FREE):
                continue
            if bucket.state == BucketState.DELETED:
                bucket.state = BucketState.FREE
                continue

            new_hash = self._hash(bucket.value)
            if new_hash % capacity == index:
                bucket.state = BucketState.REHASHED
                continue

            target_hash = new_hash
            to_move_hash = index
            target = buckets[target_hash % capacity]
            to_move = bucket

            while not is_free_bucket(to_move.state):
                if to_move_hash == target_hash % capacity:
                    to_move.state = BucketState.REHASHED
                    break

                if is_free_bucket(target.state):
                    target.value, target.seq = to_move.value, to_move.seq
                    to_move.value = None
                    target.state = BucketState.REHASHED
                    to_move.state = BucketState.FREE
                elif target.state == BucketState.REHASHED:
                    target_hash = double_hash(target_hash)
                    target = buckets[target_hash % capacity]
                else:
                    # Swap the unrehashed target's data into the bucket being moved.
                    self._swap_contents(to_move, target)
                    to_move.state = target.state
                    target.state = BucketState.REHASHED

                    target_hash = self._hash(to_move.value)
                    target = buckets[target_hash % capacity]
                    if target_hash % capacity == to_move_hash:
                        to_move.state = BucketState.REHASHED
                        break

            if to_move.state == BucketState.DELETED:
                to_move.state = BucketState.FREE

        for bucket in buckets:
            if bucket.state == BucketState.REHASHED:
                bucket.state = BucketState.USED
        self._deleted_count = 0
        self._relink_by_sequence()

    def _relink_by_sequence(self) -> None:
        self._head = None
        self._tail = None
        for bucket in self._buckets:
            bucket.previous = None
            bucket.next = None
        if not self._ordered:
            return
        used = sorted((b for b in self._buckets if is_used_bucket(b.state)), key=lambda b: b.seq)
        for bucket in used:
            self._link_at_tail(bucket)

    def _rehash_in_place_if_needed(self) -> None:
        # Many deleted slots signal a thrashed table.
        if self._deleted_count >= self._size and self._should_grow():
            self._rehash_in_place()

    def _delete_bucket(self, bucket: _Bucket) -> None:
        bucket.value = None
        bucket.state = BucketState.DELETED
        if self._ordered:
            if bucket.previous is not None:
                bucket.previous.next = bucket.next
            else:
                self._head = bucket.next
            if bucket.next is not None:
                bucket.next.previous = bucket.previous
            else:
                self._tail = bucket.previous
            bucket.previous = None
            bucket.next = None