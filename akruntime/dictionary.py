"""A key/value map on top of the open-addressing hash table."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping

from .hashing import int_hash, pair_int_hash, u64_hash
from .hashtable import HashSetResult, HashTable

_U32 = 0xFFFFFFFF


def _default_key_hash(key) -> int:
    if isinstance(key, int):
        if -(1 << 31) <= key <= _U32:
            return int_hash(key & _U32)
        return u64_hash(key)
    return hash(key) & _U32


def _default_key_equals(a, b) -> bool:
    return a == b


def _value_hash(value) -> int:
    method = getattr(value, "hash", None)
    if callable(method):
        return method() & _U32
    return _default_key_hash(value)


class _Entry:
    __slots__ = ("key", "value")

    def __init__(self, key, value) -> None:
        self.key = key
        self.value = value


class Dictionary:
    """A hash map from keys to values.

    ``key_hash`` maps a key to a 32-bit hash and ``key_equals`` compares two
    keys. With ``ordered`` iteration follows insertion order. Iterating the
    map yields its keys; ``items`` yields key/value pairs.
    """

    def __init__(
        self,
        entries: Mapping | Iterable[tuple[Any, Any]] | None = None,
        key_hash: Callable[[Any], int] | None = None,
        key_equals: Callable[[Any, Any], bool] | None = None,
        ordered: bool = False,
    ):
        self._key_hash = key_hash or _default_key_hash
        self._key_equals = key_equals or _default_key_equals
        self._table = HashTable(
            hash_function=lambda entry: self._key_hash(entry.key),
            equals=lambda a, b: self._key_equals(a.key, b.key),
            ordered=ordered,
        )
        if entries is not None:
            pairs = list(entries.items() if isinstance(entries, Mapping) else entries)
            self.ensure_capacity(len(pairs))
            for key, value in pairs:
                self.set(key, value)

    @property
    def ordered(self) -> bool:
        return self._table.ordered

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{body}}})"

    def _find_entry(self, key) -> _Entry | None:
        return self._table.find_with_hash(
            self._key_hash(key) & _U32, lambda entry: self._key_equals(key, entry.key)
        )

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[Any]:
        for entry in self._table:
            yield entry.key

    def __contains__(self, key) -> bool:
        return self._find_entry(key) is not None

    def __getitem__(self, key):
        entry = self._find_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def is_empty(self) -> bool:
        return self._table.is_empty()

    def capacity(self) -> int:
        return self._table.capacity()

    def clear(self) -> None:
        self._table.clear()

    def clear_with_capacity(self) -> None:
        self._table.clear_with_capacity()

    def set(self, key, value) -> HashSetResult:
        """Insert or replace the value stored under ``key``."""
        return self._table.set(_Entry(key, value))

    def get(self, key):
        """The value under ``key``, or None if it is absent."""
        entry = self._find_entry(key)
        return None if entry is None else entry.value

    def remove(self, key) -> bool:
        entry = self._find_entry(key)
        if entry is None:
            return False
        return self._table.remove(entry)

    def remove_all_matching(self, predicate: Callable[[Any, Any], bool]) -> bool:
        """Remove every entry for which ``predicate(key, value)`` holds."""
        return self._table.remove_all_matching(lambda entry: predicate(entry.key, entry.value))

    def ensure_capacity(self, capacity: int) -> None:
        self._table.ensure_capacity(capacity)

    def ensure(self, key, factory: Callable[[], Any] | None = None):
        """The value under ``key``, inserting ``factory()`` (or None) if absent."""
        entry = self._find_entry(key)
        if entry is not None:
            return entry.value
        value = factory() if factory is not None else None
        result = self.set(key, value)
        if result != HashSetResult.INSERTED_NEW_ENTRY:
            raise RuntimeError("key appeared during insertion")
        return self._find_entry(key).value

    def keys(self) -> list:
        return list(self)

    def items(self) -> Iterator[tuple[Any, Any]]:
        for entry in self._table:
            yield entry.key, entry.value

    def hash(self) -> int:
        """A 32-bit hash of the entries, in iteration order."""
        result = 0
        for entry in self._table:
            entry_hash = pair_int_hash(self._key_hash(entry.key) & _U32, _value_hash(entry.value))
            result = pair_int_hash(result, entry_hash)
        return result


class OrderedHashMap(Dictionary):
    """A Dictionary that iterates in insertion order."""

    def __init__(
        self,
        entries: Mapping | Iterable[tuple[Any, Any]] | None = None,
        key_hash: Callable[[Any], int] | None = None,
        key_equals: Callable[[Any, Any], bool] | None = None,
    ):
        super().__init__(entries, key_hash, key_equals, ordered=True)