"""A thread-safe value cell with atomic read-modify-write operations."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Any, Callable

_barrier_lock = threading.Lock()


class MemoryOrder(IntEnum):
    """Memory orderings accepted by the atomic operations."""

    RELAXED = 0
    CONSUME = 1
    ACQUIRE = 2
    RELEASE = 3
    ACQ_REL = 4
    SEQ_CST = 5


def _check_order(order) -> MemoryOrder:
    if not isinstance(order, MemoryOrder):
        raise TypeError(f"expected a MemoryOrder, got {type(order).__name__}")
    return order


def full_memory_barrier() -> None:
    """Order all earlier memory operations before all later ones."""
    with _barrier_lock:
        pass


class Atomic:
    """A value whose loads, stores and updates happen atomically.

    Every operation is serialised by an internal lock, so the cell behaves
    as if all accesses were sequentially consistent whatever order is given.
    """

    __slots__ = ("_value", "_lock")

    def __init__(self, value: Any = 0):
        self._value = value
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Atomic({self.load()!r})"

    def load(self, order: MemoryOrder = MemoryOrder.SEQ_CST):
        _check_order(order)
        with self._lock:
            return self._value

    def store(self, desired, order: MemoryOrder = MemoryOrder.SEQ_CST) -> None:
        _check_order(order)
        with self._lock:
            self._value = desired

    def exchange(self, desired, order: MemoryOrder = MemoryOrder.SEQ_CST):
        """Store ``desired`` and return the previous value."""
        _check_order(order)
        with self._lock:
            previous = self._value
            self._value = desired
            return previous

    def compare_exchange_strong(self, expected, desired, order: MemoryOrder = MemoryOrder.SEQ_CST):
        """Replace the value with ``desired`` if it equals ``expected``.

        Returns ``(succeeded, observed)`` where ``observed`` is the value
        found before the operation.
        """
        _check_order(order)
        with self._lock:
            observed = self._value
            if observed == expected:
                self._value = desired
                return True, observed
            return False, observed

    def _fetch(self, value, order: MemoryOrder, operation: Callable[[int, int], int]) -> int:
        _check_order(order)
        if not isinstance(value, int):
            raise TypeError(f"expected an integer operand, got {type(value).__name__}")
        with self._lock:
            previous = self._value
            if not isinstance(previous, int):
                raise TypeError(f"atomic holds a non-integer {type(previous).__name__}")
            self._value = operation(previous, value)
            return previous

    def fetch_add(self, value: int, order: MemoryOrder = MemoryOrder.SEQ_CST) -> int:
        """Add ``value`` and return the previous value."""
        return self._fetch(value, order, lambda a, b: a + b)

    def fetch_sub(self, value: int, order: MemoryOrder = MemoryOrder.SEQ_CST) -> int:
        """Subtract ``value`` and return the previous value."""
        return self._fetch(value, order, lambda a, b: a - b)

    def fetch_and(self, value: int, order: MemoryOrder = MemoryOrder.SEQ_CST) -> int:
        """Bitwise-and with ``value`` and return the previous value."""
        return self._fetch(value, order, lambda a, b: a & b)

    def fetch_or(self, value: int, order: MemoryOrder = MemoryOrder.SEQ_CST) -> int:
        """Bitwise-or with ``value`` and return the previous value."""
        return self._fetch(value, order, lambda a, b: a | b)

    def fetch_xor(self, value: int, order: MemoryOrder = MemoryOrder.SEQ_CST) -> int:
        """Bitwise-xor with ``value`` and return the previous value."""
        return self._fetch(value, order, lambda a, b: a ^ b)

    def is_lock_free(self) -> bool:
        """Always False: operations are guarded by a lock."""
        return False

    def __int__(self) -> int:
        return int(self.load())