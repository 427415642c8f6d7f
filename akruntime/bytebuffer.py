"""A growable byte buffer with a small inline capacity."""

from __future__ import annotations

DEFAULT_INLINE_CAPACITY = 32


class ByteBuffer:
    """A resizable sequence of bytes.

    Small contents live in an inline region of ``inline_capacity`` bytes;
    larger contents move to a separate allocation and move back when the
    buffer shrinks far enough. Growing a buffer leaves new bytes unspecified.
    """

    __slots__ = ("_storage", "_size", "_inline", "_inline_capacity")

    def __init__(self, data=b"", inline_capacity: int = DEFAULT_INLINE_CAPACITY):
        if inline_capacity < 0:
            raise ValueError("inline capacity must be non-negative")
        self._inline_capacity = inline_capacity
        self._storage = bytearray(inline_capacity)
        self._size = 0
        self._inline = True
        if isinstance(data, ByteBuffer):
            data = data.bytes()
        if len(data):
            self.append(data)

    @classmethod
    def create_uninitialized(cls, size: int) -> "ByteBuffer":
        buffer = cls()
        buffer.resize(size)
        return buffer

    @classmethod
    def create_zeroed(cls, size: int) -> "ByteBuffer":
        buffer = cls.create_uninitialized(size)
        buffer.zero_fill()
        return buffer

    @classmethod
    def copy(cls, data) -> "ByteBuffer":
        return cls(data)

    def __repr__(self) -> str:
        return f"ByteBuffer({bytes(self)!r})"

    def _view(self) -> memoryview:
        return memoryview(self._storage)[: self._size]

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index):
        result = self._view()[index]
        return bytes(result) if isinstance(index, slice) else result

    def __setitem__(self, index, value) -> None:
        self._view()[index] = value

    def __eq__(self, other):
        if isinstance(other, ByteBuffer):
            other = other.bytes()
        try:
            other_view = memoryview(other).cast("B")
        except TypeError:
            return NotImplemented
        return self._view() == other_view

    __hash__ = None

    def __iadd__(self, other) -> "ByteBuffer":
        self.append(other.bytes() if isinstance(other, ByteBuffer) else other)
        return self

    def __bytes__(self) -> bytes:
        return bytes(self._view())

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        return len(self._storage)

    def bytes(self) -> memoryview:
        """A writable view of the current contents."""
        return self._view()

    def slice(self, offset: int, size: int) -> "ByteBuffer":
        if offset < 0 or size < 0 or offset + size > self._size:
            raise ValueError(f"slice [{offset}, {offset + size}) exceeds size {self._size}")
        return ByteBuffer(bytes(self._storage[offset : offset + size]), self._inline_capacity)

    def clear(self) -> None:
        if not self._inline:
            self._storage = bytearray(self._inline_capacity)
            self._inline = True
        self._size = 0

    def resize(self, new_size: int) -> None:
        if new_size < 0:
            raise ValueError("size must be non-negative")
        if new_size <= self._size:
            self._trim(new_size)
            return
        self.ensure_capacity(new_size)
        self._size = new_size

    def ensure_capacity(self, new_capacity: int) -> None:
        if new_capacity <= self.capacity():
            return
        storage = bytearray(new_capacity)
        storage[: self._size] = self._storage[: self._size]
        self._storage = storage
        self._inline = False

    def get_bytes_for_writing(self, length: int) -> memoryview:
        """A writable view of ``length`` bytes past the end; resize to keep them."""
        if length < 0:
            raise ValueError("length must be non-negative")
        self.ensure_capacity(self._size + length)
        return memoryview(self._storage)[self._size : self._size + length]

    def append(self, data) -> None:
        """Append one byte (an int) or the contents of a bytes-like object."""
        if isinstance(data, int):
            if not 0 <= data <= 0xFF:
                raise ValueError(f"byte out of range: {data}")
            data = bytes((data,))
        else:
            data = bytes(data)
        if not data:
            return
        old_size = self._size
        self.resize(old_size + len(data))
        self._storage[old_size : old_size + len(data)] = data

    def overwrite(self, offset: int, data) -> None:
        data = bytes(data)
        if offset < 0 or offset + len(data) > self._size:
            raise ValueError(f"write of {len(data)} bytes at {offset} exceeds size {self._size}")
        self._storage[offset : offset + len(data)] = data

    def zero_fill(self) -> None:
        self._storage[: self._size] = bytes(self._size)

    def _trim(self, size: int) -> None:
        if not self._inline and size <= self._inline_capacity:
            storage = bytearray(self._inline_capacity)
            storage[:size] = self._storage[:size]
            self._storage = storage
            self._inline = True
        self._size = size