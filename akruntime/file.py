"""A thin binary file wrapper that raises Error with the errno on failure."""

from __future__ import annotations

import errno as _errno
import os
from typing import BinaryIO

from .errors import Error

_CHUNK_SIZE = 4096


def _error_from(exc: OSError) -> Error:
    return Error.from_errno(exc.errno or _errno.EIO)


class File:
    """A file opened for reading or for writing bytes."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream

    @classmethod
    def _open(cls, path, mode: str) -> "File":
        try:
            stream = open(os.fspath(path), mode)
        except OSError as exc:
            raise _error_from(exc) from exc
        return cls(stream)

    @classmethod
    def open_for_reading(cls, path) -> "File":
        return cls._open(path, "rb")

    @classmethod
    def open_for_writing(cls, path) -> "File":
        """Open ``path`` for writing, truncating or creating it."""
        return cls._open(path, "wb")

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def read(self, buffer) -> int:
        """Read into a writable buffer; returns the byte count, 0 at end of file."""
        try:
            count = self._stream.readinto(buffer)
        except OSError as exc:
            raise _error_from(exc) from exc
        return count or 0

    def write(self, data) -> int:
        """Write bytes; returns the number written."""
        data = bytes(data)
        if not data:
            return 0
        try:
            written = self._stream.write(data)
            self._stream.flush()
        except OSError as exc:
            raise _error_from(exc) from exc
        if not written:
            raise Error.from_errno(_errno.EIO)
        return written

    def read_all(self) -> bytes:
        """Read from the current position to the end of the file."""
        chunks = []
        while True:
            try:
                chunk = self._stream.read(_CHUNK_SIZE)
            except OSError as exc:
                raise _error_from(exc) from exc
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "File":
        return self

    def __exit__(self, *args) -> None:
        self.close()