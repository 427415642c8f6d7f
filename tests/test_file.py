import errno

import pytest

from akruntime.errors import Error
from akruntime.file import File


def test_write_then_read_all_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    payload = bytes(range(256)) * 3
    with File.open_for_writing(path) as f:
        assert f.write(payload) == len(payload)
    with File.open_for_reading(path) as f:
        assert f.read_all() == payload


def test_read_all_larger_than_one_chunk(tmp_path):
    path = tmp_path / "big.bin"
    payload = b"xyz" * 5000
    path.write_bytes(payload)
    with File.open_for_reading(path) as f:
        assert f.read_all() == payload


def test_read_all_of_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    with File.open_for_reading(str(path)) as f:
        assert f.read_all() == b""


def test_read_fills_buffer_and_reports_count(tmp_path):
    path = tmp_path / "short.bin"
    path.write_bytes(b"hello")
    buffer = bytearray(8)
    with File.open_for_reading(path) as f:
        count = f.read(buffer)
        assert count == len(b"hello")
        assert bytes(buffer[:count]) == b"hello"
        assert f.read(buffer) == 0


def test_read_in_pieces_concatenates(tmp_path):
    path = tmp_path / "pieces.bin"
    payload = b"abcdefghij"
    path.write_bytes(payload)
    collected = bytearray()
    buffer = bytearray(3)
    with File.open_for_reading(path) as f:
        while count := f.read(buffer):
            collected += buffer[:count]
    assert bytes(collected) == payload


def test_open_missing_file_raises_enoent(tmp_path):
    with pytest.raises(Error) as info:
        File.open_for_reading(tmp_path / "missing.bin")
    assert info.value.code == errno.ENOENT
    assert info.value.is_errno()


def test_open_for_writing_in_missing_directory_fails(tmp_path):
    with pytest.raises(Error) as info:
        File.open_for_writing(tmp_path / "no" / "such" / "file.bin")
    assert info.value.code == errno.ENOENT


def test_open_for_writing_truncates(tmp_path):
    path = tmp_path / "trunc.bin"
    path.write_bytes(b"old contents")
    with File.open_for_writing(path) as f:
        f.write(b"new")
    assert path.read_bytes() == b"new"


def test_read_all_on_writing_file_raises_error(tmp_path):
    with File.open_for_writing(tmp_path / "w.bin") as f:
        with pytest.raises(Error) as info:
            f.read_all()
    assert info.value.is_errno()


def test_write_on_reading_file_raises_error(tmp_path):
    path = tmp_path / "r.bin"
    path.write_bytes(b"data")
    with File.open_for_reading(path) as f:
        with pytest.raises(Error):
            f.write(b"more")


def test_context_manager_closes(tmp_path):
    path = tmp_path / "c.bin"
    path.write_bytes(b"data")
    with File.open_for_reading(path) as f:
        assert not f.closed
    assert f.closed


def test_write_empty_returns_zero(tmp_path):
    path = tmp_path / "e.bin"
    with File.open_for_writing(path) as f:
        assert f.write(b"") == 0
    assert path.read_bytes() == b""