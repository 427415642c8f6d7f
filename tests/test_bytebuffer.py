import pytest

from akruntime.bytebuffer import ByteBuffer


def test_copy_round_trip():
    data = bytes(range(100))
    buffer = ByteBuffer.copy(data)
    assert bytes(buffer) == data
    assert len(buffer) == len(data)
    assert buffer == data


def test_default_inline_capacity():
    buffer = ByteBuffer()
    assert buffer.is_empty()
    assert buffer.capacity() == 32


def test_create_zeroed():
    buffer = ByteBuffer.create_zeroed(70)
    assert bytes(buffer) == bytes(70)


def test_create_uninitialized_has_size():
    buffer = ByteBuffer.create_uninitialized(5)
    assert len(buffer) == 5
    assert buffer.capacity() >= 5


def test_growth_and_shrink_back_inline():
    buffer = ByteBuffer(b"x" * 10)
    buffer.append(b"y" * 50)
    assert buffer.capacity() >= len(buffer)
    assert bytes(buffer) == b"x" * 10 + b"y" * 50
    buffer.resize(10)
    assert buffer.capacity() == 32
    assert bytes(buffer) == b"x" * 10


def test_append_single_byte_and_range():
    buffer = ByteBuffer()
    buffer.append(0x41)
    buffer.append(b"BC")
    assert bytes(buffer) == b"ABC"
    with pytest.raises(ValueError):
        buffer.append(256)


def test_indexing():
    buffer = ByteBuffer(b"abc")
    assert buffer[0] == ord("a")
    buffer[1] = ord("z")
    assert bytes(buffer) == b"azc"
    assert buffer[0:2] == b"az"
    with pytest.raises(IndexError):
        buffer[3]


def test_slice():
    data = bytes(range(64))
    buffer = ByteBuffer(data)
    assert bytes(buffer.slice(10, 20)) == data[10:30]
    with pytest.raises(ValueError):
        buffer.slice(60, 10)


def test_overwrite():
    buffer = ByteBuffer(b"hello world")
    buffer.overwrite(6, b"there")
    assert bytes(buffer) == b"hello there"
    with pytest.raises(ValueError):
        buffer.overwrite(8, b"long")


def test_get_bytes_for_writing_then_resize():
    buffer = ByteBuffer(b"head")
    span = buffer.get_bytes_for_writing(40)
    span[:] = b"t" * 40
    assert len(buffer) == 4
    buffer.resize(44)
    assert bytes(buffer) == b"head" + b"t" * 40


def test_equality_and_iadd():
    a = ByteBuffer(b"abc")
    b = ByteBuffer(b"abc")
    assert a == b
    a += b
    assert bytes(a) == b"abcabc"
    a += b"!"
    assert a == b"abcabc!"
    assert a != b


def test_zero_fill_and_clear():
    buffer = ByteBuffer(b"q" * 40)
    buffer.zero_fill()
    assert bytes(buffer) == bytes(40)
    buffer.clear()
    assert buffer.is_empty()
    assert buffer.capacity() == 32


def test_bytes_view_is_writable():
    buffer = ByteBuffer(b"abc")
    view = buffer.bytes()
    view[0] = ord("x")
    assert bytes(buffer) == b"xbc"


def test_resize_negative_rejected():
    with pytest.raises(ValueError):
        ByteBuffer().resize(-1)