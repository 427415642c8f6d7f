import pytest

from akruntime.memsearch import memmem, memmem_chunks, secure_zero, timing_safe_compare

CASES = [
    (b"hello world", b"world"),
    (b"hello world", b"o"),
    (b"aaaaaaab", b"aab"),
    (b"abcabcabd", b"abcabd"),
    (b"abc", b"abcd"),
    (b"abc", b"abc"),
    (b"abc", b"abd"),
    (b"mississippi", b"issip"),
    (b"\x00\xff\x00\xff\x01", b"\xff\x01"),
    (b"nothing here", b"zz"),
]


@pytest.mark.parametrize("haystack,needle", CASES)
def test_memmem_matches_find(haystack, needle):
    expected = haystack.find(needle)
    assert memmem(haystack, needle) == (None if expected < 0 else expected)


def test_empty_needle_found_at_start():
    assert memmem(b"abc", b"") == 0


def test_long_needle_uses_full_search():
    needle = bytes(range(40))
    haystack = b"x" * 100 + bytes(range(39)) + b"y" + needle + b"tail"
    assert memmem(haystack, needle) == haystack.find(needle)
    assert memmem(b"z" * 200, needle) is None


def test_needle_of_31_bytes():
    needle = b"ab" * 15 + b"c"
    haystack = b"ab" * 40 + b"c" + b"ab"
    assert memmem(haystack, needle) == haystack.find(needle)


@pytest.mark.parametrize(
    "chunks,needle",
    [
        ([b"hel", b"lo wo", b"rld"], b"lo world"),
        ([b"ab", b"", b"ca", b"bcabd"], b"abcabd"),
        ([b"aaa", b"aaa"], b"aab"),
        ([b"x" * 10, b"needle", b"y"], b"needle"),
    ],
)
def test_memmem_chunks_matches_joined_find(chunks, needle):
    expected = b"".join(chunks).find(needle)
    assert memmem_chunks(chunks, needle) == (None if expected < 0 else expected)


def test_memmem_chunks_rejects_empty_needle():
    with pytest.raises(ValueError):
        memmem_chunks([b"abc"], b"")


def test_secure_zero():
    buffer = bytearray(b"secret")
    secure_zero(buffer)
    assert buffer == bytearray(len(b"secret"))


def test_secure_zero_rejects_readonly():
    with pytest.raises(TypeError):
        secure_zero(b"immutable")


def test_timing_safe_compare():
    assert timing_safe_compare(b"abcdef", b"abcdef") is True
    assert timing_safe_compare(b"abcdef", b"abcdeg") is False
    assert timing_safe_compare(b"abcdef", b"abcdeg", 5) is True
    assert timing_safe_compare(b"abc", b"abcd") is False


def test_timing_safe_compare_length_too_long():
    with pytest.raises(ValueError):
        timing_safe_compare(b"abc", b"abc", 4)