from akruntime.hashing import (
    DOUBLE_HASH_MAGIC,
    double_hash,
    int_hash,
    pair_int_hash,
    ptr_hash,
    u64_hash,
)

U32_LIMIT = 1 << 32


def test_int_hash_in_u32_range():
    for key in (0, 1, 12345, U32_LIMIT - 1):
        assert 0 <= int_hash(key) < U32_LIMIT


def test_int_hash_is_injective_on_sample():
    hashes = {int_hash(key) for key in range(5000)}
    assert len(hashes) == 5000


def test_int_hash_wraps_input_to_u32():
    for key in (0, 7, 99999):
        assert int_hash(key + U32_LIMIT) == int_hash(key)


def test_double_hash_magic_maps_to_zero():
    assert double_hash(DOUBLE_HASH_MAGIC) == 0


def test_double_hash_zero_never_yields_zero():
    assert double_hash(0) > 0
    assert double_hash(0) < U32_LIMIT


def test_double_hash_nonzero_for_other_keys():
    for key in range(1, 2000):
        assert double_hash(key) > 0


def test_double_hash_injective_on_sample():
    keys = list(range(0, 3000)) + [DOUBLE_HASH_MAGIC]
    assert len({double_hash(k) for k in keys}) == len(keys)


def test_pair_int_hash_order_matters_and_is_deterministic():
    assert pair_int_hash(1, 2) == pair_int_hash(1, 2)
    pairs = {pair_int_hash(a, b) for a in range(20) for b in range(20)}
    assert len(pairs) > 390


def test_u64_hash_combines_halves():
    key = (0xDEAD << 32) | 0xBEEF
    assert u64_hash(key) == pair_int_hash(0xBEEF, 0xDEAD)


def test_u64_hash_of_small_key_uses_zero_high_half():
    assert u64_hash(42) == pair_int_hash(42, 0)


def test_ptr_hash_of_integer_matches_u64_hash():
    assert ptr_hash(0x7FFF_1234_5678) == u64_hash(0x7FFF_1234_5678)


def test_ptr_hash_of_object_uses_identity():
    obj = object()
    assert ptr_hash(obj) == u64_hash(id(obj))