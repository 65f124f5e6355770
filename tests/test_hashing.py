import pytest

from theft.hashing import FNV64_OFFSET_BASIS, Hasher, hash_onepass


def test_empty_input_is_offset_basis():
    assert hash_onepass(b"") == 14695981039346656037
    assert hash_onepass(b"") == FNV64_OFFSET_BASIS


def test_single_byte_known_vector():
    assert hash_onepass(b"a") == 0xAF63DC4C8601EC8C


@pytest.mark.parametrize("data", [b"key0\n", b"hello world", bytes(range(256))])
def test_incremental_matches_onepass(data):
    hasher = Hasher()
    for i in range(0, len(data), 3):
        hasher.sink(data[i:i + 3])
    assert hasher.done() == hash_onepass(data)


def test_done_resets_state():
    hasher = Hasher()
    hasher.sink(b"something")
    first = hasher.done()
    hasher.sink(b"something")
    assert hasher.done() == first
    assert hasher.done() == FNV64_OFFSET_BASIS


def test_reset_discards_input():
    hasher = Hasher()
    hasher.sink(b"abc")
    hasher.reset()
    hasher.sink(b"xyz")
    assert hasher.done() == hash_onepass(b"xyz")


def test_result_fits_in_64_bits():
    for i in range(200):
        h = hash_onepass(f"key{i}".encode())
        assert 0 <= h < 2 ** 64


def test_accepts_bytearray_and_memoryview():
    expected = hash_onepass(b"abc")
    assert hash_onepass(bytearray(b"abc")) == expected
    assert hash_onepass(memoryview(b"abc")) == expected


def test_different_inputs_differ():
    assert hash_onepass(b"key1") != hash_onepass(b"key2")
    assert hash_onepass(b"ab") != hash_onepass(b"ba")


def test_str_rejected():
    with pytest.raises(TypeError):
        Hasher().sink("text")