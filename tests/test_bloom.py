import pytest

from theft.bloom import BloomFilter


def _key(i):
    return f"key{i}\n".encode()


@pytest.mark.parametrize("limit", [10, 1000, 100000])
def test_all_marked_should_remain_marked(limit):
    bloom = BloomFilter()
    for i in range(limit):
        bloom.mark(_key(i))
    for i in range(limit):
        assert bloom.check(_key(i)), "marked became unmarked"


def test_empty_filter_matches_nothing():
    bloom = BloomFilter()
    assert not any(bloom.check(_key(i)) for i in range(100))


def test_defaults_are_used_for_zero():
    bloom = BloomFilter(0, 0)
    assert bloom.top_block_bits == 9
    assert bloom.min_filter_bits == 9


def test_repeated_marks_keep_data_marked():
    bloom = BloomFilter()
    for _ in range(20):
        bloom.mark(b"same")
    assert bloom.check(b"same")
    assert b"same" in bloom


def test_small_filter_grows_without_losing_entries():
    bloom = BloomFilter(top_block_bits=1, min_filter_bits=3)
    for i in range(500):
        bloom.mark(_key(i))
    assert all(bloom.check(_key(i)) for i in range(500))


def test_too_small_filter_rejected():
    with pytest.raises(ValueError):
        BloomFilter(min_filter_bits=2)


def test_configuration_exceeding_hash_bits_rejected():
    with pytest.raises(ValueError):
        BloomFilter(top_block_bits=30, min_filter_bits=9)


def test_str_input_rejected():
    bloom = BloomFilter()
    with pytest.raises(TypeError):
        bloom.mark("text")