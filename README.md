# theft

Building blocks for property-based testing: a deterministic, seeded stream of
random bits, 64-bit FNV-1a hashing, a growing blocked bloom filter for
remembering which inputs were already seen, and the configuration, result and
hook types that describe a property-test run.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run its test suite:

```
pip install ".[test]"
pytest
```

## Random bits

`theft.rng.MersenneTwister64(seed)` is the 64-bit Mersenne Twister
(MT19937-64). `random()` returns the next integer in `[0, 2**64 - 1]`, and
`reset(seed)` re-initialises it; seeds are taken modulo `2**64`.
`theft.rng.uint64_to_double(x)` maps a 64-bit value onto `[0, 1]`.

`theft.bits.RandomBits(seed)` buffers the generator's output and hands it out
in whatever sizes are asked for, wasting none of it. Bits come little-endian:
bits drawn earlier land in the lower-order positions.

```python
from theft.bits import RandomBits

bits = RandomBits(0xABAD5EED)
a = bits.random()            # 64 bits

bits.set_seed(0xABAD5EED)    # same seed, same stream
low = bits.bits(11)
high = bits.bits(53)
assert a == low | (high << 11)
```

- `bits(count)` returns up to 64 bits; asking for more raises `ValueError`.
- `bits_bulk(count)` returns any number of bits as one integer.
- `random()` is `bits(64)`.
- `random_double()` returns a float on `[0, 1]`.
- `random_choice(ceil)` returns an approximately uniform integer in
  `range(ceil)`; a ceiling of 0 or 1 always gives 0, a power of two draws
  exactly that many bits, and a negative ceiling raises `ValueError`.
- `set_seed(seed)` re-seeds and drops any buffered bits.

## Hashing

`theft.hashing.hash_onepass(data)` hashes bytes-like data with 64-bit FNV-1a.
`theft.hashing.Hasher` does the same incrementally: `sink(data)` feeds more
bytes, `done()` returns the hash and resets, `reset()` starts over. Passing a
`str` raises `TypeError`.

```python
from theft.hashing import Hasher, hash_onepass

h = Hasher()
h.sink(b"key")
h.sink(b"42")
assert h.done() == hash_onepass(b"key42")
assert hash_onepass(b"") == 14695981039346656037
```

## Bloom filter

`theft.bloom.BloomFilter(top_block_bits=0, min_filter_bits=0)` remembers byte
strings by their FNV-1a hash, with no false negatives. The low
`top_block_bits` of the hash (default 9) choose a block; each block holds a
chain of filters created on first use, starting at `2**min_filter_bits` bits
(default 9). When a mark sets no new bits, a filter twice the size is put in
front of the chain, so the false-positive rate stays low as the filter fills.
A block that can no longer grow within the 64 hash bits logs a warning.

```python
from theft.bloom import BloomFilter

seen = BloomFilter()
seen.mark(b"key1")
assert seen.check(b"key1")
assert b"key1" in seen
```

A configuration whose filters would need more than 64 bits of hash, or a
minimum filter size below 3 bits, raises `ValueError`.

## Run configuration and hook types

`theft.types` holds the vocabulary of a property-test run:

- `TypeInfo` describes one property argument: a required `alloc(t, env)`
  callback, and optional `free`, `hash`, `print` and `shrink` callbacks plus
  an `env` passed to each. Non-callable callbacks raise `ConfigError`. An
  `alloc` callback signals "skip this trial" by raising `Skip`.
- `RunConfig` holds the property, its `type_info` sequence, an optional
  `name`, `always_seeds`, `trials` (0 means `DEFAULT_TRIALS`, 100; negative
  raises `ConfigError`), `seed`, a `ForkConfig` and a `Hooks` table.
  `RunConfig.arity()` returns the number of arguments, raising `ConfigError`
  when there are none, more than `MAX_ARITY` (7), or a `None` entry.
- Results: `TrialResult` (`PASS`, `FAIL`, `SKIP`, `DUP`, `ERROR`),
  `RunResult` (`PASS`, `FAIL`, `SKIP`, `ERROR`), `ShrinkOutcome`,
  `HookResult` (`ERROR`, `CONTINUE`, `HALT`, `REPEAT`, `REPEAT_ONCE`) and
  `ShrinkPostState`.
- `RunReport` counts passed, failed, skipped and duplicate trials.
- Hook information records: `RunPreInfo`, `RunPostInfo`, `GenArgsPreInfo`,
  `TrialPreInfo`, `ForkPostInfo`, `TrialPostInfo`, `CounterexampleInfo`,
  `ShrinkPreInfo`, `ShrinkPostInfo` and `ShrinkTrialPostInfo`.
- Errors: `TheftError`, and `ConfigError`, which is also a `ValueError`.

## What this package does not do

There is no runner here. The package does not execute properties, generate
trial arguments from a `RunConfig`, call hooks, detect duplicate trials,
shrink counter-examples, run trials in forked workers, or print progress and
reports. The types above describe such a run, and the random-bit, hashing and
bloom-filter modules are the pieces one would be built from, but driving a run
is left to the caller.