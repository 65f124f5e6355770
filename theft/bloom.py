"""A dynamic blocked bloom filter for remembering hashed byte strings.

The low bits of a 64-bit hash pick one of many blocks. Each block holds a
chain of bloom filters that is created lazily. When a mark sets no new bits
in the front filter, that filter counts as too full, and a filter twice its
size is put in front of it. A check looks at every filter in the chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .hashing import hash_onepass

DEFAULT_TOP_BLOCK_BITS = 9
"""Default number of hash bits used to choose a block."""

DEFAULT_MIN_FILTER_BITS = 9
"""Default log2 of the bit count of a block's first filter."""

HASH_COUNT = 4
"""Number of bit positions taken from the hash for each filter."""

_HASH_BITS = 64

log = logging.getLogger(__name__)


@dataclass
class _Filter:
    size2: int
    bits: bytearray = field(init=False)

    def __post_init__(self) -> None:
        self.bits = bytearray((1 << self.size2) // 8)

    def _positions(self, hash_value: int):
        mask = (1 << self.size2) - 1
        for i in range(HASH_COUNT):
            yield (hash_value >> (i * self.size2)) & mask

    def set_all(self, hash_value: int) -> bool:
        """Set the bits for ``hash_value``; report whether any were new."""
        any_new = False
        for pos in self._positions(hash_value):
            offset, bit = pos >> 3, 1 << (pos & 0x07)
            if not self.bits[offset] & bit:
                any_new = True
            self.bits[offset] |= bit
        return any_new

    def has_all(self, hash_value: int) -> bool:
        return all(
            self.bits[pos >> 3] & (1 << (pos & 0x07))
            for pos in self._positions(hash_value)
        )


class BloomFilter:
    """Remember byte strings by hash, with no false negatives.

    A bit count of 0 selects the default.
    """

    def __init__(self, top_block_bits: int = 0, min_filter_bits: int = 0) -> None:
        top = top_block_bits or DEFAULT_TOP_BLOCK_BITS
        min_bits = min_filter_bits or DEFAULT_MIN_FILTER_BITS
        if top < 0 or min_bits < 0:
            raise ValueError("bloom filter bit counts cannot be negative")
        if min_bits < 3:
            raise ValueError("each bloom filter needs at least 3 bits of size")
        if _HASH_BITS - top - HASH_COUNT * min_bits <= 0:
            raise ValueError(
                "bloom filter configuration needs more than 64 bits of hash"
            )
        self._top_block_bits = top
        self._min_filter_bits = min_bits
        self._blocks: dict[int, list[_Filter]] = {}

    @property
    def top_block_bits(self) -> int:
        return self._top_block_bits

    @property
    def min_filter_bits(self) -> int:
        return self._min_filter_bits

    def _split(self, data: bytes) -> tuple[int, int]:
        hash_value = hash_onepass(data)
        block_id = hash_value & ((1 << self._top_block_bits) - 1)
        return block_id, hash_value >> self._top_block_bits

    def mark(self, data: bytes) -> None:
        """Hash ``data`` and mark it as seen."""
        block_id, hash_value = self._split(data)
        chain = self._blocks.get(block_id)
        if chain is None:
            chain = [_Filter(self._min_filter_bits)]
            self._blocks[block_id] = chain

        front = chain[0]
        if front.set_all(hash_value):
            return

        # Every bit was already set: the front filter is too full.
        if self._top_block_bits + HASH_COUNT * (front.size2 + 1) > _HASH_BITS:
            log.warning(
                "bloom filter block %d cannot grow further", block_id
            )
        else:
            chain.insert(0, _Filter(front.size2 + 1))

    def check(self, data: bytes) -> bool:
        """Return whether ``data`` has probably been marked before."""
        block_id, hash_value = self._split(data)
        chain = self._blocks.get(block_id)
        if chain is None:
            return False
        return any(f.has_all(hash_value) for f in chain)

    def __contains__(self, data: bytes) -> bool:
        return self.check(data)