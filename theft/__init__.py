"""Building blocks for property-based testing: seeded random bits, FNV-1a hashing, a bloom filter and run types."""

__version__ = "0.4.5"