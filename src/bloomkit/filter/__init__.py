from bloomkit.filter.bloom_filter import BloomFilter
from bloomkit.filter.sizing import (
    false_positive_rate,
    optimal_bit_count,
    optimal_hash_count,
)

__all__ = [
    "BloomFilter",
    "false_positive_rate",
    "optimal_bit_count",
    "optimal_hash_count",
]
