from bloomkit.bits import BitSet
from bloomkit.config import SETTINGS, FilterSettings, configure_logging, load_settings
from bloomkit.errors import (
    BloomFilterError,
    CodecError,
    IndexOutOfRange,
    InvalidParameters,
)
from bloomkit.filter import (
    BloomFilter,
    false_positive_rate,
    optimal_bit_count,
    optimal_hash_count,
)
from bloomkit.hashing import DEFAULT_STRATEGY, DoubleHashStrategy, HashStrategy
from bloomkit.io import decode, encode
from bloomkit.report import FilterStats, render_stats

__version__ = "0.1.0"

__all__ = [
    'SETTINGS',
    'DEFAULT_STRATEGY',
    'BitSet',
    'BloomFilter',
    'BloomFilterError',
    'CodecError',
    'DoubleHashStrategy',
    'FilterSettings',
    'FilterStats',
    'HashStrategy',
    'IndexOutOfRange',
    'InvalidParameters',
    'configure_logging',
    'decode',
    'encode',
    'false_positive_rate',
    'load_settings',
    'optimal_bit_count',
    'optimal_hash_count',
    'render_stats',
]
