from bloomkit.hashing.strategy import (
    DEFAULT_STRATEGY,
    DoubleHashStrategy,
    HashStrategy,
)

__all__ = ["DEFAULT_STRATEGY", "DoubleHashStrategy", "HashStrategy"]
