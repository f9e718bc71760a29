"""Probabilistic membership testing with Bloom filters."""

import logging
import threading
from multiprocessing.pool import ThreadPool
from typing import Iterable, List, Optional, Tuple, Union

from bloomkit.bits.bitset import BitSet
from bloomkit.config.settings import SETTINGS, FilterSettings
from bloomkit.errors import InvalidParameters
from bloomkit.filter.sizing import (
    check_count,
    false_positive_rate,
    optimal_bit_count,
    optimal_hash_count,
)
from bloomkit.hashing.strategy import (
    DEFAULT_STRATEGY,
    DoubleHashStrategy,
    HashStrategy,
)
from bloomkit.report.stats import FilterStats

logger = logging.getLogger(__name__)

Element = Union[bytes, bytearray, memoryview, str]


def as_bytes(element: Element) -> bytes:
    if isinstance(element, bytes):
        return element
    if isinstance(element, (bytearray, memoryview)):
        return bytes(element)
    if isinstance(element, str):
        return element.encode("utf-8")
    raise TypeError(
        f"elements must be bytes-like or str, got {type(element).__name__}"
    )


class BloomFilter:
    """Insertion-only set with false positives but no false negatives.

    ``contains`` answers False only when the element was certainly never
    added. Adding more elements than the filter was sized for does not
    raise; the false-positive rate silently climbs past the design target
    (watch :meth:`estimated_false_positive_rate` or :attr:`is_over_capacity`).

    Prefer :meth:`from_capacity`; passing ``bit_count`` and ``hash_count``
    directly is the low-level escape hatch for restoring known parameters.
    """

    def __init__(
        self,
        bit_count: int,
        hash_count: int,
        strategy: Optional[HashStrategy] = None,
        settings: Optional[FilterSettings] = None,
        bits: Optional[BitSet] = None,
    ) -> None:
        check_count("bit_count", bit_count)
        check_count("hash_count", hash_count)
        if bits is not None and bits.bit_count != bit_count:
            raise InvalidParameters(
                f"bit set holds {bits.bit_count} bits, filter needs {bit_count}"
            )
        self.bit_count = bit_count
        self.hash_count = hash_count
        self.strategy = strategy if strategy is not None else DEFAULT_STRATEGY
        self.settings = settings if settings is not None else SETTINGS
        self.bits = bits if bits is not None else BitSet(bit_count)
        self.capacity: Optional[int] = None
        self.target_false_positive_rate: Optional[float] = None
        self._inserted = 0
        self._overrun_logged = False
        self._lock = threading.Lock()
        logger.debug("created %r", self)

    @classmethod
    def from_capacity(
        cls,
        expected_count: int,
        false_positive_rate: float,
        strategy: Optional[HashStrategy] = None,
        settings: Optional[FilterSettings] = None,
    ) -> "BloomFilter":
        bit_count = optimal_bit_count(expected_count, false_positive_rate)
        hash_count = optimal_hash_count(bit_count, expected_count)
        logger.debug(
            "sized for n=%d p=%g: m=%d k=%d",
            expected_count,
            false_positive_rate,
            bit_count,
            hash_count,
        )
        bf = cls(bit_count, hash_count, strategy, settings)
        bf.capacity = expected_count
        bf.target_false_positive_rate = false_positive_rate
        return bf

    @classmethod
    def from_settings(
        cls, settings: Optional[FilterSettings] = None
    ) -> "BloomFilter":
        settings = settings or SETTINGS
        return cls.from_capacity(
            settings.default_capacity,
            settings.default_error_rate,
            DoubleHashStrategy(settings.salt),
            settings,
        )

    def _indices(self, element: Element) -> Tuple[int, ...]:
        return self.strategy.indices(
            as_bytes(element), self.hash_count, self.bit_count
        )

    def _record_inserts(self, count: int) -> None:
        with self._lock:
            self._inserted += count
            overrun = (
                self.capacity is not None
                and self._inserted > self.capacity
                and not self._overrun_logged
            )
            if overrun:
                self._overrun_logged = True
        if overrun:
            logger.warning(
                "bloom filter over capacity: %d inserts for %d planned, "
                "estimated false-positive rate now %.4g (target %g)",
                self._inserted,
                self.capacity,
                self.estimated_false_positive_rate(),
                self.target_false_positive_rate,
            )

    def add(self, element: Element) -> None:
        self.bits.set_many(self._indices(element))
        self._record_inserts(1)

    def contains(self, element: Element) -> bool:
        return self.bits.all_set(self._indices(element))

    __contains__ = contains

    def _map(self, func, elements: List[Element]) -> list:
        threshold = self.settings.parallel_threshold
        workers = self.settings.max_workers
        if len(elements) < threshold or workers < 2:
            return [func(e) for e in elements]
        with ThreadPool(processes=workers) as pool:
            return pool.map(func, elements)

    def add_many(self, elements: Iterable[Element]) -> None:
        elements = list(elements)
        for positions in self._map(self._indices, elements):
            self.bits.set_many(positions)
        if elements:
            self._record_inserts(len(elements))

    def contains_many(self, elements: Iterable[Element]) -> List[bool]:
        return self._map(self.contains, list(elements))

    def estimated_false_positive_rate(self) -> float:
        return false_positive_rate(self.bit_count, self.hash_count, len(self))

    def fill_ratio(self) -> float:
        return self.bits.count() / self.bit_count

    @property
    def is_over_capacity(self) -> bool:
        return self.capacity is not None and len(self) > self.capacity

    def clear(self) -> None:
        with self._lock:
            self.bits.clear()
            self._inserted = 0
            self._overrun_logged = False

    def copy(self) -> "BloomFilter":
        with self._lock:
            bits = self.bits.copy()
            inserted = self._inserted
            overrun_logged = self._overrun_logged
        clone = BloomFilter(
            self.bit_count, self.hash_count, self.strategy, self.settings, bits
        )
        clone.capacity = self.capacity
        clone.target_false_positive_rate = self.target_false_positive_rate
        clone._inserted = inserted
        clone._overrun_logged = overrun_logged
        return clone

    def compatible_with(self, other: "BloomFilter") -> bool:
        return (
            self.bit_count == other.bit_count
            and self.hash_count == other.hash_count
            and self.strategy == other.strategy
        )

    def stats(self) -> FilterStats:
        return FilterStats(
            bit_count=self.bit_count,
            hash_count=self.hash_count,
            inserted=len(self),
            set_bits=self.bits.count(),
            size_bytes=(self.bit_count + 7) // 8,
            estimated_false_positive_rate=self.estimated_false_positive_rate(),
            capacity=self.capacity,
            target_false_positive_rate=self.target_false_positive_rate,
        )

    def __len__(self) -> int:
        with self._lock:
            return self._inserted

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return self.compatible_with(other) and self.bits == other.bits

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"BloomFilter(bit_count={self.bit_count}, hash_count={self.hash_count}, "
            f"capacity={self.capacity}, inserted={len(self)})"
        )
