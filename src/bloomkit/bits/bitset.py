"""Fixed-size bit array backed by a numpy byte buffer."""

import threading
from typing import Iterable, Optional

import numpy as np

from bloomkit.errors import IndexOutOfRange, InvalidParameters


def _check_size(bit_count: int) -> None:
    if isinstance(bit_count, bool) or not isinstance(bit_count, int):
        raise InvalidParameters(f"bit_count must be an int, got {bit_count!r}")
    if bit_count < 1:
        raise InvalidParameters(f"bit_count must be >= 1, got {bit_count}")


class BitSet:
    def __init__(self, bit_count: int, _buffer: Optional[np.ndarray] = None) -> None:
        _check_size(bit_count)
        self.bit_count = bit_count
        if _buffer is None:
            _buffer = np.zeros((bit_count + 7) // 8, dtype=np.uint8)
        self._bits = _buffer
        # Guards read-modify-write of a byte; readers never take it.
        self._lock = threading.Lock()

    def _check(self, index: int) -> None:
        if not 0 <= index < self.bit_count:
            raise IndexOutOfRange(
                f"bit index {index} outside [0, {self.bit_count})"
            )

    def _positions(self, indices: Iterable[int]) -> np.ndarray:
        pos = np.fromiter(indices, dtype=np.int64)
        if pos.size and (pos.min() < 0 or pos.max() >= self.bit_count):
            bad = pos[(pos < 0) | (pos >= self.bit_count)][0]
            raise IndexOutOfRange(
                f"bit index {int(bad)} outside [0, {self.bit_count})"
            )
        return pos

    def set(self, index: int) -> None:
        self._check(index)
        with self._lock:
            self._bits[index >> 3] |= np.uint8(1 << (index & 7))

    def get(self, index: int) -> bool:
        self._check(index)
        return bool(self._bits[index >> 3] & (1 << (index & 7)))

    def set_many(self, indices: Iterable[int]) -> None:
        pos = self._positions(indices)
        masks = np.left_shift(1, pos & 7).astype(np.uint8)
        with self._lock:
            # ufunc.at so repeated byte offsets are all applied
            np.bitwise_or.at(self._bits, pos >> 3, masks)

    def all_set(self, indices: Iterable[int]) -> bool:
        pos = self._positions(indices)
        masks = np.left_shift(1, pos & 7).astype(np.uint8)
        return bool(np.all(self._bits[pos >> 3] & masks))

    def count(self) -> int:
        return int(np.unpackbits(self._bits).sum())

    def clear(self) -> None:
        with self._lock:
            self._bits[:] = 0

    def copy(self) -> "BitSet":
        with self._lock:
            buf = self._bits.copy()
        return BitSet(self.bit_count, buf)

    def to_bytes(self) -> bytes:
        return self._bits.tobytes()

    @classmethod
    def from_bytes(cls, data: bytes, bit_count: int) -> "BitSet":
        """Rebuild a bit set from packed LSB-first bytes.

        The buffer must be exactly ceil(bit_count / 8) bytes long and every
        padding bit past ``bit_count`` must be zero.
        """
        _check_size(bit_count)
        expected = (bit_count + 7) // 8
        if len(data) != expected:
            raise InvalidParameters(
                f"expected {expected} bytes for {bit_count} bits, "
                f"got {len(data)}"
            )
        buf = np.frombuffer(bytes(data), dtype=np.uint8)
        spare = len(buf) * 8 - bit_count
        if spare and buf[-1] >> (8 - spare):
            raise InvalidParameters("padding bits past bit_count are set")
        # frombuffer views are read-only
        return cls(bit_count, buf.copy())

    def __len__(self) -> int:
        return self.bit_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.bit_count == other.bit_count and bool(
            np.array_equal(self._bits, other._bits)
        )

    def __repr__(self) -> str:
        return f"BitSet(bit_count={self.bit_count}, set={self.count()})"
