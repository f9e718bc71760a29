"""Index derivation for Bloom filters.

A filter needs ``k`` bit positions per element. Rather than running ``k``
separate hash functions, :class:`DoubleHashStrategy` computes one BLAKE2b
digest, splits it into two 64-bit values ``h1`` and ``h2`` and combines
them linearly::

    index_i = (h1 + i * h2) mod m        for i in 0..k-1

Kirsch and Mitzenmacher showed this keeps the false-positive behaviour of
``k`` independent hashes while costing a single digest per element.
"""

import hashlib
from typing import Tuple

from bloomkit.errors import InvalidParameters

DIGEST_SIZE = 16
MAX_SALT_SIZE = hashlib.blake2b.MAX_KEY_SIZE


class HashStrategy:
    """Maps an element's bytes to ``k`` indices in ``[0, m)``.

    Implementations must be pure: the same input and salt give the same
    indices in every process, and no state is kept between calls.
    """

    def indices(self, element: bytes, k: int, m: int) -> Tuple[int, ...]:
        raise NotImplementedError


class DoubleHashStrategy(HashStrategy):
    def __init__(self, salt: bytes = b"") -> None:
        if not isinstance(salt, (bytes, bytearray)):
            raise InvalidParameters(f"salt must be bytes, got {type(salt).__name__}")
        if len(salt) > MAX_SALT_SIZE:
            raise InvalidParameters(
                f"salt is {len(salt)} bytes, BLAKE2b keys are at most {MAX_SALT_SIZE}"
            )
        self.salt = bytes(salt)

    def base_hashes(self, element: bytes) -> Tuple[int, int]:
        digest = hashlib.blake2b(
            element, digest_size=DIGEST_SIZE, key=self.salt
        ).digest()
        return (
            int.from_bytes(digest[:8], "big"),
            int.from_bytes(digest[8:], "big"),
        )

    def indices(self, element: bytes, k: int, m: int) -> Tuple[int, ...]:
        if k < 1 or m < 1:
            raise InvalidParameters(f"need k >= 1 and m >= 1, got k={k}, m={m}")
        h1, h2 = self.base_hashes(element)
        h1 %= m
        h2 %= m
        if h2 == 0:
            # every index would collapse onto h1
            h2 = 1
        return tuple((h1 + i * h2) % m for i in range(k))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoubleHashStrategy):
            return NotImplemented
        return self.salt == other.salt

    def __hash__(self) -> int:
        return hash((DoubleHashStrategy, self.salt))

    def __repr__(self) -> str:
        return f"DoubleHashStrategy(salt={self.salt!r})"


DEFAULT_STRATEGY = DoubleHashStrategy()
