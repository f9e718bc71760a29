"""Byte encoding of a filter's parameters and bit array.

Layout (network byte order)::

    bit_count   uint64
    hash_count  uint64
    bits        ceil(bit_count / 8) bytes, bit i at byte i >> 3, mask 1 << (i & 7)

The hash salt and the insert counter are not encoded; whoever decodes must
supply the same strategy that built the filter.

``hash_count`` may not exceed ``MAX_HASH_COUNT``; optimal sizing never
asks for more than a few dozen, so larger values mean a corrupt header.
"""

import struct
from typing import Optional

from bloomkit.bits.bitset import BitSet
from bloomkit.errors import CodecError, InvalidParameters
from bloomkit.filter.bloom_filter import BloomFilter
from bloomkit.hashing.strategy import HashStrategy

HEADER = struct.Struct("!QQ")
MAX_HASH_COUNT = 1024


def encode(bf: BloomFilter) -> bytes:
    if bf.hash_count > MAX_HASH_COUNT:
        raise CodecError(
            f"cannot encode {bf.hash_count} hashes, at most {MAX_HASH_COUNT} allowed"
        )
    return HEADER.pack(bf.bit_count, bf.hash_count) + bf.bits.to_bytes()


def decode(data: bytes, strategy: Optional[HashStrategy] = None) -> BloomFilter:
    if len(data) < HEADER.size:
        raise CodecError(
            f"need at least {HEADER.size} header bytes, got {len(data)}"
        )
    bit_count, hash_count = HEADER.unpack_from(data, 0)
    payload = len(data) - HEADER.size
    if payload != (bit_count + 7) // 8:
        raise CodecError(
            f"header declares {bit_count} bits but payload is {payload} bytes"
        )
    if hash_count > MAX_HASH_COUNT:
        raise CodecError(
            f"header declares {hash_count} hashes, at most {MAX_HASH_COUNT} allowed"
        )
    try:
        bits = BitSet.from_bytes(data[HEADER.size:], bit_count)
        return BloomFilter(bit_count, hash_count, strategy, bits=bits)
    except InvalidParameters as exc:
        raise CodecError(f"malformed filter payload: {exc}") from exc
