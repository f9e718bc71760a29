"""Exception hierarchy for bloomkit."""


class BloomFilterError(Exception):
    """Base class for every error raised by bloomkit."""


class InvalidParameters(BloomFilterError, ValueError):
    """Construction parameters (m, k, n, p) are out of their valid range."""


class IndexOutOfRange(BloomFilterError, IndexError):
    """A bit index fell outside [0, bit_count).

    Hash strategies always produce in-range indices, so seeing this means
    a hashing bug, not bad user input.
    """


class CodecError(BloomFilterError, ValueError):
    """Serialized filter bytes are truncated or inconsistent."""
