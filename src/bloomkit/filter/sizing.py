"""Optimal Bloom filter parameters.

For ``n`` expected elements and a target false-positive rate ``p``::

    m = ceil(-n * ln(p) / ln(2)^2)
    k = round((m / n) * ln(2)),  at least 1

and the expected false-positive rate after ``n`` inserts into an
``m``-bit filter with ``k`` hashes is ``(1 - e^(-k*n/m))^k``.
"""

import math

from bloomkit.errors import InvalidParameters

LN2 = math.log(2)


def check_count(name: str, value: int, minimum: int = 1) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameters(f"{name} must be an int, got {value!r}")
    if value < minimum:
        raise InvalidParameters(f"{name} must be >= {minimum}, got {value}")


def optimal_bit_count(n: int, p: float) -> int:
    check_count("expected_count", n)
    if not 0 < p < 1:
        raise InvalidParameters(f"false_positive_rate must be in (0, 1), got {p}")
    return max(1, math.ceil(-(n * math.log(p)) / LN2 ** 2))


def optimal_hash_count(m: int, n: int) -> int:
    check_count("bit_count", m)
    check_count("expected_count", n)
    return max(1, round((m / n) * LN2))


def false_positive_rate(m: int, k: int, n: int) -> float:
    check_count("bit_count", m)
    check_count("hash_count", k)
    check_count("inserted", n, minimum=0)
    if n == 0:
        return 0.0
    return (1.0 - math.exp(-k * n / m)) ** k
