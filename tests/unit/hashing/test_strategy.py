import pytest

from bloomkit.errors import InvalidParameters
from bloomkit.hashing.strategy import DEFAULT_STRATEGY, DoubleHashStrategy


class FixedHashes(DoubleHashStrategy):
    def __init__(self, h1: int, h2: int) -> None:
        super().__init__()
        self._pair = (h1, h2)

    def base_hashes(self, element: bytes):
        return self._pair


class TestDoubleHashStrategy:
    @pytest.mark.parametrize("element", [b"", b"x", b"user123", bytes(range(256))])
    @pytest.mark.parametrize("k,m", [(1, 1), (3, 100), (7, 9586), (20, 7)])
    def test_bounds(self, element, k, m) -> None:
        indices = DEFAULT_STRATEGY.indices(element, k, m)
        assert len(indices) == k
        assert all(0 <= i < m for i in indices)

    def test_deterministic(self) -> None:
        a = DoubleHashStrategy().indices(b"user123", 5, 1000)
        b = DoubleHashStrategy().indices(b"user123", 5, 1000)
        assert a == b

    def test_linear_combination(self) -> None:
        strategy = DoubleHashStrategy()
        h1, h2 = strategy.base_hashes(b"abc")
        m = 1009
        step = h2 % m or 1
        expected = tuple((h1 + i * step) % m for i in range(4))
        assert strategy.indices(b"abc", 4, m) == expected

    def test_degenerate_h2_is_replaced(self) -> None:
        strategy = FixedHashes(5, 10)
        assert strategy.indices(b"anything", 3, 10) == (5, 6, 7)

    def test_salt_changes_indices(self) -> None:
        plain = DoubleHashStrategy().base_hashes(b"user123")
        salted = DoubleHashStrategy(b"pepper").base_hashes(b"user123")
        assert plain != salted

    def test_equality_follows_salt(self) -> None:
        assert DoubleHashStrategy(b"a") == DoubleHashStrategy(b"a")
        assert DoubleHashStrategy(b"a") != DoubleHashStrategy(b"b")
        assert hash(DoubleHashStrategy(b"a")) == hash(DoubleHashStrategy(b"a"))

    @pytest.mark.parametrize("salt", ["text", b"x" * 65])
    def test_bad_salt(self, salt) -> None:
        with pytest.raises(InvalidParameters):
            DoubleHashStrategy(salt)

    @pytest.mark.parametrize("k,m", [(0, 10), (3, 0)])
    def test_bad_parameters(self, k, m) -> None:
        with pytest.raises(InvalidParameters):
            DEFAULT_STRATEGY.indices(b"x", k, m)
