from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FilterStats:
    """Point-in-time snapshot of a filter, for tuning and monitoring."""

    bit_count: int
    hash_count: int
    inserted: int
    set_bits: int
    size_bytes: int
    estimated_false_positive_rate: float
    capacity: Optional[int] = None
    target_false_positive_rate: Optional[float] = None

    @property
    def fill_ratio(self) -> float:
        return self.set_bits / self.bit_count

    @property
    def load_factor(self) -> Optional[float]:
        if self.capacity is None:
            return None
        return self.inserted / self.capacity

    @property
    def over_capacity(self) -> bool:
        return self.capacity is not None and self.inserted > self.capacity

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["fill_ratio"] = self.fill_ratio
        data["load_factor"] = self.load_factor
        data["over_capacity"] = self.over_capacity
        return data
