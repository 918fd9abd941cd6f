"""Conversion outcome tally and missing-mapping sets."""

from collections import Counter
from dataclasses import dataclass, field

from .errors import ErrorCode

SUCCESS = "success"


@dataclass
class ConversionStats:
    """Track conversion outcomes across a batch."""
    counter: Counter = field(default_factory=Counter)
    missing_entity_mappings: set[str] = field(default_factory=set)
    missing_property_mappings: set[str] = field(default_factory=set)

    def count(self, key: ErrorCode | str):
        """Record one outcome (an error code or "success")."""
        self.counter[str(key)] += 1

    @property
    def total(self) -> int:
        return sum(self.counter.values())

    def merge(self, other: "ConversionStats") -> "ConversionStats":
        """Fold another tracker into this one (e.g. one per worker)."""
        self.counter.update(other.counter)
        self.missing_entity_mappings |= other.missing_entity_mappings
        self.missing_property_mappings |= other.missing_property_mappings
        return self

    def to_dict(self) -> dict:
        return {
            "counter": dict(self.counter),
            "total": self.total,
            "missing_entity_mappings": len(self.missing_entity_mappings),
            "missing_property_mappings": len(self.missing_property_mappings),
        }
