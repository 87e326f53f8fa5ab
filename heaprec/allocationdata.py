"""Aggregated allocation costs."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class AllocationData:
    """Cost counters for a set of allocations."""

    allocations: int = 0
    """Number of allocations."""
    temporary: int = 0
    """Number of temporary allocations."""
    leaked: int = 0
    """Bytes leaked."""
    peak: int = 0
    """Largest amount of bytes allocated at once."""

    def clear_cost(self) -> None:
        """Reset every counter to zero."""
        for f in fields(self):
            setattr(self, f.name, 0)

    def _combine(self, other: "AllocationData", sign: int) -> "AllocationData":
        return AllocationData(
            allocations=self.allocations + sign * other.allocations,
            temporary=self.temporary + sign * other.temporary,
            leaked=self.leaked + sign * other.leaked,
            peak=self.peak + sign * other.peak,
        )

    def __add__(self, other: "AllocationData") -> "AllocationData":
        if not isinstance(other, AllocationData):
            return NotImplemented
        return self._combine(other, 1)

    def __sub__(self, other: "AllocationData") -> "AllocationData":
        if not isinstance(other, AllocationData):
            return NotImplemented
        return self._combine(other, -1)

    def __iadd__(self, other: "AllocationData") -> "AllocationData":
        if not isinstance(other, AllocationData):
            return NotImplemented
        self.allocations += other.allocations
        self.temporary += other.temporary
        self.peak += other.peak
        self.leaked += other.leaked
        return self

    def __isub__(self, other: "AllocationData") -> "AllocationData":
        if not isinstance(other, AllocationData):
            return NotImplemented
        self.allocations -= other.allocations
        self.temporary -= other.temporary
        self.peak -= other.peak
        self.leaked -= other.leaked
        return self