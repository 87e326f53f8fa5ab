"""Parameters that restrict which recorded data is evaluated."""

from __future__ import annotations

from dataclasses import dataclass, field

INT64_MAX = (1 << 63) - 1


@dataclass
class FilterParameters:
    """Time window and suppression settings for evaluating a recording."""

    min_time: int = 0
    max_time: int = INT64_MAX
    suppressions: list[str] = field(default_factory=list)
    disable_embedded_suppressions: bool = False
    disable_builtin_suppressions: bool = False

    def is_filtered_by_time(self, total_time: int) -> bool:
        """Whether the time window cuts off part of a recording of ``total_time``."""
        return self.min_time != 0 or self.max_time < total_time