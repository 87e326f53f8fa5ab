"""Shared results of evaluating a recording."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from heaprec.allocationdata import AllocationData
from heaprec.filterparameters import FilterParameters
from heaprec.indices import FunctionIndex, StringIndex
from heaprec.locationdata import UNRESOLVED_FUNCTION_NAME


class ResultData:
    """Total costs together with the string table of a recording."""

    def __init__(self, total_costs: AllocationData, strings: Sequence[str]) -> None:
        self._total_costs = total_costs
        self._strings = tuple(strings)

    @property
    def total_costs(self) -> AllocationData:
        return self._total_costs

    def string(self, string_id: StringIndex) -> str:
        """Look up a string by its one-based index; unknown ids yield ''."""
        if isinstance(string_id, FunctionIndex) and not string_id:
            return UNRESOLVED_FUNCTION_NAME
        position = string_id.index - 1
        if 0 <= position < len(self._strings):
            return self._strings[position]
        return ""


@dataclass
class SummaryData:
    """Overview figures of an evaluated recording."""

    debuggee: str = ""
    cost: AllocationData = field(default_factory=AllocationData)
    total_leaked_suppressed: int = 0
    total_time: int = 0
    filter_parameters: FilterParameters = field(default_factory=FilterParameters)
    peak_time: int = 0
    peak_rss: int = 0
    total_system_memory: int = 0
    from_attached: bool = False
    suppressions: list[Any] = field(default_factory=list)