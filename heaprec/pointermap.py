"""Compact mapping from allocation addresses to allocation info indices."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field

from heaprec.indices import AllocationInfoIndex, TraceIndex


@dataclass(frozen=True)
class IndexedAllocationInfo:
    """Size and trace of an allocation; the index is ignored for equality."""

    size: int
    trace_index: TraceIndex
    allocation_index: AllocationInfoIndex = field(
        default_factory=AllocationInfoIndex, compare=False
    )


class AllocationInfoSet:
    """Deduplicates (size, trace) pairs, assigning each a stable index."""

    def __init__(self) -> None:
        self._infos: dict[IndexedAllocationInfo, IndexedAllocationInfo] = {}

    def add(self, size: int, trace_index: TraceIndex) -> tuple[AllocationInfoIndex, bool]:
        """Return the index for the pair and whether it was newly added."""
        info = IndexedAllocationInfo(size, trace_index, AllocationInfoIndex(len(self._infos)))
        existing = self._infos.get(info)
        if existing is not None:
            return existing.allocation_index, False
        self._infos[info] = info
        return info.allocation_index, True

    def __len__(self) -> int:
        return len(self._infos)


class _Page:
    __slots__ = ("small_parts", "indices")

    def __init__(self) -> None:
        self.small_parts: list[int] = []
        self.indices: list[AllocationInfoIndex] = []


class PointerMap:
    """Maps pointers to indices, grouping nearby addresses into pages.

    Each address is split into a page number and an in-page offset; each page
    keeps its offsets sorted alongside the matching indices.
    """

    PAGE_SIZE = 0xFFFF // 4

    def __init__(self) -> None:
        self._pages: dict[int, _Page] = {}
        self._count = 0

    def add_pointer(self, ptr: int, allocation_index: AllocationInfoIndex) -> None:
        """Record ``ptr``, replacing any index already stored for it."""
        big, small = divmod(ptr, self.PAGE_SIZE)
        page = self._pages.setdefault(big, _Page())
        pos = bisect_left(page.small_parts, small)
        if pos < len(page.small_parts) and page.small_parts[pos] == small:
            page.indices[pos] = allocation_index
        else:
            page.small_parts.insert(pos, small)
            page.indices.insert(pos, allocation_index)
            self._count += 1

    def take_pointer(self, ptr: int) -> AllocationInfoIndex | None:
        """Remove ``ptr`` and return its index, or None if it is unknown."""
        big, small = divmod(ptr, self.PAGE_SIZE)
        page = self._pages.get(big)
        if page is None:
            return None
        pos = bisect_left(page.small_parts, small)
        if pos == len(page.small_parts) or page.small_parts[pos] != small:
            return None
        del page.small_parts[pos]
        index = page.indices.pop(pos)
        if not page.indices:
            del self._pages[big]
        self._count -= 1
        return index

    def __len__(self) -> int:
        return self._count