"""Compact top-down storage of all backtraces seen so far."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Callable, Iterable

_IP_KEY = attrgetter("instruction_pointer")


@dataclass
class TraceEdge:
    """One instruction pointer in the tree and the index of the path ending there."""

    instruction_pointer: int
    index: int
    children: list["TraceEdge"] = field(default_factory=list)
    """Children sorted by instruction pointer."""


class TraceTree:
    """Assigns a unique index to every distinct backtrace, sharing common prefixes."""

    def __init__(self) -> None:
        self._root = TraceEdge(0, 0)
        self._next_index = 1

    def clear(self) -> None:
        """Forget all traces and restart numbering."""
        self._root.children.clear()
        self._next_index = 1

    def index(self, trace: Iterable[int], callback: Callable[[int, int], object]) -> int:
        """Return the index of ``trace``'s innermost frame, adding unknown frames.

        For every new frame ``callback(ip, parent_index)`` is called; if it
        returns a false value, 0 is returned right away. Zero pointers are skipped.
        """
        index = 0
        parent = self._root
        for ip in reversed(list(trace)):
            if not ip:
                continue
            children = parent.children
            pos = bisect_left(children, ip, key=_IP_KEY)
            if pos == len(children) or children[pos].instruction_pointer != ip:
                edge = TraceEdge(ip, self._next_index)
                self._next_index += 1
                children.insert(pos, edge)
                if not callback(ip, parent.index):
                    return 0
            edge = children[pos]
            index = edge.index
            parent = edge
        return index