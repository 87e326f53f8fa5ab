"""Strongly typed 32-bit indices into the tables of a heap profile."""

from __future__ import annotations

from dataclasses import dataclass

_UINT32_LIMIT = 1 << 32


@dataclass(frozen=True, order=True)
class Index:
    """An unsigned 32-bit index. Zero means "no entry"."""

    index: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.index < _UINT32_LIMIT:
            raise ValueError(f"index out of 32-bit unsigned range: {self.index}")

    def __bool__(self) -> bool:
        return self.index != 0

    def next(self) -> "Index":
        """Return the following index of the same type, wrapping like uint32."""
        return type(self)((self.index + 1) % _UINT32_LIMIT)


@dataclass(frozen=True, order=True)
class StringIndex(Index):
    """Index into the string table."""


@dataclass(frozen=True, order=True)
class ModuleIndex(StringIndex):
    """String index naming a module (shared object or executable)."""


@dataclass(frozen=True, order=True)
class FunctionIndex(StringIndex):
    """String index naming a function."""


@dataclass(frozen=True, order=True)
class FileIndex(StringIndex):
    """String index naming a source file."""


@dataclass(frozen=True, order=True)
class IpIndex(Index):
    """Index into the instruction pointer table."""


@dataclass(frozen=True, order=True)
class TraceIndex(Index):
    """Index into the backtrace table."""


@dataclass(frozen=True, order=True)
class AllocationIndex(Index):
    """Index into the allocation table."""


@dataclass(frozen=True, order=True)
class AllocationInfoIndex(Index):
    """Index into the allocation info table."""