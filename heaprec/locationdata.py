"""Symbol and source-location keys used when aggregating costs."""

from __future__ import annotations

from dataclasses import dataclass, field

from heaprec.indices import FileIndex, FunctionIndex, ModuleIndex

UNRESOLVED_FUNCTION_NAME = "<unresolved function>"


@dataclass(frozen=True, order=True)
class Symbol:
    """A function inside a module; ordered by function first, then module."""

    function_id: FunctionIndex = field(default_factory=FunctionIndex)
    module_id: ModuleIndex = field(default_factory=ModuleIndex)

    def is_valid(self) -> bool:
        """Whether either the function or the module is known."""
        return self != Symbol()


@dataclass(frozen=True)
class FileLine:
    """A line in a source file."""

    file_id: FileIndex = field(default_factory=FileIndex)
    line: int = 0