"""Backtraces of the current Python call stack."""

from __future__ import annotations

import sys
import threading
from types import CodeType, FrameType
from typing import Iterable, Iterator

_ip_lock = threading.Lock()
_ip_by_site: dict[tuple[CodeType, int], int] = {}


def _call_site_ip(frame: FrameType) -> int:
    """A stable, non-zero number for the frame's current instruction."""
    key = (frame.f_code, frame.f_lasti)
    ip = _ip_by_site.get(key)
    if ip is None:
        with _ip_lock:
            ip = _ip_by_site.setdefault(key, len(_ip_by_site) + 1)
    return ip


class Trace:
    """Instruction pointers of a backtrace, innermost frame first."""

    MAX_SIZE = 64

    def __init__(self) -> None:
        self._ips: tuple[int, ...] = ()

    def _assign(self, ips: list[int], skip: int) -> None:
        if skip < 0:
            raise ValueError(f"skip must not be negative: {skip}")
        del ips[self.MAX_SIZE:]
        # drop bogus zero frames at the outer end
        while ips and not ips[-1]:
            ips.pop()
        self._ips = tuple(ips[skip:]) if len(ips) > skip else ()

    def fill(self, skip: int) -> bool:
        """Capture the caller's stack, dropping ``skip`` innermost frames.

        Returns whether any frames remain.
        """
        frame: FrameType | None = sys._getframe(1)
        ips: list[int] = []
        while frame is not None and len(ips) < self.MAX_SIZE:
            ips.append(_call_site_ip(frame))
            frame = frame.f_back
        self._assign(ips, skip)
        return len(self._ips) > 0

    @classmethod
    def from_ips(cls, ips: Iterable[int], skip: int = 0) -> "Trace":
        """Build a trace from given instruction pointers, innermost first."""
        trace = cls()
        trace._assign(list(ips), skip)
        return trace

    def __len__(self) -> int:
        return len(self._ips)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ips)

    def __getitem__(self, i: int) -> int:
        return self._ips[i]