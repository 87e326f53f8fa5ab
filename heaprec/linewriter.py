"""Buffered writer for the line-based, hex-encoded heap recording format."""

from __future__ import annotations

import os
from types import TracebackType

BUFFER_CAPACITY = 4096
_MAX_HEX_CHARS = 16
_UINT64_LIMIT = 1 << 64


def write_hex_number(value: int) -> str:
    """Format an unsigned 64-bit value as lowercase hex without a prefix."""
    if not 0 <= value < _UINT64_LIMIT:
        raise ValueError(f"value is not an unsigned 64-bit number: {value}")
    return format(value, "x")


class LineWriter:
    """Collects output lines in a fixed-size buffer and writes them to a file descriptor.

    The writer owns the descriptor and closes it on :meth:`close`.
    """

    BUFFER_CAPACITY = BUFFER_CAPACITY

    def __init__(self, fd: int) -> None:
        self._fd = fd
        self._buffer = bytearray()

    def _available(self) -> int:
        return BUFFER_CAPACITY - len(self._buffer)

    def _ensure_open(self) -> None:
        if self._fd == -1:
            raise ValueError("I/O operation on closed LineWriter")

    def _write_all(self, data: bytes | bytearray) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self._fd, view)
            view = view[written:]

    def write(self, fmt: str, *args: object) -> None:
        """Buffer ``fmt % args``, or ``fmt`` verbatim when no arguments are given."""
        self._ensure_open()
        text = fmt % args if args else fmt
        data = text.encode("utf-8", "surrogateescape")
        if len(data) >= self._available():
            if len(data) >= BUFFER_CAPACITY:
                raise ValueError("message does not fit into the write buffer")
            self.flush()
        self._buffer += data

    def write_string(self, line: str | bytes) -> None:
        """Write ``line`` prefixed by its byte length in hex and a space."""
        self._ensure_open()
        data = line.encode("utf-8", "surrogateescape") if isinstance(line, str) else bytes(line)
        if self._available() < _MAX_HEX_CHARS + 1:
            self.flush()
        self._buffer += f"{len(data):x} ".encode("ascii")
        if self._available() < len(data):
            self.flush()
            if self._available() < len(data):
                self._write_all(data)
                return
        self._buffer += data

    def write_hex_line(self, type_char: str, *args: int) -> None:
        """Write ``type_char`` followed by each argument in hex, e.g. ``t 1c 18``."""
        self._ensure_open()
        if len(type_char) != 1 or not type_char.isascii():
            raise ValueError(f"line type must be a single ASCII character: {type_char!r}")
        max_chars = 2 + (_MAX_HEX_CHARS + 1) * len(args) + 2
        if max_chars >= BUFFER_CAPACITY:
            raise ValueError("too many values for a single line")
        numbers = " ".join(write_hex_number(value) for value in args)
        if max_chars > self._available():
            self.flush()
        self._buffer += f"{type_char} {numbers}\n".encode("ascii")

    def flush(self) -> None:
        """Write all buffered data to the file descriptor."""
        self._ensure_open()
        if self._buffer:
            self._write_all(self._buffer)
            self._buffer.clear()

    def can_write(self) -> bool:
        """Whether the writer still has an open file descriptor."""
        return self._fd != -1

    def close(self) -> None:
        """Close the descriptor without flushing pending data."""
        if self._fd != -1:
            os.close(self._fd)
            self._fd = -1

    def __enter__(self) -> "LineWriter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Flush on normal exit, then close."""
        try:
            if exc_type is None and self.can_write():
                self.flush()
        finally:
            self.close()