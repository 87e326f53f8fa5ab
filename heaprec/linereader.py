"""Fast reader for the line-based, hex-encoded heap recording format."""

from __future__ import annotations

import re
from typing import TextIO

_HEX_DIGITS = re.compile(r"[0-9a-f]*")


class LineReader:
    """Reads one line at a time and hands out its space-separated fields.

    The first two characters of a line hold its mode and a separator; field
    parsing starts after them. Numbers are lowercase hex without a prefix.
    """

    def __init__(self, expect_sized_strings: bool = False) -> None:
        self.expect_sized_strings = expect_sized_strings
        """When set, strings are written as a hex byte count followed by the text."""
        self._line = ""
        self._pos = 0

    def get_line(self, stream: TextIO) -> bool:
        """Read the next line from ``stream``; False once the stream is exhausted."""
        raw = stream.readline()
        if not raw:
            return False
        self._line = raw[:-1] if raw.endswith("\n") else raw
        self._pos = 2 if len(self._line) > 2 else len(self._line)
        return True

    def mode(self) -> str:
        """The line's type character, or '#' for an empty line."""
        return self._line[0] if self._line else "#"

    def line(self) -> str:
        """The current line without its trailing newline."""
        return self._line

    def read_hex(self) -> int | None:
        """Read the next hex field, or return None when the line has no more.

        Raises ValueError on a character that is not a lowercase hex digit.
        """
        line = self._line
        end = len(line)
        pos = self._pos
        if pos >= end:
            return None
        space = line.find(" ", pos)
        stop = end if space == -1 else space
        field = line[pos:stop]
        if not _HEX_DIGITS.fullmatch(field):
            bad = next(i for i, c in enumerate(field) if c not in "0123456789abcdef")
            raise ValueError(
                f"unexpected non-hex char {field[bad]!r} at offset {pos + bad:x}"
            )
        self._pos = end if space == -1 else space + 1
        return int(field, 16) if field else 0

    def read_string(self) -> str | None:
        """Read the next string field, or return None when there is none."""
        line = self._line
        end = len(line)
        if self.expect_sized_strings:
            start = self._pos
            size = self.read_hex()
            if size is None or size > end - self._pos:
                self._pos = start if size is None else self._pos
                return None
            begin = self._pos
            self._pos = begin + size
            text = line[begin:self._pos]
            if self._pos != end:
                self._pos += 1
            return text

        pos = self._pos
        space = line.find(" ", pos)
        stop = end if space == -1 else space
        if stop == pos:
            return None
        self._pos = end if space == -1 else space + 1
        return line[pos:stop]

    def read_flag(self) -> bool | None:
        """Read a one-character flag; any character other than NUL counts as set."""
        line = self._line
        end = len(line)
        if self._pos >= end:
            return None
        flag = line[self._pos] != "\0"
        self._pos += 1
        if self._pos < end and line[self._pos] == " ":
            self._pos += 1
        return flag