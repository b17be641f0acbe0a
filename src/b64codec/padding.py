from __future__ import annotations

from enum import Enum

from .constants import PAD


class Padding(Enum):
    """
    What an encoder writes at the tail of its output and between lines.

    Each method returns how many bytes it wrote so the encoder can keep its
    line width up to date.
    """

    WITH = "WITH"
    WITHOUT = "WITHOUT"

    def write_one_pending(self, out: bytearray) -> int:
        # One source byte left over: two characters of data, two of padding.
        if self is Padding.WITHOUT:
            return 0
        out.append(PAD)
        out.append(PAD)
        return 2

    def write_two_pending(self, out: bytearray) -> int:
        if self is Padding.WITHOUT:
            return 0
        out.append(PAD)
        return 1

    def write_separator(self, out: bytearray, separator: bytes) -> int:
        out += separator
        return len(separator)

    @property
    def label(self) -> str:
        return " WITH PADDING" if self is Padding.WITH else ""
