from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from .alphabet import STANDARD, Alphabet
from .constants import MASK, UNBOUNDED
from .padding import Padding
from .util.bytes import copy_into, require_bytes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Encoder:
    """
    An immutable base64 encoding profile.

    `max_line_length` is either `UNBOUNDED` or a positive multiple of 4; the
    separator is only written between complete 4-character groups.
    """

    alphabet: Alphabet
    max_line_length: int = UNBOUNDED
    separator: bytes = b""
    padding: Padding = Padding.WITH
    _unpadded: Encoder | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        width = self.max_line_length
        if width != UNBOUNDED and (width <= 0 or width % 4 != 0):
            raise ValueError(f"line length must be a positive multiple of 4, got {width}")
        if self.padding is Padding.WITH:
            # One unpadded variant per padded profile, owned by it.
            unpadded = replace(self, padding=Padding.WITHOUT)
            logger.debug("created unpadded variant of %s", self)
            object.__setattr__(self, "_unpadded", unpadded)

    def encode(self, data: bytes) -> bytes:
        """
        Encode `data`, wrapping lines and padding the tail per this profile.

        RFC 4648 section 9: every 3 input octets become 4 output characters.

            +--first octet--+-second octet--+--third octet--+
            |7 6 5 4 3 2 1 0|7 6 5 4 3 2 1 0|7 6 5 4 3 2 1 0|
            +-----------+---+-------+-------+---+-----------+
            |5 4 3 2 1 0|5 4 3 2 1 0|5 4 3 2 1 0|5 4 3 2 1 0|
            +--1.index--+--2.index--+--3.index--+--4.index--+
        """

        src = require_bytes(data, "data")
        chars = self.alphabet.chars
        max_line_length = self.max_line_length
        separator = self.separator
        padding = self.padding

        out = bytearray()
        line_width = 0
        offset = 0
        previous = 0

        for value in src:
            if offset == 0:
                if line_width == max_line_length:
                    padding.write_separator(out, separator)
                    line_width = 0
                out.append(chars[value >> 2])
                previous = (value & 0x3) << 4
                offset = 1
                line_width += 1
            elif offset == 1:
                out.append(chars[previous | (value >> 4)])
                previous = (value & 0xF) << 2
                offset = 2
                line_width += 1
            else:
                out.append(chars[previous | (value >> 6)])
                out.append(chars[value & MASK])
                previous = 0
                offset = 0
                line_width += 2

        if offset == 1:
            out.append(chars[previous])
            line_width += 1 + padding.write_one_pending(out)
        elif offset == 2:
            out.append(chars[previous])
            line_width += 1 + padding.write_two_pending(out)

        return bytes(out)

    def encode_into(self, data: bytes, destination: bytearray | memoryview) -> int:
        """Encode into the start of `destination`, returning the bytes written."""

        return copy_into(self.encode(data), destination)

    def encode_to_string(self, data: bytes) -> str:
        # latin-1 maps each output byte to exactly one character, separators included.
        return self.encode(data).decode("latin-1")

    def encoded_length(self, length: int) -> int:
        """Exact size of the output for `length` input bytes."""

        if length < 0:
            raise ValueError("length must be >= 0")
        if self.padding is Padding.WITH:
            chars = 4 * ((length + 2) // 3)
        else:
            chars = (4 * length + 2) // 3
        groups = (length + 2) // 3
        if self.max_line_length == UNBOUNDED or groups == 0:
            return chars
        separators = (groups - 1) // (self.max_line_length // 4)
        return chars + separators * len(self.separator)

    def without_padding(self) -> Encoder:
        if self.padding is Padding.WITHOUT:
            return self
        assert self._unpadded is not None
        return self._unpadded

    def __str__(self) -> str:
        label = self.padding.label
        if self.max_line_length == UNBOUNDED:
            return f"{self.alphabet.name}{label}"
        name = "RFC2045" if self.alphabet == STANDARD else self.alphabet.name
        return f"{name}{label} lineWidth={self.max_line_length}"
