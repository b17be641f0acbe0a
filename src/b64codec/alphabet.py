"""
Base64 alphabets and their decode lookup tables.

RFC 4648 Table 1 (standard) and Table 2 ("URL and Filename safe") only
differ in the characters used for values 62 and 63.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import INVALID


def make_decode_lookup(chars: bytes) -> tuple[int, ...]:
    """Map every byte value to its 6-bit value, or `INVALID` when absent."""

    lookup = [INVALID] * 256
    for value, ch in enumerate(chars):
        lookup[ch] = value
    return tuple(lookup)


@dataclass(frozen=True, slots=True)
class Alphabet:
    name: str
    chars: bytes
    lookup: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.chars) != 64:
            raise ValueError(f"alphabet must have 64 characters, got {len(self.chars)}")
        object.__setattr__(self, "lookup", make_decode_lookup(self.chars))

    def value_of(self, byte: int) -> int:
        return self.lookup[byte]

    def __contains__(self, byte: object) -> bool:
        return isinstance(byte, int) and 0 <= byte <= 0xFF and self.lookup[byte] != INVALID


STANDARD = Alphabet(
    "RFC4648", b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
URL_SAFE = Alphabet(
    "RFC4648 URLSAFE", b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)
