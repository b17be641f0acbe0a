from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .alphabet import Alphabet
from .constants import INVALID, PAD
from .exceptions import (
    InvalidEncodingError,
    NullInputError,
    TruncatedInputError,
    UnexpectedDataAfterPadError,
)
from .util.bytes import copy_into, require_bytes

# Position within the current 4-character group, or PAD once `=` was seen.
OCTET_0 = 0
OCTET_1 = 1
OCTET_2 = 2
OCTET_3 = 3
MODE_PAD = 4


@dataclass(frozen=True, slots=True)
class Decoder:
    """
    An immutable base64 decoding profile.

    A `mime` decoder skips every byte outside its alphabet rather than only
    RFC 2045 line breaks; strict decoders reject them.
    """

    alphabet: Alphabet
    mime: bool = False

    def decode(self, data: bytes | str) -> bytes:
        """
        Decode `data` back to the original octets.

        A `str` is read one character per byte value, so only characters up to
        U+00FF can match the alphabet.
        """

        if data is None:
            raise NullInputError("data")
        if isinstance(data, str):
            return self._decode(map(ord, data))
        return self._decode(require_bytes(data, "data"))

    def _decode(self, values: Iterable[int]) -> bytes:
        lookup = self.alphabet.lookup
        mime = self.mime

        out = bytearray()
        mode = OCTET_0
        previous = 0
        position = 0

        for position, c in enumerate(values):
            if c == PAD:
                mode = MODE_PAD
                continue

            value = lookup[c] if c <= 0xFF else INVALID
            if value == INVALID:
                if mime:
                    continue
                raise InvalidEncodingError(value=c, position=position)

            # 4 encoded characters give 3 decoded octets.
            if mode == OCTET_0:
                previous = value << 2
                mode = OCTET_1
            elif mode == OCTET_1:
                out.append(previous | (value >> 4))
                previous = (value & 0xF) << 4
                mode = OCTET_2
            elif mode == OCTET_2:
                out.append(previous | (value >> 2))
                previous = (value & 0x3) << 6
                mode = OCTET_3
            elif mode == OCTET_3:
                out.append(previous | value)
                previous = 0
                mode = OCTET_0
            else:
                raise UnexpectedDataAfterPadError(value=c, position=position)

        if mode == OCTET_1:
            raise TruncatedInputError(position=position + 1)
        return bytes(out)

    def decode_into(self, data: bytes | str, destination: bytearray | memoryview) -> int:
        """Decode into the start of `destination`, returning the bytes written."""

        return copy_into(self.decode(data), destination)

    def __str__(self) -> str:
        return "RFC2045" if self.mime else self.alphabet.name
