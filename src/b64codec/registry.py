"""
Preconfigured encoder and decoder profiles.

All profiles are built once at import and shared; none carry mutable state,
so they can be used from any number of threads at once.
"""

from __future__ import annotations

import logging

from .alphabet import STANDARD, URL_SAFE
from .constants import CRLF, MIME_LINE_MAX
from .decoder import Decoder
from .encoder import Encoder
from .exceptions import InvalidSeparatorError, NullInputError
from .padding import Padding
from .util.bytes import require_bytes

logger = logging.getLogger(__name__)

RFC4648 = Encoder(STANDARD)
RFC4648_URLSAFE = Encoder(URL_SAFE)
RFC2045 = Encoder(STANDARD, MIME_LINE_MAX, CRLF, Padding.WITH)

RFC4648_DECODER = Decoder(STANDARD)
RFC4648_URLSAFE_DECODER = Decoder(URL_SAFE)
RFC2045_DECODER = Decoder(STANDARD, mime=True)


def get_encoder() -> Encoder:
    return RFC4648


def get_url_encoder() -> Encoder:
    return RFC4648_URLSAFE


def get_mime_encoder(
    line_length: int | None = None, separator: bytes | None = None
) -> Encoder:
    """
    Return the MIME encoder, or one with a custom line length and separator.

    A line length below 4 gives the unwrapped standard encoder. Otherwise the
    length is rounded down to a multiple of 4 and the separator must not
    contain any base64 alphabet character.
    """

    if line_length is None:
        if separator is not None:
            raise TypeError("separator requires a line_length")
        return RFC2045
    if separator is None:
        raise NullInputError("separator")
    sep = require_bytes(separator, "separator")

    if line_length // 4 <= 0:
        logger.debug("line length %d too short to wrap, using %s", line_length, RFC4648)
        return RFC4648

    for position, value in enumerate(sep):
        if value in STANDARD:
            raise InvalidSeparatorError(value=value, position=position)

    encoder = Encoder(STANDARD, line_length // 4 * 4, sep, Padding.WITH)
    logger.debug("created MIME encoder %s separator=%r", encoder, sep)
    return encoder


def get_decoder() -> Decoder:
    return RFC4648_DECODER


def get_url_decoder() -> Decoder:
    return RFC4648_URLSAFE_DECODER


def get_mime_decoder() -> Decoder:
    return RFC2045_DECODER
