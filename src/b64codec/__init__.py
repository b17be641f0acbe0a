"""
b64codec: RFC 4648 and RFC 2045 (MIME) base64 encoders and decoders.

Profiles are immutable and shared; obtain them from the `get_*` functions.
"""

from __future__ import annotations

from .alphabet import STANDARD, URL_SAFE, Alphabet
from .decoder import Decoder
from .encoder import Encoder
from .exceptions import (
    B64CodecError,
    DestinationTooSmallError,
    InvalidEncodingError,
    InvalidSeparatorError,
    NullInputError,
    TruncatedInputError,
    UnexpectedDataAfterPadError,
)
from .padding import Padding
from .registry import (
    get_decoder,
    get_encoder,
    get_mime_decoder,
    get_mime_encoder,
    get_url_decoder,
    get_url_encoder,
)

__all__ = [
    "STANDARD",
    "URL_SAFE",
    "Alphabet",
    "B64CodecError",
    "Decoder",
    "DestinationTooSmallError",
    "Encoder",
    "InvalidEncodingError",
    "InvalidSeparatorError",
    "NullInputError",
    "Padding",
    "TruncatedInputError",
    "UnexpectedDataAfterPadError",
    "get_decoder",
    "get_encoder",
    "get_mime_decoder",
    "get_mime_encoder",
    "get_url_decoder",
    "get_url_encoder",
]

__version__ = "0.1.0"
