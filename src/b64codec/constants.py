from __future__ import annotations

# RFC 2045 section 6.8: encoded lines must be no more than 76 characters.
MIME_LINE_MAX = 76
CRLF = b"\r\n"

PAD = ord("=")
MASK = 0x3F

# Line length of profiles that never wrap.
UNBOUNDED = -1

# Marks a byte value that is not part of an alphabet.
INVALID = -1
