from __future__ import annotations

from typing import TypeAlias

from ..exceptions import DestinationTooSmallError, NullInputError

BytesLike: TypeAlias = bytes | bytearray | memoryview


def require_bytes(data: object, name: str) -> bytes:
    """Return `data` as `bytes`, rejecting `None` and anything not bytes-like."""

    if data is None:
        raise NullInputError(name)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(data).__name__}")
    return bytes(data)


def copy_into(result: bytes, destination: object) -> int:
    """
    Copy `result` to the start of a writable buffer and return its length.

    The caller's buffer is left untouched when it is too small.
    """

    if destination is None:
        raise NullInputError("destination")
    if not isinstance(destination, (bytearray, memoryview)):
        raise TypeError(
            f"destination must be a writable buffer, got {type(destination).__name__}"
        )
    length = len(result)
    if len(destination) < length:
        raise DestinationTooSmallError(required=length, available=len(destination))
    destination[0:length] = result
    return length
