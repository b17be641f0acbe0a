from __future__ import annotations


class B64CodecError(Exception):
    """Base error for the b64codec library."""


class NullInputError(B64CodecError, TypeError):
    """A required input or destination was `None`."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} must not be None")
        self.name = name


class DestinationTooSmallError(B64CodecError, ValueError):
    """The caller supplied buffer cannot hold the whole result."""

    def __init__(self, *, required: int, available: int) -> None:
        super().__init__(f"destination {available} < required {required}")
        self.required = required
        self.available = available


class InvalidSeparatorError(B64CodecError, ValueError):
    """
    A MIME line separator contains a base64 alphabet character.

    Such a separator could not be told apart from encoded data when decoding.
    """

    def __init__(self, *, value: int, position: int) -> None:
        super().__init__(
            f"illegal base64 line separator at {position} character 0x{value:x}"
        )
        self.value = value
        self.position = position


class InvalidEncodingError(B64CodecError, ValueError):
    """A strict decoder met a byte outside its alphabet."""

    def __init__(self, *, value: int, position: int) -> None:
        super().__init__(f"invalid encoding got 0x{value:x} at {position}")
        self.value = value
        self.position = position


class UnexpectedDataAfterPadError(B64CodecError, ValueError):
    """An alphabet character followed a `=` pad."""

    def __init__(self, *, value: int, position: int) -> None:
        super().__init__(f"expected pad but got {chr(value)!r} at {position}")
        self.value = value
        self.position = position


class TruncatedInputError(B64CodecError, ValueError):
    """Input ended with a single dangling 6-bit group."""

    def __init__(self, *, position: int) -> None:
        super().__init__(f"truncated encoding, dangling character before {position}")
        self.position = position
