"""Exceptions raised while decoding FSSHTTPB structures."""

from __future__ import annotations


class DecodeError(Exception):
    """Raised when decoding fails. Every decode error is fatal to the call."""

    def __init__(self, message: str, offset: int | None = None) -> None:
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)


class MalformedHeader(DecodeError):
    """Raised when tag byte(s) do not form a recognized pattern."""


class UnexpectedObjectType(DecodeError):
    """Raised when a header is not valid at this point of the grammar."""

    def __init__(self, actual: object, expected: tuple[object, ...], offset: int | None = None) -> None:
        self.actual = actual
        self.expected = expected
        wanted = " or ".join(str(item) for item in expected)
        super().__init__(f"Unexpected object type {actual}, expected {wanted}", offset)


class InvalidEnumValue(DecodeError):
    """Raised when an integer does not map to a known enum constant."""

    def __init__(self, enum_name: str, value: int, offset: int | None = None) -> None:
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"Invalid {enum_name} value: {value}", offset)


class UnexpectedEndOfStream(DecodeError):
    """Raised when the buffer is too short."""

    def __init__(self, needed: int, available: int, offset: int | None = None) -> None:
        self.needed = needed
        self.available = available
        super().__init__(f"Need {needed} bytes, but only {available} left", offset)


class TruncatedArray(DecodeError):
    """Raised when an array declares more entries than the buffer holds."""

    def __init__(self, count: int, message: str | None = None, offset: int | None = None) -> None:
        self.count = count
        super().__init__(message or f"Array of {count} entries is truncated", offset)


class LimitExceeded(DecodeError):
    """Raised when a declared count or length crosses a configured limit."""

    def __init__(self, what: str, value: int, limit: int, offset: int | None = None) -> None:
        self.what = what
        self.value = value
        self.limit = limit
        super().__init__(f"{what} of {value} exceeds limit {limit}", offset)


__all__ = [
    "DecodeError",
    "InvalidEnumValue",
    "LimitExceeded",
    "MalformedHeader",
    "TruncatedArray",
    "UnexpectedEndOfStream",
    "UnexpectedObjectType",
]
