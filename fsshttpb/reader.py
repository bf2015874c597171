"""Bounds-checked cursor over an in-memory byte buffer."""

from __future__ import annotations

import struct

from fsshttpb.config import DecoderLimits, limits_from_env
from fsshttpb.errors import UnexpectedEndOfStream


class Reader:
    """
    Tracks a read position over a buffer.
    Every read either consumes exactly the requested bytes or raises
    UnexpectedEndOfStream without moving the position.
    """

    def __init__(
        self,
        buffer: bytes | bytearray | memoryview,
        offset: int = 0,
        limits: DecoderLimits | None = None,
    ):
        self._buffer = memoryview(buffer)
        self._limit = len(self._buffer)
        if offset < 0 or offset > self._limit:
            raise ValueError(f"Offset {offset} outside buffer of {self._limit} bytes")
        self._offset = offset
        self.limits = limits or limits_from_env()

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return self._limit - self._offset

    def tell(self) -> int:
        """Return a checkpoint that `seek` can rewind to."""
        return self._offset

    def seek(self, offset: int) -> None:
        if offset < 0 or offset > self._limit:
            raise ValueError(f"Offset {offset} outside buffer of {self._limit} bytes")
        self._offset = offset

    def _check_bounds(self, size: int):
        if self._offset + size > self._limit:
            raise UnexpectedEndOfStream(size, self.remaining, self._offset)

    def read(self, size: int) -> bytes:
        self._check_bounds(size)
        data = bytes(self._buffer[self._offset:self._offset + size])
        self._offset += size
        return data

    def peek_u8(self) -> int | None:
        """Return the next byte without consuming it, or None at the end."""
        if self.remaining < 1:
            return None
        return self._buffer[self._offset]

    def read_u8(self) -> int:
        self._check_bounds(1)
        val = self._buffer[self._offset]
        self._offset += 1
        return val

    def read_u16(self) -> int:
        self._check_bounds(2)
        val = struct.unpack_from('<H', self._buffer, self._offset)[0]
        self._offset += 2
        return val

    def read_u32(self) -> int:
        self._check_bounds(4)
        val = struct.unpack_from('<I', self._buffer, self._offset)[0]
        self._offset += 4
        return val

    def read_u64(self) -> int:
        self._check_bounds(8)
        val = struct.unpack_from('<Q', self._buffer, self._offset)[0]
        self._offset += 8
        return val

