from cidcodec.exceptions import (
    InsufficientBytesError,
    TrailingBytesError,
)


class BytesReader:
    """
    Forward-only cursor over an in-memory byte buffer.

    Supports a one byte lookahead through :meth:`peek` so callers can
    dispatch on a leading byte without consuming it.
    """

    _data: bytes
    _position: int

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._data) - self._position

    def at_end(self) -> bool:
        return self._position >= len(self._data)

    def peek(self) -> int | None:
        """Return the next byte without consuming it, or ``None`` at the end."""
        if self.at_end():
            return None
        return self._data[self._position]

    def read_byte(self) -> int | None:
        """Consume and return the next byte, or ``None`` at the end."""
        if self.at_end():
            return None
        value = self._data[self._position]
        self._position += 1
        return value

    def read_exactly(self, n: int) -> bytes:
        """
        Consume exactly ``n`` bytes.

        Raises:
            InsufficientBytesError: if fewer than ``n`` bytes remain. Nothing is
                consumed in that case.

        """
        if n > self.remaining:
            raise InsufficientBytesError(needed=n, available=self.remaining)
        chunk = self._data[self._position : self._position + n]
        self._position += n
        return chunk

    def ensure_consumed(self) -> None:
        if not self.at_end():
            raise TrailingBytesError(self.remaining)

    def __repr__(self) -> str:
        return f"<BytesReader position={self._position} remaining={self.remaining}>"


def as_reader(data: "bytes | bytearray | memoryview | BytesReader") -> BytesReader:
    if isinstance(data, BytesReader):
        return data
    return BytesReader(data)
