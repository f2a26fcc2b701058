import logging

from cidcodec.exceptions import (
    TruncatedVarintError,
    VarintOverflowError,
)
from cidcodec.io.reader import (
    BytesReader,
)

logger = logging.getLogger("cidcodec.utils.varint")

# Unsigned LEB128 (varint codec)
# Reference: https://github.com/multiformats/unsigned-varint

LOW_MASK = 2**7 - 1
HIGH_MASK = 2**7

# Ten bytes carry 70 payload bits, enough for any 64 bit integer. Longer
# encodings are rejected rather than consumed.
MAX_VARINT_BYTES = 10


def encode_uvarint(value: int) -> bytes:
    """Encode an unsigned integer as a varint."""
    if value < 0:
        raise ValueError("Cannot encode negative value as uvarint")

    result = bytearray()
    while value >= HIGH_MASK:
        result.append((value & LOW_MASK) | HIGH_MASK)
        value >>= 7
    result.append(value & LOW_MASK)
    return bytes(result)


def read_uvarint(reader: BytesReader, max_bytes: int = MAX_VARINT_BYTES) -> int:
    """
    Read one varint from ``reader``, stopping at the first byte whose
    continuation bit is clear.

    Raises:
        TruncatedVarintError: the input ends before a final byte is seen.
        VarintOverflowError: ``max_bytes`` bytes were read and the last one
            still had its continuation bit set.

    """
    result = 0
    shift = 0
    for _ in range(max_bytes):
        byte = reader.read_byte()
        if byte is None:
            raise TruncatedVarintError()
        result |= (byte & LOW_MASK) << shift
        if not byte & HIGH_MASK:
            return result
        shift += 7
    raise VarintOverflowError(max_bytes)


def decode_varint_with_size(data: bytes) -> tuple[int, int]:
    """
    Decode the varint at the start of ``data`` and return both the value and
    the number of bytes consumed.

    Returns:
        tuple[int, int]: (value, bytes_consumed)

    """
    reader = BytesReader(data)
    value = read_uvarint(reader)
    return value, reader.position


def decode_uvarint(data: bytes) -> int:
    """Decode the varint at the start of ``data``."""
    value, _ = decode_varint_with_size(data)
    return value
