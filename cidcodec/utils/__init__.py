"""Utility functions for cidcodec."""

from cidcodec.utils.varint import (
    MAX_VARINT_BYTES,
    decode_uvarint,
    decode_varint_with_size,
    encode_uvarint,
    read_uvarint,
)

__all__ = [
    "MAX_VARINT_BYTES",
    "decode_uvarint",
    "decode_varint_with_size",
    "encode_uvarint",
    "read_uvarint",
]
