"""Lookup tables and codecs for the multiformats a CID is built from."""

from cidcodec.multiformats.multibase import (
    Multibase,
)
from cidcodec.multiformats.multicodec import (
    Multicodec,
    decode_codec,
    encode_codec,
)
from cidcodec.multiformats.multihash import (
    HashAlgorithm,
    decode_hash_algorithm,
    decode_multihash,
    encode_hash_algorithm,
    encode_multihash,
    expected_length,
    read_multihash,
    validate_digest,
)

__all__ = [
    "HashAlgorithm",
    "Multibase",
    "Multicodec",
    "decode_codec",
    "decode_hash_algorithm",
    "decode_multihash",
    "encode_codec",
    "encode_hash_algorithm",
    "encode_multihash",
    "expected_length",
    "read_multihash",
    "validate_digest",
]
