"""
Multihash table and helpers.

A multihash is ``<varint hash code><varint digest length><digest>``. Only the
algorithms below are recognised, each with a fixed digest length. Digests are
always supplied by the caller; nothing here computes a hash.
"""

from enum import (
    Enum,
    unique,
)
import logging

from cidcodec.exceptions import (
    HashLengthMismatchError,
    UnknownHashAlgorithmError,
)
from cidcodec.io.reader import (
    BytesReader,
    as_reader,
)
from cidcodec.utils.varint import (
    encode_uvarint,
    read_uvarint,
)

logger = logging.getLogger("cidcodec.multiformats.multihash")


@unique
class HashAlgorithm(Enum):
    SHA2_256 = 0x12
    SHA2_512 = 0x13
    BLAKE2B_256 = 0xB220

    @property
    def code(self) -> int:
        return self.value

    @property
    def digest_length(self) -> int:
        return _DIGEST_LENGTHS[self]

    @property
    def hash_name(self) -> str:
        return _HASH_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        try:
            return _HASHES_BY_NAME[name]
        except KeyError:
            raise UnknownHashAlgorithmError(name) from None

    def __str__(self) -> str:
        return self.hash_name


_DIGEST_LENGTHS = {
    HashAlgorithm.SHA2_256: 32,
    HashAlgorithm.SHA2_512: 64,
    HashAlgorithm.BLAKE2B_256: 32,
}

_HASH_NAMES = {
    HashAlgorithm.SHA2_256: "sha2-256",
    HashAlgorithm.SHA2_512: "sha2-512",
    HashAlgorithm.BLAKE2B_256: "blake2b-256",
}

_HASHES_BY_NAME = {name: algorithm for algorithm, name in _HASH_NAMES.items()}


def encode_hash_algorithm(algorithm: HashAlgorithm) -> int:
    return algorithm.value


def decode_hash_algorithm(code: int) -> HashAlgorithm:
    """Look up the hash algorithm registered under ``code``."""
    try:
        return HashAlgorithm(code)
    except ValueError:
        raise UnknownHashAlgorithmError(code) from None


def expected_length(algorithm: HashAlgorithm) -> int:
    return _DIGEST_LENGTHS[algorithm]


def validate_digest(algorithm: HashAlgorithm, digest: bytes) -> None:
    """
    Check that ``digest`` has the fixed length of ``algorithm``.

    Raises:
        HashLengthMismatchError: if the lengths differ.

    """
    expected = expected_length(algorithm)
    if len(digest) != expected:
        raise HashLengthMismatchError(expected=expected, actual=len(digest))


def encode_multihash(algorithm: HashAlgorithm, digest: bytes) -> bytes:
    validate_digest(algorithm, digest)
    return (
        encode_uvarint(encode_hash_algorithm(algorithm))
        + encode_uvarint(len(digest))
        + bytes(digest)
    )


def read_multihash(reader: BytesReader) -> tuple[HashAlgorithm, bytes]:
    """
    Read one multihash from ``reader``.

    The declared digest length must equal the algorithm's fixed length before
    any digest bytes are consumed.

    Raises:
        UnknownHashAlgorithmError: the hash code is not in the table.
        HashLengthMismatchError: the declared length is not the fixed length.
        InsufficientBytesError: fewer digest bytes remain than declared.
        TruncatedVarintError: a varint field runs past the end of input.

    """
    algorithm = decode_hash_algorithm(read_uvarint(reader))
    declared = read_uvarint(reader)
    expected = expected_length(algorithm)
    if declared != expected:
        raise HashLengthMismatchError(expected=expected, actual=declared)
    digest = reader.read_exactly(declared)
    logger.debug("read multihash %s (%d bytes)", algorithm, declared)
    return algorithm, digest


def decode_multihash(
    data: "bytes | bytearray | memoryview | BytesReader",
) -> tuple[HashAlgorithm, bytes]:
    """Decode a multihash; a plain buffer must hold exactly one multihash."""
    reader = as_reader(data)
    result = read_multihash(reader)
    if not isinstance(data, BytesReader):
        reader.ensure_consumed()
    return result
