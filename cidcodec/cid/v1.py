"""
CIDv1 codec.

Binary form::

    <0x01><varint codec><varint hash code><varint digest length><digest>

Text form is any multibase encoding of the binary form, base32 by default.
"""

import logging

from cidcodec.cid.types import (
    CIDv1,
    CIDWithMultibase,
)
from cidcodec.config import (
    DEFAULT_V1_MULTIBASE,
    V1_VERSION_BYTE,
)
from cidcodec.exceptions import (
    EmptyInputError,
    UnsupportedVersionError,
)
from cidcodec.io.reader import (
    BytesReader,
    as_reader,
)
from cidcodec.multiformats import multibase
from cidcodec.multiformats.multibase import (
    Multibase,
)
from cidcodec.multiformats.multicodec import (
    decode_codec,
    encode_codec,
)
from cidcodec.multiformats.multihash import (
    encode_multihash,
    read_multihash,
    validate_digest,
)
from cidcodec.utils.varint import (
    encode_uvarint,
    read_uvarint,
)

logger = logging.getLogger("cidcodec.cid.v1")


def to_bytes(cid: CIDv1) -> bytes:
    """
    Serialize ``cid`` to its binary form.

    Raises:
        HashLengthMismatchError: the digest length is not the fixed length of
            ``cid.hash_algorithm``.

    """
    validate_digest(cid.hash_algorithm, cid.digest)
    return (
        bytes([V1_VERSION_BYTE])
        + encode_uvarint(encode_codec(cid.codec))
        + encode_multihash(cid.hash_algorithm, cid.digest)
    )


def read(reader: BytesReader) -> CIDv1:
    """Read one CIDv1 from ``reader``, consuming only the bytes it spans."""
    version = reader.read_byte()
    if version is None:
        raise EmptyInputError()
    if version != V1_VERSION_BYTE:
        raise UnsupportedVersionError(version)
    codec = decode_codec(read_uvarint(reader))
    hash_algorithm, digest = read_multihash(reader)
    logger.debug("read CIDv1 codec=%s hash=%s", codec, hash_algorithm)
    return CIDv1(codec=codec, hash_algorithm=hash_algorithm, digest=digest)


def from_bytes(data: "bytes | bytearray | memoryview | BytesReader") -> CIDv1:
    """
    Decode a binary CIDv1.

    A ``BytesReader`` is advanced past the CID and may hold more data; a plain
    buffer must contain exactly one CID.

    Raises:
        EmptyInputError: no bytes at all.
        UnsupportedVersionError: the first byte is not 0x01.
        UnknownCodecError: the codec code is not in the table.
        UnknownHashAlgorithmError: the hash code is not in the table.
        HashLengthMismatchError: the declared digest length is not the fixed
            length for the hash algorithm.
        InsufficientBytesError: the digest is shorter than declared.
        TruncatedVarintError: a varint runs past the end of input.
        TrailingBytesError: a plain buffer holds bytes after the digest.

    """
    reader = as_reader(data)
    cid = read(reader)
    if not isinstance(data, BytesReader):
        reader.ensure_consumed()
    return cid


def to_text(cid: CIDv1, encoding: Multibase | None = None) -> str:
    if encoding is None:
        encoding = DEFAULT_V1_MULTIBASE
    return multibase.to_text(to_bytes(cid), encoding)


def from_text(text: str) -> CIDWithMultibase:
    """Decode multibase CIDv1 text, keeping the multibase it was written in."""
    data, encoding = multibase.from_text(text)
    cid = from_bytes(data)
    return CIDWithMultibase(cid, encoding)
