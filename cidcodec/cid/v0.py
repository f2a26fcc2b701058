"""
CIDv0 codec.

Binary form is the fixed 34-byte sha2-256 multihash
``<0x12><0x20><32-byte digest>``; text form is its base58btc encoding with no
multibase prefix.
"""

import logging

from cidcodec.cid.types import (
    CIDv0,
)
from cidcodec.config import (
    V0_BINARY_LENGTH,
    V0_DIGEST_LENGTH,
    V0_LEADING_BYTE,
    V0_LENGTH_BYTE,
)
from cidcodec.exceptions import (
    EmptyInputError,
    HashLengthMismatchError,
    HeaderMismatchError,
    InsufficientBytesError,
    InvalidLengthError,
)
from cidcodec.io.reader import (
    BytesReader,
    as_reader,
)
from cidcodec.multiformats import multibase
from cidcodec.multiformats.multibase import (
    Multibase,
)

logger = logging.getLogger("cidcodec.cid.v0")

_HEADER = bytes([V0_LEADING_BYTE, V0_LENGTH_BYTE])


def to_bytes(cid: CIDv0) -> bytes:
    """
    Serialize ``cid`` to its 34-byte binary form.

    Raises:
        HashLengthMismatchError: the digest is not 32 bytes. A CIDv0 should
            never be built that way.

    """
    if len(cid.digest) != V0_DIGEST_LENGTH:
        raise HashLengthMismatchError(
            expected=V0_DIGEST_LENGTH, actual=len(cid.digest)
        )
    return _HEADER + bytes(cid.digest)


def read(reader: BytesReader) -> CIDv0:
    """Read one CIDv0 from ``reader``, consuming exactly 34 bytes."""
    if reader.remaining < 2:
        raise InsufficientBytesError(needed=2, available=reader.remaining)
    hash_code = reader.read_exactly(1)[0]
    if hash_code != V0_LEADING_BYTE:
        raise HeaderMismatchError("multihash code", V0_LEADING_BYTE, hash_code)
    length = reader.read_exactly(1)[0]
    if length != V0_LENGTH_BYTE:
        raise HeaderMismatchError("multihash length", V0_LENGTH_BYTE, length)
    digest = reader.read_exactly(V0_DIGEST_LENGTH)
    return CIDv0(digest)


def from_bytes(data: "bytes | bytearray | memoryview | BytesReader") -> CIDv0:
    """
    Decode a binary CIDv0.

    A ``BytesReader`` is advanced past the CID and may hold more data; a plain
    buffer must contain exactly one CID.
    """
    reader = as_reader(data)
    cid = read(reader)
    if not isinstance(data, BytesReader):
        reader.ensure_consumed()
    return cid


def to_text(cid: CIDv0) -> str:
    return multibase.encode(to_bytes(cid), Multibase.BASE58BTC)


def from_text(text: str) -> CIDv0:
    """
    Decode base58btc CIDv0 text.

    Raises:
        EmptyInputError: ``text`` is empty.
        BaseDecodeError: ``text`` is not valid base58btc.
        InvalidLengthError: the decoded form is not exactly 34 bytes.

    """
    if not text:
        raise EmptyInputError()
    data = multibase.decode(text, Multibase.BASE58BTC)
    if len(data) != V0_BINARY_LENGTH:
        raise InvalidLengthError(expected=V0_BINARY_LENGTH, actual=len(data))
    cid = from_bytes(data)
    logger.debug("decoded CIDv0 text %s", text)
    return cid
