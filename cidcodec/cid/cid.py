"""
Version-agnostic CID encoding and decoding.

This is the only place that knows about both CID versions. Binary input is
dispatched on its first byte, text input on its first character; everything
else is handed to :mod:`cidcodec.cid.v0` or :mod:`cidcodec.cid.v1`.
"""

import logging

from cidcodec.cid import (
    v0,
    v1,
)
from cidcodec.cid.types import (
    CID,
    CIDv0,
    CIDv1,
    CIDWithMultibase,
)
from cidcodec.config import (
    V0_LEADING_BYTE,
    V0_TEXT_PREFIX,
    V1_VERSION_BYTE,
)
from cidcodec.exceptions import (
    BaseCIDError,
    EmptyInputError,
    UnsupportedEncodingError,
    UnsupportedVersionError,
)
from cidcodec.io.reader import (
    BytesReader,
    as_reader,
)
from cidcodec.multiformats.multibase import (
    Multibase,
)
from cidcodec.multiformats.multicodec import (
    Multicodec,
    encode_codec,
)
from cidcodec.multiformats.multihash import (
    HashAlgorithm,
    encode_hash_algorithm,
    encode_multihash,
    validate_digest,
)
from cidcodec.utils.varint import (
    encode_uvarint,
)

logger = logging.getLogger("cidcodec.cid.cid")


def from_bytes(data: "bytes | bytearray | memoryview | BytesReader") -> CID:
    """
    Decode a binary CID of either version.

    The first byte is inspected without being consumed: ``0x12`` selects the
    CIDv0 decoder and ``0x01`` the CIDv1 decoder.

    Raises:
        EmptyInputError: there are no bytes at all.
        UnsupportedVersionError: the first byte selects neither version.

    """
    reader = as_reader(data)
    first = reader.peek()
    if first is None:
        raise EmptyInputError()

    cid: CID
    if first == V0_LEADING_BYTE:
        logger.debug("leading byte %#04x: decoding CIDv0", first)
        cid = v0.read(reader)
    elif first == V1_VERSION_BYTE:
        logger.debug("leading byte %#04x: decoding CIDv1", first)
        cid = v1.read(reader)
    else:
        raise UnsupportedVersionError(first)

    if not isinstance(data, BytesReader):
        reader.ensure_consumed()
    return cid


def from_text(text: str) -> CIDWithMultibase:
    """
    Decode CID text of either version.

    Text starting with ``"Q"`` is treated as CIDv0 base58btc in its entirety.
    This is a heuristic: a string that starts with ``"Q"`` but is not a valid
    CIDv0 fails here instead of being tried as CIDv1. Any other text is
    decoded as multibase CIDv1.
    """
    if not text:
        raise EmptyInputError()
    if text[0] == V0_TEXT_PREFIX:
        logger.debug("text starts with %r: decoding CIDv0", V0_TEXT_PREFIX)
        return CIDWithMultibase(v0.from_text(text))
    return v1.from_text(text)


def to_bytes(cid: CID | CIDWithMultibase) -> bytes:
    if isinstance(cid, CIDWithMultibase):
        cid = cid.cid
    if isinstance(cid, CIDv0):
        return v0.to_bytes(cid)
    return v1.to_bytes(cid)


def to_text(cid: CID | CIDWithMultibase, encoding: Multibase | None = None) -> str:
    """
    Encode ``cid`` as text.

    For CIDv1 the multibase is, in order of preference, ``encoding``, the one
    attached to a :class:`CIDWithMultibase`, then base32. CIDv0 text is always
    base58btc without a prefix.

    Raises:
        UnsupportedEncodingError: a multibase other than base58btc was
            requested for a CIDv0.

    """
    if isinstance(cid, CIDWithMultibase):
        if encoding is None:
            encoding = cid.multibase
        cid = cid.cid
    if isinstance(cid, CIDv0):
        if encoding not in (None, Multibase.BASE58BTC):
            raise UnsupportedEncodingError(
                f"CIDv0 text is always base58btc, not {encoding}"
            )
        return v0.to_text(cid)
    return v1.to_text(cid, encoding)


def from_v0(cid: CIDv0) -> CIDv1:
    """Upgrade a CIDv0 to the equivalent dag-pb/sha2-256 CIDv1."""
    return CIDv1(
        codec=Multicodec.DAG_PB,
        hash_algorithm=HashAlgorithm.SHA2_256,
        digest=cid.digest,
    )


def get_version(cid: CID | CIDWithMultibase) -> int:
    if isinstance(cid, CIDWithMultibase):
        cid = cid.cid
    return cid.version


def get_multihash(cid: CID | CIDWithMultibase) -> bytes:
    """Return the multihash part of ``cid``; for a CIDv0 that is all of it."""
    if isinstance(cid, CIDWithMultibase):
        cid = cid.cid
    if isinstance(cid, CIDv0):
        return v0.to_bytes(cid)
    return encode_multihash(cid.hash_algorithm, cid.digest)


def get_prefix(cid: CID | CIDWithMultibase) -> bytes:
    """
    Return everything but the digest: version, codec, hash code and digest
    length. A CIDv0 has no prefix.

    Appending a digest of the declared algorithm to the prefix yields the
    binary CID again.
    """
    if isinstance(cid, CIDWithMultibase):
        cid = cid.cid
    if isinstance(cid, CIDv0):
        return b""
    validate_digest(cid.hash_algorithm, cid.digest)
    return (
        bytes([V1_VERSION_BYTE])
        + encode_uvarint(encode_codec(cid.codec))
        + encode_uvarint(encode_hash_algorithm(cid.hash_algorithm))
        + encode_uvarint(len(cid.digest))
    )


def is_cid(value: "str | bytes") -> bool:
    """Return whether ``value`` decodes as a CID in text or binary form."""
    try:
        if isinstance(value, str):
            from_text(value)
        else:
            from_bytes(value)
    except BaseCIDError:
        return False
    return True
