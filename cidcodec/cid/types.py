"""CID value types."""

from dataclasses import (
    dataclass,
)
from typing import (
    ClassVar,
)

from cidcodec.config import (
    CID_V0,
    CID_V1,
)
from cidcodec.exceptions import (
    UnsupportedEncodingError,
)
from cidcodec.multiformats.multibase import (
    Multibase,
)
from cidcodec.multiformats.multicodec import (
    Multicodec,
)
from cidcodec.multiformats.multihash import (
    HashAlgorithm,
)


@dataclass(frozen=True)
class CIDv0:
    """
    Legacy CID: a bare sha2-256 multihash addressing dag-pb data.

    Only the digest is stored; codec and hash algorithm are implied.
    """

    digest: bytes

    version: ClassVar[int] = CID_V0
    codec: ClassVar[Multicodec] = Multicodec.DAG_PB
    hash_algorithm: ClassVar[HashAlgorithm] = HashAlgorithm.SHA2_256

    def __post_init__(self) -> None:
        object.__setattr__(self, "digest", bytes(self.digest))

    def __repr__(self) -> str:
        return f"CIDv0(digest={self.digest.hex()})"


@dataclass(frozen=True)
class CIDv1:
    """
    Extensible CID.

    Construction does not check the digest length against ``hash_algorithm``;
    encoding does.
    """

    codec: Multicodec
    hash_algorithm: HashAlgorithm
    digest: bytes

    version: ClassVar[int] = CID_V1

    def __post_init__(self) -> None:
        object.__setattr__(self, "digest", bytes(self.digest))

    def __repr__(self) -> str:
        return (
            f"CIDv1(codec={self.codec}, hash_algorithm={self.hash_algorithm}, "
            f"digest={self.digest.hex()})"
        )


CID = CIDv0 | CIDv1


@dataclass(frozen=True)
class CIDWithMultibase:
    """A CID together with the multibase its text form uses (CIDv1 only)."""

    cid: CID
    multibase: Multibase | None = None

    def __post_init__(self) -> None:
        if isinstance(self.cid, CIDv0) and self.multibase is not None:
            raise UnsupportedEncodingError(
                "CIDv0 text is always base58btc; no multibase may be attached"
            )

    def __str__(self) -> str:
        from cidcodec.cid.cid import to_text

        return to_text(self)
