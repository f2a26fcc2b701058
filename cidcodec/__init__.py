"""Content Identifiers (CIDv0 and CIDv1) for content-addressed data."""

from importlib.metadata import version as __version

from cidcodec.cid import (
    CID,
    CIDv0,
    CIDv1,
    CIDWithMultibase,
    from_bytes,
    from_text,
    from_v0,
    get_multihash,
    get_prefix,
    get_version,
    is_cid,
    to_bytes,
    to_text,
)
from cidcodec.exceptions import (
    BaseCIDError,
    ParseError,
    ValidationError,
)
from cidcodec.multiformats import (
    HashAlgorithm,
    Multibase,
    Multicodec,
)
from cidcodec.utils.logging import (
    setup_logging,
)

# Initialize logging configuration
setup_logging()

__all__ = [
    "BaseCIDError",
    "CID",
    "CIDv0",
    "CIDv1",
    "CIDWithMultibase",
    "HashAlgorithm",
    "Multibase",
    "Multicodec",
    "ParseError",
    "ValidationError",
    "from_bytes",
    "from_text",
    "from_v0",
    "get_multihash",
    "get_prefix",
    "get_version",
    "is_cid",
    "to_bytes",
    "to_text",
]

__version__ = __version("cidcodec")
