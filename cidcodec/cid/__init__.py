"""
Content Identifiers.

CIDv0 and CIDv1 value types with binary and text codecs for each, plus a
version-detecting facade.
"""

from . import v0, v1
from .cid import (
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
from .types import (
    CID,
    CIDv0,
    CIDv1,
    CIDWithMultibase,
)

__all__ = [
    "CID",
    "CIDv0",
    "CIDv1",
    "CIDWithMultibase",
    "from_bytes",
    "from_text",
    "from_v0",
    "get_multihash",
    "get_prefix",
    "get_version",
    "is_cid",
    "to_bytes",
    "to_text",
    "v0",
    "v1",
]
