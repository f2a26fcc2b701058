"""
CID format constants and defaults.
"""

from cidcodec.multiformats.multibase import Multibase

# CID versions
CID_V0 = 0
CID_V1 = 1

# Leading byte of a binary CIDv1
V1_VERSION_BYTE = 0x01

# CIDv0 is a bare sha2-256 multihash: <0x12><0x20><32-byte digest>
V0_LEADING_BYTE = 0x12
V0_LENGTH_BYTE = 0x20
V0_DIGEST_LENGTH = 32
V0_BINARY_LENGTH = 2 + V0_DIGEST_LENGTH

# base58btc text of a 34-byte sha2-256 multihash always starts with "Qm"
V0_TEXT_PREFIX = "Q"

# Text encoding used for CIDv1 when the caller does not choose one
DEFAULT_V1_MULTIBASE = Multibase.BASE32
