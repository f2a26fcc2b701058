"""
Multicodec table.

Maps the content codecs a CID may address to their standardized numeric
codes. Reference: https://github.com/multiformats/multicodec/blob/master/table.csv
"""

from enum import (
    Enum,
    unique,
)

from cidcodec.exceptions import (
    UnknownCodecError,
)


@unique
class Multicodec(Enum):
    RAW = 0x55
    DAG_PB = 0x70
    DAG_CBOR = 0x71
    DAG_JSON = 0x0129

    @property
    def code(self) -> int:
        return self.value

    @property
    def codec_name(self) -> str:
        return _CODEC_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "Multicodec":
        try:
            return _CODECS_BY_NAME[name]
        except KeyError:
            raise UnknownCodecError(name) from None

    def __str__(self) -> str:
        return self.codec_name


_CODEC_NAMES = {
    Multicodec.RAW: "raw",
    Multicodec.DAG_PB: "dag-pb",
    Multicodec.DAG_CBOR: "dag-cbor",
    Multicodec.DAG_JSON: "dag-json",
}

_CODECS_BY_NAME = {name: codec for codec, name in _CODEC_NAMES.items()}


def encode_codec(codec: Multicodec) -> int:
    return codec.value


def decode_codec(code: int) -> Multicodec:
    """Look up the codec registered under ``code``."""
    try:
        return Multicodec(code)
    except ValueError:
        raise UnknownCodecError(code) from None
