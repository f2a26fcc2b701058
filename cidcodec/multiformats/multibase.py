"""
Multibase dispatcher.

A multibase string is a single discriminator character followed by the
payload in the base encoding that character names. The transcoding itself is
delegated to ``base58`` (base58btc) and the standard library ``base64``
module (base32, base64 and base16 variants).
"""

from collections.abc import (
    Callable,
)
import base64
from enum import (
    Enum,
    unique,
)
import logging
import string

import base58

from cidcodec.exceptions import (
    BaseDecodeError,
    EmptyInputError,
    UnsupportedEncodingError,
    UnsupportedMultibasePrefixError,
)

logger = logging.getLogger("cidcodec.multiformats.multibase")


@unique
class Multibase(Enum):
    BASE58BTC = "z"
    BASE32 = "b"
    BASE32_UPPER = "B"
    BASE64 = "m"
    BASE64_URL = "u"
    BASE64_URL_PAD = "U"
    BASE16 = "f"
    BASE16_UPPER = "F"

    @property
    def prefix(self) -> str:
        return self.value

    @property
    def encoding_name(self) -> str:
        return _ENCODING_NAMES[self]

    @classmethod
    def from_prefix(cls, prefix: str) -> "Multibase":
        try:
            return cls(prefix)
        except ValueError:
            raise UnsupportedMultibasePrefixError(prefix) from None

    @classmethod
    def from_name(cls, name: str) -> "Multibase":
        try:
            return _ENCODINGS_BY_NAME[name]
        except KeyError:
            raise UnsupportedEncodingError(
                f"unknown multibase encoding: {name!r}"
            ) from None

    def __str__(self) -> str:
        return self.encoding_name


_ENCODING_NAMES = {
    Multibase.BASE58BTC: "base58btc",
    Multibase.BASE32: "base32",
    Multibase.BASE32_UPPER: "base32upper",
    Multibase.BASE64: "base64",
    Multibase.BASE64_URL: "base64url",
    Multibase.BASE64_URL_PAD: "base64urlpad",
    Multibase.BASE16: "base16",
    Multibase.BASE16_UPPER: "base16upper",
}

_ENCODINGS_BY_NAME = {name: tag for tag, name in _ENCODING_NAMES.items()}

_BASE58_BTC = base58.BITCOIN_ALPHABET.decode("ascii")
_BASE32_LOWER = string.ascii_lowercase + "234567"
_BASE32_UPPER = string.ascii_uppercase + "234567"
_BASE64_STD = string.ascii_letters + string.digits + "+/"
_BASE64_URL = string.ascii_letters + string.digits + "-_"
_BASE16_LOWER = "0123456789abcdef"
_BASE16_UPPER = "0123456789ABCDEF"


def _check_alphabet(text: str, alphabet: str) -> None:
    for char in text:
        if char not in alphabet:
            raise ValueError(f"invalid character {char!r}")


def _padding(text: str, block: int) -> str:
    return "=" * (-len(text) % block)


def _decode_base58btc(text: str) -> bytes:
    _check_alphabet(text, _BASE58_BTC)
    return base58.b58decode(text)


def _decode_base32(text: str) -> bytes:
    _check_alphabet(text, _BASE32_LOWER)
    return base64.b32decode(text.upper() + _padding(text, 8))


def _decode_base32_upper(text: str) -> bytes:
    _check_alphabet(text, _BASE32_UPPER)
    return base64.b32decode(text + _padding(text, 8))


def _decode_base64(text: str) -> bytes:
    _check_alphabet(text, _BASE64_STD)
    return base64.b64decode(text + _padding(text, 4), validate=True)


def _decode_base64_url(text: str) -> bytes:
    _check_alphabet(text, _BASE64_URL)
    return base64.urlsafe_b64decode(text + _padding(text, 4))


def _decode_base64_url_pad(text: str) -> bytes:
    _check_alphabet(text.rstrip("="), _BASE64_URL)
    if _padding(text, 4):
        raise ValueError("Incorrect padding")
    return base64.urlsafe_b64decode(text)


def _decode_base16(text: str) -> bytes:
    _check_alphabet(text, _BASE16_LOWER)
    return base64.b16decode(text.upper())


def _decode_base16_upper(text: str) -> bytes:
    _check_alphabet(text, _BASE16_UPPER)
    return base64.b16decode(text)


_ENCODERS: dict[Multibase, Callable[[bytes], str]] = {
    Multibase.BASE58BTC: lambda data: base58.b58encode(data).decode("ascii"),
    Multibase.BASE32: lambda data: (
        base64.b32encode(data).decode("ascii").lower().rstrip("=")
    ),
    Multibase.BASE32_UPPER: lambda data: (
        base64.b32encode(data).decode("ascii").rstrip("=")
    ),
    Multibase.BASE64: lambda data: base64.b64encode(data).decode("ascii").rstrip("="),
    Multibase.BASE64_URL: lambda data: (
        base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
    ),
    Multibase.BASE64_URL_PAD: lambda data: (
        base64.urlsafe_b64encode(data).decode("ascii")
    ),
    Multibase.BASE16: lambda data: base64.b16encode(data).decode("ascii").lower(),
    Multibase.BASE16_UPPER: lambda data: base64.b16encode(data).decode("ascii"),
}

_DECODERS: dict[Multibase, Callable[[str], bytes]] = {
    Multibase.BASE58BTC: _decode_base58btc,
    Multibase.BASE32: _decode_base32,
    Multibase.BASE32_UPPER: _decode_base32_upper,
    Multibase.BASE64: _decode_base64,
    Multibase.BASE64_URL: _decode_base64_url,
    Multibase.BASE64_URL_PAD: _decode_base64_url_pad,
    Multibase.BASE16: _decode_base16,
    Multibase.BASE16_UPPER: _decode_base16_upper,
}


def encode(data: bytes, encoding: Multibase) -> str:
    """Encode ``data`` in ``encoding`` without the discriminator character."""
    return _ENCODERS[encoding](bytes(data))


def decode(text: str, encoding: Multibase) -> bytes:
    """
    Decode a payload (discriminator already stripped) in ``encoding``.

    Raises:
        BaseDecodeError: wraps the underlying decoder failure.

    """
    try:
        return _DECODERS[encoding](text)
    except ValueError as e:
        raise BaseDecodeError(encoding.encoding_name, str(e)) from e


def to_text(data: bytes, encoding: Multibase) -> str:
    return encoding.prefix + encode(data, encoding)


def from_text(text: str) -> tuple[bytes, Multibase]:
    """
    Split a multibase string into its decoded bytes and encoding.

    Raises:
        EmptyInputError: ``text`` is empty.
        UnsupportedMultibasePrefixError: the first character names no encoding.
        BaseDecodeError: the payload is invalid for the named encoding.

    """
    if not text:
        raise EmptyInputError("empty multibase string")
    encoding = Multibase.from_prefix(text[0])
    logger.debug("multibase prefix %r -> %s", text[0], encoding)
    return decode(text[1:], encoding), encoding
