import pytest

from cidcodec.exceptions import (
    BaseDecodeError,
    EmptyInputError,
    ParseError,
    UnsupportedEncodingError,
    UnsupportedMultibasePrefixError,
)
from cidcodec.multiformats import multibase
from cidcodec.multiformats.multibase import Multibase

# Reference vectors from the multiformats/multibase test suite
YES_MANI = b"yes mani !"
YES_MANI_VECTORS = [
    (Multibase.BASE58BTC, "z7paNL19xttacUY"),
    (Multibase.BASE32, "bpfsxgidnmfxgsibb"),
    (Multibase.BASE32_UPPER, "BPFSXGIDNMFXGSIBB"),
    (Multibase.BASE64, "meWVzIG1hbmkgIQ"),
    (Multibase.BASE64_URL, "ueWVzIG1hbmkgIQ"),
    (Multibase.BASE64_URL_PAD, "UeWVzIG1hbmkgIQ=="),
    (Multibase.BASE16, "f796573206d616e692021"),
    (Multibase.BASE16_UPPER, "F796573206D616E692021"),
]


@pytest.mark.parametrize("encoding, text", YES_MANI_VECTORS)
def test_to_text(encoding, text):
    assert multibase.to_text(YES_MANI, encoding) == text


@pytest.mark.parametrize("encoding, text", YES_MANI_VECTORS)
def test_from_text(encoding, text):
    assert multibase.from_text(text) == (YES_MANI, encoding)


def test_prefix_characters():
    prefixes = {encoding: encoding.prefix for encoding in Multibase}
    assert prefixes == {
        Multibase.BASE58BTC: "z",
        Multibase.BASE32: "b",
        Multibase.BASE32_UPPER: "B",
        Multibase.BASE64: "m",
        Multibase.BASE64_URL: "u",
        Multibase.BASE64_URL_PAD: "U",
        Multibase.BASE16: "f",
        Multibase.BASE16_UPPER: "F",
    }


def test_names():
    assert Multibase.from_name("base32upper") is Multibase.BASE32_UPPER
    assert str(Multibase.BASE64_URL_PAD) == "base64urlpad"
    with pytest.raises(UnsupportedEncodingError, match="unknown multibase encoding"):
        Multibase.from_name("base36")


def test_empty_text():
    with pytest.raises(EmptyInputError):
        multibase.from_text("")


def test_unknown_prefix():
    with pytest.raises(UnsupportedMultibasePrefixError) as excinfo:
        multibase.from_text("kabc")
    assert excinfo.value.prefix == "k"


def test_prefix_only_is_empty_payload():
    assert multibase.from_text("b") == (b"", Multibase.BASE32)


@pytest.mark.parametrize(
    "text",
    [
        "zO0Il",  # not in the base58 alphabet
        "z7paNL19xttacUY ",  # trailing whitespace
        "z 7paNL19xttacUY",  # leading whitespace
        "b1",  # digits 0, 1, 8, 9 are not base32
        "bPFSXGIDN",  # base32 is lowercase
        "Bpfsxgidn",  # base32upper is uppercase
        "bpfsxgidnm",  # impossible base32 length
        "meWVz-G1h",  # url alphabet in standard base64
        "ueWVz+G1h",  # standard alphabet in url base64
        "UeWVzIG1hbmkgIQ",  # padded variant without its padding
        "meWVzI",  # impossible base64 length
        "f7965732",  # odd length
        "f79657G",  # not hex
        "F796573206d",  # lowercase in base16upper
    ],
)
def test_invalid_payload(text):
    with pytest.raises(BaseDecodeError):
        multibase.from_text(text)


def test_base_decode_error_keeps_cause():
    with pytest.raises(BaseDecodeError) as excinfo:
        multibase.from_text("f123")
    assert excinfo.value.encoding == "base16"
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert isinstance(excinfo.value, ParseError)
