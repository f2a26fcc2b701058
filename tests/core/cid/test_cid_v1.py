import pytest

from cidcodec.cid import (
    CIDv1,
    CIDWithMultibase,
    v1,
)
from cidcodec.exceptions import (
    EmptyInputError,
    HashLengthMismatchError,
    InsufficientBytesError,
    TrailingBytesError,
    TruncatedVarintError,
    UnknownCodecError,
    UnknownHashAlgorithmError,
    UnsupportedMultibasePrefixError,
    UnsupportedVersionError,
)
from cidcodec.io.reader import BytesReader
from cidcodec.multiformats import (
    HashAlgorithm,
    Multibase,
    Multicodec,
)

EMPTY_V1_BASE32 = "bafybeihdwdcefgh4dqkjv67uzcmw7ojee6xedzdetojuzjevtenxquvyku"

# dag-cbor block, cross-checked against libipld
DAG_CBOR_BYTES = (
    b"\x01q\x12 \xb6\x81\x1a\x1d\x7f\x8c\x17\x91\xdam\x1bO\x13m\xc0\xe2&y"
    b"\xea\xfe\xaaX\xd6M~/\xaa\xd5\x89\x0e\x9d\x9c"
)
DAG_CBOR_BASE32 = "bafyreifwqenb274mc6i5u3i3j4jw3qhcez46v7vkldle27rpvlkysdu5tq"


class TestEncode:
    def test_to_bytes(self, cid_v1, empty_digest):
        assert v1.to_bytes(cid_v1) == b"\x01\x70\x12\x20" + empty_digest

    def test_to_text_defaults_to_base32(self, cid_v1):
        assert v1.to_text(cid_v1) == EMPTY_V1_BASE32

    def test_to_text_base32_upper(self, cid_v1):
        assert v1.to_text(cid_v1, Multibase.BASE32_UPPER) == EMPTY_V1_BASE32.upper()

    def test_to_text_base16(self, cid_v1, empty_digest):
        assert v1.to_text(cid_v1, Multibase.BASE16) == (
            "f01701220" + empty_digest.hex()
        )
        assert v1.to_text(cid_v1, Multibase.BASE16_UPPER) == (
            "F01701220" + empty_digest.hex().upper()
        )

    def test_multibyte_codec_and_hash_codes(self, empty_digest):
        cid = CIDv1(
            codec=Multicodec.DAG_JSON,
            hash_algorithm=HashAlgorithm.BLAKE2B_256,
            digest=empty_digest,
        )
        assert v1.to_bytes(cid) == b"\x01\xa9\x02\xa0\xe4\x02\x20" + empty_digest

    def test_sha2_512(self):
        cid = CIDv1(
            codec=Multicodec.RAW,
            hash_algorithm=HashAlgorithm.SHA2_512,
            digest=b"\xab" * 64,
        )
        assert v1.to_bytes(cid) == b"\x01\x55\x13\x40" + b"\xab" * 64

    def test_digest_length_mismatch(self, empty_digest):
        cid = CIDv1(
            codec=Multicodec.RAW,
            hash_algorithm=HashAlgorithm.SHA2_512,
            digest=empty_digest,
        )
        with pytest.raises(HashLengthMismatchError) as excinfo:
            v1.to_bytes(cid)
        assert excinfo.value.expected == 64
        assert excinfo.value.actual == 32

        with pytest.raises(HashLengthMismatchError):
            v1.to_text(cid)


class TestDecode:
    def test_from_bytes(self, cid_v1, empty_digest):
        assert v1.from_bytes(b"\x01\x70\x12\x20" + empty_digest) == cid_v1

    def test_from_text(self, cid_v1):
        assert v1.from_text(EMPTY_V1_BASE32) == CIDWithMultibase(
            cid_v1, Multibase.BASE32
        )

    def test_dag_cbor_vector(self):
        cid = v1.from_bytes(DAG_CBOR_BYTES)
        assert cid.codec is Multicodec.DAG_CBOR
        assert cid.hash_algorithm is HashAlgorithm.SHA2_256
        assert v1.to_text(cid) == DAG_CBOR_BASE32
        assert v1.from_text(DAG_CBOR_BASE32).cid == cid

    def test_canonical_reencoding(self, empty_digest):
        for data in [
            DAG_CBOR_BYTES,
            b"\x01\xa9\x02\xa0\xe4\x02\x20" + empty_digest,
            b"\x01\x55\x13\x40" + b"\x00" * 64,
        ]:
            assert v1.to_bytes(v1.from_bytes(data)) == data

    @pytest.mark.parametrize("encoding", list(Multibase))
    def test_text_keeps_multibase(self, cid_v1, encoding):
        text = v1.to_text(cid_v1, encoding)
        assert text[0] == encoding.prefix
        decoded = v1.from_text(text)
        assert decoded.cid == cid_v1
        assert decoded.multibase is encoding

    def test_unsupported_version(self, empty_digest):
        with pytest.raises(UnsupportedVersionError) as excinfo:
            v1.from_bytes(b"\x02\x70\x12\x20" + empty_digest)
        assert excinfo.value.version == 2

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            v1.from_bytes(b"")

    def test_unknown_codec(self, empty_digest):
        with pytest.raises(UnknownCodecError) as excinfo:
            v1.from_bytes(b"\x01\x50\x12\x20" + empty_digest)
        assert excinfo.value.code == 0x50

    def test_unknown_hash_algorithm(self, empty_digest):
        with pytest.raises(UnknownHashAlgorithmError) as excinfo:
            v1.from_bytes(b"\x01\x55\x14\x20" + empty_digest)
        assert excinfo.value.code == 0x14

    def test_declared_length_disagrees_with_algorithm(self):
        with pytest.raises(HashLengthMismatchError) as excinfo:
            v1.from_bytes(b"\x01\x70\x12\x10" + b"\x00" * 16)
        assert excinfo.value.expected == 32
        assert excinfo.value.actual == 16

    def test_digest_shorter_than_declared(self):
        with pytest.raises(InsufficientBytesError) as excinfo:
            v1.from_bytes(bytes.fromhex("0155122001020304"))
        assert excinfo.value.needed == 32
        assert excinfo.value.available == 4

    @pytest.mark.parametrize(
        "data",
        [
            b"\x01",
            b"\x01\xa9",
            b"\x01\x55",
            b"\x01\x55\xa0\xe4",
            b"\x01\x55\x12",
        ],
    )
    def test_truncated_header(self, data):
        with pytest.raises(TruncatedVarintError):
            v1.from_bytes(data)

    def test_trailing_bytes_in_buffer(self, empty_digest):
        with pytest.raises(TrailingBytesError) as excinfo:
            v1.from_bytes(b"\x01\x70\x12\x20" + empty_digest + b"\x00\x00")
        assert excinfo.value.count == 2

    def test_reader_is_left_after_cid(self, cid_v1, empty_digest):
        reader = BytesReader(b"\x01\x70\x12\x20" + empty_digest + b"\x99")
        assert v1.from_bytes(reader) == cid_v1
        assert reader.peek() == 0x99

    def test_text_with_unknown_prefix(self):
        with pytest.raises(UnsupportedMultibasePrefixError):
            v1.from_text("xafybei")
