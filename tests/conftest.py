import pytest

from cidcodec.cid import (
    CIDv0,
    CIDv1,
)
from cidcodec.multiformats import (
    HashAlgorithm,
    Multicodec,
)

# sha2-256 of the empty byte string
EMPTY_SHA256_HEX = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.fixture
def empty_digest():
    return bytes.fromhex(EMPTY_SHA256_HEX)


@pytest.fixture
def cid_v0(empty_digest):
    return CIDv0(empty_digest)


@pytest.fixture
def cid_v1(empty_digest):
    return CIDv1(
        codec=Multicodec.DAG_PB,
        hash_algorithm=HashAlgorithm.SHA2_256,
        digest=empty_digest,
    )
