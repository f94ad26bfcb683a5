import hashlib
import struct

import pytest
import xxhash

from hyperloglog import hash_bytes, hash_string

VALUE = 0x2D51AF5C52FDE6B4


def test_hash_md5():
    data = VALUE.to_bytes(8, "little")
    assert hash_bytes(hashlib.md5, data) == 16663394367412432550


def test_hash_sha1():
    data = VALUE.to_bytes(8, "little")
    assert hash_bytes(hashlib.sha1, data) == 17851087020509344997


def test_hash_first_eight_bytes():
    data = b"foo:bar:1"
    digest = hashlib.sha256(data).digest()
    assert hash_bytes(hashlib.sha256, data) == int.from_bytes(digest[:8], "little")


def test_hash_deterministic():
    for i in range(100):
        data = f"foo:bar:{i}".encode()
        h = hash_bytes(hashlib.sha1, data)
        assert h == hash_bytes(hashlib.sha1, data)
        assert 0 <= h < 2**64
        assert h != hash_bytes(hashlib.md5, data)


def test_hash_xxhash():
    data = b"foo:bar"
    expected = int.from_bytes(xxhash.xxh64(data).digest(), "little")
    assert hash_bytes(xxhash.xxh64, data) == expected


def test_hash_empty():
    assert hash_bytes(hashlib.md5, b"") == int.from_bytes(
        hashlib.md5(b"").digest()[:8], "little"
    )


class ShortDigest:
    def __init__(self, data: bytes):
        self.data = data

    def digest(self) -> bytes:
        return self.data[:4]


class Broken:
    def __init__(self, data: bytes):
        raise RuntimeError("digest failed")


def test_hash_short_digest():
    with pytest.raises(struct.error):
        hash_bytes(ShortDigest, b"12345678")


def test_hash_error_propagates():
    with pytest.raises(RuntimeError, match="digest failed"):
        hash_bytes(Broken, b"12345678")


def test_hash_string():
    assert hash_string("foo:bar:1") == xxhash.xxh64_intdigest("foo:bar:1")
    assert hash_string("foo:bar:1") != hash_string("foo:bar:2")
