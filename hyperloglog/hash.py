import struct

import xxhash

from hyperloglog.interfaces import HashAlgorithm

_uint64 = struct.Struct("<Q")


def hash_bytes(algorithm: HashAlgorithm, data: bytes) -> int:
    """
    Generate a 64 bits hash value from the first 8 digest bytes, little-endian.

    :param algorithm: hashlib style constructor, such as hashlib.sha1.
    :param data: bytes to hash.
    """
    digest = algorithm(data).digest()
    # struct.error if digest is shorter than 8 bytes
    return _uint64.unpack_from(digest)[0]


def hash_string(key: str) -> int:
    """
    64 bits xxhash of a text key, ready for HyperLogLog.add.
    """
    return xxhash.xxh64_intdigest(key.encode())
