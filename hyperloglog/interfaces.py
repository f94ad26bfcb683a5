from typing_extensions import Protocol


class Digest(Protocol):
    def digest(self) -> bytes:
        ...


# hashlib.md5, hashlib.sha1, xxhash.xxh64 ... all fit
class HashAlgorithm(Protocol):
    def __call__(self, data: bytes) -> Digest:
        ...
