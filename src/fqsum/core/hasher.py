"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements record digests using pluggable 128-bit hash algorithms.

The RecordHasher class turns canonical record bytes into a Digest whose low
64 bits feed the order-independent accumulator.
"""

import hashlib
from typing import Dict, Type

import xxhash
from fqsum.core.models import Digest, HashAlgorithmName
from fqsum.core.interfaces import HashAlgorithm


class MD5AlgorithmImpl(HashAlgorithm):
    """Default algorithm. Keeps checksums comparable with values produced by earlier releases."""
    @staticmethod
    def hash(data: bytes) -> bytes:
        return hashlib.md5(data).digest()


# Use the same way to implement and use any other 128-bit hashing algorithm
class XXH128AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hash(data: bytes) -> bytes:
        return xxhash.xxh3_128(data).digest()


ALGORITHMS: Dict[HashAlgorithmName, Type[HashAlgorithm]] = {
    HashAlgorithmName.MD5: MD5AlgorithmImpl,
    HashAlgorithmName.XXH128: XXH128AlgorithmImpl,
}


class RecordHasher:
    """
    A hasher that supports any 128-bit algorithm via the HashAlgorithm interface.
    Stateless: the same bytes always map to the same Digest.
    """

    def __init__(self, algorithm: HashAlgorithm = None):
        self.algorithm = algorithm or MD5AlgorithmImpl()

    @classmethod
    def for_name(cls, name: HashAlgorithmName) -> "RecordHasher":
        return cls(ALGORITHMS[name]())

    def digest(self, data: bytes) -> Digest:
        return Digest.from_bytes(self.algorithm.hash(data))
