"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

Based on dup_mails.pl, Copyright (c) 2016 Kurt Kanzenbach <kurt@kmk-computers.de>
Redistributed under the BSD 2-clause license, see LICENSE

hasher.py
Pluggable hash algorithms used to fingerprint message bodies.
"""

import hashlib
import xxhash
from dupmails.core.interfaces import HashAlgorithm


class Sha1AlgorithmImpl(HashAlgorithm):
    """160-bit SHA-1, the default body fingerprint."""
    @staticmethod
    def hash(data: bytes) -> bytes:
        return hashlib.sha1(data).digest()


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    """Non-cryptographic 128-bit xxHash3, faster on big mailboxes."""
    @staticmethod
    def hash(data: bytes) -> bytes:
        return xxhash.xxh3_128(data).digest()


HASH_ALGORITHMS = {
    "sha1": Sha1AlgorithmImpl,
    "xxh128": XXHashAlgorithmImpl,
}

DEFAULT_HASH_ALGORITHM = "sha1"


def get_hash_algorithm(name: str = DEFAULT_HASH_ALGORITHM) -> HashAlgorithm:
    try:
        return HASH_ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unknown hash algorithm: '{name}'") from None
