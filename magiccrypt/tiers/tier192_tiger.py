"""
Tier 192 — Tiger192,3 key, AES-192-CBC
======================================
The key is the "tiger192,3" form of the Tiger digest: the legacy mhash
"tiger192" output with each of its three 8-byte words byte-reversed.

    raw  = 24f0130c63ac9332 16166e76b1bb925f f373de2d49584e7a   (tiger192 of "")
    key  = 3293ac630c13f024 5f92bbb1766e1616 7a4e58492dde73f3   (tiger192,3 of "")

The IV stays 16 bytes (MD5 policy), which is the AES block size; only the
key is 24 bytes.
"""

from ..tiger import DIGEST_SIZE, tiger192
from .base import KeyTier, to_utf8

WORD_SIZE = 8


def reorder_tiger192(raw: bytes) -> bytes:
    """
    Reverse the bytes inside each 8-byte group of a 24-byte digest.
    Groups keep their order. Applying it twice returns the input.
    """
    if len(raw) != DIGEST_SIZE:
        raise ValueError(f"Tiger/192 digest must be {DIGEST_SIZE} bytes, got {len(raw)}.")
    return b"".join(raw[i:i + WORD_SIZE][::-1] for i in range(0, DIGEST_SIZE, WORD_SIZE))


class TigerTier(KeyTier):
    """192-bit tier."""

    BITS      = 192
    KEY_SIZE  = 24
    ALGORITHM = "aes-192-cbc"

    @classmethod
    def derive_key(cls, secret: str) -> bytes:
        return reorder_tiger192(tiger192(to_utf8(secret, "secret")))
