"""
Tier 128 — MD5 key, AES-128-CBC
===============================
Key: MD5(secret), raw 16 bytes. This is the default tier.
"""

import hashlib

from .base import KeyTier, to_utf8


class MD5Tier(KeyTier):
    """128-bit tier."""

    BITS      = 128
    KEY_SIZE  = 16
    ALGORITHM = "aes-128-cbc"

    @classmethod
    def derive_key(cls, secret: str) -> bytes:
        return hashlib.md5(to_utf8(secret, "secret")).digest()
