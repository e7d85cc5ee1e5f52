"""
Tier 256 — SHA-256 key, AES-256-CBC
===================================
Key: SHA-256(secret), raw 32 bytes. IV still follows the shared MD5 policy.
"""

import hashlib

from .base import KeyTier, to_utf8


class SHA256Tier(KeyTier):
    """256-bit tier."""

    BITS      = 256
    KEY_SIZE  = 32
    ALGORITHM = "aes-256-cbc"

    @classmethod
    def derive_key(cls, secret: str) -> bytes:
        return hashlib.sha256(to_utf8(secret, "secret")).digest()
