"""
Tier 64 — CRC64 key, DES-CBC
============================
Key and IV are the 8-byte big-endian CRC64 of the UTF-8 secret.

DES is built from cryptography's TripleDES keyed with the 8-byte key
repeated three times (K1 = K2 = K3). EDE with three equal keys collapses
to a single DES encryption, so the output is identical to des-cbc.

Key: 64 bits  |  IV: 64 bits  |  Block: 64 bits

Dependencies: cryptography >= 43 (TripleDES lives under hazmat.decrepit)
"""

from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES

from ..crc64 import checksum
from .base import KeyTier, to_utf8


class CRC64Tier(KeyTier):
    """64-bit tier: CRC64-derived key and IV for DES-CBC."""

    BITS       = 64
    KEY_SIZE   = 8
    IV_SIZE    = 8
    BLOCK_SIZE = 64
    ALGORITHM  = "des-cbc"

    @classmethod
    def derive_key(cls, secret: str) -> bytes:
        return checksum(to_utf8(secret, "secret"))

    @classmethod
    def derive_iv(cls, iv_secret: str) -> bytes:
        data = to_utf8(iv_secret, "IV secret")
        if not data:
            return bytes(cls.IV_SIZE)
        return checksum(data)

    @classmethod
    def cipher_algorithm(cls, key: bytes):
        return TripleDES(key * 3)
