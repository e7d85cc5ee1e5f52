"""
Shared tier contract
====================
A tier fixes everything a session needs besides the secrets themselves:
key length, IV length, cipher block size and the algorithm name. Tier
classes are never instantiated; they are a closed set of constant
carriers with classmethod derivation.

IV policy for every AES tier: MD5(iv_secret), or 16 zero bytes when no
IV secret is given. A zero IV is predictable and weakens CBC; it is kept
because existing ciphertexts depend on it.
"""

import hashlib
import logging
from typing import NamedTuple

from cryptography.hazmat.primitives.ciphers import algorithms

from ..errors import EncodingError

logger = logging.getLogger(__name__)


class DerivedKeys(NamedTuple):
    key: bytes
    iv:  bytes


def to_utf8(text: str, what: str = "text") -> bytes:
    """Encode `text` as UTF-8, raising EncodingError instead of leaking codec errors."""
    if not isinstance(text, str):
        raise EncodingError(f"{what} must be str, got {type(text).__name__}.")
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"{what} is not valid UTF-8: {e.reason}") from e


class KeyTier:
    """Base for the four strength tiers."""

    BITS       = 0
    KEY_SIZE   = 0
    IV_SIZE    = 16
    BLOCK_SIZE = 128          # cipher block, in bits (PKCS7 unit)
    ALGORITHM  = ""

    @classmethod
    def derive_key(cls, secret: str) -> bytes:
        """Map the secret to KEY_SIZE bytes. Every tier overrides this."""
        raise NotImplementedError

    @classmethod
    def derive_iv(cls, iv_secret: str) -> bytes:
        data = to_utf8(iv_secret, "IV secret")
        if not data:
            return bytes(cls.IV_SIZE)
        return hashlib.md5(data).digest()

    @classmethod
    def derive(cls, secret: str = "", iv_secret: str = "") -> DerivedKeys:
        key = cls.derive_key(secret)
        iv  = cls.derive_iv(iv_secret)
        if len(key) != cls.KEY_SIZE:
            raise ValueError(f"{cls.ALGORITHM} key must be {cls.KEY_SIZE} bytes, got {len(key)}.")
        if len(iv) != cls.IV_SIZE:
            raise ValueError(f"{cls.ALGORITHM} IV must be {cls.IV_SIZE} bytes, got {len(iv)}.")
        logger.debug(f"{cls.ALGORITHM}: derived key={len(key)}B iv={len(iv)}B "
                     f"(iv {'supplied' if iv_secret else 'zero-filled'})")
        return DerivedKeys(key, iv)

    @classmethod
    def cipher_algorithm(cls, key: bytes):
        """The block cipher primitive for this tier, keyed with `key`."""
        return algorithms.AES(key)
