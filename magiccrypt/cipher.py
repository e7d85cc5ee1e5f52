"""
MagicCrypt session — CBC encryption with derived key/IV
=======================================================
One session = (tier, key, iv). Key and IV are derived once, at
construction, and never change; every call builds a fresh cipher context
so a session can be shared between threads.

    mc = MagicCrypt("magickey", 256)
    ct = mc.encrypt("Hello")          # base64 text
    mc.decrypt(ct)                    # "Hello"

Padding: PKCS7 at the cipher's block size (64 bits for DES, 128 for AES).
Text is UTF-8 on the way in and out; ciphertext is standard, padded base64.

There is no authentication tag. A wrong key is detected only through
invalid padding or invalid UTF-8, which catches almost all mismatches but
is not a substitute for AEAD (see AESGCM for that).

Dependencies: cryptography >= 43
"""

import base64
import binascii
import logging
from typing import Union

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from .errors import DecryptionError
from .tiers import DEFAULT_BITS, get_tier
from .tiers.base import to_utf8

logger = logging.getLogger(__name__)


class MagicCrypt:
    """Symmetric CBC session keyed from a passphrase and a strength tier."""

    def __init__(self, secret: str = "", bits: int = DEFAULT_BITS, iv: str = ""):
        """
        secret: passphrase the key is derived from (default empty).
        bits:   64, 128, 192 or 256. Anything else raises InvalidConfiguration.
        iv:     optional IV passphrase. Empty means an all-zero IV, which is
                predictable and not recommended.
        """
        self._tier = get_tier(bits)
        self._key, self._iv = self._tier.derive(secret, iv)
        if not iv:
            logger.debug(f"{self._tier.ALGORITHM}: no IV secret, using zero IV")
        logger.info(f"MagicCrypt session {self._tier.ALGORITHM} | bits={self._tier.BITS}")

    # ── session properties ────────────────────────────────────────────────

    @property
    def bits(self) -> int:
        return self._tier.BITS

    @property
    def algorithm(self) -> str:
        return self._tier.ALGORITHM

    @property
    def key(self) -> bytes:
        return self._key

    @property
    def iv(self) -> bytes:
        return self._iv

    def _cipher(self) -> Cipher:
        return Cipher(self._tier.cipher_algorithm(self._key), modes.CBC(self._iv))

    # ── encryption ────────────────────────────────────────────────────────

    def encrypt(self, text: str) -> str:
        """Encrypt a UTF-8 string. Returns base64 text."""
        return self.encrypt_binary(to_utf8(text, "plaintext"))

    def encrypt_binary(self, data: bytes) -> str:
        """Encrypt raw bytes. Returns base64 text."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"data must be bytes-like, got {type(data).__name__}.")
        padder = padding.PKCS7(self._tier.BLOCK_SIZE).padder()
        padded = padder.update(bytes(data)) + padder.finalize()
        encryptor = self._cipher().encryptor()
        ct = encryptor.update(padded) + encryptor.finalize()
        logger.debug(f"Encrypt: pt={len(data)}B ct={len(ct)}B")
        return base64.b64encode(ct).decode("ascii")

    # ── decryption ────────────────────────────────────────────────────────

    def decrypt(self, data_b64: Union[str, bytes]) -> str:
        """Decrypt base64 ciphertext back to a string."""
        plaintext = self.decrypt_binary(data_b64)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionError("Decrypted data is not valid UTF-8 (wrong key or IV?).") from e

    def decrypt_binary(self, data_b64: Union[str, bytes]) -> bytes:
        """
        Decrypt base64 ciphertext back to bytes.
        Raises DecryptionError on malformed base64, truncated or corrupt
        ciphertext and bad padding.
        """
        try:
            ct = base64.b64decode(data_b64, validate=True)
        except (binascii.Error, ValueError, TypeError) as e:
            raise DecryptionError("Ciphertext is not valid base64.") from e

        block_bytes = self._tier.BLOCK_SIZE // 8
        if not ct or len(ct) % block_bytes:
            raise DecryptionError(
                f"Ciphertext length {len(ct)}B is not a positive multiple of "
                f"the {block_bytes}-byte block size."
            )

        decryptor = self._cipher().decryptor()
        padded = decryptor.update(ct) + decryptor.finalize()
        unpadder = padding.PKCS7(self._tier.BLOCK_SIZE).unpadder()
        try:
            pt = unpadder.update(padded) + unpadder.finalize()
        except ValueError as e:
            raise DecryptionError("Bad padding (wrong key or IV, or corrupt data).") from e
        logger.debug(f"Decrypt: ct={len(ct)}B pt={len(pt)}B")
        return pt

    def __repr__(self):
        return f"MagicCrypt({self._tier.ALGORITHM}, bits={self._tier.BITS})"
