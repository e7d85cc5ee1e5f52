"""
magiccrypt — passphrase-keyed CBC encryption
============================================
Derives a fixed-size key and IV from a passphrase and a strength tier,
then encrypts text or binary payloads in CBC mode with base64 output.

Tiers:
    64   CRC64 key          DES-CBC
    128  MD5 key            AES-128-CBC   (default)
    192  Tiger192,3 key     AES-192-CBC
    256  SHA-256 key        AES-256-CBC

No authentication, no key stretching: this is a compatibility layer for
ciphertexts produced by the same scheme, not a modern envelope format.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors     import MagicCryptError, InvalidConfiguration, DecryptionError, EncodingError
from .crc64      import crc64, checksum
from .tiger      import tiger192, tiger192_3
from .tiers      import TIERS, DerivedKeys, get_tier, derive, reorder_tiger192
from .cipher     import MagicCrypt

__all__ = [
    "MagicCrypt",
    "derive",
    "get_tier",
    "TIERS",
    "DerivedKeys",
    "crc64",
    "checksum",
    "tiger192",
    "tiger192_3",
    "reorder_tiger192",
    "MagicCryptError",
    "InvalidConfiguration",
    "DecryptionError",
    "EncodingError",
]
