"""
Strength tiers
==============
    64   CRC64    → DES-CBC       key  8B  iv  8B
    128  MD5      → AES-128-CBC   key 16B  iv 16B   (default)
    192  Tiger    → AES-192-CBC   key 24B  iv 16B
    256  SHA-256  → AES-256-CBC   key 32B  iv 16B
"""

from ..errors import InvalidConfiguration
from .base import DerivedKeys, KeyTier
from .tier64_crc64 import CRC64Tier
from .tier128_md5 import MD5Tier
from .tier192_tiger import TigerTier, reorder_tiger192
from .tier256_sha256 import SHA256Tier

TIERS = {
    64 : CRC64Tier,
    128: MD5Tier,
    192: TigerTier,
    256: SHA256Tier,
}

DEFAULT_BITS = 128


def get_tier(bits: int) -> type:
    """Look up the tier class for `bits`; anything outside the table is fatal."""
    if not isinstance(bits, int) or isinstance(bits, bool) or bits not in TIERS:
        raise InvalidConfiguration(
            "The key must be 8 bytes (64 bits), 16 bytes (128 bits), "
            f"24 bytes (192 bits) or 32 bytes (256 bits); got bits={bits!r}."
        )
    return TIERS[bits]


def derive(bits: int, secret: str = "", iv_secret: str = "") -> DerivedKeys:
    """Derive the (key, iv) pair for a tier from the two secrets."""
    return get_tier(bits).derive(secret, iv_secret)


__all__ = [
    "TIERS",
    "DEFAULT_BITS",
    "DerivedKeys",
    "KeyTier",
    "CRC64Tier",
    "MD5Tier",
    "TigerTier",
    "SHA256Tier",
    "get_tier",
    "derive",
    "reorder_tiger192",
]
