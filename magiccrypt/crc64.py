"""
CRC64 — table-driven checksum
=============================
Polynomial 0x42F0E1EBA9EA3693, msb-first, initial value and final XOR
all-ones (the CRC-64/WE parameter set). Used as the key derivation
function of the 64-bit tier.

Check value: crc64(b"123456789") == 0x62EC59E3F1A4F00A
"""

import struct
from functools import lru_cache

POLY64REV = 0x42F0E1EBA9EA3693
MASK64    = 0xFFFFFFFFFFFFFFFF
TOP_BIT   = 1 << 63


@lru_cache(maxsize=1)
def crc64_table() -> tuple:
    """256-entry lookup table. Built once, immutable afterwards."""
    table = []
    for i in range(256):
        v = i
        for _ in range(64):
            if v & TOP_BIT:
                v = ((v << 1) ^ POLY64REV) & MASK64
            else:
                v = (v << 1) & MASK64
        table.append(v)
    return tuple(table)


def crc64(data: bytes, *, init: int = MASK64) -> int:
    """Return the CRC64 of `data` as an unsigned 64-bit integer."""
    table = crc64_table()
    crc = init & MASK64
    for b in data:
        idx = ((crc >> 56) ^ b) & 0xFF
        crc = ((crc << 8) & MASK64) ^ table[idx]
    return crc ^ MASK64


def checksum(data: bytes) -> bytes:
    """CRC64 of `data` as 8 big-endian bytes."""
    return struct.pack(">Q", crc64(data))
