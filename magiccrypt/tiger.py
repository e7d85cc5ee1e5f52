"""
TIGER/192 — pure-Python digest
==============================
Ross Anderson & Eli Biham, 1995. 512-bit blocks, three 64-bit words of
state, 3 passes, original 0x01 message padding.

Neither hashlib nor the cryptography package ships Tiger, so the
compression function lives here. The four 256-entry S-boxes are not
stored as constants: they are regenerated from the published seed string
using the compression function itself (the procedure from the Tiger
reference code), once per process.

Output layouts:
    tiger192_3(data)  — standard layout, words little-endian (NESSIE "Tiger")
    tiger192(data)    — legacy mhash layout, words big-endian

    tiger192_3(b"")   = 3293ac630c13f0245f92bbb1766e16167a4e58492dde73f3
    tiger192(b"")     = 24f0130c63ac933216166e76b1bb925ff373de2d49584e7a
"""

import struct
from functools import lru_cache

MASK64 = 0xFFFFFFFFFFFFFFFF

DIGEST_SIZE = 24
BLOCK_SIZE  = 64

_IV = (0x0123456789ABCDEF, 0xFEDCBA9876543210, 0xF096A5B4C3B2E187)

_SBOX_SEED   = b"Tiger - A Fast New Hash Function, by Ross Anderson and Eli Biham"
_SBOX_PASSES = 5


# ── Compression function ─────────────────────────────────────────────────────

def _round(a, b, c, x, mul, t):
    c ^= x
    a = (a - (t[c & 0xFF]
              ^ t[256 + ((c >> 16) & 0xFF)]
              ^ t[512 + ((c >> 32) & 0xFF)]
              ^ t[768 + ((c >> 48) & 0xFF)])) & MASK64
    b = (b + (t[768 + ((c >> 8) & 0xFF)]
              ^ t[512 + ((c >> 24) & 0xFF)]
              ^ t[256 + ((c >> 40) & 0xFF)]
              ^ t[(c >> 56) & 0xFF])) & MASK64
    b = (b * mul) & MASK64
    return a, b, c


def _pass(a, b, c, x, mul, t):
    a, b, c = _round(a, b, c, x[0], mul, t)
    b, c, a = _round(b, c, a, x[1], mul, t)
    c, a, b = _round(c, a, b, x[2], mul, t)
    a, b, c = _round(a, b, c, x[3], mul, t)
    b, c, a = _round(b, c, a, x[4], mul, t)
    c, a, b = _round(c, a, b, x[5], mul, t)
    a, b, c = _round(a, b, c, x[6], mul, t)
    b, c, a = _round(b, c, a, x[7], mul, t)
    return a, b, c


def _key_schedule(x: list) -> None:
    x[0] = (x[0] - (x[7] ^ 0xA5A5A5A5A5A5A5A5)) & MASK64
    x[1] ^= x[0]
    x[2] = (x[2] + x[1]) & MASK64
    x[3] = (x[3] - (x[2] ^ (((x[1] ^ MASK64) << 19) & MASK64))) & MASK64
    x[4] ^= x[3]
    x[5] = (x[5] + x[4]) & MASK64
    x[6] = (x[6] - (x[5] ^ ((x[4] ^ MASK64) >> 23))) & MASK64
    x[7] ^= x[6]
    x[0] = (x[0] + x[7]) & MASK64
    x[1] = (x[1] - (x[0] ^ (((x[7] ^ MASK64) << 19) & MASK64))) & MASK64
    x[2] ^= x[1]
    x[3] = (x[3] + x[2]) & MASK64
    x[4] = (x[4] - (x[3] ^ ((x[2] ^ MASK64) >> 23))) & MASK64
    x[5] ^= x[4]
    x[6] = (x[6] + x[5]) & MASK64
    x[7] = (x[7] - (x[6] ^ 0x0123456789ABCDEF)) & MASK64


def _compress(block, state, t):
    """One 64-byte block (as 8 little-endian words) into the state."""
    a, b, c = state
    x = list(block)
    a, b, c = _pass(a, b, c, x, 5, t)
    _key_schedule(x)
    c, a, b = _pass(c, a, b, x, 7, t)
    _key_schedule(x)
    b, c, a = _pass(b, c, a, x, 9, t)
    # feedforward
    return a ^ state[0], (b - state[1]) & MASK64, (c + state[2]) & MASK64


# ── S-boxes ──────────────────────────────────────────────────────────────────

@lru_cache(maxsize=1)
def sboxes() -> tuple:
    """
    The 4×256 S-box words (t1 ‖ t2 ‖ t3 ‖ t4), generated from the seed.

    Every byte column of every box starts as the identity permutation and
    is shuffled with bytes of a running state; the state is advanced by
    compressing the seed block with the boxes built so far.
    """
    table = [(i & 0xFF) * 0x0101010101010101 for i in range(1024)]
    seed  = struct.unpack("<8Q", _SBOX_SEED)
    state = _IV
    abc   = 2
    for _ in range(_SBOX_PASSES):
        for i in range(256):
            for sb in range(0, 1024, 256):
                abc += 1
                if abc == 3:
                    abc = 0
                    state = _compress(seed, state, table)
                for col in range(8):
                    shift = col * 8
                    mask  = 0xFF << shift
                    j = sb + i
                    k = sb + ((state[abc] >> shift) & 0xFF)
                    tmp = table[j] & mask
                    table[j] = (table[j] & ~mask) | (table[k] & mask)
                    table[k] = (table[k] & ~mask) | tmp
    return tuple(table)


# ── Digest ───────────────────────────────────────────────────────────────────

def _digest_words(data: bytes) -> tuple:
    t = sboxes()
    length = len(data)
    padded = (bytes(data) + b"\x01"
              + b"\x00" * ((55 - length) % BLOCK_SIZE)
              + struct.pack("<Q", (length * 8) & MASK64))
    state = _IV
    for offset in range(0, len(padded), BLOCK_SIZE):
        state = _compress(struct.unpack_from("<8Q", padded, offset), state, t)
    return state


def tiger192(data: bytes) -> bytes:
    """24-byte Tiger digest, legacy mhash layout (each word big-endian)."""
    return struct.pack(">3Q", *_digest_words(data))


def tiger192_3(data: bytes) -> bytes:
    """24-byte Tiger digest, standard layout (each word little-endian)."""
    return struct.pack("<3Q", *_digest_words(data))
