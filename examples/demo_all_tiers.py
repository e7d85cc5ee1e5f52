"""
magiccrypt — Live Demo: All Four Tiers
======================================
Run:  python examples/demo_all_tiers.py

Encrypts and decrypts the same message with every strength tier and
prints the derived key/IV sizes, ciphertext and timing for each.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from magiccrypt import MagicCrypt, DecryptionError, InvalidConfiguration

LINE   = "═" * 70
MSG    = "Passphrase in, base64 out — MagicCrypt."
SECRET = "magickey"
IV     = "magiciv"

def header(bits, name):
    print(f"\n{LINE}")
    print(f"  Tier {bits} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{LINE}")
    print("  magiccrypt — Four-Tier Demo")
    print(LINE)
    print(f"  Message: {MSG}\n")

    for bits, name in [(64, "CRC64 key / DES-CBC"),
                       (128, "MD5 key / AES-128-CBC"),
                       (192, "Tiger192,3 key / AES-192-CBC"),
                       (256, "SHA-256 key / AES-256-CBC")]:
        header(bits, name)
        t0 = time.perf_counter()
        mc = MagicCrypt(SECRET, bits, IV)
        ct = mc.encrypt(MSG)
        pt = mc.decrypt(ct)
        elapsed = time.perf_counter() - t0
        ok("Algorithm",  mc.algorithm)
        ok("Key / IV",   f"{len(mc.key)} / {len(mc.iv)} bytes")
        ok("Ciphertext", ct[:48] + ("..." if len(ct) > 48 else ""))
        ok("Round-trip", f"{elapsed*1000:.2f} ms")
        ok("Decrypted",  pt)
        assert pt == MSG

    header("!", "Failure modes")
    ct = MagicCrypt("hello").encrypt("Test")
    try:
        MagicCrypt("hellp").decrypt(ct)
    except DecryptionError as e:
        ok("Wrong passphrase", f"DecryptionError ({e})")
    try:
        MagicCrypt("hello", 100)
    except InvalidConfiguration:
        ok("Unsupported tier", "InvalidConfiguration")

    print(f"\n{LINE}")
    print("  All tiers: PASSED")
    print(f"{LINE}\n")
