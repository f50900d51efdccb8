"""Global configuration for primefield."""

import os

# ---------- secp256k1 (Bitcoin) ----------
# Base field prime p = 2^256 - 2^32 - 977 and the order n of the generator.
SECP256K1_P = 2**256 - 2**32 - 977
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# ---------- Mersenne primes ----------
MERSENNE_61 = 2**61 - 1
MERSENNE_127 = 2**127 - 1

# ---------- Largest prime below 2^bits ----------
# Lets a field be sized to a fixed-width unsigned integer type.
LARGEST_PRIMES_BY_WIDTH = {
    8: 2**8 - 5,  # 251
    16: 2**16 - 15,  # 65521
    32: 2**32 - 5,
    64: 2**64 - 59,
    128: 2**128 - 159,
    256: 2**256 - 189,
}

# ---------- Default prime ----------
# Env var PRIMEFIELD_DEFAULT_PRIME overrides it; decimal or 0x-prefixed hex.
_DEFAULT_PRIME_ENV = os.environ.get("PRIMEFIELD_DEFAULT_PRIME", "")
DEFAULT_PRIME = int(_DEFAULT_PRIME_ENV, 0) if _DEFAULT_PRIME_ENV else SECP256K1_P

# ---------- Demo ----------
LOG_LEVEL = os.environ.get("PRIMEFIELD_LOG_LEVEL", "WARNING").upper()
