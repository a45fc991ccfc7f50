"""
Simple string hash functions.

A hash function used to place keys into buckets has to be deterministic
(the same key always gives the same value), cheap (one pass over the key,
O(1) extra space) and spread its outputs close to uniformly. Every variant
here reduces its result with a large prime modulus: if keys form an
arithmetic progression whose step shares a factor with the modulus, the
outputs collapse onto a small set of residues, and a large prime shares no
factor with any plausible step.

Characters are mapped by Unicode code point, one accumulation step per
character. "é" contributes 233, not the two UTF-8 bytes 0xC3 0xA9.

The additive and XOR variants ignore character order, so anagrams always
collide. That weakness is the point of including them.
"""
from typing import Callable, Dict, List

HASH_MODULUS = 1_000_000_007

# Signed 64-bit register emulation for the rotating hash.
_INT64_MASK = 0xFFFFFFFFFFFFFFFF
_INT64_SIGN = 0x8000000000000000


def _to_int64(value: int) -> int:
    """Wrap an integer to two's-complement signed 64-bit."""
    value &= _INT64_MASK
    if value & _INT64_SIGN:
        value -= 1 << 64
    return value


def hash_additive(key: str) -> int:
    """Additive hash: sum of code points."""
    hash_val = 0
    for char in key:
        hash_val = (hash_val + ord(char)) % HASH_MODULUS
    return hash_val


def hash_multiplicative(key: str) -> int:
    """Multiplicative hash with multiplier 31."""
    hash_val = 0
    for char in key:
        hash_val = (31 * hash_val + ord(char)) % HASH_MODULUS
    return hash_val


def hash_xor(key: str) -> int:
    """XOR hash.

    The final step is a bitwise AND with HASH_MODULUS rather than a modulo,
    unlike the other three variants. The result is still deterministic but
    can only contain bits that are set in the modulus.
    """
    hash_val = 0
    for char in key:
        hash_val ^= ord(char)
    return hash_val & HASH_MODULUS


def hash_rotating(key: str) -> int:
    """Rotating hash on a signed 64-bit accumulator."""
    hash_val = 0
    for char in key:
        hash_val = _to_int64((hash_val << 4) ^ (hash_val >> 28) ^ ord(char))
    # Floored modulo keeps negative registers in [0, HASH_MODULUS).
    return hash_val % HASH_MODULUS


ALL_HASH_FUNCTIONS: List[Callable[[str], int]] = [
    hash_additive,
    hash_multiplicative,
    hash_xor,
    hash_rotating
]

HASH_FUNCTIONS_BY_NAME: Dict[str, Callable[[str], int]] = {
    'additive': hash_additive,
    'multiplicative': hash_multiplicative,
    'xor': hash_xor,
    'rotating': hash_rotating,
}

COMMUTATIVE_HASH_FUNCTIONS = [hash_additive, hash_xor]
