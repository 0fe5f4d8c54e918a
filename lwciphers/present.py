"""PRESENT block cipher with an 80-bit key, on hex-string blocks."""

from __future__ import annotations

ROUNDS = 31
BLOCK_HEX_DIGITS = 16
KEY_HEX_DIGITS = 20
MASK64 = (1 << 64) - 1

_SBOX = (0xC, 0x5, 0x6, 0xB, 0x9, 0x0, 0xA, 0xD, 0x3, 0xE, 0xF, 0x8, 0x4, 0x7, 0x1, 0x2)
_INV_SBOX = (0x5, 0xE, 0xF, 0x8, 0xC, 0x1, 0x2, 0xD, 0xB, 0x4, 0x6, 0x3, 0x0, 0x7, 0x9, 0xA)
_PERMUTATION = (
    0, 16, 32, 48, 1, 17, 33, 49, 2, 18, 34, 50, 3, 19, 35, 51,
    4, 20, 36, 52, 5, 21, 37, 53, 6, 22, 38, 54, 7, 23, 39, 55,
    8, 24, 40, 56, 9, 25, 41, 57, 10, 26, 42, 58, 11, 27, 43, 59,
    12, 28, 44, 60, 13, 29, 45, 61, 14, 30, 46, 62, 15, 31, 47, 63,
)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _parse_hex(text: str, digits: int, what: str) -> int:
    if not isinstance(text, str) or len(text) != digits or not set(text) <= _HEX_DIGITS:
        raise ValueError(f"{what} must be exactly {digits} hex digits: {text!r}")
    return int(text, 16)


def hex_to_int(text) -> int:
    """Parse a 16-digit hex string into a 64-bit integer."""
    return _parse_hex(text, BLOCK_HEX_DIGITS, "block")


def int_to_hex(block) -> str:
    """Format a 64-bit integer as 16 lowercase hex digits."""
    if isinstance(block, bool) or not isinstance(block, int) or not 0 <= block <= MASK64:
        raise ValueError(f"block must be an unsigned 64-bit integer: {block!r}")
    return f"{block:016x}"


def _substitute(state: int, table: tuple[int, ...]) -> int:
    result = 0
    for shift in range(60, -4, -4):
        result = (result << 4) | table[(state >> shift) & 0xF]
    return result


def _permute(state: int) -> int:
    result = 0
    for source, target in enumerate(_PERMUTATION):
        result |= ((state >> (63 - source)) & 1) << (63 - target)
    return result


def _inverse_permute(state: int) -> int:
    result = 0
    for target in _PERMUTATION:
        result = (result << 1) | ((state >> (63 - target)) & 1)
    return result


def generate_subkeys(key_hex) -> list[int]:
    """Derive the 32 round keys from a 20-digit (80-bit) hex key."""
    key = _parse_hex(key_hex, KEY_HEX_DIGITS, "key")
    high, low = key >> 16, key & 0xFFFF
    subkeys = [high]
    for counter in range(1, ROUNDS + 1):
        # rotate the 80-bit register left by 61
        high, low = ((high << 61) | (low << 45) | (high >> 19)) & MASK64, (high >> 3) & 0xFFFF
        high = (high & 0x0FFFFFFFFFFFFFFF) | (_SBOX[high >> 60] << 60)
        low ^= (counter & 1) << 15
        high ^= counter >> 1
        subkeys.append(high)
    return subkeys


def encrypt(plaintext_hex, key_hex) -> str:
    """Encrypt one 16-digit hex block under a 20-digit hex key."""
    subkeys = generate_subkeys(key_hex)
    state = hex_to_int(plaintext_hex)
    for subkey in subkeys[:ROUNDS]:
        state = _permute(_substitute(state ^ subkey, _SBOX))
    return int_to_hex(state ^ subkeys[ROUNDS])


def decrypt(ciphertext_hex, key_hex) -> str:
    """Decrypt one 16-digit hex block under a 20-digit hex key."""
    subkeys = generate_subkeys(key_hex)
    state = hex_to_int(ciphertext_hex)
    for subkey in reversed(subkeys[1:]):
        state = _substitute(_inverse_permute(state ^ subkey), _INV_SBOX)
    return int_to_hex(state ^ subkeys[0])