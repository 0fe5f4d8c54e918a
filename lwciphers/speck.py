"""Speck-128/128 block cipher on pairs of 64-bit words."""

from __future__ import annotations

ROUNDS = 32
MASK64 = (1 << 64) - 1


def _rotr(x: int, r: int) -> int:
    return ((x >> r) | (x << (64 - r))) & MASK64


def _rotl(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & MASK64


def _round(x: int, y: int, k: int) -> tuple[int, int]:
    x = ((_rotr(x, 8) + y) & MASK64) ^ k
    y = _rotl(y, 3) ^ x
    return x, y


def _unround(x: int, y: int, k: int) -> tuple[int, int]:
    y = _rotr(y ^ x, 3)
    x = _rotl(((x ^ k) - y) & MASK64, 8)
    return x, y


def _pair(values, what: str) -> tuple[int, int]:
    words = tuple(values)
    if len(words) != 2:
        raise ValueError(f"{what} must hold 2 words, got {len(words)}")
    for word in words:
        if isinstance(word, bool) or not isinstance(word, int) or not 0 <= word <= MASK64:
            raise ValueError(f"{what} words must be unsigned 64-bit integers: {word!r}")
    return words


def expand_key(key) -> list[int]:
    """Expand a two-word key into 2*ROUNDS words; round i uses index 2*i+1."""
    a, b = _pair(key, "key")
    subkeys = []
    for i in range(ROUNDS):
        subkeys += [b, a]
        b, a = _round(b, a, i)
    return subkeys


def _round_keys(key) -> list[int]:
    return expand_key(key)[1::2]


def encrypt(plaintext, key) -> tuple[int, int]:
    """Encrypt a two-word block; word 1 is x, word 0 is y."""
    y, x = _pair(plaintext, "plaintext")
    for k in _round_keys(key):
        x, y = _round(x, y, k)
    return y, x


def decrypt(ciphertext, key) -> tuple[int, int]:
    """Decrypt a two-word block produced by encrypt."""
    y, x = _pair(ciphertext, "ciphertext")
    for k in reversed(_round_keys(key)):
        x, y = _unround(x, y, k)
    return y, x