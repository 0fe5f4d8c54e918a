"""The Ascon permutation and a block-wise authenticated cipher built on it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

MASK64 = (1 << 64) - 1
STATE_WORDS = 5
KEY_WORDS = 2
INIT_ROUNDS = 12
BLOCK_ROUNDS = 6
MAX_ROUNDS = 12

_ROUND_CONSTANTS = (
    0xF0, 0xE1, 0xD2, 0xC3,
    0xB4, 0xA5, 0x96, 0x87,
    0x78, 0x69, 0x5A, 0x4B,
    0x3C, 0x2D, 0x1E, 0x0F,
)

_ROTATIONS = ((19, 28), (61, 39), (1, 6), (10, 17), (7, 41))


def _rotr(x: int, r: int) -> int:
    return ((x >> r) | (x << (64 - r))) & MASK64


def _words(values: Iterable[int], count: int | None, what: str) -> list[int]:
    """Validate a sequence of 64-bit words, optionally of a fixed length."""
    words = list(values)
    if count is not None and len(words) != count:
        raise ValueError(f"{what} must hold {count} words, got {len(words)}")
    for word in words:
        if isinstance(word, bool) or not isinstance(word, int) or not 0 <= word <= MASK64:
            raise ValueError(f"{what} words must be unsigned 64-bit integers: {word!r}")
    return words


def _round(state: list[int], constant: int) -> list[int]:
    x0, x1, x2, x3, x4 = state
    x2 ^= constant
    # substitution layer
    x0 ^= x4
    x4 ^= x3
    x2 ^= x1
    t0, t1, t2, t3, t4 = ~x0 & x1, ~x1 & x2, ~x2 & x3, ~x3 & x4, ~x4 & x0
    x0 ^= t1
    x1 ^= t2
    x2 ^= t3
    x3 ^= t4
    x4 ^= t0
    x1 ^= x0
    x0 ^= x4
    x3 ^= x2
    x2 = ~x2 & MASK64
    # linear diffusion layer
    return [
        x ^ _rotr(x, a) ^ _rotr(x, b)
        for x, (a, b) in zip((x0, x1, x2, x3, x4), _ROTATIONS)
    ]


def permutation(state, rounds):
    """Apply `rounds` rounds of the Ascon permutation and return the new state."""
    words = _words(state, STATE_WORDS, "state")
    if isinstance(rounds, bool) or not isinstance(rounds, int) or not 0 <= rounds <= MAX_ROUNDS:
        raise ValueError(f"rounds must be between 0 and {MAX_ROUNDS}, got {rounds!r}")
    for r in range(rounds):
        words = _round(words, _ROUND_CONSTANTS[MAX_ROUNDS - rounds + r])
    return words


@dataclass
class AsconState:
    """Five-word internal state driven through the cipher phases."""

    words: list[int] = field(default_factory=lambda: [0] * STATE_WORDS)

    def __post_init__(self) -> None:
        self.words = _words(self.words, STATE_WORDS, "state")

    def _permute(self, rounds: int) -> None:
        self.words = permutation(self.words, rounds)

    def initialize(self, key) -> None:
        """Run the 12-round permutation and inject the 128-bit key."""
        k0, k1 = _words(key, KEY_WORDS, "key")
        self._permute(INIT_ROUNDS)
        self.words[3] ^= k0
        self.words[4] ^= k1

    def absorb(self, associated_data) -> None:
        """Absorb associated data blocks, then apply domain separation."""
        for block in _words(associated_data, None, "associated data"):
            self.words[0] ^= block
            self._permute(BLOCK_ROUNDS)
        self.words[4] ^= 1

    def _duplex(self, blocks, what: str, encrypting: bool) -> list[int]:
        out = []
        for index, block in enumerate(_words(blocks, None, what)):
            if index:
                self._permute(BLOCK_ROUNDS)
            result = block ^ self.words[0]
            out.append(result)
            self.words[0] = result if encrypting else block
        return out

    def encrypt(self, plaintext) -> list[int]:
        """Encrypt 64-bit plaintext blocks and return the ciphertext blocks."""
        return self._duplex(plaintext, "plaintext", encrypting=True)

    def decrypt(self, ciphertext) -> list[int]:
        """Decrypt 64-bit ciphertext blocks and return the plaintext blocks."""
        return self._duplex(ciphertext, "ciphertext", encrypting=False)

    def finalize(self, key) -> None:
        """Inject the key, permute 12 rounds and inject it again for the tag."""
        k0, k1 = _words(key, KEY_WORDS, "key")
        self.words[1] ^= k0
        self.words[2] ^= k1
        self._permute(INIT_ROUNDS)
        self.words[3] ^= k0
        self.words[4] ^= k1

    def tag(self) -> bytes:
        """The 128-bit tag: state words 3 and 4, big-endian."""
        return self.words[3].to_bytes(8, "big") + self.words[4].to_bytes(8, "big")