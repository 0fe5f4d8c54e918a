"""AES-128 with ECB, CBC-style and CTR-style buffer operations."""

from __future__ import annotations

BLOCK_SIZE = 16
KEY_SIZE = 16
ROUNDS = 10
EXPANDED_KEY_SIZE = BLOCK_SIZE * (ROUNDS + 1)

_SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

_RCON = (0x8D, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80, 0x1B, 0x36)

_KEY_WORDS = KEY_SIZE // 4
_TOTAL_WORDS = EXPANDED_KEY_SIZE // 4


def _as_bytes(data, what: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes-like, got {type(data).__name__}")
    return bytes(data)


def _exact(data, size: int, what: str) -> bytes:
    data = _as_bytes(data, what)
    if len(data) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(data)}")
    return data


def expand_key(key) -> bytes:
    """Expand a 16-byte key into the 176-byte schedule of 11 round keys."""
    key = _exact(key, KEY_SIZE, "key")
    words = [list(key[i:i + 4]) for i in range(0, KEY_SIZE, 4)]
    for i in range(_KEY_WORDS, _TOTAL_WORDS):
        temp = list(words[-1])
        if i % _KEY_WORDS == 0:
            temp = [_SBOX[b] for b in temp[1:] + temp[:1]]
            temp[0] ^= _RCON[i // _KEY_WORDS]
        words.append([a ^ b for a, b in zip(words[i - _KEY_WORDS], temp)])
    return bytes(b for word in words for b in word)


def _xtime(x: int) -> int:
    return ((x << 1) ^ (0x1B if x & 0x80 else 0)) & 0xFF


def _add_round_key(rows: list[list[int]], round_keys: bytes, rnd: int) -> list[list[int]]:
    key = round_keys[rnd * BLOCK_SIZE:(rnd + 1) * BLOCK_SIZE]
    return [[v ^ key[4 * c + r] for c, v in enumerate(row)] for r, row in enumerate(rows)]


def _sub_bytes(rows: list[list[int]]) -> list[list[int]]:
    return [[_SBOX[v] for v in row] for row in rows]


def _shift_rows(rows: list[list[int]]) -> list[list[int]]:
    return [row[r:] + row[:r] for r, row in enumerate(rows)]


def _mix_columns(rows: list[list[int]]) -> list[list[int]]:
    columns = []
    for a0, a1, a2, a3 in zip(*rows):
        t = a0 ^ a1 ^ a2 ^ a3
        columns.append((
            a0 ^ _xtime(a0 ^ a1) ^ t,
            a1 ^ _xtime(a1 ^ a2) ^ t,
            a2 ^ _xtime(a2 ^ a3) ^ t,
            a3 ^ _xtime(a3 ^ a0) ^ t,
        ))
    return [list(row) for row in zip(*columns)]


def _cipher(block: bytes, round_keys: bytes) -> bytes:
    # The 16 bytes are laid out row by row: byte 4*r + c sits at row r, column c.
    rows = [list(block[4 * r:4 * r + 4]) for r in range(4)]
    rows = _add_round_key(rows, round_keys, 0)
    for rnd in range(1, ROUNDS):
        rows = _mix_columns(_shift_rows(_sub_bytes(rows)))
        rows = _add_round_key(rows, round_keys, rnd)
    rows = _shift_rows(_sub_bytes(rows))
    rows = _add_round_key(rows, round_keys, ROUNDS)
    return bytes(v for row in rows for v in row)


def _increment(counter: bytes) -> bytes:
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * BLOCK_SIZE))
    return value.to_bytes(BLOCK_SIZE, "big")


class AES:
    """An AES-128 context: the expanded key and a 16-byte IV."""

    def __init__(self, key, iv=None):
        self.round_keys = expand_key(key)
        self.iv = bytes(BLOCK_SIZE)
        if iv is not None:
            self.set_iv(iv)

    def set_iv(self, iv) -> None:
        """Replace the IV with a new 16-byte value."""
        self.iv = _exact(iv, BLOCK_SIZE, "iv")

    def ecb_encrypt(self, block) -> bytes:
        """Encrypt exactly one 16-byte block."""
        return _cipher(_exact(block, BLOCK_SIZE, "block"), self.round_keys)

    def cbc_encrypt(self, data) -> bytes:
        """Chain each block with the previous chained block, starting from the IV.

        The IV is left holding the last chained block.
        """
        data = _as_bytes(data, "data")
        if len(data) % BLOCK_SIZE:
            raise ValueError(f"data length must be a multiple of {BLOCK_SIZE}, got {len(data)}")
        previous = self.iv
        out = bytearray()
        for start in range(0, len(data), BLOCK_SIZE):
            previous = bytes(a ^ b for a, b in zip(data[start:start + BLOCK_SIZE], previous))
            out += previous
        self.iv = previous
        return bytes(out)

    def ctr_xcrypt(self, data) -> bytes:
        """Counter-mode pass over the buffer, advancing the IV once per 16 bytes.

        At every 16-byte boundary the leading block of the buffer is encrypted
        in place and the current counter is taken as the next keystream block.
        """
        buf = bytearray(_as_bytes(data, "data"))
        keystream = self.iv
        for i in range(len(buf)):
            if i % BLOCK_SIZE == 0:
                keystream = self.iv
                head_len = min(BLOCK_SIZE, len(buf))
                head = bytes(buf[:head_len]).ljust(BLOCK_SIZE, b"\0")
                buf[:head_len] = _cipher(head, self.round_keys)[:head_len]
                self.iv = _increment(self.iv)
            buf[i] ^= keystream[i % BLOCK_SIZE]
        return bytes(buf)