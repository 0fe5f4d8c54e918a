# lwciphers

Small, dependency-free Python implementations of a few lightweight block
ciphers, for experiments, teaching and cross-checking other implementations.
They are not constant-time and are not meant to protect real data.

## Modules

- `lwciphers.ascon`: an Ascon-style sponge over a five-word, 64-bit state.
  `permutation(state, rounds)` applies up to 12 rounds of the permutation and
  returns the new five words. `AsconState` holds the state (five zero words by
  default) and has `initialize(key)`, `absorb(associated_data)`,
  `encrypt(plaintext)`, `decrypt(ciphertext)`, `finalize(key)` and `tag()`.
  Keys are two 64-bit words; data is a sequence of 64-bit words; `tag()`
  returns state words 3 and 4 as 16 big-endian bytes.
- `lwciphers.speck`: SPECK-128/128 with 32 rounds. `expand_key(key)` returns
  the 64 schedule words; `encrypt(plaintext, key)` and
  `decrypt(ciphertext, key)` take and return pairs of 64-bit words.
- `lwciphers.present`: PRESENT with an 80-bit key over hex strings.
  `hex_to_int` parses a 16-digit hex block, `int_to_hex` formats a 64-bit
  integer as 16 lowercase hex digits, `generate_subkeys(key_hex)` returns the
  32 round keys for a 20-digit hex key, and `encrypt` / `decrypt` work on one
  16-digit hex block at a time.
- `lwciphers.aes`: AES-128. `expand_key(key)` returns the 176-byte key
  schedule. `AES(key, iv=None)` is a context holding the round keys and a
  16-byte IV (all zeros unless given); it has `set_iv`, `ecb_encrypt`,
  `cbc_encrypt` and `ctr_xcrypt`.

Malformed input (wrong word counts, values outside 64 bits, hex strings of the
wrong length, blocks or keys of the wrong size) raises `ValueError`; non-bytes
input to `lwciphers.aes` raises `TypeError`.

## Usage

### Ascon-style sponge

```python
from lwciphers.ascon import AsconState

key = (0x0123456789ABCDEF, 0xFEDCBA9876543210)

sender = AsconState()
sender.initialize(key)
ciphertext = sender.encrypt([0x0123456789ABCDEF])
sender.finalize(key)

receiver = AsconState()
receiver.initialize(key)
plaintext = receiver.decrypt(ciphertext)
receiver.finalize(key)

assert plaintext == [0x0123456789ABCDEF]
assert receiver.tag() == sender.tag()
```

Call `absorb(...)` after `initialize` on both sides to bind associated data.

### SPECK

```python
from lwciphers import speck

key = (0x0123456789ABCDEF, 0xFEDCBA9876543210)
ciphertext = speck.encrypt((0x1111111111111111, 0x2222222222222222), key)
assert speck.decrypt(ciphertext, key) == (0x1111111111111111, 0x2222222222222222)
```

### PRESENT

```python
from lwciphers import present

ciphertext = present.encrypt("0123456789abcdef", "abcdef0123456789abc0")
assert present.decrypt(ciphertext, "abcdef0123456789abc0") == "0123456789abcdef"
```

### AES-128

```python
from lwciphers.aes import AES

cipher = AES(bytes(range(16)))
ciphertext = cipher.ecb_encrypt(bytes(range(0x20, 0x30)))
```

## Behaviour to be aware of

- `AES.cbc_encrypt(data)` XORs each 16-byte block with the previous chained
  block (starting from the IV) and returns the chained blocks; it does not run
  the block cipher on them. The IV is left holding the last chained block.
  The data length must be a multiple of 16.
- `AES.ctr_xcrypt(data)` XORs each byte with the current counter value and
  advances the IV once per 16 bytes; at each 16-byte boundary it also
  encrypts the leading block of the buffer in place. It is its own inverse
  only when started from the same IV on the same buffer layout, not in the
  usual counter-mode sense.
- The Ascon-style sponge has no initialisation vector; the state starts from
  whatever words `AsconState` was created with.

## What this package does not do

- There is no AES decryption: neither single-block ECB decryption nor CBC
  decryption is provided.
- `AsconState` produces a tag but does not verify one; compare tags yourself.
- There is no padding: Ascon and SPECK work on whole 64-bit words, PRESENT on
  whole 64-bit blocks, and AES ECB on whole 16-byte blocks.
- There is no command-line tool and no benchmark or energy-measurement
  harness; the package is a library only.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```