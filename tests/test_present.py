import pytest

from lwciphers.present import (
    decrypt,
    encrypt,
    generate_subkeys,
    hex_to_int,
    int_to_hex,
)

PLAINTEXT_HEX = "0123456789abcdef"
KEY_HEX = "abcdef0123456789abc0"

REFERENCE_VECTORS = [
    ("0000000000000000", "00000000000000000000", "5579c1387b228445"),
    ("0000000000000000", "ffffffffffffffffffff", "e72c46c0f5945049"),
    ("ffffffffffffffff", "00000000000000000000", "a112ffc72f68417b"),
    ("ffffffffffffffff", "ffffffffffffffffffff", "3333dcd3213210d2"),
]


@pytest.mark.parametrize("plaintext, key, ciphertext", REFERENCE_VECTORS)
def test_reference_encrypt(plaintext, key, ciphertext):
    assert encrypt(plaintext, key) == ciphertext


@pytest.mark.parametrize("plaintext, key, ciphertext", REFERENCE_VECTORS)
def test_reference_decrypt(plaintext, key, ciphertext):
    assert decrypt(ciphertext, key) == plaintext


def test_source_workload_round_trip():
    ciphertext = encrypt(PLAINTEXT_HEX, KEY_HEX)
    assert len(ciphertext) == 16
    assert ciphertext == ciphertext.lower()
    assert ciphertext != PLAINTEXT_HEX
    assert decrypt(ciphertext, KEY_HEX) == PLAINTEXT_HEX


def test_hex_conversions():
    assert hex_to_int("0123456789abcdef") == 0x0123456789ABCDEF
    assert int_to_hex(0x0123456789ABCDEF) == "0123456789abcdef"
    assert int_to_hex(1) == "0000000000000001"


def test_subkeys_start_with_key_high_bits():
    subkeys = generate_subkeys(KEY_HEX)
    assert len(subkeys) == 32
    assert subkeys[0] == 0xABCDEF0123456789


@pytest.mark.parametrize("text", ["0123", "0123456789abcdefg"[:16].replace("f", "g"), "0x23456789abcdef"])
def test_hex_to_int_rejects_malformed(text):
    with pytest.raises(ValueError):
        hex_to_int(text)


def test_int_to_hex_rejects_out_of_range():
    with pytest.raises(ValueError):
        int_to_hex(1 << 64)


def test_encrypt_rejects_short_key():
    with pytest.raises(ValueError):
        encrypt(PLAINTEXT_HEX, "abcdef0123456789")