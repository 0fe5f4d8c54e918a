import pytest

from lwciphers.ascon import AsconState, permutation

KEY = (0x0123456789ABCDEF, 0xFEDCBA9876543210)
PLAINTEXT = [0x0123456789ABCDEF]


def _encrypt(plaintext, key=KEY, associated_data=None):
    state = AsconState()
    state.initialize(key)
    if associated_data is not None:
        state.absorb(associated_data)
    ciphertext = state.encrypt(plaintext)
    state.finalize(key)
    return ciphertext, state


def _decrypt(ciphertext, key=KEY, associated_data=None):
    state = AsconState()
    state.initialize(key)
    if associated_data is not None:
        state.absorb(associated_data)
    plaintext = state.decrypt(ciphertext)
    state.finalize(key)
    return plaintext, state


def test_source_workload_round_trip():
    ciphertext, enc_state = _encrypt(PLAINTEXT)
    plaintext, dec_state = _decrypt(ciphertext)
    assert plaintext == PLAINTEXT
    assert enc_state.tag() == dec_state.tag()
    assert enc_state.words == dec_state.words


def test_first_block_is_xor_with_initialized_word():
    state = AsconState()
    state.initialize(KEY)
    keystream = state.words[0]
    ciphertext = state.encrypt(PLAINTEXT)
    assert ciphertext == [PLAINTEXT[0] ^ keystream]
    assert state.words[0] == ciphertext[0]


def test_multi_block_round_trip_with_associated_data():
    blocks = [1, 2, 3, 0xFFFFFFFFFFFFFFFF]
    ad = [0xAAAA, 0x5555]
    ciphertext, enc_state = _encrypt(blocks, associated_data=ad)
    plaintext, dec_state = _decrypt(ciphertext, associated_data=ad)
    assert plaintext == blocks
    assert enc_state.tag() == dec_state.tag()


def test_tampered_ciphertext_changes_tag():
    ciphertext, enc_state = _encrypt([5, 6])
    tampered = [ciphertext[0] ^ 1, ciphertext[1]]
    _, dec_state = _decrypt(tampered)
    assert dec_state.tag() != enc_state.tag()
    assert len(dec_state.tag()) == 16


def test_tag_is_words_three_and_four():
    state = AsconState([0, 0, 0, 0x0102030405060708, 0x1112131415161718])
    assert state.tag() == bytes.fromhex("01020304050607081112131415161718")


def test_absorb_empty_sets_domain_separator_only():
    state = AsconState()
    state.absorb([])
    assert state.words == [0, 0, 0, 0, 1]


def test_encrypt_empty_returns_empty_and_keeps_state():
    state = AsconState([1, 2, 3, 4, 5])
    assert state.encrypt([]) == []
    assert state.words == [1, 2, 3, 4, 5]


def test_permutation_zero_rounds_is_identity():
    assert permutation([1, 2, 3, 4, 5], 0) == [1, 2, 3, 4, 5]


def test_permutation_does_not_mutate_input():
    state = [1, 2, 3, 4, 5]
    result = permutation(state, 6)
    assert state == [1, 2, 3, 4, 5]
    assert result != state
    assert all(0 <= word < 1 << 64 for word in result)


def test_permutation_distinguishes_inputs():
    outputs = {tuple(permutation([i, 0, 0, 0, 0], 12)) for i in range(32)}
    assert len(outputs) == 32


def test_permutation_is_deterministic():
    first = permutation([9, 8, 7, 6, 5], 12)
    second = permutation([9, 8, 7, 6, 5], 12)
    assert len(first) == 5
    assert first == second
    assert first != permutation([9, 8, 7, 6, 5], 6)


@pytest.mark.parametrize("rounds", [-1, 13, 20])
def test_permutation_rejects_bad_round_counts(rounds):
    with pytest.raises(ValueError):
        permutation([0] * 5, rounds)


def test_state_requires_five_words():
    with pytest.raises(ValueError):
        AsconState([0, 0, 0, 0])


def test_key_must_have_two_words():
    with pytest.raises(ValueError):
        AsconState().initialize([1, 2, 3])


def test_words_must_fit_in_64_bits():
    with pytest.raises(ValueError):
        AsconState().encrypt([1 << 64])