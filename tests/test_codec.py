import hashlib

import pytest

from algotree.codec import (
    address_length,
    address_to_public_key,
    is_valid_address,
    pack_bits,
    phrase_to_private_key,
    private_key_to_phrase,
    public_key_to_address,
    unpack_bits,
)
from algotree.errors import ChecksumMismatch, InvalidKeyLength, MalformedAddress, MalformedPhrase

ZERO_PHRASE = " ".join(["abandon"] * 24 + ["invest"])
ZERO_ADDRESS = "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAY5HFKQ"

# a handful of unrelated 32-byte values
SAMPLE_KEYS = [
    bytes(range(32)),
    b"\xff" * 32,
    hashlib.sha256(b"algotree").digest(),
    hashlib.sha256(b"account 4").digest(),
]


def test_pack_bits_is_little_endian():
    assert pack_bits(b"\xff\x07") == [2047, 0]
    assert pack_bits(b"\x01") == [1]
    assert unpack_bits([2047, 0]) == b"\xff\x07\x00"


def test_zero_key_phrase():
    assert private_key_to_phrase(bytes(32)) == ZERO_PHRASE
    assert phrase_to_private_key(ZERO_PHRASE) == bytes(32)


@pytest.mark.parametrize("key", SAMPLE_KEYS)
def test_phrase_round_trip(key):
    phrase = private_key_to_phrase(key)
    assert len(phrase.split()) == 25
    assert phrase_to_private_key(phrase) == key


def test_phrase_is_case_and_whitespace_tolerant():
    messy = "  " + ZERO_PHRASE.upper().replace(" ", "\n ", 3) + "\t"
    assert phrase_to_private_key(messy) == bytes(32)


@pytest.mark.parametrize("count", [0, 12, 24, 26])
def test_phrase_wrong_word_count(count):
    with pytest.raises(MalformedPhrase):
        phrase_to_private_key(" ".join(["abandon"] * count))


def test_phrase_unknown_word():
    words = ZERO_PHRASE.split()
    words[3] = "abandonx"
    with pytest.raises(MalformedPhrase):
        phrase_to_private_key(" ".join(words))


def test_phrase_wrong_checksum_word():
    words = ZERO_PHRASE.split()
    words[-1] = "venue"
    with pytest.raises(ChecksumMismatch):
        phrase_to_private_key(" ".join(words))


def test_phrase_changed_data_word():
    words = ZERO_PHRASE.split()
    words[0] = "ability"
    with pytest.raises(ChecksumMismatch):
        phrase_to_private_key(" ".join(words))


def test_phrase_bits_past_key_length():
    # the 24th word only carries 3 bits of key; "zoo" sets the 8 padding bits
    words = ZERO_PHRASE.split()
    words[23] = "zoo"
    with pytest.raises(ChecksumMismatch):
        phrase_to_private_key(" ".join(words))


def test_phrase_rejects_wrong_key_length():
    with pytest.raises(InvalidKeyLength):
        private_key_to_phrase(bytes(31))


def test_zero_address():
    assert address_length() == 58
    assert public_key_to_address(bytes(32)) == ZERO_ADDRESS
    assert address_to_public_key(ZERO_ADDRESS) == bytes(32)


@pytest.mark.parametrize("key", SAMPLE_KEYS)
def test_address_round_trip(key):
    addr = public_key_to_address(key)
    assert len(addr) == 58
    assert "=" not in addr
    assert address_to_public_key(addr) == key


def test_address_changed_key_character():
    tampered = "B" + ZERO_ADDRESS[1:]
    with pytest.raises(ChecksumMismatch):
        address_to_public_key(tampered)
    assert not is_valid_address(tampered)


def test_address_changed_checksum_character():
    tampered = ZERO_ADDRESS[:-3] + "G" + ZERO_ADDRESS[-2:]
    with pytest.raises(ChecksumMismatch):
        address_to_public_key(tampered)


def test_address_non_canonical_tail():
    # 'R' differs from 'Q' only in the two unused trailing bits
    with pytest.raises(MalformedAddress):
        address_to_public_key(ZERO_ADDRESS[:-1] + "R")


@pytest.mark.parametrize("addr", [
    "",
    ZERO_ADDRESS[:-1],
    ZERO_ADDRESS + "A",
    ZERO_ADDRESS.lower(),
    "1" + ZERO_ADDRESS[1:],
    "Ä" + ZERO_ADDRESS[1:],
])
def test_address_malformed(addr):
    with pytest.raises(MalformedAddress):
        address_to_public_key(addr)
    assert not is_valid_address(addr)


def test_address_rejects_wrong_key_length():
    with pytest.raises(InvalidKeyLength):
        public_key_to_address(bytes(33))
