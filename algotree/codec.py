# algotree/codec.py

import base64
import binascii
import hashlib
from functools import lru_cache
from typing import Dict, List, Tuple

from mnemonic import Mnemonic

from .errors import ChecksumMismatch, InvalidKeyLength, MalformedAddress, MalformedPhrase
from .params import ALGORAND, LedgerParams


# ---------- Word list ----------

@lru_cache(maxsize=None)
def _wordlist(language: str) -> Tuple[Tuple[str, ...], Dict[str, int]]:
    words = tuple(Mnemonic(language).wordlist)
    return words, {w: i for i, w in enumerate(words)}


def _digest(data: bytes, params: LedgerParams) -> bytes:
    return hashlib.new(params.checksum_hash, data).digest()


# ---------- 11-bit packing ----------

def pack_bits(data: bytes, to_bits: int = 11) -> List[int]:
    """
    Little-endian regrouping of bytes into ``to_bits``-wide integers. The
    low bits of data[0] become the low bits of the first group.
    """
    buffer = 0
    bits = 0
    mask = (1 << to_bits) - 1
    out: List[int] = []
    for b in data:
        buffer |= b << bits
        bits += 8
        while bits >= to_bits:
            out.append(buffer & mask)
            buffer >>= to_bits
            bits -= to_bits
    if bits:
        out.append(buffer & mask)
    return out


def unpack_bits(values: List[int], from_bits: int = 11) -> bytes:
    buffer = 0
    bits = 0
    out = bytearray()
    for v in values:
        buffer |= v << bits
        bits += from_bits
        while bits >= 8:
            out.append(buffer & 0xFF)
            buffer >>= 8
            bits -= 8
    if bits:
        out.append(buffer & 0xFF)
    return bytes(out)


# ---------- Recovery phrase ----------

def _checksum_word(key: bytes, params: LedgerParams) -> str:
    words, _ = _wordlist(params.wordlist_language)
    head = _digest(key, params)[:2]
    return words[pack_bits(head, params.phrase_word_bits)[0]]


def private_key_to_phrase(sk: bytes, params: LedgerParams = ALGORAND) -> str:
    """
    Encode a 32-byte private key as 24 data words plus one checksum word.

    Bit-compatible with Algorand wallets: the key is regrouped little-endian
    into 11-bit word indices and the checksum word comes from the first two
    bytes of SHA-512/256 over the key.
    """
    if len(sk) != params.key_length:
        raise InvalidKeyLength(f"private key must be {params.key_length} bytes, got {len(sk)}")

    words, _ = _wordlist(params.wordlist_language)
    phrase = [words[i] for i in pack_bits(sk, params.phrase_word_bits)]
    phrase.append(_checksum_word(sk, params))
    return " ".join(phrase)


def phrase_to_private_key(phrase: str, params: LedgerParams = ALGORAND) -> bytes:
    words = phrase.lower().split()
    if len(words) != params.phrase_length:
        raise MalformedPhrase(
            f"phrase must have {params.phrase_length} words, got {len(words)}"
        )

    _, index = _wordlist(params.wordlist_language)
    unknown = [w for w in words if w not in index]
    if unknown:
        raise MalformedPhrase(f"unknown word(s) in phrase: {', '.join(unknown)}")

    raw = unpack_bits([index[w] for w in words[:-1]], params.phrase_word_bits)
    sk, padding = raw[:params.key_length], raw[params.key_length:]
    if any(padding):
        raise ChecksumMismatch("phrase carries bits beyond the key length")
    if _checksum_word(sk, params) != words[-1]:
        raise ChecksumMismatch("phrase checksum word does not match")
    return sk


# ---------- Address ----------

def address_length(params: LedgerParams = ALGORAND) -> int:
    return -(-(params.key_length + params.address_checksum_length) * 8 // 5)


def public_key_to_address(pk: bytes, params: LedgerParams = ALGORAND) -> str:
    """
    base32(pk || last 4 bytes of SHA-512/256(pk)), padding stripped.
    """
    if len(pk) != params.key_length:
        raise InvalidKeyLength(f"public key must be {params.key_length} bytes, got {len(pk)}")
    checksum = _digest(pk, params)[-params.address_checksum_length:]
    return base64.b32encode(pk + checksum).decode("ascii").rstrip("=")


def address_to_public_key(addr: str, params: LedgerParams = ALGORAND) -> bytes:
    expected = address_length(params)
    if not isinstance(addr, str) or len(addr) != expected:
        raise MalformedAddress(f"address must be {expected} characters")

    try:
        decoded = base64.b32decode(addr + "=" * (-len(addr) % 8))
    except (binascii.Error, ValueError) as exc:
        raise MalformedAddress(f"address is not base32: {exc}") from None

    # trailing pad bits must be zero, or two strings would name one key
    if base64.b32encode(decoded).decode("ascii").rstrip("=") != addr:
        raise MalformedAddress("address is not canonically encoded")

    pk = decoded[:params.key_length]
    checksum = decoded[params.key_length:]
    if _digest(pk, params)[-params.address_checksum_length:] != checksum:
        raise ChecksumMismatch("address checksum does not match")
    return pk


def is_valid_address(addr: str, params: LedgerParams = ALGORAND) -> bool:
    try:
        address_to_public_key(addr, params)
    except (MalformedAddress, ChecksumMismatch):
        return False
    return True
