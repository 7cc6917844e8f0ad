# algotree/params.py

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class LedgerParams:
    """
    Constant set for one ledger/curve pairing.

    Everything the derivation engine and the identity codec would otherwise
    hard code lives here, so another Ed25519 ledger can reuse both by passing
    its own instance.
    """

    name: str
    seed_key: bytes
    seed_length: int = 64
    hardened_bit: int = 0x80000000
    purpose: int = 44
    coin_type: int = 0
    wordlist_language: str = "english"
    phrase_word_bits: int = 11
    key_length: int = 32
    address_checksum_length: int = 4
    checksum_hash: str = "sha512_256"

    @property
    def phrase_data_words(self) -> int:
        # 32 bytes -> 24 words of 11 bits, the last one only partly used
        return -(-self.key_length * 8 // self.phrase_word_bits)

    @property
    def phrase_length(self) -> int:
        return self.phrase_data_words + 1


ALGORAND = LedgerParams(
    name="algorand",
    seed_key=b"ed25519 seed",
    coin_type=283,
)

_REGISTRY: Dict[str, LedgerParams] = {
    ALGORAND.name: ALGORAND,
}


def get_params(name: str) -> LedgerParams:
    """Look up a registered constant set, e.g. ``get_params("algorand")``."""
    return _REGISTRY[name.lower()]
