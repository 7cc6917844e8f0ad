# algotree/seed.py

from mnemonic import Mnemonic

# BIP-39 entropy widths this project hands out: 12 or 24 words
STRENGTHS = (128, 256)


def generate_words(strength: int = 256, language: str = "english") -> str:
    """
    Generate new root recovery words.
    MUST be run offline for real usage.
    """
    if strength not in STRENGTHS:
        raise ValueError(f"strength must be one of {STRENGTHS}, got {strength}")
    return Mnemonic(language).generate(strength=strength)


def words_to_seed(words: str, passphrase: str = "") -> bytes:
    """
    BIP-39 seed stretching (PBKDF2-HMAC-SHA512, 2048 rounds), 64 bytes.

    The words are not checked against the BIP-39 checksum here; callers
    that care use words_are_valid first.
    """
    return Mnemonic.to_seed(words, passphrase=passphrase)


def words_are_valid(words: str, language: str = "english") -> bool:
    return Mnemonic(language).check(words)
