# algotree/core.py

import binascii
import hashlib
import hmac
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from nacl import signing

from .errors import (
    IndexOutOfRange,
    InvalidKeyLength,
    InvalidNodeError,
    InvalidPathError,
    InvalidSeedLength,
    MissingPrivateKey,
)
from .params import ALGORAND, LedgerParams

log = logging.getLogger(__name__)

PathLike = Union[str, Sequence[int]]

_HARDENED_MARKERS = ("'", "h", "H")


# ---------- Node ----------

@dataclass(frozen=True)
class Node:
    """
    One point in the derivation tree.

    The pair (private_key, chain_code) is all a node is: rebuilding a Node
    from those two fields anywhere reproduces every descendant bit for bit.
    """

    private_key: Optional[bytes] = field(repr=False)
    chain_code: bytes

    def __post_init__(self):
        if self.private_key is not None and len(self.private_key) != 32:
            raise InvalidNodeError(
                f"node private key must be 32 bytes, got {len(self.private_key)}"
            )
        if len(self.chain_code) != 32:
            raise InvalidNodeError(
                f"node chain code must be 32 bytes, got {len(self.chain_code)}"
            )

    def to_hex(self) -> Tuple[Optional[str], str]:
        sk_hex = self.private_key.hex() if self.private_key is not None else None
        return sk_hex, self.chain_code.hex()

    @classmethod
    def from_hex(cls, private_key_hex: Optional[str], chain_code_hex: str) -> "Node":
        """
        Re-hydrate an exported node, e.g. one handed out by ``algotree account``.
        """
        try:
            sk = binascii.unhexlify(private_key_hex) if private_key_hex else None
            cc = binascii.unhexlify(chain_code_hex)
        except (binascii.Error, ValueError) as exc:
            raise InvalidNodeError(f"node fields must be hex: {exc}") from None
        return cls(private_key=sk, chain_code=cc)


# ---------- Paths ----------

def parse_path(path: str, params: LedgerParams = ALGORAND) -> List[int]:
    """
    Parse "m/44'/283'/4'" into [44, 283, 4].

    Every segment must carry a hardened marker; ed25519 has no
    non-hardened children, so an unmarked segment is rejected rather than
    silently hardened.
    """
    parts = path.strip().split("/")
    if parts[0] != "m":
        raise InvalidPathError(f"path must start with 'm': {path!r}")

    indices: List[int] = []
    for part in parts[1:]:
        if not part or part[-1] not in _HARDENED_MARKERS:
            raise InvalidPathError(
                f"segment {part!r} in {path!r} is not hardened"
            )
        digits = part[:-1]
        if not digits.isdigit():
            raise InvalidPathError(f"segment {part!r} in {path!r} is not a number")
        index = int(digits)
        if index >= params.hardened_bit:
            raise InvalidPathError(f"segment {part!r} in {path!r} must be below 2^31")
        indices.append(index)
    return indices


def format_path(path: Sequence[int]) -> str:
    return "/".join(["m"] + [f"{i}'" for i in path])


def account_path(account_index: int, params: LedgerParams = ALGORAND) -> List[int]:
    return [params.purpose, params.coin_type, account_index]


# ---------- Derivation ----------

def _hmac_sha512_split(key: bytes, data: bytes) -> Tuple[bytes, bytes]:
    digest = hmac.new(key, data, hashlib.sha512).digest()
    return digest[:32], digest[32:]


def master_node(seed: bytes, params: LedgerParams = ALGORAND) -> Node:
    """
    Build the root node: HMAC-SHA512 keyed by the curve's domain string,
    left half private key, right half chain code.
    """
    if len(seed) != params.seed_length:
        raise InvalidSeedLength(
            f"seed must be {params.seed_length} bytes, got {len(seed)}"
        )
    sk, cc = _hmac_sha512_split(params.seed_key, seed)
    return Node(private_key=sk, chain_code=cc)


def _hardened_index(index: int, params: LedgerParams) -> int:
    if not isinstance(index, int) or isinstance(index, bool):
        raise IndexOutOfRange(f"index must be an int, got {type(index).__name__}")
    if index < 0 or index >= params.hardened_bit:
        raise IndexOutOfRange(f"index {index} outside [0, 2^31)")
    return index | params.hardened_bit


def derive_child(parent: Node, index: int, params: LedgerParams = ALGORAND) -> Node:
    """
    Hardened child derivation. Callers pass indices in [0, 2^31); the
    hardened bit is always set in the hashed index, never by the caller.
    """
    hardened = _hardened_index(index, params)
    if parent.private_key is None:
        raise MissingPrivateKey("hardened derivation needs the parent private key")

    data = b"\x00" + parent.private_key + hardened.to_bytes(4, "big")
    sk, cc = _hmac_sha512_split(parent.chain_code, data)
    return Node(private_key=sk, chain_code=cc)


def derive_path(root: Node, path: PathLike, params: LedgerParams = ALGORAND) -> Node:
    indices = parse_path(path, params) if isinstance(path, str) else list(path)
    log.debug("deriving path of depth %d", len(indices))

    node = root
    for index in indices:
        node = derive_child(node, index, params)
    return node


def account_node(master: Node, account_index: int, params: LedgerParams = ALGORAND) -> Node:
    """
    Account level node m/44'/coin'/account'. Export this one (via to_hex)
    to let another context derive addresses without the root seed.
    """
    return derive_path(master, account_path(account_index, params), params)


# ---------- Curve oracle ----------

def public_key(private_key: bytes) -> bytes:
    """
    Ed25519 public key for a 32-byte private key (the RFC 8032 seed).
    """
    if len(private_key) != 32:
        raise InvalidKeyLength(f"private key must be 32 bytes, got {len(private_key)}")
    return signing.SigningKey(private_key).verify_key.encode()
