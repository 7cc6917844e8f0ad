# algotree/accounts.py

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, Sequence

from .codec import phrase_to_private_key, private_key_to_phrase, public_key_to_address
from .core import Node, derive_child, public_key
from .errors import AlgoTreeError, AccountRangeError, MissingPrivateKey
from .params import ALGORAND, LedgerParams

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountIdentity:
    """
    Everything a wallet needs for one derived address.

    A pure view over a node: two identities built from the same key are equal.
    """

    index: int
    address: str
    public_key: bytes
    phrase: str = field(repr=False)
    private_key: bytes = field(repr=False)

    def as_dict(self, show_secrets: bool = False) -> Dict:
        out = {
            "index": self.index,
            "address": self.address,
            "pk_hex": self.public_key.hex(),
        }
        if show_secrets:
            out["sk_hex"] = self.private_key.hex()
            out["phrase"] = self.phrase
        return out


def resolve_identity(node: Node, index: int, params: LedgerParams = ALGORAND) -> AccountIdentity:
    if node.private_key is None:
        raise MissingPrivateKey(f"node for index {index} carries no private key")

    return _identity_for_key(node.private_key, index, params)


def _identity_for_key(sk: bytes, index: int, params: LedgerParams) -> AccountIdentity:
    pk = public_key(sk)
    return AccountIdentity(
        index=index,
        address=public_key_to_address(pk, params),
        public_key=pk,
        phrase=private_key_to_phrase(sk, params),
        private_key=sk,
    )


def resolve_range(
    account_node: Node,
    count: int,
    params: LedgerParams = ALGORAND,
    start: int = 0,
) -> Iterator[AccountIdentity]:
    """
    Yield identities for child indices start .. start+count-1 in order.

    Each call returns a fresh generator. The first index that cannot be
    resolved stops the sequence with AccountRangeError naming that index.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")

    for index in range(start, start + count):
        try:
            child = derive_child(account_node, index, params)
            identity = resolve_identity(child, index, params)
        except AlgoTreeError as exc:
            raise AccountRangeError(index, exc) from exc
        log.debug("resolved index %d -> %s", index, identity.address)
        yield identity


def identity_from_phrase(phrase: str, params: LedgerParams = ALGORAND) -> AccountIdentity:
    """
    Rebuild an identity from a 25-word phrase alone. Its position in the tree
    is unknown, so index is -1.
    """
    sk = phrase_to_private_key(phrase, params)
    return _identity_for_key(sk, -1, params)


def identical(seq_a: Sequence[AccountIdentity], seq_b: Sequence[AccountIdentity]) -> bool:
    """
    True when both sequences hold the same addresses in the same order.
    """
    a = list(seq_a)
    b = list(seq_b)
    if len(a) != len(b):
        return False
    return all(x.address == y.address for x, y in zip(a, b))
