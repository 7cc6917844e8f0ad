"""
Stable reference API for algotree test vectors.

Hex in, hex out: this wraps the node/codec objects into the flat surface
that the vector generator and tests depend on, so the vector file stays
readable from other languages.
"""

from typing import Any, Dict, List, Optional

from algotree.accounts import resolve_range
from algotree.codec import public_key_to_address, private_key_to_phrase
from algotree.core import Node, account_node, derive_path, master_node, public_key


def _node_dict(node: Node) -> Dict[str, Optional[str]]:
    sk_hex, cc_hex = node.to_hex()
    return {"sk_hex": sk_hex, "chain_code_hex": cc_hex}


def seed_to_master(seed_hex: str) -> Dict[str, Optional[str]]:
    return _node_dict(master_node(bytes.fromhex(seed_hex)))


def derive(sk_hex: str, chain_code_hex: str, path: str) -> Dict[str, Optional[str]]:
    """
    Derive ``path`` starting from a node given only by its two hex fields.
    """
    return _node_dict(derive_path(Node.from_hex(sk_hex, chain_code_hex), path))


def sk_to_pk(sk_hex: str) -> str:
    return public_key(bytes.fromhex(sk_hex)).hex()


def encode_phrase(key_hex: str) -> str:
    return private_key_to_phrase(bytes.fromhex(key_hex))


def encode_address(pk_hex: str) -> str:
    return public_key_to_address(bytes.fromhex(pk_hex))


def account_vector(seed_hex: str, account: int, count: int) -> Dict[str, Any]:
    """
    Master node, exported account node and the first ``count`` addresses
    for one seed.
    """
    master = master_node(bytes.fromhex(seed_hex))
    node = account_node(master, account)
    addresses: List[str] = [i.address for i in resolve_range(node, count)]
    return {
        "master": _node_dict(master),
        "account_node": _node_dict(node),
        "addresses": addresses,
    }
