# algotree/__init__.py

from .core import (
    Node,
    master_node,
    derive_child,
    derive_path,
    account_node,
    parse_path,
    format_path,
    public_key,
)
from .codec import (
    private_key_to_phrase,
    phrase_to_private_key,
    public_key_to_address,
    address_to_public_key,
    is_valid_address,
)
from .accounts import (
    AccountIdentity,
    resolve_identity,
    resolve_range,
    identity_from_phrase,
    identical,
)
from .params import ALGORAND, LedgerParams, get_params

__all__ = [
    "Node",
    "master_node",
    "derive_child",
    "derive_path",
    "account_node",
    "parse_path",
    "format_path",
    "public_key",
    "private_key_to_phrase",
    "phrase_to_private_key",
    "public_key_to_address",
    "address_to_public_key",
    "is_valid_address",
    "AccountIdentity",
    "resolve_identity",
    "resolve_range",
    "identity_from_phrase",
    "identical",
    "ALGORAND",
    "LedgerParams",
    "get_params",
]
