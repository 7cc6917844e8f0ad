#!/usr/bin/env python3
"""

Algorand HD account tree / walkthrough

Thin wrapper around the algotree library:
- Root words generation
- Account node export (m/44'/283'/N')
- Address derivation from the root
- Address derivation again from the exported node alone

Root operations MUST be run offline for real usage.
Prints private key material. Test code only.


"""

import argparse
import sys

from algotree import (
    Node,
    account_node,
    identical,
    master_node,
    resolve_range,
)
from algotree.seed import generate_words, words_to_seed


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Derive Algorand addresses from a root and from an exported account node"
    )
    parser.add_argument("--words", help="existing BIP-39 root words (default: generate new ones)")
    parser.add_argument("--account", type=int, default=4, help="account index (default: 4)")
    parser.add_argument("--count", type=int, default=3, help="addresses per pass (default: 3)")
    args = parser.parse_args()

    words = args.words or generate_words()
    print("Root words:", words)

    seed = words_to_seed(words)
    node = account_node(master_node(seed), args.account)
    sk_hex, cc_hex = node.to_hex()

    print(f"\nExported account node {args.account}:")
    print("Private key:", sk_hex)
    print("Chain code :", cc_hex)

    print(f"\nAddresses derived from the root, account {args.account}:")
    from_root = list(resolve_range(node, args.count))
    for identity in from_root:
        print(f"Address {identity.index}: {identity.address}")
        print(f"Phrase  {identity.index}: {identity.phrase}")

    # Rebuild the node from the two exported fields only: no root seed
    exported = Node.from_hex(sk_hex, cc_hex)

    print(f"\nAddresses derived again from only node {args.account} (no root seed):")
    from_node = list(resolve_range(exported, args.count))
    for identity in from_node:
        print(f"Address {identity.index}: {identity.address}")
        print(f"PublicKey {identity.index}: {identity.public_key.hex()}")

    if identical(from_root, from_node):
        print("\nBoth passes agree.")
    else:
        print("\nMISMATCH between root and exported node derivation.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
