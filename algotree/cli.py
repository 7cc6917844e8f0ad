#!/usr/bin/env python3
import argparse
import json
import logging
import sys

from .accounts import identical, identity_from_phrase, resolve_range
from .codec import is_valid_address
from .core import Node, account_node, account_path, format_path, master_node
from .log import get_logger
from .seed import generate_words, words_are_valid, words_to_seed

log = logging.getLogger(__name__)


def _seed_from_args(args) -> bytes:
    if args.words:
        if not words_are_valid(args.words):
            log.warning("root words fail the BIP-39 checksum, deriving anyway")
        return words_to_seed(args.words, passphrase=args.passphrase)
    return bytes.fromhex(args.seed_hex)


def _account_node_from_args(args) -> Node:
    master = master_node(_seed_from_args(args))
    return account_node(master, args.account)


def _print_json(obj) -> None:
    print(json.dumps(obj, indent=2))


def cmd_init(args):
    """
    algotree init --strength 256
    """
    words = generate_words(strength=args.strength)
    _print_json({
        "words": words,
        "seed_hex": words_to_seed(words).hex(),
    })


def cmd_account(args):
    """
    algotree account --words "<words>" --account 4
    """
    node = _account_node_from_args(args)
    sk_hex, cc_hex = node.to_hex()
    _print_json({
        "path": format_path(account_path(args.account)),
        "sk_hex": sk_hex,
        "chain_code_hex": cc_hex,
    })


def cmd_addresses(args):
    """
    algotree addresses --words "<words>" --account 4 --count 3
    algotree addresses --node-key <hex> --chain-code <hex> --count 3
    """
    if args.node_key or args.chain_code:
        if not (args.node_key and args.chain_code):
            print("error: --node-key and --chain-code go together", file=sys.stderr)
            sys.exit(1)
        node = Node.from_hex(args.node_key, args.chain_code)
    elif args.words or args.seed_hex:
        node = _account_node_from_args(args)
    else:
        print("error: need --words, --seed-hex or --node-key/--chain-code", file=sys.stderr)
        sys.exit(1)

    identities = resolve_range(node, args.count, start=args.start)
    _print_json([i.as_dict(show_secrets=args.show_secrets) for i in identities])


def cmd_check_address(args):
    """
    algotree check-address <address>
    """
    if is_valid_address(args.address):
        print("valid")
    else:
        print("invalid")
        sys.exit(1)


def cmd_phrase_to_address(args):
    """
    algotree phrase-to-address "<25 words>"
    """
    identity = identity_from_phrase(args.phrase)
    _print_json({
        "address": identity.address,
        "pk_hex": identity.public_key.hex(),
    })


def cmd_verify(args):
    """
    algotree verify --words "<words>" --account 4 --count 3

    Derives the addresses once through the root seed and once through the
    exported account node only, and checks both lists agree.
    """
    live = _account_node_from_args(args)
    sk_hex, cc_hex = live.to_hex()
    exported = Node.from_hex(sk_hex, cc_hex)

    from_root = list(resolve_range(live, args.count))
    from_node = list(resolve_range(exported, args.count))

    if identical(from_root, from_node):
        print("identical")
    else:
        print("mismatch")
        sys.exit(1)


def _add_seed_args(p, required=True):
    group = p.add_mutually_exclusive_group(required=required)
    group.add_argument("--words", help="BIP-39 root words. RUN OFFLINE.")
    group.add_argument("--seed-hex", help="64-byte root seed in hex (128 chars). RUN OFFLINE.")
    p.add_argument("--passphrase", default="", help="optional BIP-39 passphrase")
    p.add_argument("--account", type=int, default=0, help="account index (default: 0)")


def build_parser():
    p = argparse.ArgumentParser(prog="algotree", description="Algorand HD account tree CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd")

    # init
    i = sub.add_parser("init", help="generate new root words")
    i.add_argument("--strength", type=int, choices=(128, 256), default=256,
                   help="entropy bits, 128 = 12 words, 256 = 24 words")
    i.set_defaults(func=cmd_init)

    # account
    a = sub.add_parser("account", help="export the account node m/44'/283'/N'")
    _add_seed_args(a)
    a.set_defaults(func=cmd_account)

    # addresses
    d = sub.add_parser("addresses", help="derive addresses from a root or an exported node")
    _add_seed_args(d, required=False)
    d.add_argument("--node-key", help="exported account node private key (hex)")
    d.add_argument("--chain-code", help="exported account node chain code (hex)")
    d.add_argument("--count", type=int, default=3, help="number of addresses (default: 3)")
    d.add_argument("--start", type=int, default=0, help="first address index (default: 0)")
    d.add_argument("--show-secrets", action="store_true",
                   help="include private keys and recovery phrases")
    d.set_defaults(func=cmd_addresses)

    # check-address
    c = sub.add_parser("check-address", help="validate an address checksum")
    c.add_argument("address")
    c.set_defaults(func=cmd_check_address)

    # phrase-to-address
    r = sub.add_parser("phrase-to-address", help="recover the address of a 25-word phrase")
    r.add_argument("phrase")
    r.set_defaults(func=cmd_phrase_to_address)

    # verify
    v = sub.add_parser("verify", help="check root and exported-node derivation agree")
    _add_seed_args(v)
    v.add_argument("--count", type=int, default=3, help="number of addresses (default: 3)")
    v.set_defaults(func=cmd_verify)

    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    get_logger("algotree", log_level="DEBUG" if args.verbose else "WARNING")

    try:
        args.func(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
