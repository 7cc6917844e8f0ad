#!/usr/bin/env python3
import json
from pathlib import Path
from typing import Any, Dict
import sys

# Add repo root so Python can import algotree.*
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# Project imports: use the stable reference API
from algotree.reference_api import (
    account_vector,
    encode_address,
    encode_phrase,
    sk_to_pk,
)

VECTORS_PATH = ROOT / "tests" / "vectors" / "algotree.v1.json"


def load_vectors() -> Dict[str, Any]:
    with VECTORS_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_vectors(data: Dict[str, Any]) -> None:
    # Pretty-print and keep key order stable
    with VECTORS_PATH.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=False)
        f.write("\n")


def populate_encodings(data: Dict[str, Any]) -> None:
    for vec in data.get("encodings", []):
        vec["phrase"] = encode_phrase(vec["key_hex"])
        # the same 32 bytes, read as a public key
        vec["address"] = encode_address(vec["key_hex"])


def populate_accounts(data: Dict[str, Any]) -> None:
    for vec in data.get("accounts", []):
        derived = account_vector(vec["seed_hex"], vec["account"], vec["count"])
        vec["master"] = derived["master"]
        vec["account_node"] = derived["account_node"]
        vec["addresses"] = derived["addresses"]


def check_derivation(data: Dict[str, Any]) -> None:
    """
    SLIP-0010 vectors are published values; never overwrite them, only
    complain if the public keys no longer match.
    """
    for vec in data.get("derivation", []):
        for step in vec["chain"]:
            if sk_to_pk(step["sk_hex"]) != step["pk_hex"]:
                raise ValueError(f"public key mismatch in {vec['id']} at {step['path']}")


def main() -> None:
    if not VECTORS_PATH.exists():
        raise SystemExit(f"Vector file not found: {VECTORS_PATH}")

    data = load_vectors()

    check_derivation(data)
    populate_encodings(data)
    populate_accounts(data)

    save_vectors(data)
    print(f"Updated vectors written to {VECTORS_PATH}")


if __name__ == "__main__":
    main()
