import json

import pytest

from algotree.cli import main
from algotree.codec import address_to_public_key, phrase_to_private_key, private_key_to_phrase
from algotree.core import public_key
from algotree.seed import words_to_seed

ZERO_SEED_HEX = "00" * 64


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def test_init(capsys):
    out = json.loads(run(capsys, "init", "--strength", "128"))
    assert len(out["words"].split()) == 12
    assert len(bytes.fromhex(out["seed_hex"])) == 64


def test_account_then_addresses_from_exported_node(capsys):
    node = json.loads(run(capsys, "account", "--seed-hex", ZERO_SEED_HEX, "--account", "4"))
    assert node["path"] == "m/44'/283'/4'"
    assert set(node) == {"path", "sk_hex", "chain_code_hex"}

    from_root = json.loads(run(
        capsys, "addresses", "--seed-hex", ZERO_SEED_HEX, "--account", "4", "--count", "2",
    ))
    from_node = json.loads(run(
        capsys, "addresses",
        "--node-key", node["sk_hex"],
        "--chain-code", node["chain_code_hex"],
        "--count", "2",
    ))

    assert from_root == from_node
    assert [a["index"] for a in from_root] == [0, 1]
    assert "sk_hex" not in from_root[0]
    assert address_to_public_key(from_root[0]["address"]).hex() == from_root[0]["pk_hex"]


def test_addresses_show_secrets(capsys):
    out = json.loads(run(
        capsys, "addresses", "--seed-hex", ZERO_SEED_HEX, "--count", "1", "--start", "2",
        "--show-secrets",
    ))
    assert out[0]["index"] == 2
    assert phrase_to_private_key(out[0]["phrase"]).hex() == out[0]["sk_hex"]


def test_addresses_needs_a_source(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["addresses"])
    assert excinfo.value.code == 1


def test_addresses_needs_both_node_fields(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["addresses", "--node-key", "00" * 32])
    assert excinfo.value.code == 1


def test_words_and_seed_agree(capsys):
    words = " ".join(["abandon"] * 11 + ["about"])

    by_words = run(capsys, "account", "--words", words)
    by_seed = run(capsys, "account", "--seed-hex", words_to_seed(words).hex())
    assert by_words == by_seed


def test_check_address(capsys):
    assert run(capsys, "check-address", "A" * 52 + "Y5HFKQ").strip() == "valid"

    with pytest.raises(SystemExit) as excinfo:
        main(["check-address", "A" * 52 + "Y5HFKA"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().out.strip() == "invalid"


def test_phrase_to_address(capsys):
    phrase = private_key_to_phrase(bytes(32))
    out = json.loads(run(capsys, "phrase-to-address", phrase))
    assert out["pk_hex"] == public_key(bytes(32)).hex()
    assert address_to_public_key(out["address"]).hex() == out["pk_hex"]


def test_verify(capsys):
    out = run(capsys, "verify", "--seed-hex", ZERO_SEED_HEX, "--account", "4", "--count", "3")
    assert out.strip() == "identical"


@pytest.mark.parametrize("argv", [
    ["account", "--seed-hex", "00" * 32],
    ["account", "--seed-hex", "not hex"],
    ["phrase-to-address", "abandon abandon"],
    ["addresses", "--node-key", "00" * 31, "--chain-code", "00" * 32],
])
def test_errors_exit_with_status_1(capsys, argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("error:")


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1
