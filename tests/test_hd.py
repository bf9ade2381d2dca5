"""SLIP-10 Ed25519 derivation: published vectors, path rules, index bounds."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from picowallet import (DERIVATION_PATH, HARDENED_OFFSET, EmptyChainCodeError,
                        ExtendedKey, IndexOutOfRangeError, InvalidPathError,
                        derive_hardened_child, derive_master_key, derive_path,
                        is_valid_path, parse_path)
from picowallet.hd import slip10

# --- SLIP-0010 test vector 1 for ed25519 ---
SLIP10_SEED = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
SLIP10_M_CHAIN = bytes.fromhex(
    "90046a93de5380a72b5e45010748567d5ea02bbf6522f979e05c0d8d8ca9fffb"
)
SLIP10_M_PRIV = bytes.fromhex(
    "2b4be7f19ee27bbf30c667b642d5f4aa69fd169872f8fc3059c08ebae2eb19e7"
)
SLIP10_M_0H_CHAIN = bytes.fromhex(
    "8b59aa11380b624e81507a27fedda59fea6d0b779a778918a2fd3590e16e9c69"
)
SLIP10_M_0H_PRIV = bytes.fromhex(
    "68e0fe46dfb67e368c75379acec591dad19df3cde26e63b93a8e704f1dade7a3"
)
SLIP10_M_0H_1H_CHAIN = bytes.fromhex(
    "a320425f77d1b5c2505a6b1b27382b37368ee640e3557c315416801243552f14"
)
SLIP10_M_0H_1H_PRIV = bytes.fromhex(
    "b1d0bad404bf35da785a64ca1ac54b2617211d2777696fbffaf208f746ae84f2"
)

SEED_64 = bytes(range(64))


def test_master_key_slip10_vector() -> None:
    master = derive_master_key(SLIP10_SEED)
    assert master.private_key == SLIP10_M_PRIV
    assert master.chain_code == SLIP10_M_CHAIN


def test_hardened_children_slip10_vector() -> None:
    node = derive_hardened_child(derive_master_key(SLIP10_SEED), 0)
    assert node == ExtendedKey(SLIP10_M_0H_PRIV, SLIP10_M_0H_CHAIN)
    node = derive_hardened_child(node, 1)
    assert node == ExtendedKey(SLIP10_M_0H_1H_PRIV, SLIP10_M_0H_1H_CHAIN)


def test_derive_path_slip10_vector() -> None:
    node = derive_path("m/0'/1'", SLIP10_SEED)
    assert node.private_key == SLIP10_M_0H_1H_PRIV
    assert node.chain_code == SLIP10_M_0H_1H_CHAIN


def test_master_key_is_hmac_of_seed() -> None:
    digest = hmac.new(b"ed25519 seed", SEED_64, hashlib.sha512).digest()
    master = derive_master_key(SEED_64)
    assert master.private_key == digest[:32]
    assert master.chain_code == digest[32:]


def test_child_message_layout() -> None:
    """Child HMAC input is 0x00 || parent key || ser32(index + 2**31)."""
    parent = derive_master_key(SEED_64)
    data = b"\x00" + parent.private_key + (7 + HARDENED_OFFSET).to_bytes(4, "big")
    assert len(data) == 37
    digest = hmac.new(parent.chain_code, data, hashlib.sha512).digest()
    child = derive_hardened_child(parent, 7)
    assert child.private_key == digest[:32]
    assert child.chain_code == digest[32:]


def test_derive_path_is_sequential_fold() -> None:
    node = derive_master_key(SEED_64)
    for index in (44, 632, 0, 0, 0):
        node = derive_hardened_child(node, index)
    assert derive_path(DERIVATION_PATH, SEED_64) == node


def test_derive_path_deterministic() -> None:
    first = derive_path(DERIVATION_PATH, SEED_64)
    second = derive_path(DERIVATION_PATH, SEED_64)
    assert first.private_key == second.private_key
    assert first.chain_code == second.chain_code
    assert len(first.private_key) == 32 and len(first.chain_code) == 32


def test_extended_key_is_immutable() -> None:
    node = derive_master_key(SEED_64)
    with pytest.raises(AttributeError):
        node.private_key = bytes(32)  # type: ignore[misc]


def test_derivation_path_constant() -> None:
    assert DERIVATION_PATH == "m/44'/632'/0'/0'/0'"
    assert parse_path(DERIVATION_PATH) == (44, 632, 0, 0, 0)


@pytest.mark.parametrize(
    "path, valid",
    [
        ("m/44'/632'/0'/0'/0'", True),
        ("m/0'", True),
        ("m/2147483648'", True),
        ("m/44/632'", False),
        ("m/44'/632", False),
        ("", False),
        ("m", False),
        ("m/", False),
        ("m/abc'", False),
        ("m/-1'", False),
        ("m/1.5'", False),
        ("M/44'", False),
        ("m/44'/", False),
        ("m//44'", False),
        ("m/44''", False),
        ("m/44'\n", False),
        ("m/44h", False),
    ],
)
def test_is_valid_path(path: str, valid: bool) -> None:
    assert is_valid_path(path) is valid


def test_parse_path_rejects_invalid() -> None:
    with pytest.raises(InvalidPathError):
        parse_path("m/44/632'")


def test_invalid_path_rejected_before_derivation(monkeypatch) -> None:
    def fail(seed: bytes) -> ExtendedKey:
        raise AssertionError("derivation must not start")

    monkeypatch.setattr(slip10, "derive_master_key", fail)
    for path in ("", "m", "m/44/632'", "m/abc'"):
        with pytest.raises(InvalidPathError):
            derive_path(path, SEED_64)


def test_invalid_path_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        derive_path("m", SEED_64)


def test_hardened_index_upper_bound_accepted() -> None:
    node = derive_hardened_child(derive_master_key(SEED_64), 2**31 - 1)
    assert len(node.private_key) == 32
    assert derive_path("m/2147483647'", SEED_64) == node


@pytest.mark.parametrize("index", [2**31, 2**32, -1])
def test_hardened_index_out_of_range(index: int) -> None:
    with pytest.raises(IndexOutOfRangeError):
        derive_hardened_child(derive_master_key(SEED_64), index)


def test_derive_path_index_out_of_range() -> None:
    with pytest.raises(IndexOutOfRangeError):
        derive_path("m/44'/2147483648'", SEED_64)


def test_empty_chain_code() -> None:
    with pytest.raises(EmptyChainCodeError):
        derive_hardened_child(ExtendedKey(bytes(32), b""), 0)
