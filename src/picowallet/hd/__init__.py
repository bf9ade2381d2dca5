"""Hierarchical key derivation: SLIP-10 Ed25519, hardened-only."""

from .slip10 import (DERIVATION_PATH, ED25519_CURVE, HARDENED_OFFSET,
                     ExtendedKey, derive_hardened_child, derive_master_key,
                     derive_path, is_valid_path, parse_path)

__all__: tuple[str, ...] = (
    "DERIVATION_PATH",
    "ED25519_CURVE",
    "HARDENED_OFFSET",
    "ExtendedKey",
    "derive_hardened_child",
    "derive_master_key",
    "derive_path",
    "is_valid_path",
    "parse_path",
)
