"""
SLIP-10 hierarchical key derivation for Ed25519 (hardened children only).
Pure Python over stdlib hmac/hashlib.
"""

from __future__ import annotations

import hashlib
import hmac
import re
from dataclasses import dataclass

from ..errors import EmptyChainCodeError, IndexOutOfRangeError, InvalidPathError

# HMAC key for the master node (SLIP-10, Ed25519 curve)
ED25519_CURVE = b"ed25519 seed"
HARDENED_OFFSET = 0x80000000
# purpose 44, coin type 632, account / change / address index 0
DERIVATION_PATH = "m/44'/632'/0'/0'/0'"

_MAX_INDEX = HARDENED_OFFSET - 1
_PATH_RE = re.compile(r"m(/[0-9]+')+")


@dataclass(frozen=True)
class ExtendedKey:
    """One node of the derivation tree: 32-byte private key and 32-byte chain code."""

    private_key: bytes
    chain_code: bytes


def _hmac_sha512(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha512).digest()


def _split(digest: bytes) -> ExtendedKey:
    return ExtendedKey(private_key=digest[:32], chain_code=digest[32:])


def is_valid_path(path: str) -> bool:
    """
    True iff path is ``m`` followed by one or more hardened ``/<n>'`` segments.

    Index range is not checked here; see derive_hardened_child.
    """
    if not isinstance(path, str):
        return False
    return _PATH_RE.fullmatch(path) is not None


def parse_path(path: str) -> tuple[int, ...]:
    """
    Parse a hardened-only path into its pre-offset indices.

    Args:
        path: Textual path, e.g. ``m/44'/632'/0'/0'/0'``.

    Returns:
        Indices in walk order, e.g. ``(44, 632, 0, 0, 0)``.

    Raises:
        InvalidPathError: path is empty, has no segments, or has a segment
            that is not a non-negative integer followed by ``'``.
    """
    if not is_valid_path(path):
        raise InvalidPathError(f"invalid derivation path: {path!r}")
    return tuple(int(segment[:-1], 10) for segment in path.split("/")[1:])


def derive_master_key(seed: bytes) -> ExtendedKey:
    """
    Master node from a BIP-39 seed: HMAC-SHA512 keyed by ``b"ed25519 seed"``.

    Args:
        seed: Seed bytes (64 bytes when produced from a mnemonic).

    Returns:
        ExtendedKey with IL as private key and IR as chain code.
    """
    return _split(_hmac_sha512(ED25519_CURVE, bytes(seed)))


def derive_hardened_child(parent: ExtendedKey, index: int) -> ExtendedKey:
    """
    Hardened child of parent at ``index + 2**31``.

    Ed25519 defines no public-parent derivation, so there is no
    non-hardened variant.

    Args:
        parent: Parent node.
        index: Child index before the hardened offset, in [0, 2**31 - 1].

    Returns:
        Child ExtendedKey.

    Raises:
        IndexOutOfRangeError: index outside [0, 2**31 - 1].
        EmptyChainCodeError: parent has no chain code.
    """
    if index < 0 or index > _MAX_INDEX:
        raise IndexOutOfRangeError(f"child index out of range: {index}")
    if not parent.chain_code:
        raise EmptyChainCodeError("parent chain code is empty")
    # 0x00 || k_par (32) || ser32(i) (4) = 37 bytes
    data = b"\x00" + parent.private_key + (index + HARDENED_OFFSET).to_bytes(4, "big")
    return _split(_hmac_sha512(parent.chain_code, data))


def derive_path(path: str, seed: bytes) -> ExtendedKey:
    """
    Walk path from the master node of seed, one hardened step per segment.

    The path is validated before any HMAC is computed. Steps run strictly in
    order, each consuming the previous node.

    Args:
        path: Hardened-only path, e.g. DERIVATION_PATH.
        seed: Seed bytes.

    Returns:
        ExtendedKey of the last segment.
    """
    indices = parse_path(path)
    node = derive_master_key(seed)
    for index in indices:
        node = derive_hardened_child(node, index)
    return node


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
