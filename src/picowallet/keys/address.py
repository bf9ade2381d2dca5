"""
Account scheme used by the chain client: Ed25519 public key and user address.
"""

from __future__ import annotations

from dataclasses import dataclass

import base58
from blake3 import blake3
from nacl.signing import SigningKey

from .encoding import KEY_VERSION, decode_secret_key

PUBLIC_KEY_PREFIX = "P"
ADDRESS_USER_PREFIX = "AU"


@dataclass(frozen=True)
class Account:
    secret_key: str
    public_key: str
    address: str


def ed25519_public_key(private_key: bytes) -> bytes:
    """32-byte Ed25519 public key for a 32-byte private key (RFC 8032 seed)."""
    return SigningKey(bytes(private_key)).verify_key.encode()


def encode_public_key(public_key: bytes) -> str:
    encoded = base58.b58encode_check(KEY_VERSION + public_key)
    return PUBLIC_KEY_PREFIX + encoded.decode("ascii")


def public_key_to_address(public_key: bytes) -> str:
    """
    User address: ``"AU" + base58check(version || blake3(version || public_key))``.
    """
    digest = blake3(KEY_VERSION + public_key).digest()
    encoded = base58.b58encode_check(KEY_VERSION + digest)
    return ADDRESS_USER_PREFIX + encoded.decode("ascii")


def account_from_secret_key(secret_key: str) -> Account:
    """
    Build the Account for an encoded secret key.

    Args:
        secret_key: Encoded secret key (``S...``).

    Returns:
        Account with the secret key unchanged, its public key and address.

    Raises:
        InvalidSecretKeyError: secret_key cannot be decoded.
    """
    public_key = ed25519_public_key(decode_secret_key(secret_key))
    return Account(
        secret_key=secret_key,
        public_key=encode_public_key(public_key),
        address=public_key_to_address(public_key),
    )


__all__: tuple[str, ...] = (
    "ADDRESS_USER_PREFIX",
    "PUBLIC_KEY_PREFIX",
    "Account",
    "account_from_secret_key",
    "ed25519_public_key",
    "encode_public_key",
    "public_key_to_address",
)
