"""
Secret-key string encoding: ``"S" + base58check(version || private_key)``.
"""

from __future__ import annotations

import base58

from ..errors import InvalidSecretKeyError

SECRET_KEY_PREFIX = "S"
# varint(0): key format version
KEY_VERSION = b"\x00"
PRIVATE_KEY_SIZE = 32


def encode_secret_key(private_key: bytes) -> str:
    """
    Encode a 32-byte Ed25519 private key as a secret-key string.

    Args:
        private_key: 32-byte private key (e.g. ExtendedKey.private_key).

    Returns:
        ``S`` followed by base58check of the version byte and the key.
    """
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise InvalidSecretKeyError(
            f"private key must be {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}"
        )
    payload = KEY_VERSION + bytes(private_key)
    return SECRET_KEY_PREFIX + base58.b58encode_check(payload).decode("ascii")


def decode_secret_key(secret_key: str) -> bytes:
    """
    Inverse of encode_secret_key.

    Args:
        secret_key: Encoded secret key.

    Returns:
        32-byte private key.

    Raises:
        InvalidSecretKeyError: bad prefix, base58 alphabet, checksum,
            version or length.
    """
    if not isinstance(secret_key, str) or not secret_key.startswith(SECRET_KEY_PREFIX):
        raise InvalidSecretKeyError("secret key must start with 'S'")
    try:
        payload = base58.b58decode_check(secret_key[len(SECRET_KEY_PREFIX):])
    except ValueError as e:
        raise InvalidSecretKeyError(f"malformed secret key: {e}") from e
    if payload[:1] != KEY_VERSION:
        raise InvalidSecretKeyError(f"unsupported key version: {payload[:1].hex()}")
    private_key = payload[1:]
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise InvalidSecretKeyError(
            f"private key must be {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}"
        )
    return private_key


__all__: tuple[str, ...] = (
    "KEY_VERSION",
    "SECRET_KEY_PREFIX",
    "decode_secret_key",
    "encode_secret_key",
)
