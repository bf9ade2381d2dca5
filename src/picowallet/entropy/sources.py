"""
Entropy for mnemonic generation: password-derived (legacy) or random.
"""

from __future__ import annotations

import hashlib
import secrets

ENTROPY_SIZE = 32
# Template secret prepended to the password by existing wallets.
DEFAULT_TEMPLATE = "0x2050939757b6d498bb0407e001f0cb6db05c991b3c6f7d8e362f9d27c70128b9"


def password_entropy(password: str, template: str = DEFAULT_TEMPLATE) -> bytes:
    """
    32 bytes of entropy from SHA-256(template + password).

    WARNING: this is a single unsalted hash with no work factor, so weak
    passwords give weak keys. It is kept bit-for-bit so that wallets created
    from a password keep their address; do not use it for new integrations
    that can choose another mode.

    Args:
        password: User password (UTF-8 encoded before hashing).
        template: Secret string prepended to the password.

    Returns:
        32-byte entropy.
    """
    digest = hashlib.sha256((template + password).encode("utf-8")).hexdigest()
    # 64 hex characters is the whole digest
    return bytes.fromhex(digest[:64])


def random_entropy() -> bytes:
    """32 bytes from the OS CSPRNG."""
    return secrets.token_bytes(ENTROPY_SIZE)


__all__: tuple[str, ...] = (
    "DEFAULT_TEMPLATE",
    "ENTROPY_SIZE",
    "password_entropy",
    "random_entropy",
)
