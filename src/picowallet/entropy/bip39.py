"""
BIP-39 entropy -> mnemonic -> seed, delegated to the ``mnemonic`` package.
"""

from __future__ import annotations

from functools import lru_cache

from mnemonic import Mnemonic

from ..errors import MnemonicError
from .sources import ENTROPY_SIZE


@lru_cache(maxsize=None)
def _codec(language: str) -> Mnemonic:
    return Mnemonic(language)


def entropy_to_mnemonic(entropy: bytes, language: str = "english") -> str:
    """
    Encode 32 bytes of entropy as a 24-word mnemonic.

    Args:
        entropy: 32-byte entropy.
        language: BIP-39 wordlist name.

    Returns:
        Space-separated mnemonic.
    """
    if len(entropy) != ENTROPY_SIZE:
        raise MnemonicError(
            f"entropy must be {ENTROPY_SIZE} bytes, got {len(entropy)}"
        )
    return _codec(language).to_mnemonic(bytes(entropy))


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> bytes:
    """64-byte BIP-39 seed (PBKDF2-HMAC-SHA512, salt ``"mnemonic" + passphrase``)."""
    if not mnemonic or not mnemonic.strip():
        raise MnemonicError("mnemonic is empty")
    return Mnemonic.to_seed(mnemonic, passphrase)


__all__: tuple[str, ...] = (
    "entropy_to_mnemonic",
    "mnemonic_to_seed",
)
