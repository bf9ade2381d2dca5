"""Entropy sources and the BIP-39 mnemonic/seed pipeline."""

from .bip39 import entropy_to_mnemonic, mnemonic_to_seed
from .sources import (DEFAULT_TEMPLATE, ENTROPY_SIZE, password_entropy,
                      random_entropy)

__all__: tuple[str, ...] = (
    "DEFAULT_TEMPLATE",
    "ENTROPY_SIZE",
    "entropy_to_mnemonic",
    "mnemonic_to_seed",
    "password_entropy",
    "random_entropy",
)
