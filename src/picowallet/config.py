"""Wallet derivation settings."""

from __future__ import annotations

from dataclasses import dataclass

from .entropy.sources import DEFAULT_TEMPLATE
from .hd.slip10 import DERIVATION_PATH, parse_path


@dataclass(frozen=True)
class WalletConfig:
    """
    Settings shared by every init mode of a Wallet.

    Attributes:
        template: Secret prepended to the password in password mode.
        path: Hardened-only derivation path; validated on construction.
        passphrase: Optional BIP-39 passphrase mixed into the seed.
        language: BIP-39 wordlist for generated mnemonics.
    """

    template: str = DEFAULT_TEMPLATE
    path: str = DERIVATION_PATH
    passphrase: str = ""
    language: str = "english"

    def __post_init__(self) -> None:
        parse_path(self.path)


__all__: tuple[str, ...] = ("WalletConfig",)
