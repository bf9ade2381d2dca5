"""Exceptions raised by picowallet. All derive from WalletError."""

from __future__ import annotations


class WalletError(Exception):
    """Base class for every error raised by this package."""


class InvalidPathError(WalletError, ValueError):
    """Derivation path is not of the form m/<n>'/<n>'/..."""


class IndexOutOfRangeError(WalletError, ValueError):
    """Child index (before the hardened offset) is outside [0, 2**31 - 1]."""


class EmptyChainCodeError(WalletError, RuntimeError):
    """Parent extended key has no chain code. Indicates a programming error."""


class InvalidSecretKeyError(WalletError, ValueError):
    """Encoded secret key has a bad prefix, checksum, version or length."""


class MnemonicError(WalletError, ValueError):
    """Entropy has the wrong length or the mnemonic is empty."""


class AmountError(WalletError, ValueError):
    """Amount is not a finite decimal within bounds, or decimals is invalid."""


class InvalidSourceError(WalletError, ValueError):
    """Wallet source mode and input value do not match."""


class WalletNotInitializedError(WalletError, RuntimeError):
    """Key material was requested before a successful Wallet.init()."""


__all__: tuple[str, ...] = (
    "AmountError",
    "EmptyChainCodeError",
    "IndexOutOfRangeError",
    "InvalidPathError",
    "InvalidSecretKeyError",
    "InvalidSourceError",
    "MnemonicError",
    "WalletError",
    "WalletNotInitializedError",
)
