"""
Ed25519 wallet key derivation: password / mnemonic / random entropy through
SLIP-10 (m/44'/632'/0'/0'/0') to an encoded secret key and address, plus exact
token amount scaling. Pure Python over hashlib/hmac.
"""

from .__about__ import __version__
from .amounts import format_amount, parse_amount
from .config import WalletConfig
from .entropy import (DEFAULT_TEMPLATE, entropy_to_mnemonic, mnemonic_to_seed,
                      password_entropy, random_entropy)
from .errors import (AmountError, EmptyChainCodeError, IndexOutOfRangeError,
                     InvalidPathError, InvalidSecretKeyError, InvalidSourceError,
                     MnemonicError, WalletError, WalletNotInitializedError)
from .hd import (DERIVATION_PATH, HARDENED_OFFSET, ExtendedKey,
                 derive_hardened_child, derive_master_key, derive_path,
                 is_valid_path, parse_path)
from .keys import (Account, account_from_secret_key, decode_secret_key,
                   encode_secret_key)
from .wallet import (InitMode, Wallet, WalletSource,
                     derive_secret_key_from_mnemonic)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Amounts
    "format_amount",
    "parse_amount",
    # Entropy / BIP-39
    "DEFAULT_TEMPLATE",
    "entropy_to_mnemonic",
    "mnemonic_to_seed",
    "password_entropy",
    "random_entropy",
    # HD derivation (SLIP-10 Ed25519)
    "DERIVATION_PATH",
    "HARDENED_OFFSET",
    "ExtendedKey",
    "derive_hardened_child",
    "derive_master_key",
    "derive_path",
    "is_valid_path",
    "parse_path",
    # Keys / account
    "Account",
    "account_from_secret_key",
    "decode_secret_key",
    "encode_secret_key",
    # Wallet
    "InitMode",
    "Wallet",
    "WalletConfig",
    "WalletSource",
    "derive_secret_key_from_mnemonic",
    # Errors
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
