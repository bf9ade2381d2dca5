"""
Wallet initialization: password, mnemonic, secret key or random entropy to an
Account (secret key, public key, address).
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .config import WalletConfig
from .entropy import (entropy_to_mnemonic, mnemonic_to_seed, password_entropy,
                      random_entropy)
from .errors import InvalidSourceError, WalletNotInitializedError
from .hd import DERIVATION_PATH, derive_path
from .keys import Account, account_from_secret_key, encode_secret_key

logger = logging.getLogger(__name__)


class InitMode(enum.Enum):
    PASSWORD = "password"
    MNEMONIC = "mnemonic"
    PRIVATE_KEY = "private_key"
    RANDOM = "random"


@dataclass(frozen=True, repr=False)
class WalletSource:
    """
    Which input a wallet is initialized from. Exactly one mode per source.

    ``value`` is the password, mnemonic or encoded secret key; None for RANDOM.
    """

    mode: InitMode
    value: str | None = None

    def __post_init__(self) -> None:
        if (self.mode is InitMode.RANDOM) != (self.value is None):
            raise InvalidSourceError(
                f"{self.mode.value} source takes exactly one value"
            )

    def __repr__(self) -> str:
        # value is secret material
        return f"WalletSource(mode={self.mode.value})"

    @classmethod
    def password(cls, password: str) -> WalletSource:
        return cls(InitMode.PASSWORD, password)

    @classmethod
    def mnemonic(cls, mnemonic: str) -> WalletSource:
        return cls(InitMode.MNEMONIC, mnemonic)

    @classmethod
    def private_key(cls, secret_key: str) -> WalletSource:
        return cls(InitMode.PRIVATE_KEY, secret_key)

    @classmethod
    def random(cls) -> WalletSource:
        return cls(InitMode.RANDOM)

    @classmethod
    def from_inputs(
        cls,
        password: str | None = None,
        mnemonic: str | None = None,
        private_key: str | None = None,
    ) -> WalletSource:
        """First supplied input wins, in the order password, mnemonic, private key."""
        if password is not None:
            return cls.password(password)
        if mnemonic is not None:
            return cls.mnemonic(mnemonic)
        if private_key is not None:
            return cls.private_key(private_key)
        return cls.random()


@dataclass(frozen=True)
class _WalletState:
    mode: InitMode
    account: Account
    mnemonic: str | None


def derive_secret_key_from_mnemonic(
    mnemonic: str, passphrase: str = "", path: str = DERIVATION_PATH
) -> str:
    """
    Encoded secret key for mnemonic at path.

    Args:
        mnemonic: BIP-39 mnemonic.
        passphrase: Optional BIP-39 passphrase.
        path: Hardened-only derivation path.

    Returns:
        Secret-key string (``S...``).
    """
    node = derive_path(path, mnemonic_to_seed(mnemonic, passphrase))
    return encode_secret_key(node.private_key)


class Wallet:
    """
    Key material for one wallet session, held in memory only.

    Either every accessor works (after a successful init) or every accessor
    raises WalletNotInitializedError; a failed init never leaves partial state.
    """

    def __init__(self, config: WalletConfig | None = None) -> None:
        self.config = config if config is not None else WalletConfig()
        self._state: _WalletState | None = None

    def init(
        self,
        password: str | None = None,
        mnemonic: str | None = None,
        private_key: str | None = None,
    ) -> Wallet:
        """
        Initialize from whichever input is given; random entropy if none.

        Password mode hashes the password once with SHA-256 (see
        picowallet.entropy.password_entropy); it exists for compatibility
        with wallets already created that way.

        Returns:
            self, for chaining.
        """
        source = WalletSource.from_inputs(password, mnemonic, private_key)
        return self.init_from(source)

    def init_from(self, source: WalletSource) -> Wallet:
        state = self._derive(source)
        # single assignment: all or nothing
        self._state = state
        logger.debug(
            "wallet initialized mode=%s address=%s",
            state.mode.value,
            state.account.address,
        )
        return self

    def _derive(self, source: WalletSource) -> _WalletState:
        config = self.config
        mode = source.mode
        if mode is InitMode.PRIVATE_KEY:
            return _WalletState(mode, account_from_secret_key(source.value), None)
        if mode is InitMode.MNEMONIC:
            mnemonic = source.value
        elif mode is InitMode.PASSWORD:
            mnemonic = entropy_to_mnemonic(
                password_entropy(source.value, config.template), config.language
            )
        else:
            mnemonic = entropy_to_mnemonic(random_entropy(), config.language)
        secret_key = derive_secret_key_from_mnemonic(
            mnemonic, config.passphrase, config.path
        )
        return _WalletState(mode, account_from_secret_key(secret_key), mnemonic)

    def _require_state(self) -> _WalletState:
        if self._state is None:
            raise WalletNotInitializedError("wallet is not initialized")
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def mode(self) -> InitMode:
        return self._require_state().mode

    @property
    def account(self) -> Account:
        return self._require_state().account

    @property
    def private_key(self) -> str:
        return self._require_state().account.secret_key

    @property
    def public_key(self) -> str:
        return self._require_state().account.public_key

    @property
    def address(self) -> str:
        return self._require_state().account.address

    @property
    def mnemonic(self) -> str | None:
        """Mnemonic, or None when the wallet was initialized from a secret key."""
        return self._require_state().mnemonic


__all__: tuple[str, ...] = (
    "InitMode",
    "Wallet",
    "WalletSource",
    "derive_secret_key_from_mnemonic",
)
