"""Secret-key encoding and the account (public key, address) scheme."""

from .address import (Account, account_from_secret_key, ed25519_public_key,
                      encode_public_key, public_key_to_address)
from .encoding import decode_secret_key, encode_secret_key

__all__: tuple[str, ...] = (
    "Account",
    "account_from_secret_key",
    "decode_secret_key",
    "ed25519_public_key",
    "encode_public_key",
    "encode_secret_key",
    "public_key_to_address",
)
