"""Key pairs, addresses and raw-hash signing."""

from __future__ import annotations

from dataclasses import dataclass

from eth_account import Account
from eth_keys import keys
from eth_keys.constants import SECPK1_N
from eth_keys.exceptions import ValidationError

from thorest.exceptions import SigningError


def _key_bytes(private_key: bytes | str) -> bytes:
    """Decode *private_key* to 32 raw bytes; anything else is a ``SigningError``."""
    try:
        if isinstance(private_key, str):
            key = bytes.fromhex(private_key.removeprefix("0x"))
        else:
            key = bytes(private_key)
    except (ValueError, TypeError) as exc:
        raise SigningError(f"Malformed private key: {exc}") from exc
    if len(key) != 32:
        raise SigningError(f"Malformed private key: expected 32 bytes, got {len(key)}")
    if not 0 < int.from_bytes(key, "big") < SECPK1_N:
        raise SigningError("Malformed private key: outside the secp256k1 range")
    return key


@dataclass(frozen=True)
class KeyPair:
    private_key: bytes
    address: str

    @classmethod
    def from_private_key(cls, private_key: bytes | str) -> "KeyPair":
        key = _key_bytes(private_key)
        return cls(private_key=key, address=address_from_private_key(key))


def address_from_private_key(private_key: bytes | str) -> str:
    """Return the lower-cased ``0x`` address owned by *private_key*."""
    key = _key_bytes(private_key)
    try:
        return Account.from_key(key).address.lower()
    except (ValidationError, ValueError) as exc:
        raise SigningError(f"Malformed private key: {exc}") from exc


def generate_key_pair() -> KeyPair:
    account = Account.create()
    return KeyPair(private_key=bytes(account.key), address=account.address.lower())


def generate_address() -> str:
    return generate_key_pair().address


def generate_addresses(count: int) -> list[str]:
    return [generate_address() for _ in range(count)]


def sign_hash(message_hash: bytes, private_key: bytes | str) -> bytes:
    """Sign a 32-byte hash, returning the 65-byte ``r || s || v`` signature.

    Raises ``SigningError`` when the key or the hash is malformed.
    """
    try:
        signature = keys.PrivateKey(_key_bytes(private_key)).sign_msg_hash(message_hash)
    except (ValidationError, ValueError, TypeError) as exc:
        raise SigningError(f"Could not sign hash: {exc}") from exc
    return signature.to_bytes()
