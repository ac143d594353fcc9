"""Thor transaction body, signing hashes and RLP encoding."""

from __future__ import annotations

import copy
import hashlib
import secrets
from typing import Any, Union

import rlp

from thorest.types import Clause, TransactionBody

DELEGATION_FEATURE = 1
SIGNATURE_LENGTH = 65


def blake2b256(*parts: bytes) -> bytes:
    h = hashlib.blake2b(digest_size=32)
    for part in parts:
        h.update(part)
    return h.digest()


def generate_nonce() -> str:
    """Random 64-bit nonce so that otherwise identical bodies stay distinct."""
    return "0x" + secrets.token_hex(8)


def _hex_bytes(value: str) -> bytes:
    return bytes.fromhex(value[2:] if value.startswith(("0x", "0X")) else value)


def _to_int(value: Union[str, int, None]) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    if value.startswith(("0x", "0X")):
        return int(value, 16) if len(value) > 2 else 0
    return int(value)


def _int_bytes(value: Union[str, int, None]) -> bytes:
    number = _to_int(value)
    if number < 0:
        raise ValueError(f"negative value: {value}")
    if number == 0:
        return b""
    return number.to_bytes((number.bit_length() + 7) // 8, "big")


def _nullable_bytes(value: str | None) -> bytes:
    return b"" if value is None else _hex_bytes(value)


def _compact_bytes(value: str) -> bytes:
    return _hex_bytes(value).lstrip(b"\x00")


def _encode_clause(clause: Clause) -> list[bytes]:
    return [
        _nullable_bytes(clause.get("to")),
        _int_bytes(clause.get("value")),
        _hex_bytes(clause.get("data") or "0x"),
    ]


def _encode_reserved(body: TransactionBody) -> list[bytes]:
    reserved = body.get("reserved") or {}
    items = [_int_bytes(reserved.get("features", 0))]
    items.extend(_hex_bytes(u) for u in reserved.get("unused", []))
    while items and items[-1] == b"":
        items.pop()
    return items


class Transaction:
    """An immutable view over a :class:`TransactionBody` plus optional signature."""

    def __init__(self, body: TransactionBody, signature: bytes | None = None) -> None:
        self.body: TransactionBody = body
        self.signature = signature

    def __repr__(self) -> str:
        signed = "signed" if self.signature else "unsigned"
        return f"Transaction(nonce={self.body.get('nonce')!r}, {signed})"

    @property
    def is_delegated(self) -> bool:
        reserved = self.body.get("reserved") or {}
        return bool(reserved.get("features", 0) & DELEGATION_FEATURE)

    @property
    def chain_tag(self) -> int:
        return self.body["chainTag"]

    def _unsigned_fields(self) -> list[Any]:
        body = self.body
        return [
            _int_bytes(body["chainTag"]),
            _compact_bytes(body["blockRef"]),
            _int_bytes(body["expiration"]),
            [_encode_clause(c) for c in body["clauses"]],
            _int_bytes(body["gasPriceCoef"]),
            _int_bytes(body["gas"]),
            _nullable_bytes(body.get("dependsOn")),
            _int_bytes(body["nonce"]),
            _encode_reserved(body),
        ]

    def signing_hash(self) -> bytes:
        return blake2b256(rlp.encode(self._unsigned_fields()))

    def delegator_signing_hash(self, origin: str) -> bytes:
        """Hash the fee payer signs: the signing hash bound to the sender address."""
        return blake2b256(self.signing_hash(), _hex_bytes(origin))

    def encode(self) -> bytes:
        fields = self._unsigned_fields()
        if self.signature is not None:
            fields.append(self.signature)
        return rlp.encode(fields)

    def with_signature(self, signature: bytes) -> "Transaction":
        return Transaction(self.body, signature)

    def as_delegated(self) -> "Transaction":
        """Return an unsigned copy of this transaction with fee delegation enabled."""
        body = copy.deepcopy(self.body)
        reserved = body.setdefault("reserved", {})
        reserved["features"] = reserved.get("features", 0) | DELEGATION_FEATURE
        return Transaction(body)
