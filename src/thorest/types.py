"""Type definitions mirroring the thorest OpenAPI schema.

All types use ``TypedDict`` for JSON compatibility. The client returns raw
dicts from the API and these types provide editor auto-complete.
"""

from __future__ import annotations

from typing import TypedDict, Union


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------

class Clause(TypedDict):
    to: str | None
    value: Union[str, int]
    data: str


class Reserved(TypedDict, total=False):
    features: int
    unused: list[str]


class TransactionBody(TypedDict, total=False):
    chainTag: int
    blockRef: str
    expiration: int
    clauses: list[Clause]
    gasPriceCoef: int
    gas: int
    dependsOn: str | None
    nonce: Union[str, int]
    reserved: Reserved


class TxId(TypedDict):
    id: str


class ReceiptMeta(TypedDict, total=False):
    blockID: str
    blockNumber: int
    blockTimestamp: int
    txID: str
    txOrigin: str


class Event(TypedDict, total=False):
    address: str
    topics: list[str]
    data: str


class Transfer(TypedDict, total=False):
    sender: str
    recipient: str
    amount: str


class ReceiptOutput(TypedDict, total=False):
    contractAddress: str | None
    events: list[Event]
    transfers: list[Transfer]


class Receipt(TypedDict, total=False):
    gasUsed: int
    gasPayer: str
    paid: str
    reward: str
    reverted: bool
    meta: ReceiptMeta
    outputs: list[ReceiptOutput]


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------

class Account(TypedDict):
    balance: str
    energy: str
    hasCode: bool


class AccountCode(TypedDict):
    code: str


class StorageValue(TypedDict):
    value: str


class CallResult(TypedDict, total=False):
    data: str
    events: list[Event]
    transfers: list[Transfer]
    gasUsed: int
    reverted: bool
    vmError: str


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

class Block(TypedDict, total=False):
    number: int
    id: str
    size: int
    parentID: str
    timestamp: int
    gasLimit: int
    beneficiary: str
    gasUsed: int
    totalScore: int
    txsRoot: str
    stateRoot: str
    receiptsRoot: str
    signer: str
    isTrunk: bool
    transactions: list[str]
