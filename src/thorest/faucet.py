"""Account funding and fee delegation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from thorest.client import AsyncThorClient
from thorest.config import Settings
from thorest.contracts import ENERGY_ADDRESS, encode_energy_transfer
from thorest.exceptions import SigningError, ThorestError
from thorest.http import AsyncHttpClient
from thorest.keys import KeyPair, sign_hash
from thorest.transaction import Transaction
from thorest.types import Clause, Receipt, TransactionBody
from thorest.wallet import ThorWallet

logger = logging.getLogger(__name__)

WEI = 10**18
DEFAULT_VET_AMOUNT = 10_000 * WEI
DEFAULT_VTHO_AMOUNT = 10_000 * WEI


@dataclass(frozen=True)
class DelegatedTransaction:
    """A fee-delegated transaction and the fee payer's signature over it."""

    transaction: Transaction
    signature: bytes


class Delegator(Protocol):
    """Anything that can co-sign a transaction as its fee payer."""

    async def delegate_transaction(self, body: TransactionBody, sender: str) -> DelegatedTransaction:
        ...


class LocalDelegator:
    """Fee payer holding its own private key."""

    def __init__(self, private_key: bytes | str) -> None:
        self.key_pair = KeyPair.from_private_key(private_key)

    @property
    def address(self) -> str:
        return self.key_pair.address

    async def delegate_transaction(self, body: TransactionBody, sender: str) -> DelegatedTransaction:
        transaction = Transaction(body).as_delegated()
        signature = sign_hash(transaction.delegator_signing_hash(sender), self.key_pair.private_key)
        return DelegatedTransaction(transaction, signature)


class RemoteDelegator:
    """Fee payer reached over HTTP.

    The service receives ``{"origin", "raw"}`` with the unsigned,
    delegation-enabled transaction and answers ``{"signature"}``.
    """

    def __init__(self, url: str, *, timeout: float = 30.0) -> None:
        self._http = AsyncHttpClient(url, timeout=timeout)

    async def delegate_transaction(self, body: TransactionBody, sender: str) -> DelegatedTransaction:
        transaction = Transaction(body).as_delegated()
        res = await self._http.post("", {"origin": sender, "raw": "0x" + transaction.encode().hex()})
        payload = res.unwrap()
        signature = payload.get("signature") if isinstance(payload, dict) else None
        if not signature:
            raise SigningError("Delegation service returned no signature", details=payload)
        return DelegatedTransaction(transaction, bytes.fromhex(signature.removeprefix("0x")))

    async def aclose(self) -> None:
        await self._http.aclose()


def delegator_from_settings(settings: Settings) -> LocalDelegator | RemoteDelegator:
    if settings.delegator_url:
        return RemoteDelegator(settings.delegator_url, timeout=settings.http_timeout)
    return LocalDelegator(settings.delegator_key)


class Faucet:
    """Funds fresh accounts with VET and VTHO from a pre-funded wallet."""

    def __init__(
        self,
        funder: ThorWallet,
        *,
        vet_amount: int = DEFAULT_VET_AMOUNT,
        vtho_amount: int = DEFAULT_VTHO_AMOUNT,
    ) -> None:
        self.funder = funder
        self.vet_amount = vet_amount
        self.vtho_amount = vtho_amount

    @classmethod
    def from_settings(cls, client: AsyncThorClient, settings: Settings | None = None) -> "Faucet":
        settings = settings or Settings.from_env()
        return cls(ThorWallet(settings.faucet_key, client, settings=settings))

    def funding_clauses(self, address: str) -> list[Clause]:
        return [
            {"to": address, "value": hex(self.vet_amount), "data": "0x"},
            {"to": ENERGY_ADDRESS, "value": "0x0", "data": encode_energy_transfer(address, self.vtho_amount)},
        ]

    async def fund_account(self, address: str) -> Receipt:
        """Send VET and VTHO to *address* and return the confirmed receipt."""
        logger.info("Funding %s from %s", address, self.funder.address)
        result = await self.funder.send_clauses(self.funding_clauses(address), wait_for_receipt=True)
        if result.reverted:
            raise ThorestError(f"Funding transaction for {address} reverted", details=result.receipt)
        return result.receipt
