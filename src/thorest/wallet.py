"""ThorWallet — build, sign, submit and confirm transactions for one key pair."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING

import httpx

from thorest.client import AsyncThorClient
from thorest.config import Settings
from thorest.exceptions import ChainLookupError, SubmissionError, ThorestError
from thorest.keys import KeyPair, generate_key_pair, sign_hash
from thorest.results import Confirmed, SendResult, Submitted, confirmed_from_receipt
from thorest.transaction import Transaction, generate_nonce
from thorest.types import Account, Clause, Receipt, TransactionBody

if TYPE_CHECKING:
    from thorest.faucet import Delegator, Faucet

logger = logging.getLogger(__name__)


def _log_funding_failure(task: asyncio.Future[Receipt]) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Funding failed: %s", exc)


class ThorWallet:
    """A key pair bound to a node client.

    A wallet created with a faucet starts funding in the background;
    ``send_clauses`` awaits that funding before spending, and other
    balance-dependent callers should ``await wallet.wait_for_funding()``.
    """

    def __init__(
        self,
        private_key: bytes | str,
        client: AsyncThorClient,
        *,
        funding: asyncio.Future[Receipt] | None = None,
        delegator: Delegator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.key_pair = KeyPair.from_private_key(private_key)
        self.client = client
        self.funding = funding
        self.delegator = delegator
        self.settings = settings or Settings()

    def __repr__(self) -> str:
        return f"ThorWallet(address={self.address!r})"

    @property
    def address(self) -> str:
        return self.key_pair.address

    @property
    def private_key(self) -> bytes:
        return self.key_pair.private_key

    @classmethod
    def new(
        cls,
        client: AsyncThorClient,
        *,
        faucet: Faucet | None = None,
        delegator: Delegator | None = None,
        settings: Settings | None = None,
    ) -> "ThorWallet":
        """Create a wallet with a fresh key pair.

        With a *faucet*, funding is scheduled on the running event loop and the
        wallet is returned immediately, so this must be called from a coroutine.
        A funding failure is logged when it happens and raised again from
        ``wait_for_funding``.
        """
        key_pair = generate_key_pair()
        funding = None
        if faucet is not None:
            funding = asyncio.ensure_future(faucet.fund_account(key_pair.address))
            funding.add_done_callback(_log_funding_failure)
        return cls(key_pair.private_key, client, funding=funding, delegator=delegator, settings=settings)

    async def wait_for_funding(self) -> Receipt | None:
        """Return the funding receipt, or ``None`` for an unfunded wallet."""
        if self.funding is None:
            return None
        return await self.funding

    # -- Reads ---------------------------------------------------------------

    async def get_account(self, revision: str | None = None) -> Account:
        return (await self.client.accounts.get(self.address, revision)).unwrap()

    async def get_balance(self, revision: str | None = None) -> int:
        account = await self.get_account(revision)
        return int(account["balance"], 16)

    # -- Transaction lifecycle -----------------------------------------------

    async def build_transaction(self, clauses: list[Clause]) -> TransactionBody:
        """Build a body against the current best block.

        Clauses are passed through untouched; the node validates them.
        """
        best_block_ref = await self.client.blocks.get_best_block_ref()
        genesis = await self.client.blocks.get(0)
        if not genesis.success or not isinstance(genesis.body, dict) or not genesis.body.get("id"):
            raise ChainLookupError("Could not get genesis block", status=genesis.http_code, details=genesis.body)

        return {
            "blockRef": best_block_ref,
            "expiration": self.settings.expiration,
            "clauses": clauses,
            "gasPriceCoef": 0,
            "gas": self.settings.gas,
            "dependsOn": None,
            "nonce": generate_nonce(),
            "chainTag": int(genesis.body["id"][-2:], 16),
        }

    def sign_transaction(
        self,
        transaction: Transaction | TransactionBody,
        delegation_signature: bytes | None = None,
    ) -> Transaction:
        """Sign with this wallet's key, appending the fee payer's signature if given."""
        if not isinstance(transaction, Transaction):
            transaction = Transaction(transaction)
        signature = sign_hash(transaction.signing_hash(), self.private_key)
        if delegation_signature:
            return transaction.with_signature(signature + delegation_signature)
        return transaction.with_signature(signature)

    def sign_and_encode(
        self,
        transaction: Transaction | TransactionBody,
        delegation_signature: bytes | None = None,
    ) -> str:
        """Sign and RLP-encode, returning hex without the ``0x`` prefix."""
        return self.sign_transaction(transaction, delegation_signature).encode().hex()

    async def warn_if_simulation_fails(self, clauses: list[Clause]) -> bool:
        """Dry-run *clauses* as this wallet and log a warning if any would revert.

        Never raises: a failed simulation must not block submission.
        """
        try:
            res = await self.client.accounts.inspect(clauses, caller=self.address, gas=self.settings.gas)
        except httpx.HTTPError as exc:
            logger.warning("Simulation request failed for %s: %s", self.address, exc)
            return False
        if not res.success:
            logger.warning("Simulation rejected (HTTP %s): %s", res.http_code, res.http_message)
            return False

        if not isinstance(res.body, list):
            logger.warning("Simulation returned an unexpected body: %r", res.body)
            return False

        ok = True
        for index, result in enumerate(res.body):
            if not isinstance(result, dict):
                logger.warning("Clause %d simulation result is malformed: %r", index, result)
                ok = False
                continue
            if result.get("reverted"):
                ok = False
                logger.warning("Clause %d would revert: %s", index, result.get("vmError") or "no reason given")
        return ok

    async def send_clauses(
        self,
        clauses: list[Clause],
        wait_for_receipt: bool = True,
        delegate: bool = False,
    ) -> SendResult:
        """Build, sign and submit *clauses* in one transaction.

        Returns ``Submitted`` when *wait_for_receipt* is false, otherwise
        ``Confirmed`` (``Reverted`` if execution reverted on chain).
        """
        await self.wait_for_funding()

        body = await self.build_transaction(clauses)
        await self.warn_if_simulation_fails(clauses)

        if delegate:
            if self.delegator is None:
                raise ValueError("delegate=True requires a wallet created with a delegator")
            delegated = await self.delegator.delegate_transaction(body, self.address)
            encoded = self.sign_and_encode(delegated.transaction, delegated.signature)
        else:
            encoded = self.sign_and_encode(Transaction(body))

        res = await self.client.transactions.send_raw(f"0x{encoded}")
        if not res.success:
            raise SubmissionError(res.http_code, res.http_message or "Unknown Error sending transaction")

        tx_id = res.body["id"]
        logger.debug("Submitted %s from %s (delegated=%s)", tx_id, self.address, delegate)
        if not wait_for_receipt:
            return Submitted(tx_id)

        receipt = await self.client.transactions.wait_for_receipt(
            tx_id,
            timeout=self.settings.receipt_timeout,
            interval=self.settings.receipt_interval,
        )
        result = confirmed_from_receipt(receipt)
        if result.reverted:
            logger.error("Transaction reverted %s", json.dumps(receipt, indent=2))
        return result

    async def deploy_contract(self, bytecode: str, constructor_data: str = "") -> str:
        """Deploy *bytecode* and return the created contract's address."""
        data = bytecode + constructor_data.removeprefix("0x")
        result = await self.send_clauses([{"to": None, "value": "0x0", "data": data}], wait_for_receipt=True)
        if not isinstance(result, Confirmed):
            raise ThorestError(f"Contract deployment {result.id} was not confirmed")
        if result.reverted or not result.contract_address:
            raise ThorestError("Contract deployment reverted", details=result.receipt)
        return result.contract_address
