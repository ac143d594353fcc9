"""Tagged outcomes of :meth:`ThorWallet.send_clauses`."""

from __future__ import annotations

from dataclasses import dataclass

from thorest.types import Receipt


@dataclass(frozen=True)
class Submitted:
    """The node accepted the transaction; no receipt was awaited."""

    id: str


@dataclass(frozen=True)
class Confirmed:
    """The transaction was included in a block."""

    receipt: Receipt

    @property
    def id(self) -> str:
        return self.receipt["meta"]["txID"]

    @property
    def reverted(self) -> bool:
        return bool(self.receipt.get("reverted"))

    @property
    def block_number(self) -> int:
        return self.receipt["meta"]["blockNumber"]

    @property
    def contract_address(self) -> str | None:
        outputs = self.receipt.get("outputs") or []
        if not outputs:
            return None
        return outputs[0].get("contractAddress")


@dataclass(frozen=True)
class Reverted(Confirmed):
    """Included in a block, but execution reverted on chain."""


SendResult = Submitted | Confirmed


def confirmed_from_receipt(receipt: Receipt) -> Confirmed:
    if receipt.get("reverted"):
        return Reverted(receipt)
    return Confirmed(receipt)
