"""Transactions API — raw submission, lookup and receipt polling."""

from __future__ import annotations

import asyncio
import logging
import math
import time

from thorest.exceptions import ReceiptTimeoutError
from thorest.http import AsyncHttpClient, HttpClient, ThorResponse
from thorest.types import Receipt

logger = logging.getLogger(__name__)

DEFAULT_RECEIPT_TIMEOUT = 30.0
DEFAULT_RECEIPT_INTERVAL = 1.0


def _max_attempts(timeout: float, interval: float) -> int:
    if interval <= 0:
        raise ValueError("interval must be positive")
    return math.ceil(timeout / interval) + 1


def _raw_hex(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        return "0x" + raw.hex()
    return raw if raw.startswith("0x") else "0x" + raw


class TransactionsApi:
    """Synchronous Transactions API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def send_raw(self, raw: str | bytes) -> ThorResponse:
        """Submit an RLP-encoded signed transaction. Returns ``{id}`` on success."""
        return self._http.post("/transactions", {"raw": _raw_hex(raw)})

    def get(self, tx_id: str, *, pending: bool | None = None) -> ThorResponse:
        params = {"pending": str(pending).lower()} if pending is not None else None
        return self._http.get(f"/transactions/{tx_id}", params)

    def get_receipt(self, tx_id: str) -> ThorResponse:
        """Get the receipt of *tx_id*; the body is ``None`` until it is packed."""
        return self._http.get(f"/transactions/{tx_id}/receipt")

    def wait_for_receipt(
        self,
        tx_id: str,
        *,
        timeout: float = DEFAULT_RECEIPT_TIMEOUT,
        interval: float = DEFAULT_RECEIPT_INTERVAL,
    ) -> Receipt:
        """Poll ``get_receipt`` until the receipt exists.

        Only an absent receipt is retried; any error response is raised.
        Raises ``ReceiptTimeoutError`` if *timeout* seconds elapse.
        """
        deadline = time.monotonic() + timeout
        for _ in range(_max_attempts(timeout, interval)):
            receipt = self.get_receipt(tx_id).unwrap()
            if receipt is not None:
                return receipt
            if time.monotonic() >= deadline:
                break
            time.sleep(interval)
        raise ReceiptTimeoutError(tx_id, timeout)


class AsyncTransactionsApi:
    """Asynchronous Transactions API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def send_raw(self, raw: str | bytes) -> ThorResponse:
        return await self._http.post("/transactions", {"raw": _raw_hex(raw)})

    async def get(self, tx_id: str, *, pending: bool | None = None) -> ThorResponse:
        params = {"pending": str(pending).lower()} if pending is not None else None
        return await self._http.get(f"/transactions/{tx_id}", params)

    async def get_receipt(self, tx_id: str) -> ThorResponse:
        return await self._http.get(f"/transactions/{tx_id}/receipt")

    async def _poll_receipt(self, tx_id: str, attempts: int, interval: float) -> Receipt | None:
        for attempt in range(attempts):
            receipt = (await self.get_receipt(tx_id)).unwrap()
            if receipt is not None:
                return receipt
            logger.debug("Receipt for %s not available (attempt %d/%d)", tx_id, attempt + 1, attempts)
            if attempt + 1 < attempts:
                await asyncio.sleep(interval)
        return None

    async def wait_for_receipt(
        self,
        tx_id: str,
        *,
        timeout: float = DEFAULT_RECEIPT_TIMEOUT,
        interval: float = DEFAULT_RECEIPT_INTERVAL,
    ) -> Receipt:
        """Poll ``get_receipt`` until the receipt exists.

        The whole loop runs under *timeout*; when it expires the outstanding
        request is cancelled and ``ReceiptTimeoutError`` is raised.
        """
        attempts = _max_attempts(timeout, interval)
        try:
            receipt = await asyncio.wait_for(self._poll_receipt(tx_id, attempts, interval), timeout)
        except asyncio.TimeoutError:
            receipt = None
        if receipt is None:
            raise ReceiptTimeoutError(tx_id, timeout)
        return receipt
