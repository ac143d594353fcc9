"""Top-level thorest client (sync + async)."""

from __future__ import annotations

from thorest.accounts import AccountsApi, AsyncAccountsApi
from thorest.blocks import AsyncBlocksApi, BlocksApi
from thorest.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncHttpClient, HttpClient
from thorest.node import AsyncNodeApi, NodeApi
from thorest.transactions import AsyncTransactionsApi, TransactionsApi


class ThorClient:
    """Synchronous client for the Thor node REST API.

    Usage::

        client = ThorClient("http://127.0.0.1:8669")
        res = client.accounts.get("0x0000000000000000000000000000456e65726779")
        assert res.http_code == 200
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.http = HttpClient(base_url, timeout=timeout, headers=headers)
        self.accounts = AccountsApi(self.http)
        self.blocks = BlocksApi(self.http)
        self.transactions = TransactionsApi(self.http)
        self.node = NodeApi(self.http)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ThorClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class AsyncThorClient:
    """Asynchronous client for the Thor node REST API.

    Usage::

        async with AsyncThorClient() as client:
            ref = await client.blocks.get_best_block_ref()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.http = AsyncHttpClient(base_url, timeout=timeout, headers=headers)
        self.accounts = AsyncAccountsApi(self.http)
        self.blocks = AsyncBlocksApi(self.http)
        self.transactions = AsyncTransactionsApi(self.http)
        self.node = AsyncNodeApi(self.http)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "AsyncThorClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
