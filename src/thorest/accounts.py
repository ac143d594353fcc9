"""Accounts API — balance, code, storage and clause inspection."""

from __future__ import annotations

from typing import Any

from thorest.http import AsyncHttpClient, HttpClient, ThorResponse
from thorest.types import Clause


def _inspect_body(
    clauses: list[Clause],
    caller: str | None,
    gas: int | None,
) -> dict[str, Any]:
    body: dict[str, Any] = {"clauses": clauses}
    if caller is not None:
        body["caller"] = caller
    if gas is not None:
        body["gas"] = gas
    return body


class AccountsApi:
    """Synchronous Accounts API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get(self, address: str, revision: str | None = None) -> ThorResponse:
        """Get ``{balance, energy, hasCode}`` for *address*."""
        return self._http.get(f"/accounts/{address}", {"revision": revision})

    def get_code(self, address: str, revision: str | None = None) -> ThorResponse:
        """Get the deployed bytecode of *address* (``0x`` when none)."""
        return self._http.get(f"/accounts/{address}/code", {"revision": revision})

    def get_storage(self, address: str, key: str, revision: str | None = None) -> ThorResponse:
        """Get the storage slot *key* of *address*."""
        return self._http.get(f"/accounts/{address}/storage/{key}", {"revision": revision})

    def inspect(
        self,
        clauses: list[Clause],
        *,
        caller: str | None = None,
        revision: str | None = None,
        gas: int | None = None,
    ) -> ThorResponse:
        """Simulate *clauses* against the state at *revision* without submitting."""
        return self._http.post("/accounts/*", _inspect_body(clauses, caller, gas), {"revision": revision})


class AsyncAccountsApi:
    """Asynchronous Accounts API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get(self, address: str, revision: str | None = None) -> ThorResponse:
        return await self._http.get(f"/accounts/{address}", {"revision": revision})

    async def get_code(self, address: str, revision: str | None = None) -> ThorResponse:
        return await self._http.get(f"/accounts/{address}/code", {"revision": revision})

    async def get_storage(self, address: str, key: str, revision: str | None = None) -> ThorResponse:
        return await self._http.get(f"/accounts/{address}/storage/{key}", {"revision": revision})

    async def inspect(
        self,
        clauses: list[Clause],
        *,
        caller: str | None = None,
        revision: str | None = None,
        gas: int | None = None,
    ) -> ThorResponse:
        return await self._http.post("/accounts/*", _inspect_body(clauses, caller, gas), {"revision": revision})
