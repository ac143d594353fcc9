"""Blocks API — block lookup and block references."""

from __future__ import annotations

from thorest.exceptions import ChainLookupError
from thorest.http import AsyncHttpClient, HttpClient, ThorResponse


def _block_ref(res: ThorResponse, revision: str) -> str:
    if not res.success or not isinstance(res.body, dict) or not res.body.get("id"):
        raise ChainLookupError(f"Could not get block {revision}", status=res.http_code, details=res.body)
    # A block ref is the first 8 bytes of the block id.
    return res.body["id"][:18]


class BlocksApi:
    """Synchronous Blocks API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get(self, revision: str | int, *, expanded: bool | None = None) -> ThorResponse:
        """Get a block by id, number, ``best`` or ``finalized``.

        The body is ``None`` when the node does not know the block.
        """
        params = {"expanded": str(expanded).lower()} if expanded is not None else None
        return self._http.get(f"/blocks/{revision}", params)

    def get_block_ref(self, revision: str | int = "best") -> str:
        return _block_ref(self.get(revision), str(revision))

    def get_best_block_ref(self) -> str:
        """Return the block reference of the current best block."""
        return self.get_block_ref("best")


class AsyncBlocksApi:
    """Asynchronous Blocks API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get(self, revision: str | int, *, expanded: bool | None = None) -> ThorResponse:
        params = {"expanded": str(expanded).lower()} if expanded is not None else None
        return await self._http.get(f"/blocks/{revision}", params)

    async def get_block_ref(self, revision: str | int = "best") -> str:
        return _block_ref(await self.get(revision), str(revision))

    async def get_best_block_ref(self) -> str:
        return await self.get_block_ref("best")
