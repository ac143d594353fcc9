"""Node API — peers and liveness."""

from __future__ import annotations

import asyncio
import time

import httpx

from thorest.http import AsyncHttpClient, HttpClient, ThorResponse


class NodeApi:
    """Synchronous Node API."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def get_peers(self) -> ThorResponse:
        """List the peers the node is connected to."""
        return self._http.get("/node/network/peers")

    def is_alive(self) -> bool:
        """Return ``True`` when the node serves its best block."""
        try:
            return self._http.get("/blocks/best").success
        except httpx.HTTPError:
            return False

    def wait_until_alive(self, *, timeout: float = 60.0, interval: float = 1.0) -> bool:
        deadline = time.monotonic() + timeout
        while True:
            if self.is_alive():
                return True
            if time.monotonic() >= deadline:
                return False
            time.sleep(interval)


class AsyncNodeApi:
    """Asynchronous Node API."""

    def __init__(self, http: AsyncHttpClient) -> None:
        self._http = http

    async def get_peers(self) -> ThorResponse:
        return await self._http.get("/node/network/peers")

    async def is_alive(self) -> bool:
        try:
            return (await self._http.get("/blocks/best")).success
        except httpx.HTTPError:
            return False

    async def wait_until_alive(self, *, timeout: float = 60.0, interval: float = 1.0) -> bool:
        deadline = time.monotonic() + timeout
        while True:
            if await self.is_alive():
                return True
            if time.monotonic() >= deadline:
                return False
            await asyncio.sleep(interval)
