"""Low-level HTTP client for the Thor node REST API (sync + async)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx

from thorest.exceptions import ThorestError, ValidationFailure

DEFAULT_BASE_URL = "http://127.0.0.1:8669"
DEFAULT_TIMEOUT = 30.0


def _build_url(base: str, path: str, params: dict[str, Any] | None = None) -> str:
    url = base.rstrip("/") + path
    if params:
        filtered = {k: v for k, v in params.items() if v is not None}
        if filtered:
            url += "?" + urlencode(filtered, doseq=True)
    return url


@dataclass(frozen=True)
class ThorResponse:
    """Outcome of one HTTP exchange with the node.

    Non-2xx responses are returned rather than raised so that callers can
    assert on the status code. ``unwrap`` converts a failure into an exception.
    """

    success: bool
    http_code: int
    http_message: str | None
    body: Any

    def unwrap(self) -> Any:
        if self.success:
            return self.body
        message = self.http_message or f"HTTP {self.http_code}"
        if self.http_code == 400:
            raise ValidationFailure(message, details=self.body)
        raise ThorestError(message, status=self.http_code, details=self.body)


def _to_response(resp: httpx.Response) -> ThorResponse:
    try:
        body = resp.json()
    except ValueError:
        body = resp.text or None
    if resp.is_success:
        return ThorResponse(True, resp.status_code, None, body)
    return ThorResponse(False, resp.status_code, resp.text.strip() or resp.reason_phrase, body)


# ---------------------------------------------------------------------------
# Synchronous client
# ---------------------------------------------------------------------------

class HttpClient:
    """Synchronous HTTP client wrapping ``httpx.Client``."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        _headers: dict[str, str] = {"Content-Type": "application/json"}
        if headers:
            _headers.update(headers)
        self._client = httpx.Client(timeout=timeout, headers=_headers)

    # -- HTTP verbs ----------------------------------------------------------

    def get(self, path: str, params: dict[str, Any] | None = None) -> ThorResponse:
        url = _build_url(self.base_url, path, params)
        return _to_response(self._client.get(url))

    def post(
        self,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> ThorResponse:
        url = _build_url(self.base_url, path, params)
        return _to_response(self._client.post(url, json=body))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Asynchronous client
# ---------------------------------------------------------------------------

class AsyncHttpClient:
    """Asynchronous HTTP client wrapping ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        _headers: dict[str, str] = {"Content-Type": "application/json"}
        if headers:
            _headers.update(headers)
        self._client = httpx.AsyncClient(timeout=timeout, headers=_headers)

    # -- HTTP verbs ----------------------------------------------------------

    async def get(self, path: str, params: dict[str, Any] | None = None) -> ThorResponse:
        url = _build_url(self.base_url, path, params)
        return _to_response(await self._client.get(url))

    async def post(
        self,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> ThorResponse:
        url = _build_url(self.base_url, path, params)
        return _to_response(await self._client.post(url, json=body))

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
