"""Shared test fixtures — a mock Thor node on pytest-httpserver."""

from __future__ import annotations

import json
from typing import Any

import pytest
import pytest_asyncio
from pytest_httpserver import HTTPServer
from werkzeug import Request, Response

from thorest.client import AsyncThorClient
from thorest.config import Settings

MAINNET_GENESIS_ID = "0x00000000851caf3cfdb6e899cf5958bfb1ac3413d346d43539627e6be7ec1b4a"
TESTNET_GENESIS_ID = "0x000000000b2bce3c70bc649a02749e8687721b09ed2e15997f466536b20bb127"
BEST_BLOCK_ID = "0x0000002a" + "ab" * 28
TX_ID = "0x" + "7e" * 32

FAST_SETTINGS = Settings(receipt_timeout=2.0, receipt_interval=0.05)


def pytest_addoption(parser):
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="Run end-to-end tests against the node at THOR_NODE_URL",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-e2e"):
        return
    skip_e2e = pytest.mark.skip(reason="Need --run-e2e option to run")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


def json_response(data: Any, status: int = 200) -> Response:
    """Build a Werkzeug JSON response."""
    return Response(
        json.dumps(data),
        status=status,
        content_type="application/json",
    )


def request_json(request: Request) -> Any:
    return json.loads(request.get_data(as_text=True))


def make_receipt(*, reverted: bool = False, contract_address: str | None = None, block_number: int = 42) -> dict[str, Any]:
    return {
        "gasUsed": 21000,
        "gasPayer": "0x435933c8064b4ae76be665428e0307ef2ccfbd68",
        "paid": "0x1236efcbcbb340000",
        "reward": "0x576e189f04f60000",
        "reverted": reverted,
        "meta": {
            "blockID": BEST_BLOCK_ID,
            "blockNumber": block_number,
            "blockTimestamp": 1700000000,
            "txID": TX_ID,
            "txOrigin": "0xf077b491b355e64048ce21e3a6fc4751eeea77fa",
        },
        "outputs": [] if reverted else [{"contractAddress": contract_address, "events": [], "transfers": []}],
    }


def serve_chain(httpserver: HTTPServer, genesis_id: str = MAINNET_GENESIS_ID) -> None:
    """Register the genesis and best blocks."""
    httpserver.expect_request("/blocks/0").respond_with_json({"number": 0, "id": genesis_id})
    httpserver.expect_request("/blocks/best").respond_with_json({"number": 42, "id": BEST_BLOCK_ID})


def serve_simulation(httpserver: HTTPServer, *, reverted: bool = False) -> None:
    httpserver.expect_request("/accounts/*", method="POST").respond_with_json([
        {"data": "0x", "events": [], "transfers": [], "gasUsed": 0, "reverted": reverted,
         "vmError": "execution reverted" if reverted else ""},
    ])


@pytest_asyncio.fixture()
async def async_client(httpserver: HTTPServer):
    async with AsyncThorClient(httpserver.url_for("")) as client:
        yield client
