"""Tests for AccountsApi."""

from pytest_httpserver import HTTPServer

from thorest.client import ThorClient

ENERGY = "0x0000000000000000000000000000456e65726779"


class TestAccountsApi:
    def test_get(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(f"/accounts/{ENERGY}").respond_with_json({
            "balance": "0x0", "energy": "0x0", "hasCode": True,
        })
        client = ThorClient(httpserver.url_for(""))
        res = client.accounts.get(ENERGY)
        assert res.http_code == 200
        assert res.body["hasCode"] is True

    def test_get_with_revision(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(f"/accounts/{ENERGY}", query_string="revision=finalized").respond_with_json({
            "balance": "0x100", "energy": "0x0", "hasCode": False,
        })
        client = ThorClient(httpserver.url_for(""))
        res = client.accounts.get(ENERGY, "finalized")
        assert res.body["balance"] == "0x100"

    def test_invalid_address(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request("/accounts/0x00000000").respond_with_data("address: invalid length", status=400)
        client = ThorClient(httpserver.url_for(""))
        res = client.accounts.get("0x00000000")
        assert res.success is False
        assert res.http_code == 400

    def test_get_code(self, httpserver: HTTPServer) -> None:
        httpserver.expect_request(f"/accounts/{ENERGY}/code", query_string="revision=41").respond_with_json({
            "code": "0x",
        })
        client = ThorClient(httpserver.url_for(""))
        res = client.accounts.get_code(ENERGY, "41")
        assert res.body == {"code": "0x"}

    def test_get_storage(self, httpserver: HTTPServer) -> None:
        key = "0x" + "00" * 32
        httpserver.expect_request(f"/accounts/{ENERGY}/storage/{key}").respond_with_json({"value": key})
        client = ThorClient(httpserver.url_for(""))
        assert client.accounts.get_storage(ENERGY, key).body == {"value": key}

    def test_inspect(self, httpserver: HTTPServer) -> None:
        clauses = [{"to": ENERGY, "value": "0x0", "data": "0x"}]
        httpserver.expect_request(
            "/accounts/*",
            method="POST",
            query_string="revision=best",
            json={"clauses": clauses, "caller": "0x" + "11" * 20},
        ).respond_with_json([
            {"data": "0x", "events": [], "transfers": [], "gasUsed": 0, "reverted": False, "vmError": ""},
        ])
        client = ThorClient(httpserver.url_for(""))
        res = client.accounts.inspect(clauses, caller="0x" + "11" * 20, revision="best")
        assert res.body[0]["reverted"] is False
