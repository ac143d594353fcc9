#!/usr/bin/env python3
"""
Fund a fresh wallet from the solo faucet and send 0x100 wei to a new address.

Demonstrates the full wallet lifecycle: fund, build, sign, submit, confirm.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from thorest import AsyncThorClient, Faucet, Settings, ThorestError, ThorWallet, generate_address
from thorest.faucet import delegator_from_settings


def log(section: str, msg: str, data: object = None) -> None:
    print(f"[{section}] {msg}")
    if data is not None:
        print(json.dumps(data, indent=2, default=str))


async def main() -> None:
    settings = Settings.from_env()
    async with AsyncThorClient(settings.node_url, timeout=settings.http_timeout) as client:
        if not await client.node.wait_until_alive(timeout=30.0):
            print(f"Cannot reach node at {settings.node_url}", file=sys.stderr)
            sys.exit(1)

        faucet = Faucet.from_settings(client, settings)
        wallet = ThorWallet.new(client, faucet=faucet, delegator=delegator_from_settings(settings), settings=settings)
        log("wallet", f"Created {wallet.address}, waiting for funds …")
        await wallet.wait_for_funding()
        log("wallet", f"Funded: {await wallet.get_balance()} wei")

        recipient = generate_address()
        delegate = "--delegate" in sys.argv
        try:
            result = await wallet.send_clauses(
                [{"to": recipient, "value": "0x100", "data": "0x"}],
                wait_for_receipt=True,
                delegate=delegate,
            )
        except ThorestError as exc:
            print(f"Error ({exc.status}): {exc}", file=sys.stderr)
            sys.exit(1)

        log("tx", f"{type(result).__name__} in block {result.block_number}", result.receipt)
        account = (await client.accounts.get(recipient)).unwrap()
        log("recipient", f"{recipient} balance={account['balance']}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
