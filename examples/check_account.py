#!/usr/bin/env python3
"""Quick helper: print an account's balance, energy and code flag."""

from __future__ import annotations

import os
import sys

from thorest import ThorClient

NODE_URL = os.environ.get("THOR_NODE_URL", "http://127.0.0.1:8669")


def main() -> None:
    if len(sys.argv) < 2:
        print("usage: check_account.py <address> [revision]", file=sys.stderr)
        sys.exit(2)
    address = sys.argv[1]
    revision = sys.argv[2] if len(sys.argv) > 2 else None

    with ThorClient(NODE_URL) as client:
        res = client.accounts.get(address, revision)

    if not res.success:
        print(f"Error ({res.http_code}): {res.http_message}", file=sys.stderr)
        sys.exit(1)

    account = res.body
    print(f"Balance : {int(account['balance'], 16)} wei")
    print(f"Energy  : {int(account['energy'], 16)} wei")
    print(f"HasCode : {account['hasCode']}")


if __name__ == "__main__":
    main()
