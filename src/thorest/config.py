"""Environment-driven settings for the harness.

Environment variables:
    THOR_NODE_URL: node REST endpoint (default: http://127.0.0.1:8669)
    THOR_HTTP_TIMEOUT: per-request timeout in seconds (default: 30)
    THOR_RECEIPT_TIMEOUT: receipt polling budget in seconds (default: 30)
    THOR_RECEIPT_INTERVAL: delay between receipt polls in seconds (default: 1)
    THOR_TX_EXPIRATION: transaction expiration in blocks (default: 1000)
    THOR_TX_GAS: gas limit for harness transactions (default: 1000000)
    THOR_FAUCET_KEY: hex private key of the funding account
    THOR_DELEGATOR_KEY: hex private key used for local fee delegation
    THOR_DELEGATOR_URL: sponsorship service URL; overrides THOR_DELEGATOR_KEY
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from thorest.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from thorest.transactions import DEFAULT_RECEIPT_INTERVAL, DEFAULT_RECEIPT_TIMEOUT

# First two accounts of the Thor solo genesis.
SOLO_FAUCET_KEY = "99f0500549792796c14fed62011a51081dc5b5e68fe8bd8a13b86be829c4fd36"
SOLO_DELEGATOR_KEY = "7b067f53d350f1cf20ec13df416b7b73e88a1dc7331bc904b92108b1e76a08b1"

DEFAULT_EXPIRATION = 1000
DEFAULT_GAS = 1_000_000


@dataclass(frozen=True)
class Settings:
    node_url: str = DEFAULT_BASE_URL
    http_timeout: float = DEFAULT_TIMEOUT
    receipt_timeout: float = DEFAULT_RECEIPT_TIMEOUT
    receipt_interval: float = DEFAULT_RECEIPT_INTERVAL
    expiration: int = DEFAULT_EXPIRATION
    gas: int = DEFAULT_GAS
    faucet_key: str = SOLO_FAUCET_KEY
    delegator_key: str = SOLO_DELEGATOR_KEY
    delegator_url: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            node_url=env.get("THOR_NODE_URL", DEFAULT_BASE_URL),
            http_timeout=float(env.get("THOR_HTTP_TIMEOUT", DEFAULT_TIMEOUT)),
            receipt_timeout=float(env.get("THOR_RECEIPT_TIMEOUT", DEFAULT_RECEIPT_TIMEOUT)),
            receipt_interval=float(env.get("THOR_RECEIPT_INTERVAL", DEFAULT_RECEIPT_INTERVAL)),
            expiration=int(env.get("THOR_TX_EXPIRATION", DEFAULT_EXPIRATION)),
            gas=int(env.get("THOR_TX_GAS", DEFAULT_GAS)),
            faucet_key=env.get("THOR_FAUCET_KEY", SOLO_FAUCET_KEY),
            delegator_key=env.get("THOR_DELEGATOR_KEY", SOLO_DELEGATOR_KEY),
            delegator_url=env.get("THOR_DELEGATOR_URL") or None,
        )
