"""thorest — integration-test harness and wallet helper for the Thor REST API."""

from thorest.client import AsyncThorClient, ThorClient
from thorest.config import Settings
from thorest.exceptions import (
    ChainLookupError,
    ReceiptTimeoutError,
    SigningError,
    SubmissionError,
    ThorestError,
    ValidationFailure,
)
from thorest.faucet import DelegatedTransaction, Faucet, LocalDelegator, RemoteDelegator
from thorest.http import AsyncHttpClient, HttpClient, ThorResponse
from thorest.keys import KeyPair, address_from_private_key, generate_address, generate_addresses
from thorest.results import Confirmed, Reverted, Submitted
from thorest.transaction import Transaction
from thorest.wallet import ThorWallet

__all__ = [
    "ThorClient",
    "AsyncThorClient",
    "HttpClient",
    "AsyncHttpClient",
    "ThorResponse",
    "Settings",
    "ThorWallet",
    "Faucet",
    "LocalDelegator",
    "RemoteDelegator",
    "DelegatedTransaction",
    "Transaction",
    "KeyPair",
    "address_from_private_key",
    "generate_address",
    "generate_addresses",
    "Submitted",
    "Confirmed",
    "Reverted",
    "ThorestError",
    "ChainLookupError",
    "SigningError",
    "SubmissionError",
    "ReceiptTimeoutError",
    "ValidationFailure",
]

__version__ = "0.1.0"
