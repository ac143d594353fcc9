"""Built-in contract addresses and call data helpers."""

from __future__ import annotations

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector

CONTRACT_ADDRESSES: dict[str, str] = {
    "authority": "0x0000000000000000000000417574686f72697479",
    "energy": "0x0000000000000000000000000000456e65726779",
    "executor": "0x0000000000000000000000004578656375746f72",
    "extension": "0x0000000000000000000000457874656e73696f6e",
    "params": "0x0000000000000000000000000000506172616d73",
    "prototype": "0x000000000000000000000000000050726f746f74",
}

ENERGY_ADDRESS = CONTRACT_ADDRESSES["energy"]

_TRANSFER_SELECTOR = function_signature_to_4byte_selector("transfer(address,uint256)")


def encode_energy_transfer(to: str, amount: int) -> str:
    """Call data for ``Energy.transfer(to, amount)`` as ``0x`` hex."""
    return "0x" + (_TRANSFER_SELECTOR + encode(["address", "uint256"], [to, amount])).hex()
