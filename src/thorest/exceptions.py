"""Exceptions raised by the thorest client and wallet helper."""

from __future__ import annotations

from typing import Any


class ThorestError(Exception):
    """Raised when the Thor node returns an error response."""

    def __init__(
        self,
        message: str,
        *,
        status: int = 0,
        code: str | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.details = details

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, code={self.code!r}, message={str(self)!r})"


class ValidationFailure(ThorestError):
    """The node rejected a request as malformed (HTTP 400)."""

    def __init__(self, message: str, *, details: Any = None) -> None:
        super().__init__(message, status=400, code="BAD_REQUEST", details=details)


class ChainLookupError(ThorestError):
    """The genesis or best block could not be resolved."""


class SigningError(ThorestError):
    """A transaction could not be signed (malformed key or hash)."""


class SubmissionError(ThorestError):
    """The node refused a raw transaction."""

    def __init__(self, http_code: int, message: str) -> None:
        super().__init__(message, status=http_code, code="TX_REJECTED")
        self.http_code = http_code
        self.message = message


class ReceiptTimeoutError(ThorestError):
    """No receipt was observed for a transaction within the polling budget."""

    def __init__(self, tx_id: str, timeout: float) -> None:
        super().__init__(f"Receipt for {tx_id} not found within {timeout}s", code="RECEIPT_TIMEOUT")
        self.tx_id = tx_id
        self.timeout = timeout
