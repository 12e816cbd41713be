"""Exception hierarchy for the Mars contract clients."""

from typing import Any


class MarsClientError(Exception):
    """Base exception for all contract client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(MarsClientError):
    """Raised when the node cannot be reached or the request times out."""

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.endpoint = endpoint
        self.status_code = status_code


class SigningError(MarsClientError):
    """Raised when the signing identity is unavailable or refuses to sign."""

    def __init__(self, message: str, sender: str | None = None, details: dict | None = None):
        super().__init__(message, details)
        self.sender = sender


class RemoteExecutionError(MarsClientError):
    """Raised when the contract rejects a query or aborts a state transition.

    ``diagnostic`` holds the text returned by the contract, unmodified.
    """

    def __init__(
        self,
        diagnostic: str,
        contract_address: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(diagnostic, details)
        self.diagnostic = diagnostic
        self.contract_address = contract_address


class InvalidClientError(MarsClientError):
    """Raised when an operation is attempted without a usable contract handle."""

    def __init__(self, message: str = "Invalid client", details: dict | None = None):
        super().__init__(message, details)


class ValidationError(MarsClientError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.field = field
        self.value = value
