"""Transports used by the contract clients."""

from .base import QueryTransport, SigningTransport
from .lcd import LcdQueryTransport

__all__ = [
    "QueryTransport",
    "SigningTransport",
    "LcdQueryTransport",
]
