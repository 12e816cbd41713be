"""Query and execute clients shared by every generated contract module."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .codec import Variant, encode_msg
from .exceptions import InvalidClientError, SigningError
from .transport.base import QueryTransport, SigningTransport
from .types import AUTO_FEE, Coin, ExecuteResult, Fee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractHandle:
    """A transport bound to a contract address."""

    transport: QueryTransport
    contract_address: str | None = None

    def is_valid(self) -> bool:
        return bool(self.contract_address)

    def require_address(self) -> str:
        if not self.contract_address:
            raise InvalidClientError(
                "Invalid client: no contract address configured",
                details={"transport": type(self.transport).__name__},
            )
        return self.contract_address


@dataclass(frozen=True)
class SigningIdentity:
    """The sender on whose behalf executions are signed."""

    sender: str
    transport: SigningTransport


class QueryClient:
    """Read-only access to a contract.

    Contract modules subclass this and add one coroutine per query variant.
    Instances hold no mutable state, so one client can serve any number of
    concurrent calls.
    """

    def __init__(self, transport: QueryTransport, contract_address: str | None) -> None:
        self._handle = ContractHandle(transport=transport, contract_address=contract_address)

    @classmethod
    def from_handle(cls, handle: ContractHandle) -> QueryClient:
        return cls(handle.transport, handle.contract_address)

    @property
    def handle(self) -> ContractHandle:
        return self._handle

    @property
    def contract_address(self) -> str | None:
        return self._handle.contract_address

    def is_valid(self) -> bool:
        return self._handle.is_valid()

    async def smart_query(self, msg: Variant) -> Any:
        """Encode ``msg`` and issue exactly one read against the contract."""

        address = self._handle.require_address()
        envelope = encode_msg(msg)
        logger.debug("Query %s on %s", msg.wire_name, address)
        return await self._handle.transport.query(address, envelope)


Q = TypeVar("Q", bound=QueryClient)


class ExecuteClient(Generic[Q]):
    """Signing access to a contract, composed from a query client and an identity.

    Reads go through :attr:`query`; the execute client never re-implements them.
    """

    def __init__(self, query: Q, identity: SigningIdentity) -> None:
        self.query = query
        self.identity = identity

    @property
    def contract_address(self) -> str | None:
        return self.query.contract_address

    @property
    def sender(self) -> str:
        return self.identity.sender

    async def execute(
        self,
        msg: Variant,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        """Sign and submit exactly one execution of ``msg``.

        ``fee``, ``memo`` and ``funds`` are forwarded to the transport unmodified.
        """

        address = self.query.handle.require_address()
        if not self.identity.sender:
            raise SigningError("No sender configured for signing", sender=self.identity.sender)

        envelope = encode_msg(msg)
        logger.debug("Execute %s on %s from %s", msg.wire_name, address, self.identity.sender)

        result = await self.identity.transport.execute(
            self.identity.sender,
            address,
            envelope,
            fee,
            memo,
            funds,
        )
        logger.info(
            "Executed %s on %s hash=%s height=%s",
            msg.wire_name,
            address,
            result.transaction_hash,
            result.height,
        )
        return result
