"""Transport interfaces the contract clients are written against."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from ..codec import Envelope
from ..types import Coin, ExecuteResult, Fee


class QueryTransport(ABC):
    """Side-effect-free smart queries against a contract."""

    @abstractmethod
    async def query(self, contract_address: str, msg: Envelope) -> Any:
        pass


class SigningTransport(QueryTransport):
    """A query transport that can also sign and broadcast executions."""

    @abstractmethod
    async def execute(
        self,
        sender: str,
        contract_address: str,
        msg: Envelope,
        fee: Fee,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        pass
