from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from mars_client.codec import Envelope, variant_tag
from mars_client.transport.base import SigningTransport
from mars_client.types import Attribute, Coin, Event, ExecuteResult, Fee

CONTRACT = "neutron1contractaddressxyz"
SENDER = "neutron1senderaddressabc"


class DummyTransport(SigningTransport):
    """Records every call and replies from a per-variant table."""

    def __init__(self) -> None:
        self.responses: dict[str, Any] = {}
        self.error: Exception | None = None
        self.queries: list[tuple[str, Envelope]] = []
        self.executions: list[dict[str, Any]] = []

    async def query(self, contract_address: str, msg: Envelope) -> Any:
        self.queries.append((contract_address, msg))
        if self.error is not None:
            raise self.error
        return self.responses.get(variant_tag(msg))

    async def execute(
        self,
        sender: str,
        contract_address: str,
        msg: Envelope,
        fee: Fee,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        self.executions.append(
            {
                "sender": sender,
                "contract_address": contract_address,
                "msg": msg,
                "fee": fee,
                "memo": memo,
                "funds": funds,
            }
        )
        if self.error is not None:
            raise self.error
        return ExecuteResult(
            transaction_hash="A1B2C3",
            height=42,
            events=[Event("wasm", [Attribute("action", variant_tag(msg))])],
        )


@pytest.fixture
def transport() -> DummyTransport:
    return DummyTransport()
