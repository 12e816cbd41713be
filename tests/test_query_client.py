from __future__ import annotations

import asyncio

import pytest

from mars_client.client import ContractHandle, QueryClient
from mars_client.contracts.perps import PerpsQueryClient
from mars_client.contracts.perps.types import SignedDecimal
from mars_client.contracts.rover_health import RoverHealthQueryClient
from mars_client.contracts.swapper_base import SwapperBaseQueryClient
from mars_client.exceptions import InvalidClientError, RemoteExecutionError, TransportError
from mars_client.types import Coin

from conftest import CONTRACT, DummyTransport


@pytest.mark.asyncio
async def test_health_values_issues_one_query(transport: DummyTransport) -> None:
    transport.responses["health_values"] = {"above_max_ltv": False, "liquidatable": False}
    client = RoverHealthQueryClient(transport, CONTRACT)

    result = await client.health_values(account_id="2", action="default", kind="default")

    assert result == {"above_max_ltv": False, "liquidatable": False}
    assert transport.queries == [
        (CONTRACT, {"health_values": {"account_id": "2", "action": "default", "kind": "default"}})
    ]


@pytest.mark.asyncio
async def test_health_state_returns_tagged_union(transport: DummyTransport) -> None:
    transport.responses["health_state"] = "healthy"
    client = RoverHealthQueryClient(transport, CONTRACT)

    assert await client.health_state(account_id="1", action="liquidation", kind="default") == (
        "healthy"
    )


@pytest.mark.asyncio
async def test_missing_address_fails_without_network_call(transport: DummyTransport) -> None:
    client = RoverHealthQueryClient(transport, None)

    assert not client.is_valid()
    with pytest.raises(InvalidClientError):
        await client.config()
    assert transport.queries == []


@pytest.mark.asyncio
async def test_remote_errors_propagate_unmodified(transport: DummyTransport) -> None:
    error = RemoteExecutionError("account 9 not found", contract_address=CONTRACT)
    transport.error = error
    client = RoverHealthQueryClient(transport, CONTRACT)

    with pytest.raises(RemoteExecutionError) as excinfo:
        await client.health_values(account_id="9", action="default", kind="default")

    assert excinfo.value is error
    assert excinfo.value.diagnostic == "account 9 not found"


@pytest.mark.asyncio
async def test_transport_errors_propagate(transport: DummyTransport) -> None:
    transport.error = TransportError("LCD request timed out")
    client = SwapperBaseQueryClient(transport, CONTRACT)

    with pytest.raises(TransportError):
        await client.owner()


@pytest.mark.asyncio
async def test_failed_query_leaves_client_usable(transport: DummyTransport) -> None:
    client = SwapperBaseQueryClient(transport, CONTRACT)
    transport.error = TransportError("boom")
    with pytest.raises(TransportError):
        await client.routes()

    transport.error = None
    transport.responses["routes"] = []
    assert await client.routes(limit=1) == []
    assert client.contract_address == CONTRACT
    assert transport.queries[-1] == (CONTRACT, {"routes": {"limit": 1}})


@pytest.mark.asyncio
async def test_concurrent_queries_share_one_client(transport: DummyTransport) -> None:
    transport.responses["denom_state"] = {"enabled": True}
    client = PerpsQueryClient(transport, CONTRACT)

    results = await asyncio.gather(
        client.denom_state(denom="perps/ubtc"),
        client.denom_state(denom="perps/ueth"),
        client.vault_state(),
    )

    assert results[:2] == [{"enabled": True}, {"enabled": True}]
    assert len(transport.queries) == 3


@pytest.mark.asyncio
async def test_swapper_estimate_encodes_coin(transport: DummyTransport) -> None:
    transport.responses["estimate_exact_in_swap"] = {"amount": "99"}
    client = SwapperBaseQueryClient(transport, CONTRACT)

    result = await client.estimate_exact_in_swap(
        coin_in=Coin(amount="100", denom="uosmo"), denom_out="uatom"
    )

    assert result == {"amount": "99"}
    assert transport.queries[0][1] == {
        "estimate_exact_in_swap": {
            "coin_in": {"amount": "100", "denom": "uosmo"},
            "denom_out": "uatom",
        }
    }


@pytest.mark.asyncio
async def test_perps_position_fees(transport: DummyTransport) -> None:
    client = PerpsQueryClient(transport, CONTRACT)

    await client.position_fees(
        account_id="4", denom="perps/ubtc", new_size=SignedDecimal("0.5", negative=True)
    )

    assert transport.queries[0][1] == {
        "position_fees": {
            "account_id": "4",
            "denom": "perps/ubtc",
            "new_size": {"abs": "0.5", "negative": True},
        }
    }


def test_from_handle_keeps_address(transport: DummyTransport) -> None:
    handle = ContractHandle(transport, CONTRACT)

    client = RoverHealthQueryClient.from_handle(handle)

    assert isinstance(client, QueryClient)
    assert client.handle == handle
    assert client.is_valid()
