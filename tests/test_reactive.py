from __future__ import annotations

import asyncio

import pytest

from mars_client.contracts.perps import PerpsQueries, PerpsQueryClient
from mars_client.contracts.rover_health import (
    RoverHealthClient,
    RoverHealthMutations,
    RoverHealthQueries,
    RoverHealthQueryClient,
    query_keys,
)
from mars_client.contracts.rover_health.types import UpdateConfig
from mars_client.contracts.swapper_base import SwapperBaseQueries, SwapperBaseQueryClient
from mars_client.contracts.swapper_base.types import TransferResult
from mars_client.exceptions import InvalidClientError, ValidationError
from mars_client.reactive import MutationRequest, QueryBinding, run_mutation

from conftest import CONTRACT, SENDER, DummyTransport


@pytest.mark.asyncio
async def test_binding_fetches_through_client(transport: DummyTransport) -> None:
    transport.responses["health_values"] = {"liquidatable": False}
    client = RoverHealthQueryClient(transport, CONTRACT)

    binding = RoverHealthQueries.health_values(
        client, {"accountId": "2", "action": "default", "kind": "default"}
    )

    assert binding.enabled
    assert binding.key == query_keys.health_values(
        CONTRACT, {"account_id": "2", "action": "default", "kind": "default"}
    )
    assert binding.key.matches(query_keys.address(CONTRACT))
    assert await binding.fetch() == {"liquidatable": False}
    assert len(transport.queries) == 1


@pytest.mark.asyncio
async def test_binding_without_client_is_disabled() -> None:
    binding = RoverHealthQueries.config(None)

    assert not binding.enabled
    assert binding.key == query_keys.config(None)
    with pytest.raises(InvalidClientError):
        await binding.fetch()


@pytest.mark.asyncio
async def test_binding_without_address_is_disabled(transport: DummyTransport) -> None:
    client = SwapperBaseQueryClient(transport, None)

    binding = SwapperBaseQueries.owner(client)

    assert not binding.enabled
    with pytest.raises(InvalidClientError):
        await binding.fetch()
    assert transport.queries == []


def test_enabled_flag_is_caller_controlled(transport: DummyTransport) -> None:
    client = SwapperBaseQueryClient(transport, CONTRACT)

    binding = SwapperBaseQueries.routes(client, {"limit": 5}, enabled=False)

    assert not binding.enabled


def test_fieldless_query_key_has_no_args(transport: DummyTransport) -> None:
    client = PerpsQueryClient(transport, CONTRACT)

    key = PerpsQueries.total_pnl(client).key

    assert "args" not in key.as_list()[0]


@pytest.mark.asyncio
async def test_cancelling_one_read_leaves_others(transport: DummyTransport) -> None:
    release = asyncio.Event()
    client = SwapperBaseQueryClient(transport, CONTRACT)

    async def slow() -> str:
        await release.wait()
        return "slow"

    slow_binding = QueryBinding(key=SwapperBaseQueries.owner(client).key, fetch=slow)
    transport.responses["route"] = {"denom_in": "uosmo"}
    fast_binding = SwapperBaseQueries.route(client, {"denom_in": "uosmo", "denom_out": "uatom"})

    slow_task = slow_binding.start()
    fast_task = fast_binding.start()
    slow_task.cancel()

    assert await fast_task == {"denom_in": "uosmo"}
    with pytest.raises(asyncio.CancelledError):
        await slow_task


@pytest.mark.asyncio
async def test_mutation_submits_action(transport: DummyTransport) -> None:
    client = RoverHealthClient(transport, SENDER, CONTRACT)
    request = MutationRequest(
        client=client, msg=UpdateConfig(credit_manager="neutron1cm"), memo="rotate"
    )

    result = await RoverHealthMutations.update_config(request)

    assert result.height == 42
    assert transport.executions[0]["memo"] == "rotate"
    assert transport.queries == []


@pytest.mark.asyncio
async def test_mutation_rejects_other_actions(transport: DummyTransport) -> None:
    client = RoverHealthClient(transport, SENDER, CONTRACT)
    request = MutationRequest(
        client=client,
        msg=TransferResult(denom_in="uosmo", denom_out="uatom", recipient=SENDER),
    )

    with pytest.raises(ValidationError):
        await RoverHealthMutations.update_config(request)
    assert transport.executions == []


@pytest.mark.asyncio
async def test_run_mutation_without_address(transport: DummyTransport) -> None:
    client = RoverHealthClient(transport, SENDER, None)

    with pytest.raises(InvalidClientError):
        await run_mutation(MutationRequest(client=client, msg=UpdateConfig(credit_manager="x")))
