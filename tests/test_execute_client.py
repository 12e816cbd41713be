from __future__ import annotations

import pytest

from mars_client.contracts.perps import PerpsClient
from mars_client.contracts.perps.types import SignedDecimal
from mars_client.contracts.rover_health import RoverHealthClient, RoverHealthQueryClient
from mars_client.contracts.swapper_base import SwapperBaseClient
from mars_client.exceptions import InvalidClientError, RemoteExecutionError, SigningError
from mars_client.types import AUTO_FEE, AbolishOwnerRole, Coin, StdFee

from conftest import CONTRACT, SENDER, DummyTransport


@pytest.mark.asyncio
async def test_update_config_submits_one_execution(transport: DummyTransport) -> None:
    client = RoverHealthClient(transport, SENDER, CONTRACT)

    result = await client.update_config(credit_manager="neutron1cm")

    assert transport.executions == [
        {
            "sender": SENDER,
            "contract_address": CONTRACT,
            "msg": {"update_config": {"credit_manager": "neutron1cm"}},
            "fee": AUTO_FEE,
            "memo": None,
            "funds": None,
        }
    ]
    assert result.transaction_hash == "A1B2C3"
    assert result.success
    assert result.find_attribute("wasm", "action") == "update_config"


@pytest.mark.asyncio
async def test_fee_memo_and_funds_forwarded_unmodified(transport: DummyTransport) -> None:
    client = SwapperBaseClient(transport, SENDER, CONTRACT)
    fee = StdFee(amount=[Coin(amount="5000", denom="untrn")], gas="200000")
    funds = [Coin(amount="1000000", denom="uosmo")]

    await client.swap_exact_in(
        coin_in=Coin(amount="1000000", denom="uosmo"),
        denom_out="uatom",
        slippage="0.005",
        fee=fee,
        memo="rebalance",
        funds=funds,
    )

    call = transport.executions[0]
    assert call["fee"] is fee
    assert call["memo"] == "rebalance"
    assert call["funds"] is funds
    assert call["msg"] == {
        "swap_exact_in": {
            "coin_in": {"amount": "1000000", "denom": "uosmo"},
            "denom_out": "uatom",
            "slippage": "0.005",
        }
    }


@pytest.mark.asyncio
async def test_numeric_fee_multiplier(transport: DummyTransport) -> None:
    client = PerpsClient(transport, SENDER, CONTRACT)

    await client.modify_position(
        account_id="3", denom="perps/ubtc", new_size=SignedDecimal.parse("2.5"), fee=1.4
    )

    assert transport.executions[0]["fee"] == 1.4
    assert transport.executions[0]["msg"] == {
        "modify_position": {
            "account_id": "3",
            "denom": "perps/ubtc",
            "new_size": {"abs": "2.5", "negative": False},
        }
    }


@pytest.mark.asyncio
async def test_update_owner_unit_variant(transport: DummyTransport) -> None:
    client = PerpsClient(transport, SENDER, CONTRACT)

    await client.update_owner(AbolishOwnerRole())

    assert transport.executions[0]["msg"] == {"update_owner": "abolish_owner_role"}


@pytest.mark.asyncio
async def test_missing_sender_raises_signing_error(transport: DummyTransport) -> None:
    client = PerpsClient(transport, "", CONTRACT)

    with pytest.raises(SigningError):
        await client.deposit()
    assert transport.executions == []


@pytest.mark.asyncio
async def test_missing_address_raises_invalid_client(transport: DummyTransport) -> None:
    client = PerpsClient(transport, SENDER, None)

    with pytest.raises(InvalidClientError):
        await client.withdraw(account_id="1")
    assert transport.executions == []


@pytest.mark.asyncio
async def test_contract_abort_propagates(transport: DummyTransport) -> None:
    transport.error = RemoteExecutionError("Unauthorized", contract_address=CONTRACT)
    client = RoverHealthClient(transport, SENDER, CONTRACT)

    with pytest.raises(RemoteExecutionError) as excinfo:
        await client.update_config(credit_manager="neutron1cm")

    assert excinfo.value.diagnostic == "Unauthorized"


@pytest.mark.asyncio
async def test_reads_go_through_query_client(transport: DummyTransport) -> None:
    transport.responses["config"] = {"credit_manager": "neutron1cm"}
    client = RoverHealthClient(transport, SENDER, CONTRACT)

    assert isinstance(client.query, RoverHealthQueryClient)
    assert await client.query.config() == {"credit_manager": "neutron1cm"}
    assert client.contract_address == CONTRACT
    assert client.sender == SENDER
    assert transport.executions == []


@pytest.mark.asyncio
async def test_unlock_omits_unset_account(transport: DummyTransport) -> None:
    client = PerpsClient(transport, SENDER, CONTRACT)

    await client.unlock(shares="1000")
    await client.close_all_positions(account_id="8", action="liquidation")

    assert [call["msg"] for call in transport.executions] == [
        {"unlock": {"shares": "1000"}},
        {"close_all_positions": {"account_id": "8", "action": "liquidation"}},
    ]
