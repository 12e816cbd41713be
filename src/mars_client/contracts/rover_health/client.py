"""Query and execute clients for the Mars rover health contract."""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from ...client import ExecuteClient, QueryClient, SigningIdentity
from ...transport.base import SigningTransport
from ...types import AUTO_FEE, Coin, ExecuteResult, Fee, OwnerUpdate
from .types import (
    AccountKind,
    ActionKind,
    Config,
    ConfigResponse,
    HealthState,
    HealthStateResponse,
    HealthValues,
    HealthValuesResponse,
    UpdateConfig,
    UpdateOwner,
)


class RoverHealthQueryClient(QueryClient):
    """Read-only rover health client."""

    async def health_values(
        self, *, account_id: str, action: ActionKind, kind: AccountKind
    ) -> HealthValuesResponse:
        msg = HealthValues(account_id=account_id, action=action, kind=kind)
        return cast(HealthValuesResponse, await self.smart_query(msg))

    async def health_state(
        self, *, account_id: str, action: ActionKind, kind: AccountKind
    ) -> HealthStateResponse:
        msg = HealthState(account_id=account_id, action=action, kind=kind)
        return cast(HealthStateResponse, await self.smart_query(msg))

    async def config(self) -> ConfigResponse:
        return cast(ConfigResponse, await self.smart_query(Config()))


class RoverHealthClient(ExecuteClient[RoverHealthQueryClient]):
    """Signing rover health client; reads are available on ``.query``."""

    def __init__(
        self, transport: SigningTransport, sender: str, contract_address: str | None
    ) -> None:
        super().__init__(
            RoverHealthQueryClient(transport, contract_address),
            SigningIdentity(sender=sender, transport=transport),
        )

    async def update_owner(
        self,
        update: OwnerUpdate,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        return await self.execute(UpdateOwner(update=update), fee, memo, funds)

    async def update_config(
        self,
        *,
        credit_manager: str,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        return await self.execute(UpdateConfig(credit_manager=credit_manager), fee, memo, funds)
