"""Query and execute clients for the Mars perps contract."""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from ...client import ExecuteClient, QueryClient, SigningIdentity
from ...transport.base import SigningTransport
from ...types import (
    AUTO_FEE,
    Coin,
    Decimal,
    ExecuteResult,
    Fee,
    OwnerResponse,
    OwnerUpdate,
    Uint128,
)
from .types import (
    Accounting,
    ActionKind,
    CloseAllPositions,
    ClosePosition,
    ConfigQuery,
    ConfigResponse,
    DenomAccountingQuery,
    DenomRealizedPnlForAccountQuery,
    DenomStateQuery,
    DenomStateResponse,
    DenomStatesQuery,
    Deposit,
    DepositQuery,
    DepositResponse,
    DisableDenom,
    EnableDenom,
    InitDenom,
    ModifyPosition,
    OpenPosition,
    OpeningFeeQuery,
    OwnerQuery,
    PerpDenomState,
    PerpDenomStateQuery,
    PerpVaultPosition,
    PerpVaultPositionQuery,
    PnlAmounts,
    PositionFeesQuery,
    PositionFeesResponse,
    PositionQuery,
    PositionResponse,
    PositionsByAccountQuery,
    PositionsByAccountResponse,
    PositionsQuery,
    SignedDecimal,
    TotalAccountingQuery,
    TotalPnlQuery,
    TradingFee,
    Unlock,
    UnlocksQuery,
    UnlockState,
    UpdateOwner,
    VaultState,
    VaultStateQuery,
    Withdraw,
)


class PerpsQueryClient(QueryClient):
    """Read-only perps client."""

    async def owner(self) -> OwnerResponse:
        return cast(OwnerResponse, await self.smart_query(OwnerQuery()))

    async def config(self) -> ConfigResponse:
        return cast(ConfigResponse, await self.smart_query(ConfigQuery()))

    async def vault_state(self) -> VaultState:
        return cast(VaultState, await self.smart_query(VaultStateQuery()))

    async def denom_state(self, *, denom: str) -> DenomStateResponse:
        return cast(DenomStateResponse, await self.smart_query(DenomStateQuery(denom=denom)))

    async def perp_denom_state(self, *, denom: str) -> PerpDenomState:
        return cast(PerpDenomState, await self.smart_query(PerpDenomStateQuery(denom=denom)))

    async def denom_states(
        self, *, limit: int | None = None, start_after: str | None = None
    ) -> list[DenomStateResponse]:
        msg = DenomStatesQuery(limit=limit, start_after=start_after)
        return cast(list[DenomStateResponse], await self.smart_query(msg))

    async def perp_vault_position(
        self,
        *,
        user_address: str,
        account_id: str | None = None,
        action: ActionKind | None = None,
    ) -> PerpVaultPosition | None:
        msg = PerpVaultPositionQuery(
            user_address=user_address, account_id=account_id, action=action
        )
        return cast("PerpVaultPosition | None", await self.smart_query(msg))

    async def deposit(
        self, *, user_address: str, account_id: str | None = None
    ) -> DepositResponse:
        msg = DepositQuery(user_address=user_address, account_id=account_id)
        return cast(DepositResponse, await self.smart_query(msg))

    async def unlocks(
        self, *, user_address: str, account_id: str | None = None
    ) -> list[UnlockState]:
        msg = UnlocksQuery(user_address=user_address, account_id=account_id)
        return cast(list[UnlockState], await self.smart_query(msg))

    async def position(
        self, *, account_id: str, denom: str, new_size: SignedDecimal | None = None
    ) -> PositionResponse:
        msg = PositionQuery(account_id=account_id, denom=denom, new_size=new_size)
        return cast(PositionResponse, await self.smart_query(msg))

    async def positions(
        self, *, limit: int | None = None, start_after: tuple[str, str] | None = None
    ) -> list[PositionResponse]:
        msg = PositionsQuery(limit=limit, start_after=start_after)
        return cast(list[PositionResponse], await self.smart_query(msg))

    async def positions_by_account(
        self, *, account_id: str, action: ActionKind | None = None
    ) -> PositionsByAccountResponse:
        msg = PositionsByAccountQuery(account_id=account_id, action=action)
        return cast(PositionsByAccountResponse, await self.smart_query(msg))

    async def total_pnl(self) -> PnlAmounts:
        return cast(PnlAmounts, await self.smart_query(TotalPnlQuery()))

    async def opening_fee(self, *, denom: str, size: SignedDecimal) -> TradingFee:
        msg = OpeningFeeQuery(denom=denom, size=size)
        return cast(TradingFee, await self.smart_query(msg))

    async def denom_accounting(self, *, denom: str) -> Accounting:
        return cast(Accounting, await self.smart_query(DenomAccountingQuery(denom=denom)))

    async def total_accounting(self) -> Accounting:
        return cast(Accounting, await self.smart_query(TotalAccountingQuery()))

    async def denom_realized_pnl_for_account(self, *, account_id: str, denom: str) -> PnlAmounts:
        msg = DenomRealizedPnlForAccountQuery(account_id=account_id, denom=denom)
        return cast(PnlAmounts, await self.smart_query(msg))

    async def position_fees(
        self, *, account_id: str, denom: str, new_size: SignedDecimal
    ) -> PositionFeesResponse:
        msg = PositionFeesQuery(account_id=account_id, denom=denom, new_size=new_size)
        return cast(PositionFeesResponse, await self.smart_query(msg))


class PerpsClient(ExecuteClient[PerpsQueryClient]):
    """Signing perps client; reads are available on ``.query``."""

    def __init__(
        self, transport: SigningTransport, sender: str, contract_address: str | None
    ) -> None:
        super().__init__(
            PerpsQueryClient(transport, contract_address),
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

    async def init_denom(
        self,
        *,
        denom: str,
        max_funding_velocity: Decimal,
        skew_scale: Decimal,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        msg = InitDenom(
            denom=denom, max_funding_velocity=max_funding_velocity, skew_scale=skew_scale
        )
        return await self.execute(msg, fee, memo, funds)

    async def enable_denom(
        self,
        *,
        denom: str,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        return await self.execute(EnableDenom(denom=denom), fee, memo, funds)

    async def disable_denom(
        self,
        *,
        denom: str,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        return await self.execute(DisableDenom(denom=denom), fee, memo, funds)

    async def deposit(
        self,
        *,
        account_id: str | None = None,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        """Deposit into the counterparty vault; the deposit itself travels as ``funds``."""

        return await self.execute(Deposit(account_id=account_id), fee, memo, funds)

    async def unlock(
        self,
        *,
        shares: Uint128,
        account_id: str | None = None,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        return await self.execute(Unlock(shares=shares, account_id=account_id), fee, memo, funds)

    async def withdraw(
        self,
        *,
        account_id: str | None = None,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        return await self.execute(Withdraw(account_id=account_id), fee, memo, funds)

    async def open_position(
        self,
        *,
        account_id: str,
        denom: str,
        size: SignedDecimal,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        msg = OpenPosition(account_id=account_id, denom=denom, size=size)
        return await self.execute(msg, fee, memo, funds)

    async def close_position(
        self,
        *,
        account_id: str,
        denom: str,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        msg = ClosePosition(account_id=account_id, denom=denom)
        return await self.execute(msg, fee, memo, funds)

    async def modify_position(
        self,
        *,
        account_id: str,
        denom: str,
        new_size: SignedDecimal,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        msg = ModifyPosition(account_id=account_id, denom=denom, new_size=new_size)
        return await self.execute(msg, fee, memo, funds)

    async def close_all_positions(
        self,
        *,
        account_id: str,
        action: ActionKind | None = None,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        msg = CloseAllPositions(account_id=account_id, action=action)
        return await self.execute(msg, fee, memo, funds)
