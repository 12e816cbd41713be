"""Query and execute clients for the Mars swapper (base) contract."""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from ...client import ExecuteClient, QueryClient, SigningIdentity
from ...transport.base import SigningTransport
from ...types import (
    AUTO_FEE,
    Addr,
    Coin,
    Decimal,
    Empty,
    ExecuteResult,
    Fee,
    OwnerResponse,
    OwnerUpdate,
)
from .types import (
    ArrayOfRouteResponse,
    EstimateExactInSwap,
    EstimateExactInSwapResponse,
    Owner,
    Route,
    RouteResponse,
    Routes,
    SetRoute,
    SwapExactIn,
    TransferResult,
    UpdateOwner,
)


class SwapperBaseQueryClient(QueryClient):
    async def owner(self) -> OwnerResponse:
        return cast(OwnerResponse, await self.smart_query(Owner()))

    async def route(self, *, denom_in: str, denom_out: str) -> RouteResponse:
        msg = Route(denom_in=denom_in, denom_out=denom_out)
        return cast(RouteResponse, await self.smart_query(msg))

    async def routes(
        self,
        *,
        limit: int | None = None,
        start_after: tuple[str, str] | None = None,
    ) -> ArrayOfRouteResponse:
        msg = Routes(limit=limit, start_after=start_after)
        return cast(ArrayOfRouteResponse, await self.smart_query(msg))

    async def estimate_exact_in_swap(
        self, *, coin_in: Coin, denom_out: str
    ) -> EstimateExactInSwapResponse:
        msg = EstimateExactInSwap(coin_in=coin_in, denom_out=denom_out)
        return cast(EstimateExactInSwapResponse, await self.smart_query(msg))


class SwapperBaseClient(ExecuteClient[SwapperBaseQueryClient]):
    def __init__(
        self, transport: SigningTransport, sender: str, contract_address: str | None
    ) -> None:
        super().__init__(
            SwapperBaseQueryClient(transport, contract_address),
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

    async def set_route(
        self,
        *,
        denom_in: str,
        denom_out: str,
        route: Empty,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        msg = SetRoute(denom_in=denom_in, denom_out=denom_out, route=route)
        return await self.execute(msg, fee, memo, funds)

    async def swap_exact_in(
        self,
        *,
        coin_in: Coin,
        denom_out: str,
        slippage: Decimal,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        """Swap ``coin_in`` for ``denom_out``; the input coin is normally sent as ``funds``."""

        msg = SwapExactIn(coin_in=coin_in, denom_out=denom_out, slippage=slippage)
        return await self.execute(msg, fee, memo, funds)

    async def transfer_result(
        self,
        *,
        denom_in: str,
        denom_out: str,
        recipient: Addr,
        fee: Fee = AUTO_FEE,
        memo: str | None = None,
        funds: Sequence[Coin] | None = None,
    ) -> ExecuteResult:
        msg = TransferResult(denom_in=denom_in, denom_out=denom_out, recipient=recipient)
        return await self.execute(msg, fee, memo, funds)
