"""Message and response types for the Mars swapper (base) contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict

from ...codec import Variant
from ...types import Addr, Coin, Decimal, Empty, OwnerUpdate, Uint128


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Owner(Variant):
    pass


@dataclass(frozen=True)
class Route(Variant):
    denom_in: str
    denom_out: str


@dataclass(frozen=True)
class Routes(Variant):
    limit: int | None = None
    start_after: tuple[str, str] | None = None


@dataclass(frozen=True)
class EstimateExactInSwap(Variant):
    coin_in: Coin
    denom_out: str


QueryMsg = Owner | Route | Routes | EstimateExactInSwap


# ----------------------------------------------------------------------
# Actions
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class UpdateOwner(Variant, newtype=True):
    update: OwnerUpdate


@dataclass(frozen=True)
class SetRoute(Variant):
    denom_in: str
    denom_out: str
    route: Empty


@dataclass(frozen=True)
class SwapExactIn(Variant):
    coin_in: Coin
    denom_out: str
    slippage: Decimal


@dataclass(frozen=True)
class TransferResult(Variant):
    denom_in: str
    denom_out: str
    recipient: Addr


ExecuteMsg = UpdateOwner | SetRoute | SwapExactIn | TransferResult


# ----------------------------------------------------------------------
# Responses
# ----------------------------------------------------------------------
class EstimateExactInSwapResponse(TypedDict):
    amount: Uint128


class RouteResponse(TypedDict):
    denom_in: str
    denom_out: str
    route: Empty


ArrayOfRouteResponse = list[RouteResponse]
