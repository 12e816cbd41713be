"""Message and response types for the Mars rover health contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypedDict

from ...codec import Variant
from ...types import Decimal, OwnerUpdate, Uint128

ActionKind = Literal["default", "liquidation"]
AccountKind = Literal["default", "high_levered_strategy"]


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class HealthValues(Variant):
    account_id: str
    action: ActionKind
    kind: AccountKind


@dataclass(frozen=True)
class HealthState(Variant):
    account_id: str
    action: ActionKind
    kind: AccountKind


@dataclass(frozen=True)
class Config(Variant):
    pass


QueryMsg = HealthValues | HealthState | Config


# ----------------------------------------------------------------------
# Actions
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class UpdateOwner(Variant, newtype=True):
    update: OwnerUpdate


@dataclass(frozen=True)
class UpdateConfig(Variant):
    credit_manager: str


ExecuteMsg = UpdateOwner | UpdateConfig


# ----------------------------------------------------------------------
# Responses
# ----------------------------------------------------------------------
class ConfigResponse(TypedDict, total=False):
    credit_manager: str | None
    params: str | None


class HealthValuesResponse(TypedDict):
    above_max_ltv: bool
    liquidatable: bool
    liquidation_health_factor: Decimal | None
    liquidation_threshold_adjusted_collateral: Uint128
    max_ltv_adjusted_collateral: Uint128
    max_ltv_health_factor: Decimal | None
    total_collateral_value: Uint128
    total_debt_value: Uint128


class UnhealthyState(TypedDict):
    liquidation_health_factor: Decimal
    max_ltv_health_factor: Decimal


class Unhealthy(TypedDict):
    unhealthy: UnhealthyState


# ``"healthy"`` or ``{"unhealthy": {...}}``
HealthStateResponse = Literal["healthy"] | Unhealthy
