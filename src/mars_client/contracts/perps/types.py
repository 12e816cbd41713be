"""Message and response types for the Mars perps contract.

Position sizes here are ``SignedDecimal`` records; other perps schema versions
use different numeric types and get their own module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypedDict

from ...codec import Variant
from ...types import Decimal, OwnerUpdate, Uint128
from ...utils import to_decimal_string

ActionKind = Literal["default", "liquidation"]


@dataclass(frozen=True)
class SignedDecimal:
    abs: Decimal
    negative: bool = False

    @classmethod
    def parse(cls, value: str) -> SignedDecimal:
        """Parse ``"-1.5"`` style strings; non-numeric text raises ``ValidationError``."""

        text = value.strip()
        negative = text.startswith("-")
        magnitude = to_decimal_string(text[1:] if text[:1] in "+-" else text)
        return cls(abs=magnitude, negative=negative and magnitude != "0")

    def __str__(self) -> str:
        return f"-{self.abs}" if self.negative else self.abs


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class OwnerQuery(Variant, wire_name="owner"):
    pass


@dataclass(frozen=True)
class ConfigQuery(Variant, wire_name="config"):
    pass


@dataclass(frozen=True)
class VaultStateQuery(Variant, wire_name="vault_state"):
    pass


@dataclass(frozen=True)
class DenomStateQuery(Variant, wire_name="denom_state"):
    denom: str


@dataclass(frozen=True)
class PerpDenomStateQuery(Variant, wire_name="perp_denom_state"):
    denom: str


@dataclass(frozen=True)
class DenomStatesQuery(Variant, wire_name="denom_states"):
    limit: int | None = None
    start_after: str | None = None


@dataclass(frozen=True)
class PerpVaultPositionQuery(Variant, wire_name="perp_vault_position"):
    user_address: str
    account_id: str | None = None
    action: ActionKind | None = None


@dataclass(frozen=True)
class DepositQuery(Variant, wire_name="deposit"):
    user_address: str
    account_id: str | None = None


@dataclass(frozen=True)
class UnlocksQuery(Variant, wire_name="unlocks"):
    user_address: str
    account_id: str | None = None


@dataclass(frozen=True)
class PositionQuery(Variant, wire_name="position"):
    account_id: str
    denom: str
    new_size: SignedDecimal | None = None


@dataclass(frozen=True)
class PositionsQuery(Variant, wire_name="positions"):
    limit: int | None = None
    start_after: tuple[str, str] | None = None


@dataclass(frozen=True)
class PositionsByAccountQuery(Variant, wire_name="positions_by_account"):
    account_id: str
    action: ActionKind | None = None


@dataclass(frozen=True)
class TotalPnlQuery(Variant, wire_name="total_pnl"):
    pass


@dataclass(frozen=True)
class OpeningFeeQuery(Variant, wire_name="opening_fee"):
    denom: str
    size: SignedDecimal


@dataclass(frozen=True)
class DenomAccountingQuery(Variant, wire_name="denom_accounting"):
    denom: str


@dataclass(frozen=True)
class TotalAccountingQuery(Variant, wire_name="total_accounting"):
    pass


@dataclass(frozen=True)
class DenomRealizedPnlForAccountQuery(Variant, wire_name="denom_realized_pnl_for_account"):
    account_id: str
    denom: str


@dataclass(frozen=True)
class PositionFeesQuery(Variant, wire_name="position_fees"):
    account_id: str
    denom: str
    new_size: SignedDecimal


QueryMsg = (
    OwnerQuery
    | ConfigQuery
    | VaultStateQuery
    | DenomStateQuery
    | PerpDenomStateQuery
    | DenomStatesQuery
    | PerpVaultPositionQuery
    | DepositQuery
    | UnlocksQuery
    | PositionQuery
    | PositionsQuery
    | PositionsByAccountQuery
    | TotalPnlQuery
    | OpeningFeeQuery
    | DenomAccountingQuery
    | TotalAccountingQuery
    | DenomRealizedPnlForAccountQuery
    | PositionFeesQuery
)


# ----------------------------------------------------------------------
# Actions
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class UpdateOwner(Variant, newtype=True):
    update: OwnerUpdate


@dataclass(frozen=True)
class InitDenom(Variant):
    denom: str
    max_funding_velocity: Decimal
    skew_scale: Decimal


@dataclass(frozen=True)
class EnableDenom(Variant):
    denom: str


@dataclass(frozen=True)
class DisableDenom(Variant):
    denom: str


@dataclass(frozen=True)
class Deposit(Variant):
    account_id: str | None = None


@dataclass(frozen=True)
class Unlock(Variant):
    shares: Uint128
    account_id: str | None = None


@dataclass(frozen=True)
class Withdraw(Variant):
    account_id: str | None = None


@dataclass(frozen=True)
class OpenPosition(Variant):
    account_id: str
    denom: str
    size: SignedDecimal


@dataclass(frozen=True)
class ClosePosition(Variant):
    account_id: str
    denom: str


@dataclass(frozen=True)
class ModifyPosition(Variant):
    account_id: str
    denom: str
    new_size: SignedDecimal


@dataclass(frozen=True)
class CloseAllPositions(Variant):
    account_id: str
    action: ActionKind | None = None


ExecuteMsg = (
    UpdateOwner
    | InitDenom
    | EnableDenom
    | DisableDenom
    | Deposit
    | Unlock
    | Withdraw
    | OpenPosition
    | ClosePosition
    | ModifyPosition
    | CloseAllPositions
)


# ----------------------------------------------------------------------
# Responses (wire JSON, snake_case)
# ----------------------------------------------------------------------
class SignedDecimalValue(TypedDict):
    abs: Decimal
    negative: bool


class ConfigResponse(TypedDict):
    base_denom: str
    cooldown_period: int
    credit_manager: str
    oracle: str
    params: str


class VaultState(TypedDict):
    total_liquidity: Uint128
    total_shares: Uint128


class Funding(TypedDict):
    last_funding_accrued_per_unit_in_base_denom: SignedDecimalValue
    last_funding_rate: SignedDecimalValue
    max_funding_velocity: Decimal
    skew_scale: Decimal


class DenomStateResponse(TypedDict):
    denom: str
    enabled: bool
    funding: Funding
    last_updated: int
    total_cost_base: SignedDecimalValue


class PnlValues(TypedDict):
    accrued_funding: SignedDecimalValue
    closing_fee: SignedDecimalValue
    pnl: SignedDecimalValue
    price_pnl: SignedDecimalValue


class PerpDenomState(TypedDict):
    denom: str
    enabled: bool
    funding: Funding
    long_oi: Decimal
    pnl_values: PnlValues
    rate: SignedDecimalValue
    short_oi: Decimal
    total_entry_cost: SignedDecimalValue
    total_entry_funding: SignedDecimalValue


class DepositResponse(TypedDict):
    amount: Uint128
    shares: Uint128


class UnlockState(TypedDict):
    amount: Uint128
    cooldown_end: int
    created_at: int


class PerpVaultDeposit(TypedDict):
    amount: Uint128
    shares: Uint128


class PerpVaultPosition(TypedDict):
    denom: str
    deposit: PerpVaultDeposit
    unlocks: list[UnlockState]


class PnlAmounts(TypedDict):
    accrued_funding: SignedDecimalValue
    closing_fee: SignedDecimalValue
    opening_fee: SignedDecimalValue
    pnl: SignedDecimalValue
    price_pnl: SignedDecimalValue


class CoinValue(TypedDict):
    amount: Uint128
    denom: str


class Profit(TypedDict):
    profit: CoinValue


class Loss(TypedDict):
    loss: CoinValue


# ``"break_even"``, ``{"profit": coin}`` or ``{"loss": coin}``
PnL = Literal["break_even"] | Profit | Loss


class PnlCoins(TypedDict):
    closing_fee: CoinValue
    pnl: PnL


class PositionPnl(TypedDict):
    amounts: PnlAmounts
    coins: PnlCoins
    values: PnlValues


class PerpPosition(TypedDict):
    base_denom: str
    closing_fee_rate: Decimal
    current_exec_price: Decimal
    current_price: Decimal
    denom: str
    entry_exec_price: Decimal
    entry_price: Decimal
    realised_pnl: PnlAmounts
    size: SignedDecimalValue
    unrealised_pnl: PositionPnl


class PositionResponse(TypedDict):
    account_id: str
    position: PerpPosition


class PositionsByAccountResponse(TypedDict):
    account_id: str
    positions: list[PerpPosition]


class TradingFee(TypedDict):
    fee: CoinValue
    rate: Decimal


class Balance(TypedDict):
    accrued_funding: SignedDecimalValue
    closing_fee: SignedDecimalValue
    opening_fee: SignedDecimalValue
    price_pnl: SignedDecimalValue
    total: SignedDecimalValue


class CashFlow(TypedDict):
    accrued_funding: SignedDecimalValue
    closing_fee: SignedDecimalValue
    opening_fee: SignedDecimalValue
    price_pnl: SignedDecimalValue


class Accounting(TypedDict):
    balance: Balance
    cash_flow: CashFlow
    withdrawal_balance: Balance


class PositionFeesResponse(TypedDict, total=False):
    base_denom: str
    closing_exec_price: Decimal | None
    closing_fee: Uint128
    opening_exec_price: Decimal | None
    opening_fee: Uint128

