"""Cache keys and reactive bindings for the Mars perps contract."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...keys import CacheKey, QueryKeys
from ...reactive import mutation_binder, query_binder
from . import types as t

Args = Mapping[str, Any] | None


class PerpsQueryKeys(QueryKeys):
    def __init__(self) -> None:
        super().__init__("marsPerps")

    def owner(self, contract_address: str | None) -> CacheKey:
        return self.method(contract_address, "owner")

    def config(self, contract_address: str | None) -> CacheKey:
        return self.method(contract_address, "config")

    def vault_state(self, contract_address: str | None) -> CacheKey:
        return self.method(contract_address, "vault_state")

    def denom_state(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "denom_state", args)

    def perp_denom_state(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "perp_denom_state", args)

    def denom_states(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "denom_states", args)

    def perp_vault_position(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "perp_vault_position", args)

    def deposit(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "deposit", args)

    def unlocks(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "unlocks", args)

    def position(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "position", args)

    def positions(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "positions", args)

    def positions_by_account(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "positions_by_account", args)

    def total_pnl(self, contract_address: str | None) -> CacheKey:
        return self.method(contract_address, "total_pnl")

    def opening_fee(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "opening_fee", args)

    def denom_accounting(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "denom_accounting", args)

    def total_accounting(self, contract_address: str | None) -> CacheKey:
        return self.method(contract_address, "total_accounting")

    def denom_realized_pnl_for_account(
        self, contract_address: str | None, args: Args = None
    ) -> CacheKey:
        return self.method(contract_address, "denom_realized_pnl_for_account", args)

    def position_fees(self, contract_address: str | None, args: Args = None) -> CacheKey:
        return self.method(contract_address, "position_fees", args)


query_keys = PerpsQueryKeys()


class PerpsQueries:
    owner = staticmethod(query_binder(query_keys, t.OwnerQuery))
    config = staticmethod(query_binder(query_keys, t.ConfigQuery))
    vault_state = staticmethod(query_binder(query_keys, t.VaultStateQuery))
    denom_state = staticmethod(query_binder(query_keys, t.DenomStateQuery))
    perp_denom_state = staticmethod(query_binder(query_keys, t.PerpDenomStateQuery))
    denom_states = staticmethod(query_binder(query_keys, t.DenomStatesQuery))
    perp_vault_position = staticmethod(query_binder(query_keys, t.PerpVaultPositionQuery))
    deposit = staticmethod(query_binder(query_keys, t.DepositQuery))
    unlocks = staticmethod(query_binder(query_keys, t.UnlocksQuery))
    position = staticmethod(query_binder(query_keys, t.PositionQuery))
    positions = staticmethod(query_binder(query_keys, t.PositionsQuery))
    positions_by_account = staticmethod(query_binder(query_keys, t.PositionsByAccountQuery))
    total_pnl = staticmethod(query_binder(query_keys, t.TotalPnlQuery))
    opening_fee = staticmethod(query_binder(query_keys, t.OpeningFeeQuery))
    denom_accounting = staticmethod(query_binder(query_keys, t.DenomAccountingQuery))
    total_accounting = staticmethod(query_binder(query_keys, t.TotalAccountingQuery))
    denom_realized_pnl_for_account = staticmethod(
        query_binder(query_keys, t.DenomRealizedPnlForAccountQuery)
    )
    position_fees = staticmethod(query_binder(query_keys, t.PositionFeesQuery))


class PerpsMutations:
    update_owner = staticmethod(mutation_binder(t.UpdateOwner))
    init_denom = staticmethod(mutation_binder(t.InitDenom))
    enable_denom = staticmethod(mutation_binder(t.EnableDenom))
    disable_denom = staticmethod(mutation_binder(t.DisableDenom))
    deposit = staticmethod(mutation_binder(t.Deposit))
    unlock = staticmethod(mutation_binder(t.Unlock))
    withdraw = staticmethod(mutation_binder(t.Withdraw))
    open_position = staticmethod(mutation_binder(t.OpenPosition))
    close_position = staticmethod(mutation_binder(t.ClosePosition))
    modify_position = staticmethod(mutation_binder(t.ModifyPosition))
    close_all_positions = staticmethod(mutation_binder(t.CloseAllPositions))
