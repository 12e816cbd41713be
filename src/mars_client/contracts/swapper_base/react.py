"""Cache keys and reactive bindings for the Mars swapper (base) contract."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...keys import CacheKey, QueryKeys
from ...reactive import mutation_binder, query_binder
from .types import (
    EstimateExactInSwap,
    Owner,
    Route,
    Routes,
    SetRoute,
    SwapExactIn,
    TransferResult,
    UpdateOwner,
)


class SwapperBaseQueryKeys(QueryKeys):
    def __init__(self) -> None:
        super().__init__("marsSwapperBase")

    def owner(self, contract_address: str | None) -> CacheKey:
        return self.method(contract_address, "owner")

    def route(
        self, contract_address: str | None, args: Mapping[str, Any] | None = None
    ) -> CacheKey:
        return self.method(contract_address, "route", args)

    def routes(
        self, contract_address: str | None, args: Mapping[str, Any] | None = None
    ) -> CacheKey:
        return self.method(contract_address, "routes", args)

    def estimate_exact_in_swap(
        self, contract_address: str | None, args: Mapping[str, Any] | None = None
    ) -> CacheKey:
        return self.method(contract_address, "estimate_exact_in_swap", args)


query_keys = SwapperBaseQueryKeys()


class SwapperBaseQueries:
    owner = staticmethod(query_binder(query_keys, Owner))
    route = staticmethod(query_binder(query_keys, Route))
    routes = staticmethod(query_binder(query_keys, Routes))
    estimate_exact_in_swap = staticmethod(query_binder(query_keys, EstimateExactInSwap))


class SwapperBaseMutations:
    update_owner = staticmethod(mutation_binder(UpdateOwner))
    set_route = staticmethod(mutation_binder(SetRoute))
    swap_exact_in = staticmethod(mutation_binder(SwapExactIn))
    transfer_result = staticmethod(mutation_binder(TransferResult))
