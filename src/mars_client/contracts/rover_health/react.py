"""Cache keys and reactive bindings for the Mars rover health contract."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...keys import CacheKey, QueryKeys
from ...reactive import mutation_binder, query_binder
from .types import Config, HealthState, HealthValues, UpdateConfig, UpdateOwner


class RoverHealthQueryKeys(QueryKeys):
    def __init__(self) -> None:
        super().__init__("marsRoverHealth")

    def health_values(
        self, contract_address: str | None, args: Mapping[str, Any] | None = None
    ) -> CacheKey:
        return self.method(contract_address, "health_values", args)

    def health_state(
        self, contract_address: str | None, args: Mapping[str, Any] | None = None
    ) -> CacheKey:
        return self.method(contract_address, "health_state", args)

    def config(self, contract_address: str | None) -> CacheKey:
        return self.method(contract_address, "config")


query_keys = RoverHealthQueryKeys()


class RoverHealthQueries:
    health_values = staticmethod(query_binder(query_keys, HealthValues))
    health_state = staticmethod(query_binder(query_keys, HealthState))
    config = staticmethod(query_binder(query_keys, Config))


class RoverHealthMutations:
    update_owner = staticmethod(mutation_binder(UpdateOwner))
    update_config = staticmethod(mutation_binder(UpdateConfig))
