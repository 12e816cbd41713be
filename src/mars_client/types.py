"""Type definitions shared by every Mars contract client."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, TypedDict

from .codec import Variant
from .utils import serialise_result, to_uint128

Addr = str  # bech32 account or contract address
Uint128 = str  # decimal-safe integer string
Decimal = str  # decimal-safe fixed point string
Empty = dict[str, Any]

AUTO_FEE: Literal["auto"] = "auto"


@dataclass(frozen=True)
class Coin:
    """A native token amount."""

    amount: Uint128
    denom: str


def coin(amount: float | int | str, denom: str, decimals: int = 0) -> Coin:
    """Build a :class:`Coin`, scaling ``amount`` by ``decimals``."""
    return Coin(amount=to_uint128(amount, decimals), denom=denom)


@dataclass(frozen=True)
class StdFee:
    """Explicit fee for a signed transaction."""

    amount: list[Coin]
    gas: str
    granter: str | None = None
    payer: str | None = None


# A gas multiplier, an explicit fee, or automatic estimation by the transport.
Fee = int | float | StdFee | Literal["auto"]


# ----------------------------------------------------------------------
# Ownership (shared by all contracts built on mars-owner)
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class ProposeNewOwner(Variant):
    proposed: str


@dataclass(frozen=True)
class ClearProposed(Variant, unit=True):
    pass


@dataclass(frozen=True)
class AcceptProposed(Variant, unit=True):
    pass


@dataclass(frozen=True)
class AbolishOwnerRole(Variant, unit=True):
    pass


@dataclass(frozen=True)
class SetEmergencyOwner(Variant):
    emergency_owner: str


@dataclass(frozen=True)
class ClearEmergencyOwner(Variant, unit=True):
    pass


OwnerUpdate = (
    ProposeNewOwner
    | ClearProposed
    | AcceptProposed
    | AbolishOwnerRole
    | SetEmergencyOwner
    | ClearEmergencyOwner
)


class OwnerResponse(TypedDict, total=False):
    abolished: bool
    emergency_owner: str | None
    initialized: bool
    owner: str | None
    proposed: str | None


# ----------------------------------------------------------------------
# Execute results
# ----------------------------------------------------------------------
@dataclass
class Attribute:
    key: str
    value: str


@dataclass
class Event:
    """An event emitted while executing a transaction."""

    type: str
    attributes: list[Attribute] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        for attribute in self.attributes:
            if attribute.key == key:
                return attribute.value
        return None


@dataclass
class ExecuteResult:
    """Outcome of a signed, submitted contract execution."""

    transaction_hash: str
    height: int = 0
    gas_wanted: int = 0
    gas_used: int = 0
    code: int = 0
    raw_log: str | None = None
    events: list[Event] = field(default_factory=list)
    logs: list[dict[str, Any]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.code == 0

    def find_attribute(self, event_type: str, key: str) -> str | None:
        """Return the first attribute ``key`` of an event of ``event_type``."""

        for event in self.events:
            if event.type == event_type:
                value = event.get(key)
                if value is not None:
                    return value
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ExecuteResult:
        """Construct a result from a JSON-like transport response.

        Accepts both the camelCase keys used by cosmjs-style signers and the
        snake_case keys of the LCD tx response.
        """

        tx_hash = data.get("transactionHash") or data.get("transaction_hash") or data.get("txhash")
        events = [_event_from_dict(item) for item in _iterable(data.get("events"))]

        return cls(
            transaction_hash=str(tx_hash or ""),
            height=int(data.get("height") or 0),
            gas_wanted=int(data.get("gasWanted") or data.get("gas_wanted") or 0),
            gas_used=int(data.get("gasUsed") or data.get("gas_used") or 0),
            code=int(data.get("code") or 0),
            raw_log=data.get("rawLog") or data.get("raw_log"),
            events=events,
            logs=serialise_result(list(_iterable(data.get("logs")))),
        )


def _event_from_dict(data: Mapping[str, Any]) -> Event:
    attributes = [
        Attribute(key=str(item.get("key", "")), value=str(item.get("value", "")))
        for item in _iterable(data.get("attributes"))
    ]
    return Event(type=str(data.get("type", "")), attributes=attributes)


def _iterable(value: Any) -> Iterable:
    if isinstance(value, list | tuple):
        return value

    if value is None:
        return []

    return [value]
