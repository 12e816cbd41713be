"""Hierarchical cache keys for contract queries.

A key is an ordered tuple of fragments. Every query key for a contract looks
like ``[{contract, address, method, args}]`` and extends the shorter
``[{contract}]`` and ``[{contract, address}]`` keys, so a caching layer can
invalidate by prefix.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from .codec import to_wire
from .utils import camel_to_snake

Fragment = frozenset[tuple[str, Any]]


@dataclass(frozen=True)
class _Scalar:
    """A number or boolean tagged with its type, so ``1``, ``1.0`` and ``True`` stay distinct."""

    kind: str
    value: Any


def _freeze(value: Any) -> Any:
    if isinstance(value, bool | int | float):
        return _Scalar(type(value).__name__, value)
    if isinstance(value, Mapping):
        return frozenset((key, _freeze(item)) for key, item in value.items())
    if isinstance(value, list | tuple):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, _Scalar):
        return value.value
    if isinstance(value, frozenset):
        return {key: _thaw(item) for key, item in sorted(value, key=lambda pair: pair[0])}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


def normalize_args(args: Mapping[str, Any] | None) -> Any:
    """Normalize query arguments for use inside a key.

    Names become snake_case, ``None`` values are dropped and nested records
    are converted to their wire form, so omitted and explicitly-``None``
    optional arguments yield the same key.
    """
    if args is None:
        return None
    wire = {camel_to_snake(key): to_wire(value) for key, value in args.items() if value is not None}
    return _freeze(wire)


@dataclass(frozen=True)
class CacheKey:
    """Ordered, hashable composite key."""

    fragments: tuple[Fragment, ...]

    @classmethod
    def of(cls, *fragments: Mapping[str, Any]) -> CacheKey:
        return cls(tuple(frozenset(fragment.items()) for fragment in fragments))

    def as_list(self) -> list[dict[str, Any]]:
        return [_thaw(fragment) for fragment in self.fragments]

    def matches(self, prefix: CacheKey) -> bool:
        """True if ``prefix`` partially matches this key, fragment by fragment."""

        if len(prefix.fragments) > len(self.fragments):
            return False
        return all(
            theirs <= mine for theirs, mine in zip(prefix.fragments, self.fragments, strict=False)
        )

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.as_list())


class QueryKeys:
    """Key factory for one contract.

    ``contract_address`` may be ``None`` while the client is not yet
    connected; such keys are still well formed and comparable.
    """

    def __init__(self, contract: str) -> None:
        self.contract_name = contract

    def contract(self) -> CacheKey:
        return CacheKey.of({"contract": self.contract_name})

    def address(self, contract_address: str | None) -> CacheKey:
        return CacheKey.of({"contract": self.contract_name, "address": contract_address})

    def method(
        self,
        contract_address: str | None,
        method: str,
        args: Mapping[str, Any] | None = None,
    ) -> CacheKey:
        fragment: dict[str, Any] = {
            "contract": self.contract_name,
            "address": contract_address,
            "method": method,
        }
        normalized = normalize_args(args)
        if normalized is not None:
            fragment["args"] = normalized
        return CacheKey((frozenset(fragment.items()),))
