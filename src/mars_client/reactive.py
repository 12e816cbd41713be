"""Bindings that expose contract clients to a reactive caching framework.

Each query becomes a :class:`QueryBinding` (cache key + fetch coroutine +
enabled flag) and each action a mutation function taking a
:class:`MutationRequest`. All work is delegated to the query/execute clients;
the framework owns caching, staleness, retries and invalidation.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .client import ExecuteClient, QueryClient
from .codec import Variant, descriptor_from_args
from .exceptions import InvalidClientError, ValidationError
from .keys import CacheKey, QueryKeys
from .types import AUTO_FEE, Coin, ExecuteResult, Fee

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V", bound=Variant)


@dataclass(frozen=True)
class QueryBinding(Generic[T]):
    """A cache-keyed, one-shot read."""

    key: CacheKey
    fetch: Callable[[], Awaitable[T]]
    enabled: bool = True

    def start(self) -> asyncio.Task[T]:
        """Schedule the read; cancelling the task leaves other reads untouched."""

        async def run() -> T:
            return await self.fetch()

        return asyncio.create_task(run())


def _query_args(msg: Variant) -> dict[str, Any] | None:
    if not dataclasses.is_dataclass(msg):
        return None
    fields = dataclasses.fields(msg)
    if not fields:
        return None
    return {field.name: getattr(msg, field.name) for field in fields}


def bind_query(
    keys: QueryKeys,
    client: QueryClient | None,
    msg: Variant,
    *,
    enabled: bool = True,
) -> QueryBinding[Any]:
    """Wrap one query of ``client`` for the caching framework.

    Without a client (or without a contract address) the binding is disabled
    and fetching fails immediately with :class:`InvalidClientError`.
    """
    address = client.contract_address if client is not None else None
    key = keys.method(address, msg.wire_name, _query_args(msg))

    if client is None or not client.is_valid():
        logger.debug("Query %s bound without a usable client", msg.wire_name)

        async def reject() -> Any:
            raise InvalidClientError()

        return QueryBinding(key=key, fetch=reject, enabled=False)

    async def fetch() -> Any:
        return await client.smart_query(msg)

    return QueryBinding(key=key, fetch=fetch, enabled=enabled)


def query_binder(
    keys: QueryKeys, variant: type[V]
) -> Callable[..., QueryBinding[Any]]:
    """Return a binding factory for one query variant.

    The factory accepts ``(client, args=None, *, enabled=True)`` where ``args``
    is a camelCase or snake_case mapping of the query's arguments.
    """

    def factory(
        client: QueryClient | None,
        args: Mapping[str, Any] | None = None,
        *,
        enabled: bool = True,
    ) -> QueryBinding[Any]:
        return bind_query(keys, client, descriptor_from_args(variant, args), enabled=enabled)

    factory.__name__ = variant.wire_name
    factory.__doc__ = f"Bind the ``{variant.wire_name}`` query."
    return factory


@dataclass(frozen=True)
class MutationRequest:
    """Everything one mutation needs: client, action and transaction options."""

    client: ExecuteClient
    msg: Variant
    fee: Fee = AUTO_FEE
    memo: str | None = None
    funds: Sequence[Coin] | None = None


async def run_mutation(request: MutationRequest) -> ExecuteResult:
    """Submit the action; cache invalidation is left to the caller."""

    return await request.client.execute(
        request.msg,
        fee=request.fee,
        memo=request.memo,
        funds=request.funds,
    )


def mutation_binder(variant: type[V]) -> Callable[[MutationRequest], Awaitable[ExecuteResult]]:
    """Return a mutation function accepting only ``variant`` actions."""

    async def mutate(request: MutationRequest) -> ExecuteResult:
        if not isinstance(request.msg, variant):
            raise ValidationError(
                f"Expected a {variant.wire_name} action, got {type(request.msg).__name__}",
                field="msg",
                value=request.msg,
            )
        return await run_mutation(request)

    mutate.__name__ = variant.wire_name
    return mutate
