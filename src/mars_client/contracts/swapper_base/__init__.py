"""Mars swapper (base) contract client."""

from .client import SwapperBaseClient, SwapperBaseQueryClient
from .react import SwapperBaseMutations, SwapperBaseQueries, SwapperBaseQueryKeys, query_keys
from .types import ExecuteMsg, QueryMsg

__all__ = [
    "SwapperBaseClient",
    "SwapperBaseQueryClient",
    "SwapperBaseQueries",
    "SwapperBaseMutations",
    "SwapperBaseQueryKeys",
    "query_keys",
    "QueryMsg",
    "ExecuteMsg",
]
