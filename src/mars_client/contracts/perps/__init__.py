"""Mars perps contract client."""

from .client import PerpsClient, PerpsQueryClient
from .react import PerpsMutations, PerpsQueries, PerpsQueryKeys, query_keys
from .types import ExecuteMsg, QueryMsg, SignedDecimal

__all__ = [
    "PerpsClient",
    "PerpsQueryClient",
    "PerpsQueries",
    "PerpsMutations",
    "PerpsQueryKeys",
    "query_keys",
    "QueryMsg",
    "ExecuteMsg",
    "SignedDecimal",
]
