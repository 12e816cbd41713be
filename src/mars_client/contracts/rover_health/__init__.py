"""Mars rover health contract client."""

from .client import RoverHealthClient, RoverHealthQueryClient
from .react import RoverHealthMutations, RoverHealthQueries, RoverHealthQueryKeys, query_keys
from .types import ExecuteMsg, QueryMsg

__all__ = [
    "RoverHealthClient",
    "RoverHealthQueryClient",
    "RoverHealthQueries",
    "RoverHealthMutations",
    "RoverHealthQueryKeys",
    "query_keys",
    "QueryMsg",
    "ExecuteMsg",
]
