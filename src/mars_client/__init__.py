"""Mars contract clients - typed query/execute access to Mars CosmWasm contracts.

This library provides query clients, signing execute clients, cache-key
builders and reactive bindings for the Mars protocol contracts.
"""

from .client import ContractHandle, ExecuteClient, QueryClient, SigningIdentity
from .codec import Variant, decode_msg, descriptor_from_args, encode_msg, to_wire, variant_tag
from .config import ClientConfig, ContractAddresses
from .exceptions import (
    InvalidClientError,
    MarsClientError,
    RemoteExecutionError,
    SigningError,
    TransportError,
    ValidationError,
)
from .keys import CacheKey, QueryKeys, normalize_args
from .reactive import (
    MutationRequest,
    QueryBinding,
    bind_query,
    mutation_binder,
    query_binder,
    run_mutation,
)
from .transport import LcdQueryTransport, QueryTransport, SigningTransport
from .types import (
    AUTO_FEE,
    Coin,
    Event,
    coin,
    ExecuteResult,
    Fee,
    OwnerResponse,
    OwnerUpdate,
    StdFee,
)
from .utils import (
    camel_to_snake,
    from_uint128,
    serialise_result,
    snake_to_camel,
    to_decimal_string,
    to_uint128,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "ContractHandle",
    "SigningIdentity",
    "QueryClient",
    "ExecuteClient",
    # Codec
    "Variant",
    "encode_msg",
    "decode_msg",
    "descriptor_from_args",
    "to_wire",
    "variant_tag",
    # Cache keys and bindings
    "CacheKey",
    "QueryKeys",
    "normalize_args",
    "QueryBinding",
    "MutationRequest",
    "bind_query",
    "query_binder",
    "mutation_binder",
    "run_mutation",
    # Transports and config
    "QueryTransport",
    "SigningTransport",
    "LcdQueryTransport",
    "ClientConfig",
    "ContractAddresses",
    # Types
    "AUTO_FEE",
    "Coin",
    "coin",
    "StdFee",
    "Fee",
    "Event",
    "ExecuteResult",
    "OwnerUpdate",
    "OwnerResponse",
    # Exceptions
    "MarsClientError",
    "TransportError",
    "SigningError",
    "RemoteExecutionError",
    "InvalidClientError",
    "ValidationError",
    # Utility functions
    "camel_to_snake",
    "snake_to_camel",
    "to_uint128",
    "from_uint128",
    "to_decimal_string",
    "serialise_result",
]
