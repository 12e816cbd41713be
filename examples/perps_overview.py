"""Perps market overview example using query bindings and cache keys."""

import asyncio
import logging

from dotenv import load_dotenv

from mars_client import ClientConfig, LcdQueryTransport
from mars_client.contracts.perps import PerpsQueries, PerpsQueryClient, query_keys
from mars_client.exceptions import MarsClientError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

load_dotenv()


async def main():
    """Fetch vault state and denom states concurrently through bindings."""

    config = ClientConfig.from_env()
    transport = LcdQueryTransport.from_config(config)
    client = PerpsQueryClient(transport, config.contracts.perps)

    bindings = [
        PerpsQueries.vault_state(client),
        PerpsQueries.denom_states(client, {"limit": 10}),
        PerpsQueries.total_pnl(client),
    ]

    for binding in bindings:
        print(f"{binding.key.as_list()[0]['method']:<14} enabled={binding.enabled}")

    if not client.is_valid():
        print("Set MARS_PERPS_ADDRESS to run the queries")
        return

    tasks = [binding.start() for binding in bindings]
    try:
        vault, denoms, pnl = await asyncio.gather(*tasks)
    except MarsClientError as e:
        print(f"Query failed: {e.message}")
        return

    print(f"Vault total liquidity: {vault['total_liquidity']}")
    for denom in denoms:
        print(f"  {denom['denom']}: enabled={denom['enabled']}")
    print(f"Total pnl: {pnl['pnl']}")

    # Everything cached for this contract address shares one prefix.
    prefix = query_keys.address(client.contract_address)
    print(f"All keys under {prefix.as_list()}: {all(b.key.matches(prefix) for b in bindings)}")


if __name__ == "__main__":
    asyncio.run(main())
