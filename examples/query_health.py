"""Rover health query example for the Mars contract clients."""

import asyncio
import logging
import os

from dotenv import load_dotenv

from mars_client import ClientConfig, LcdQueryTransport
from mars_client.contracts.rover_health import RoverHealthQueryClient
from mars_client.exceptions import MarsClientError, RemoteExecutionError

# Configure logging to see detailed execution
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()


async def main():
    """Print the health of one credit account."""

    config = ClientConfig.from_env()
    if not config.contracts.rover_health:
        raise ValueError("MARS_ROVER_HEALTH_ADDRESS not found in environment variables")

    account_id = os.getenv("MARS_ACCOUNT_ID", "1")

    transport = LcdQueryTransport.from_config(config)
    client = RoverHealthQueryClient(transport, config.contracts.rover_health)
    logger.info("Querying %s on %s", client.contract_address, transport.lcd_url)

    try:
        health_config = await client.config()
        print(f"Credit manager: {health_config.get('credit_manager')}")

        values = await client.health_values(
            account_id=account_id, action="default", kind="default"
        )
        print(f"Total collateral value: {values['total_collateral_value']}")
        print(f"Total debt value:       {values['total_debt_value']}")
        print(f"Max LTV health factor:  {values['max_ltv_health_factor']}")
        print(f"Liquidatable:           {values['liquidatable']}")

        state = await client.health_state(
            account_id=account_id, action="liquidation", kind="default"
        )
        if state == "healthy":
            print("Account is healthy")
        else:
            print(f"Account is unhealthy: {state['unhealthy']}")
    except RemoteExecutionError as e:
        print(f"Contract rejected the query: {e.diagnostic}")
    except MarsClientError as e:
        print(f"Query failed: {e.message}")


if __name__ == "__main__":
    asyncio.run(main())
