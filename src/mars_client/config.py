"""Configuration containers for the Mars contract clients."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from dotenv import load_dotenv

from .exceptions import ValidationError

DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_CHAIN_ID = "neutron-1"

DEFAULT_LCD_URLS = {
    "neutron-1": "https://rest-kralum.neutron-1.neutron.org",
    "pion-1": "https://rest-palvus.pion-1.ntrn.tech",
    "osmosis-1": "https://lcd.osmosis.zone",
}

ENV_PREFIX = "MARS_"


@dataclass(frozen=True)
class ContractAddresses:
    """Deployed contract addresses; any of them may be unknown."""

    rover_health: str | None = None
    swapper: str | None = None
    perps: str | None = None


@dataclass(frozen=True)
class ClientConfig:
    """Aggregated configuration used to construct transports and clients."""

    chain_id: str = DEFAULT_CHAIN_ID
    lcd_url: str | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    contracts: ContractAddresses = field(default_factory=ContractAddresses)

    def with_defaulted_urls(self) -> ClientConfig:
        """Return a copy with the LCD URL defaulted from the chain id."""

        if self.lcd_url is not None:
            return replace(self, lcd_url=self.lcd_url.rstrip("/"))

        lcd_url = DEFAULT_LCD_URLS.get(self.chain_id)
        if lcd_url is None:
            raise ValidationError(
                f"No default LCD endpoint for chain '{self.chain_id}'; set lcd_url",
                field="chain_id",
                value=self.chain_id,
            )
        return replace(self, lcd_url=lcd_url)

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> ClientConfig:
        """Build a config from ``MARS_*`` environment variables (and ``.env``)."""

        load_dotenv(dotenv_path)

        timeout_raw = os.getenv(f"{ENV_PREFIX}REQUEST_TIMEOUT")
        try:
            request_timeout = float(timeout_raw) if timeout_raw else DEFAULT_REQUEST_TIMEOUT
        except ValueError as exc:
            raise ValidationError(
                "Request timeout must be numeric",
                field=f"{ENV_PREFIX}REQUEST_TIMEOUT",
                value=timeout_raw,
            ) from exc

        contracts = ContractAddresses(
            rover_health=os.getenv(f"{ENV_PREFIX}ROVER_HEALTH_ADDRESS") or None,
            swapper=os.getenv(f"{ENV_PREFIX}SWAPPER_ADDRESS") or None,
            perps=os.getenv(f"{ENV_PREFIX}PERPS_ADDRESS") or None,
        )

        return cls(
            chain_id=os.getenv(f"{ENV_PREFIX}CHAIN_ID") or DEFAULT_CHAIN_ID,
            lcd_url=os.getenv(f"{ENV_PREFIX}LCD_URL") or None,
            request_timeout=request_timeout,
            contracts=contracts,
        )
