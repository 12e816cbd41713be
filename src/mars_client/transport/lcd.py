"""Read-only transport over a Cosmos LCD (REST) endpoint."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
import threading
from typing import Any

import requests

from ..codec import Envelope
from ..config import DEFAULT_REQUEST_TIMEOUT, ClientConfig
from ..exceptions import RemoteExecutionError, TransportError
from .base import QueryTransport

logger = logging.getLogger(__name__)

SMART_QUERY_PATH = "/cosmwasm/wasm/v1/contract/{address}/smart/{query}"


class LcdQueryTransport(QueryTransport):
    """Issue wasm smart queries through ``requests``.

    Requests run in a worker thread so callers can await them without
    blocking the event loop. The request timeout is owned here.

    ``requests.Session`` is not documented as thread-safe, so each worker
    thread gets its own session. A ``session`` passed in explicitly is used
    by every thread as-is.
    """

    def __init__(
        self,
        lcd_url: str,
        *,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.lcd_url = lcd_url.rstrip("/")
        self.request_timeout = request_timeout
        self._session = session
        self._local = threading.local()

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, session: requests.Session | None = None
    ) -> LcdQueryTransport:
        resolved = config.with_defaulted_urls()
        return cls(
            resolved.lcd_url or "",
            request_timeout=resolved.request_timeout,
            session=session,
        )

    async def query(self, contract_address: str, msg: Envelope) -> Any:
        return await asyncio.to_thread(self._query_sync, contract_address, msg)

    def smart_query_url(self, contract_address: str, msg: Envelope) -> str:
        encoded = base64.b64encode(
            json.dumps(msg, separators=(",", ":")).encode("utf-8")
        ).decode("ascii")
        path = SMART_QUERY_PATH.format(address=contract_address, query=encoded)
        return f"{self.lcd_url}{path}"

    def _get_session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    def _query_sync(self, contract_address: str, msg: Envelope) -> Any:
        url = self.smart_query_url(contract_address, msg)
        logger.debug("LCD smart query %s -> %s", contract_address, msg)

        try:
            response = self._get_session().get(url, timeout=self.request_timeout)
        except requests.Timeout as exc:
            raise TransportError(
                "LCD request timed out",
                endpoint=self.lcd_url,
                details={"error": str(exc), "timeout": self.request_timeout},
            ) from exc
        except requests.RequestException as exc:
            raise TransportError(
                "Unable to reach LCD endpoint",
                endpoint=self.lcd_url,
                details={"error": str(exc)},
            ) from exc

        body = _json_body(response)

        if 200 <= response.status_code < 300:
            if not isinstance(body, dict) or "data" not in body:
                raise TransportError(
                    "LCD response is missing the query data",
                    endpoint=self.lcd_url,
                    status_code=response.status_code,
                    details={"body": body},
                )
            return body["data"]

        if isinstance(body, dict) and body.get("message"):
            logger.error("Contract %s rejected query: %s", contract_address, body["message"])
            raise RemoteExecutionError(
                str(body["message"]),
                contract_address=contract_address,
                details={"code": body.get("code"), "status_code": response.status_code},
            )

        raise TransportError(
            f"LCD request failed with HTTP {response.status_code}",
            endpoint=self.lcd_url,
            status_code=response.status_code,
            details={"body": body},
        )


def _json_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
