from __future__ import annotations

import base64
import json
import threading
from typing import Any

import pytest
import requests
from requests import Session

from mars_client.config import ClientConfig
from mars_client.contracts.rover_health import RoverHealthQueryClient
from mars_client.exceptions import RemoteExecutionError, TransportError, ValidationError
from mars_client.transport import LcdQueryTransport

LCD = "https://lcd.example.com"
CONTRACT = "neutron1contract"


class DummyResponse:
    def __init__(self, payload: Any, *, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class DummySession(Session):
    def __init__(self, response: DummyResponse | None = None, error: Exception | None = None):
        super().__init__()
        self._response = response
        self._error = error
        self.calls: list[tuple[str, float]] = []

    def get(self, url: str, timeout: float) -> DummyResponse:  # type: ignore[override]
        self.calls.append((url, timeout))
        if self._error is not None:
            raise self._error
        assert self._response is not None
        return self._response


def _decoded_query(url: str) -> Any:
    encoded = url.rsplit("/", 1)[-1]
    return json.loads(base64.b64decode(encoded))


def test_smart_query_url_encodes_envelope() -> None:
    transport = LcdQueryTransport(LCD + "/", session=DummySession(DummyResponse({})))

    url = transport.smart_query_url(CONTRACT, {"config": {}})

    assert url.startswith(f"{LCD}/cosmwasm/wasm/v1/contract/{CONTRACT}/smart/")
    assert _decoded_query(url) == {"config": {}}


@pytest.mark.asyncio
async def test_query_returns_data() -> None:
    session = DummySession(DummyResponse({"data": {"credit_manager": "neutron1cm"}}))
    transport = LcdQueryTransport(LCD, request_timeout=3.0, session=session)
    client = RoverHealthQueryClient(transport, CONTRACT)

    result = await client.config()

    assert result == {"credit_manager": "neutron1cm"}
    url, timeout = session.calls[0]
    assert timeout == 3.0
    assert _decoded_query(url) == {"config": {}}


@pytest.mark.asyncio
async def test_contract_error_raises_remote_execution_error() -> None:
    body = {"code": 2, "message": "Generic error: account 9 not found: query wasm contract failed"}
    session = DummySession(DummyResponse(body, status_code=500))
    transport = LcdQueryTransport(LCD, session=session)

    with pytest.raises(RemoteExecutionError) as excinfo:
        await transport.query(CONTRACT, {"health_state": {"account_id": "9"}})

    assert excinfo.value.diagnostic == body["message"]
    assert excinfo.value.contract_address == CONTRACT
    assert excinfo.value.details["code"] == 2


@pytest.mark.asyncio
async def test_http_error_without_message_raises_transport_error() -> None:
    session = DummySession(DummyResponse(ValueError("not json"), status_code=502))
    transport = LcdQueryTransport(LCD, session=session)

    with pytest.raises(TransportError) as excinfo:
        await transport.query(CONTRACT, {"config": {}})

    assert excinfo.value.status_code == 502


@pytest.mark.asyncio
async def test_missing_data_raises_transport_error() -> None:
    transport = LcdQueryTransport(LCD, session=DummySession(DummyResponse({"result": 1})))

    with pytest.raises(TransportError):
        await transport.query(CONTRACT, {"config": {}})


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "message"),
    [
        (requests.Timeout("read timed out"), "LCD request timed out"),
        (requests.ConnectionError("refused"), "Unable to reach LCD endpoint"),
    ],
)
async def test_network_failures_raise_transport_error(error: Exception, message: str) -> None:
    transport = LcdQueryTransport(LCD, session=DummySession(error=error))

    with pytest.raises(TransportError) as excinfo:
        await transport.query(CONTRACT, {"config": {}})

    assert excinfo.value.message == message
    assert excinfo.value.endpoint == LCD


def test_from_config_defaults_lcd_url() -> None:
    transport = LcdQueryTransport.from_config(
        ClientConfig(chain_id="neutron-1", request_timeout=4.0), session=DummySession()
    )

    assert transport.lcd_url == "https://rest-kralum.neutron-1.neutron.org"
    assert transport.request_timeout == 4.0


def test_from_config_unknown_chain() -> None:
    with pytest.raises(ValidationError):
        LcdQueryTransport.from_config(ClientConfig(chain_id="unknown-1"))


def test_each_worker_thread_gets_its_own_session() -> None:
    transport = LcdQueryTransport(LCD)
    sessions: list[Session] = []

    worker = threading.Thread(target=lambda: sessions.append(transport._get_session()))
    worker.start()
    worker.join()

    assert transport._get_session() is transport._get_session()
    assert sessions[0] is not transport._get_session()


def test_injected_session_is_shared() -> None:
    session = DummySession(DummyResponse({}))
    transport = LcdQueryTransport(LCD, session=session)

    assert transport._get_session() is session
