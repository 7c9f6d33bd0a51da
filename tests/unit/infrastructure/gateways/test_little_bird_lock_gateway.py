from __future__ import annotations

import httpx
import pytest

from src.domain.entities.actuation import ActuationStatus
from src.domain.entities.errors import ActuatorError
from src.infrastructure.gateways.little_bird_lock_gateway import LittleBirdLockGateway


class _StubResponse:
    def __init__(self, status_code: int, text: str = "{}"):
        self.status_code = status_code
        self.text = text


class _StubAsyncClient:
    def __init__(self, response: _StubResponse):
        self._response = response
        self.calls: list = []

    async def __aenter__(self) -> "_StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def post(self, url: str, headers: dict, json: dict):
        self.calls.append({"url": url, "headers": headers, "json": json})
        return self._response


def _gateway(token: str = "secret") -> LittleBirdLockGateway:
    return LittleBirdLockGateway(
        base_url="https://vendor.example/",
        property_id="p1",
        unit_id="u1",
        lock_id="l1",
        auth_token=token,
    )


def test_lock_url() -> None:
    assert _gateway().lock_url == (
        "https://vendor.example/properties/p1/units/u1/panel/devices/locks/l1"
    )


@pytest.mark.asyncio
async def test_set_status_posts_status_with_headers(monkeypatch) -> None:
    client = _StubAsyncClient(_StubResponse(200, '{"ok": true}'))
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)

    response = await _gateway().set_status(ActuationStatus.SECURED)

    assert response.status_code == 200
    assert response.body == '{"ok": true}'
    call = client.calls[0]
    assert call["json"] == {"status": "SECURED"}
    assert call["headers"]["authorization"] == "Bearer secret"
    assert call["headers"]["api-version"] == ">=0.8.0 <2.0.0"


@pytest.mark.asyncio
async def test_existing_bearer_prefix_is_kept(monkeypatch) -> None:
    client = _StubAsyncClient(_StubResponse(200))
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)

    await _gateway("Bearer abc").set_status(ActuationStatus.UNSECURED)

    assert client.calls[0]["headers"]["authorization"] == "Bearer abc"


@pytest.mark.asyncio
async def test_error_status_is_returned_not_raised(monkeypatch) -> None:
    client = _StubAsyncClient(_StubResponse(403, "forbidden"))
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)

    response = await _gateway().set_status(ActuationStatus.SECURED)

    assert response.status_code == 403
    assert response.body == "forbidden"


@pytest.mark.asyncio
async def test_request_error_raises_actuator_error(monkeypatch) -> None:
    class _FailingClient:
        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return None

        async def post(self, url, headers, json):
            raise httpx.ConnectTimeout("timed out")

    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: _FailingClient())

    with pytest.raises(ActuatorError) as exc:
        await _gateway().set_status(ActuationStatus.SECURED)

    assert exc.value.details == {"status": "SECURED"}
