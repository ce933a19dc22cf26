"""Tests for websocket decoding sessions and connection lifecycle."""

import asyncio

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from flightlog.session import LogDecoder
from server.main import _decode_until_disconnect
from tests.server.helpers import FIX_LINE, make_log


def test_one_message_per_line(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text("\r\n".join(make_log(extensions=False)))
        messages = [websocket.receive_json() for _ in range(3)]
    assert [m["line_number"] for m in messages] == [1, 2, 3]
    assert messages[2]["record"]["pressure_altitude"] == 588


def test_schema_carried_across_frames(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text("I013638FXA")
        assert websocket.receive_json()["record"]["declared_count"] == 1
        websocket.send_text(FIX_LINE + "012")
        data = websocket.receive_json()
    assert data["line_number"] == 2
    assert data["record"]["extensions"] == {"FXA": "012"}


def test_connections_do_not_share_schemas(client: TestClient) -> None:
    with (
        client.websocket_connect("/ws") as socket_one,
        client.websocket_connect("/ws") as socket_two,
    ):
        socket_one.send_text("I013638FXA")
        socket_one.receive_json()
        socket_two.send_text(FIX_LINE + "012")
        assert socket_two.receive_json()["record"]["extensions"] == {}


def test_error_message(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text("Z12345")
        data = websocket.receive_json()
    assert data["ok"] is False
    assert data["error"]["message"] == "unrecognized record type 'Z'"


def test_timeout_disconnect(monkeypatch: pytest.MonkeyPatch, client: TestClient) -> None:
    monkeypatch.setattr("server.main._TIMEOUT_SECONDS", 0.05)
    with (
        pytest.raises(WebSocketDisconnect) as exc_info,
        client.websocket_connect("/ws") as websocket,
    ):
        websocket.receive_json()
    assert exc_info.value.code == 1001


def test_client_disconnect_silent() -> None:
    class MockWebSocket:
        async def receive_text(self) -> str:
            raise WebSocketDisconnect(code=1000)

    async def _run() -> None:
        decoder = LogDecoder()
        await _decode_until_disconnect(MockWebSocket(), decoder)  # type: ignore[arg-type]
        assert decoder.line_number == 0

    asyncio.run(_run())
