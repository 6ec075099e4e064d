"""Tests for the connection registry."""

from unittest.mock import MagicMock

import pytest
from starlette.websockets import WebSocketDisconnect, WebSocketState

from friendlytime.services.registry import (
    ConnectionHandle,
    ConnectionRegistry,
    HandleClosedError,
    WebSocketHandle,
)


def test_register_and_lookup(make_handle) -> None:
    registry = ConnectionRegistry()
    handle = make_handle()

    registry.register(1, handle)

    assert registry.lookup(1) is handle
    assert 1 in registry
    assert registry.online_user_ids() == [1]


def test_lookup_unknown_user_returns_none() -> None:
    assert ConnectionRegistry().lookup(42) is None


def test_register_replaces_previous_handle(make_handle) -> None:
    """Re-registering keeps only the newest handle."""
    registry = ConnectionRegistry()
    old, new = make_handle(), make_handle()

    registry.register(1, old)
    registry.register(1, new)

    assert registry.lookup(1) is new
    assert len(registry) == 1


def test_unregister_removes_binding(make_handle) -> None:
    registry = ConnectionRegistry()
    registry.register(1, make_handle())

    registry.unregister(1)

    assert registry.lookup(1) is None
    assert len(registry) == 0


def test_unregister_unknown_user_is_noop(make_handle) -> None:
    registry = ConnectionRegistry()
    registry.register(2, make_handle())

    registry.unregister(1)

    assert registry.online_user_ids() == [2]


def test_unregister_with_stale_handle_keeps_replacement(make_handle) -> None:
    """A superseded connection closing does not evict its replacement."""
    registry = ConnectionRegistry()
    old, new = make_handle(), make_handle()
    registry.register(1, old)
    registry.register(1, new)

    registry.unregister(1, old)
    assert registry.lookup(1) is new

    registry.unregister(1, new)
    assert registry.lookup(1) is None


def test_lookup_does_not_check_liveness(make_handle) -> None:
    registry = ConnectionRegistry()
    closed = make_handle(is_open=False)
    registry.register(1, closed)

    assert registry.lookup(1) is closed


def test_registries_are_independent(make_handle) -> None:
    first, second = ConnectionRegistry(), ConnectionRegistry()
    first.register(1, make_handle())

    assert 1 not in second


def _websocket(client_state=WebSocketState.CONNECTED, app_state=WebSocketState.CONNECTED):
    websocket = MagicMock()
    websocket.client_state = client_state
    websocket.application_state = app_state
    return websocket


def test_websocket_handle_is_open() -> None:
    assert WebSocketHandle(_websocket()).is_open
    assert not WebSocketHandle(_websocket(client_state=WebSocketState.DISCONNECTED)).is_open
    assert not WebSocketHandle(_websocket(app_state=WebSocketState.DISCONNECTED)).is_open


def test_websocket_handle_satisfies_protocol() -> None:
    assert isinstance(WebSocketHandle(_websocket()), ConnectionHandle)


@pytest.mark.asyncio
async def test_websocket_handle_sends_json(mocker) -> None:
    websocket = _websocket()
    websocket.send_json = mocker.AsyncMock()

    await WebSocketHandle(websocket).send_json({"type": "chat"})

    websocket.send_json.assert_awaited_once_with({"type": "chat"})


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [WebSocketDisconnect(code=1006), RuntimeError("Cannot call send once a close message has been sent."), OSError("reset")],
)
async def test_websocket_handle_wraps_transport_errors(mocker, error) -> None:
    websocket = _websocket()
    websocket.send_json = mocker.AsyncMock(side_effect=error)

    with pytest.raises(HandleClosedError):
        await WebSocketHandle(websocket).send_json({"type": "chat"})
