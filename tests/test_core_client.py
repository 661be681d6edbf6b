import asyncio
import json
import logging

import httpx
import pytest

from fastly_rt.errors import ConfigurationError, DecodeError, RequestError
from fastly_rt.integrations.client import CoreClient
from fastly_rt.schemas.service import ServiceResponse

ROOT_URL = "https://rt.example.com/v1/channel"


def _client(handler, **kwargs) -> CoreClient:
    return CoreClient("secret-key", "abc123", ROOT_URL, transport=handler.transport(), **kwargs)


def test_consecutive_polls_follow_returned_timestamp(recorder):
    handler = recorder(
        {"Timestamp": 1000, "Data": [], "AggregateDelay": 2},
        {"Timestamp": 1004, "Data": [], "AggregateDelay": 2},
        {"Timestamp": 1009, "Data": [], "AggregateDelay": 2},
    )
    client = _client(handler)

    async def run():
        first = await client.poll(ServiceResponse)
        assert client.cursor == 1000
        second = await client.poll(ServiceResponse)
        assert client.cursor == 1004
        await client.poll(ServiceResponse)
        return first, second

    first, second = asyncio.run(run())
    assert first.aggregate_delay == 2
    assert second.timestamp == 1004
    assert client.cursor == 1009
    assert handler.urls == [
        f"{ROOT_URL}/abc123/ts/0",
        f"{ROOT_URL}/abc123/ts/1000",
        f"{ROOT_URL}/abc123/ts/1004",
    ]


def test_reset_cursor_makes_next_poll_look_like_the_first(recorder):
    handler = recorder({"timestamp": 77, "data": []})
    client = _client(handler)

    async def run():
        await client.poll(ServiceResponse)
        await client.poll(ServiceResponse)
        client.reset_cursor()
        assert client.cursor == 0
        await client.poll(ServiceResponse)

    asyncio.run(run())
    assert handler.urls[0] == handler.urls[2] == f"{ROOT_URL}/abc123/ts/0"
    assert handler.urls[1] == f"{ROOT_URL}/abc123/ts/77"


@pytest.mark.parametrize(
    "failure, exc_type",
    [
        (httpx.Response(503, text="upstream busy"), RequestError),
        (httpx.Response(200, text="<html>not json</html>"), DecodeError),
        (httpx.Response(200, json={"Timestamp": "soon", "Data": []}), DecodeError),
        (httpx.Response(200, json={"Timestamp": 5}), DecodeError),
        (httpx.Response(200, json={"Timestamp": -5, "Data": []}), DecodeError),
        (httpx.Response(200, json={"Timestamp": "1000", "Data": []}), DecodeError),
        (httpx.ConnectError("connection refused"), RequestError),
    ],
)
def test_failed_poll_leaves_cursor_unchanged(recorder, failure, exc_type):
    handler = recorder(
        {"Timestamp": 500, "Data": []},
        failure,
        {"Timestamp": 510, "Data": []},
    )
    client = _client(handler)

    async def run():
        await client.poll(ServiceResponse)
        with pytest.raises(exc_type):
            await client.poll(ServiceResponse)
        assert client.cursor == 500
        await client.poll(ServiceResponse)

    asyncio.run(run())
    assert handler.urls[1:] == [f"{ROOT_URL}/abc123/ts/500", f"{ROOT_URL}/abc123/ts/500"]
    assert client.cursor == 510


def test_get_from_does_not_touch_cursor(recorder):
    handler = recorder(
        {"Timestamp": 1000, "Data": []},
        {"Timestamp": 9999, "Data": []},
        {"Timestamp": 1001, "Data": []},
    )
    client = _client(handler)

    async def run():
        await client.poll(ServiceResponse)
        rsp = await client.get_from(ServiceResponse, 42)
        assert rsp.timestamp == 9999
        assert client.cursor == 1000
        await client.poll(ServiceResponse)

    asyncio.run(run())
    assert handler.urls == [
        f"{ROOT_URL}/abc123/ts/0",
        f"{ROOT_URL}/abc123/ts/42",
        f"{ROOT_URL}/abc123/ts/1000",
    ]


def test_window_paths_ignore_cursor(recorder):
    handler = recorder({"Timestamp": 300, "Data": []})
    client = _client(handler)

    async def run():
        await client.poll(ServiceResponse)
        await client.get_window(ServiceResponse)
        await client.get_window_limited(ServiceResponse, 5)

    asyncio.run(run())
    assert handler.urls[1:] == [f"{ROOT_URL}/abc123/ts/h", f"{ROOT_URL}/abc123/ts/h/limit/5"]
    assert client.cursor == 300


def test_max_entries_passed_through_verbatim(recorder):
    handler = recorder({"Data": []})
    client = _client(handler)
    asyncio.run(client.get_window_limited(ServiceResponse, 100000))
    assert handler.urls == [f"{ROOT_URL}/abc123/ts/h/limit/100000"]


def test_key_header_sent_on_every_request(recorder):
    handler = recorder({"Data": []})
    client = _client(handler)

    async def run():
        await client.poll(ServiceResponse)
        await client.get_window(ServiceResponse)

    asyncio.run(run())
    assert [r.headers["fastly-key"] for r in handler.requests] == ["secret-key", "secret-key"]


def test_trailing_slash_on_endpoint_is_dropped(recorder):
    handler = recorder({"Data": []})
    client = CoreClient("k", "sid", ROOT_URL + "/", transport=handler.transport())
    asyncio.run(client.get_window(ServiceResponse))
    assert handler.urls == [f"{ROOT_URL}/sid/ts/h"]


def test_status_error_carries_status_and_body(recorder):
    handler = recorder(httpx.Response(401, json={"msg": "Provided credentials are missing or invalid"}))
    client = _client(handler)

    with pytest.raises(RequestError) as ei:
        asyncio.run(client.get_window(ServiceResponse))
    err = ei.value
    assert err.status == 401
    assert "credentials" in err.body
    assert str(err).startswith("HTTP 401")
    assert err.url == f"{ROOT_URL}/abc123/ts/h"


def test_transport_error_is_chained(recorder):
    handler = recorder(httpx.ReadTimeout("timed out"))
    client = _client(handler)

    with pytest.raises(RequestError) as ei:
        asyncio.run(client.get_window(ServiceResponse))
    assert ei.value.status is None
    assert isinstance(ei.value.__cause__, httpx.ReadTimeout)


def test_transport_init_failure_is_configuration_error(monkeypatch):
    def broken(*args, **kwargs):
        raise FileNotFoundError("SSL_CERT_FILE points nowhere")

    monkeypatch.setattr(httpx, "AsyncClient", broken)
    with pytest.raises(ConfigurationError):
        CoreClient("k", "sid", ROOT_URL)


def test_timeout_defaults_from_settings(monkeypatch):
    from fastly_rt.integrations import client as client_mod

    monkeypatch.setattr(client_mod.settings, "FASTLY_RT_TIMEOUT", 3.5)
    client = CoreClient("k", "sid", ROOT_URL)
    assert client.timeout == 3.5
    other = CoreClient("k", "sid", ROOT_URL, timeout=1.0)
    assert other.timeout == 1.0

    async def close():
        await client.aclose()
        await other.aclose()

    asyncio.run(close())


def test_api_key_never_logged(recorder, caplog):
    handler = recorder({"Timestamp": 12, "Data": []})
    client = _client(handler)

    with caplog.at_level(logging.INFO, logger="fastly_rt"):
        asyncio.run(client.poll(ServiceResponse))

    events = [json.loads(r.getMessage()) for r in caplog.records if r.name == "fastly_rt"]
    assert [e["event"] for e in events] == ["rt.request", "rt.response", "rt.cursor"]
    assert events[2]["cursor"] == 12
    assert "secret-key" not in caplog.text


def test_negative_timestamp_never_reaches_the_path(recorder):
    handler = recorder(
        {"Timestamp": -5, "Data": []},
        {"Timestamp": 1, "Data": []},
    )
    client = _client(handler)

    async def run():
        with pytest.raises(DecodeError):
            await client.poll(ServiceResponse)
        await client.poll(ServiceResponse)

    asyncio.run(run())
    assert handler.urls == [f"{ROOT_URL}/abc123/ts/0", f"{ROOT_URL}/abc123/ts/0"]
    assert client.cursor == 1


def test_follow_events_only_logged_at_debug(caplog):
    from fastly_rt.obs import log_event

    with caplog.at_level(logging.INFO, logger="fastly_rt"):
        log_event("rt.follow", level="debug", polls=1)
        log_event("rt.error", level="warning", kind="status", status=None)
    records = [r for r in caplog.records if r.name == "fastly_rt"]
    assert [r.levelno for r in records] == [logging.WARNING]
    event = json.loads(records[0].getMessage())
    assert isinstance(event.pop("ts"), int)
    assert event == {
        "level": "warning",
        "event": "rt.error",
        "kind": "status",
    }
