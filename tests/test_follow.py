import asyncio

import pytest

from fastly_rt import RequestError, ServiceClient, follow
from fastly_rt.services import polling

import httpx


def test_follow_polls_consecutively(recorder, monkeypatch):
    sleeps = []

    async def fake_sleep(sec):
        sleeps.append(sec)

    monkeypatch.setattr(polling.asyncio, "sleep", fake_sleep)
    handler = recorder(
        {"Timestamp": 10, "Data": [{"recorded": 9}]},
        {"Timestamp": 12, "Data": [{"recorded": 10}, {"recorded": 11}]},
        {"Timestamp": 13, "Data": [{"recorded": 12}]},
    )
    rt = ServiceClient("key", "SID", transport=handler.transport())

    async def run():
        return [rsp async for rsp in follow(rt, 0.5, max_polls=3)]

    out = asyncio.run(run())
    assert [r.timestamp for r in out] == [10, 12, 13]
    assert [d.recorded for r in out for d in r.data] == [9, 10, 11, 12]
    assert sleeps == [0.5, 0.5]
    assert handler.urls[-1].endswith("/SID/ts/12")


def test_follow_propagates_errors_and_keeps_cursor(recorder, monkeypatch):
    async def fake_sleep(sec):
        return None

    monkeypatch.setattr(polling.asyncio, "sleep", fake_sleep)
    handler = recorder(
        {"Timestamp": 10, "Data": []},
        httpx.Response(500, text="oops"),
    )
    rt = ServiceClient("key", "SID", transport=handler.transport())

    async def run():
        async for _ in follow(rt, max_polls=5):
            pass

    with pytest.raises(RequestError):
        asyncio.run(run())
    assert rt.timestamp == 10
