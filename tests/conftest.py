import os
import sys

import httpx
import pytest

# Ensure repository root is on sys.path so `import fastly_rt` works under pytest
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


class Recorder:
    """MockTransport handler that replays canned responses and records requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        rsp = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(rsp, Exception):
            raise rsp
        if isinstance(rsp, httpx.Response):
            return rsp
        return httpx.Response(200, json=rsp)

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def recorder():
    return Recorder
