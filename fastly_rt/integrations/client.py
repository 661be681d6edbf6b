import time
from typing import Optional, Protocol, Type, TypeVar
from uuid import uuid4

import httpx
from pydantic import BaseModel, ValidationError

from fastly_rt.core.settings import settings
from fastly_rt.errors import ConfigurationError, DecodeError, RequestError
from fastly_rt.obs import log_event


class TimestampHolder(Protocol):
    timestamp: int


M = TypeVar("M", bound=BaseModel)


class CoreClient:
    """Authenticated GET + typed decode against one real-time endpoint root.

    Holds the consecutive-stats cursor. The cursor is a plain attribute with
    no locking: one polling sequence per instance. ``get_from``,
    ``get_window`` and ``get_window_limited`` never touch it and may run
    concurrently.
    """

    def __init__(
        self,
        api_key: str,
        service_id: str,
        endpoint: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.service_id = service_id
        self.endpoint = endpoint.rstrip("/")
        self.timeout = settings.FASTLY_RT_TIMEOUT if timeout is None else timeout
        self._timestamp = 0
        try:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"fastly-key": api_key, "Accept": "application/json"},
                transport=transport,
            )
        except (OSError, ValueError, httpx.InvalidURL) as e:
            raise ConfigurationError(f"could not initialise HTTP transport: {e}") from e

    @property
    def cursor(self) -> int:
        return self._timestamp

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "CoreClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ---------- Consecutive stats ----------
    def reset_cursor(self) -> None:
        self._timestamp = 0

    async def poll(self, model: Type[M]) -> M:
        """Fetch everything newer than the cursor, then advance it.

        The first call (cursor 0) returns the latest second. The cursor only
        moves after a successful decode, so a failed poll can be retried
        without skipping data.
        """
        rt_stats = await self.get_from(model, self._timestamp)
        ts = _timestamp_of(rt_stats)
        log_event("rt.cursor", service_id=self.service_id, previous=self._timestamp, cursor=ts)
        self._timestamp = ts
        return rt_stats

    # ---------- Stateless ----------
    async def get_from(self, model: Type[M], start_timestamp: int) -> M:
        return await self._fetch(model, f"{self.endpoint}/{self.service_id}/ts/{start_timestamp}")

    async def get_window(self, model: Type[M]) -> M:
        # GET .../ts/h : the 120 seconds preceding the latest available timestamp
        return await self._fetch(model, f"{self.endpoint}/{self.service_id}/ts/h")

    async def get_window_limited(self, model: Type[M], max_entries: int) -> M:
        # Passed through as-is; the provider's own cap wins
        return await self._fetch(model, f"{self.endpoint}/{self.service_id}/ts/h/limit/{max_entries}")

    async def _fetch(self, model: Type[M], url: str) -> M:
        cid = str(uuid4())
        log_event("rt.request", cid=cid, method="GET", url=url)
        start = time.perf_counter()
        try:
            r = await self._client.get(url)
        except httpx.HTTPError as e:
            log_event("rt.error", level="warning", cid=cid, url=url, kind="transport", error=str(e))
            raise RequestError(url, cause=e) from e
        log_event("rt.response", cid=cid, status=r.status_code, url=url, dur_ms=int((time.perf_counter() - start) * 1000))

        if not r.is_success:
            log_event("rt.error", level="warning", cid=cid, url=url, kind="status", status=r.status_code)
            raise RequestError(url, status=r.status_code, body=r.text)

        try:
            return model.model_validate(r.json())
        except (ValueError, ValidationError) as e:
            log_event("rt.error", level="warning", cid=cid, url=url, kind="decode")
            raise DecodeError(url, str(e)) from e


def _timestamp_of(value: TimestampHolder) -> int:
    return int(value.timestamp)
