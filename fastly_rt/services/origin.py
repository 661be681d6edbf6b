from typing import Optional

import httpx

from fastly_rt.core.settings import Settings, settings as default_settings
from fastly_rt.errors import ConfigurationError
from fastly_rt.integrations.client import CoreClient
from fastly_rt.schemas.origin import OriginResponse


class OriginClient:
    """Client for real-time origin metrics of a service."""

    ENDPOINT = "https://rt.fastly.com/v1/origins"

    def __init__(
        self,
        api_key: str,
        service_id: str,
        *,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.cli = CoreClient(api_key, service_id, endpoint or self.ENDPOINT, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "OriginClient":
        s = settings or default_settings
        if not s.FASTLY_API_KEY:
            raise ConfigurationError("FASTLY_API_KEY not set")
        if not s.FASTLY_SERVICE_ID:
            raise ConfigurationError("FASTLY_SERVICE_ID not set")
        kwargs.setdefault("endpoint", s.origins_endpoint)
        kwargs.setdefault("timeout", s.FASTLY_RT_TIMEOUT)
        return cls(s.FASTLY_API_KEY, s.FASTLY_SERVICE_ID, **kwargs)

    @property
    def timestamp(self) -> int:
        return self.cli.cursor

    async def aclose(self) -> None:
        await self.cli.aclose()

    async def __aenter__(self) -> "OriginClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def reset_stats_consecutive(self) -> None:
        """Reset the consecutive-stats timestamp to 0.

        The next ``get_stats_consecutive`` behaves like the first call.
        """
        self.cli.reset_cursor()

    async def get_stats_consecutive(self) -> OriginResponse:
        """First call returns the latest second; each later call returns
        everything recorded since the previous one."""
        return await self.cli.poll(OriginResponse)

    async def get_stats_from(self, start_timestamp: int) -> OriginResponse:
        """Origin stats from ``start_timestamp`` up to the latest available."""
        return await self.cli.get_from(OriginResponse, start_timestamp)

    async def get_stats_120s(self) -> OriginResponse:
        """The 120 seconds preceding the latest available timestamp."""
        return await self.cli.get_window(OriginResponse)

    async def get_stats_max(self, max_entries: int) -> OriginResponse:
        """Like ``get_stats_120s`` but at most ``max_entries`` entries."""
        return await self.cli.get_window_limited(OriginResponse, max_entries)
