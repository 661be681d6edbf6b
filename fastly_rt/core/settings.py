import os
from typing import Optional

from pydantic import BaseModel


class Settings(BaseModel):
    # Credentials (optional at import; clients built from settings fail if missing)
    FASTLY_API_KEY: Optional[str] = os.getenv("FASTLY_API_KEY")
    FASTLY_SERVICE_ID: Optional[str] = os.getenv("FASTLY_SERVICE_ID")

    # Real-time API
    FASTLY_RT_BASE: str = os.getenv("FASTLY_RT_BASE", "https://rt.fastly.com/v1")
    FASTLY_RT_TIMEOUT: float = float(os.getenv("FASTLY_RT_TIMEOUT", "10.0"))

    @property
    def rt_base_url(self) -> str:
        """Return the real-time API base URL without a trailing slash."""
        return (self.FASTLY_RT_BASE or "https://rt.fastly.com/v1").rstrip("/")

    @property
    def channel_endpoint(self) -> str:
        return f"{self.rt_base_url}/channel"

    @property
    def origins_endpoint(self) -> str:
        return f"{self.rt_base_url}/origins"


settings = Settings()
