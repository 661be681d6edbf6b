"""Client for Fastly's real-time analytics and real-time origin metrics APIs.

    async with ServiceClient(api_key, service_id) as rt:
        while True:
            rt_data = await rt.get_stats_consecutive()
            for data in rt_data.data:
                print(data.recorded, data.aggregated.requests)
"""

from .errors import ConfigurationError, DecodeError, FastlyRTError, RequestError
from .integrations.client import CoreClient
from .schemas import (
    OriginDataInSecond,
    OriginResponse,
    OriginStats,
    ServiceDataInSecond,
    ServiceResponse,
    ServiceStats,
)
from .services import OriginClient, ServiceClient, follow

__all__ = [
    "CoreClient",
    "ServiceClient",
    "OriginClient",
    "follow",
    "ServiceResponse",
    "ServiceDataInSecond",
    "ServiceStats",
    "OriginResponse",
    "OriginDataInSecond",
    "OriginStats",
    "FastlyRTError",
    "ConfigurationError",
    "RequestError",
    "DecodeError",
]
