"""Typed mirrors of the real-time API payloads."""

from .origin import OriginDataInSecond, OriginResponse, OriginStats
from .service import ServiceDataInSecond, ServiceResponse, ServiceStats

__all__ = [
    "ServiceResponse",
    "ServiceDataInSecond",
    "ServiceStats",
    "OriginResponse",
    "OriginDataInSecond",
    "OriginStats",
]
