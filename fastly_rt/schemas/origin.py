"""Real-time origin metrics response models.

Field reference:
https://developer.fastly.com/reference/api/metrics-stats/origin-inspector/real-time/#measurements-data-model
"""
from __future__ import annotations

from typing import Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, NonNegativeInt


class OriginStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    resp_body_bytes: NonNegativeInt = 0
    resp_header_bytes: NonNegativeInt = 0
    responses: NonNegativeInt = 0
    status_1xx: NonNegativeInt = 0
    status_200: NonNegativeInt = 0
    status_204: NonNegativeInt = 0
    status_206: NonNegativeInt = 0
    status_2xx: NonNegativeInt = 0
    status_301: NonNegativeInt = 0
    status_302: NonNegativeInt = 0
    status_304: NonNegativeInt = 0
    status_3xx: NonNegativeInt = 0
    status_400: NonNegativeInt = 0
    status_401: NonNegativeInt = 0
    status_403: NonNegativeInt = 0
    status_404: NonNegativeInt = 0
    status_416: NonNegativeInt = 0
    status_429: NonNegativeInt = 0
    status_4xx: NonNegativeInt = 0
    status_500: NonNegativeInt = 0
    status_501: NonNegativeInt = 0
    status_502: NonNegativeInt = 0
    status_503: NonNegativeInt = 0
    status_504: NonNegativeInt = 0
    status_505: NonNegativeInt = 0
    status_5xx: NonNegativeInt = 0


class OriginDataInSecond(BaseModel):
    model_config = ConfigDict(frozen=True)

    recorded: NonNegativeInt = 0
    # origin_name -> stats, aggregated across all POPs
    aggregated: Dict[str, OriginStats] = Field(default_factory=dict)
    # pop_name -> origin_name -> stats
    datacenter: Dict[str, Dict[str, OriginStats]] = Field(default_factory=dict)


class OriginResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    aggregate_delay: NonNegativeInt = Field(default=0, strict=True, validation_alias=AliasChoices("AggregateDelay", "aggregate_delay"))
    data: List[OriginDataInSecond] = Field(validation_alias=AliasChoices("Data", "data"))
    timestamp: NonNegativeInt = Field(default=0, strict=True, validation_alias=AliasChoices("Timestamp", "timestamp"))
