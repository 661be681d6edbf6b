"""Real-time analytics (per-service) response models.

Field reference:
https://developer.fastly.com/reference/api/metrics-stats/realtime/#measurements-data-model
"""
from __future__ import annotations

from typing import Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, NonNegativeInt


class ServiceStats(BaseModel):
    # Every measurement is optional on the wire; absent ones read as zero.
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    attack_blocked_req_body_bytes: NonNegativeInt = 0
    attack_blocked_req_header_bytes: NonNegativeInt = 0
    attack_logged_req_body_bytes: NonNegativeInt = 0
    attack_logged_req_header_bytes: NonNegativeInt = 0
    attack_passed_req_body_bytes: NonNegativeInt = 0
    attack_passed_req_header_bytes: NonNegativeInt = 0
    attack_req_body_bytes: NonNegativeInt = 0
    attack_req_header_bytes: NonNegativeInt = 0
    attack_resp_synth_bytes: NonNegativeInt = 0
    bereq_body_bytes: NonNegativeInt = 0
    bereq_header_bytes: NonNegativeInt = 0
    body_size: NonNegativeInt = 0
    compute_bereq_body_bytes: NonNegativeInt = 0
    compute_bereq_errors: NonNegativeInt = 0
    compute_bereq_header_bytes: NonNegativeInt = 0
    compute_bereqs: NonNegativeInt = 0
    compute_beresp_body_bytes: NonNegativeInt = 0
    compute_beresp_header_bytes: NonNegativeInt = 0
    compute_execution_time_ms: float = 0.0
    compute_globals_limit_exceeded: NonNegativeInt = 0
    compute_guest_errors: NonNegativeInt = 0
    compute_heap_limit_exceeded: NonNegativeInt = 0
    compute_ram_used: NonNegativeInt = 0
    compute_req_body_bytes: NonNegativeInt = 0
    compute_req_header_bytes: NonNegativeInt = 0
    compute_request_time_ms: float = 0.0
    compute_requests: NonNegativeInt = 0
    compute_resource_limit_exceeded: NonNegativeInt = 0
    compute_resp_body_bytes: NonNegativeInt = 0
    compute_resp_header_bytes: NonNegativeInt = 0
    compute_resp_status_1xx: NonNegativeInt = 0
    compute_resp_status_2xx: NonNegativeInt = 0
    compute_resp_status_3xx: NonNegativeInt = 0
    compute_resp_status_4xx: NonNegativeInt = 0
    compute_resp_status_5xx: NonNegativeInt = 0
    compute_runtime_errors: NonNegativeInt = 0
    compute_stack_limit_exceeded: NonNegativeInt = 0
    deliver_sub_count: NonNegativeInt = 0
    deliver_sub_time: float = 0.0
    edge_hit_requests: NonNegativeInt = 0
    edge_hit_resp_body_bytes: NonNegativeInt = 0
    edge_hit_resp_header_bytes: NonNegativeInt = 0
    edge_miss_requests: NonNegativeInt = 0
    edge_miss_resp_body_bytes: NonNegativeInt = 0
    edge_miss_resp_header_bytes: NonNegativeInt = 0
    edge_requests: NonNegativeInt = 0
    edge_resp_body_bytes: NonNegativeInt = 0
    edge_resp_header_bytes: NonNegativeInt = 0
    error_sub_count: NonNegativeInt = 0
    error_sub_time: float = 0.0
    errors: NonNegativeInt = 0
    fetch_sub_count: NonNegativeInt = 0
    fetch_sub_time: float = 0.0
    hash_sub_count: NonNegativeInt = 0
    hash_sub_time: float = 0.0
    header_size: NonNegativeInt = 0
    hit_resp_body_bytes: NonNegativeInt = 0
    hit_sub_count: NonNegativeInt = 0
    hit_sub_time: float = 0.0
    hits: NonNegativeInt = 0
    hits_time: float = 0.0
    http2: NonNegativeInt = 0
    http3: NonNegativeInt = 0
    imgopto: NonNegativeInt = 0
    imgopto_resp_body_bytes: NonNegativeInt = 0
    imgopto_resp_header_bytes: NonNegativeInt = 0
    imgopto_shield: NonNegativeInt = 0
    imgopto_shield_resp_body_bytes: NonNegativeInt = 0
    imgopto_shield_resp_header_bytes: NonNegativeInt = 0
    imgopto_transforms: NonNegativeInt = 0
    imgvideo: NonNegativeInt = 0
    imgvideo_frames: NonNegativeInt = 0
    imgvideo_resp_body_bytes: NonNegativeInt = 0
    imgvideo_resp_header_bytes: NonNegativeInt = 0
    imgvideo_shield: NonNegativeInt = 0
    imgvideo_shield_frames: NonNegativeInt = 0
    imgvideo_shield_resp_body_bytes: NonNegativeInt = 0
    imgvideo_shield_resp_header_bytes: NonNegativeInt = 0
    ipv6: NonNegativeInt = 0
    log: NonNegativeInt = 0
    log_bytes: NonNegativeInt = 0
    logging: NonNegativeInt = 0
    miss: NonNegativeInt = 0
    miss_histogram: Dict[str, NonNegativeInt] = Field(default_factory=dict)
    miss_resp_body_bytes: NonNegativeInt = 0
    miss_sub_count: NonNegativeInt = 0
    miss_sub_time: float = 0.0
    miss_time: float = 0.0
    object_size_100k: NonNegativeInt = 0
    object_size_100m: NonNegativeInt = 0
    object_size_10k: NonNegativeInt = 0
    object_size_10m: NonNegativeInt = 0
    object_size_1g: NonNegativeInt = 0
    object_size_1k: NonNegativeInt = 0
    object_size_1m: NonNegativeInt = 0
    object_size_other: NonNegativeInt = 0
    origin_cache_fetch_resp_body_bytes: NonNegativeInt = 0
    origin_cache_fetch_resp_header_bytes: NonNegativeInt = 0
    origin_cache_fetches: NonNegativeInt = 0
    origin_fetch_body_bytes: NonNegativeInt = 0
    origin_fetch_header_bytes: NonNegativeInt = 0
    origin_fetch_resp_body_bytes: NonNegativeInt = 0
    origin_fetch_resp_header_bytes: NonNegativeInt = 0
    origin_fetches: NonNegativeInt = 0
    origin_revalidations: NonNegativeInt = 0
    otfp: NonNegativeInt = 0
    otfp_deliver_time: float = 0.0
    otfp_manifests: NonNegativeInt = 0
    otfp_resp_body_bytes: NonNegativeInt = 0
    otfp_resp_header_bytes: NonNegativeInt = 0
    otfp_shield: NonNegativeInt = 0
    otfp_shield_resp_body_bytes: NonNegativeInt = 0
    otfp_shield_resp_header_bytes: NonNegativeInt = 0
    otfp_shield_time: float = 0.0
    # "pass" is a keyword
    pass_: NonNegativeInt = Field(default=0, alias="pass")
    pass_resp_body_bytes: NonNegativeInt = 0
    pass_sub_count: NonNegativeInt = 0
    pass_sub_time: float = 0.0
    pass_time: float = 0.0
    pci: NonNegativeInt = 0
    pipe_sub_count: NonNegativeInt = 0
    pipe_sub_time: float = 0.0
    predeliver_sub_count: NonNegativeInt = 0
    predeliver_sub_time: float = 0.0
    prehash_sub_count: NonNegativeInt = 0
    prehash_sub_time: float = 0.0
    recv_sub_count: NonNegativeInt = 0
    recv_sub_time: float = 0.0
    req_body_bytes: NonNegativeInt = 0
    req_header_bytes: NonNegativeInt = 0
    requests: NonNegativeInt = 0
    resp_body_bytes: NonNegativeInt = 0
    resp_header_bytes: NonNegativeInt = 0
    restarts: NonNegativeInt = 0
    segblock_origin_fetches: NonNegativeInt = 0
    segblock_shield_fetches: NonNegativeInt = 0
    shield: NonNegativeInt = 0
    shield_cache_fetches: NonNegativeInt = 0
    shield_fetch_body_bytes: NonNegativeInt = 0
    shield_fetch_header_bytes: NonNegativeInt = 0
    shield_fetch_resp_body_bytes: NonNegativeInt = 0
    shield_fetch_resp_header_bytes: NonNegativeInt = 0
    shield_fetches: NonNegativeInt = 0
    shield_resp_body_bytes: NonNegativeInt = 0
    shield_resp_header_bytes: NonNegativeInt = 0
    shield_revalidations: NonNegativeInt = 0
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
    synth: NonNegativeInt = 0
    tls: NonNegativeInt = 0
    tls_v10: NonNegativeInt = 0
    tls_v11: NonNegativeInt = 0
    tls_v12: NonNegativeInt = 0
    tls_v13: NonNegativeInt = 0
    uncacheable: NonNegativeInt = 0
    video: NonNegativeInt = 0
    waf_blocked: NonNegativeInt = 0
    waf_logged: NonNegativeInt = 0
    waf_passed: NonNegativeInt = 0


class ServiceDataInSecond(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Unix timestamp at which this record's data was generated
    recorded: NonNegativeInt = 0
    # Across all POPs
    aggregated: ServiceStats = Field(default_factory=ServiceStats)
    # pop_name -> stats
    datacenter: Dict[str, ServiceStats] = Field(default_factory=dict)


class ServiceResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Offset of entry timestamps from the current time due to processing time
    aggregate_delay: NonNegativeInt = Field(default=0, strict=True, validation_alias=AliasChoices("AggregateDelay", "aggregate_delay"))
    # One entry per second
    data: List[ServiceDataInSecond] = Field(validation_alias=AliasChoices("Data", "data"))
    # Value to resume from on the next consecutive request
    timestamp: NonNegativeInt = Field(default=0, strict=True, validation_alias=AliasChoices("Timestamp", "timestamp"))
