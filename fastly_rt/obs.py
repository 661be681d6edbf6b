from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

_logger = logging.getLogger("fastly_rt")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def log_event(event: str, level: str = "info", **fields: Any) -> None:
    """Emit one JSON line for a client event (rt.request, rt.response, rt.cursor, rt.error, rt.follow).

    Fields: ts (ms), level, event, plus the non-None extras. Callers never
    pass the API key.
    """
    lvl = _LEVELS.get(level, logging.INFO)
    if not _logger.isEnabledFor(lvl):
        return
    payload: Dict[str, Any] = {"ts": int(time.time() * 1000), "level": level, "event": event}
    payload.update({k: v for k, v in fields.items() if v is not None})
    _logger.log(lvl, json.dumps(payload, ensure_ascii=False, default=str))
