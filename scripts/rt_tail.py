#!/usr/bin/env python3
"""Print live per-second request counts for a Fastly service.

Reads FASTLY_API_KEY / FASTLY_SERVICE_ID from the environment unless given.
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from fastly_rt import FastlyRTError, OriginClient, ServiceClient, follow
from fastly_rt.core.settings import Settings


def _service_line(data) -> str:
    agg = data.aggregated
    return f"{data.recorded} requests={agg.requests} hits={agg.hits} miss={agg.miss} errors={agg.errors}"


def _origin_line(data) -> str:
    parts = [f"{name}:responses={st.responses},5xx={st.status_5xx}" for name, st in sorted(data.aggregated.items())]
    return f"{data.recorded} " + (" ".join(parts) or "-")


async def run(args) -> int:
    s = Settings()
    if args.key:
        s.FASTLY_API_KEY = args.key
    if args.sid:
        s.FASTLY_SERVICE_ID = args.sid
    cls = OriginClient if args.origins else ServiceClient
    fmt = _origin_line if args.origins else _service_line
    async with cls.from_settings(s) as rt:
        async for rt_data in follow(rt, args.interval, max_polls=args.max_polls):
            for data in rt_data.data:
                print(fmt(data), flush=True)
    return 0


def main() -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--key", help="API key (default: $FASTLY_API_KEY)")
    p.add_argument("--sid", help="service id (default: $FASTLY_SERVICE_ID)")
    p.add_argument("--origins", action="store_true", help="origin metrics instead of service stats")
    p.add_argument("--interval", type=float, default=1.0)
    p.add_argument("--max-polls", type=int, default=None)
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return asyncio.run(run(args))
    except FastlyRTError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
