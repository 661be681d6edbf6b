import asyncio
from typing import AsyncIterator, Optional, Protocol, TypeVar

from fastly_rt.obs import log_event

R = TypeVar("R", covariant=True)


class ConsecutiveStatsSource(Protocol[R]):
    async def get_stats_consecutive(self) -> R: ...


async def follow(
    client: ConsecutiveStatsSource[R],
    interval: float = 1.0,
    *,
    max_polls: Optional[int] = None,
) -> AsyncIterator[R]:
    """Yield consecutive stats from ``client`` every ``interval`` seconds.

    Errors from the client propagate to the consumer; the client's cursor is
    left where the last successful poll put it, so iterating again resumes
    without gaps.
    """
    polls = 0
    while max_polls is None or polls < max_polls:
        if polls:
            await asyncio.sleep(interval)
        rt_data = await client.get_stats_consecutive()
        polls += 1
        log_event("rt.follow", level="debug", polls=polls, entries=len(rt_data.data))
        yield rt_data
