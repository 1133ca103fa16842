"""Fan-out/fan-in barrier for concurrent awaitables."""
from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import Any


async def gather_all(*aws: Awaitable[Any]) -> list[Any]:
    """Run *aws* concurrently and return their results in argument order.

    Waits for all of them. As soon as one raises, the others are cancelled
    and awaited, then the first failure (by argument order among those
    finished) is re-raised. Callers never see a partial result list.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []

    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    failure: BaseException | None = None
    for task in tasks:
        if task not in done:
            continue
        if task.cancelled():
            failure = asyncio.CancelledError()
            break
        if task.exception() is not None:
            failure = task.exception()
            break

    if failure is None:
        return [task.result() for task in tasks]

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    # Mark every finished failure as retrieved, not only the one re-raised.
    for task in done:
        if not task.cancelled():
            task.exception()
    raise failure
