"""Sleep utility for SigninID SDK."""

import asyncio


async def sleep(ms: float) -> None:
    """Sleep for the specified number of milliseconds.

    Args:
        ms: Number of milliseconds to sleep. Non-positive values yield once.
    """
    await asyncio.sleep(max(ms, 0) / 1000)
