"""Run one API call inside a short-lived authenticated session."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

from gfycat_api.api import GfycatApi
from gfycat_api.config import get_config

T = TypeVar("T")


def run_api_call(call: Callable[[GfycatApi], Awaitable[T]], verbose: bool = False) -> T:
    """Connect from configuration, await ``call(api)`` and close the session."""

    async def _run() -> T:
        api = await GfycatApi.from_config(get_config(), verbose=verbose)
        async with api:
            return await call(api)

    return asyncio.run(_run())
