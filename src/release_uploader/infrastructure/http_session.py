"""HTTP session utilities.

Creates the aiohttp session used for every GitHub call of a run.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from release_uploader.config import GlobalConfig


@asynccontextmanager
async def create_http_session(
    global_config: GlobalConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        global_config: Global configuration dictionary

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout_seconds = int(global_config["network"]["timeout_seconds"])
    # No total limit: a large asset upload may take minutes
    timeout = aiohttp.ClientTimeout(
        total=None,
        sock_read=timeout_seconds * 3,
        sock_connect=timeout_seconds,
    )
    # Requests are strictly sequential
    connector = aiohttp.TCPConnector(limit=1)

    async with aiohttp.ClientSession(
        timeout=timeout,
        connector=connector,
    ) as session:
        yield session
