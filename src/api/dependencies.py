"""FastAPI dependencies for shared resources."""

from collections.abc import AsyncIterator

import httpx

from core.config import PORTAL_ROOT, UPSTREAM_TIMEOUT_SECONDS
from core.storage import DataPaths


def get_data_paths() -> DataPaths:
    """Portal data locations; overridden in tests with a temporary root."""
    return DataPaths.from_root(PORTAL_ROOT)


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    HTTP client for the spreadsheet web app.

    Apps Script answers through a redirect, so redirects are followed.
    """
    async with httpx.AsyncClient(
        timeout=UPSTREAM_TIMEOUT_SECONDS, follow_redirects=True
    ) as client:
        yield client
