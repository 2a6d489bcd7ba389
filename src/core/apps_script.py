"""
Client for the spreadsheet-backed Apps Script web app.

The web app answers GET requests with `?action=...` query parameters and POST
requests with a JSON body carrying an `action` field.
"""

import json
import logging
from typing import Any

import httpx

from core.config import APPS_SCRIPT_URL
from core.errors import ErrorCodes, IntegrationNotConfiguredError, UpstreamError
from core.storage import DataPaths, read_json

logger = logging.getLogger(__name__)


def read_integration_url(paths: DataPaths) -> str:
    """
    Resolve the web app URL.

    APPS_SCRIPT_URL from the environment wins over data/integrations.json.

    Raises:
        IntegrationNotConfiguredError: if neither source provides a URL
    """
    if APPS_SCRIPT_URL:
        return APPS_SCRIPT_URL

    url = ""
    if paths.integrations_json.exists():
        cfg = read_json(paths.integrations_json)
        url = str(cfg.get("appsScriptUrl") or "").strip()
    if not url:
        raise IntegrationNotConfiguredError(
            "appsScriptUrl is not configured. Set it in data/integrations.json"
        )
    return url


def parse_body(text: str) -> Any:
    """Parse a response body; empty is None, non-JSON is {'raw': text}."""
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return {"raw": text}


class AppsScriptClient:
    """Thin JSON proxy over an httpx.AsyncClient."""

    def __init__(self, url: str, http: httpx.AsyncClient):
        self.url = url
        self.http = http

    async def get(self, action: str, **params: Any) -> Any:
        query = {"action": action, **{k: v for k, v in params.items() if v is not None}}
        return await self._send("GET", action, params=query)

    async def post(self, action: str, **fields: Any) -> Any:
        return await self._send("POST", action, json={"action": action, **fields})

    async def _send(self, method: str, action: str, **kwargs: Any) -> Any:
        try:
            response = await self.http.request(method, self.url, **kwargs)
        except httpx.TimeoutException:
            logger.warning("Upstream timeout on %s %s", method, action)
            raise UpstreamError(
                "Upstream request timed out", code=ErrorCodes.UPSTREAM_UNAVAILABLE
            )
        except httpx.HTTPError as e:
            logger.warning("Upstream unreachable on %s %s: %s", method, action, e)
            raise UpstreamError(
                "Upstream is unreachable", code=ErrorCodes.UPSTREAM_UNAVAILABLE
            )

        body = parse_body(response.text)
        if response.is_error:
            logger.warning("Upstream %s for %s %s", response.status_code, method, action)
            raise UpstreamError(f"Upstream error {response.status_code}", upstream=body)
        return body


def create_client(paths: DataPaths, http: httpx.AsyncClient) -> AppsScriptClient:
    """Build a client for the configured web app URL."""
    return AppsScriptClient(read_integration_url(paths), http)
