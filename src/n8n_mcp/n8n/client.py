"""Thin async client for the n8n public REST API."""

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from ..http import create_async_client
from ..logging import get_logger
from ..settings import N8nSettings
from .config import N8nEndpoints

LOGGER = get_logger(__name__)

API_KEY_HEADER = "X-N8N-API-KEY"


class N8nApiError(Exception):
    """Raised when n8n (or a webhook target) answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def path_segment(value: Any) -> str:
    """Quote a caller-supplied id for use inside a URL path."""
    return quote(str(value), safe="")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Request failed with status code {response.status_code}"


def _parse_body(response: httpx.Response) -> Any:
    if not response.is_success:
        raise N8nApiError(response.status_code, _error_message(response))
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class N8nApiClient:
    """Issue authenticated calls against ``{host}/api/v1``."""

    def __init__(
        self,
        settings: N8nSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self.endpoints = N8nEndpoints.from_settings(settings)
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            API_KEY_HEADER: self.settings.api_key,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        LOGGER.debug("n8n_request", method=method, path=path)
        async with create_async_client(
            timeout=self.settings.request_timeout,
            base_url=self.endpoints.api_base_url,
            headers=self.headers,
            transport=self._transport,
        ) as client:
            response = await client.request(method, path, params=params, json=json)
        return _parse_body(response)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def call_webhook(self, method: str, url: str, data: Any = None) -> Any:
        """Call a public webhook URL.

        Webhooks are not part of the management API, so the API key is never
        attached here.
        """
        LOGGER.debug("webhook_request", method=method, url=url)
        async with create_async_client(
            timeout=self.settings.request_timeout,
            transport=self._transport,
        ) as client:
            response = await client.request(method, url, json=data)
        return _parse_body(response)
