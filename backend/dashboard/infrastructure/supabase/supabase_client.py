"""Supabase REST client — implements the BackendClient interface.

Talks to the project's PostgREST endpoint (``<url>/rest/v1``) with httpx,
authenticating with the public anon key.
"""

import logging
from typing import Any

import httpx

from dashboard.application.interfaces.backend_client import BackendClient
from dashboard.config import Settings
from dashboard.domain.exceptions import BackendClientError, ConfigurationError

logger = logging.getLogger(__name__)


class SupabaseClient(BackendClient):
    """Infrastructure adapter — connects to a Supabase project.

    Uses one pooled httpx.AsyncClient for the lifetime of the application
    unless a client is injected (tests pass one with a MockTransport).
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self._url = url.rstrip("/")
        self._anon_key = anon_key
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._url

    def _get_headers(self) -> dict[str, str]:
        """Standard headers for Supabase REST requests."""
        return {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {self._anon_key}",
            "Accept": "application/json",
        }

    async def fetch_rows(
        self,
        table: str,
        *,
        select: str = "*",
        filters: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        """GET ``/rest/v1/<table>``; filters use PostgREST syntax, e.g. ``{"status": "eq.active"}``."""
        params = {"select": select, **(filters or {})}
        url = f"{self._url}/rest/v1/{table}"

        response = await self._http_client.get(url, headers=self._get_headers(), params=params)
        if response.status_code >= 400:
            self._raise_backend_error(response)

        rows = response.json()
        logger.debug("Fetched %d rows from %s", len(rows), table)
        return rows

    async def aclose(self) -> None:
        await self._http_client.aclose()

    @staticmethod
    def _raise_backend_error(response: httpx.Response) -> None:
        """Raise BackendClientError from an error httpx Response."""
        try:
            data = response.json()
            message = data.get("message") or data.get("error") or response.text
        except (ValueError, AttributeError):
            message = response.text

        raise BackendClientError(status_code=response.status_code, message=message)


def build_backend_client(
    settings: Settings, http_client: httpx.AsyncClient | None = None
) -> SupabaseClient:
    """Build the backend client, failing fast when its settings are missing."""
    missing = settings.missing_backend_settings()
    if missing:
        raise ConfigurationError(missing)
    logger.info("Supabase client configured for %s", settings.supabase_url)
    return SupabaseClient(
        url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        http_client=http_client,
    )
