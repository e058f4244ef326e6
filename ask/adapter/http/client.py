"""HTTP client for the forum REST backend.

Wraps ``httpx.AsyncClient`` and translates transport and status failures
into domain errors. Requests are not retried; a failure is reported
once and the caller decides what to do.
"""

from typing import Any, Optional

import httpx
import logfire

from ask.adapter.error import BackendConflictError, PayloadError
from ask.config import BackendSettings
from ask.domain.error import NetworkError, NotFoundError


def create_http_client(settings: BackendSettings) -> httpx.AsyncClient:
    """Build the shared httpx client for the backend.

    Args:
        settings: Backend settings

    Returns:
        Configured async client (caller owns closing it)
    """
    headers = {
        "Accept": "application/json",
        # Every view mount re-fetches; intermediaries must not serve stale data
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }
    if settings.auth_token:
        headers["Authorization"] = f"Bearer {settings.auth_token}"

    return httpx.AsyncClient(
        base_url=settings.api_url,
        headers=headers,
        timeout=settings.timeout_seconds,
    )


class ForumHttpClient:
    """JSON request helper shared by the HTTP repositories."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        """Initialize client.

        Args:
            http: Configured httpx client
        """
        self.http = http

    async def request(
        self,
        method: str,
        path: str,
        operation: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
        conflict_aware: bool = False,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON body.

        A 409 is only surfaced as a conflict for conditional writes that
        ask for it; anywhere else it is a rejected request.

        Args:
            method: HTTP method
            path: Path relative to the backend base URL
            operation: Short name used in logs and errors
            params: Query parameters
            json: JSON body
            conflict_aware: Raise BackendConflictError on 409

        Returns:
            Decoded JSON object (empty dict for an empty body)

        Raises:
            NetworkError: On transport failures and unexpected statuses
            NotFoundError: On 404
            BackendConflictError: On 409 when conflict_aware is set
            PayloadError: If the body is not a JSON object
        """
        try:
            response = await self.http.request(method, path, params=params, json=json)
        except httpx.TransportError as e:
            logfire.warn("Backend unreachable", operation=operation, error=str(e))
            raise NetworkError(operation, str(e)) from e

        if response.status_code == 404:
            raise NotFoundError(operation, path)
        if response.status_code == 409 and conflict_aware:
            raise BackendConflictError(f"{operation}: {response.text}")
        if response.is_error:
            logfire.warn(
                "Backend rejected request",
                operation=operation,
                status_code=response.status_code,
            )
            raise NetworkError(operation, f"HTTP {response.status_code}")

        if not response.content:
            return {}

        try:
            body = response.json()
        except ValueError as e:
            raise PayloadError(f"{operation}: response is not JSON") from e

        if not isinstance(body, dict):
            raise PayloadError(f"{operation}: expected a JSON object")
        return body

    async def get(self, path: str, operation: str, **params: Any) -> dict[str, Any]:
        """GET with query parameters (None values are dropped)."""
        query = {k: v for k, v in params.items() if v is not None}
        return await self.request("GET", path, operation, params=query or None)

    async def post(
        self, path: str, operation: str, body: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """POST a JSON body."""
        return await self.request("POST", path, operation, json=body)

    async def put(
        self,
        path: str,
        operation: str,
        body: dict[str, Any],
        conflict_aware: bool = False,
    ) -> dict[str, Any]:
        """PUT a JSON body."""
        return await self.request(
            "PUT", path, operation, json=body, conflict_aware=conflict_aware
        )
