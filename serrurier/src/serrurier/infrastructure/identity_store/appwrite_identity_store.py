"""
Appwrite identity store client.

HTTP client for the Appwrite Users API (server key) and Account API
(session JWT). No retries: a failed call surfaces as IdentityStoreError.
"""

import asyncio
import json
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

import aiohttp

from serrurier.domain.entities.identity import Identity
from serrurier.domain.exceptions.identity_store import (
    IdentityAlreadyExistsError,
    IdentityNotFoundError,
    IdentityStoreError,
)
from serrurier.domain.services.i_identity_store import IIdentityStore
from serrurier.domain.value_objects.identity_preferences import (
    IdentityPreferences,
)
from serrurier.domain.value_objects.issued_token import IssuedToken
from serrurier.infrastructure.monitoring.logger import get_logger
from serrurier.infrastructure.monitoring.metrics import (
    identity_store_request_duration_seconds,
    identity_store_requests_total,
)

logger = get_logger(__name__)

# Appwrite placeholder asking the server to generate the id
UNIQUE_ID = "unique()"


class AppwriteIdentityStore(IIdentityStore):
    """
    Appwrite identity store client.

    Holds one pooled aiohttp session, opened lazily and closed on
    shutdown. Every call is bounded by the configured timeout.
    """

    def __init__(
        self,
        endpoint: str,
        project_id: str,
        api_key: str,
        total_timeout: float = 10.0,
        connect_timeout: float = 5.0,
    ):
        """
        Initialize Appwrite client.

        Args:
            endpoint: Appwrite API base URL (e.g. https://cloud.appwrite.io/v1)
            project_id: Appwrite project id
            api_key: Server API key with users.read and users.write scopes
            total_timeout: Total request timeout (default: 10s)
            connect_timeout: Connection timeout (default: 5s)
        """
        self.endpoint = endpoint.rstrip("/")
        self.project_id = project_id
        self._api_key = api_key
        self.timeout = aiohttp.ClientTimeout(
            total=total_timeout,
            connect=connect_timeout,
        )
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                connector=aiohttp.TCPConnector(
                    limit=50,
                    limit_per_host=20,
                    ttl_dns_cache=300,
                ),
            )
        return self._session

    def _server_headers(self) -> Dict[str, str]:
        """Headers for Users API calls made with the server key."""
        return {
            "X-Appwrite-Project": self.project_id,
            "X-Appwrite-Key": self._api_key,
        }

    def _session_headers(self, session_jwt: str) -> Dict[str, str]:
        """Headers for Account API calls made on behalf of a user."""
        return {
            "X-Appwrite-Project": self.project_id,
            "X-Appwrite-JWT": session_jwt,
        }

    async def _request(
        self,
        method: str,
        path: str,
        operation: str,
        headers: Dict[str, str],
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
        passthrough_statuses: Tuple[int, ...] = (),
    ) -> Tuple[int, Optional[Dict[str, Any]]]:
        """
        Single HTTP request against the store.

        Args:
            method: HTTP method
            path: API path relative to the endpoint
            operation: Operation name for metrics and errors
            headers: Authentication headers
            params: Query parameters
            payload: JSON body
            passthrough_statuses: Error statuses returned to the caller
                instead of raised

        Returns:
            Tuple of (status, parsed JSON body or None for
            passthrough statuses)

        Raises:
            IdentityStoreError: On network failure, timeout, or an
                unexpected error status
        """
        session = await self._get_session()
        url = f"{self.endpoint}{path}"

        try:
            with identity_store_request_duration_seconds.labels(
                operation=operation
            ).time():
                async with session.request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                    json=payload,
                ) as response:
                    if response.status in passthrough_statuses:
                        identity_store_requests_total.labels(
                            operation=operation, status=str(response.status)
                        ).inc()
                        return response.status, None

                    if response.status >= 400:
                        error_text = await response.text()
                        identity_store_requests_total.labels(
                            operation=operation, status="error"
                        ).inc()
                        logger.error(
                            f"Identity store {operation} failed "
                            f"(HTTP {response.status}): {error_text}"
                        )
                        raise IdentityStoreError(
                            f"Failed to {operation}: HTTP {response.status}",
                            status_code=response.status,
                        )

                    data = await response.json(content_type=None)
                    identity_store_requests_total.labels(
                        operation=operation, status="success"
                    ).inc()
                    return response.status, data

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            identity_store_requests_total.labels(
                operation=operation, status="unavailable"
            ).inc()
            logger.error(
                f"Identity store {operation} unreachable: {type(e).__name__}: {e}"
            )
            raise IdentityStoreError(
                f"Identity store unavailable during {operation}"
            ) from e

    @staticmethod
    def _parse_identity(data: Mapping[str, Any]) -> Identity:
        """Build Identity from an Appwrite user document."""
        prefs = data.get("prefs")
        if not isinstance(prefs, Mapping):
            # Appwrite serializes an empty bag as [] on some versions
            prefs = {}

        identity_id = data.get("$id")
        if not identity_id:
            raise IdentityStoreError("Identity store returned a user without $id")

        return Identity(
            id=identity_id,
            email=data.get("email") or None,
            preferences=IdentityPreferences.from_dict(prefs),
        )

    async def find_by_email(self, email: str) -> List[Identity]:
        """Find identities with an exact email match."""
        query = json.dumps(
            {"method": "equal", "attribute": "email", "values": [email]}
        )
        _, data = await self._request(
            "GET",
            "/users",
            operation="find_by_email",
            headers=self._server_headers(),
            params={"queries[]": query},
        )
        return [self._parse_identity(user) for user in data.get("users", [])]

    async def get_by_id(self, identity_id: str) -> Optional[Identity]:
        """Get identity by id (None on 404)."""
        status, data = await self._request(
            "GET",
            f"/users/{quote(identity_id, safe='')}",
            operation="get_by_id",
            headers=self._server_headers(),
            passthrough_statuses=(404,),
        )
        if status == 404:
            return None
        return self._parse_identity(data)

    async def create(self, email: str) -> Identity:
        """Create identity; 409 means another request won the race."""
        status, data = await self._request(
            "POST",
            "/users",
            operation="create",
            headers=self._server_headers(),
            payload={"userId": UNIQUE_ID, "email": email},
            passthrough_statuses=(409,),
        )
        if status == 409:
            raise IdentityAlreadyExistsError(email)

        identity = self._parse_identity(data)
        logger.info(f"Created identity {identity.id}")
        return identity

    async def update_preferences(
        self,
        identity_id: str,
        preferences: IdentityPreferences,
    ) -> IdentityPreferences:
        """Replace the whole preference bag."""
        status, data = await self._request(
            "PATCH",
            f"/users/{quote(identity_id, safe='')}/prefs",
            operation="update_preferences",
            headers=self._server_headers(),
            payload={"prefs": preferences.to_dict()},
            passthrough_statuses=(404,),
        )
        if status == 404:
            raise IdentityNotFoundError(identity_id)

        return IdentityPreferences.from_dict(data if isinstance(data, Mapping) else {})

    async def create_token(self, identity_id: str) -> IssuedToken:
        """Create a transfer token the client exchanges for a session."""
        _, data = await self._request(
            "POST",
            f"/users/{quote(identity_id, safe='')}/tokens",
            operation="create_token",
            headers=self._server_headers(),
            payload={},
        )
        secret = data.get("secret")
        if not secret:
            raise IdentityStoreError("Identity store returned a token without secret")

        return IssuedToken(
            identity_id=data.get("userId") or identity_id,
            secret=secret,
        )

    async def get_by_session(self, session_jwt: str) -> Optional[Identity]:
        """Resolve the account owning a session JWT (None on 401)."""
        status, data = await self._request(
            "GET",
            "/account",
            operation="get_by_session",
            headers=self._session_headers(session_jwt),
            passthrough_statuses=(401,),
        )
        if status == 401:
            return None
        return self._parse_identity(data)

    async def close(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
