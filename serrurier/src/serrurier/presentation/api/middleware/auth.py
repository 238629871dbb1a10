"""
Caller authentication for wallet management routes.

Resolves the caller's identity according to CALLER_AUTH_MODE:
- jwt: identity store session JWT (Bearer or X-Appwrite-User-JWT)
- user_id: gateway-set X-Appwrite-User-Id header or userId body field
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from serrurier.di.container import DIContainer
from serrurier.di.dependencies import get_container
from serrurier.domain.entities.identity import Identity
from serrurier.domain.exceptions import NotAuthenticatedError
from serrurier.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

JWT_HEADER = "X-Appwrite-User-JWT"
USER_ID_HEADER = "X-Appwrite-User-Id"

# Bearer token security scheme (optional: other headers may carry the JWT)
security = HTTPBearer(auto_error=False)


async def _user_id_from_body(request: Request) -> Optional[str]:
    """Read userId from a JSON body, if the request has one."""
    if request.method not in ("POST", "PUT", "PATCH"):
        return None
    try:
        body = await request.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("userId"), str):
        return body["userId"].strip() or None
    return None


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    container: DIContainer = Depends(get_container),
) -> Identity:
    """
    Resolve the authenticated caller to a fresh Identity.

    Args:
        request: Incoming request
        credentials: Optional Bearer credentials
        container: DI container

    Returns:
        Identity loaded from the store

    Raises:
        NotAuthenticatedError: If no caller reference is present or it
            does not resolve to an identity
        IdentityStoreError: If the store call fails
    """
    identity_store = container.identity_store

    if container.settings.CALLER_AUTH_MODE == "jwt":
        session_jwt = credentials.credentials if credentials else None
        session_jwt = session_jwt or request.headers.get(JWT_HEADER)
        if not session_jwt:
            raise NotAuthenticatedError()
        identity = await identity_store.get_by_session(session_jwt)
    else:
        user_id = request.headers.get(USER_ID_HEADER) or await _user_id_from_body(
            request
        )
        if not user_id:
            raise NotAuthenticatedError()
        identity = await identity_store.get_by_id(user_id)

    if identity is None:
        logger.info("Caller reference did not resolve to an identity")
        raise NotAuthenticatedError("User not found. Are you logged in?")

    return identity
