"""
Identity store exceptions.

Defines exceptions for calls into the external user directory.
"""

from typing import Optional

from serrurier.domain.exceptions.base import SerrurierException


class IdentityStoreError(SerrurierException):
    """Raised when an identity store call fails or is unreachable."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        """
        Initialize identity store error.

        Args:
            message: Error message
            status_code: HTTP status code returned by the store, if any
        """
        super().__init__(message, code="STORE_UNAVAILABLE")
        self.status_code = status_code


class IdentityAlreadyExistsError(IdentityStoreError):
    """Raised when creating an identity whose email is already taken."""

    def __init__(self, email: str):
        super().__init__(f"Identity with email {email} already exists", 409)
        self.email = email


class IdentityNotFoundError(IdentityStoreError):
    """Raised when an identity id does not exist in the store."""

    def __init__(self, identity_id: str):
        super().__init__(f"Identity {identity_id} not found", 404)
        self.identity_id = identity_id
