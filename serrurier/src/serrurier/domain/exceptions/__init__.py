"""
Domain exceptions package.
"""

# Auth exceptions
from serrurier.domain.exceptions.auth import (
    AuthenticationError,
    InvalidSignatureError,
    NotAuthenticatedError,
)

# Base exceptions
from serrurier.domain.exceptions.base import (
    MisconfiguredError,
    SerrurierException,
    ValidationError,
)

# Binding exceptions
from serrurier.domain.exceptions.binding import BindingRejectedError

# Identity store exceptions
from serrurier.domain.exceptions.identity_store import (
    IdentityAlreadyExistsError,
    IdentityNotFoundError,
    IdentityStoreError,
)

__all__ = [
    # Base
    "SerrurierException",
    "ValidationError",
    "MisconfiguredError",
    # Auth
    "AuthenticationError",
    "InvalidSignatureError",
    "NotAuthenticatedError",
    # Binding
    "BindingRejectedError",
    # Identity store
    "IdentityStoreError",
    "IdentityAlreadyExistsError",
    "IdentityNotFoundError",
]
