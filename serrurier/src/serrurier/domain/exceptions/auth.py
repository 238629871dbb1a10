"""
Authentication domain exceptions.
"""

from serrurier.domain.exceptions.base import SerrurierException


class AuthenticationError(SerrurierException):
    """Raised when authentication fails."""

    def __init__(
        self,
        message: str = "Authentication failed",
        code: str = "AUTHENTICATION_ERROR",
    ):
        super().__init__(message, code=code)


class InvalidSignatureError(AuthenticationError):
    """Raised when wallet signature does not verify for the claimed address."""

    def __init__(self):
        super().__init__(
            "Invalid signature. Wallet ownership could not be verified.",
            code="INVALID_SIGNATURE",
        )


class NotAuthenticatedError(AuthenticationError):
    """Raised when the caller's session cannot be resolved to an identity."""

    def __init__(self, message: str = "Not authenticated. Are you logged in?"):
        super().__init__(message, code="NOT_AUTHENTICATED")
