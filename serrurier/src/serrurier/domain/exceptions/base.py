"""
Base domain exceptions.
"""


class SerrurierException(Exception):
    """Base exception for all Serrurier domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(SerrurierException):
    """Raised when request input is missing or malformed."""

    def __init__(self, field: str, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="INVALID_INPUT")
        self.field = field


class MisconfiguredError(SerrurierException):
    """Raised when the service or the identity store is in an unusable state."""

    def __init__(self, message: str = "Server configuration error"):
        super().__init__(message, code="MISCONFIGURED")
