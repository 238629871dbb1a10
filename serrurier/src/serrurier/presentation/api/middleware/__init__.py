"""
API middleware for Serrurier.
"""

from serrurier.presentation.api.middleware.error_handler import (
    http_exception_handler,
    serrurier_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "http_exception_handler",
    "serrurier_exception_handler",
    "validation_exception_handler",
]
