"""API routes."""
from serrurier.presentation.api.routes import auth, health, wallet

__all__ = [
    "auth",
    "health",
    "wallet",
]
