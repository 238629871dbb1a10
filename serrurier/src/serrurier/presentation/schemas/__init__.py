"""
Presentation schemas.
"""

from serrurier.presentation.schemas.auth_schemas import (
    AuthenticateRequest,
    AuthenticateResponse,
    SignableMessageResponse,
)
from serrurier.presentation.schemas.health_schemas import HealthResponse
from serrurier.presentation.schemas.wallet_schemas import (
    ConnectWalletRequest,
    ConnectWalletResponse,
    DisconnectWalletResponse,
)

__all__ = [
    "AuthenticateRequest",
    "AuthenticateResponse",
    "SignableMessageResponse",
    "ConnectWalletRequest",
    "ConnectWalletResponse",
    "DisconnectWalletResponse",
    "HealthResponse",
]
