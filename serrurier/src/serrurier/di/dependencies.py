"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container stored
on the application state.
"""

from fastapi import Depends, Request

from serrurier.application.use_cases.authenticate_wallet import (
    AuthenticateWallet,
)
from serrurier.application.use_cases.connect_wallet import ConnectWallet
from serrurier.application.use_cases.wallet_connection_manager import (
    WalletConnectionManager,
)
from serrurier.di.container import DIContainer
from serrurier.domain.services.i_signature_verifier import ISignatureVerifier

# ================================================================
# Container Dependencies
# ================================================================


def get_container(request: Request) -> DIContainer:
    """Get the DI container of the running application."""
    return request.app.state.container


# ================================================================
# Service Dependencies
# ================================================================


def get_signature_verifier(
    container: DIContainer = Depends(get_container),
) -> ISignatureVerifier:
    """Get SignatureVerifier service dependency."""
    return container.signature_verifier


# ================================================================
# Use Case Dependencies
# ================================================================


def get_authenticate_wallet(
    container: DIContainer = Depends(get_container),
) -> AuthenticateWallet:
    """Get AuthenticateWallet use case dependency."""
    return container.authenticate_wallet


def get_connect_wallet(
    container: DIContainer = Depends(get_container),
) -> ConnectWallet:
    """Get ConnectWallet use case dependency."""
    return container.connect_wallet


def get_wallet_connection_manager(
    container: DIContainer = Depends(get_container),
) -> WalletConnectionManager:
    """Get WalletConnectionManager use case dependency."""
    return container.wallet_connection_manager
