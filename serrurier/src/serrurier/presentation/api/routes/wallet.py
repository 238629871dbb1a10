"""
Wallet API routes.

Provides endpoints for authenticated wallet management:
- POST /wallet/connect - Link a wallet to the caller's account
- POST /wallet/disconnect (alias DELETE /wallet) - Unlink it
"""

from fastapi import APIRouter, Depends, status

from serrurier.application.use_cases.connect_wallet import ConnectWallet
from serrurier.application.use_cases.wallet_connection_manager import (
    WalletConnectionManager,
)
from serrurier.di.dependencies import (
    get_connect_wallet,
    get_wallet_connection_manager,
)
from serrurier.domain.entities.identity import Identity
from serrurier.presentation.api.middleware.auth import get_current_identity
from serrurier.presentation.schemas.wallet_schemas import (
    ConnectWalletRequest,
    ConnectWalletResponse,
    DisconnectWalletResponse,
)

router = APIRouter(prefix="/wallet", tags=["Wallet"])


@router.post(
    "/connect",
    response_model=ConnectWalletResponse,
    status_code=status.HTTP_200_OK,
    summary="Connect wallet",
    description="Link a signature-verified wallet to the caller's account",
)
async def connect_wallet(
    request: ConnectWalletRequest,
    identity: Identity = Depends(get_current_identity),
    use_case: ConnectWallet = Depends(get_connect_wallet),
) -> ConnectWalletResponse:
    """
    Connect a wallet to the authenticated account.

    Args:
        request: Address, signature and nonce
        identity: Authenticated caller (injected)
        use_case: ConnectWallet use case (injected)

    Returns:
        Identity ID and whether the wallet was already linked
    """
    result = await use_case.execute(
        identity=identity,
        address=request.address,
        signature=request.signature,
        message=request.message,
    )

    return ConnectWalletResponse(
        identity_id=result.identity_id,
        already_bound=result.already_bound,
    )


@router.post(
    "/disconnect",
    response_model=DisconnectWalletResponse,
    status_code=status.HTTP_200_OK,
    summary="Disconnect wallet",
    description="Unlink the wallet of the caller's account",
)
@router.delete(
    "",
    response_model=DisconnectWalletResponse,
    status_code=status.HTTP_200_OK,
    include_in_schema=False,
)
async def disconnect_wallet(
    identity: Identity = Depends(get_current_identity),
    manager: WalletConnectionManager = Depends(get_wallet_connection_manager),
) -> DisconnectWalletResponse:
    """
    Disconnect the wallet of the authenticated account.

    No signature is required. Disconnecting without a linked wallet
    is not an error.
    """
    had_wallet = await manager.disconnect(identity)

    return DisconnectWalletResponse(had_wallet=had_wallet)
