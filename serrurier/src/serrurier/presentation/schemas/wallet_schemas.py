"""
Wallet API schemas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from serrurier.presentation.schemas.auth_schemas import StrippedStr


class ConnectWalletRequest(BaseModel):
    """Request to link a wallet to the caller's account."""

    model_config = ConfigDict(populate_by_name=True)

    address: StrippedStr = Field(
        ...,
        min_length=1,
        description="Ethereum wallet address (0x...)",
    )
    signature: StrippedStr = Field(
        ...,
        min_length=1,
        description="personal_sign signature (hex)",
    )
    message: str = Field(
        ...,
        min_length=1,
        description="Nonce that was embedded in the signed message",
    )
    user_id: Optional[StrippedStr] = Field(
        None,
        alias="userId",
        description="Caller identity ID (user_id caller mode only)",
    )


class ConnectWalletResponse(BaseModel):
    """Response from wallet connection."""

    model_config = ConfigDict(populate_by_name=True)

    identity_id: str = Field(..., alias="identityId", description="Identity ID")
    already_bound: bool = Field(
        ...,
        alias="alreadyBound",
        description="Wallet was already linked; nothing changed",
    )


class DisconnectWalletResponse(BaseModel):
    """Response from wallet disconnection."""

    model_config = ConfigDict(populate_by_name=True)

    had_wallet: bool = Field(
        ...,
        alias="hadWallet",
        description="A wallet was linked and has been removed",
    )
