"""
Authentication API schemas.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# The nonce in "message" is signed verbatim and is never stripped
StrippedStr = Annotated[str, StringConstraints(strip_whitespace=True)]

# ================================================================
# Authenticate Schemas
# ================================================================


class AuthenticateRequest(BaseModel):
    """Request to sign up or log in with a wallet signature."""

    email: StrippedStr = Field(..., min_length=1, description="Account email")
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


class AuthenticateResponse(BaseModel):
    """Token the client exchanges with the identity store for a session."""

    model_config = ConfigDict(populate_by_name=True)

    identity_id: str = Field(..., alias="identityId", description="Identity ID")
    secret: str = Field(..., description="Single-use token secret")


# ================================================================
# Nonce Schemas
# ================================================================


class SignableMessageResponse(BaseModel):
    """Nonce and the exact text the wallet must sign."""

    nonce: str = Field(..., description="Value to send back as 'message'")
    message: str = Field(..., description="Exact text to sign")
    timestamp: int = Field(..., description="Issue time in epoch milliseconds")
