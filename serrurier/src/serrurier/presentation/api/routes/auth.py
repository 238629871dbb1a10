"""
Authentication API routes.

Provides endpoints for wallet sign-up and login:
- POST /auth (aliases /authenticate, /) - Authenticate with a wallet
- GET /auth (aliases /authenticate, /) - API documentation
- GET /auth/message - Nonce and message to sign
"""

from fastapi import APIRouter, Depends, status

from serrurier.application.use_cases.authenticate_wallet import (
    AuthenticateWallet,
)
from serrurier.di.dependencies import (
    get_authenticate_wallet,
    get_signature_verifier,
)
from serrurier.domain.services.i_signature_verifier import ISignatureVerifier
from serrurier.presentation.schemas.auth_schemas import (
    AuthenticateRequest,
    AuthenticateResponse,
    SignableMessageResponse,
)

router = APIRouter(tags=["Authentication"])

AUTH_PATHS = ("/auth", "/authenticate", "/")

ERROR_BODY = {"error": "string - Error code", "message": "string - Description"}

API_DOCUMENTATION = {
    "service": "Web3 Authentication API",
    "version": "1.0.0",
    "endpoints": {
        "POST /auth": {
            "description": "Authenticate with Web3 wallet signature",
            "aliases": ["POST /authenticate", "POST /"],
            "body": {
                "email": "string (required) - User email address",
                "address": "string (required) - Ethereum wallet address (0x...)",
                "signature": "string (required) - Signed message from wallet",
                "message": (
                    "string (required) - Nonce embedded in the signed "
                    "message (e.g., auth-1234567890)"
                ),
            },
            "responses": {
                "200": {
                    "description": "Authentication successful",
                    "body": {
                        "identityId": "string - Identity ID",
                        "secret": "string - Token secret for session creation",
                    },
                },
                "400": {
                    "description": "Missing fields or invalid JSON",
                    "body": ERROR_BODY,
                },
                "401": {"description": "Invalid signature", "body": ERROR_BODY},
                "403": {
                    "description": (
                        "Email belongs to an account that cannot be claimed "
                        "by this wallet"
                    ),
                    "body": ERROR_BODY,
                },
                "500": {"description": "Internal server error", "body": ERROR_BODY},
            },
        },
        "GET /auth/message": {
            "description": "Get a nonce and the exact message to sign",
        },
        "POST /wallet/connect": {
            "description": "Link a wallet to the logged-in account",
            "body": {
                "address": "string (required)",
                "signature": "string (required)",
                "message": "string (required)",
            },
        },
        "POST /wallet/disconnect": {
            "description": "Unlink the wallet of the logged-in account",
            "aliases": ["DELETE /wallet"],
        },
        "GET /ping": {
            "description": "Health check endpoint",
            "response": {
                "status": "ok",
                "service": "Web3 Authentication",
                "timestamp": "ISO 8601 timestamp",
            },
        },
    },
    "documentation": (
        "Verifies Ethereum wallet signatures (EIP-191 personal_sign) and "
        "issues identity store tokens. Sign "
        "'<prefix><nonce>' and send the nonce as 'message'."
    ),
}


@router.post(
    "/auth",
    response_model=AuthenticateResponse,
    status_code=status.HTTP_200_OK,
    summary="Authenticate with wallet",
    description="Sign up or log in by email and wallet signature",
)
@router.post(
    "/authenticate",
    response_model=AuthenticateResponse,
    include_in_schema=False,
)
@router.post("/", response_model=AuthenticateResponse, include_in_schema=False)
async def authenticate(
    request: AuthenticateRequest,
    use_case: AuthenticateWallet = Depends(get_authenticate_wallet),
) -> AuthenticateResponse:
    """
    Authenticate with a wallet signature.

    Creates the identity on first contact; afterwards only the same
    wallet can log in to it.

    Args:
        request: Email, address, signature and nonce
        use_case: AuthenticateWallet use case (injected)

    Returns:
        Identity ID and token secret
    """
    result = await use_case.execute(
        email=request.email,
        address=request.address,
        signature=request.signature,
        message=request.message,
    )

    return AuthenticateResponse(
        identity_id=result.token.identity_id,
        secret=result.token.secret,
    )


@router.get("/auth", summary="API documentation")
@router.get("/authenticate", include_in_schema=False)
@router.get("/", include_in_schema=False)
async def api_documentation() -> dict:
    """Describe the authentication API."""
    return API_DOCUMENTATION


@router.get(
    "/auth/message",
    response_model=SignableMessageResponse,
    summary="Get message to sign",
)
async def get_signable_message(
    verifier: ISignatureVerifier = Depends(get_signature_verifier),
) -> SignableMessageResponse:
    """
    Issue a nonce and the exact message the wallet must sign.

    The nonce is not stored; it only helps clients build the message.
    """
    timestamp, nonce = verifier.generate_nonce()

    return SignableMessageResponse(
        nonce=nonce,
        message=verifier.build_signable_message(nonce),
        timestamp=timestamp,
    )
