"""
Authenticate Wallet use case.
"""

from dataclasses import dataclass

from serrurier.application.use_cases.account_binder import AccountBinder
from serrurier.application.use_cases.token_issuer import TokenIssuer
from serrurier.domain.exceptions import (
    BindingRejectedError,
    InvalidSignatureError,
    ValidationError,
)
from serrurier.domain.services.i_signature_verifier import ISignatureVerifier
from serrurier.domain.value_objects.binding_outcome import (
    BindingOutcome,
    Rejected,
)
from serrurier.domain.value_objects.issued_token import IssuedToken
from serrurier.domain.value_objects.signed_auth_claim import SignedAuthClaim
from serrurier.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class AuthenticateWalletResult:
    """Result of wallet authentication."""

    outcome: BindingOutcome
    token: IssuedToken


class AuthenticateWallet:
    """
    Sign up or log in by email and wallet signature.

    Business rules:
    - Signature must verify over the templated nonce before any lookup
    - Binding decision is delegated to AccountBinder
    - A token is issued only for Created or AlreadyBound outcomes
    """

    def __init__(
        self,
        signature_verifier: ISignatureVerifier,
        account_binder: AccountBinder,
        token_issuer: TokenIssuer,
    ):
        """
        Initialize use case with dependencies.

        Args:
            signature_verifier: Service for signature verification
            account_binder: Find-or-create binding logic
            token_issuer: Token minting through the identity store
        """
        self.signature_verifier = signature_verifier
        self.account_binder = account_binder
        self.token_issuer = token_issuer

    async def execute(
        self,
        email: str,
        address: str,
        signature: str,
        message: str,
    ) -> AuthenticateWalletResult:
        """
        Execute wallet authentication.

        Args:
            email: Account email
            address: Wallet address claiming ownership
            signature: Hex signature over the templated message
            message: Caller-supplied nonce embedded in the template

        Returns:
            AuthenticateWalletResult with outcome and issued token

        Raises:
            ValidationError: If a field is missing or blank
            InvalidSignatureError: If the signature does not verify
            BindingRejectedError: If the binding is refused
            IdentityStoreError: If the identity store fails
            MisconfiguredError: If several identities share the email
        """
        for field, value in (
            ("email", email),
            ("address", address),
            ("signature", signature),
            ("message", message),
        ):
            if not value or not value.strip():
                raise ValidationError(field=field, reason="Field is required")

        # 1. Verify signature
        claim = SignedAuthClaim(
            claimed_address=address,
            signature=signature,
            signed_message=self.signature_verifier.build_signable_message(message),
        )
        logger.info(f"Authentication attempt for wallet {claim.truncated_address()}")

        if not self.signature_verifier.verify(
            claim.signed_message,
            claim.signature,
            claim.claimed_address,
        ):
            raise InvalidSignatureError()

        # 2. Bind
        canonical_address = self.signature_verifier.canonicalize(address)
        # The store keeps emails lowercased
        outcome = await self.account_binder.bind(
            email.strip().lower(), canonical_address
        )

        if isinstance(outcome, Rejected):
            raise BindingRejectedError(outcome.reason)

        # 3. Issue token
        token = await self.token_issuer.issue(outcome.identity_id)

        return AuthenticateWalletResult(outcome=outcome, token=token)
