"""
Connect Wallet use case.
"""

from dataclasses import dataclass

from serrurier.application.use_cases.wallet_connection_manager import (
    WalletConnectionManager,
)
from serrurier.domain.entities.identity import Identity
from serrurier.domain.exceptions import (
    BindingRejectedError,
    InvalidSignatureError,
    ValidationError,
)
from serrurier.domain.services.i_signature_verifier import ISignatureVerifier
from serrurier.domain.value_objects.binding_outcome import (
    AlreadyBound,
    Rejected,
)


@dataclass
class ConnectWalletResult:
    """Result of wallet connection."""

    identity_id: str
    already_bound: bool


class ConnectWallet:
    """
    Link a wallet to the authenticated caller's identity.

    Business rules:
    - Signature must verify over the templated nonce
    - Only WALLET_CONFLICT can reject an authenticated caller
    """

    def __init__(
        self,
        signature_verifier: ISignatureVerifier,
        connection_manager: WalletConnectionManager,
    ):
        """
        Initialize use case with dependencies.

        Args:
            signature_verifier: Service for signature verification
            connection_manager: Authenticated binding logic
        """
        self.signature_verifier = signature_verifier
        self.connection_manager = connection_manager

    async def execute(
        self,
        identity: Identity,
        address: str,
        signature: str,
        message: str,
    ) -> ConnectWalletResult:
        """
        Execute wallet connection.

        Args:
            identity: Caller's identity
            address: Wallet address claiming ownership
            signature: Hex signature over the templated message
            message: Caller-supplied nonce embedded in the template

        Returns:
            ConnectWalletResult

        Raises:
            ValidationError: If a field is missing or blank
            InvalidSignatureError: If the signature does not verify
            BindingRejectedError: If a different wallet is already bound
            IdentityStoreError: If the identity store fails
        """
        for field, value in (
            ("address", address),
            ("signature", signature),
            ("message", message),
        ):
            if not value or not value.strip():
                raise ValidationError(field=field, reason="Field is required")

        signed_message = self.signature_verifier.build_signable_message(message)
        if not self.signature_verifier.verify(signed_message, signature, address):
            raise InvalidSignatureError()

        canonical_address = self.signature_verifier.canonicalize(address)
        outcome = await self.connection_manager.connect(identity, canonical_address)

        if isinstance(outcome, Rejected):
            raise BindingRejectedError(outcome.reason)

        return ConnectWalletResult(
            identity_id=outcome.identity_id,
            already_bound=isinstance(outcome, AlreadyBound),
        )
