"""
Account Binder use case.

Find-or-create an identity by email and bind a verified wallet to it.
"""

from typing import Optional

from serrurier.domain.entities.identity import Identity, IdentityState
from serrurier.domain.exceptions import (
    IdentityAlreadyExistsError,
    IdentityStoreError,
    MisconfiguredError,
)
from serrurier.domain.services.i_identity_store import IIdentityStore
from serrurier.domain.value_objects.binding_outcome import (
    AlreadyBound,
    BindingOutcome,
    Created,
    Rejected,
    RejectionReason,
    outcome_label,
)
from serrurier.infrastructure.monitoring.logger import get_logger
from serrurier.infrastructure.monitoring.metrics import binding_outcomes_total

logger = get_logger(__name__)


class AccountBinder:
    """
    Decide whether an unauthenticated wallet login creates, reuses or
    is refused an identity.

    Business rules:
    - Only a freshly created identity receives a first-time wallet bind
    - An existing identity without a wallet is never adopted (passkey
      protection and hijack protection)
    - A bound identity only accepts its own wallet
    - No write happens on a rejection or an already-bound result
    - The wallet address must already be verified and canonicalized
    """

    component = "account_binder"

    def __init__(self, identity_store: IIdentityStore):
        """
        Initialize use case with dependencies.

        Args:
            identity_store: External identity store client
        """
        self.identity_store = identity_store

    async def bind(
        self,
        email: str,
        canonical_wallet_address: str,
    ) -> BindingOutcome:
        """
        Resolve the identity for email and apply the binding rules.

        Args:
            email: Email supplied by the caller
            canonical_wallet_address: Verified, canonical wallet address

        Returns:
            Created, AlreadyBound or Rejected outcome

        Raises:
            MisconfiguredError: If several identities share the email
            IdentityStoreError: If the store fails, or reports a
                duplicate on create that a second lookup cannot find
        """
        identity = await self._find_one(email)

        if identity is None:
            try:
                outcome = await self._create_with_wallet(
                    email, canonical_wallet_address
                )
                return self._record(outcome)
            except IdentityAlreadyExistsError:
                # Lost a create race against a concurrent request
                logger.warning("Identity creation raced, re-resolving by email")
                identity = await self._find_one(email)
                if identity is None:
                    raise IdentityStoreError(
                        "Identity reported as existing but could not be found"
                    )

        return self._record(self.decide(identity, canonical_wallet_address))

    @staticmethod
    def decide(
        identity: Identity,
        canonical_wallet_address: str,
    ) -> BindingOutcome:
        """
        Apply the conflict rules to an existing identity.

        Args:
            identity: Identity found by email
            canonical_wallet_address: Verified, canonical wallet address

        Returns:
            AlreadyBound or Rejected outcome
        """
        state = identity.state

        if state == IdentityState.PASSKEY_NO_WALLET:
            return Rejected(RejectionReason.PASSKEY_PROTECTED)

        if state == IdentityState.NO_PASSKEY_NO_WALLET:
            return Rejected(RejectionReason.ACCOUNT_EXISTS)

        if identity.wallet_address == canonical_wallet_address.lower():
            return AlreadyBound(identity.id)

        return Rejected(RejectionReason.WALLET_CONFLICT)

    async def _find_one(self, email: str) -> Optional[Identity]:
        """Look up the single identity for email."""
        identities = await self.identity_store.find_by_email(email)

        if len(identities) > 1:
            logger.error(
                f"Identity store holds {len(identities)} identities "
                f"for one email"
            )
            raise MisconfiguredError()

        return identities[0] if identities else None

    async def _create_with_wallet(
        self,
        email: str,
        canonical_wallet_address: str,
    ) -> Created:
        """Create identity and write its first wallet binding."""
        identity = await self.identity_store.create(email)
        await self.identity_store.update_preferences(
            identity.id,
            identity.preferences.with_wallet(canonical_wallet_address.lower()),
        )
        return Created(identity.id)

    def _record(self, outcome: BindingOutcome) -> BindingOutcome:
        """Log and count a decision."""
        label = outcome_label(outcome)
        binding_outcomes_total.labels(
            component=self.component, outcome=label
        ).inc()
        logger.info(f"Wallet binding decision: {label}")
        return outcome
