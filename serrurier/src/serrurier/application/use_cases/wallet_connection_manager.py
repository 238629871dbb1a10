"""
Wallet Connection Manager use case.

Bind or unbind a wallet on the caller's own authenticated identity.
"""

from serrurier.domain.entities.identity import Identity
from serrurier.domain.services.i_identity_store import IIdentityStore
from serrurier.domain.value_objects.binding_outcome import (
    AlreadyBound,
    BindingOutcome,
    Bound,
    Rejected,
    RejectionReason,
    outcome_label,
)
from serrurier.infrastructure.monitoring.logger import get_logger
from serrurier.infrastructure.monitoring.metrics import binding_outcomes_total

logger = get_logger(__name__)


class WalletConnectionManager:
    """
    Manage the wallet of an already authenticated identity.

    Business rules:
    - The caller proved identity through a session, so an identity
      without a wallet may bind one (passkey or not)
    - A bound wallet is never replaced; disconnect first
    - Disconnect needs no signature and is a no-op without a wallet
    """

    component = "wallet_connection_manager"

    def __init__(self, identity_store: IIdentityStore):
        """
        Initialize use case with dependencies.

        Args:
            identity_store: External identity store client
        """
        self.identity_store = identity_store

    async def connect(
        self,
        identity: Identity,
        verified_address: str,
    ) -> BindingOutcome:
        """
        Bind a verified wallet to identity.

        Args:
            identity: Caller's identity, freshly loaded from the store
            verified_address: Verified, canonical wallet address

        Returns:
            Bound, AlreadyBound or Rejected(WALLET_CONFLICT)
        """
        verified_address = verified_address.lower()

        if identity.wallet_address == verified_address:
            outcome = AlreadyBound(identity.id)
        elif identity.wallet_address is not None:
            outcome = Rejected(RejectionReason.WALLET_CONFLICT)
        else:
            await self.identity_store.update_preferences(
                identity.id,
                identity.preferences.with_wallet(verified_address),
            )
            outcome = Bound(identity.id)

        label = outcome_label(outcome)
        binding_outcomes_total.labels(
            component=self.component, outcome=label
        ).inc()
        logger.info(f"Wallet connect decision for {identity.id}: {label}")
        return outcome

    async def disconnect(self, identity: Identity) -> bool:
        """
        Clear the wallet of identity.

        Args:
            identity: Caller's identity, freshly loaded from the store

        Returns:
            True if a wallet was bound and has been cleared, False if
            there was nothing to clear
        """
        if identity.wallet_address is None:
            logger.info(f"No wallet to disconnect for {identity.id}")
            return False

        await self.identity_store.update_preferences(
            identity.id,
            identity.preferences.without_wallet(),
        )
        binding_outcomes_total.labels(
            component=self.component, outcome="disconnected"
        ).inc()
        logger.info(f"Wallet disconnected for {identity.id}")
        return True
