"""
Identity entity - account record held by the external identity store.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional

from serrurier.domain.value_objects.identity_preferences import (
    IdentityPreferences,
)


class IdentityState(str, Enum):
    """Binding-relevant state of an identity at decision time."""

    NO_PASSKEY_NO_WALLET = "no_passkey_no_wallet"
    PASSKEY_NO_WALLET = "passkey_no_wallet"
    HAS_WALLET = "has_wallet"


@dataclass
class Identity:
    """
    Identity entity - the persisted account record.

    The id is assigned by the store and never changes. Only the wallet
    preference is mutated by this service.
    """

    id: str
    email: Optional[str] = None
    preferences: IdentityPreferences = field(default_factory=IdentityPreferences)

    def __post_init__(self):
        """Validate identity data after initialization."""
        if not self.id:
            raise ValueError("Identity id is required")

    @property
    def wallet_address(self) -> Optional[str]:
        """Canonical wallet address bound to this identity, if any."""
        return self.preferences.wallet_address

    @property
    def has_passkey(self) -> bool:
        """Check if an independent passkey credential is registered."""
        return self.preferences.has_passkey

    @property
    def state(self) -> IdentityState:
        """Current binding state."""
        if self.preferences.has_wallet:
            return IdentityState.HAS_WALLET
        if self.preferences.has_passkey:
            return IdentityState.PASSKEY_NO_WALLET
        return IdentityState.NO_PASSKEY_NO_WALLET

    def with_preferences(self, preferences: IdentityPreferences) -> "Identity":
        """Return a copy carrying new preferences."""
        return replace(self, preferences=preferences)

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "email": self.email,
            "wallet_address": self.wallet_address,
            "has_passkey": self.has_passkey,
        }
