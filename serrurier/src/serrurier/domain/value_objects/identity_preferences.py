"""
IdentityPreferences value object - typed view over the store's preference bag.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

# Preference keys as stored in the identity store
WALLET_PREF_KEY = "walletEth"
PASSKEY_PREF_KEY = "passkey_credentials"


@dataclass(frozen=True)
class IdentityPreferences:
    """
    Value object for the two preference keys the binding logic relies on.

    Business rules:
    - wallet_address is the canonical lowercase address, or None
    - has_passkey is derived from the passkey key, which this service
      never writes; its raw value stays in passthrough
    - every unrecognized key is preserved on write-back
    """

    wallet_address: Optional[str] = None
    has_passkey: bool = False
    passthrough: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, prefs: Optional[Mapping[str, Any]]) -> "IdentityPreferences":
        """
        Build preferences from the raw store bag.

        Args:
            prefs: Raw preference mapping (may be None or empty)

        Returns:
            IdentityPreferences instance
        """
        prefs = dict(prefs or {})
        raw_wallet = prefs.pop(WALLET_PREF_KEY, None)

        wallet_address = None
        if isinstance(raw_wallet, str) and raw_wallet.strip():
            wallet_address = raw_wallet.strip().lower()

        return cls(
            wallet_address=wallet_address,
            has_passkey=bool(prefs.get(PASSKEY_PREF_KEY)),
            passthrough=prefs,
        )

    @property
    def has_wallet(self) -> bool:
        """Check if a wallet is bound."""
        return self.wallet_address is not None

    def with_wallet(self, wallet_address: str) -> "IdentityPreferences":
        """Return a copy with the wallet bound."""
        return replace(self, wallet_address=wallet_address)

    def without_wallet(self) -> "IdentityPreferences":
        """Return a copy with the wallet cleared."""
        return replace(self, wallet_address=None)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the raw bag written back to the store.

        The store replaces the whole bag on update, so an absent wallet
        key deletes the binding.
        """
        prefs = dict(self.passthrough)
        if self.wallet_address:
            prefs[WALLET_PREF_KEY] = self.wallet_address
        return prefs
