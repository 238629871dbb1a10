"""
Value objects for Serrurier domain.
"""

from serrurier.domain.value_objects.binding_outcome import (
    AlreadyBound,
    BindingOutcome,
    Bound,
    Created,
    Rejected,
    RejectionReason,
    outcome_label,
)
from serrurier.domain.value_objects.identity_preferences import (
    PASSKEY_PREF_KEY,
    WALLET_PREF_KEY,
    IdentityPreferences,
)
from serrurier.domain.value_objects.issued_token import IssuedToken
from serrurier.domain.value_objects.signed_auth_claim import SignedAuthClaim

__all__ = [
    "BindingOutcome",
    "Created",
    "Bound",
    "AlreadyBound",
    "Rejected",
    "RejectionReason",
    "outcome_label",
    "IdentityPreferences",
    "WALLET_PREF_KEY",
    "PASSKEY_PREF_KEY",
    "SignedAuthClaim",
    "IssuedToken",
]
