"""
Wallet binding exceptions.

The binding components return typed outcomes; these exceptions are only
raised at the request boundary, where a rejected outcome becomes an HTTP
error.
"""

from serrurier.domain.exceptions.base import SerrurierException
from serrurier.domain.value_objects.binding_outcome import RejectionReason

# Passkey and hijack rejections share one public code and message so the
# response does not reveal how the existing account signs in.
_PUBLIC_CODES = {
    RejectionReason.PASSKEY_PROTECTED: "ACCOUNT_UNAVAILABLE",
    RejectionReason.ACCOUNT_EXISTS: "ACCOUNT_UNAVAILABLE",
    RejectionReason.WALLET_CONFLICT: "WALLET_CONFLICT",
}

_PUBLIC_MESSAGES = {
    "ACCOUNT_UNAVAILABLE": (
        "An account already exists for this email. Sign in with your "
        "existing method to link a wallet."
    ),
    "WALLET_CONFLICT": (
        "Account already has a different wallet connected. "
        "Disconnect the existing wallet first."
    ),
}


class BindingRejectedError(SerrurierException):
    """Raised when a wallet binding request is deterministically refused."""

    def __init__(self, reason: RejectionReason):
        code = _PUBLIC_CODES[reason]
        super().__init__(_PUBLIC_MESSAGES[code], code=code)
        self.reason = reason
