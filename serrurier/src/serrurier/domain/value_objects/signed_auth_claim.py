"""
SignedAuthClaim value object - a wallet's claim to have signed a message.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SignedAuthClaim:
    """
    Transient proof-of-control input, never persisted.

    claimed_address is unvalidated until a SignatureVerifier accepts the
    claim; signed_message is the exact string the wallet signed.
    """

    claimed_address: str
    signature: str
    signed_message: str

    def truncated_address(self) -> str:
        """Return truncated address for logs (e.g., '0xAbCd...1234')."""
        if len(self.claimed_address) <= 12:
            return self.claimed_address
        return f"{self.claimed_address[:6]}...{self.claimed_address[-4:]}"
