"""
Signature verifier service interface.
"""

from abc import ABC, abstractmethod
from typing import Tuple


class ISignatureVerifier(ABC):
    """
    Abstract service interface for wallet signature verification.

    Implements proof of wallet control for Web3 authentication:
    - Client signs a server-templated message with the wallet key
    - Backend recovers the signer and compares it to the claimed address
    """

    @abstractmethod
    def verify(
        self,
        message: str,
        signature: str,
        claimed_address: str,
    ) -> bool:
        """
        Verify that claimed_address signed message.

        Args:
            message: Exact message that was signed
            signature: Hex-encoded signature
            claimed_address: Wallet address claiming ownership

        Returns:
            True if the recovered signer matches, False otherwise.
            Never raises on malformed input.
        """

    @abstractmethod
    def canonicalize(self, address: str) -> str:
        """
        Return the comparison-stable form of an address.

        Not a proof of validity: unparsable input is only trimmed
        and lowercased.
        """

    @abstractmethod
    def build_signable_message(self, nonce: str) -> str:
        """Wrap a caller-supplied nonce in the fixed message template."""

    @abstractmethod
    def generate_nonce(self) -> Tuple[int, str]:
        """
        Generate a nonce clients may embed in the signed message.

        Returns:
            Tuple of (timestamp in epoch milliseconds, nonce string).
            The nonce is not recorded or enforced.
        """
