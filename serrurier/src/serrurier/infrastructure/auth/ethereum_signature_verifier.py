"""
Ethereum wallet signature verifier.

Implements wallet signature verification using EIP-191 personal messages.
"""

import time
from typing import Tuple

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_utils import is_address, is_checksum_address, to_checksum_address

from serrurier.domain.services.i_signature_verifier import ISignatureVerifier
from serrurier.infrastructure.monitoring.logger import get_logger
from serrurier.infrastructure.monitoring.metrics import (
    signature_verifications_total,
)

logger = get_logger(__name__)

DEFAULT_MESSAGE_PREFIX = "Sign this message to authenticate: "
NONCE_PREFIX = "auth-"


def is_valid_address(address: str) -> bool:
    """
    Check address is 20 hex bytes with a valid EIP-55 checksum if mixed-case.

    All-lowercase and all-uppercase addresses carry no checksum and are
    accepted as is.
    """
    if not is_address(address):
        return False

    hex_part = address[2:] if address[:2] in ("0x", "0X") else address
    if hex_part == hex_part.lower() or hex_part == hex_part.upper():
        return True

    return is_checksum_address(address)


class EthereumSignatureVerifier(ISignatureVerifier):
    """
    Ethereum wallet authentication using secp256k1 personal_sign signatures.

    Verifies wallet ownership via signer recovery. Fail-closed: any
    malformed input yields False.
    """

    def __init__(self, message_prefix: str = DEFAULT_MESSAGE_PREFIX):
        """
        Initialize verifier.

        Args:
            message_prefix: Fixed text prepended to every nonce
        """
        self.message_prefix = message_prefix

    def verify(
        self,
        message: str,
        signature: str,
        claimed_address: str,
    ) -> bool:
        """
        Verify Ethereum wallet signature.

        Args:
            message: Exact message that was signed
            signature: Hex-encoded 65-byte signature
            claimed_address: Wallet address (0x + 40 hex chars)

        Returns:
            True if the recovered signer equals claimed_address
            (case-insensitive), False otherwise
        """
        if not message or not signature or not claimed_address:
            signature_verifications_total.labels(result="malformed").inc()
            return False

        if not is_valid_address(claimed_address):
            signature_verifications_total.labels(result="malformed").inc()
            return False

        try:
            recovered = Account.recover_message(
                encode_defunct(text=message),
                signature=signature,
            )
        except Exception as e:
            logger.debug(f"Signature recovery failed: {type(e).__name__}")
            signature_verifications_total.labels(result="malformed").inc()
            return False

        is_valid = recovered.lower() == claimed_address.lower()
        signature_verifications_total.labels(
            result="valid" if is_valid else "mismatch"
        ).inc()
        return is_valid

    def canonicalize(self, address: str) -> str:
        """
        Return lowercase form of address.

        Args:
            address: Raw address string

        Returns:
            Lowercase checksum-validated address, or trimmed lowercase
            raw input if it is not a valid address
        """
        if is_valid_address(address):
            return to_checksum_address(address).lower()
        return address.strip().lower()

    def build_signable_message(self, nonce: str) -> str:
        """Wrap nonce in the fixed authentication template."""
        return f"{self.message_prefix}{nonce}"

    def generate_nonce(self) -> Tuple[int, str]:
        """Generate an auth-{epoch millis} nonce."""
        timestamp_ms = int(time.time() * 1000)
        return timestamp_ms, f"{NONCE_PREFIX}{timestamp_ms}"
