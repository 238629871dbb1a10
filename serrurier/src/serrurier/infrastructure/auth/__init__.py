"""
Authentication infrastructure package.
"""

from serrurier.infrastructure.auth.ethereum_signature_verifier import (
    EthereumSignatureVerifier,
)

__all__ = [
    "EthereumSignatureVerifier",
]
