"""
Domain services package.
"""

from serrurier.domain.services.i_identity_store import IIdentityStore
from serrurier.domain.services.i_signature_verifier import (
    ISignatureVerifier,
)

__all__ = [
    "IIdentityStore",
    "ISignatureVerifier",
]
