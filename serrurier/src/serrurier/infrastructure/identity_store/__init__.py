"""
Identity store infrastructure package.
"""

from serrurier.infrastructure.identity_store.appwrite_identity_store import (
    AppwriteIdentityStore,
)

__all__ = [
    "AppwriteIdentityStore",
]
