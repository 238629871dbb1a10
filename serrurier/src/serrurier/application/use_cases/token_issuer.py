"""
Token Issuer use case.
"""

from serrurier.domain.services.i_identity_store import IIdentityStore
from serrurier.domain.value_objects.issued_token import IssuedToken


class TokenIssuer:
    """Mint the single-use credential a client exchanges for a session."""

    def __init__(self, identity_store: IIdentityStore):
        self.identity_store = identity_store

    async def issue(self, identity_id: str) -> IssuedToken:
        """
        Issue a token for identity_id.

        Raises:
            IdentityStoreError: If the store call fails
        """
        return await self.identity_store.create_token(identity_id)
