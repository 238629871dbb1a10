"""
Identity store interface.

Defines the operations the binding logic needs from the external
user directory.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from serrurier.domain.entities.identity import Identity
from serrurier.domain.value_objects.identity_preferences import (
    IdentityPreferences,
)
from serrurier.domain.value_objects.issued_token import IssuedToken


class IIdentityStore(ABC):
    """
    Abstract interface for the external identity store.

    Treated as a transactional black box: create is atomic per email,
    preference update is atomic per identity.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> List[Identity]:
        """
        Find identities registered with email.

        Args:
            email: Email to look up

        Returns:
            Matching identities (empty if none)

        Raises:
            IdentityStoreError: If the store call fails
        """

    @abstractmethod
    async def get_by_id(self, identity_id: str) -> Optional[Identity]:
        """
        Get identity by id.

        Args:
            identity_id: Store-assigned identity id

        Returns:
            Identity if found, None otherwise

        Raises:
            IdentityStoreError: If the store call fails
        """

    @abstractmethod
    async def create(self, email: str) -> Identity:
        """
        Create a new identity with email.

        Args:
            email: Email for the new identity

        Returns:
            Created identity with empty preferences

        Raises:
            IdentityAlreadyExistsError: If an identity with email exists
            IdentityStoreError: If the store call fails
        """

    @abstractmethod
    async def update_preferences(
        self,
        identity_id: str,
        preferences: IdentityPreferences,
    ) -> IdentityPreferences:
        """
        Replace the preference bag of an identity.

        Args:
            identity_id: Identity to update
            preferences: Full preferences to store (passthrough included)

        Returns:
            Preferences as stored

        Raises:
            IdentityNotFoundError: If the identity does not exist
            IdentityStoreError: If the store call fails
        """

    @abstractmethod
    async def create_token(self, identity_id: str) -> IssuedToken:
        """
        Create a short-lived transfer token for an identity.

        Args:
            identity_id: Identity to issue the token for

        Returns:
            Opaque token the client exchanges for a session

        Raises:
            IdentityStoreError: If the store call fails
        """

    @abstractmethod
    async def get_by_session(self, session_jwt: str) -> Optional[Identity]:
        """
        Resolve the identity owning a store session JWT.

        Args:
            session_jwt: JWT issued by the store to a logged-in client

        Returns:
            Identity if the JWT is valid, None otherwise

        Raises:
            IdentityStoreError: If the store call fails
        """

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
