"""
IssuedToken value object - credential exchanged by the client for a session.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IssuedToken:
    """
    Opaque single-use token minted by the identity store.

    The secret is never inspected by this service.
    """

    identity_id: str
    secret: str

    def __repr__(self) -> str:
        """Keep the secret out of logs."""
        return f"IssuedToken(identity_id={self.identity_id!r}, secret='***')"
