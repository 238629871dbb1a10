"""Domain entities."""

from serrurier.domain.entities.identity import Identity, IdentityState

__all__ = [
    "Identity",
    "IdentityState",
]
