"""
BindingOutcome value objects - result of a wallet binding decision.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RejectionReason(str, Enum):
    """Why a binding request was refused."""

    PASSKEY_PROTECTED = "PASSKEY_PROTECTED"
    ACCOUNT_EXISTS = "ACCOUNT_EXISTS"
    WALLET_CONFLICT = "WALLET_CONFLICT"


@dataclass(frozen=True)
class Created:
    """A new identity was created with the wallet bound."""

    identity_id: str


@dataclass(frozen=True)
class Bound:
    """The wallet was bound to an existing identity."""

    identity_id: str


@dataclass(frozen=True)
class AlreadyBound:
    """The identity already carries this wallet; nothing was written."""

    identity_id: str


@dataclass(frozen=True)
class Rejected:
    """The request was refused; nothing was written."""

    reason: RejectionReason


BindingOutcome = Union[Created, Bound, AlreadyBound, Rejected]


def outcome_label(outcome: BindingOutcome) -> str:
    """Return a stable lowercase label for logs and metrics."""
    if isinstance(outcome, Rejected):
        return f"rejected_{outcome.reason.value.lower()}"
    return {
        Created: "created",
        Bound: "bound",
        AlreadyBound: "already_bound",
    }[type(outcome)]
