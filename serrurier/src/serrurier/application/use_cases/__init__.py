"""Application use cases."""

from serrurier.application.use_cases.account_binder import AccountBinder
from serrurier.application.use_cases.authenticate_wallet import (
    AuthenticateWallet,
    AuthenticateWalletResult,
)
from serrurier.application.use_cases.connect_wallet import (
    ConnectWallet,
    ConnectWalletResult,
)
from serrurier.application.use_cases.token_issuer import TokenIssuer
from serrurier.application.use_cases.wallet_connection_manager import (
    WalletConnectionManager,
)

__all__ = [
    "AccountBinder",
    "AuthenticateWallet",
    "AuthenticateWalletResult",
    "ConnectWallet",
    "ConnectWalletResult",
    "TokenIssuer",
    "WalletConnectionManager",
]
