"""
Dependency Injection Container for Serrurier.

Manages all service instances and their dependencies.
"""

from typing import Optional

from serrurier.application.use_cases.account_binder import AccountBinder
from serrurier.application.use_cases.authenticate_wallet import (
    AuthenticateWallet,
)
from serrurier.application.use_cases.connect_wallet import ConnectWallet
from serrurier.application.use_cases.token_issuer import TokenIssuer
from serrurier.application.use_cases.wallet_connection_manager import (
    WalletConnectionManager,
)
from serrurier.config.settings import Settings
from serrurier.domain.services.i_identity_store import IIdentityStore
from serrurier.domain.services.i_signature_verifier import ISignatureVerifier
from serrurier.infrastructure.auth.ethereum_signature_verifier import (
    EthereumSignatureVerifier,
)
from serrurier.infrastructure.identity_store.appwrite_identity_store import (
    AppwriteIdentityStore,
)


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances of all services and use cases. Built
    once per application from an explicit Settings object.
    """

    def __init__(
        self,
        settings: Settings,
        identity_store: Optional[IIdentityStore] = None,
        signature_verifier: Optional[ISignatureVerifier] = None,
    ):
        """
        Initialize container.

        Args:
            settings: Application settings
            identity_store: Optional store override (tests)
            signature_verifier: Optional verifier override (tests)
        """
        self.settings = settings

        # Domain Services
        self._identity_store: Optional[IIdentityStore] = identity_store
        self._signature_verifier: Optional[ISignatureVerifier] = signature_verifier

        # Use Cases
        self._account_binder: Optional[AccountBinder] = None
        self._wallet_connection_manager: Optional[WalletConnectionManager] = None
        self._token_issuer: Optional[TokenIssuer] = None
        self._authenticate_wallet: Optional[AuthenticateWallet] = None
        self._connect_wallet: Optional[ConnectWallet] = None

    async def initialize(self) -> None:
        """Build eagerly so misconfiguration fails at startup."""
        _ = self.identity_store
        _ = self.signature_verifier

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._identity_store:
            await self._identity_store.close()

    # ================================================================
    # Domain Service Getters
    # ================================================================

    @property
    def identity_store(self) -> IIdentityStore:
        """Get identity store client instance."""
        if self._identity_store is None:
            self._identity_store = AppwriteIdentityStore(
                endpoint=self.settings.IDENTITY_STORE_ENDPOINT,
                project_id=self.settings.IDENTITY_STORE_PROJECT_ID,
                api_key=self.settings.IDENTITY_STORE_API_KEY,
                total_timeout=self.settings.IDENTITY_STORE_TIMEOUT,
            )
        return self._identity_store

    @property
    def signature_verifier(self) -> ISignatureVerifier:
        """Get signature verifier instance."""
        if self._signature_verifier is None:
            self._signature_verifier = EthereumSignatureVerifier(
                message_prefix=self.settings.SIGNABLE_MESSAGE_PREFIX,
            )
        return self._signature_verifier

    # ================================================================
    # Use Case Getters
    # ================================================================

    @property
    def account_binder(self) -> AccountBinder:
        """Get AccountBinder instance."""
        if self._account_binder is None:
            self._account_binder = AccountBinder(self.identity_store)
        return self._account_binder

    @property
    def wallet_connection_manager(self) -> WalletConnectionManager:
        """Get WalletConnectionManager instance."""
        if self._wallet_connection_manager is None:
            self._wallet_connection_manager = WalletConnectionManager(
                self.identity_store
            )
        return self._wallet_connection_manager

    @property
    def token_issuer(self) -> TokenIssuer:
        """Get TokenIssuer instance."""
        if self._token_issuer is None:
            self._token_issuer = TokenIssuer(self.identity_store)
        return self._token_issuer

    @property
    def authenticate_wallet(self) -> AuthenticateWallet:
        """Get AuthenticateWallet use case."""
        if self._authenticate_wallet is None:
            self._authenticate_wallet = AuthenticateWallet(
                signature_verifier=self.signature_verifier,
                account_binder=self.account_binder,
                token_issuer=self.token_issuer,
            )
        return self._authenticate_wallet

    @property
    def connect_wallet(self) -> ConnectWallet:
        """Get ConnectWallet use case."""
        if self._connect_wallet is None:
            self._connect_wallet = ConnectWallet(
                signature_verifier=self.signature_verifier,
                connection_manager=self.wallet_connection_manager,
            )
        return self._connect_wallet
