"""
Unit tests for ConnectWallet use case.

Usage:
    python -m tests.unit.application.test_connect_wallet
    laborant serrurier --unit
"""

from serrurier.application.use_cases.connect_wallet import (
    ConnectWallet,
    ConnectWalletResult,
)
from serrurier.application.use_cases.wallet_connection_manager import (
    WalletConnectionManager,
)
from serrurier.domain.exceptions import (
    BindingRejectedError,
    InvalidSignatureError,
    ValidationError,
)
from serrurier.domain.value_objects.identity_preferences import (
    PASSKEY_PREF_KEY,
    WALLET_PREF_KEY,
)
from serrurier.infrastructure.auth.ethereum_signature_verifier import (
    EthereumSignatureVerifier,
)
from shared.tests import LaborantTest
from tests.helpers.in_memory_identity_store import InMemoryIdentityStore
from tests.helpers.sign_message import (
    BOB_PRIVATE_KEY,
    get_wallet_address,
    sign_nonce,
)

EMAIL = "alice@example.com"
NONCE = "auth-1700000000000"


class TestConnectWallet(LaborantTest):
    """Unit tests for ConnectWallet use case."""

    component_name = "serrurier"
    test_category = "unit"

    def setup_test(self):
        self.store = InMemoryIdentityStore()
        self.use_case = ConnectWallet(
            signature_verifier=EthereumSignatureVerifier(),
            connection_manager=WalletConnectionManager(self.store),
        )
        self.alice = get_wallet_address()
        self.bob = get_wallet_address(BOB_PRIVATE_KEY)
        self.signature = sign_nonce(NONCE)

    async def test_connect_new_wallet(self):
        """Test passkey user links a verified wallet."""
        self.reporter.info("Testing wallet connect", context="Test")

        identity = self.store.add_identity(EMAIL, {PASSKEY_PREF_KEY: [{"id": "c"}]})

        result = await self.use_case.execute(
            identity, self.alice, self.signature, NONCE
        )

        assert result == ConnectWalletResult(
            identity_id=identity.id, already_bound=False
        )
        assert self.store.raw_prefs(identity.id)[WALLET_PREF_KEY] == self.alice.lower()

        self.reporter.info("Wallet connected", context="Test")

    async def test_connect_same_wallet_again(self):
        """Test reconnecting the bound wallet reports already_bound."""
        self.reporter.info("Testing repeat connect", context="Test")

        identity = self.store.add_identity(EMAIL, {WALLET_PREF_KEY: self.alice})

        result = await self.use_case.execute(
            identity, self.alice, self.signature, NONCE
        )

        assert result.already_bound is True
        assert self.store.writes == []

        self.reporter.info("Repeat connect is a no-op", context="Test")

    async def test_connect_conflicting_wallet(self):
        """Test a different bound wallet blocks the connect."""
        self.reporter.info("Testing conflicting connect", context="Test")

        identity = self.store.add_identity(EMAIL, {WALLET_PREF_KEY: self.bob})

        try:
            await self.use_case.execute(identity, self.alice, self.signature, NONCE)
            assert False, "Should raise BindingRejectedError"
        except BindingRejectedError as e:
            assert e.code == "WALLET_CONFLICT"
            assert self.store.identities[identity.id].wallet_address == self.bob.lower()
            self.reporter.info("Conflict rejected", context="Test")

    async def test_invalid_signature(self):
        """Test a signature by another wallet is refused without writes."""
        self.reporter.info("Testing invalid signature", context="Test")

        identity = self.store.add_identity(EMAIL)
        bob_signature = sign_nonce(NONCE, BOB_PRIVATE_KEY)

        try:
            await self.use_case.execute(identity, self.alice, bob_signature, NONCE)
            assert False, "Should raise InvalidSignatureError"
        except InvalidSignatureError:
            assert self.store.writes == []
            self.reporter.info("Invalid signature rejected", context="Test")

    async def test_missing_fields(self):
        """Test blank address, signature or message is rejected."""
        self.reporter.info("Testing missing fields", context="Test")

        identity = self.store.add_identity(EMAIL)

        for args, field in (
            (("", self.signature, NONCE), "address"),
            ((self.alice, "", NONCE), "signature"),
            ((self.alice, self.signature, " "), "message"),
        ):
            try:
                await self.use_case.execute(identity, *args)
                assert False, f"Should raise ValidationError for {field}"
            except ValidationError as e:
                assert e.field == field

        self.reporter.info("Missing fields rejected", context="Test")


if __name__ == "__main__":
    TestConnectWallet.run_as_main()
