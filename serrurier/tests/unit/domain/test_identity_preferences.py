"""
Unit tests for IdentityPreferences value object.

Tests parsing of the raw preference bag and lossless write-back.

Usage:
    python -m tests.unit.domain.test_identity_preferences
    laborant serrurier --unit
"""

from serrurier.domain.value_objects.identity_preferences import (
    PASSKEY_PREF_KEY,
    WALLET_PREF_KEY,
    IdentityPreferences,
)
from shared.tests import LaborantTest

WALLET = "0x19e7e376e7c213b7e7e7e46cc70a5dd086daff2a"


class TestIdentityPreferences(LaborantTest):
    """Unit tests for IdentityPreferences value object."""

    component_name = "serrurier"
    test_category = "unit"

    # ================================================================
    # Parsing
    # ================================================================

    def test_from_empty_bag(self):
        """Test empty or missing bag yields no wallet and no passkey."""
        self.reporter.info("Testing empty preference bag", context="Test")

        for raw in (None, {}):
            prefs = IdentityPreferences.from_dict(raw)
            assert prefs.wallet_address is None
            assert prefs.has_wallet is False
            assert prefs.has_passkey is False
            assert prefs.to_dict() == {}

        self.reporter.info("Empty bag parsed", context="Test")

    def test_wallet_is_lowercased(self):
        """Test stored wallet is normalized to lowercase."""
        self.reporter.info("Testing wallet normalization", context="Test")

        mixed = "0x" + WALLET[2:].upper()
        prefs = IdentityPreferences.from_dict({WALLET_PREF_KEY: mixed})
        assert prefs.wallet_address == WALLET

        prefs = IdentityPreferences.from_dict({WALLET_PREF_KEY: f"  {WALLET}  "})
        assert prefs.wallet_address == WALLET

        self.reporter.info("Wallet normalized", context="Test")

    def test_blank_or_non_string_wallet_is_absent(self):
        """Test empty string, null and non-string wallets count as no wallet."""
        self.reporter.info("Testing blank wallet values", context="Test")

        for raw_wallet in ("", "   ", None, 42, ["0xabc"]):
            prefs = IdentityPreferences.from_dict({WALLET_PREF_KEY: raw_wallet})
            assert prefs.has_wallet is False, f"{raw_wallet!r} counted as wallet"

        self.reporter.info("Blank wallets ignored", context="Test")

    def test_passkey_presence(self):
        """Test any truthy passkey value marks a passkey."""
        self.reporter.info("Testing passkey detection", context="Test")

        assert IdentityPreferences.from_dict(
            {PASSKEY_PREF_KEY: [{"id": "cred-1"}]}
        ).has_passkey
        assert IdentityPreferences.from_dict({PASSKEY_PREF_KEY: "cred"}).has_passkey
        assert not IdentityPreferences.from_dict({PASSKEY_PREF_KEY: []}).has_passkey
        assert not IdentityPreferences.from_dict({PASSKEY_PREF_KEY: ""}).has_passkey

        self.reporter.info("Passkey detection correct", context="Test")

    # ================================================================
    # Write-back
    # ================================================================

    def test_with_wallet_preserves_other_keys(self):
        """Test binding keeps passkey and unknown keys untouched."""
        self.reporter.info("Testing lossless wallet bind", context="Test")

        raw = {
            PASSKEY_PREF_KEY: [{"id": "cred-1", "publicKey": "pk"}],
            "theme": "dark",
            "nested": {"a": 1},
        }
        prefs = IdentityPreferences.from_dict(raw).with_wallet(WALLET)

        written = prefs.to_dict()
        assert written[WALLET_PREF_KEY] == WALLET
        assert written[PASSKEY_PREF_KEY] == raw[PASSKEY_PREF_KEY]
        assert written["theme"] == "dark"
        assert written["nested"] == {"a": 1}

        self.reporter.info("Other keys preserved", context="Test")

    def test_without_wallet_removes_key(self):
        """Test unbinding drops the wallet key and keeps the rest."""
        self.reporter.info("Testing wallet removal", context="Test")

        prefs = IdentityPreferences.from_dict(
            {WALLET_PREF_KEY: WALLET, "theme": "dark"}
        )
        cleared = prefs.without_wallet()

        assert cleared.has_wallet is False
        assert cleared.to_dict() == {"theme": "dark"}
        # Original is immutable
        assert prefs.wallet_address == WALLET

        self.reporter.info("Wallet removed", context="Test")

    def test_from_dict_does_not_mutate_input(self):
        """Test parsing leaves the caller's mapping intact."""
        self.reporter.info("Testing input immutability", context="Test")

        raw = {WALLET_PREF_KEY: WALLET, "theme": "dark"}
        IdentityPreferences.from_dict(raw).without_wallet()

        assert raw == {WALLET_PREF_KEY: WALLET, "theme": "dark"}

        self.reporter.info("Input untouched", context="Test")


if __name__ == "__main__":
    TestIdentityPreferences.run_as_main()
