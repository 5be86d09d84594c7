"""Tests for the i18n module."""

from bank_simulator.i18n import _, setup_i18n


class TestI18n:
    """Tests for internationalization setup and translation."""

    def test_default_returns_english(self) -> None:
        """Without a catalog, _() returns the original English string."""
        setup_i18n("en")
        assert _("Login successful!") == "Login successful!"

    def test_unknown_language_falls_back_to_english(self) -> None:
        """An unknown language code falls back to English (no-op)."""
        setup_i18n("de")
        assert _("Exiting program.") == "Exiting program."
        # Restore
        setup_i18n("en")

    def test_format_placeholders_survive(self) -> None:
        """Placeholders in messages are kept for str.format."""
        setup_i18n("en")
        message = _("Deposited {amount}. New balance: {balance}")
        assert message.format(amount="5", balance="10") == (
            "Deposited 5. New balance: 10"
        )
