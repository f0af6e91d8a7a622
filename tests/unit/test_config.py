"""Tests for Settings loaded from the environment."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from invoice_payments.config import Settings, get_settings


class TestSettingsDefaults:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.commercial_tax_rate == Decimal("0.14")
        assert settings.tax_decimal_places == 2
        assert settings.serialize_per_invoice is True
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"


class TestSettingsFromEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INVOICE_PAYMENTS_COMMERCIAL_TAX_RATE", "0.2")
        monkeypatch.setenv("INVOICE_PAYMENTS_TAX_DECIMAL_PLACES", "3")
        monkeypatch.setenv("INVOICE_PAYMENTS_SERIALIZE_PER_INVOICE", "false")
        monkeypatch.setenv("INVOICE_PAYMENTS_LOG_FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.commercial_tax_rate == Decimal("0.2")
        assert settings.tax_decimal_places == 3
        assert settings.serialize_per_invoice is False
        assert settings.log_format == "json"

    def test_log_level_is_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INVOICE_PAYMENTS_LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level == "DEBUG"


class TestSettingsValidation:
    @pytest.mark.parametrize("rate", ["-0.01", "1.5"])
    def test_rejects_rate_out_of_range(self, monkeypatch: pytest.MonkeyPatch, rate: str) -> None:
        monkeypatch.setenv("INVOICE_PAYMENTS_COMMERCIAL_TAX_RATE", rate)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_rejects_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INVOICE_PAYMENTS_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_rejects_unknown_log_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INVOICE_PAYMENTS_LOG_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestGetSettings:
    def test_is_cached(self) -> None:
        get_settings.cache_clear()

        assert get_settings() is get_settings()
