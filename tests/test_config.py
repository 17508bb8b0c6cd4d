"""Tests for environment configuration."""

from decimal import Decimal

import pytest

from tipcalc.config import AppConfig, get_config, validate_config


class TestDefaults:
    """Tests for default values."""

    def test_calculator_defaults(self):
        config = AppConfig()
        assert config.calculator.default_tip_percent == Decimal("20")
        assert config.calculator.default_locale == "en_US"
        assert "de_DE" in config.calculator.supported_locales
        assert config.calculator.currency is None

    def test_server_defaults(self):
        config = AppConfig()
        assert config.port == 5000
        assert config.cors_origins == ["*"]
        assert config.log_level == "INFO"

    def test_defaults_validate(self):
        assert validate_config(AppConfig()) == []

    def test_get_config_is_cached(self):
        assert get_config() is get_config()


class TestEnvironment:
    """Tests for values read from the environment."""

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_DEFAULT_TIP_PERCENT", "18")
        monkeypatch.setenv("TIPCALC_DEFAULT_LOCALE", "en_GB")
        monkeypatch.setenv("TIPCALC_SUPPORTED_LOCALES", "en_GB, es_ES")
        monkeypatch.setenv("TIPCALC_CURRENCY", "EUR")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example,http://b.example")
        config = AppConfig()
        assert config.calculator.default_tip_percent == Decimal("18")
        assert config.calculator.default_locale == "en_GB"
        assert config.calculator.supported_locales == ["en_GB", "es_ES"]
        assert config.calculator.currency == "EUR"
        assert config.cors_origins == ["http://a.example", "http://b.example"]
        assert validate_config(config) == []

    def test_empty_currency_means_none(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_CURRENCY", "")
        assert AppConfig().calculator.currency is None


class TestValidation:
    """Tests for validate_config."""

    def test_malformed_tip_percent(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_DEFAULT_TIP_PERCENT", "twenty")
        config = AppConfig()
        assert config.calculator.default_tip_percent == Decimal("20")
        errors = validate_config(config)
        assert any("TIPCALC_DEFAULT_TIP_PERCENT" in e for e in errors)

    def test_negative_tip_percent(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_DEFAULT_TIP_PERCENT", "-5")
        errors = validate_config(AppConfig())
        assert errors == ["TIPCALC_DEFAULT_TIP_PERCENT must not be negative"]

    def test_unknown_locale(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_DEFAULT_LOCALE", "xx_YY")
        errors = validate_config(AppConfig())
        assert errors == ["TIPCALC_DEFAULT_LOCALE contains unknown locale: xx_YY"]

    def test_unknown_supported_locale(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_SUPPORTED_LOCALES", "en_US,zz")
        errors = validate_config(AppConfig())
        assert errors == ["TIPCALC_SUPPORTED_LOCALES contains unknown locale: zz"]

    def test_unknown_currency(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_CURRENCY", "ZZZ")
        errors = validate_config(AppConfig())
        assert errors == ["TIPCALC_CURRENCY is not a known currency: ZZZ"]

    def test_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_LOG_LEVEL", "chatty")
        errors = validate_config(AppConfig())
        assert errors == ["TIPCALC_LOG_LEVEL is not a log level: CHATTY"]

    def test_debug_in_production(self, monkeypatch):
        monkeypatch.setenv("FLASK_ENV", "production")
        monkeypatch.setenv("FLASK_DEBUG", "true")
        config = AppConfig()
        assert config.is_production
        assert validate_config(config) == ["FLASK_DEBUG must be false in production"]

    def test_debug_outside_production(self, monkeypatch):
        monkeypatch.setenv("FLASK_DEBUG", "true")
        assert validate_config(AppConfig()) == []


class TestEffectiveLocale:
    """Tests for the locale used when rendering."""

    def test_valid_default(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_DEFAULT_LOCALE", "de-DE")
        assert AppConfig().calculator.effective_locale == "de_DE"

    def test_invalid_default_falls_back(self, monkeypatch):
        monkeypatch.setenv("TIPCALC_DEFAULT_LOCALE", "xx_YY")
        assert AppConfig().calculator.effective_locale == "en_US"
