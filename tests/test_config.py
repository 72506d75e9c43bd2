"""
Payroll Core - Configuration and Logging Tests
"""

import logging

import pytest
from decimal import Decimal
from pydantic import ValidationError

from payroll_core.config import Settings, get_settings
from payroll_core.utils import logging_config


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.warn_on_rate_fallback is True
        assert settings.default_tax_rate_percent == Decimal("0")
        assert settings.default_weekly_hours == Decimal("35")

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PAYROLL_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PAYROLL_DEFAULT_WEEKLY_HOURS", "24")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.default_weekly_hours == Decimal("24")

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    def test_invalid_tax_rate_rejected(self, monkeypatch):
        monkeypatch.setenv("PAYROLL_DEFAULT_TAX_RATE_PERCENT", "150")

        with pytest.raises(ValidationError):
            Settings()


class TestLoggingSetup:
    """Test root logging configuration."""

    def test_level_from_settings(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("PAYROLL_LOG_LEVEL", "warning")

        logging_config.setup_logging()

        assert calls == [{"level": logging.WARNING, "format": logging_config.LOG_FORMAT}]

    def test_explicit_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        logging_config.setup_logging("debug")

        assert calls[0]["level"] == logging.DEBUG
