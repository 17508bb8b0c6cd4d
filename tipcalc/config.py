"""
Tip Calculator Configuration Module
Environment-based configuration with safe defaults.
"""

import os
from dataclasses import dataclass, field
from decimal import Decimal
from functools import lru_cache
from typing import Optional

from tipcalc.utils.currency import (
    FALLBACK_LOCALE,
    is_known_currency,
    parse_locale,
    resolve_locale,
)
from tipcalc.utils.parsing import parse_optional_number

DEFAULT_TIP_PERCENT = Decimal('20')


def _split_env(name: str, default: str) -> list:
    return [item.strip() for item in os.environ.get(name, default).split(',') if item.strip()]


@dataclass(frozen=True)
class CalculatorConfig:
    """Defaults applied when rendering the tip screen."""

    # Kept as text so validate_config can report a malformed value
    default_tip_percent_raw: str = field(default_factory=lambda: os.environ.get(
        'TIPCALC_DEFAULT_TIP_PERCENT', str(DEFAULT_TIP_PERCENT)
    ))

    default_locale: str = field(default_factory=lambda: os.environ.get(
        'TIPCALC_DEFAULT_LOCALE', 'en_US'
    ))

    # Accept-Language is matched against these
    supported_locales: list = field(default_factory=lambda: _split_env(
        'TIPCALC_SUPPORTED_LOCALES', 'en_US,en_GB,es_ES,de_DE,fr_FR,ja_JP'
    ))

    # Empty means the locale territory's currency
    currency: Optional[str] = field(default_factory=lambda: os.environ.get(
        'TIPCALC_CURRENCY'
    ) or None)

    @property
    def default_tip_percent(self) -> Decimal:
        value = parse_optional_number(self.default_tip_percent_raw)
        return DEFAULT_TIP_PERCENT if value is None else value

    @property
    def effective_locale(self) -> str:
        """
        Default locale, or en_US when it is misconfigured.

        WHY fall back: a bad TIPCALC_DEFAULT_LOCALE is a server problem and
        must not turn every request into a client error.
        """
        return resolve_locale(self.default_locale, FALLBACK_LOCALE)


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""

    # Environment
    env: str = field(default_factory=lambda: os.environ.get('FLASK_ENV', 'production'))
    debug: bool = field(default_factory=lambda: os.environ.get('FLASK_DEBUG', 'false').lower() == 'true')

    secret_key: str = field(default_factory=lambda: os.environ.get(
        'FLASK_SECRET_KEY', ''
    ))

    log_level: str = field(default_factory=lambda: os.environ.get('TIPCALC_LOG_LEVEL', 'INFO').upper())

    # Server settings
    host: str = field(default_factory=lambda: os.environ.get('TIPCALC_HOST', '0.0.0.0'))
    port: int = field(default_factory=lambda: int(os.environ.get('TIPCALC_PORT', '5000')))

    # CORS settings for the JSON API
    cors_origins: list = field(default_factory=lambda: _split_env('CORS_ORIGINS', '*'))

    @property
    def is_production(self) -> bool:
        return self.env == 'production'

    # Nested configs
    calculator: CalculatorConfig = field(default_factory=CalculatorConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Get application configuration singleton.

    WHY cached: configuration is read once at startup; tests call
    get_config.cache_clear() to reload it from a patched environment.
    """
    return AppConfig()


def validate_config(config: AppConfig) -> list[str]:
    """
    Validate configuration completeness.
    Returns list of validation errors.

    WHY a list: report every problem at startup instead of the first.
    """
    errors = []
    calculator = config.calculator

    tip_percent = parse_optional_number(calculator.default_tip_percent_raw)
    if tip_percent is None:
        errors.append("TIPCALC_DEFAULT_TIP_PERCENT must be a decimal number")
    elif tip_percent < 0:
        errors.append("TIPCALC_DEFAULT_TIP_PERCENT must not be negative")

    for name, tags in (
        ('TIPCALC_DEFAULT_LOCALE', [calculator.default_locale]),
        ('TIPCALC_SUPPORTED_LOCALES', calculator.supported_locales),
    ):
        for tag in tags:
            try:
                parse_locale(tag)
            except ValueError:
                errors.append(f"{name} contains unknown locale: {tag}")

    if calculator.currency and not is_known_currency(calculator.currency):
        errors.append(f"TIPCALC_CURRENCY is not a known currency: {calculator.currency}")

    if config.log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        errors.append(f"TIPCALC_LOG_LEVEL is not a log level: {config.log_level}")

    if config.is_production and config.debug:
        errors.append("FLASK_DEBUG must be false in production")

    return errors
