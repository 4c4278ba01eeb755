"""Pricing configuration passed explicitly to the functions that need it.

The best-practices lesson starts from a module-level ``CONFIG = {...}``
dictionary that tests have to mutate and restore. This module is the refactored
version: the configuration is an immutable value and every function takes it as
an argument, so each test builds exactly the configuration it needs.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidTaxRateError


@dataclass(frozen=True)
class PricingConfig:
    """Tax and currency settings.

    Attributes:
        tax_rate: Fraction added on top of the net amount, from 0 to 1.
        currency: Currency code shown by :func:`format_price`.
    """

    tax_rate: float = 0.2
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not 0 <= self.tax_rate <= 1:
            raise InvalidTaxRateError(self.tax_rate)


def price_with_tax(amount: float, config: PricingConfig) -> float:
    """Return ``amount`` plus tax, rounded to cents."""
    return round(amount * (1 + config.tax_rate), 2)


def format_price(amount: float, config: PricingConfig) -> str:
    """Render ``amount`` with two decimals and the configured currency."""
    return f"{amount:,.2f} {config.currency}"
