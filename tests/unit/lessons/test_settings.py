"""Unit tests for the explicit pricing configuration."""

import dataclasses

import pytest

from unittutor.lessons.errors import InvalidTaxRateError
from unittutor.lessons.settings import PricingConfig, format_price, price_with_tax

# pylint: disable=magic-value-comparison


def test_defaults():
    """Default configuration is 20% tax in USD."""
    config = PricingConfig()
    assert config.tax_rate == 0.2
    assert config.currency == "USD"


@pytest.mark.parametrize(
    ("amount", "rate", "expected"),
    [(100, 0.1, 110.0), (100, 0, 100.0), (19.99, 0.2, 23.99), (10, 1, 20.0)],
)
def test_price_with_tax_uses_given_config(amount, rate, expected):
    """The rate comes from the config passed in, rounded to cents."""
    assert price_with_tax(amount, PricingConfig(tax_rate=rate)) == expected


@pytest.mark.parametrize("rate", [-0.01, 1.5])
def test_invalid_tax_rate_raises(rate):
    """Rates outside 0..1 are rejected at construction."""
    with pytest.raises(InvalidTaxRateError) as excinfo:
        PricingConfig(tax_rate=rate)
    assert excinfo.value.tax_rate == rate


def test_config_is_immutable():
    """A test cannot change the configuration another test sees."""
    config = PricingConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.tax_rate = 0.5  # type: ignore[misc]


def test_format_price():
    """Two decimals, thousands separator and currency code."""
    assert format_price(1234.5, PricingConfig(currency="EUR")) == "1,234.50 EUR"


def test_module_has_no_mutable_global_config():
    """Configuration is passed explicitly; there is no module-level dict."""
    from unittutor.lessons import settings  # pylint: disable=import-outside-toplevel

    module_dicts = [
        name
        for name, value in vars(settings).items()
        if isinstance(value, dict) and not name.startswith("__")
    ]
    assert not module_dicts
