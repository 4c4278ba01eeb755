"""Unit tests for the CLI log level parser.

Covers default behavior, override semantics, input normalization
(commas/spaces), case-insensitivity and error handling for malformed input.
"""

import logging
import types

import click
import pytest

from unittutor.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

# Click passes a context the callback never uses
CTX = types.SimpleNamespace()


def test_empty_uses_defaults():
    """With no values the library defaults are returned (as a fresh dict)."""
    out = parse_log_level(CTX, None, ())
    assert out == {"asyncio": logging.WARNING, "markdown_it": logging.WARNING}
    out["asyncio"] = logging.DEBUG
    assert DEFAULT_LIB_LEVELS["asyncio"] == logging.WARNING


def test_repeated_flags_override_order():
    """Later repeated flags override earlier ones for the same logger."""
    out = parse_log_level(CTX, None, ("asyncio=INFO", "unittutor=DEBUG", "asyncio=ERROR"))
    assert out["asyncio"] == logging.ERROR
    assert out["unittutor"] == logging.DEBUG


def test_envvar_string_with_commas_and_spaces():
    """A plain string (as from an env var) may mix commas and spaces."""
    out = parse_log_level(CTX, None, "asyncio=INFO,  unittutor=WARNING markdown_it=ERROR")
    assert out == {
        "asyncio": logging.INFO,
        "unittutor": logging.WARNING,
        "markdown_it": logging.ERROR,
    }


def test_case_insensitive_levels():
    """Level names are parsed case-insensitively; WARN is accepted."""
    out = parse_log_level(CTX, None, ("asyncio=info", "unittutor=WaRn"))
    assert out["asyncio"] == logging.INFO
    assert out["unittutor"] == logging.WARNING


@pytest.mark.parametrize("value", ["not-a-pair", "asyncio=LOUD", "asyncio=5"])
def test_invalid_items_raise(value):
    """Malformed pairs and unknown levels raise click.BadParameter."""
    with pytest.raises(click.BadParameter):
        parse_log_level(CTX, None, (value,))
