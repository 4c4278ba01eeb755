"""Parse ``NAME=LEVEL`` logger-level options.

Values may be repeated on the command line or given as a single comma/space
separated string (as from the ``UNITTUTOR_LOGGER_LEVELS`` env var). Level names
are the standard ``logging`` ones, in any case.
"""

import logging
import re

import click

# asyncio logs at DEBUG on every event loop; markdown_it comes in through the doc checker
DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING, "markdown_it": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten an option value into individual ``NAME=LEVEL`` items.

    A repeatable Click option hands over a tuple of strings, an env var a
    single string; either may pack several items separated by commas or
    whitespace.

    Args:
        value: The raw option value from Click.

    Returns:
        list[str]: The non-empty items, in the order given.
    """
    raw = [value] if isinstance(value, str) else list(value)
    return [s for v in raw for s in re.split(r"[,\s]+", v) if s]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from :data:`DEFAULT_LIB_LEVELS`; later items override earlier ones,
    so ``-L asyncio=DEBUG`` re-enables a library quietened by default.

    Args:
        ctx: Click context (passed by Click, not used here).
        param: Click parameter (passed by Click, not used here).
        value: The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is
            not a logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
