"""UNITTUTOR CLI entry point.

The top-level ``unittutor`` group (built with Click-Extra) sets up logging
for every subcommand and then hands over to one of:

- ``unittutor docs``: check the lesson documents, print tables of contents.
- ``unittutor lessons``: list the lessons in reading order.

Examples
    $ unittutor --version
    $ unittutor docs check
    $ unittutor -v docs check docs/lessons --format json
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from unittutor import __version__, config
from unittutor.logging import config_console_handler, config_flight_recorder, log_startup

from .docs import docs as docs_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .lessons import lessons as lessons_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """UNITTUTOR command-line interface.

    UNITTUTOR is a set of lessons on unit testing in Python: the AAA pattern,
    test-driven development, mocking, async tests and running tests in CI. This
    command checks that the lesson documents stay correct (links resolve, Python
    snippets parse, every lesson is in the table of contents) and lists the lessons.
    """

# paths into the source checkout
COURSE_PATH = config.ROOT / config.INDEX_FILENAME
LESSONS_PATH = config.get_lessons_dir(config.ROOT / "docs")

EPILOG = "\b\n" + "\n".join(
    [
        click.style("See Also:", fg="blue", bold=True, underline=True),
        "  Course : " + hyperlink(COURSE_PATH, str(COURSE_PATH)),
        "  Lessons: " + hyperlink(LESSONS_PATH, str(LESSONS_PATH)),
    ]
)

DEFAULT_LOGGER_LEVELS = ("asyncio=WARNING", "markdown_it=WARNING")


def console_level(verbose_count: int, quiet_count: int) -> int:
    """Map repeated -v/-q flags to a console level, starting from WARNING."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Show less on the console: -q for ERROR only, -qq for CRITICAL only.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="UNITTUTOR_LOG_PATH",
    show_envvar=True,
    help="File the flight recorder writes to. Defaults to latest.log in the user log directory.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="UNITTUTOR_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_envvar=True,
    help=(
        "Buffer recent log records at DEBUG, whatever -v/-q say, and write them "
        "to --log-path as soon as a WARNING or worse is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=DEFAULT_LOGGER_LEVELS,
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum level for one logger, as NAME=LEVEL (e.g. -L unittutor.doccheck=DEBUG). "
        "Repeatable; applies to the console and the flight recorder."
    ),
)
@clickx.pass_context
def unittutor(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """UNITTUTOR command-line interface."""
    level = console_level(verbose_count, quiet_count)

    # ctx.color is None unless --color/--no-color was given
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=ctx.color is not False)
    ]
    if flight_recorder:
        log_path = log_path or config.get_default_log_path()
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush,
            )
        )

    # the root logger passes everything; each handler applies its own level
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


unittutor.add_command(docs_group)
unittutor.add_command(lessons_group)
