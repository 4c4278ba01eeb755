"""UNITTUTOR docs CLI: check the lesson documents.

Behavior
- Findings (or JSON) go to **stdout**; the one-line summary goes to **stderr**
  so ``--format json`` output can be piped.
- Exit status is 1 when errors are found, or when warnings are found and
  ``--strict`` is given.

Requirements
- The docs root comes from ``--root``, then ``UNITTUTOR_DOCS_ROOT``, then the
  ``docs/`` directory of the source checkout.

Failure modes
- Missing docs root, paths or index → ``ClickException`` naming the path.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import click
import click_extra as clickx

from unittutor import config
from unittutor.doccheck import CHECKS, Report, parse_document, run_checks
from unittutor.doccheck.errors import DocCheckError
from unittutor.doccheck.markdown import render_toc

from .helpers import error, success, warn
from .helpers.docs_root import resolve_docs_root


def _display(path: Path) -> str:
    try:
        return path.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return path.as_posix()


def _print_text(report: Report) -> None:
    for finding in sorted(report.findings):
        click.echo(
            f"{_display(finding.path)}:{finding.line}: "
            f"{finding.severity.value} [{finding.check}] {finding.message}"
        )


@click.group(cls=clickx.ExtraGroup)
def docs() -> None:
    """Lesson document commands."""


@docs.command()
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help=(
        "Docs root; absolute links resolve against it. "
        f"Defaults to ${config.DOCS_ROOT_ENV}, then the bundled docs."
    ),
)
@click.option(
    "--check",
    "checks",
    type=click.Choice(CHECKS),
    multiple=True,
    help="Run only these checks (repeatable). Defaults to all.",
)
@click.option(
    "--index",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Table-of-contents document for the toc check. Defaults to README.md.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format for findings.",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    show_default=True,
    help="Treat warnings as failures.",
)
@click.pass_context
def check(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    paths: tuple[Path, ...],
    root: Path | None,
    checks: tuple[str, ...],
    index: Path | None,
    output_format: str,
    strict: bool,
) -> None:
    """Check lesson documents for broken links, invalid Python and TOC gaps.

    PATHS are Markdown files or directories; by default the whole docs root
    and its index are checked.
    """
    docs_root = resolve_docs_root(root)
    if index is None and (candidate := config.get_index_path(docs_root)).is_file():
        index = candidate
    targets = list(paths) or [docs_root, *([index] if index else [])]
    # links from the lessons back to an index beside the docs root are in bounds
    link_root = (
        Path(os.path.commonpath([docs_root.resolve(), index.resolve().parent]))
        if index
        else docs_root
    )

    try:
        report = run_checks(targets, link_root, checks=checks or CHECKS, index=index)
    except DocCheckError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        _print_text(report)

    n_files, n_err, n_warn = len(report.files), len(report.errors), len(report.warnings)
    if n_err:
        error(f"{n_err} error(s), {n_warn} warning(s) in {n_files} file(s).")
        ctx.exit(1)
    if n_warn:
        warn(f"{n_warn} warning(s) in {n_files} file(s).")
        if strict:
            ctx.exit(1)
        return
    success(f"{n_files} file(s) checked, no problems found.")


@docs.command()
@click.argument(
    "index",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--min-level", type=click.IntRange(1, 6), default=2, show_default=True)
@click.option("--max-level", type=click.IntRange(1, 6), default=3, show_default=True)
def toc(index: Path | None, min_level: int, max_level: int) -> None:
    """Print a Markdown table of contents for INDEX's headings.

    INDEX defaults to the repository README.
    """
    if min_level > max_level:
        raise click.BadParameter("--min-level must not exceed --max-level")
    if index is None:
        index = config.get_index_path(resolve_docs_root(None))
        if not index.is_file():
            raise click.ClickException(f"No index document found at {index}")
    try:
        doc = parse_document(index)
    except DocCheckError as e:
        raise click.ClickException(str(e)) from e
    click.echo(render_toc(doc, min_level, max_level), nl=False)
